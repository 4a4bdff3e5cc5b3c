"""Key bindings: what each key press does in a mode."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Optional

from pydantic import Field, ValidationInfo, field_validator

from xplr.config.base import ConfigModel
from xplr.models import ExternalMsg

logger = logging.getLogger(__name__)


class Action(ConfigModel):
    """Messages sent, in order, when a bound key is pressed."""

    # An overlay action's messages never combine with the base's.
    replaced_fields: ClassVar[frozenset[str]] = frozenset({"messages"})

    help: Optional[str] = None
    messages: list[ExternalMsg] = Field(default_factory=list)

    def is_read_only(self) -> bool:
        return all(message.is_read_only() for message in self.messages)

    def sanitized(self, read_only: bool) -> Optional[Action]:
        """Return the action if it may stay bound, else None.

        An action without messages does nothing and is never kept. In
        read-only mode the action is dropped as a whole if any of its
        messages could run an external command.
        """
        if not self.messages:
            return None
        if read_only and not self.is_read_only():
            return None
        return self


def _key_text(key: Any) -> Any:
    if isinstance(key, int) and not isinstance(key, bool):
        return str(key)
    return key


def _sanitized_optional(action: Optional[Action], read_only: bool) -> Optional[Action]:
    return action.sanitized(read_only) if action is not None else None


class KeyBindings(ConfigModel):
    """Literal key bindings, key-class fallbacks and key remaps.

    ``remaps`` makes one key behave like another (``j: down``); the target
    must be bound in ``on_key``. Both mappings are kept sorted by key.
    """

    remaps: dict[str, str] = Field(default_factory=dict)
    on_key: dict[str, Action] = Field(default_factory=dict)
    on_alphabet: Optional[Action] = None
    on_number: Optional[Action] = None
    on_special_character: Optional[Action] = None
    default: Optional[Action] = None

    @field_validator("remaps", "on_key", mode="before")
    @classmethod
    def _numeric_keys_as_text(cls, value: Any, info: ValidationInfo) -> Any:
        # YAML reads keys such as `1:` as integers.
        if not isinstance(value, dict):
            return value
        as_text = {_key_text(key): item for key, item in value.items()}
        if info.field_name == "remaps":
            return {key: _key_text(target) for key, target in as_text.items()}
        return as_text

    @field_validator("remaps", "on_key")
    @classmethod
    def _sorted_by_key(cls, value: dict) -> dict:
        return dict(sorted(value.items()))

    @classmethod
    def merge(cls, base: KeyBindings, overlay: KeyBindings) -> KeyBindings:
        merged = super().merge(base, overlay)
        return merged.model_copy(
            update={
                "remaps": dict(sorted(merged.remaps.items())),
                "on_key": dict(sorted(merged.on_key.items())),
            }
        )

    def sanitized(self, read_only: bool) -> KeyBindings:
        """Drop every binding that read-only mode does not allow.

        Remaps whose target binding was dropped go with it. Outside
        read-only mode the bindings are returned as they are.
        """
        if not read_only:
            return self

        on_key: dict[str, Action] = {}
        for key, action in self.on_key.items():
            kept = action.sanitized(read_only)
            if kept is not None:
                on_key[key] = kept
        remaps = {key: target for key, target in self.remaps.items() if target in on_key}

        dropped = len(self.on_key) - len(on_key)
        if dropped:
            logger.debug("Read-only mode dropped %d key binding(s)", dropped)

        return self.model_copy(
            update={
                "remaps": remaps,
                "on_key": on_key,
                "on_alphabet": _sanitized_optional(self.on_alphabet, read_only),
                "on_number": _sanitized_optional(self.on_number, read_only),
                "on_special_character": _sanitized_optional(
                    self.on_special_character, read_only
                ),
                "default": _sanitized_optional(self.default, read_only),
            }
        )
