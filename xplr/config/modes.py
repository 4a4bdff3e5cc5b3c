"""Input modes: named sets of key bindings, and their help menus."""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from xplr.config.base import ConfigModel
from xplr.config.keys import Action, KeyBindings
from xplr.models import HelpMenuLine, KeyMap, Paragraph

# Labels for the key-class bindings, in help menu order.
ALPHABET_LABEL = "[a-Z]"
NUMBER_LABEL = "[0-9]"
SPECIAL_CHARACTER_LABEL = "[spcl chars]"
DEFAULT_LABEL = "[default]"


def _paragraphs(text: str) -> list[HelpMenuLine]:
    return [Paragraph(line) for line in text.splitlines()]


class Mode(ConfigModel):
    """A named, switchable set of key bindings."""

    # Builtin modes keep their canonical name whatever the overlay says.
    kept_fields: ClassVar[frozenset[str]] = frozenset({"name"})

    name: str = ""
    help: Optional[str] = None
    extra_help: Optional[str] = None
    key_bindings: KeyBindings = Field(default_factory=KeyBindings)

    def sanitized(self, read_only: bool) -> Mode:
        return self.model_copy(
            update={"key_bindings": self.key_bindings.sanitized(read_only)}
        )

    def help_menu(self) -> list[HelpMenuLine]:
        """Lines to show in the help pane for this mode.

        An explicit ``help`` text replaces the generated menu entirely.
        Otherwise the menu is ``extra_help`` followed by every literal key
        binding (sorted by key) and then the alphabet, number, special
        character and default bindings. Bindings without help text are
        left out, as are keys that some remap points at.
        """
        if self.help is not None:
            return _paragraphs(self.help)

        bindings = self.key_bindings
        lines: list[HelpMenuLine] = []
        if self.extra_help is not None:
            lines.extend(_paragraphs(self.extra_help))

        remap_targets = set(bindings.remaps.values())
        for key, action in bindings.on_key.items():
            if key in remap_targets or action.help is None:
                continue
            lines.append(KeyMap(key, action.help))

        class_bindings: list[tuple[str, Optional[Action]]] = [
            (ALPHABET_LABEL, bindings.on_alphabet),
            (NUMBER_LABEL, bindings.on_number),
            (SPECIAL_CHARACTER_LABEL, bindings.on_special_character),
            (DEFAULT_LABEL, bindings.default),
        ]
        for label, action in class_bindings:
            if action is not None and action.help is not None:
                lines.append(KeyMap(label, action.help))
        return lines


# Every accepted spelling of a builtin mode name, mapped to its slot.
BUILTIN_MODE_NAMES: dict[str, str] = {
    "default": "default",
    "selection ops": "selection_ops",
    "selection_ops": "selection_ops",
    "create": "create",
    "create file": "create_file",
    "create_file": "create_file",
    "create directory": "create_directory",
    "create_directory": "create_directory",
    "number": "number",
    "go to": "go_to",
    "go_to": "go_to",
    "rename": "rename",
    "delete": "delete",
    "action": "action",
    "search": "search",
    "sort": "sort",
    "filter": "filter",
    "relative path does contain": "relative_path_does_contain",
    "relative_path_does_contain": "relative_path_does_contain",
    "relative path does not contain": "relative_path_does_not_contain",
    "relative_path_does_not_contain": "relative_path_does_not_contain",
}


class BuiltinModesConfig(ConfigModel):
    """The modes the explorer always has."""

    default: Mode = Field(default_factory=Mode)
    selection_ops: Mode = Field(default_factory=Mode)
    create: Mode = Field(default_factory=Mode)
    create_directory: Mode = Field(default_factory=Mode)
    create_file: Mode = Field(default_factory=Mode)
    number: Mode = Field(default_factory=Mode)
    go_to: Mode = Field(default_factory=Mode)
    rename: Mode = Field(default_factory=Mode)
    delete: Mode = Field(default_factory=Mode)
    action: Mode = Field(default_factory=Mode)
    search: Mode = Field(default_factory=Mode)
    filter: Mode = Field(default_factory=Mode)
    relative_path_does_contain: Mode = Field(default_factory=Mode)
    relative_path_does_not_contain: Mode = Field(default_factory=Mode)
    sort: Mode = Field(default_factory=Mode)

    def get(self, name: str) -> Optional[Mode]:
        slot = BUILTIN_MODE_NAMES.get(name)
        return getattr(self, slot) if slot is not None else None

    def sanitized(self, read_only: bool) -> BuiltinModesConfig:
        return self.model_copy(
            update={
                slot: getattr(self, slot).sanitized(read_only)
                for slot in type(self).model_fields
            }
        )


class ModesConfig(ConfigModel):
    builtin: BuiltinModesConfig = Field(default_factory=BuiltinModesConfig)
    custom: dict[str, Mode] = Field(default_factory=dict)

    def get(self, name: str) -> Optional[Mode]:
        """Look a mode up by name; builtin modes shadow custom ones."""
        mode = self.builtin.get(name)
        if mode is not None:
            return mode
        return self.custom.get(name)

    def names(self) -> list[str]:
        """Canonical builtin slot names followed by custom mode names."""
        return list(BuiltinModesConfig.model_fields) + list(self.custom)

    def sanitized(self, read_only: bool) -> ModesConfig:
        return self.model_copy(
            update={
                "builtin": self.builtin.sanitized(read_only),
                "custom": {
                    name: mode.sanitized(read_only) for name, mode in self.custom.items()
                },
            }
        )
