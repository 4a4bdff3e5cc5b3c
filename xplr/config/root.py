"""Root config: version, general settings, node styling and modes."""

from __future__ import annotations

import logging
import re
from typing import Any, ClassVar, Optional

import yaml
from pydantic import Field

from xplr.config.base import ConfigModel
from xplr.config.defaults import (
    default_general,
    default_modes,
    default_node_types,
    default_version,
)
from xplr.config.errors import VersionParseError
from xplr.config.modes import ModesConfig
from xplr.config.node_types import NodeTypesConfig
from xplr.config.ui import GeneralConfig

logger = logging.getLogger(__name__)

Version = tuple[int, int, int]

_COMPONENT_RE = re.compile(r"[0-9]+")
_U16_MAX = 0xFFFF

# Config versions the running program can read as-is.
COMPATIBLE_VERSIONS: frozenset[Version] = frozenset(
    {(0, 5, 0), (0, 5, 1), (0, 5, 2), (0, 5, 3), (0, 5, 4)}
)

# Version written by this release; configs at it need no notice.
CURRENT_VERSION: Version = (0, 5, 5)

UPGRADE_NOTES: dict[Version, str] = {
    (0, 5, 4): "App version updated. Significant reduction in CPU usage",
    (0, 5, 3): "App version updated. Fixed exit on permission denied",
    (0, 5, 2): "App version updated. Now pwd is synced with your terminal session",
    (0, 5, 1): "App version updated. Now follow symlinks using 'gf'",
}

GENERIC_UPGRADE_NOTE = (
    "App version updated. New: added sort and filter support and some hacks: "
    "https://github.com/sayanarijit/xplr/wiki/Hacks"
)


def _parse_component(raw: str, label: str, version: str) -> int:
    if not _COMPONENT_RE.fullmatch(raw) or int(raw) > _U16_MAX:
        raise VersionParseError(f"invalid {label} version component {raw!r} in {version!r}")
    return int(raw)


class Config(ConfigModel):
    """A whole config document.

    A user document only needs ``version``; :meth:`extended` fills in
    everything else from the built-in baseline.
    """

    # Carried over from the overlay, never combined.
    replaced_fields: ClassVar[frozenset[str]] = frozenset({"version"})

    version: str
    general: GeneralConfig = Field(default_factory=GeneralConfig)
    node_types: NodeTypesConfig = Field(default_factory=NodeTypesConfig)
    modes: ModesConfig = Field(default_factory=ModesConfig)

    @classmethod
    def default(cls) -> Config:
        """A fresh copy of the built-in baseline."""
        return cls(
            version=default_version(),
            general=default_general(),
            node_types=default_node_types(),
            modes=default_modes(),
        )

    def extended(self) -> Config:
        """Layer this config on top of the built-in baseline."""
        logger.debug("Extending config %s over the built-in baseline", self.version)
        return Config.merge(Config.default(), self)

    def sanitized(self, read_only: Optional[bool] = None) -> Config:
        """Return a view with every mode sanitized.

        ``read_only`` defaults to ``general.read_only``.
        """
        if read_only is None:
            read_only = bool(self.general.read_only)
        if read_only:
            logger.info("Read-only mode: dropping bindings that run commands")
        return self.model_copy(update={"modes": self.modes.sanitized(read_only)})

    def parsed_version(self) -> Version:
        """Split ``v<major>.<minor>.<bugfix>`` into integers.

        Components after the bugfix number are ignored.

        Raises:
            VersionParseError: If the leading ``v`` or any component is
                missing or not a number.
        """
        body = self.version[1:] if self.version.startswith("v") else ""
        parts = body.split(".")
        parts += [""] * (3 - len(parts))
        return (
            _parse_component(parts[0], "major", self.version),
            _parse_component(parts[1], "minor", self.version),
            _parse_component(parts[2], "bugfix", self.version),
        )

    def is_compatible(self) -> bool:
        return self.parsed_version() in COMPATIBLE_VERSIONS

    def upgrade_notification(self) -> Optional[str]:
        """Message to show the user after an upgrade, if any.

        Note that the current version gets no notice even though it is
        not in ``COMPATIBLE_VERSIONS``.
        """
        version = self.parsed_version()
        if version == CURRENT_VERSION:
            return None
        return UPGRADE_NOTES.get(version, GENERIC_UPGRADE_NOTE)

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def dump(self) -> str:
        """Render as a YAML document."""
        return yaml.safe_dump(
            self.to_document(), sort_keys=False, allow_unicode=True
        )
