"""Errors raised while loading or checking a config."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ConfigLoadError(ValueError):
    """The config document could not be read or does not fit the schema."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path is not None else message)


class VersionParseError(ValueError):
    """The config's ``version`` is not of the form ``v<major>.<minor>.<bugfix>``."""
