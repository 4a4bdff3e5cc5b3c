"""Lines of a mode's help menu, as consumed by the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Paragraph:
    """Free text shown as its own line."""

    text: str


@dataclass(frozen=True)
class KeyMap:
    """A key label and what pressing it does."""

    key: str
    help: str


HelpMenuLine = Union[Paragraph, KeyMap]
