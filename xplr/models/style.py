"""Terminal styling values used by every display element of the config."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from rich.color import Color, ColorParseError
from rich.style import Style as RichStyle

# Terminal modifier bit flags, in bit order.
MODIFIER_BITS: dict[int, str] = {
    1: "bold",
    2: "dim",
    4: "italic",
    8: "underline",
    16: "blink",
    32: "blink2",
    64: "reverse",
    128: "conceal",
    256: "strike",
}

# Terminal palette names that rich spells differently.
_COLOR_ALIASES = {
    "reset": "default",
    "gray": "grey70",
    "darkgray": "grey37",
    "lightred": "bright_red",
    "lightgreen": "bright_green",
    "lightyellow": "bright_yellow",
    "lightblue": "bright_blue",
    "lightmagenta": "bright_magenta",
    "lightcyan": "bright_cyan",
}


def rich_color(name: str) -> str:
    """Translate a palette color name (e.g. ``LightBlue``) to rich's spelling."""
    key = name.strip().lower()
    return _COLOR_ALIASES.get(key, key)


class Modifier(BaseModel):
    """Bit set of text attributes (bold, italic, ...)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    bits: int = 0

    def names(self) -> list[str]:
        return [name for bit, name in MODIFIER_BITS.items() if self.bits & bit]


class Style(BaseModel):
    """Foreground/background colors plus added and removed modifiers.

    Every field is optional so that an overlay style only needs to name
    what it changes. Merging keeps the base value for every field the
    overlay leaves unset.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    fg: Optional[str] = None
    bg: Optional[str] = None
    add_modifier: Optional[Modifier] = None
    sub_modifier: Optional[Modifier] = None

    @field_validator("fg", "bg")
    @classmethod
    def _known_color(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        try:
            Color.parse(rich_color(value))
        except ColorParseError as e:
            raise ValueError(f"unknown color '{value}'") from e
        return value

    @classmethod
    def merge(cls, base: Style, overlay: Style) -> Style:
        return cls(
            fg=overlay.fg if overlay.fg is not None else base.fg,
            bg=overlay.bg if overlay.bg is not None else base.bg,
            add_modifier=(
                overlay.add_modifier
                if overlay.add_modifier is not None
                else base.add_modifier
            ),
            sub_modifier=(
                overlay.sub_modifier
                if overlay.sub_modifier is not None
                else base.sub_modifier
            ),
        )

    def extend(self, other: Style) -> Style:
        """Return this style with ``other`` layered on top."""
        return Style.merge(self, other)

    def to_rich(self) -> RichStyle:
        """Convert to a :class:`rich.style.Style` for rendering."""
        attributes: dict[str, bool] = {}
        if self.add_modifier is not None:
            for name in self.add_modifier.names():
                attributes[name] = True
        if self.sub_modifier is not None:
            for name in self.sub_modifier.names():
                attributes[name] = False
        return RichStyle(
            color=rich_color(self.fg) if self.fg else None,
            bgcolor=rich_color(self.bg) if self.bg else None,
            **attributes,
        )
