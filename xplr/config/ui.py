"""Display settings: table layout, log lines, sort/filter indicators."""

from __future__ import annotations

from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from xplr.config.base import ConfigModel
from xplr.models import NodeFilter, NodeSorter, NodeSorterApplicable, Style

U16 = Annotated[int, Field(ge=0, le=0xFFFF)]
U32 = Annotated[int, Field(ge=0, le=0xFFFF_FFFF)]


class UiElement(ConfigModel):
    """A formatted piece of text (handlebars template) and its style."""

    format: Optional[str] = None
    style: Style = Field(default_factory=Style)


class UiConfig(ConfigModel):
    """Decoration applied around a node: prefix, suffix and style."""

    prefix: Optional[str] = None
    suffix: Optional[str] = None
    style: Style = Field(default_factory=Style)


class TableRowConfig(ConfigModel):
    cols: Optional[list[UiElement]] = None
    style: Style = Field(default_factory=Style)
    height: Optional[U16] = None


class _ConstraintVariant(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class Percentage(_ConstraintVariant):
    percentage: U16


class Ratio(_ConstraintVariant):
    ratio: tuple[U32, U32]


class Length(_ConstraintVariant):
    length: U16


class Max(_ConstraintVariant):
    max: U16


class Min(_ConstraintVariant):
    min: U16


# Written as a single-key mapping, e.g. ``{percentage: 10}`` or ``{ratio: [1, 3]}``.
Constraint = Union[Percentage, Ratio, Length, Max, Min]


class TableConfig(ConfigModel):
    """Layout of the file table."""

    header: TableRowConfig = Field(default_factory=TableRowConfig)
    row: TableRowConfig = Field(default_factory=TableRowConfig)
    style: Style = Field(default_factory=Style)
    # Branch glyphs: first, middle and last child.
    tree: Optional[tuple[UiElement, UiElement, UiElement]] = None
    col_spacing: Optional[U16] = None
    col_widths: Optional[list[Constraint]] = None


class LogsConfig(ConfigModel):
    info: UiElement = Field(default_factory=UiElement)
    success: UiElement = Field(default_factory=UiElement)
    error: UiElement = Field(default_factory=UiElement)


class SortDirectionIdentifiersUi(ConfigModel):
    forward: UiElement = Field(default_factory=UiElement)
    reverse: UiElement = Field(default_factory=UiElement)


class SortAndFilterUi(ConfigModel):
    """How the active sorters and filters are summarised on screen."""

    separator: UiElement = Field(default_factory=UiElement)
    sort_direction_identifiers: SortDirectionIdentifiersUi = Field(
        default_factory=SortDirectionIdentifiersUi
    )
    sorter_identifiers: dict[NodeSorter, UiElement] = Field(default_factory=dict)
    filter_identifiers: dict[NodeFilter, UiElement] = Field(default_factory=dict)


class GeneralConfig(ConfigModel):
    """Settings that apply across all modes."""

    show_hidden: Optional[bool] = None
    read_only: Optional[bool] = None
    cursor: UiElement = Field(default_factory=UiElement)
    prompt: UiElement = Field(default_factory=UiElement)
    logs: LogsConfig = Field(default_factory=LogsConfig)
    table: TableConfig = Field(default_factory=TableConfig)
    default_ui: UiConfig = Field(default_factory=UiConfig)
    focus_ui: UiConfig = Field(default_factory=UiConfig)
    selection_ui: UiConfig = Field(default_factory=UiConfig)
    sort_and_filter_ui: SortAndFilterUi = Field(default_factory=SortAndFilterUi)
    initial_sorting: Optional[list[NodeSorterApplicable]] = None

    @field_validator("initial_sorting")
    @classmethod
    def _unique_sorters(
        cls, value: Optional[list[NodeSorterApplicable]]
    ) -> Optional[list[NodeSorterApplicable]]:
        # Repeated sorters collapse onto their first position.
        if value is None:
            return None
        return list(dict.fromkeys(value))
