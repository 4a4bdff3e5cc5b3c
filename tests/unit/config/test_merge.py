"""Unit tests for the defaults-overlay merge of display records."""

from xplr.config import (
    GeneralConfig,
    NodeTypeConfig,
    NodeTypesConfig,
    Percentage,
    SortAndFilterUi,
    TableConfig,
    TableRowConfig,
    UiConfig,
    UiElement,
)
from xplr.models import NodeSorterApplicable, Style


def test_optional_scalars_are_right_biased() -> None:
    """The overlay wins when set; otherwise the base is kept."""
    base = UiConfig(prefix="[", suffix="]")
    overlay = UiConfig(prefix="<")

    merged = UiConfig.merge(base, overlay)

    assert merged.prefix == "<"
    assert merged.suffix == "]"


def test_nested_records_merge_recursively() -> None:
    """Nested style fields merge rather than being replaced."""
    base = UiElement(format="INFO", style=Style(fg="LightBlue", bg="Black"))
    overlay = UiElement(style=Style(fg="Red"))

    merged = base.extend(overlay)

    assert merged.format == "INFO"
    assert merged.style == Style(fg="Red", bg="Black")


def test_lists_and_tuples_are_replaced_whole() -> None:
    """Column lists, widths and tree glyphs never merge element-wise."""
    base = TableConfig(
        header=TableRowConfig(cols=[UiElement(format="a"), UiElement(format="b")], height=1),
        tree=(UiElement(format="├"), UiElement(format="├"), UiElement(format="╰")),
        col_widths=[Percentage(percentage=50), Percentage(percentage=50)],
        col_spacing=3,
    )
    overlay = TableConfig(
        header=TableRowConfig(cols=[UiElement(format="z")]),
        col_widths=[Percentage(percentage=100)],
    )

    merged = TableConfig.merge(base, overlay)

    assert merged.header.cols == [UiElement(format="z")]
    assert merged.header.height == 1
    assert merged.col_widths == [Percentage(percentage=100)]
    assert merged.tree == base.tree
    assert merged.col_spacing == 3


def test_initial_sorting_is_replaced_whole_and_deduplicated() -> None:
    """Initial sorting is an ordered set taken entirely from the overlay."""
    by_size = NodeSorterApplicable(sorter="BySize")
    base = GeneralConfig(initial_sorting=[NodeSorterApplicable(sorter="ByIsDir")])
    overlay = GeneralConfig.model_validate(
        {
            "initial_sorting": [
                {"sorter": "BySize"},
                {"sorter": "ByExtension", "reverse": True},
                {"sorter": "BySize"},
            ]
        }
    )

    merged = GeneralConfig.merge(base, overlay)

    assert merged.initial_sorting == [
        by_size,
        NodeSorterApplicable(sorter="ByExtension", reverse=True),
    ]


def test_identifier_tables_union_with_overlay_entries_replacing() -> None:
    """Sorter identifiers are a key-wise union; shared keys take the overlay entry."""
    base = SortAndFilterUi(
        sorter_identifiers={
            "BySize": UiElement(format="size", style=Style(fg="Red")),
            "ByIsDir": UiElement(format="dir"),
        }
    )
    overlay = SortAndFilterUi(sorter_identifiers={"BySize": UiElement(format="sz")})

    merged = SortAndFilterUi.merge(base, overlay)

    assert merged.sorter_identifiers["BySize"] == UiElement(format="sz")
    assert merged.sorter_identifiers["ByIsDir"] == UiElement(format="dir")


def test_node_type_tables_merge_entries() -> None:
    """Node type entries present on both sides merge their own fields."""
    base = NodeTypesConfig(
        extension={"rs": NodeTypeConfig(style=Style(fg="Red"), meta={"icon": "R"})},
    )
    overlay = NodeTypesConfig(
        extension={
            "rs": NodeTypeConfig(meta={"label": "rust"}),
            "py": NodeTypeConfig(meta={"icon": "P"}),
        },
    )

    merged = NodeTypesConfig.merge(base, overlay)

    assert merged.extension["rs"].style == Style(fg="Red")
    assert merged.extension["rs"].meta == {"icon": "R", "label": "rust"}
    assert merged.extension["py"].meta == {"icon": "P"}


def test_merge_does_not_modify_inputs() -> None:
    """Both operands are left untouched."""
    base = NodeTypeConfig(meta={"icon": "d"})
    overlay = NodeTypeConfig(meta={"icon": "D"})

    NodeTypeConfig.merge(base, overlay)

    assert base.meta == {"icon": "d"}
    assert overlay.meta == {"icon": "D"}


def test_constraint_parses_single_key_documents() -> None:
    """Column widths are written as single-key mappings."""
    table = TableConfig.model_validate(
        {"col_widths": [{"percentage": 10}, {"ratio": [1, 3]}, {"length": 4}, {"max": 9}, {"min": 2}]}
    )
    kinds = [type(c).__name__ for c in table.col_widths]
    assert kinds == ["Percentage", "Ratio", "Length", "Max", "Min"]


def test_general_merge_of_baseline_with_itself_is_identity(baseline) -> None:
    """Merging a value with itself reproduces it."""
    general = baseline.general
    assert GeneralConfig.merge(general, general) == general
