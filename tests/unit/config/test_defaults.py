"""Unit tests for the built-in baseline factory."""

from xplr.config import (
    Config,
    default_general,
    default_modes,
    default_node_types,
    default_version,
)
from xplr.models import KeyMap, NodeSorterApplicable


def test_baseline_version_is_current_release() -> None:
    """The packaged baseline is written at v0.5.5."""
    assert default_version() == "v0.5.5"
    assert Config.default().parsed_version() == (0, 5, 5)


def test_each_call_returns_an_independent_value() -> None:
    """Factories are repeatable and never hand out shared objects."""
    first = default_modes()
    second = default_modes()

    assert first == second
    assert first is not second
    assert first.builtin.default.key_bindings.on_key is not second.builtin.default.key_bindings.on_key


def test_baseline_general_settings() -> None:
    """Baseline general settings match the shipped document."""
    general = default_general()

    assert general.read_only is False
    assert general.show_hidden is False
    assert general.prompt.format == "> "
    assert general.initial_sorting == [
        NodeSorterApplicable(sorter="ByCanonicalIsDir", reverse=True),
        NodeSorterApplicable(sorter="ByIRelativePath", reverse=False),
    ]
    assert general.table.col_spacing == 3
    assert len(general.table.col_widths) == 4
    assert general.sort_and_filter_ui.sorter_identifiers["BySize"].format == "size"


def test_baseline_node_types() -> None:
    """Directories, files and symlinks carry their icons."""
    node_types = default_node_types()
    assert node_types.directory.style.fg == "Cyan"
    assert "icon" in node_types.file.meta
    assert node_types.mime_essence == {}


def test_baseline_has_every_builtin_mode_named() -> None:
    """Every builtin slot is populated with a named mode."""
    modes = default_modes()
    for name in modes.names():
        assert modes.get(name).name


def test_baseline_default_mode_help_menu() -> None:
    """The default mode documents sort and filter and hides remapped targets."""
    menu = default_modes().builtin.default.help_menu()

    assert KeyMap("s", "sort") in menu
    assert KeyMap("f", "filter") in menu
    labels = [line.key for line in menu if isinstance(line, KeyMap)]
    assert "down" not in labels
    assert "#" not in labels
