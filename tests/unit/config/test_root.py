"""Unit tests for the root Config: extension, read-only view, versions."""

import pytest
import yaml

from xplr.config import Config, GeneralConfig, KeyBindings, Mode, ModesConfig, VersionParseError
from xplr.config.root import GENERIC_UPGRADE_NOTE


def _config(version: str) -> Config:
    return Config(version=version)


@pytest.mark.parametrize("version", ["v0.5.0", "v0.5.1", "v0.5.2", "v0.5.3", "v0.5.4"])
def test_compatible_versions(version: str) -> None:
    """Only v0.5.0 through v0.5.4 are compatible."""
    assert _config(version).is_compatible() is True


@pytest.mark.parametrize("version", ["v0.5.5", "v0.6.0", "v1.0.0", "v0.4.9"])
def test_incompatible_versions(version: str) -> None:
    """Every other well-formed version is incompatible, the current one included."""
    assert _config(version).is_compatible() is False


@pytest.mark.parametrize("version", ["v0.5", "0.5.0", "v0.x.1", "v", "", "v0.5.", "v-1.5.0", "v70000.0.0"])
def test_malformed_versions_raise(version: str) -> None:
    """Missing or non-numeric components fail parsing in every query."""
    config = _config(version)
    with pytest.raises(VersionParseError):
        config.parsed_version()
    with pytest.raises(VersionParseError):
        config.is_compatible()
    with pytest.raises(VersionParseError):
        config.upgrade_notification()


def test_parsed_version_ignores_trailing_components() -> None:
    """Anything after the bugfix number is ignored."""
    assert _config("v0.5.4.1").parsed_version() == (0, 5, 4)


def test_upgrade_notification_absent_only_for_current_version() -> None:
    """v0.5.5 gets no notice even though it is not compatible."""
    assert _config("v0.5.5").upgrade_notification() is None


def test_upgrade_notifications_for_known_releases_are_distinct() -> None:
    """Each of v0.5.1 to v0.5.4 has its own message."""
    notes = [_config(f"v0.5.{n}").upgrade_notification() for n in range(1, 5)]
    assert all(notes)
    assert len(set(notes)) == 4
    assert GENERIC_UPGRADE_NOTE not in notes


@pytest.mark.parametrize("version", ["v0.6.0", "v0.5.0", "v9.9.9"])
def test_other_versions_get_generic_notification(version: str) -> None:
    """Unknown versions, newer ones included, get the generic notice."""
    assert _config(version).upgrade_notification() == GENERIC_UPGRADE_NOTE


def test_extended_bare_config_equals_baseline_except_version(baseline: Config) -> None:
    """Missing sections come from the baseline; the version is the overlay's."""
    extended = _config("v0.5.2").extended()

    assert extended.version == "v0.5.2"
    assert extended.general == baseline.general
    assert extended.node_types == baseline.node_types
    assert extended.modes == baseline.modes


def test_extending_baseline_reproduces_it(baseline: Config) -> None:
    """Merging the baseline onto itself is the identity."""
    assert baseline.extended() == baseline
    assert Config.merge(baseline, Config.default()) == baseline


def test_extended_overlay_wins_where_set(baseline: Config) -> None:
    """Overlay settings replace baseline ones field by field."""
    overlay = Config.model_validate(
        {
            "version": "v0.5.4",
            "general": {"show_hidden": True, "prompt": {"format": "$ "}},
            "modes": {
                "builtin": {"default": {"extra_help": "hello"}},
                "custom": {"extra": {"name": "extra"}},
            },
        }
    )

    extended = overlay.extended()

    assert extended.general.show_hidden is True
    assert extended.general.prompt.format == "$ "
    assert extended.general.cursor == baseline.general.cursor
    assert extended.modes.builtin.default.extra_help == "hello"
    assert extended.modes.builtin.default.name == baseline.modes.builtin.default.name
    assert extended.modes.builtin.default.key_bindings == baseline.modes.builtin.default.key_bindings
    assert extended.modes.get("extra") is not None
    assert overlay.general.cursor.format is None


def test_sanitized_defaults_to_general_read_only(baseline: Config) -> None:
    """`read_only` falls back to the config's own setting."""
    read_only = baseline.model_copy(
        update={"general": baseline.general.model_copy(update={"read_only": True})}
    )

    sanitized = read_only.sanitized()

    for name in sanitized.modes.names():
        for action in sanitized.modes.get(name).key_bindings.on_key.values():
            assert action.is_read_only()
    assert baseline.sanitized() == baseline


def test_sanitized_view_never_replaces_canonical_config(baseline: Config) -> None:
    """The read-only view is a new value; the canonical config keeps its bindings."""
    sanitized = baseline.sanitized(read_only=True)

    assert "!" in baseline.modes.builtin.action.key_bindings.on_key
    assert "!" not in sanitized.modes.builtin.action.key_bindings.on_key
    remaps = sanitized.modes.builtin.default.key_bindings.remaps
    on_key = sanitized.modes.builtin.default.key_bindings.on_key
    assert all(target in on_key for target in remaps.values())


def test_dump_round_trips(baseline: Config) -> None:
    """The YAML rendering validates back into an equal config."""
    assert Config.model_validate(yaml.safe_load(baseline.dump())) == baseline


def test_overlay_only_config_sections_default_empty() -> None:
    """A parsed overlay holds only what it names."""
    config = Config(version="v0.5.4", general=GeneralConfig(read_only=True))
    assert config.modes == ModesConfig()
    assert config.modes.builtin.default == Mode()
    assert config.modes.builtin.default.key_bindings == KeyBindings()
