"""Global fixtures: baseline config, sample messages and actions, config files."""

from pathlib import Path

import pytest

from xplr.config import Action, Config
from xplr.models import ExternalMsg


@pytest.fixture
def baseline() -> Config:
    """Fresh built-in baseline config."""
    return Config.default()


@pytest.fixture
def explore() -> ExternalMsg:
    """A read-only-safe message."""
    return ExternalMsg.of("Explore")


@pytest.fixture
def bash_exec() -> ExternalMsg:
    """A message that runs a shell command."""
    return ExternalMsg.of("BashExec", "rm -rf ./tmp")


@pytest.fixture
def safe_action(explore: ExternalMsg) -> Action:
    """Action made only of read-only-safe messages."""
    return Action(help="explore", messages=[explore, ExternalMsg.of("SwitchMode", "default")])


@pytest.fixture
def mutating_action(explore: ExternalMsg, bash_exec: ExternalMsg) -> Action:
    """Action with one command-running message among safe ones."""
    return Action(help="delete", messages=[bash_exec, explore])


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a config document into the temp dir and return its path."""

    def _write(text: str, name: str = "config.yml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
