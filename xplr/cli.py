"""[Layer: Presentation] Typer CLI Commands."""

import logging
from importlib.metadata import PackageNotFoundError, version as get_package_version
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from xplr.config import (
    Config,
    ConfigLoadError,
    VersionParseError,
    load_config,
    load_effective_config,
)
from xplr.models import HelpMenuLine, KeyMap
from xplr.settings import get_settings

logger = logging.getLogger(__name__)


def _get_version() -> str:
    """Get version from package metadata (single source of truth: pyproject.toml)."""
    try:
        return get_package_version("xplr-config")
    except PackageNotFoundError:
        return "0.0.0-dev"


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"xplr-config {_get_version()}")
        raise typer.Exit()


app = typer.Typer(
    name="xplr-config",
    help="Inspect and validate xplr configuration files.",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Inspect and validate xplr configuration files."""


def _fail(message: str) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(1)


def _config_path(path: Optional[Path]) -> Path:
    return path if path is not None else get_settings().config_path


def _effective_config(path: Optional[Path], read_only: bool) -> Config:
    """Load the user config over the baseline, sanitized when read-only."""
    try:
        config = load_effective_config(_config_path(path))
    except ConfigLoadError as e:
        raise _fail(str(e)) from e

    read_only = read_only or get_settings().read_only or bool(config.general.read_only)
    return config.sanitized(read_only)


def render_help_menu(lines: list[HelpMenuLine], title: Optional[str] = None) -> Table:
    """Lay help menu lines out as a two-column table (key, description)."""
    table = Table(title=title, show_header=False, box=None, pad_edge=False)
    table.add_column("key", style="bold")
    table.add_column("help")
    # Text() keeps labels like "[a-Z]" from being read as markup.
    for line in lines:
        if isinstance(line, KeyMap):
            table.add_row(Text(line.key), Text(line.help))
        else:
            table.add_row(Text(line.text, style="italic"), "")
    return table


@app.command()
def check(
    path: Optional[Path] = typer.Argument(
        None, help="Config file (defaults to XPLR_CONFIG_PATH)"
    ),
) -> None:
    """Check whether a config file's version can be used as-is."""
    config_path = _config_path(path)
    if not config_path.exists():
        raise _fail(f"No config file at {config_path}")

    try:
        config = load_config(config_path)
        compatible = config.is_compatible()
        notice = config.upgrade_notification()
    except ConfigLoadError as e:
        raise _fail(str(e)) from e
    except VersionParseError as e:
        raise _fail(f"Invalid version: {e}") from e

    typer.echo(f"Version: {config.version}")
    if notice:
        typer.echo(notice)
    if not compatible:
        logger.warning("Config version %s is not compatible", config.version)
        raise _fail(f"Config version {config.version} is not compatible with this release")
    typer.echo("Compatible: yes")


@app.command(name="help-menu")
def help_menu(
    mode: str = typer.Argument(..., help="Mode name, e.g. 'default' or 'go to'"),
    path: Optional[Path] = typer.Argument(None, help="Config file"),
    read_only: bool = typer.Option(
        False, "--read-only", "-r", help="Show the read-only view"
    ),
) -> None:
    """Print the help menu of a mode."""
    config = _effective_config(path, read_only)
    found = config.modes.get(mode)
    if found is None:
        raise _fail(f"Unknown mode: {mode}")

    Console().print(render_help_menu(found.help_menu(), title=found.name or mode))


@app.command()
def modes(
    path: Optional[Path] = typer.Argument(None, help="Config file"),
) -> None:
    """List builtin and custom mode names."""
    config = _effective_config(path, read_only=False)
    for name in config.modes.names():
        typer.echo(name)


@app.command()
def dump(
    path: Optional[Path] = typer.Argument(None, help="Config file"),
    read_only: bool = typer.Option(
        False, "--read-only", "-r", help="Dump the read-only view"
    ),
) -> None:
    """Print the effective configuration as YAML."""
    config = _effective_config(path, read_only)
    typer.echo(config.dump(), nl=False)
