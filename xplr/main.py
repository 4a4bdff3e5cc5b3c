"""Application Bootstrap (Entry Point)."""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

import typer
from pydantic import ValidationError

from .cli import app
from .settings import Settings, get_settings

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024  # 5MB
LOG_FILE_BACKUP_COUNT = 3

# Every module logs under this name (xplr.config.keys, xplr.cli, ...).
PACKAGE_LOGGER = "xplr"


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Attach the file and stderr handlers to the package logger.

    The file (XPLR_LOG_FILE) rotates and records everything at or above
    XPLR_LOG_LEVEL. Stderr only shows XPLR_CONSOLE_LOG_LEVEL and above so
    that command output such as ``dump`` stays clean. Calling this again
    replaces the handlers of the previous call.
    """
    settings = settings or get_settings()
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        settings.log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(name)s | %(message)s"))
    console_handler.setLevel(settings.console_log_level)

    logger.setLevel(settings.log_level)
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    logger.propagate = False
    return logger


def main() -> None:
    """Main entry point for the xplr-config CLI."""
    try:
        settings = get_settings()
    except ValidationError as e:
        typer.echo(f"Invalid XPLR_* environment settings:\n{e}", err=True)
        raise SystemExit(1) from e
    setup_logging(settings)
    app()


if __name__ == "__main__":
    main()
