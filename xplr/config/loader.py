"""Reading user config documents (YAML or TOML) from disk."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import ValidationError

from xplr.config.errors import ConfigLoadError
from xplr.config.root import Config

logger = logging.getLogger(__name__)

DocumentFormat = Literal["yaml", "toml"]

_SUFFIX_FORMATS: dict[str, DocumentFormat] = {
    ".yml": "yaml",
    ".yaml": "yaml",
    ".toml": "toml",
}


def format_for(path: Path) -> DocumentFormat:
    """Pick the document format from a file suffix (YAML when unknown)."""
    return _SUFFIX_FORMATS.get(path.suffix.lower(), "yaml")


def _parse_document(text: str, fmt: DocumentFormat) -> Any:
    if fmt == "toml":
        return tomllib.loads(text)
    return yaml.safe_load(text)


def parse_config(
    text: str, fmt: DocumentFormat = "yaml", path: Optional[Path] = None
) -> Config:
    """Validate a config document without extending it.

    Raises:
        ConfigLoadError: If the text is not valid YAML/TOML, its root is
            not a mapping, or it does not fit the config schema.
    """
    try:
        document = _parse_document(text, fmt)
    except (yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        raise ConfigLoadError(f"cannot parse {fmt} document: {e}", path) from e

    if not isinstance(document, dict):
        raise ConfigLoadError("config document must be a mapping", path)

    try:
        return Config.model_validate(document)
    except ValidationError as e:
        raise ConfigLoadError(f"invalid config: {e}", path) from e


def load_config(path: Path) -> Config:
    """Read and validate the config at ``path`` (not extended)."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"cannot read config: {e}", path) from e
    logger.debug("Loading config from %s", path)
    return parse_config(text, format_for(path), path=path)


def load_effective_config(path: Optional[Path] = None) -> Config:
    """The config the application runs with.

    Returns the built-in baseline when ``path`` is None or missing, else
    the user's config extended over the baseline.
    """
    if path is None or not path.exists():
        logger.debug("No user config found; using the built-in baseline")
        return Config.default()
    return load_config(path).extended()
