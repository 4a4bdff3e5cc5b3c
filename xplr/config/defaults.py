"""Built-in baseline config.

The baseline ships as ``default_config.yml`` inside the package. Every
factory below validates a fresh value from the parsed document, so
callers always own what they get back.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from typing import Any

import yaml

from xplr.config.modes import ModesConfig
from xplr.config.node_types import NodeTypesConfig
from xplr.config.ui import GeneralConfig

DEFAULT_CONFIG_RESOURCE = "default_config.yml"


@lru_cache(maxsize=1)
def _document() -> dict[str, Any]:
    # Parsed once; validation below never mutates it.
    text = resources.files("xplr.config").joinpath(DEFAULT_CONFIG_RESOURCE).read_text(
        encoding="utf-8"
    )
    return yaml.safe_load(text)


def default_version() -> str:
    return _document()["version"]


def default_general() -> GeneralConfig:
    return GeneralConfig.model_validate(_document().get("general", {}))


def default_node_types() -> NodeTypesConfig:
    return NodeTypesConfig.model_validate(_document().get("node_types", {}))


def default_modes() -> ModesConfig:
    return ModesConfig.model_validate(_document().get("modes", {}))
