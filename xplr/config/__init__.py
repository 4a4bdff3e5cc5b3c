"""Config composition: baseline + user overlay, read-only views, mode lookup."""

from .base import ConfigModel
from .defaults import default_general, default_modes, default_node_types, default_version
from .errors import ConfigLoadError, VersionParseError
from .keys import Action, KeyBindings
from .loader import load_config, load_effective_config, parse_config
from .modes import BuiltinModesConfig, Mode, ModesConfig
from .node_types import NodeTypeConfig, NodeTypesConfig
from .root import Config
from .ui import (
    Constraint,
    GeneralConfig,
    Length,
    LogsConfig,
    Max,
    Min,
    Percentage,
    Ratio,
    SortAndFilterUi,
    SortDirectionIdentifiersUi,
    TableConfig,
    TableRowConfig,
    UiConfig,
    UiElement,
)

__all__ = [
    "Action",
    "BuiltinModesConfig",
    "Config",
    "ConfigLoadError",
    "ConfigModel",
    "Constraint",
    "GeneralConfig",
    "KeyBindings",
    "Length",
    "LogsConfig",
    "Max",
    "Min",
    "Mode",
    "ModesConfig",
    "NodeTypeConfig",
    "NodeTypesConfig",
    "Percentage",
    "Ratio",
    "SortAndFilterUi",
    "SortDirectionIdentifiersUi",
    "TableConfig",
    "TableRowConfig",
    "UiConfig",
    "UiElement",
    "VersionParseError",
    "default_general",
    "default_modes",
    "default_node_types",
    "default_version",
    "load_config",
    "load_effective_config",
    "parse_config",
]
