"""Value types the config layer consumes: styles, messages, help lines."""

from .help import HelpMenuLine, KeyMap, Paragraph
from .message import (
    Command,
    ExternalMsg,
    NodeFilter,
    NodeFilterApplicable,
    NodeSorter,
    NodeSorterApplicable,
)
from .style import Modifier, Style

__all__ = [
    "Command",
    "ExternalMsg",
    "HelpMenuLine",
    "KeyMap",
    "Modifier",
    "NodeFilter",
    "NodeFilterApplicable",
    "NodeSorter",
    "NodeSorterApplicable",
    "Paragraph",
    "Style",
]
