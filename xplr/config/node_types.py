"""Per node-type styling and metadata (icons etc.)."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from xplr.config.base import ConfigModel
from xplr.models import Style


class NodeTypeConfig(ConfigModel):
    # Entries keyed by mime type or extension merge instead of being replaced.
    merge_in_tables: ClassVar[bool] = True

    style: Style = Field(default_factory=Style)
    meta: dict[str, str] = Field(default_factory=dict)


class NodeTypesConfig(ConfigModel):
    """Styling for directories, files and symlinks, with finer-grained overrides."""

    directory: NodeTypeConfig = Field(default_factory=NodeTypeConfig)
    file: NodeTypeConfig = Field(default_factory=NodeTypeConfig)
    symlink: NodeTypeConfig = Field(default_factory=NodeTypeConfig)
    mime_essence: dict[str, NodeTypeConfig] = Field(default_factory=dict)
    extension: dict[str, NodeTypeConfig] = Field(default_factory=dict)
    special: dict[str, NodeTypeConfig] = Field(default_factory=dict)
