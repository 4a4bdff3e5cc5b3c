"""Defaults-overlay merging shared by every config record.

Each record merges field by field, depth first:

- optional fields (default ``None``): the overlay wins when set;
- nested records (and styles): merged recursively;
- mappings: key-wise union, the overlay's entry replacing the base's
  unless the entry type sets ``merge_in_tables``;
- everything else (lists, tuples, plain values): the overlay wins when set.

Records can pin individual fields with ``replaced_fields`` (always taken
from the overlay, even when empty) and ``kept_fields`` (always taken from
the base).
"""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict

M = TypeVar("M", bound="ConfigModel")


def _is_mergeable(value: Any) -> bool:
    return isinstance(value, BaseModel) and callable(getattr(type(value), "merge", None))


def merge_tables(base: dict, overlay: dict) -> dict:
    """Union two mappings; entries present in both come from the overlay."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if (
            current is not None
            and isinstance(value, ConfigModel)
            and type(value).merge_in_tables
            and type(current) is type(value)
        ):
            merged[key] = type(value).merge(current, value)
        else:
            merged[key] = value
    return merged


def merge_values(base: Any, overlay: Any, optional: bool = False) -> Any:
    """Merge one field's values according to its shape."""
    if overlay is None:
        return base
    if base is None or optional:
        return overlay
    if _is_mergeable(base) and type(base) is type(overlay):
        return type(base).merge(base, overlay)
    if isinstance(base, dict) and isinstance(overlay, dict):
        return merge_tables(base, overlay)
    return overlay


class ConfigModel(BaseModel):
    """Immutable, strictly-validated config record with a structural merge."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    replaced_fields: ClassVar[frozenset[str]] = frozenset()
    kept_fields: ClassVar[frozenset[str]] = frozenset()
    merge_in_tables: ClassVar[bool] = False

    @classmethod
    def merge(cls: type[M], base: M, overlay: M) -> M:
        """Return ``overlay`` layered on top of ``base``; neither is modified."""
        values: dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            ours = getattr(base, name)
            theirs = getattr(overlay, name)
            if name in cls.kept_fields:
                values[name] = ours
            elif name in cls.replaced_fields:
                values[name] = theirs
            else:
                # Optional fields are replaced as a whole, never merged into.
                optional = not field.is_required() and field.default is None
                values[name] = merge_values(ours, theirs, optional=optional)
        return cls.model_construct(**values)

    def extend(self: M, other: M) -> M:
        """Return this record with ``other`` layered on top."""
        return type(self).merge(self, other)
