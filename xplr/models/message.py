"""Messages a key binding can send to the explorer, and their arguments.

A message is written in the config document either as a bare name::

    - Explore

or as a single-key mapping whose value is the argument::

    - SwitchMode: default
    - AddNodeSorter:
        sorter: ByIRelativePath
        reverse: true

The argument shape is fixed per message name (see ``MESSAGE_ARGUMENTS``).
This layer only cares whether a message can mutate the file system or
run arbitrary commands (``is_read_only``); what a message does is up to
the application.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    TypeAdapter,
    ValidationInfo,
    field_validator,
    model_serializer,
    model_validator,
)

NodeSorter = Literal[
    "ByRelativePath",
    "ByIRelativePath",
    "ByExtension",
    "ByIsDir",
    "ByIsFile",
    "ByIsSymlink",
    "ByIsBroken",
    "ByIsReadonly",
    "ByMimeEssence",
    "BySize",
    "ByCanonicalAbsolutePath",
    "ByICanonicalAbsolutePath",
    "ByCanonicalExtension",
    "ByCanonicalIsDir",
    "ByCanonicalIsFile",
    "ByCanonicalIsReadonly",
    "ByCanonicalMimeEssence",
    "ByCanonicalSize",
    "BySymlinkAbsolutePath",
    "ByISymlinkAbsolutePath",
    "BySymlinkExtension",
    "BySymlinkIsDir",
    "BySymlinkIsFile",
    "BySymlinkIsReadonly",
    "BySymlinkMimeEssence",
    "BySymlinkSize",
]

NodeFilter = Literal[
    "RelativePathIs",
    "IRelativePathIs",
    "RelativePathIsNot",
    "IRelativePathIsNot",
    "RelativePathDoesStartWith",
    "IRelativePathDoesStartWith",
    "RelativePathDoesNotStartWith",
    "IRelativePathDoesNotStartWith",
    "RelativePathDoesContain",
    "IRelativePathDoesContain",
    "RelativePathDoesNotContain",
    "IRelativePathDoesNotContain",
    "RelativePathDoesEndWith",
    "IRelativePathDoesEndWith",
    "RelativePathDoesNotEndWith",
    "IRelativePathDoesNotEndWith",
    "AbsolutePathIs",
    "IAbsolutePathIs",
    "AbsolutePathIsNot",
    "IAbsolutePathIsNot",
    "AbsolutePathDoesStartWith",
    "IAbsolutePathDoesStartWith",
    "AbsolutePathDoesNotStartWith",
    "IAbsolutePathDoesNotStartWith",
    "AbsolutePathDoesContain",
    "IAbsolutePathDoesContain",
    "AbsolutePathDoesNotContain",
    "IAbsolutePathDoesNotContain",
    "AbsolutePathDoesEndWith",
    "IAbsolutePathDoesEndWith",
    "AbsolutePathDoesNotEndWith",
    "IAbsolutePathDoesNotEndWith",
]


class NodeSorterApplicable(BaseModel):
    """A sorter together with its direction."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    sorter: NodeSorter
    reverse: bool = False


class NodeFilterApplicable(BaseModel):
    """A filter together with the text it is applied with."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    filter: NodeFilter
    input: str


class Command(BaseModel):
    """An external program invocation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    command: str
    args: list[str] = Field(default_factory=list)


# Argument type per message name; None means the message takes no argument.
MESSAGE_ARGUMENTS: dict[str, Any] = {
    "Explore": None,
    "Refresh": None,
    "ClearScreen": None,
    "FocusNext": None,
    "FocusNextByRelativeIndex": NonNegativeInt,
    "FocusNextByRelativeIndexFromInput": None,
    "FocusPrevious": None,
    "FocusPreviousByRelativeIndex": NonNegativeInt,
    "FocusPreviousByRelativeIndexFromInput": None,
    "FocusFirst": None,
    "FocusLast": None,
    "FocusPath": str,
    "FocusPathFromInput": None,
    "FocusByIndex": NonNegativeInt,
    "FocusByIndexFromInput": None,
    "FocusByFileName": str,
    "ChangeDirectory": str,
    "Enter": None,
    "Back": None,
    "LastVisitedPath": None,
    "NextVisitedPath": None,
    "FollowSymlink": None,
    "BufferInput": str,
    "BufferInputFromKey": None,
    "SetInputBuffer": str,
    "RemoveInputBufferLastCharacter": None,
    "RemoveInputBufferLastWord": None,
    "ResetInputBuffer": None,
    "SwitchMode": str,
    "Call": Command,
    "CallSilently": Command,
    "BashExec": str,
    "BashExecSilently": str,
    "Select": None,
    "SelectAll": None,
    "SelectPath": str,
    "UnSelect": None,
    "UnSelectAll": None,
    "UnSelectPath": str,
    "ToggleSelection": None,
    "ToggleSelectAll": None,
    "ToggleSelectionByPath": str,
    "ClearSelection": None,
    "AddNodeFilter": NodeFilterApplicable,
    "RemoveNodeFilter": NodeFilterApplicable,
    "ToggleNodeFilter": NodeFilterApplicable,
    "AddNodeFilterFromInput": NodeFilter,
    "RemoveNodeFilterFromInput": NodeFilter,
    "RemoveLastNodeFilter": None,
    "ResetNodeFilters": None,
    "ClearNodeFilters": None,
    "AddNodeSorter": NodeSorterApplicable,
    "RemoveNodeSorter": NodeSorter,
    "ReverseNodeSorter": NodeSorter,
    "ToggleNodeSorter": NodeSorterApplicable,
    "ReverseNodeSorters": None,
    "RemoveLastNodeSorter": None,
    "ResetNodeSorters": None,
    "ClearNodeSorters": None,
    "LogInfo": str,
    "LogSuccess": str,
    "LogError": str,
    "Quit": None,
    "PrintResultAndQuit": None,
    "PrintAppStateAndQuit": None,
    "Debug": str,
    "Terminate": None,
}

# Messages that spawn processes and can therefore change the file system.
MUTATING_MESSAGES = frozenset({"Call", "CallSilently", "BashExec", "BashExecSilently"})


@lru_cache(maxsize=None)
def _argument_adapter(argument_type: Any) -> TypeAdapter:
    return TypeAdapter(argument_type)


class ExternalMsg(BaseModel):
    """One message sent when a key binding fires."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    argument: Any = Field(default=None, validate_default=True)

    @model_validator(mode="before")
    @classmethod
    def _from_document(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data}
        if isinstance(data, dict):
            if len(data) != 1:
                raise ValueError(
                    f"a message must be a name or a single-key mapping, got keys {list(data)}"
                )
            ((name, argument),) = data.items()
            return {"name": name, "argument": argument}
        return data

    @field_validator("name")
    @classmethod
    def _known_name(cls, value: str) -> str:
        if value not in MESSAGE_ARGUMENTS:
            raise ValueError(f"unknown message '{value}'")
        return value

    @field_validator("argument")
    @classmethod
    def _argument_shape(cls, value: Any, info: ValidationInfo) -> Any:
        name = info.data.get("name")
        if name is None:
            # The name already failed validation.
            return value
        expected = MESSAGE_ARGUMENTS[name]
        if expected is None:
            if value is not None:
                raise ValueError(f"message '{name}' takes no argument")
            return None
        if value is None:
            raise ValueError(f"message '{name}' requires an argument")
        return _argument_adapter(expected).validate_python(value)

    @model_serializer
    def _to_document(self) -> Any:
        if MESSAGE_ARGUMENTS[self.name] is None:
            return self.name
        argument = self.argument
        if isinstance(argument, BaseModel):
            argument = argument.model_dump()
        return {self.name: argument}

    def is_read_only(self) -> bool:
        """True when the message cannot run external commands."""
        return self.name not in MUTATING_MESSAGES

    @classmethod
    def of(cls, name: str, argument: Optional[Any] = None) -> ExternalMsg:
        """Build a message from its name and optional argument."""
        return cls.model_validate({name: argument})
