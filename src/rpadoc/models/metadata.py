"""Models for the metadata extracted from a single XAML workflow."""

from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rpadoc.constants import DIRECTION_TOKENS
from rpadoc.errors import UnsetFieldError, UsageError
from rpadoc.utils.paths import normalize_path


class ArgumentDirection(str, Enum):
    """Argument direction types."""
    IN = "In"
    OUT = "Out"
    IN_OUT = "InOut"

    @property
    def xaml_token(self) -> str:
        """Direction as written in XAML, e.g. ``InOutArgument``."""
        return f"{self.value}Argument"

    @classmethod
    def legal_values(cls) -> str:
        short = "|".join(member.value for member in cls)
        tokens = "|".join(member.xaml_token for member in cls)
        return f"{short} ({tokens})"

    @classmethod
    def parse(cls, value: Any) -> "ArgumentDirection":
        """Normalize a direction given as enum, short name or XAML token.

        Raises:
            UsageError: If the value is not one of the three legal directions
        """
        if isinstance(value, cls):
            return value
        if not value or not isinstance(value, str):
            raise UsageError("direction parameter is required and must be a string")

        try:
            return cls(DIRECTION_TOKENS.get(value, value))
        except ValueError:
            raise UsageError(
                f"direction parameter must be one of {cls.legal_values()}, got '{value}'"
            ) from None


def strip_list_brackets(value: str) -> str:
    """Remove one pair of enclosing ``[...]`` brackets from a default value."""
    if len(value) >= 2 and value.startswith("[") and value.endswith("]"):
        return value[1:-1]
    return value


class WorkflowArgument(BaseModel):
    """Workflow argument declared in the x:Members section."""
    name: str
    direction: ArgumentDirection
    type: str
    annotation: str = ""
    default_value: str = Field(alias="defaultValue", default="")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("name", "type")
    @classmethod
    def validate_not_empty(cls, v, info):
        if not v:
            raise ValueError(f"{info.field_name} must be a non-empty string")
        return v

    @field_validator("direction", mode="before")
    @classmethod
    def normalize_direction(cls, v):
        return ArgumentDirection.parse(v)

    @field_validator("default_value")
    @classmethod
    def unwrap_default_value(cls, v):
        return strip_list_brackets(v)

    @classmethod
    def create(
        cls,
        name: str,
        direction: ArgumentDirection | str,
        type: str,
        annotation: str = "",
        default_value: str = "",
    ) -> "WorkflowArgument":
        """Build an argument, raising UsageError instead of a pydantic error.

        Args:
            name: Argument name
            direction: Direction as enum, short name or XAML token
            type: Data type name, e.g. ``String``
            annotation: Description of the argument, may be empty
            default_value: Default value, empty when none is declared

        Returns:
            WorkflowArgument: The validated argument

        Raises:
            UsageError: If any parameter is missing or invalid
        """
        if not name or not isinstance(name, str):
            raise UsageError("name parameter is required and must be a string")

        direction = ArgumentDirection.parse(direction)

        if not type or not isinstance(type, str):
            raise UsageError("type parameter is required and must be a string")
        if not isinstance(annotation, str):
            raise UsageError("annotation parameter must be a string")
        if not isinstance(default_value, str):
            raise UsageError("default_value parameter must be a string")

        return cls(
            name=name,
            direction=direction,
            type=type,
            annotation=annotation,
            default_value=default_value,
        )


class WorkflowMetadata:
    """Documentation extracted from one XAML workflow file.

    ``name`` and ``description`` must be set before they are read, and each
    can be set only once. Setting the same value again is a no-op.
    """

    def __init__(self, file_path: str | Path):
        if not isinstance(file_path, (str, Path)) or not str(file_path):
            raise UsageError("file_path parameter is required and must be a string or Path")

        self._file_path = str(file_path)
        self._name: str | None = None
        self._description: str | None = None
        self._arguments: dict[str, WorkflowArgument] = {}
        self._relative_path: str | None = None

    @property
    def file_path(self) -> str:
        return self._file_path

    @property
    def file_name(self) -> str:
        return Path(self._file_path).name

    @property
    def relative_path(self) -> str | None:
        """Path of the workflow relative to the project root, if known."""
        return self._relative_path

    @relative_path.setter
    def relative_path(self, value: str | Path | None) -> None:
        self._relative_path = normalize_path(str(value)) if value else None

    @property
    def name(self) -> str:
        if self._name is None:
            raise UnsetFieldError("name")
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if not value or not isinstance(value, str):
            raise UsageError("name parameter is required and must be a string")
        self._name = self._assign_once("name", self._name, value)

    @property
    def has_name(self) -> bool:
        return self._name is not None

    @property
    def description(self) -> str:
        if self._description is None:
            raise UnsetFieldError("description")
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        if not isinstance(value, str):
            raise UsageError("description parameter is required and must be a string")
        self._description = self._assign_once("description", self._description, value)

    @property
    def has_description(self) -> bool:
        return self._description is not None

    @staticmethod
    def _assign_once(field_name: str, current: str | None, value: str) -> str:
        if current is not None and current != value:
            raise UsageError(f"The {field_name} property has already been set to '{current}'")
        return value

    @property
    def arguments(self) -> Mapping[str, WorkflowArgument]:
        """Read-only view of the arguments, in declaration order."""
        return MappingProxyType(self._arguments)

    def add_argument(
        self,
        name: str,
        direction: ArgumentDirection | str,
        type: str,
        annotation: str = "",
        default_value: str = "",
    ) -> WorkflowArgument:
        """Validate and store an argument. A later argument with the same name replaces it."""
        argument = WorkflowArgument.create(name, direction, type, annotation, default_value)
        self._arguments[argument.name] = argument
        return argument

    def extend_arguments(self, arguments: Iterable[WorkflowArgument]) -> None:
        for argument in arguments:
            if not isinstance(argument, WorkflowArgument):
                raise UsageError("arguments must be WorkflowArgument instances")
            self._arguments[argument.name] = argument

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "filePath": self.file_path,
            "fileName": self.file_name,
            "relativePath": self.relative_path,
            "name": self.name,
            "description": self.description,
            "arguments": [
                argument.model_dump(by_alias=True, mode="json")
                for argument in self._arguments.values()
            ],
        }

    def __repr__(self) -> str:
        return (
            f"WorkflowMetadata(file_path={self._file_path!r}, name={self._name!r}, "
            f"arguments={len(self._arguments)})"
        )
