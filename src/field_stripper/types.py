"""Core type definitions for the Field Stripper."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Union


JSONScalar = Union[None, bool, int, float, str]
JSONValue = Union[JSONScalar, List[Any], Dict[str, Any]]

DEFAULT_FORBIDDEN_FIELDS: FrozenSet[str] = frozenset({"parentIds", "parentNames", "fullName"})


class JSONKind(Enum):
    """Enumeration of JSON value variants."""
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_container(self) -> bool:
        return self in (JSONKind.ARRAY, JSONKind.OBJECT)


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    PATH = "path"
    FILESYSTEM = "filesystem"
    CIRCULAR = "circular"
    CONFIG = "config"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str


@dataclass
class StripStatistics:
    """Counters collected while stripping a value tree."""
    objects_visited: int = 0
    arrays_visited: int = 0
    scalars_visited: int = 0
    fields_removed: int = 0
    removed_by_field: Dict[str, int] = field(default_factory=dict)
    max_depth: int = 0

    @property
    def nodes_visited(self) -> int:
        return self.objects_visited + self.arrays_visited + self.scalars_visited

    def record_removal(self, key: str) -> None:
        self.fields_removed += 1
        self.removed_by_field[key] = self.removed_by_field.get(key, 0) + 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to a dictionary for logging and reporting."""
        return {
            "objectsVisited": self.objects_visited,
            "arraysVisited": self.arrays_visited,
            "scalarsVisited": self.scalars_visited,
            "nodesVisited": self.nodes_visited,
            "fieldsRemoved": self.fields_removed,
            "removedByField": dict(self.removed_by_field),
            "maxDepth": self.max_depth,
        }


@dataclass
class StripResult:
    """Result of a strip operation."""
    success: bool
    data: Any = None
    json_string: str = ""
    output_path: Optional[str] = None
    statistics: Optional[StripStatistics] = None
    input_size: int = 0
    output_size: int = 0
    errors: Optional[List[str]] = None
    warnings: Optional[List[str]] = None


@dataclass
class BuildResult:
    """Result of building an area tree from division codes."""
    success: bool
    tree: Optional[List[Dict[str, Any]]] = None
    output_path: Optional[str] = None
    province_count: int = 0
    area_count: int = 0
    skipped_lines: int = 0
    output_size: int = 0
    errors: Optional[List[str]] = None


class ProcessingError(Exception):
    """Custom exception for processing errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


# Abstract base classes for interfaces

class FieldStripperInterface(ABC):
    """Abstract interface for the recursive field remover."""

    @abstractmethod
    def strip(self, value: JSONValue) -> JSONValue:
        """Return a copy of value without the forbidden fields at any depth."""
        pass


class TransformerInterface(ABC):
    """Abstract interface for the file-level transformer."""

    @abstractmethod
    def strip_text(self, json_string: str) -> StripResult:
        """Strip forbidden fields from a JSON document given as text."""
        pass

    @abstractmethod
    def strip_file(self, input_path: Optional[str] = None,
                   output_path: Optional[str] = None) -> StripResult:
        """Strip forbidden fields from a JSON file and write the result."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle processing errors."""
        pass
