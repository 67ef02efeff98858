"""Strip configuration model with validation."""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Optional
from ..types import DEFAULT_FORBIDDEN_FIELDS


DEFAULT_INPUT_PATH = "2023/fullData.json"
DEFAULT_OUTPUT_PATH = "2023/data.json"
DEFAULT_INDENT = 2


@dataclass
class StripConfig:
    """
    Settings for a single strip run.

    Paths and the forbidden field set are carried explicitly so that a run
    is fully described by its config object.
    """

    input_path: str = DEFAULT_INPUT_PATH
    output_path: str = DEFAULT_OUTPUT_PATH
    forbidden_fields: FrozenSet[str] = field(default_factory=lambda: DEFAULT_FORBIDDEN_FIELDS)
    indent: int = DEFAULT_INDENT
    encoding: str = "utf-8"
    ensure_ascii: bool = False

    def __post_init__(self):
        """Normalize and validate config after initialization."""
        self.forbidden_fields = _field_set(self.forbidden_fields)
        self._validate()

    def _validate(self) -> None:
        """Validate config values."""
        if not self.input_path:
            raise ValueError("input_path cannot be empty")

        if not self.output_path:
            raise ValueError("output_path cannot be empty")

        for name in self.forbidden_fields:
            if not isinstance(name, str) or not name:
                raise ValueError(f"Forbidden field names must be non-empty strings, got {name!r}")

        if isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent < 0:
            raise ValueError("indent must be a non-negative integer")

        if not self.encoding:
            raise ValueError("encoding cannot be empty")

    def with_overrides(self, input_path: Optional[str] = None,
                       output_path: Optional[str] = None,
                       forbidden_fields: Optional[Iterable[str]] = None,
                       indent: Optional[int] = None) -> 'StripConfig':
        """Return a copy with the given values replaced."""
        return StripConfig(
            input_path=input_path if input_path is not None else self.input_path,
            output_path=output_path if output_path is not None else self.output_path,
            forbidden_fields=(_field_set(forbidden_fields) if forbidden_fields is not None
                              else self.forbidden_fields),
            indent=indent if indent is not None else self.indent,
            encoding=self.encoding,
            ensure_ascii=self.ensure_ascii
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for logging and JSON serialization."""
        return {
            "inputPath": self.input_path,
            "outputPath": self.output_path,
            "forbiddenFields": sorted(self.forbidden_fields),
            "indent": self.indent,
            "encoding": self.encoding,
            "ensureAscii": self.ensure_ascii
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StripConfig':
        """Create StripConfig from dictionary."""
        return cls(
            input_path=data.get("inputPath", DEFAULT_INPUT_PATH),
            output_path=data.get("outputPath", DEFAULT_OUTPUT_PATH),
            forbidden_fields=frozenset(data.get("forbiddenFields", DEFAULT_FORBIDDEN_FIELDS)),
            indent=data.get("indent", DEFAULT_INDENT),
            encoding=data.get("encoding", "utf-8"),
            ensure_ascii=data.get("ensureAscii", False)
        )


def _field_set(fields: Iterable[str]) -> FrozenSet[str]:
    """Turn a field name or an iterable of names into a frozenset."""
    if isinstance(fields, str):
        return frozenset({fields})
    return frozenset(fields)
