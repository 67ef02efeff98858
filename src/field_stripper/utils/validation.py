"""Validation utilities for JSON input and run settings."""

import json
import math
from typing import Any, Iterable, List, Tuple
from ..types import ValidationResult, ValidationError, ErrorType


DEEP_NESTING_WARNING_DEPTH = 20


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _decode_float(text: str) -> Any:
    value = float(text)
    # 1e400 overflows to inf, which JSON can only write back as null
    return value if math.isfinite(value) else None


class ValidationUtils:
    """Utility class for validating JSON text and strip settings."""

    @staticmethod
    def load_strict(json_string: str) -> Any:
        """
        Decode JSON text, refusing NaN, Infinity and -Infinity.

        Numbers outside the float range decode as None.

        Raises:
            json.JSONDecodeError: If the text is not valid JSON
            ValueError: If the text uses a non-standard constant
        """
        return json.loads(json_string, parse_float=_decode_float, parse_constant=_reject_constant)

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax and structure.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        # Check if string is empty
        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        # Try to parse JSON
        try:
            data = ValidationUtils.load_strict(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        except ValueError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=str(e),
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        except RecursionError:
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message="JSON document is nested too deeply to decode",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        warnings.extend(ValidationUtils._structure_warnings(data))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def _structure_warnings(data: Any) -> List[str]:
        """Collect non-fatal observations about a decoded document."""
        warnings = []

        # Any JSON value may be the root; a scalar simply passes through unchanged
        if not isinstance(data, (dict, list)):
            warnings.append(f"Root element is a {type(data).__name__}; nothing to strip")
            return warnings

        max_depth = ValidationUtils._calculate_max_depth(data)
        if max_depth > DEEP_NESTING_WARNING_DEPTH:
            warnings.append(f"Deep nesting detected (depth: {max_depth}). This may impact performance.")

        return warnings

    @staticmethod
    def _calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth."""
        max_depth = current_depth
        pending = [(data, current_depth)]
        while pending:
            value, depth = pending.pop()
            max_depth = max(max_depth, depth)
            if isinstance(value, dict):
                pending.extend((child, depth + 1) for child in value.values())
            elif isinstance(value, list):
                pending.extend((item, depth + 1) for item in value)
        return max_depth

    @staticmethod
    def validate_field_names(fields: Iterable[Any]) -> ValidationResult:
        """
        Validate a forbidden field set.

        Args:
            fields: Candidate field names

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []
        names: List[Tuple[int, Any]] = list(enumerate(fields))

        if not names:
            warnings.append("No forbidden fields given; output will equal input")

        for index, name in names:
            if not isinstance(name, str):
                errors.append(ValidationError(
                    type=ErrorType.CONFIG,
                    message=f"Field name must be a string, got {type(name).__name__}",
                    location=f"fields[{index}]"
                ))
            elif not name:
                errors.append(ValidationError(
                    type=ErrorType.CONFIG,
                    message="Field name cannot be empty",
                    location=f"fields[{index}]"
                ))
            elif name != name.strip():
                warnings.append(f"Field name {name!r} has surrounding whitespace; keys match exactly")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )
