"""Data type detection for JSON value trees."""

import logging
from typing import Any, Dict, Optional
from .types import JSONKind, ProcessingError, ErrorType


class DataTypeDetector:
    """
    Classifies JSON values into their variants and analyzes value trees.

    Python represents JSON with builtin types, so the variant of a value is
    recovered here once and every traversal dispatches on the resulting
    JSONKind instead of repeating isinstance chains.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the data type detector.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def detect_kind(value: Any) -> JSONKind:
        """
        Detect the JSON variant of a single value.

        Args:
            value: Parsed JSON value

        Returns:
            JSONKind enum indicating the variant

        Raises:
            ProcessingError: If value is not representable as JSON
        """
        if value is None:
            return JSONKind.NULL
        # bool subclasses int, check it first
        if isinstance(value, bool):
            return JSONKind.BOOLEAN
        if isinstance(value, (int, float)):
            return JSONKind.NUMBER
        if isinstance(value, str):
            return JSONKind.STRING
        if isinstance(value, list):
            return JSONKind.ARRAY
        if isinstance(value, dict):
            return JSONKind.OBJECT
        raise ProcessingError(
            f"Unsupported value type: {type(value).__name__}",
            ErrorType.STRUCTURE,
            context={"type": type(value).__name__}
        )

    def get_structure_statistics(self, data: Any) -> Dict[str, Any]:
        """
        Get statistics about a value tree.

        Args:
            data: Parsed JSON value

        Returns:
            Dictionary with node counts per variant and the maximum depth
        """
        stats = {
            "root_kind": self.detect_kind(data).value,
            "max_depth": 0,
            "object_count": 0,
            "array_count": 0,
            "scalar_count": 0,
            "total_keys": 0,
            "total_items": 0,
        }
        self._count_elements(data, stats, 0)
        self.logger.debug(f"Structure statistics: {stats}")
        return stats

    def _count_elements(self, data: Any, stats: Dict[str, Any], depth: int) -> None:
        """Count the different kinds of elements, walking with an explicit stack."""
        pending = [(data, depth)]
        while pending:
            value, level = pending.pop()
            stats["max_depth"] = max(stats["max_depth"], level)
            kind = self.detect_kind(value)

            if kind == JSONKind.OBJECT:
                stats["object_count"] += 1
                stats["total_keys"] += len(value)
                pending.extend((child, level + 1) for child in value.values())
            elif kind == JSONKind.ARRAY:
                stats["array_count"] += 1
                stats["total_items"] += len(value)
                pending.extend((item, level + 1) for item in value)
            else:
                stats["scalar_count"] += 1
