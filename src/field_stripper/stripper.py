"""Removal of forbidden fields at every depth of a JSON value tree."""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Set, Tuple
from .types import (
    FieldStripperInterface,
    JSONKind,
    JSONValue,
    StripStatistics,
    ProcessingError,
    ErrorType,
    DEFAULT_FORBIDDEN_FIELDS
)
from .data_type_detector import DataTypeDetector


class FieldStripper(FieldStripperInterface):
    """
    Removes a fixed set of keys from every object of a JSON value tree.

    The walk is depth-first and keeps its own stack, so nesting depth is
    limited by memory only. Each object is rebuilt without the forbidden
    keys and every retained value is stripped in turn, so a forbidden key is
    removed at whatever depth it appears. Arrays keep their length and order,
    scalars are returned as-is. The input tree is never modified.
    """

    def __init__(self, forbidden_fields: Optional[Iterable[str]] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the field stripper.

        Args:
            forbidden_fields: Keys to remove (defaults to parentIds, parentNames, fullName)
            logger: Optional logger instance
        """
        if forbidden_fields is None:
            self.forbidden_fields = DEFAULT_FORBIDDEN_FIELDS
        elif isinstance(forbidden_fields, str):
            self.forbidden_fields = frozenset({forbidden_fields})
        else:
            self.forbidden_fields = frozenset(forbidden_fields)
        self.logger = logger or logging.getLogger(__name__)
        self.detector = DataTypeDetector(self.logger)

    def strip(self, value: JSONValue) -> JSONValue:
        """
        Return a copy of value with the forbidden fields removed at every depth.

        Args:
            value: Parsed JSON value

        Returns:
            Stripped JSON value
        """
        stripped, _ = self.strip_with_statistics(value)
        return stripped

    def strip_with_statistics(self, value: JSONValue) -> Tuple[JSONValue, StripStatistics]:
        """
        Strip value and report what the traversal saw and removed.

        Args:
            value: Parsed JSON value

        Returns:
            Tuple of (stripped_value, statistics)

        Raises:
            ProcessingError: If value contains itself or a non-JSON object
        """
        stats = StripStatistics()
        stripped = self._strip(value, stats)

        self.logger.debug(
            f"Stripped {stats.fields_removed} fields from {stats.objects_visited} objects "
            f"(max depth {stats.max_depth})"
        )
        return stripped, stats

    def _strip(self, value: Any, stats: StripStatistics) -> Any:
        """Depth-first walk with an explicit stack of open containers."""
        active: Set[int] = set()
        root, frame = self._open(value, stats, 0, active)
        if frame is None:
            return root

        stack = [frame]
        while stack:
            frame = stack[-1]
            entry = next(frame.entries, None)
            if entry is None:
                active.discard(id(frame.source))
                stack.pop()
                continue

            key, child = entry
            if frame.kind == JSONKind.OBJECT and key in self.forbidden_fields:
                stats.record_removal(key)
                continue

            stripped, child_frame = self._open(child, stats, frame.depth + 1, active)
            frame.attach(key, stripped)
            if child_frame is not None:
                stack.append(child_frame)

        return root

    def _open(self, value: Any, stats: StripStatistics, depth: int,
              active: Set[int]) -> Tuple[Any, Optional['_Frame']]:
        """Count value and, for a container, start its (still empty) copy."""
        stats.max_depth = max(stats.max_depth, depth)
        kind = self.detector.detect_kind(value)

        if not kind.is_container:
            stats.scalars_visited += 1
            return value, None

        if id(value) in active:
            raise ProcessingError(
                "Circular reference detected in value tree",
                ErrorType.CIRCULAR,
                context={"depth": depth}
            )
        active.add(id(value))

        if kind == JSONKind.OBJECT:
            stats.objects_visited += 1
            frame = _Frame(kind, value, {}, iter(value.items()), depth)
        else:
            stats.arrays_visited += 1
            frame = _Frame(kind, value, [], iter(enumerate(value)), depth)
        return frame.result, frame


@dataclass
class _Frame:
    """A container whose children are still being stripped."""
    kind: JSONKind
    source: Any
    result: Any
    entries: Iterator[Tuple[Any, Any]]
    depth: int

    def attach(self, key: Any, value: Any) -> None:
        if self.kind == JSONKind.OBJECT:
            self.result[key] = value
        else:
            self.result.append(value)


def strip_fields(value: JSONValue, forbidden_fields: Optional[Iterable[str]] = None) -> JSONValue:
    """
    Remove forbidden fields from every object in value.

    Args:
        value: Parsed JSON value
        forbidden_fields: Keys to remove (defaults to parentIds, parentNames, fullName)

    Returns:
        Stripped JSON value
    """
    return FieldStripper(forbidden_fields).strip(value)
