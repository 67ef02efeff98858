"""JSON parser and serializer with validation."""

import json
import logging
from typing import Optional
from .types import JSONValue
from .error_handler import ErrorHandler
from .utils.validation import ValidationUtils


class JSONParser:
    """
    Strict JSON parser and serializer.

    Parsing validates the text first so failures carry a readable message
    with line and column. Any JSON value is accepted as the root.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> JSONValue:
        """
        Parse JSON string into a value tree.

        Args:
            json_string: JSON string to parse

        Returns:
            Parsed JSON value

        Raises:
            ValueError: If JSON is invalid
        """
        # Validate input
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid:
            error_messages = [
                f"{error.message} ({error.location})" if error.location else error.message
                for error in validation_result.errors
            ]
            raise ValueError(f"Invalid JSON input: {'; '.join(error_messages)}")

        for warning in validation_result.warnings:
            self.logger.warning(warning)

        # Parse JSON
        try:
            data = ValidationUtils.load_strict(json_string)
        except json.JSONDecodeError as e:
            raise ValueError(f"JSON parsing failed: {e.msg} at line {e.lineno}, column {e.colno}")

        self.logger.info(f"Parsed JSON document with root type: {type(data).__name__}")
        return data

    def serialize(self, data: JSONValue, indent: Optional[int] = 2,
                  ensure_ascii: bool = False) -> str:
        """
        Serialize a value tree to JSON text.

        Args:
            data: JSON value to serialize
            indent: Spaces per indentation level (None for a single line)
            ensure_ascii: Escape non-ASCII characters when True

        Returns:
            JSON text

        Raises:
            ValueError: If data holds NaN or infinite numbers
            TypeError: If data holds values that are not JSON types
        """
        return json.dumps(data, indent=indent, ensure_ascii=ensure_ascii, allow_nan=False)
