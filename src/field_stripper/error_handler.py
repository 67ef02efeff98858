"""Error handling implementation for the Field Stripper."""

import logging
import os
from pathlib import Path
from typing import Optional
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    ProcessingError,
    ErrorType
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for Field Stripper operations.

    Validates input text and file paths before a run and turns processing
    errors into a suggested action for the operator. A strip run is a single
    shot, so nothing here retries.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            return ValidationUtils.validate_json_string(input_data)
        except Exception as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """
        Handle processing errors and provide a suggested action.

        Args:
            error: ProcessingError to handle

        Returns:
            ErrorResponse with the suggested action
        """
        self.logger.error(f"Processing error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.SYNTAX:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Fix the JSON syntax of the input file and run again."
            )
        elif error.error_type == ErrorType.CIRCULAR:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Remove circular references from the input data. "
                                 "JSON documents cannot contain themselves."
            )
        elif error.error_type in (ErrorType.PATH, ErrorType.FILESYSTEM):
            return ErrorResponse(
                can_recover=True,
                suggested_action="Check that the input file exists and is readable, and that "
                                 "the output location is writable with enough free space."
            )
        elif error.error_type == ErrorType.CONFIG:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Correct the strip settings (paths, field names, indent) and retry."
            )
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Unknown error type. Please check logs and retry."
            )

    def validate_input_path(self, path: str) -> ValidationResult:
        """
        Validate that the input path points at a readable file.

        Args:
            path: Input file path

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not path:
            errors.append(ValidationError(
                type=ErrorType.PATH,
                message="Input path cannot be empty",
                location="input_path"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        try:
            input_path = Path(path)
            if not input_path.exists():
                errors.append(ValidationError(
                    type=ErrorType.PATH,
                    message=f"Input file not found: {path}",
                    location="input_path"
                ))
            elif not input_path.is_file():
                errors.append(ValidationError(
                    type=ErrorType.PATH,
                    message=f"Input path is not a file: {path}",
                    location="input_path"
                ))
            elif not os.access(input_path, os.R_OK):
                errors.append(ValidationError(
                    type=ErrorType.PATH,
                    message=f"Input file is not readable: {path}",
                    location="input_path"
                ))
            elif input_path.stat().st_size == 0:
                warnings.append(f"Input file is empty: {path}")

        except (OSError, ValueError) as e:
            errors.append(ValidationError(
                type=ErrorType.PATH,
                message=f"Invalid input path: {str(e)}",
                location="input_path"
            ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def validate_output_path(self, path: str, input_path: Optional[str] = None) -> ValidationResult:
        """
        Validate that the output path can be written.

        Args:
            path: Output file path
            input_path: Optional input path, used to warn about overwriting the source

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not path:
            errors.append(ValidationError(
                type=ErrorType.PATH,
                message="Output path cannot be empty",
                location="output_path"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        try:
            output_path = Path(path)

            if output_path.exists():
                if output_path.is_dir():
                    errors.append(ValidationError(
                        type=ErrorType.PATH,
                        message=f"Output path is a directory: {path}",
                        location="output_path"
                    ))
                elif not os.access(output_path, os.W_OK):
                    errors.append(ValidationError(
                        type=ErrorType.PATH,
                        message=f"Output file is not writable: {path}",
                        location="output_path"
                    ))
                else:
                    warnings.append(f"Output file exists and will be overwritten: {path}")
            else:
                # Nearest existing ancestor decides whether the directories can be created
                ancestor = output_path.absolute().parent
                while not ancestor.exists() and ancestor != ancestor.parent:
                    ancestor = ancestor.parent
                if not ancestor.is_dir() or not os.access(ancestor, os.W_OK):
                    errors.append(ValidationError(
                        type=ErrorType.PATH,
                        message=f"Cannot create output file - {ancestor} is not a writable directory",
                        location="output_path"
                    ))

            if input_path and Path(input_path).absolute() == output_path.absolute():
                warnings.append("Output path equals input path; the source file will be replaced")

        except (OSError, ValueError) as e:
            errors.append(ValidationError(
                type=ErrorType.PATH,
                message=f"Invalid output path: {str(e)}",
                location="output_path"
            ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )
