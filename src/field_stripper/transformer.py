"""Main Field Stripper implementation."""

import logging
from typing import List, Optional
from .types import (
    TransformerInterface,
    StripResult,
    ProcessingError,
    ValidationResult
)
from .models import StripConfig
from .parser import JSONParser
from .stripper import FieldStripper
from .data_type_detector import DataTypeDetector
from .io import FileReader, FileWriter
from .error_handler import ErrorHandler
from .profiler import PerformanceProfiler


class FieldStrippingTransformer(TransformerInterface):
    """
    Main implementation of the transformer interface.

    Loads a JSON document, removes the forbidden fields from every object
    in it and stores the result as indented JSON. Failures of any
    collaborator are reported through the returned StripResult.
    """

    def __init__(self, config: Optional[StripConfig] = None,
                 logger: Optional[logging.Logger] = None,
                 enable_profiling: bool = True):
        """
        Initialize the transformer.

        Args:
            config: Strip settings (defaults to StripConfig())
            logger: Optional logger instance
            enable_profiling: Record duration and memory usage of file runs
        """
        self.config = config or StripConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.enable_profiling = enable_profiling

        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.error_handler, self.logger)
        self.detector = DataTypeDetector(self.logger)
        self.stripper = FieldStripper(self.config.forbidden_fields, self.logger)
        self.file_reader = FileReader(self.logger)
        self.file_writer = FileWriter(self.logger)
        self.profiler = PerformanceProfiler(self.logger) if enable_profiling else None

    def strip_text(self, json_string: str) -> StripResult:
        """
        Strip forbidden fields from a JSON document given as text.

        Args:
            json_string: Input JSON text

        Returns:
            StripResult with the stripped value and its serialized text
        """
        input_size = len(json_string.encode(self.config.encoding, errors="replace"))

        try:
            data = self.parser.parse(json_string)
        except ValueError as e:
            self.logger.error(str(e))
            return StripResult(success=False, input_size=input_size, errors=[str(e)])

        try:
            if self.logger.isEnabledFor(logging.DEBUG):
                self.logger.debug(f"Input structure: {self.detector.get_structure_statistics(data)}")

            stripped, statistics = self.stripper.strip_with_statistics(data)
            json_output = self.parser.serialize(
                stripped,
                indent=self.config.indent,
                ensure_ascii=self.config.ensure_ascii
            )
        except ProcessingError as e:
            response = self.error_handler.handle_processing_error(e)
            return StripResult(
                success=False,
                input_size=input_size,
                errors=[str(e), response.suggested_action]
            )
        except RecursionError:
            self.logger.error("Document is nested too deeply to strip")
            return StripResult(
                success=False,
                input_size=input_size,
                errors=["Document is nested too deeply to strip"]
            )
        except (TypeError, ValueError) as e:
            self.logger.error(f"Serialization failed: {e}")
            return StripResult(
                success=False,
                input_size=input_size,
                errors=[f"Serialization failed: {str(e)}"]
            )

        self.logger.info(
            f"Removed {statistics.fields_removed} fields from {statistics.objects_visited} objects"
        )
        self.logger.debug(f"Strip statistics: {statistics.to_dict()}")

        return StripResult(
            success=True,
            data=stripped,
            json_string=json_output,
            statistics=statistics,
            input_size=input_size,
            output_size=len(json_output.encode(self.config.encoding, errors="replace"))
        )

    def strip_file(self, input_path: Optional[str] = None,
                   output_path: Optional[str] = None,
                   dry_run: bool = False) -> StripResult:
        """
        Strip forbidden fields from a JSON file and write the result.

        Args:
            input_path: File to read (defaults to the configured input path)
            output_path: File to write (defaults to the configured output path)
            dry_run: Strip without writing the output file

        Returns:
            StripResult with operation details
        """
        input_path = input_path or self.config.input_path
        output_path = output_path or self.config.output_path

        try:
            self.logger.info(f"Starting strip operation: {input_path} -> {output_path}")

            warnings: List[str] = []
            path_checks = [self.error_handler.validate_input_path(input_path)]
            if not dry_run:
                path_checks.append(self.error_handler.validate_output_path(output_path, input_path))
            errors = self._collect_validation(path_checks, warnings)
            if errors:
                return StripResult(
                    success=False,
                    output_path=output_path,
                    errors=errors,
                    warnings=warnings or None
                )

            if self.profiler:
                with self.profiler.profile_operation("strip_file") as profiler:
                    result = self._run_file(input_path, output_path, dry_run, warnings)
                    profiler.set_input_size(result.input_size)
                    profiler.sample_performance()
                    if result.success:
                        profiler.stop_profiling(
                            output_size=result.output_size,
                            fields_removed=result.statistics.fields_removed
                        )
            else:
                result = self._run_file(input_path, output_path, dry_run, warnings)

            return result

        except Exception as e:
            self.logger.error(f"Unexpected error in strip_file: {e}")
            return StripResult(
                success=False,
                output_path=output_path,
                errors=[f"Unexpected error: {str(e)}"]
            )

    def _run_file(self, input_path: str, output_path: str, dry_run: bool,
                  warnings: List[str]) -> StripResult:
        """Read, strip and (unless dry_run) write one document."""
        try:
            json_string = self.file_reader.read_text(input_path, self.config.encoding)
        except ProcessingError as e:
            response = self.error_handler.handle_processing_error(e)
            return StripResult(
                success=False,
                output_path=output_path,
                errors=[str(e), response.suggested_action],
                warnings=warnings or None
            )

        result = self.strip_text(json_string)
        result.output_path = output_path
        if warnings:
            result.warnings = warnings + (result.warnings or [])

        if not result.success or dry_run:
            if dry_run and result.success:
                self.logger.info(f"Dry run: {output_path} not written")
            return result

        try:
            write_info = self.file_writer.write_text(output_path, result.json_string, self.config.encoding)
        except ProcessingError as e:
            response = self.error_handler.handle_processing_error(e)
            result.success = False
            result.errors = [str(e), response.suggested_action]
            return result

        result.output_path = write_info["path"]
        result.output_size = write_info["size"]
        return result

    def _collect_validation(self, results: List[ValidationResult], warnings: List[str]) -> List[str]:
        """Log validation warnings and return the error messages."""
        errors = []
        for validation in results:
            for warning in validation.warnings:
                self.logger.warning(warning)
                warnings.append(warning)
            errors.extend(error.message for error in validation.errors)
        for message in errors:
            self.logger.error(message)
        return errors
