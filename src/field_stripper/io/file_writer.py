"""File writer utilities for strip output."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional
from ..types import ProcessingError, ErrorType


class FileWriter:
    """
    File writer for the stripped document.

    Handles directory management and writes the serialized text in one
    piece, reporting where it went and how large it is.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the file writer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def write_text(self, path: str, text: str, encoding: str = "utf-8") -> Dict[str, Any]:
        """
        Write text to a file, creating parent directories as needed.

        Args:
            path: Output file path
            text: Text to write
            encoding: Text encoding

        Returns:
            Dictionary with file information

        Raises:
            ProcessingError: If writing fails
        """
        file_path = Path(path)
        try:
            self._ensure_directory_exists(file_path.parent)

            with open(file_path, 'w', encoding=encoding) as f:
                f.write(text)

            file_size = file_path.stat().st_size

        except ProcessingError:
            raise
        except (OSError, UnicodeEncodeError) as e:
            raise ProcessingError(
                f"Failed to write {path}: {str(e)}",
                ErrorType.FILESYSTEM,
                context={"path": str(path)}
            )

        self.logger.info(f"Wrote {file_size} bytes to {file_path}")

        return {
            "filename": file_path.name,
            "path": str(file_path.absolute()),
            "size": file_size
        }

    def _ensure_directory_exists(self, directory_path: Path) -> None:
        """
        Ensure that a directory exists, creating it if necessary.

        Args:
            directory_path: Path to directory

        Raises:
            ProcessingError: If directory creation fails
        """
        try:
            directory_path.mkdir(parents=True, exist_ok=True)

            # Check if directory is writable
            if not os.access(directory_path, os.W_OK):
                raise ProcessingError(
                    f"Directory {directory_path} is not writable",
                    ErrorType.FILESYSTEM
                )

        except OSError as e:
            raise ProcessingError(
                f"Failed to create directory {directory_path}: {str(e)}",
                ErrorType.FILESYSTEM
            )
