"""File reader for strip input."""

import logging
from pathlib import Path
from typing import Optional
from ..types import ProcessingError, ErrorType


class FileReader:
    """Loads the text of an input document."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the file reader.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """
        Read a whole file as text.

        Args:
            path: File path
            encoding: Text encoding

        Returns:
            File contents

        Raises:
            ProcessingError: If the file cannot be read or decoded
        """
        file_path = Path(path)
        try:
            text = file_path.read_text(encoding=encoding)
        except FileNotFoundError:
            raise ProcessingError(
                f"Input file not found: {path}",
                ErrorType.PATH,
                context={"path": str(path)}
            )
        except UnicodeDecodeError as e:
            raise ProcessingError(
                f"Failed to decode {path} as {encoding}: {e.reason}",
                ErrorType.SYNTAX,
                context={"path": str(path), "encoding": encoding}
            )
        except OSError as e:
            raise ProcessingError(
                f"Failed to read {path}: {str(e)}",
                ErrorType.FILESYSTEM,
                context={"path": str(path)}
            )

        # A UTF-8 byte order mark is not part of the JSON text
        if text.startswith("\ufeff"):
            text = text[1:]

        self.logger.debug(f"Read {len(text)} characters from {file_path}")
        return text
