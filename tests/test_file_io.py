"""Tests for file reader and writer."""

import os
import pytest
from field_stripper.io import FileReader, FileWriter
from field_stripper.types import ProcessingError, ErrorType


class TestFileReader:
    """Tests for FileReader class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.reader = FileReader()

    def test_read_text(self, temp_dir):
        """Test reading a UTF-8 file."""
        path = temp_dir / "in.json"
        path.write_text('{"name": "东城区"}', encoding="utf-8")

        assert self.reader.read_text(str(path)) == '{"name": "东城区"}'

    def test_read_strips_byte_order_mark(self, temp_dir):
        """Test a leading BOM is dropped."""
        path = temp_dir / "bom.json"
        path.write_bytes(b'\xef\xbb\xbf[1]')

        assert self.reader.read_text(str(path)) == "[1]"

    def test_missing_file(self, temp_dir):
        """Test a missing file raises a path error."""
        with pytest.raises(ProcessingError, match="Input file not found") as exc_info:
            self.reader.read_text(str(temp_dir / "missing.json"))

        assert exc_info.value.error_type == ErrorType.PATH

    def test_undecodable_file(self, temp_dir):
        """Test bytes that are not valid in the encoding raise a syntax error."""
        path = temp_dir / "latin.json"
        path.write_bytes(b'["\xff"]')

        with pytest.raises(ProcessingError, match="Failed to decode") as exc_info:
            self.reader.read_text(str(path))

        assert exc_info.value.error_type == ErrorType.SYNTAX

    def test_directory_is_filesystem_error(self, temp_dir):
        """Test reading a directory raises a filesystem error."""
        with pytest.raises(ProcessingError) as exc_info:
            self.reader.read_text(str(temp_dir))

        assert exc_info.value.error_type == ErrorType.FILESYSTEM


class TestFileWriter:
    """Tests for FileWriter class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.writer = FileWriter()

    def test_write_text(self, temp_dir):
        """Test writing text reports path and size."""
        path = temp_dir / "data.json"

        info = self.writer.write_text(str(path), '{\n  "a": 1\n}')

        assert path.read_text(encoding="utf-8") == '{\n  "a": 1\n}'
        assert info["filename"] == "data.json"
        assert info["size"] == path.stat().st_size
        assert os.path.isabs(info["path"])

    def test_write_creates_parent_directories(self, temp_dir):
        """Test missing directories are created."""
        path = temp_dir / "2023" / "nested" / "data.json"

        self.writer.write_text(str(path), "[]")

        assert path.read_text(encoding="utf-8") == "[]"

    def test_write_overwrites(self, temp_dir):
        """Test an existing file is replaced."""
        path = temp_dir / "data.json"
        path.write_text("old content", encoding="utf-8")

        self.writer.write_text(str(path), "{}")

        assert path.read_text(encoding="utf-8") == "{}"

    def test_write_non_ascii_size_in_bytes(self, temp_dir):
        """Test the reported size counts encoded bytes."""
        info = self.writer.write_text(str(temp_dir / "d.json"), '"长安区"')

        assert info["size"] == len('"长安区"'.encode("utf-8"))

    def test_write_to_directory_fails(self, temp_dir):
        """Test writing onto a directory raises a filesystem error."""
        target = temp_dir / "dir"
        target.mkdir()

        with pytest.raises(ProcessingError, match="Failed to write") as exc_info:
            self.writer.write_text(str(target), "{}")

        assert exc_info.value.error_type == ErrorType.FILESYSTEM

    def test_write_below_a_file_fails(self, temp_dir):
        """Test a parent path that is a file cannot become a directory."""
        blocker = temp_dir / "blocker"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(ProcessingError, match="Failed to create directory"):
            self.writer.write_text(str(blocker / "data.json"), "{}")
