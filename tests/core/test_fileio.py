"""Tests for UTF-8 file helpers."""

import pytest

from utilsuite.core.errors import ErrorCategory, FileIOError
from utilsuite.core.fileio import read_text, write_text


class TestFileIO:
    def test_round_trip_unicode(self, tmp_path):
        path = tmp_path / "out.txt"
        write_text(path, "Hello — ünïcödé ✓")
        assert read_text(path) == "Hello — ünïcödé ✓"
        assert path.read_bytes().decode("utf-8") == "Hello — ünïcödé ✓"

    def test_truncates_existing(self, tmp_path):
        path = tmp_path / "out.txt"
        write_text(path, "a much longer first version")
        write_text(path, "short")
        assert read_text(path) == "short"

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "nested" / "deeper" / "out.txt"
        returned = write_text(str(path), "x")
        assert returned == path
        assert path.exists()

    def test_read_missing_raises(self, tmp_path):
        missing = tmp_path / "nope.txt"
        with pytest.raises(FileIOError) as exc_info:
            read_text(missing)
        err = exc_info.value
        assert err.category == ErrorCategory.STORAGE
        assert err.context.path == str(missing)
        assert err.context.operation == "read_text"
        assert isinstance(err.__cause__, FileNotFoundError)

    def test_write_to_directory_raises(self, tmp_path):
        with pytest.raises(FileIOError) as exc_info:
            write_text(tmp_path, "x")
        assert exc_info.value.context.operation == "write_text"

    @pytest.mark.parametrize("content", ["a\r\nb\rc", "line\r\n", "\r\r\n\n"])
    def test_line_endings_preserved(self, tmp_path, content):
        path = tmp_path / "crlf.txt"
        write_text(path, content)
        assert path.read_bytes() == content.encode("utf-8")
        assert read_text(path) == content

    def test_read_invalid_utf8_raises(self, tmp_path):
        path = tmp_path / "binary.bin"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(FileIOError) as exc_info:
            read_text(path)
        err = exc_info.value
        assert err.category == ErrorCategory.STORAGE
        assert err.context.operation == "read_text"
        assert err.context.path == str(path)
        assert isinstance(err.__cause__, UnicodeDecodeError)

    def test_write_unencodable_raises(self, tmp_path):
        path = tmp_path / "surrogate.txt"
        with pytest.raises(FileIOError) as exc_info:
            write_text(path, "lone \ud800 surrogate")
        assert exc_info.value.context.operation == "write_text"
        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)
