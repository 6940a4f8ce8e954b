"""
Unit tests for reading delimited text files into grids.
"""
import io
import logging

import pytest

from backend.core.tabular import CsvGridReader
from backend.core.tabular.csv_reader import files


class FailingStream(io.StringIO):
    """Stream that fails after a given number of lines and records closing."""

    def __init__(self, lines, fail_after):
        super().__init__()
        self._lines = lines
        self._fail_after = fail_after
        self.was_closed = False

    def __iter__(self):
        for index, line in enumerate(self._lines):
            if index == self._fail_after:
                raise OSError("disk went away")
            yield line

    def close(self):
        self.was_closed = True
        super().close()


class TestCsvGridReader:
    """Tests for CsvGridReader"""

    def test_read(self, simple_csv):
        """A simple file is read line by line"""
        grid = CsvGridReader(simple_csv).read()
        assert grid is not None
        assert grid.size() == 5
        assert grid.value(0, 1) == "b"
        assert grid.value(1, 1) == "b1"
        assert grid.value(1, 2) == "c1, e1"
        assert grid.value(2, 2) is None
        assert grid.value(2, 3) == "d2"
        assert grid.value(3, 3) is None
        assert grid.value(4, 1) == "b4"

    def test_read_semicolon(self, semicolon_csv):
        """Delimiter and quote are configurable"""
        reader = CsvGridReader(delimiter=";", quote="'")
        assert reader.read() is None

        reader.file_path = semicolon_csv
        assert reader.file_path == semicolon_csv

        grid = reader.read()
        assert grid is not None
        assert grid.size() == 4
        assert grid.value(0, 1) == "b"
        assert grid.value(1, 1) == '"b1"'
        assert grid.value(1, 2) == "c1; e1"
        assert grid.value(2, 1) == "b2,,d2"
        assert grid.value(2, 2) is None
        # unquoted fields keep their quotes
        assert grid.value(3, 1) == "b4''"
        assert grid.value(3, 0) == "a3'"
        assert grid.value(3, 2) == "c4'e4"

    def test_read_default(self, simple_csv):
        """None restores the default delimiter and quote"""
        reader = CsvGridReader(simple_csv)
        reader.delimiter = None
        reader.quote = None
        grid = reader.read()
        assert grid is not None
        assert grid.size() == 5
        assert grid.value(1, 2) == "c1, e1"

    def test_read_detects_encoding(self, tmp_path):
        """Files in latin-1 are decoded correctly"""
        path = tmp_path / "latin.csv"
        content = "nombre,ciudad\nJosé,Málaga\nMaría,Córdoba\n" + "Íñigo,Logroño\n" * 20
        path.write_bytes(content.encode("latin-1"))

        grid = CsvGridReader(path).read()
        assert grid is not None
        assert grid.value(1, 0) == "José"
        assert grid.value(2, 1) == "Córdoba"

    def test_read_explicit_encoding(self, tmp_path):
        """An explicit encoding skips detection"""
        path = tmp_path / "utf8.csv"
        path.write_text("a,b\nñ,ü\n", encoding="utf-8")

        grid = CsvGridReader(path, encoding="utf-8").read()
        assert grid.value(1, 0) == "ñ"

    def test_missing_file(self, tmp_path, caplog):
        """A missing file gives no grid and logs the reason"""
        with caplog.at_level(logging.WARNING):
            grid = CsvGridReader(tmp_path / "missing.csv").read()
        assert grid is None
        assert "no such file" in caplog.text

    def test_directory_is_not_readable(self, tmp_path):
        """A directory is not a readable source"""
        assert CsvGridReader(tmp_path).read() is None

    def test_blank_lines_are_empty_rows(self, tmp_path):
        """Blank lines keep their position as empty rows"""
        path = tmp_path / "blank.csv"
        path.write_text("a,b\n\nc,d\n", encoding="utf-8")

        grid = CsvGridReader(path).read()
        assert grid.size() == 3
        assert grid.row(1) == ()
        assert grid.value(2, 1) == "d"

    def test_partial_failure_discards_rows(self, monkeypatch, simple_csv):
        """A failure mid-read gives no grid and still closes the source"""
        stream = FailingStream(["a,b\n", "c,d\n", "e,f\n"], fail_after=2)
        monkeypatch.setattr(files, "open_lines", lambda path, encoding: stream)

        assert CsvGridReader(simple_csv).read() is None
        assert stream.was_closed

    def test_source_closed_on_success(self, monkeypatch, simple_csv):
        """The source is closed after a complete read"""
        stream = FailingStream(["a,b\n", "c,d\n"], fail_after=99)
        monkeypatch.setattr(files, "open_lines", lambda path, encoding: stream)

        grid = CsvGridReader(simple_csv).read()
        assert grid is not None
        assert grid.size() == 2
        assert stream.was_closed

    def test_from_lines(self):
        """Any iterable of lines can be read"""
        grid = CsvGridReader(delimiter=";").from_lines(["a;b", "c;d"])
        assert grid.data == (("a", "b"), ("c", "d"))

    def test_from_lines_partial_failure(self):
        """An I/O error while iterating gives no grid"""
        def lines():
            yield "a,b"
            yield "c,d"
            raise OSError("connection lost")

        assert CsvGridReader().from_lines(lines()) is None

    def test_from_lines_decoding_failure(self):
        """A decoding error while iterating gives no grid"""
        stream = io.TextIOWrapper(io.BytesIO(b"a,b\n\xff\xfe,c\n"), encoding="utf-8")
        assert CsvGridReader().from_lines(stream) is None


class TestFiles:
    """Tests for the file helpers"""

    def test_open_none(self):
        """Nothing to open gives None"""
        assert files.open_lines(None) is None
        assert files.open_lines("  ") is None

    def test_close_none(self):
        """Closing None is a no-op"""
        files.close(None)

    def test_close_swallows_os_errors(self):
        """Errors while closing are only logged"""
        class Broken:
            def close(self):
                raise OSError("cannot close")

        files.close(Broken(), "broken.csv")
