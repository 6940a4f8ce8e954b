"""
Pytest configuration and shared fixtures for the tabular engine tests.
"""

import pytest
from pathlib import Path

from backend.core.tabular import Grid


# ============== GRID FIXTURES ==============

WINDOW_ROWS = [
    ["header"],
    ["header"],
    ["column"],
    ["trailer"],
    ["data"],
    ["moreData"],
    ["footer"],
]


@pytest.fixture
def empty_grid() -> Grid:
    """An empty grid."""
    return Grid()


@pytest.fixture
def columns_only_grid() -> Grid:
    """A grid holding only the column row."""
    return Grid([WINDOW_ROWS[2]])


@pytest.fixture
def single_row_grid() -> Grid:
    """A grid holding the column row and one data row."""
    return Grid([WINDOW_ROWS[2], WINDOW_ROWS[4]])


@pytest.fixture
def complex_grid() -> Grid:
    """A grid with header, column, trailer, data and footer sections."""
    return Grid(WINDOW_ROWS)


# ============== FILE FIXTURES ==============

SIMPLE_CSV = (
    'a,b,c,d\n'
    'a1, "b1" ,"c1, e1",d1\n'
    'a2, b2,,d2\n'
    'a3, b3,,\n'
    'a4,b4,c4,d4\n'
)

SEMICOLON_CSV = (
    "a;b;c;d\n"
    "a1;\"b1\";'c1; e1';d1\n"
    "a2;b2,,d2;;d2\n"
    "'a3''';b4'';'c4''e4';d4\n"
)


@pytest.fixture
def simple_csv(tmp_path) -> Path:
    """Comma separated file with quoted and empty fields."""
    path = tmp_path / "simple.csv"
    path.write_text(SIMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def semicolon_csv(tmp_path) -> Path:
    """Semicolon separated file quoted with single quotes."""
    path = tmp_path / "semicolon.csv"
    path.write_text(SEMICOLON_CSV, encoding="utf-8")
    return path
