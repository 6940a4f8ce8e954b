# csv_reader/__init__.py
"""
Micromódulo para leer texto delimitado en grids y books.
"""

from .book_reader import CsvBookReader
from .encoding import EncodingResolver
from .grid_reader import CsvGridReader
from .models import CsvDialect
from .tokenizer import LineTokenizer

__all__ = [
    'CsvBookReader',
    'CsvGridReader',
    'CsvDialect',
    'EncodingResolver',
    'LineTokenizer'
]
