# tabular/__init__.py
"""
Motor tabular en memoria: grids, vistas de tabla y lectura de texto delimitado.
"""

from .book import Book, Sheet
from .factory import TableFactory, get_table_factory
from .grid import Grid
from .messages import (
    ErrorMessage, InfoMessage, Message, MessageLevel, Messages, WarningMessage
)
from .spreadsheet import NOT_FOUND, Spreadsheet
from .csv_reader import CsvBookReader, CsvGridReader, LineTokenizer

__all__ = [
    'Book',
    'Sheet',
    'TableFactory',
    'get_table_factory',
    'Grid',
    'Message',
    'MessageLevel',
    'Messages',
    'ErrorMessage',
    'WarningMessage',
    'InfoMessage',
    'NOT_FOUND',
    'Spreadsheet',
    'CsvBookReader',
    'CsvGridReader',
    'LineTokenizer'
]
