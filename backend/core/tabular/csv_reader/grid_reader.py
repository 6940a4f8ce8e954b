# csv_reader/grid_reader.py
"""
Lectura de ficheros de texto delimitado a una Grid.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from ..grid import Grid
from . import files
from .encoding import EncodingResolver
from .tokenizer import LineTokenizer

logger = logging.getLogger(__name__)


class CsvGridReader:
    """Lee un fichero separado por comas (o por otro delimitador) en una Grid."""

    def __init__(self, file_path: Optional[Union[str, Path]] = None,
                 delimiter: Optional[str] = None, quote: Optional[str] = None,
                 encoding: Optional[str] = None):
        """
        Args:
            file_path: Fichero a leer, se puede indicar más tarde
            delimiter: Separador de campos, None para ','
            quote: Comilla que protege al delimitador, None para '"' y "" para ninguna
            encoding: Codificación del fichero, None para detectarla
        """
        self.file_path = file_path
        self.encoding = encoding
        self.tokenizer = LineTokenizer(delimiter, quote)

    @property
    def file_path(self) -> Optional[Path]:
        return self._file_path

    @file_path.setter
    def file_path(self, file_path: Optional[Union[str, Path]]):
        self._file_path = Path(file_path) if file_path is not None else None

    @property
    def delimiter(self) -> str:
        return self.tokenizer.delimiter

    @delimiter.setter
    def delimiter(self, delimiter: Optional[str]):
        self.tokenizer.delimiter = delimiter

    @property
    def quote(self) -> str:
        return self.tokenizer.quote

    @quote.setter
    def quote(self, quote: Optional[str]):
        self.tokenizer.quote = quote

    def read(self) -> Optional[Grid]:
        """
        Lee el fichero y crea la grid con una fila por línea.

        Returns:
            La grid o None si el fichero no se puede abrir o la lectura falla
            a mitad; en ese caso se descartan las filas ya leídas.
        """
        if self.file_path is None:
            return None

        path = self.file_path
        logger.info(f"Reading from text file \"{path.resolve()}\".")

        encoding = self.encoding or EncodingResolver.detect_encoding(path) or 'utf-8'
        stream = files.open_lines(path, encoding)
        if stream is None:
            return None

        try:
            grid = self._fill(stream, f"text file \"{path.resolve()}\"")
        finally:
            files.close(stream, path)

        return grid

    def from_lines(self, lines: Iterable[str], source: str = "lines") -> Optional[Grid]:
        """Crea una grid a partir de cualquier secuencia de líneas."""
        return self._fill(lines, source)

    def _fill(self, lines: Iterable[str], source: str) -> Optional[Grid]:
        grid = Grid()
        line_number = 0

        try:
            for line_number, line in enumerate(lines, start=1):
                grid.add(self.tokenizer.to_row(line))
        except (OSError, UnicodeDecodeError):
            logger.warning(f"Aborted reading from {source} at line {line_number + 1}.", exc_info=True)
            return None

        logger.info(f"Completed reading {grid.size()} rows from {source}.")
        return grid
