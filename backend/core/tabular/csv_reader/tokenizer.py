# csv_reader/tokenizer.py
"""
Separación de una línea de texto delimitado en celdas.
"""

import re
from typing import List, Optional, Pattern

from ..grid import Cell
from .models import CsvDialect


class LineTokenizer:
    """
    Parte una línea en celdas respetando comillas.

    Reglas:
    - Un campo está entrecomillado si, tras quitar los espacios iniciales,
      empieza por la comilla. Termina en la siguiente comilla seguida de fin
      de línea o del delimitador (con espacios opcionales en medio).
    - Dentro de un campo entrecomillado dos comillas seguidas son una comilla
      literal y no cierran el campo.
    - Los campos sin comillas se recortan; sus comillas son literales.
    - Un campo vacío tras recortar o quitar comillas es None.
    - Una línea vacía o en blanco no produce ninguna celda.
    """

    def __init__(self, delimiter: Optional[str] = None, quote: Optional[str] = None):
        self._dialect = CsvDialect.of(delimiter, quote)
        self._matcher: Optional[Pattern] = None

    @classmethod
    def from_dialect(cls, dialect: CsvDialect) -> "LineTokenizer":
        return cls(dialect.delimiter, dialect.quote)

    @property
    def delimiter(self) -> str:
        return self._dialect.delimiter

    @delimiter.setter
    def delimiter(self, delimiter: Optional[str]):
        self._dialect = CsvDialect.of(delimiter, self._dialect.quote)
        self._matcher = None

    @property
    def quote(self) -> str:
        return self._dialect.quote

    @quote.setter
    def quote(self, quote: Optional[str]):
        self._dialect = CsvDialect.of(self._dialect.delimiter, quote)
        self._matcher = None

    @property
    def dialect(self) -> CsvDialect:
        return self._dialect

    def _quote_matcher(self) -> Pattern:
        """Comilla doble (escape) o comilla de cierre seguida del delimitador o fin de línea."""
        if self._matcher is None:
            quote = re.escape(self.quote)
            delimiter = re.escape(self.delimiter)
            self._matcher = re.compile(
                fr'(?P<escaped>{quote}{quote})|(?P<closing>{quote}\s*?(?={delimiter}|$))'
            )
        return self._matcher

    def to_row(self, line: Optional[str]) -> List[Cell]:
        """
        Convierte una línea en una lista de celdas.

        Args:
            line: Una línea tal cual se leyó del fichero

        Returns:
            Las celdas separadas; None para los campos vacíos.
        """
        if line is None or not line.strip():
            return []

        line = line.rstrip("\r\n")
        row: List[Cell] = []
        position = 0
        end = len(line)

        while True:
            position = self._skip_blanks(line, position)

            if self.quote and line.startswith(self.quote, position):
                value, position = self._read_quoted(line, position + len(self.quote))
            else:
                value, position = self._read_plain(line, position)

            row.append(value or None)

            if position >= end:
                break
            # estamos sobre el delimitador
            position += len(self.delimiter)

        return row

    def __call__(self, line: Optional[str]) -> List[Cell]:
        return self.to_row(line)

    def _skip_blanks(self, line: str, position: int) -> int:
        while (position < len(line) and line[position].isspace()
               and not line.startswith(self.delimiter, position)):
            position += 1
        return position

    def _read_plain(self, line: str, position: int):
        index = line.find(self.delimiter, position)
        if index < 0:
            return line[position:].strip(), len(line)
        return line[position:index].strip(), index

    def _read_quoted(self, line: str, position: int):
        parts = []
        matcher = self._quote_matcher()

        while True:
            match = matcher.search(line, position)
            if match is None:
                # comilla sin cerrar: el resto de la línea es el valor
                parts.append(line[position:].rstrip())
                return "".join(parts), len(line)

            parts.append(line[position:match.start()])
            position = match.end()

            if match.group("escaped"):
                parts.append(self.quote)
                continue

            return "".join(parts), position
