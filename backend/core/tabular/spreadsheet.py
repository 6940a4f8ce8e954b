# tabular/spreadsheet.py
"""
Vista de tabla con columnas nombradas sobre una Grid.

Se asume que casi cualquier fichero de importación tiene esta forma:

    (filas a saltar)       skip_header
    nombres de columna
    (filas a saltar)       skip_trailer
    celdas de datos
    (filas a saltar)       skip_footer

Las filas saltadas son opcionales. Todas las posiciones se recalculan en cada
acceso, así que cambiar un skip se refleja inmediatamente.

Atención: la fila 0 de la tabla es la primera fila de datos, no la fila de
columnas, por lo que row() y value() no devuelven lo mismo que en la Grid.
"""

from typing import Dict, List, Optional

from .errors import TabularErrors
from .grid import EMPTY_ROW, Cell, Grid, Row
from .messages import Messages

NOT_FOUND = -1


class Spreadsheet:
    """Implementación por defecto de una tabla sobre una grid."""

    def __init__(self, grid: Optional[Grid] = None, skip_header: int = 0,
                 skip_trailer: int = 0, skip_footer: int = 0):
        self.grid = grid
        self.skip_header = skip_header
        self.skip_trailer = skip_trailer
        self.skip_footer = skip_footer

    @property
    def skip_header(self) -> int:
        """Filas saltadas antes de la fila de columnas."""
        return self._skip_header

    @skip_header.setter
    def skip_header(self, skip: int):
        self._skip_header = max(0, skip)

    @property
    def skip_trailer(self) -> int:
        """Filas saltadas entre la fila de columnas y los datos."""
        return self._skip_trailer

    @skip_trailer.setter
    def skip_trailer(self, skip: int):
        self._skip_trailer = max(0, skip)

    @property
    def skip_footer(self) -> int:
        """Filas saltadas al final de la grid."""
        return self._skip_footer

    @skip_footer.setter
    def skip_footer(self, skip: int):
        self._skip_footer = max(0, skip)

    # Posiciones derivadas

    def _column_row(self) -> int:
        if self.grid is None or self.grid.size() <= self.skip_header:
            return NOT_FOUND
        return self.skip_header

    def _data_row(self) -> int:
        offset = 1 + self.skip_header + self.skip_trailer
        if self.grid is None or self.grid.size() <= offset:
            return NOT_FOUND
        return offset

    def _last_data_row(self) -> int:
        first = self._data_row()
        if first == NOT_FOUND:
            return NOT_FOUND
        last = self.grid.size() - self.skip_footer - 1
        return last if last >= first else NOT_FOUND

    def _hidden_rows(self) -> int:
        """Filas ocultas: las saltadas más la fila de columnas."""
        return self.skip_header + self.skip_trailer + self.skip_footer + 1

    # Columnas

    def columns(self) -> Row:
        """Nombres de columna o una fila vacía si no hay fila de columnas."""
        column_row = self._column_row()
        if column_row == NOT_FOUND:
            return EMPTY_ROW
        return self.grid.row(column_row)

    def column(self, index: int) -> Cell:
        """Nombre de la columna en la posición dada, None si no existe."""
        columns = self.columns()
        if index < 0 or index >= len(columns):
            return None
        return columns[index]

    def index_of(self, name: Optional[str]) -> int:
        """Posición de la columna, sin distinguir mayúsculas, o -1."""
        if name is None:
            return NOT_FOUND
        wanted = name.lower()
        for index, column in enumerate(self.columns()):
            if column is not None and column.lower() == wanted:
                return index
        return NOT_FOUND

    def set_column(self, index: int, name: Cell) -> Cell:
        """
        Renombra una columna existente en la grid subyacente.

        Nunca amplía la fila de columnas.

        Returns:
            El nombre anterior o None si la columna no existe.
        """
        column_row = self._column_row()
        if index < 0 or column_row == NOT_FOUND:
            return None
        if index >= len(self.grid.row(column_row)):
            return None
        return self.grid.set_value(column_row, index, name)

    # Datos

    def row(self, index: int) -> Row:
        """Fila lógica de datos, vacía si está fuera de la ventana."""
        if index < 0 or index >= self.size() or self._data_row() == NOT_FOUND:
            return EMPTY_ROW
        return self.grid.row(self._data_row() + index)

    def data(self) -> List[Row]:
        """Todas las filas de datos de la ventana."""
        first = self._data_row()
        last = self._last_data_row()
        if first == NOT_FOUND or last == NOT_FOUND:
            return []
        return [self.grid.row(index) for index in range(first, last + 1)]

    def value(self, row: int, column: int) -> Cell:
        """Valor de la celda por posición; None fuera de rango."""
        if row < 0 or row >= self.size() or column < 0:
            return None
        return self.grid.value(self._data_row() + row, column)

    def value_of(self, column: Optional[str], row: int) -> Cell:
        """Valor de la celda por nombre de columna; None si no existe."""
        return self.value(row, self.index_of(column))

    def size(self) -> int:
        """Número de filas de datos, nunca negativo."""
        if self.grid is None:
            return 0
        return max(0, self.grid.size() - self._hidden_rows())

    def __len__(self) -> int:
        return self.size()

    def parameters(self) -> Dict[str, str]:
        """Configuración de la tabla para pasarla a otras capas o a la factory."""
        return {
            "header": str(self.skip_header),
            "trailer": str(self.skip_trailer),
            "footer": str(self.skip_footer),
            "class": self.__class__.__name__,
        }

    def validate(self) -> Messages:
        """Comprueba que la tabla tenga columnas y datos."""
        messages = Messages()

        if self.grid is None:
            messages.add(TabularErrors.missing_grid())
            return messages

        if self._column_row() == NOT_FOUND:
            messages.add(TabularErrors.missing_columns(self.skip_header))
            return messages

        for index, column in enumerate(self.columns()):
            if column is None or not column.strip():
                messages.add(TabularErrors.blank_column_name(index))

        if self.size() == 0:
            messages.add(TabularErrors.no_data_rows())

        return messages

    def __repr__(self) -> str:
        if self.grid is None:
            return "[], []"
        return f"{list(self.columns())}, {[list(row) for row in self.data()]}"
