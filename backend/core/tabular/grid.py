# tabular/grid.py
"""
Grid: representación en memoria de una hoja de cálculo sin semántica.

Todas las celdas son texto o None. Quien use la grid decide qué significa
cada fila o columna; para eso existe Spreadsheet.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

Cell = Optional[str]
Row = Tuple[Cell, ...]

# Mínimo de columnas a reservar y umbral a partir del cual se realoja la fila
COLUMNS_EXTEND = 10

EMPTY_ROW: Row = ()


class Grid:
    """Almacén 2-D mutable y creciente de celdas de texto."""

    def __init__(self, data: Optional[Iterable[Optional[Sequence[Cell]]]] = None):
        """
        Crea una grid vacía o con una copia de los datos recibidos.

        Args:
            data: Filas iniciales, puede ser None. Cada fila se copia para que
                la grid sea la única dueña de sus filas.
        """
        self._rows: List[List[Cell]] = []
        if data is not None:
            for row in data:
                self._rows.append(self._own(row))

    @staticmethod
    def _own(row: Optional[Sequence[Cell]]) -> List[Cell]:
        return list(row) if row is not None else []

    @property
    def data(self) -> Tuple[Row, ...]:
        """Copia de solo lectura de todas las filas."""
        return tuple(tuple(row) for row in self._rows)

    def row(self, index: int) -> Row:
        """
        Accede a una fila.

        Returns:
            Las celdas de la fila o una fila vacía si está fuera de rango.
        """
        if index < 0 or index >= len(self._rows):
            return EMPTY_ROW
        return tuple(self._rows[index])

    def add(self, row: Optional[Sequence[Cell]] = None) -> "Grid":
        """Añade la fila al final; None se guarda como fila vacía."""
        self._rows.append(self._own(row))
        return self

    def insert_before(self, index: int, row: Optional[Sequence[Cell]] = None) -> "Grid":
        """
        Inserta la fila antes de la fila indicada.

        Un índice negativo se interpreta como la primera fila. Si el índice
        queda más allá del final se rellenan filas vacías hasta index - 1.
        """
        position = max(0, index)

        if position > len(self._rows):
            # todas menos la última, que es la que insertamos
            self._create_empty_rows(position - 1)

        if position >= len(self._rows):
            self._rows.append(self._own(row))
        else:
            self._rows.insert(position, self._own(row))

        return self

    def insert_after(self, index: int, row: Optional[Sequence[Cell]] = None) -> "Grid":
        """Inserta la fila después de la fila indicada."""
        return self.insert_before(index + 1, row)

    def remove(self, index: int) -> "Grid":
        """Elimina la fila; fuera de rango no hace nada."""
        if self._rows and 0 <= index < len(self._rows):
            del self._rows[index]
        return self

    def value(self, row: int, column: int) -> Cell:
        """
        Valor de la celda o None si la fila o la columna no existen.

        Nunca amplía la grid.
        """
        if row < 0 or row >= len(self._rows):
            return None
        current = self._rows[row]
        if column < 0 or column >= len(current):
            return None
        return current[column]

    def set_value(self, row: int, column: int, value: Cell) -> Cell:
        """
        Asigna el valor de una celda y devuelve el valor anterior.

        Si la celda no existe y el valor no es None, se crean las filas y
        columnas que falten. Escribir None fuera de rango no reserva nada.
        """
        if row < 0 or column < 0:
            return None

        if row >= len(self._rows):
            if value is None:
                return None
            self._create_empty_rows(row)

        current = self._rows[row]
        if column >= len(current):
            if value is None:
                return None
            current = self._create_empty_columns(row, column)

        previous = current[column]
        current[column] = value
        return previous

    def size(self) -> int:
        """Número actual de filas."""
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def clear(self) -> "Grid":
        """Elimina todas las filas."""
        self._rows.clear()
        return self

    def _create_empty_rows(self, last_row: int):
        """Rellena con filas vacías desde el final hasta last_row inclusive."""
        while len(self._rows) <= last_row:
            self._rows.append([])

    def _create_empty_columns(self, row: int, last_column: int) -> List[Cell]:
        """Amplía la fila existente con celdas None hasta last_column inclusive."""
        current = self._rows[row]
        missing = last_column + 1 - len(current)

        if last_column - len(current) > COLUMNS_EXTEND:
            # conviene realojar la fila completa de una vez
            grown: List[Cell] = [None] * max(last_column + 1, COLUMNS_EXTEND)
            grown[:len(current)] = current
            self._rows[row] = grown
            return grown

        current.extend([None] * missing)
        return current

    def __repr__(self) -> str:
        return repr([list(row) for row in self._rows])
