# tabular/book.py
"""
Contenedores con nombre: una Sheet nombra una tabla y un Book agrupa sheets.

Piensa en un Book como un fichero Excel con varias pestañas, o como un
conjunto de ficheros de texto que van juntos.
"""

from typing import Iterable, List, Optional

from .spreadsheet import Spreadsheet


class Sheet:
    """Tabla con nombre; el nombre identifica la sheet dentro del book."""

    def __init__(self, name: Optional[str] = None, table: Optional[Spreadsheet] = None):
        self.name = name
        self.table = table

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: Optional[str]):
        self._name = name or ""

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Sheet):
            return NotImplemented
        return self.name.lower() == other.name.lower()

    def __hash__(self) -> int:
        return hash(self.name.lower())

    def __repr__(self) -> str:
        return f"<Sheet {self.name!r}>"


class Book:
    """Colección ordenada de sheets con un nombre opcional."""

    def __init__(self, name: Optional[str] = None):
        self.name = name or ""
        self._sheets: List[Sheet] = []

    @property
    def sheets(self) -> List[Sheet]:
        return self._sheets

    def sheet(self, name: Optional[str]) -> Optional[Sheet]:
        """Busca una sheet por nombre sin distinguir mayúsculas."""
        if name is None:
            return None
        wanted = name.lower()
        for sheet in self._sheets:
            if sheet.name.lower() == wanted:
                return sheet
        return None

    def add(self, sheet: Optional[Sheet]) -> "Book":
        if sheet is not None:
            self._sheets.append(sheet)
        return self

    def add_all(self, sheets: Optional[Iterable[Sheet]]) -> "Book":
        if sheets is not None:
            for sheet in sheets:
                self.add(sheet)
        return self

    def remove(self, sheet: Optional[Sheet]) -> "Book":
        if sheet is not None and sheet in self._sheets:
            self._sheets.remove(sheet)
        return self

    def remove_all(self, sheets: Optional[Iterable[Sheet]]) -> "Book":
        if sheets is not None:
            for sheet in list(sheets):
                self.remove(sheet)
        return self

    def __len__(self) -> int:
        return len(self._sheets)

    def __repr__(self) -> str:
        return f"<Book {self.name!r} {self._sheets!r}>"
