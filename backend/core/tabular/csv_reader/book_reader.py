# csv_reader/book_reader.py
"""
Lectura de varios ficheros de texto delimitado en un único Book.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..book import Book, Sheet
from ..factory import Parameters, TableFactory, get_table_factory
from .grid_reader import CsvGridReader

logger = logging.getLogger(__name__)


class CsvBookReader:
    """Lee ficheros CSV en un book; cada fichero legible es una sheet."""

    def __init__(self, delimiter: Optional[str] = None, quote: Optional[str] = None,
                 encoding: Optional[str] = None, factory: Optional[TableFactory] = None):
        self._files: List[Path] = []
        self._root_directory: Optional[Path] = None
        self._pattern: Optional[str] = None
        self._grid_reader = CsvGridReader(delimiter=delimiter, quote=quote, encoding=encoding)
        self._factory = factory or get_table_factory()

    @property
    def files(self) -> List[Path]:
        return list(self._files)

    def add_file(self, file_path: Union[str, Path]) -> "CsvBookReader":
        self._files.append(Path(file_path))
        return self

    def add_files(self, file_paths: Iterable[Union[str, Path]]) -> "CsvBookReader":
        for file_path in file_paths:
            self.add_file(file_path)
        return self

    def set_filter(self, root_directory: Optional[Union[str, Path]],
                   pattern: Optional[str]) -> "CsvBookReader":
        """
        Añade todos los ficheros bajo root_directory que cumplan el patrón glob.

        Los ficheros se buscan al leer. None en cualquiera de los dos
        argumentos desactiva el filtro.
        """
        self._root_directory = Path(root_directory) if root_directory is not None else None
        self._pattern = pattern
        return self

    def _matching_files(self) -> List[Path]:
        if self._root_directory is None or not self._pattern:
            return []
        return sorted(path for path in self._root_directory.rglob(self._pattern) if path.is_file())

    def _paths(self) -> List[Path]:
        """Ficheros añadidos y filtrados, sin repetir y en orden."""
        unique = {}
        for path in self._files + self._matching_files():
            unique.setdefault(path.resolve(), path)
        return list(unique.values())

    def read(self, arguments: Optional[Parameters] = None) -> Book:
        """
        Lee todos los ficheros de forma independiente.

        Args:
            arguments: Configuración de las tablas, ver TableFactory

        Returns:
            El book; los ficheros que no se pudieron leer no aportan sheet.
        """
        book = Book()
        paths = self._paths()

        if not paths:
            return book

        logger.info(f"Loading book from {len(paths)} files.")

        for path in paths:
            self._grid_reader.file_path = path
            grid = self._grid_reader.read()
            if grid is None:
                logger.warning(f"Skipping file \"{path}\", no sheet created.")
                continue
            table = self._factory.create(grid, arguments)
            book.add(Sheet(name=path.stem, table=table))

        logger.info(f"Loaded book with {len(book.sheets)} sheets.")
        return book
