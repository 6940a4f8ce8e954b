# tabular/factory.py
"""
Registro de implementaciones de tabla por etiqueta de clase.
"""

import logging
from typing import Callable, Dict, List, Mapping, Optional, Union

from .grid import Grid
from .spreadsheet import Spreadsheet

logger = logging.getLogger(__name__)

Parameters = Mapping[str, Union[str, int]]
TableFactoryMethod = Callable[[Optional[Grid], Optional[Parameters]], Spreadsheet]

DEFAULT_CLASS = Spreadsheet.__name__


def _skip(parameters: Parameters, key: str) -> Optional[int]:
    raw = parameters.get(key)
    if raw is None:
        return None
    try:
        return int(str(raw).strip())
    except ValueError:
        logger.warning(f"Parámetro '{key}' ignorado, no es un entero: {raw!r}")
        return None


def create_spreadsheet(grid: Optional[Grid], parameters: Optional[Parameters] = None) -> Spreadsheet:
    """Crea una Spreadsheet configurada con header, trailer y footer."""
    table = Spreadsheet(grid)

    if parameters:
        header = _skip(parameters, "header")
        trailer = _skip(parameters, "trailer")
        footer = _skip(parameters, "footer")
        if header is not None:
            table.skip_header = header
        if trailer is not None:
            table.skip_trailer = trailer
        if footer is not None:
            table.skip_footer = footer

    return table


class TableFactory:
    """Crea la implementación de tabla adecuada para unos parámetros."""

    def __init__(self):
        self._methods: Dict[str, TableFactoryMethod] = {}
        self.register_default_methods()

    def register_default_methods(self):
        """Registra las implementaciones por defecto."""
        self.register(DEFAULT_CLASS, create_spreadsheet)

    def register(self, tag: str, method: TableFactoryMethod):
        """Registra una nueva implementación."""
        if tag in self._methods:
            raise ValueError(f"Implementación ya registrada: {tag}")
        self._methods[tag] = method

    def create(self, grid: Optional[Grid], parameters: Optional[Parameters] = None) -> Spreadsheet:
        """
        Crea una vista de tabla sobre la grid.

        Args:
            grid: Datos de la tabla, puede ser None aunque no tiene sentido
            parameters: Configuración; la clave 'class' elige la implementación

        Returns:
            Nunca None; Spreadsheet si la clase no se conoce.
        """
        tag = parameters.get("class") if parameters else None
        method = self._methods.get(tag) if tag else None
        if method is None:
            method = self._methods[DEFAULT_CLASS]
        return method(grid, parameters)

    def list_methods(self) -> List[str]:
        return list(self._methods)


_default_factory: Optional[TableFactory] = None


def get_table_factory() -> TableFactory:
    """Instancia compartida de la factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = TableFactory()
    return _default_factory
