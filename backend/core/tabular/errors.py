# tabular/errors.py
"""
Mensajes normalizados de validación de tablas.
"""

from .messages import ErrorMessage, WarningMessage


class TabularErrors:
    """Factory de mensajes normalizados."""

    @staticmethod
    def missing_grid() -> ErrorMessage:
        return ErrorMessage("La tabla no tiene datos asociados.")

    @staticmethod
    def missing_columns(column_row: int) -> ErrorMessage:
        return ErrorMessage(f"La tabla no tiene fila de columnas (fila {column_row}).")

    @staticmethod
    def no_data_rows() -> WarningMessage:
        return WarningMessage("La tabla no contiene filas de datos.")

    @staticmethod
    def blank_column_name(index: int) -> WarningMessage:
        return WarningMessage(f"La columna {index} no tiene nombre.")
