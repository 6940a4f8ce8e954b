# csv_reader/models.py
"""
Modelos de datos internos del csv_reader.
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_DELIMITER = ","
DEFAULT_QUOTE = '"'


@dataclass
class CsvDialect:
    """Delimitador y comilla usados para partir una línea."""
    delimiter: str = DEFAULT_DELIMITER
    quote: str = DEFAULT_QUOTE  # "" desactiva el entrecomillado

    @classmethod
    def of(cls, delimiter: Optional[str] = None, quote: Optional[str] = None) -> "CsvDialect":
        """Crea un dialecto; None o vacío en el delimitador y None en la comilla restauran el valor por defecto."""
        return cls(
            delimiter=delimiter or DEFAULT_DELIMITER,
            quote=DEFAULT_QUOTE if quote is None else quote
        )
