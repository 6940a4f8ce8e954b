"""
Servicio para convertir ficheros delimitados subidos en tablas.
Todo ocurre en memoria; no se guarda nada en disco.
"""

import io
import logging
from typing import Optional

from ...core.tabular import Messages, get_table_factory
from ...core.tabular.csv_reader import CsvGridReader, EncodingResolver
from ..models.table import TableResponse, ValidationMessages

logger = logging.getLogger(__name__)


class TableServiceError(Exception):
    pass


class TableService:
    """Servicio para parsear texto delimitado y presentarlo como tabla"""

    @staticmethod
    def parse_content(
        content: bytes,
        filename: str,
        header: int = 0,
        trailer: int = 0,
        footer: int = 0,
        delimiter: Optional[str] = None,
        quote: Optional[str] = None
    ) -> TableResponse:
        """
        Parsea el contenido de un fichero y aplica la ventana de tabla.

        Args:
            content: Contenido del fichero en bytes
            filename: Nombre original del fichero
            header: Filas a saltar antes de la fila de columnas
            trailer: Filas a saltar entre columnas y datos
            footer: Filas a saltar al final
            delimiter: Separador de campos, None para el de por defecto
            quote: Comilla, None para la de por defecto y "" para ninguna

        Returns:
            TableResponse con columnas, filas y mensajes de validación
        """
        encoding = EncodingResolver.detect_bytes(content)
        logger.info(f"Parsing {filename} ({len(content)} bytes, {encoding})")

        stream = io.TextIOWrapper(io.BytesIO(content), encoding=encoding, newline="")
        try:
            grid = CsvGridReader(delimiter=delimiter, quote=quote).from_lines(stream, source=filename)
        finally:
            stream.close()

        if grid is None:
            raise TableServiceError(f"No se pudo leer el fichero {filename} con codificación {encoding}")

        table = get_table_factory().create(grid, {
            "header": header,
            "trailer": trailer,
            "footer": footer
        })

        return TableResponse(
            success=True,
            message="Tabla procesada exitosamente",
            filename=filename,
            encoding=encoding,
            columns=list(table.columns()),
            rows=[list(row) for row in table.data()],
            size=table.size(),
            parameters=table.parameters(),
            validation=TableService.to_validation(table.validate())
        )

    @staticmethod
    def to_validation(messages: Messages) -> ValidationMessages:
        """Separa las hojas del compuesto por nivel."""
        leaves = messages.texts
        return ValidationMessages(
            faults=[leaf.text for leaf in leaves if leaf.is_error],
            warnings=[leaf.text for leaf in leaves if leaf.is_warning],
            infos=[leaf.text for leaf in leaves if leaf.is_info]
        )
