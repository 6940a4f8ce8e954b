# csv_reader/files.py
"""
Funciones para abrir y cerrar ficheros de texto sin lanzar excepciones.
"""

import logging
import os
from pathlib import Path
from typing import IO, Optional, Union

logger = logging.getLogger(__name__)


def open_lines(file_path: Optional[Union[str, Path]], encoding: str = 'utf-8') -> Optional[IO[str]]:
    """
    Abre un fichero para leerlo línea a línea.

    Args:
        file_path: Ruta del fichero
        encoding: Codificación con la que decodificar

    Returns:
        El fichero abierto o None si no se puede abrir; el motivo se registra.
    """
    if file_path is None or not str(file_path).strip():
        return None

    path = Path(file_path)

    if not path.exists():
        logger.warning(f"Cannot open file \"{path.resolve()}\" as there is no such file.")
        return None

    if not path.is_file() or not os.access(path, os.R_OK):
        logger.warning(f"Cannot open file \"{path.resolve()}\" as it is not a readable file.")
        return None

    try:
        return open(path, 'r', encoding=encoding, newline='')
    except (OSError, LookupError) as e:
        logger.warning(f"Cannot open file \"{path.resolve()}\": {e}")
        return None


def close(stream: Optional[IO], file_path: Optional[Union[str, Path]] = None):
    """Cierra el stream sin importar si está abierto o si falla al cerrar."""
    if stream is None:
        return
    try:
        stream.close()
    except OSError as e:
        target = f" \"{file_path}\"" if file_path is not None else ""
        logger.debug(f"Cannot close file{target}: {e}")
