# csv_reader/encoding.py
"""
Resolución de codificación de ficheros de texto delimitado.
"""

import codecs
import logging
from pathlib import Path
from typing import Optional, Union

import chardet

logger = logging.getLogger(__name__)


class EncodingResolver:
    """Detecta la codificación de un fichero o de un bloque de bytes."""

    # Orden de prioridad para el fallback; latin-1 queda como último recurso
    ENCODING_PRIORITY = ['utf-8', 'cp1252']

    # Bytes leídos para la detección
    SAMPLE_SIZE = 10000

    ENCODING_MAP = {
        'utf-8': 'utf-8',
        'utf-8-sig': 'utf-8-sig',
        'ascii': 'utf-8',
        'windows-1252': 'cp1252',
        'iso-8859-1': 'latin-1'
    }

    @staticmethod
    def _decodes(sample: bytes, encoding: str, truncated: bool) -> bool:
        """Comprueba si la muestra decodifica sin errores.

        Si la muestra está cortada se admite un carácter multibyte incompleto al final.
        """
        try:
            codecs.getincrementaldecoder(encoding)(errors='strict').decode(sample, final=not truncated)
            return True
        except (UnicodeDecodeError, LookupError):
            return False

    @classmethod
    def detect_bytes(cls, raw_data: bytes) -> str:
        """
        Detecta la codificación de unos bytes.

        Returns:
            La codificación detectada; utf-8 si no hay datos.
        """
        if not raw_data:
            return 'utf-8'

        sample = raw_data[:cls.SAMPLE_SIZE]
        truncated = len(raw_data) > cls.SAMPLE_SIZE
        result = chardet.detect(sample)
        detected = (result.get('encoding') or '').lower()
        confidence = result.get('confidence') or 0

        if confidence > 0.7 and detected:
            normalized = cls.ENCODING_MAP.get(detected, detected)
            if cls._decodes(sample, normalized, truncated):
                return normalized

        if sample.startswith(codecs.BOM_UTF8):
            return 'utf-8-sig'

        for encoding in cls.ENCODING_PRIORITY:
            if cls._decodes(sample, encoding, truncated):
                return encoding

        # latin-1 decodifica cualquier secuencia de bytes
        return 'latin-1'

    @classmethod
    def detect_encoding(cls, file_path: Union[str, Path]) -> Optional[str]:
        """
        Detecta la codificación de un fichero leyendo sus primeros bytes.

        Returns:
            La codificación o None si el fichero no se puede leer.
        """
        try:
            with open(file_path, 'rb') as f:
                raw_data = f.read(cls.SAMPLE_SIZE + 1)
        except OSError as e:
            logger.debug(f"Cannot detect encoding of \"{file_path}\": {e}")
            return None

        return cls.detect_bytes(raw_data)
