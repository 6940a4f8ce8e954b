# backend/app/api/v1/endpoints/tables.py
from fastapi import APIRouter, UploadFile, File, HTTPException, Query
from pathlib import Path
from typing import Optional
import logging

from ....models.table import TableResponse
from ....services.table_service import TableService, TableServiceError
from ....core.config import get_settings

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/parse", response_model=TableResponse)
async def parse_table(
        file: UploadFile = File(...),
        header: int = Query(0, description="Filas a saltar antes de la fila de columnas"),
        trailer: int = Query(0, description="Filas a saltar entre columnas y datos"),
        footer: int = Query(0, description="Filas a saltar al final"),
        delimiter: Optional[str] = Query(None, description="Separador de campos"),
        quote: Optional[str] = Query(None, description="Comilla; vacío para desactivar")
):
    """
    Parsea un fichero delimitado y devuelve la tabla resultante.
    Los skips negativos se tratan como 0.
    """
    settings = get_settings()

    suffix = Path(file.filename or "").suffix.lower()
    if suffix not in settings.ALLOWED_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"Solo se permiten archivos {', '.join(settings.ALLOWED_EXTENSIONS)}"
        )

    content = await file.read()

    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"Archivo demasiado grande. Máximo: {settings.MAX_UPLOAD_SIZE / (1024 * 1024):.0f}MB"
        )

    try:
        return TableService.parse_content(
            content=content,
            filename=file.filename,
            header=header,
            trailer=trailer,
            footer=footer,
            delimiter=delimiter or settings.DEFAULT_DELIMITERS.get(suffix, settings.DEFAULT_DELIMITER),
            quote=settings.DEFAULT_QUOTE if quote is None else quote
        )
    except TableServiceError as e:
        logger.warning(f"Table parsing failed: {e}")
        raise HTTPException(
            status_code=422,
            detail=str(e)
        )
