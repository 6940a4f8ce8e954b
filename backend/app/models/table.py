from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class ValidationMessages(BaseModel):
    """Mensajes de validación agrupados por nivel"""
    faults: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    infos: List[str] = Field(default_factory=list)


class TableResponse(BaseModel):
    """Modelo para respuesta del parseo de una tabla"""

    success: bool
    message: str
    filename: Optional[str] = None
    encoding: Optional[str] = None
    columns: List[Optional[str]] = Field(default_factory=list)
    rows: List[List[Optional[str]]] = Field(default_factory=list)
    size: int = 0
    parameters: Dict[str, str] = Field(default_factory=dict)
    validation: ValidationMessages = Field(default_factory=ValidationMessages)
