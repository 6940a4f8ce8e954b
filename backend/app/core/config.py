# backend/app/core/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Dict, List


class Settings(BaseSettings):
    PROJECT_NAME: str = "GridSheet"
    API_V1_STR: str = "/api/v1"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    MAX_UPLOAD_SIZE: int = 20 * 1024 * 1024  # 20MB
    ALLOWED_EXTENSIONS: List[str] = [".csv", ".txt", ".tsv"]

    DEFAULT_DELIMITER: str = ","
    # Delimitador por extensión cuando la petición no indica uno
    DEFAULT_DELIMITERS: Dict[str, str] = {".tsv": "\t"}
    DEFAULT_QUOTE: str = '"'

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Crea una instancia única de Settings que se reutiliza.
    El decorador lru_cache asegura que solo se cree una vez.
    """
    return Settings()
