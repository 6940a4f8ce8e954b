# backend/app/api/v1/endpoints/health.py
from fastapi import APIRouter
from ....core.config import get_settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check público"""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION
    }
