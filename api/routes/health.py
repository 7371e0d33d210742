"""Health check route"""

from fastapi import APIRouter, Depends
import logging

from api.dependencies import get_store
from app.config import settings
from domain.models import Database

router = APIRouter(tags=["Health"])
logger = logging.getLogger("menucalendar.api.health")


@router.get("/health-check")
def health_check(store: Database = Depends(get_store)):
    """Basic health check endpoint"""
    return {
        "status": "ok",
        "service": settings.app_name,
        "store": "open" if store.is_open else "closed",
    }
