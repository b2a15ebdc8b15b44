"""
Admin endpoints

admock/api/v1/admin.py
"""

from fastapi import APIRouter, Depends, status
from admock.api.deps import get_database
from admock.core.database import JsonDatabase, StorageError
from admock.core.errors import ApiError
from admock.models.base import ErrorKind
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/reset")
async def reset_database(db: JsonDatabase = Depends(get_database)):
    """Restore the live database from the initial seed document"""
    try:
        db.reset()
    except StorageError:
        logger.exception("Reset DB error")
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorKind.STORAGE,
            "Failed to reset database",
        )
    return {"success": True, "message": "Database reset to initial state"}
