"""
Music endpoints

admock/api/v1/music.py
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from admock.api.deps import get_database
from admock.core.database import JsonDatabase
from admock.models.music import MusicUploadRequest
from admock.services.music_catalog import build_uploaded_music, search_music, validate_music_id
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/validate/{music_id}")
async def validate_music(music_id: str, db: JsonDatabase = Depends(get_database)):
    """Check a music id against the catalog; always answers 200"""
    result = validate_music_id(db, music_id)
    logger.info(f"Music {music_id} validation: {result['result']}")
    return result


@router.get("/search")
async def search(q: Optional[str] = Query(None), db: JsonDatabase = Depends(get_database)):
    """Search the catalog by title, author or genre"""
    return {"success": True, "data": {"music_list": search_music(db, q)}}


@router.post("/upload")
async def upload_music(request: Optional[MusicUploadRequest] = None):
    """Accept a custom track; it stays pending review and is not catalogued"""
    music = build_uploaded_music(request.name if request else None)
    return {
        "success": True,
        "data": {
            "music": music.model_dump(mode="json", exclude_none=True),
            "message": "Music uploaded successfully and is pending review",
        },
    }
