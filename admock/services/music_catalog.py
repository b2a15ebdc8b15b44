"""
Music catalog lookups

admock/services/music_catalog.py

"""
import time
from typing import Any, List, Optional

from admock.core.database import JsonDatabase
from admock.models.base import ErrorKind, MusicStatus, MusicValidationResult
from admock.models.music import Music

SEARCH_LIMIT = 10


def find_music(db: JsonDatabase, music_id: str) -> Optional[dict]:
    for music in db.collection("music") or []:
        if str(music.get("id")) == str(music_id):
            return music
    return None


def validate_music_id(db: JsonDatabase, music_id: str) -> dict:
    """
    Check whether a music id exists and may be used in ads.

    Not-found and ineligible tracks are both answered with a normal
    payload; ``result`` tells them apart.
    """
    music = find_music(db, music_id)
    if music is None:
        return {
            "valid": False,
            "success": False,
            "type": ErrorKind.NOT_FOUND.value,
            "error": "Music ID not found",
            "result": MusicValidationResult.NOT_FOUND.value,
        }

    eligible = bool(music.get("is_available_for_ads"))
    return {
        "valid": eligible,
        "success": True,
        "music": music,
        "is_accessible": True,
        "can_be_used_in_ads": eligible,
        "result": (MusicValidationResult.ELIGIBLE if eligible else MusicValidationResult.INELIGIBLE).value,
    }


def search_music(db: JsonDatabase, query: Optional[str] = None, limit: int = SEARCH_LIMIT) -> List[dict]:
    """Case-insensitive substring search over title, author and genre"""
    music_list = db.collection("music") or []
    if query and query.strip():
        term = query.strip().lower()
        music_list = [
            m for m in music_list
            if any(term in str(m.get(field) or "").lower() for field in ("title", "author", "genre"))
        ]
    return music_list[:limit]


def build_uploaded_music(name: Any) -> Music:
    """Fabricate the pending-review record for an uploaded track"""
    return Music(
        id=f"uploaded_{int(time.time() * 1000)}",
        title=str(name) if name else "Custom Music",
        author="Your Brand",
        status=MusicStatus.PENDING_REVIEW,
        is_available_for_ads=False,
    )
