"""
admock/models/music.py

"""


from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from admock.models.base import MusicStatus

class Music(BaseModel):
    """Music catalog entry"""
    model_config = ConfigDict(extra="allow")

    id: str
    title: str
    author: str
    status: MusicStatus = Field(default=MusicStatus.PENDING_REVIEW)
    is_available_for_ads: bool = Field(default=False)
    genre: Optional[str] = None
    duration: Optional[float] = None

class MusicUploadRequest(BaseModel):
    name: Any = None
