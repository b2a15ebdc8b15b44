"""
admock/models/advertising.py
"""


from typing import Any, Optional
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field
from admock.models.base import AdStatus, MusicOption

class AdCreateRequest(BaseModel):
    """
    Ad submission from the creation wizard.

    Fields are left untyped; ``validate_ad`` checks them and reports every
    failing rule together.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    campaign_name: Any = Field(default=None, alias="campaignName")
    objective: Any = None
    ad_text: Any = Field(default=None, alias="adText")
    cta: Any = None
    music_option: Any = Field(default=None, alias="musicOption")
    music_id: Any = Field(default=None, alias="musicId")

class Ad(BaseModel):
    """Ad record as stored in the JSON database"""
    id: int
    ad_id: str
    creative_id: str
    campaign_name: str
    objective: str
    ad_text: str
    cta: str = ""
    music_option: str = MusicOption.NONE.value
    music_id: str = ""
    status: AdStatus = AdStatus.UNDER_REVIEW
    created_at: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    estimated_review_time: str
    advertiser_id: str
    user_id: int

class Creative(BaseModel):
    """Acknowledgement returned once an ad is accepted for review"""
    creative_id: str
    ad_id: str
    status: AdStatus
    review_estimate: str
    created_at: str

def optional_text(value: Optional[Any], default: str = "") -> str:
    """Falsy values become ``default``; anything else is stringified"""
    return str(value) if value else default
