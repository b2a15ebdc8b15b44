"""
Ad creation and lookup against the JSON database

admock/services/ads.py

"""
import logging
import secrets
import string
import time
from datetime import datetime, timezone
from typing import Optional

from admock.core.config import Settings, settings as default_settings
from admock.core.database import JsonDatabase
from admock.models.advertising import Ad, AdCreateRequest, Creative, optional_text
from admock.models.base import AdStatus, MusicOption
from admock.services.validation import normalize_objective

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_ad_id() -> str:
    """Time-based ad id with a random base-36 suffix"""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(8))
    return f"ad_{int(time.time() * 1000)}_{suffix}"


def create_ad(db: JsonDatabase, request: AdCreateRequest, settings: Settings = default_settings) -> Ad:
    """Append a validated ad to the database and persist it"""
    ad_id = generate_ad_id()
    with db.mutate() as document:
        ads = document.setdefault("ads", [])
        ad = Ad(
            id=len(ads) + 1,
            ad_id=ad_id,
            creative_id=f"creative_{ad_id}",
            campaign_name=request.campaign_name,
            objective=normalize_objective(request.objective),
            ad_text=request.ad_text,
            cta=optional_text(request.cta),
            music_option=optional_text(request.music_option, MusicOption.NONE.value),
            music_id=optional_text(request.music_id),
            status=AdStatus.UNDER_REVIEW,
            estimated_review_time=settings.REVIEW_ESTIMATE,
            advertiser_id=settings.ADVERTISER_ID,
            user_id=settings.MOCK_USER_ID,
        )
        ads.append(ad.model_dump(mode="json"))

    logger.info(f"Created ad {ad.ad_id} ({ad.objective}) for campaign '{ad.campaign_name}'")
    return ad


def creative_for(ad: Ad) -> Creative:
    return Creative(
        creative_id=ad.creative_id,
        ad_id=ad.ad_id,
        status=ad.status,
        review_estimate=ad.estimated_review_time,
        created_at=datetime.now(timezone.utc).isoformat(),
    )


def find_ad(db: JsonDatabase, ad_id: str) -> Optional[dict]:
    """Find an ad by generated ad_id or by numeric id"""
    for ad in db.collection("ads") or []:
        if ad.get("ad_id") == ad_id or str(ad.get("id")) == ad_id:
            return ad
    return None
