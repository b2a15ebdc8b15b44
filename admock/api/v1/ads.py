"""
Ad endpoints

admock/api/v1/ads.py
"""
from typing import Optional
from fastapi import APIRouter, Depends
from admock.api.deps import get_database, get_settings
from admock.core.config import Settings
from admock.core.database import JsonDatabase
from admock.core.errors import NotFound, ValidationFailed
from admock.models.advertising import AdCreateRequest
from admock.services.ads import create_ad, creative_for, find_ad
from admock.services.validation import validate_ad
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{ad_id}")
async def get_ad(ad_id: str, db: JsonDatabase = Depends(get_database)):
    """Fetch a single ad by its generated ad_id or numeric id"""
    ad = find_ad(db, ad_id)
    if ad is None:
        raise NotFound("Ad not found")
    return {"success": True, "data": {"ad": ad}}


@router.post("")
async def submit_ad(
    request: Optional[AdCreateRequest] = None,
    db: JsonDatabase = Depends(get_database),
    settings: Settings = Depends(get_settings),
):
    """Validate an ad submission and store it for review"""
    request = request or AdCreateRequest()

    errors = validate_ad(request)
    if errors:
        logger.warning(f"Rejected ad submission with {len(errors)} validation error(s): {errors}")
        raise ValidationFailed(errors)

    ad = create_ad(db, request, settings)
    return {
        "success": True,
        "data": {"creative": creative_for(ad).model_dump(mode="json")},
        "message": "Ad created successfully",
    }
