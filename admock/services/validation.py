"""
Ad validation rules

admock/services/validation.py

"""
from typing import List
from admock.models.advertising import AdCreateRequest
from admock.models.base import MusicOption, Objective

MIN_CAMPAIGN_NAME_LENGTH = 3
MAX_AD_TEXT_LENGTH = 100

OBJECTIVES = [o.value for o in Objective]


def normalize_objective(value) -> str:
    """Lower-cased objective, or an empty string for non-string input"""
    return value.lower() if isinstance(value, str) else ""


def validate_ad(ad: AdCreateRequest) -> List[str]:
    """
    Check an ad submission against every creation rule.

    Returns one message per failing rule, in rule order. An empty list
    means the ad can be stored.
    """
    errors = []

    name = ad.campaign_name
    if not isinstance(name, str) or len(name.strip()) < MIN_CAMPAIGN_NAME_LENGTH:
        errors.append(f"Campaign name must be at least {MIN_CAMPAIGN_NAME_LENGTH} characters")

    objective = normalize_objective(ad.objective)
    if objective not in OBJECTIVES:
        errors.append('Objective must be "traffic" or "conversions"')

    text = ad.ad_text
    if not isinstance(text, str) or not 1 <= len(text.strip()) <= MAX_AD_TEXT_LENGTH:
        errors.append(f"Ad text is required and must be 1-{MAX_AD_TEXT_LENGTH} characters")

    # Music required for conversions
    if objective == Objective.CONVERSIONS.value:
        if not ad.music_option or ad.music_option == MusicOption.NONE.value:
            errors.append("Music is required for Conversions objective")
        if ad.music_option == MusicOption.EXISTING.value and not ad.music_id:
            errors.append("Please provide a musicId when using an existing music option")

    return errors
