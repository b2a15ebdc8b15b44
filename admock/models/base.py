"""
admock/models/base.py
"""


from enum import Enum

# Enums
class Objective(str, Enum):
    TRAFFIC = "traffic"
    CONVERSIONS = "conversions"

class MusicOption(str, Enum):
    NONE = "none"
    EXISTING = "existing"
    CUSTOM = "custom"

class AdStatus(str, Enum):
    UNDER_REVIEW = "UNDER_REVIEW"

class MusicStatus(str, Enum):
    APPROVED = "APPROVED"
    PENDING_REVIEW = "PENDING_REVIEW"
    REJECTED = "REJECTED"

class MusicValidationResult(str, Enum):
    """Outcome of a catalog lookup for a music id"""
    ELIGIBLE = "eligible"
    INELIGIBLE = "ineligible"
    NOT_FOUND = "not_found"

class ErrorKind(str, Enum):
    """Value of the ``type`` field in every error body"""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"
