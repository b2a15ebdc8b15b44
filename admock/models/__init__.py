"""

admock/models/_init_.py

"""


from admock.models.base import *
from admock.models.advertising import *
from admock.models.music import *

__all__ = [
    # Base
    "Objective",
    "MusicOption",
    "AdStatus",
    "MusicStatus",
    "MusicValidationResult",
    "ErrorKind",

    # Advertising models
    "AdCreateRequest",
    "Ad",
    "Creative",

    # Music models
    "Music",
    "MusicUploadRequest",
]
