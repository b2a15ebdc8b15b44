"""

admock/core/config.py

"""


from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # App
    APP_NAME: str = "Ad Wizard Mock Backend"
    DEBUG: bool = True
    API_PREFIX: str = "/api"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # JSON database
    DB_JSON_FILE: str = "db.json"
    DB_INITIAL_FILE: str = "db.initial.json"

    # Mock OAuth
    SECRET_KEY: str = "mock-oauth-secret"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_SECONDS: int = 3600
    OAUTH_SCOPE: str = "user.info.basic,ads.identity"
    MOCK_OPEN_ID: str = "open_id_123456789"

    # Ads
    ADVERTISER_ID: str = "adv_789012345"
    MOCK_USER_ID: int = 1
    REVIEW_ESTIMATE: str = "24-48 hours"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
