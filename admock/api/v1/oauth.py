"""
Mock OAuth endpoints

admock/api/v1/oauth.py

"""
from typing import Any, Optional
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from admock.api.deps import get_settings
from admock.core.config import Settings
from admock.core.security import create_access_token, create_token_bundle, decode_access_token
import logging


logger = logging.getLogger(__name__)

router = APIRouter()

class TokenRequest(BaseModel):
    code: Any = None

class RefreshRequest(BaseModel):
    refresh_token: Any = None

class ValidateTokenRequest(BaseModel):
    access_token: Any = None

class TokenBundle(BaseModel):
    access_token: str
    refresh_token: str
    expires_in: int
    open_id: str
    scope: str
    token_type: str

class RefreshedToken(BaseModel):
    access_token: str
    expires_in: int
    token_type: str = "Bearer"

class TokenValidity(BaseModel):
    valid: bool
    open_id: Optional[str] = None


@router.post("/token", response_model=TokenBundle)
async def exchange_code(request: Optional[TokenRequest] = None, settings: Settings = Depends(get_settings)):
    """Exchange any authorization code for a fresh token bundle"""
    logger.info(f"Minting mock token for code={request.code if request else None!r}")
    return create_token_bundle(settings)


@router.post("/refresh", response_model=RefreshedToken)
async def refresh(request: Optional[RefreshRequest] = None, settings: Settings = Depends(get_settings)):
    """Issue a new access token; the refresh token is not checked"""
    access_token = create_access_token(
        {"sub": settings.MOCK_OPEN_ID, "scope": settings.OAUTH_SCOPE},
        settings=settings,
    )
    return RefreshedToken(access_token=access_token, expires_in=settings.ACCESS_TOKEN_EXPIRE_SECONDS)


@router.post("/validate", response_model=TokenValidity)
async def validate_token(request: Optional[ValidateTokenRequest] = None, settings: Settings = Depends(get_settings)):
    token = request.access_token if request else None
    payload = decode_access_token(token, settings=settings) if isinstance(token, str) and token else None
    if not payload:
        return TokenValidity(valid=False)
    return TokenValidity(valid=True, open_id=payload.get("sub"))
