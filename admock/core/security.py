from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from admock.core.config import Settings, settings as default_settings
import secrets

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None, settings: Settings = default_settings):
    """Create JWT access token"""
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(seconds=settings.ACCESS_TOKEN_EXPIRE_SECONDS)
    # jti is unique per token, even within the same second
    to_encode.update({"exp": expire, "iat": now, "jti": secrets.token_hex(8)})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt

def decode_access_token(token: str, settings: Settings = default_settings):
    """Decode JWT access token"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return payload
    except JWTError:
        return None

def generate_refresh_token() -> str:
    """Generate a random refresh token"""
    return secrets.token_urlsafe(32)

def create_token_bundle(settings: Settings = default_settings) -> dict:
    """Mint the token response returned for any authorization code"""
    return {
        "access_token": create_access_token(
            {"sub": settings.MOCK_OPEN_ID, "scope": settings.OAUTH_SCOPE},
            settings=settings,
        ),
        "refresh_token": generate_refresh_token(),
        "expires_in": settings.ACCESS_TOKEN_EXPIRE_SECONDS,
        "open_id": settings.MOCK_OPEN_ID,
        "scope": settings.OAUTH_SCOPE,
        "token_type": "Bearer",
    }
