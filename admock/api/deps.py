#admock/api/deps.py

from fastapi import Request
from admock.core.config import Settings
from admock.core.database import get_database

__all__ = ["get_database", "get_settings"]

def get_settings(request: Request) -> Settings:
    """Settings the running application was built with"""
    return request.app.state.settings
