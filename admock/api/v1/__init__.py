"""
API v1 routers

admock/api/v1/_init_.py
"""
from fastapi import APIRouter

# Create the main API router
api_router = APIRouter()

# Import individual routers
from admock.api.v1.oauth import router as oauth_router
from admock.api.v1.admin import router as admin_router
from admock.api.v1.ads import router as ads_router
from admock.api.v1.music import router as music_router
from admock.api.v1.collections import router as collections_router



# Include all routers; the generic collections router must stay last
api_router.include_router(oauth_router, prefix="/oauth", tags=["oauth"])
api_router.include_router(admin_router, prefix="/__admin", tags=["admin"])
api_router.include_router(ads_router, prefix="/ads", tags=["ads"])
api_router.include_router(music_router, prefix="/music", tags=["music"])
api_router.include_router(collections_router, prefix="", tags=["collections"])
