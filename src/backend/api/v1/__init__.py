"""
API v1 router aggregating all endpoints.
"""

from fastapi import APIRouter

from api.v1.emotions import router as emotions_router
from api.v1.playlist import router as playlist_router
from api.v1.room import router as room_router
from api.v1.stats import router as stats_router

router = APIRouter()

router.include_router(emotions_router, prefix="/emotions", tags=["Emotions"])
router.include_router(playlist_router, prefix="/playlist", tags=["Playlist"])
router.include_router(stats_router, prefix="/stats", tags=["Statistics"])
router.include_router(room_router, tags=["Room"])
