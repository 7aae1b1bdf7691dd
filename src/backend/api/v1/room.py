"""
Room administration endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from api.deps import get_room_service
from schemas.emotion import SuccessResponse
from services.room_service import RoomService

router = APIRouter()


@router.post("/reset", response_model=SuccessResponse)
async def reset_room(
    room: Annotated[RoomService, Depends(get_room_service)],
) -> SuccessResponse:
    """Delete all votes and the whole selection history."""
    await room.reset()
    return SuccessResponse()
