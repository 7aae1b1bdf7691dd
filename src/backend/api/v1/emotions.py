"""
Emotion vote endpoints.

Participants report their current emotion; the summary shows active votes
within the freshness window.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from api.deps import get_room_service
from schemas.converters import distribution_to_counts, emotion_catalog
from schemas.emotion import EmotionCount, EmotionInfoResponse, EmotionSubmit, SuccessResponse
from services.room_service import RoomService

router = APIRouter()

Room = Annotated[RoomService, Depends(get_room_service)]


@router.get("", response_model=list[EmotionInfoResponse])
async def list_emotions() -> list[EmotionInfoResponse]:
    """Supported emotions in canonical order, with display metadata."""
    return emotion_catalog()


@router.post("", response_model=SuccessResponse)
async def submit_emotion(payload: EmotionSubmit, room: Room) -> SuccessResponse:
    """
    Record the caller's current emotion.

    A participant has at most one vote; submitting again replaces it and
    refreshes its timestamp. Unknown emotions are rejected with 400.
    """
    await room.submit_vote(payload.user_id, payload.emotion)
    return SuccessResponse()


@router.get("/summary", response_model=list[EmotionCount])
async def emotion_summary(room: Room) -> list[EmotionCount]:
    """Active vote counts per emotion; emotions without votes are omitted."""
    return distribution_to_counts(await room.get_distribution())
