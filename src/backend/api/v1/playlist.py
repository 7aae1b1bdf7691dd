"""
Playlist endpoints.

Each call to ``/next`` counts as a play: both strategies' picks are
appended to the selection history.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from api.deps import get_room_service
from schemas.emotion import NextSelectionResponse
from services.room_service import RoomService

router = APIRouter()


@router.post("/next", response_model=NextSelectionResponse)
async def next_selection(
    room: Annotated[RoomService, Depends(get_room_service)],
) -> NextSelectionResponse:
    """Select the next emotion under the baseline and fairness strategies."""
    result = await room.select_next()
    return NextSelectionResponse(baseline=result.baseline, fairness=result.fairness)


# Legacy GET route for polling clients
router.add_api_route(
    "/next",
    next_selection,
    methods=["GET"],
    response_model=NextSelectionResponse,
    include_in_schema=False,
)
