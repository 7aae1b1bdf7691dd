"""
Room statistics endpoints.

Exposes the selection history alongside the current vote distribution,
and the per-strategy coverage comparison.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_room_service
from models.emotion import SelectionStrategy
from schemas.converters import report_to_response, stats_to_response
from schemas.emotion import SatisfactionResponse, StatsResponse
from services.room_service import RoomService

router = APIRouter()

MAX_HISTORY_LIMIT = 1000


@router.get(
    "",
    response_model=StatsResponse,
    summary="Get selection history and current distribution",
)
async def get_stats(
    room: Annotated[RoomService, Depends(get_room_service)],
    limit: Optional[int] = Query(
        None,
        ge=1,
        le=MAX_HISTORY_LIMIT,
        description="Maximum history rows (defaults to STATS_HISTORY_LIMIT)",
    ),
    strategy: Optional[SelectionStrategy] = Query(
        None,
        description="Only return selections made by this strategy",
    ),
) -> StatsResponse:
    """History is ordered most recent first."""
    stats = await room.get_stats(limit=limit, strategy=strategy)
    return stats_to_response(stats)


@router.get(
    "/satisfaction",
    response_model=SatisfactionResponse,
    summary="Compare strategy coverage",
    description="""
    For each strategy, the percentage of currently requested emotions that
    appear among its most recent selections. Returns 100 for both when no
    one has voted recently. This is a proxy metric, not a utility measure.
    """,
)
async def get_satisfaction(
    room: Annotated[RoomService, Depends(get_room_service)],
) -> SatisfactionResponse:
    return report_to_response(await room.evaluate())
