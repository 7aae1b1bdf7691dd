"""
Shared dependencies for API endpoints.
"""

from fastapi import Request

from services.room_service import RoomService


def get_room_service(request: Request) -> RoomService:
    """Return the room owned by the running application."""
    return request.app.state.room
