"""
Room Application Layer
======================
"""

from hostel_service.rooms.application.dto import (
    RoomCreateRequest,
    RoomUpdateRequest,
    RoomResponse,
)
from hostel_service.rooms.application.services import (
    IRoomRepository,
    IRoomAppService,
    RoomAppService,
)

__all__ = [
    "RoomCreateRequest",
    "RoomUpdateRequest",
    "RoomResponse",
    "IRoomAppService",
    "RoomAppService",
    "IRoomRepository",
]
