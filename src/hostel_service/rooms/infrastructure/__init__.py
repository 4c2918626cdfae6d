from hostel_service.rooms.infrastructure.models import RoomModel
from hostel_service.rooms.infrastructure.repositories import SQLAlchemyRoomRepository

__all__ = ["RoomModel", "SQLAlchemyRoomRepository"]
