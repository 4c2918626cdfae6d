"""
Room Application Services
=========================
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from hostel_service.core import ResourceNotFoundException, ValidationException
from hostel_service.rooms.application.dto import RoomCreateRequest, RoomUpdateRequest
from hostel_service.rooms.domain.entities import Room
from hostel_service.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class IRoomRepository(ABC):
    """Interface for room data access."""

    @abstractmethod
    async def list(self, hostel_id: Optional[str] = None, limit: int = 100, offset: int = 0) -> List[Room]:
        """List rooms, optionally restricted to one hostel."""

    @abstractmethod
    async def get_by_id(self, room_id: str) -> Optional[Room]:
        """Get room by ID."""

    @abstractmethod
    async def hostel_exists(self, hostel_id: str) -> bool:
        """Check whether the hostel a room points at exists."""

    @abstractmethod
    async def number_taken(self, hostel_id: str, room_number: str, exclude_id: Optional[str] = None) -> bool:
        """Check whether a room number is already used in a hostel."""

    @abstractmethod
    async def count_active_allocations(self, room_id: str) -> int:
        """Number of students currently allocated to a room."""

    @abstractmethod
    async def create(self, room: Room) -> Room:
        """Persist a new room."""

    @abstractmethod
    async def update(self, room: Room) -> Room:
        """Persist changes to a room."""

    @abstractmethod
    async def delete(self, room_id: str) -> bool:
        """Delete a room. Returns False if it did not exist."""


class IRoomAppService(ABC):
    """Use cases exposed to the room controllers."""

    @abstractmethod
    async def list_rooms(self, hostel_id: Optional[str] = None, limit: int = 100, offset: int = 0) -> List[Room]:
        ...

    @abstractmethod
    async def get_room(self, room_id: str) -> Room:
        ...

    @abstractmethod
    async def create_room(self, request: RoomCreateRequest) -> Room:
        ...

    @abstractmethod
    async def update_room(self, room_id: str, request: RoomUpdateRequest) -> Room:
        ...

    @abstractmethod
    async def delete_room(self, room_id: str) -> None:
        ...


class RoomAppService(IRoomAppService):
    """Room CRUD backed by an :class:`IRoomRepository`."""

    def __init__(self, repository: IRoomRepository):
        self._repository = repository

    async def list_rooms(self, hostel_id: Optional[str] = None, limit: int = 100, offset: int = 0) -> List[Room]:
        return await self._repository.list(hostel_id=hostel_id, limit=limit, offset=offset)

    async def get_room(self, room_id: str) -> Room:
        room = await self._repository.get_by_id(room_id)
        if room is None:
            raise ResourceNotFoundException("Room", room_id)
        return room

    async def create_room(self, request: RoomCreateRequest) -> Room:
        if not await self._repository.hostel_exists(request.hostel_id):
            raise ResourceNotFoundException("Hostel", request.hostel_id)
        await self._ensure_number_available(request.hostel_id, request.room_number)

        room = Room.new(
            hostel_id=request.hostel_id,
            room_number=request.room_number,
            capacity=request.capacity,
            floor=request.floor,
        )
        created = await self._repository.create(room)
        logger.info("Room created", extra={"room_id": created.id, "hostel_id": created.hostel_id})
        return created

    async def update_room(self, room_id: str, request: RoomUpdateRequest) -> Room:
        room = await self.get_room(room_id)

        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        if "room_number" in changes and changes["room_number"].strip() != room.room_number:
            await self._ensure_number_available(room.hostel_id, changes["room_number"], exclude_id=room.id)
            room.room_number = changes["room_number"].strip()
        if "capacity" in changes:
            if changes["capacity"] < room.capacity:
                await self._ensure_capacity_fits_occupants(room, changes["capacity"])
            room.capacity = changes["capacity"]
        if "floor" in changes:
            room.floor = changes["floor"]
        room.touch()

        return await self._repository.update(room)

    async def delete_room(self, room_id: str) -> None:
        if not await self._repository.delete(room_id):
            raise ResourceNotFoundException("Room", room_id)
        logger.info("Room deleted", extra={"room_id": room_id})

    async def _ensure_capacity_fits_occupants(self, room: Room, capacity: int) -> None:
        occupied = await self._repository.count_active_allocations(room.id)
        if capacity < occupied:
            raise ValidationException(
                f"Room '{room.room_number}' has {occupied} active allocations, more than a capacity of {capacity}",
                {"field": "capacity", "capacity": capacity, "occupied": occupied}
            )

    async def _ensure_number_available(self, hostel_id: str, room_number: str, exclude_id: Optional[str] = None) -> None:
        if await self._repository.number_taken(hostel_id, room_number.strip(), exclude_id=exclude_id):
            raise ValidationException(
                f"Room '{room_number.strip()}' already exists in this hostel",
                {"field": "room_number"}
            )
