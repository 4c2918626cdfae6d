"""
Room Infrastructure Repositories
================================
"""

from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Uuid, column, delete, func, select, table
from sqlalchemy.ext.asyncio import AsyncSession

from hostel_service.core import RepositoryException
from hostel_service.infrastructure.database import as_utc
from hostel_service.rooms.application.services import IRoomRepository
from hostel_service.rooms.domain.entities import Room
from hostel_service.rooms.infrastructure.models import RoomModel

# Lightweight handle on the hostels table; the room slice only needs its key.
_hostels = table("hostels", column("id", Uuid))
# Allocation columns needed to count who currently occupies a room.
_allocations = table(
    "hostel_students",
    column("id", Uuid),
    column("room_id", Uuid),
    column("vacated_at", DateTime(timezone=True)),
)


def _parse_id(value: str) -> Optional[UUID]:
    try:
        return UUID(str(value))
    except ValueError:
        return None


def _to_entity(model: RoomModel) -> Room:
    return Room(
        id=str(model.id),
        hostel_id=str(model.hostel_id),
        room_number=model.room_number,
        capacity=model.capacity,
        floor=model.floor,
        created_at=as_utc(model.created_at),
        updated_at=as_utc(model.updated_at),
    )


class SQLAlchemyRoomRepository(IRoomRepository):
    """SQLAlchemy implementation of room repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _get_model(self, room_id: str) -> Optional[RoomModel]:
        room_uuid = _parse_id(room_id)
        if room_uuid is None:
            return None
        return await self._session.get(RoomModel, room_uuid)

    async def list(self, hostel_id: Optional[str] = None, limit: int = 100, offset: int = 0) -> List[Room]:
        stmt = select(RoomModel)
        if hostel_id is not None:
            hostel_uuid = _parse_id(hostel_id)
            if hostel_uuid is None:
                return []
            stmt = stmt.where(RoomModel.hostel_id == hostel_uuid)

        stmt = stmt.order_by(RoomModel.floor, RoomModel.room_number).limit(limit).offset(offset)
        result = await self._session.execute(stmt)
        return [_to_entity(m) for m in result.scalars().all()]

    async def get_by_id(self, room_id: str) -> Optional[Room]:
        model = await self._get_model(room_id)
        return _to_entity(model) if model else None

    async def hostel_exists(self, hostel_id: str) -> bool:
        hostel_uuid = _parse_id(hostel_id)
        if hostel_uuid is None:
            return False
        stmt = select(_hostels.c.id).where(_hostels.c.id == hostel_uuid)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def number_taken(self, hostel_id: str, room_number: str, exclude_id: Optional[str] = None) -> bool:
        hostel_uuid = _parse_id(hostel_id)
        if hostel_uuid is None:
            return False

        stmt = select(RoomModel.id).where(
            RoomModel.hostel_id == hostel_uuid,
            RoomModel.room_number == room_number,
        )
        exclude_uuid = _parse_id(exclude_id) if exclude_id else None
        if exclude_uuid is not None:
            stmt = stmt.where(RoomModel.id != exclude_uuid)

        result = await self._session.execute(stmt)
        return result.first() is not None

    async def count_active_allocations(self, room_id: str) -> int:
        room_uuid = _parse_id(room_id)
        if room_uuid is None:
            return 0

        stmt = select(func.count(_allocations.c.id)).where(
            _allocations.c.room_id == room_uuid,
            _allocations.c.vacated_at.is_(None),
        )
        return (await self._session.execute(stmt)).scalar_one()

    async def create(self, room: Room) -> Room:
        model = RoomModel(
            id=uuid4(),
            hostel_id=UUID(room.hostel_id),
            room_number=room.room_number,
            capacity=room.capacity,
            floor=room.floor,
            created_at=room.created_at,
            updated_at=room.updated_at,
        )
        self._session.add(model)
        await self._session.flush()

        room.id = str(model.id)
        return room

    async def update(self, room: Room) -> Room:
        model = await self._get_model(room.id)
        if model is None:
            raise RepositoryException(f"Room {room.id} not found")

        model.room_number = room.room_number
        model.capacity = room.capacity
        model.floor = room.floor
        model.updated_at = room.updated_at
        await self._session.flush()

        return _to_entity(model)

    async def delete(self, room_id: str) -> bool:
        room_uuid = _parse_id(room_id)
        if room_uuid is None:
            return False

        result = await self._session.execute(delete(RoomModel).where(RoomModel.id == room_uuid))
        return result.rowcount > 0
