"""
Hostel Student Infrastructure Repositories
==========================================
"""

from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import Integer, Uuid, column, func, select, table
from sqlalchemy.ext.asyncio import AsyncSession

from hostel_service.core import RepositoryException
from hostel_service.hostel_students.application.services import IHostelStudentRepository
from hostel_service.hostel_students.domain.entities import HostelStudent, RoomPlacement
from hostel_service.hostel_students.infrastructure.models import HostelStudentModel
from hostel_service.infrastructure.database import as_utc

# Read-only view of the rooms table for placement checks.
_rooms = table("rooms", column("id", Uuid), column("hostel_id", Uuid), column("capacity", Integer))


def _parse_id(value: str) -> Optional[UUID]:
    try:
        return UUID(str(value))
    except ValueError:
        return None


def _to_entity(model: HostelStudentModel) -> HostelStudent:
    return HostelStudent(
        id=str(model.id),
        hostel_id=str(model.hostel_id),
        room_id=str(model.room_id),
        student_id=model.student_id,
        full_name=model.full_name,
        email=model.email,
        allocated_at=as_utc(model.allocated_at),
        updated_at=as_utc(model.updated_at),
        vacated_at=as_utc(model.vacated_at),
    )


class SQLAlchemyHostelStudentRepository(IHostelStudentRepository):
    """SQLAlchemy implementation of the allocation repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _get_model(self, allocation_id: str) -> Optional[HostelStudentModel]:
        allocation_uuid = _parse_id(allocation_id)
        if allocation_uuid is None:
            return None
        return await self._session.get(HostelStudentModel, allocation_uuid)

    async def list(
        self,
        hostel_id: Optional[str] = None,
        active_only: bool = False,
        limit: int = 100,
        offset: int = 0,
    ) -> List[HostelStudent]:
        stmt = select(HostelStudentModel)
        if hostel_id is not None:
            hostel_uuid = _parse_id(hostel_id)
            if hostel_uuid is None:
                return []
            stmt = stmt.where(HostelStudentModel.hostel_id == hostel_uuid)
        if active_only:
            stmt = stmt.where(HostelStudentModel.vacated_at.is_(None))

        stmt = stmt.order_by(HostelStudentModel.allocated_at.desc()).limit(limit).offset(offset)
        result = await self._session.execute(stmt)
        return [_to_entity(m) for m in result.scalars().all()]

    async def get_by_id(self, allocation_id: str) -> Optional[HostelStudent]:
        model = await self._get_model(allocation_id)
        return _to_entity(model) if model else None

    async def get_room_placement(self, room_id: str) -> Optional[RoomPlacement]:
        room_uuid = _parse_id(room_id)
        if room_uuid is None:
            return None

        stmt = select(_rooms.c.id, _rooms.c.hostel_id, _rooms.c.capacity).where(_rooms.c.id == room_uuid)
        row = (await self._session.execute(stmt)).first()
        if row is None:
            return None
        return RoomPlacement(room_id=str(row.id), hostel_id=str(row.hostel_id), capacity=row.capacity)

    async def count_active_in_room(self, room_id: str) -> int:
        room_uuid = _parse_id(room_id)
        if room_uuid is None:
            return 0

        stmt = select(func.count(HostelStudentModel.id)).where(
            HostelStudentModel.room_id == room_uuid,
            HostelStudentModel.vacated_at.is_(None),
        )
        return (await self._session.execute(stmt)).scalar_one()

    async def has_active_allocation(self, student_id: str) -> bool:
        stmt = select(HostelStudentModel.id).where(
            HostelStudentModel.student_id == student_id,
            HostelStudentModel.vacated_at.is_(None),
        )
        return (await self._session.execute(stmt)).first() is not None

    async def create(self, allocation: HostelStudent) -> HostelStudent:
        model = HostelStudentModel(
            id=uuid4(),
            hostel_id=UUID(allocation.hostel_id),
            room_id=UUID(allocation.room_id),
            student_id=allocation.student_id,
            full_name=allocation.full_name,
            email=allocation.email,
            allocated_at=allocation.allocated_at,
            updated_at=allocation.updated_at,
            vacated_at=allocation.vacated_at,
        )
        self._session.add(model)
        await self._session.flush()

        allocation.id = str(model.id)
        return allocation

    async def update(self, allocation: HostelStudent) -> HostelStudent:
        model = await self._get_model(allocation.id)
        if model is None:
            raise RepositoryException(f"Allocation {allocation.id} not found")

        model.hostel_id = UUID(allocation.hostel_id)
        model.room_id = UUID(allocation.room_id)
        model.full_name = allocation.full_name
        model.email = allocation.email
        model.updated_at = allocation.updated_at
        model.vacated_at = allocation.vacated_at
        await self._session.flush()

        return _to_entity(model)
