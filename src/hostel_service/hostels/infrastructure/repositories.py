"""
Hostel Infrastructure Repositories
==================================

SQLAlchemy implementation of the hostel repository interface.
"""

from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from hostel_service.core import RepositoryException
from hostel_service.hostels.application.services import IHostelRepository
from hostel_service.hostels.domain.entities import Hostel, HostelGender
from hostel_service.hostels.infrastructure.models import HostelModel
from hostel_service.infrastructure.database import as_utc


def _parse_id(hostel_id: str) -> Optional[UUID]:
    try:
        return UUID(str(hostel_id))
    except ValueError:
        return None


def _to_entity(model: HostelModel) -> Hostel:
    return Hostel(
        id=str(model.id),
        name=model.name,
        address=model.address,
        gender=HostelGender(model.gender),
        capacity=model.capacity,
        created_at=as_utc(model.created_at),
        updated_at=as_utc(model.updated_at),
    )


class SQLAlchemyHostelRepository(IHostelRepository):
    """
    SQLAlchemy implementation of hostel repository.

    Handles persistence of Hostel entities using async SQLAlchemy.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _get_model(self, hostel_id: str) -> Optional[HostelModel]:
        hostel_uuid = _parse_id(hostel_id)
        if hostel_uuid is None:
            return None
        return await self._session.get(HostelModel, hostel_uuid)

    async def list(self, limit: int = 100, offset: int = 0) -> List[Hostel]:
        stmt = select(HostelModel).order_by(HostelModel.name).limit(limit).offset(offset)
        result = await self._session.execute(stmt)
        return [_to_entity(m) for m in result.scalars().all()]

    async def get_by_id(self, hostel_id: str) -> Optional[Hostel]:
        model = await self._get_model(hostel_id)
        return _to_entity(model) if model else None

    async def get_by_name(self, name: str) -> Optional[Hostel]:
        stmt = select(HostelModel).where(HostelModel.name == name)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_entity(model) if model else None

    async def create(self, hostel: Hostel) -> Hostel:
        model = HostelModel(
            id=uuid4(),
            name=hostel.name,
            address=hostel.address,
            gender=hostel.gender.value,
            capacity=hostel.capacity,
            created_at=hostel.created_at,
            updated_at=hostel.updated_at,
        )
        self._session.add(model)
        await self._session.flush()

        hostel.id = str(model.id)
        return hostel

    async def update(self, hostel: Hostel) -> Hostel:
        model = await self._get_model(hostel.id)
        if model is None:
            raise RepositoryException(f"Hostel {hostel.id} not found")

        model.name = hostel.name
        model.address = hostel.address
        model.gender = hostel.gender.value
        model.capacity = hostel.capacity
        model.updated_at = hostel.updated_at
        await self._session.flush()

        return _to_entity(model)

    async def delete(self, hostel_id: str) -> bool:
        hostel_uuid = _parse_id(hostel_id)
        if hostel_uuid is None:
            return False

        result = await self._session.execute(delete(HostelModel).where(HostelModel.id == hostel_uuid))
        return result.rowcount > 0
