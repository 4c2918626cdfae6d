"""
Hostel Application Services
===========================

Application services orchestrate business logic and coordinate between
domain entities and repositories.

Following SOLID principles:
- Single Responsibility: Each service has one clear purpose
- Dependency Inversion: Depend on abstractions (repositories), not concrete implementations
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from hostel_service.core import ResourceNotFoundException, ValidationException
from hostel_service.hostels.application.dto import HostelCreateRequest, HostelUpdateRequest
from hostel_service.hostels.domain.entities import Hostel
from hostel_service.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


# ========== Repository Interface (Dependency Inversion) ==========

class IHostelRepository(ABC):
    """Interface for hostel data access."""

    @abstractmethod
    async def list(self, limit: int = 100, offset: int = 0) -> List[Hostel]:
        """List hostels ordered by name."""

    @abstractmethod
    async def get_by_id(self, hostel_id: str) -> Optional[Hostel]:
        """Get hostel by ID."""

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Hostel]:
        """Get hostel by its unique name."""

    @abstractmethod
    async def create(self, hostel: Hostel) -> Hostel:
        """Persist a new hostel and return it with its ID."""

    @abstractmethod
    async def update(self, hostel: Hostel) -> Hostel:
        """Persist changes to an existing hostel."""

    @abstractmethod
    async def delete(self, hostel_id: str) -> bool:
        """Delete a hostel. Returns False if it did not exist."""


# ========== Application Service ==========

class IHostelAppService(ABC):
    """Use cases exposed to the hostel controllers."""

    @abstractmethod
    async def list_hostels(self, limit: int = 100, offset: int = 0) -> List[Hostel]:
        ...

    @abstractmethod
    async def get_hostel(self, hostel_id: str) -> Hostel:
        ...

    @abstractmethod
    async def create_hostel(self, request: HostelCreateRequest) -> Hostel:
        ...

    @abstractmethod
    async def update_hostel(self, hostel_id: str, request: HostelUpdateRequest) -> Hostel:
        ...

    @abstractmethod
    async def delete_hostel(self, hostel_id: str) -> None:
        ...


class HostelAppService(IHostelAppService):
    """Hostel CRUD backed by an :class:`IHostelRepository`."""

    def __init__(self, repository: IHostelRepository):
        self._repository = repository

    async def list_hostels(self, limit: int = 100, offset: int = 0) -> List[Hostel]:
        return await self._repository.list(limit=limit, offset=offset)

    async def get_hostel(self, hostel_id: str) -> Hostel:
        hostel = await self._repository.get_by_id(hostel_id)
        if hostel is None:
            raise ResourceNotFoundException("Hostel", hostel_id)
        return hostel

    async def create_hostel(self, request: HostelCreateRequest) -> Hostel:
        await self._ensure_name_available(request.name)

        hostel = Hostel.new(
            name=request.name,
            address=request.address,
            gender=request.gender,
            capacity=request.capacity,
        )
        created = await self._repository.create(hostel)
        logger.info("Hostel created", extra={"hostel_id": created.id, "hostel_name": created.name})
        return created

    async def update_hostel(self, hostel_id: str, request: HostelUpdateRequest) -> Hostel:
        hostel = await self.get_hostel(hostel_id)

        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        if "name" in changes and changes["name"].strip() != hostel.name:
            await self._ensure_name_available(changes["name"], exclude_id=hostel.id)
            hostel.name = changes["name"].strip()
        if "address" in changes:
            hostel.address = changes["address"]
        if "gender" in changes:
            hostel.gender = changes["gender"]
        if "capacity" in changes:
            hostel.capacity = changes["capacity"]
        hostel.touch()

        return await self._repository.update(hostel)

    async def delete_hostel(self, hostel_id: str) -> None:
        if not await self._repository.delete(hostel_id):
            raise ResourceNotFoundException("Hostel", hostel_id)
        logger.info("Hostel deleted", extra={"hostel_id": hostel_id})

    async def _ensure_name_available(self, name: str, exclude_id: Optional[str] = None) -> None:
        existing = await self._repository.get_by_name(name.strip())
        if existing is not None and existing.id != exclude_id:
            raise ValidationException(
                f"A hostel named '{name.strip()}' already exists",
                {"field": "name"}
            )
