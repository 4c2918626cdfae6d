"""
Hostel Student Application Services
===================================

Allocation rules:
- A room never holds more active students than its capacity
- A student holds at most one active allocation
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from hostel_service.core import ResourceNotFoundException, ValidationException
from hostel_service.hostel_students.application.dto import (
    HostelStudentCreateRequest,
    HostelStudentUpdateRequest,
)
from hostel_service.hostel_students.domain.entities import HostelStudent, RoomPlacement
from hostel_service.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class IHostelStudentRepository(ABC):
    """Interface for allocation data access."""

    @abstractmethod
    async def list(
        self,
        hostel_id: Optional[str] = None,
        active_only: bool = False,
        limit: int = 100,
        offset: int = 0,
    ) -> List[HostelStudent]:
        """List allocations, newest first."""

    @abstractmethod
    async def get_by_id(self, allocation_id: str) -> Optional[HostelStudent]:
        """Get allocation by ID."""

    @abstractmethod
    async def get_room_placement(self, room_id: str) -> Optional[RoomPlacement]:
        """Look up the hostel and capacity of a room."""

    @abstractmethod
    async def count_active_in_room(self, room_id: str) -> int:
        """Number of students currently allocated to a room."""

    @abstractmethod
    async def has_active_allocation(self, student_id: str) -> bool:
        """Check whether a student already holds an active allocation."""

    @abstractmethod
    async def create(self, allocation: HostelStudent) -> HostelStudent:
        """Persist a new allocation."""

    @abstractmethod
    async def update(self, allocation: HostelStudent) -> HostelStudent:
        """Persist changes to an allocation."""


class IHostelStudentAppService(ABC):
    """Use cases exposed to the hostel student controllers."""

    @abstractmethod
    async def list_students(
        self,
        hostel_id: Optional[str] = None,
        active_only: bool = False,
        limit: int = 100,
        offset: int = 0,
    ) -> List[HostelStudent]:
        ...

    @abstractmethod
    async def get_student(self, allocation_id: str) -> HostelStudent:
        ...

    @abstractmethod
    async def allocate_student(self, request: HostelStudentCreateRequest) -> HostelStudent:
        ...

    @abstractmethod
    async def update_student(self, allocation_id: str, request: HostelStudentUpdateRequest) -> HostelStudent:
        ...

    @abstractmethod
    async def vacate_student(self, allocation_id: str) -> HostelStudent:
        ...


class HostelStudentAppService(IHostelStudentAppService):
    """Allocation use cases backed by an :class:`IHostelStudentRepository`."""

    def __init__(self, repository: IHostelStudentRepository):
        self._repository = repository

    async def list_students(
        self,
        hostel_id: Optional[str] = None,
        active_only: bool = False,
        limit: int = 100,
        offset: int = 0,
    ) -> List[HostelStudent]:
        return await self._repository.list(
            hostel_id=hostel_id, active_only=active_only, limit=limit, offset=offset
        )

    async def get_student(self, allocation_id: str) -> HostelStudent:
        allocation = await self._repository.get_by_id(allocation_id)
        if allocation is None:
            raise ResourceNotFoundException("HostelStudent", allocation_id)
        return allocation

    async def allocate_student(self, request: HostelStudentCreateRequest) -> HostelStudent:
        placement = await self._placement_with_free_bed(request.room_id)

        if await self._repository.has_active_allocation(request.student_id.strip()):
            raise ValidationException(
                f"Student '{request.student_id.strip()}' already has an active allocation",
                {"field": "student_id"}
            )

        allocation = HostelStudent.allocate(
            placement,
            student_id=request.student_id,
            full_name=request.full_name,
            email=request.email,
        )
        created = await self._repository.create(allocation)
        logger.info(
            "Student allocated",
            extra={"allocation_id": created.id, "room_id": created.room_id, "hostel_id": created.hostel_id}
        )
        return created

    async def update_student(self, allocation_id: str, request: HostelStudentUpdateRequest) -> HostelStudent:
        allocation = await self.get_student(allocation_id)
        changes = request.model_dump(exclude_unset=True, exclude_none=True)

        if "room_id" in changes and changes["room_id"] != allocation.room_id:
            if not allocation.is_active:
                raise ValidationException("A vacated allocation cannot be moved", {"field": "room_id"})
            allocation.move_to(await self._placement_with_free_bed(changes["room_id"]))
        if "full_name" in changes:
            allocation.full_name = changes["full_name"]
        if "email" in changes:
            allocation.email = changes["email"]
        allocation.touch()

        return await self._repository.update(allocation)

    async def vacate_student(self, allocation_id: str) -> HostelStudent:
        allocation = await self.get_student(allocation_id)
        if not allocation.is_active:
            raise ValidationException("Allocation has already been vacated")

        allocation.vacate()
        updated = await self._repository.update(allocation)
        logger.info("Student vacated", extra={"allocation_id": allocation_id, "room_id": updated.room_id})
        return updated

    async def _placement_with_free_bed(self, room_id: str) -> RoomPlacement:
        placement = await self._repository.get_room_placement(room_id)
        if placement is None:
            raise ResourceNotFoundException("Room", room_id)

        occupied = await self._repository.count_active_in_room(room_id)
        if occupied >= placement.capacity:
            raise ValidationException(
                "Room is full",
                {"field": "room_id", "capacity": placement.capacity, "occupied": occupied}
            )
        return placement
