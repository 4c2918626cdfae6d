"""
Hostel Student Domain Entities
==============================

A hostel student is an allocation of a student to a bed in a room. The
allocation stays on record after the student moves out; ``vacated_at``
marks the end of it.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class RoomPlacement:
    """What the allocation rules need to know about a room."""
    room_id: str
    hostel_id: str
    capacity: int


@dataclass
class HostelStudent:
    """Allocation of a student to a room."""

    id: Optional[str]
    hostel_id: str
    room_id: str
    student_id: str
    full_name: str
    email: Optional[str]
    allocated_at: datetime
    updated_at: datetime
    vacated_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.student_id or not self.student_id.strip():
            raise ValueError("student_id cannot be empty")
        if self.vacated_at and self.vacated_at < self.allocated_at:
            raise ValueError("vacated_at cannot be before allocated_at")

    @property
    def is_active(self) -> bool:
        return self.vacated_at is None

    @classmethod
    def allocate(
        cls,
        placement: RoomPlacement,
        student_id: str,
        full_name: str,
        email: Optional[str] = None,
    ) -> "HostelStudent":
        now = datetime.now(timezone.utc)
        return cls(
            id=None,
            hostel_id=placement.hostel_id,
            room_id=placement.room_id,
            student_id=student_id.strip(),
            full_name=full_name,
            email=email,
            allocated_at=now,
            updated_at=now,
        )

    def move_to(self, placement: RoomPlacement) -> None:
        self.room_id = placement.room_id
        self.hostel_id = placement.hostel_id
        self.touch()

    def vacate(self, timestamp: Optional[datetime] = None) -> None:
        self.vacated_at = timestamp or datetime.now(timezone.utc)
        self.updated_at = self.vacated_at

    def touch(self, timestamp: Optional[datetime] = None) -> None:
        self.updated_at = timestamp or datetime.now(timezone.utc)
