"""
Room Domain Entities
====================
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass
class Room:
    """A room inside a hostel. Capacity is the number of beds."""

    id: Optional[str]
    hostel_id: str
    room_number: str
    capacity: int
    floor: int
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        if not self.room_number or not self.room_number.strip():
            raise ValueError("room_number cannot be empty")
        if self.capacity < 1:
            raise ValueError("capacity must be at least 1")

    @classmethod
    def new(cls, hostel_id: str, room_number: str, capacity: int, floor: int = 0) -> "Room":
        now = datetime.now(timezone.utc)
        return cls(
            id=None,
            hostel_id=hostel_id,
            room_number=room_number.strip(),
            capacity=capacity,
            floor=floor,
            created_at=now,
            updated_at=now,
        )

    def touch(self, timestamp: Optional[datetime] = None) -> None:
        self.updated_at = timestamp or datetime.now(timezone.utc)
