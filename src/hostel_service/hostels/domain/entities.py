"""
Hostel Domain Entities
======================

Pure Python domain entities for hostels.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class HostelGender(str, Enum):
    """Who a hostel accommodates."""
    MALE = "male"
    FEMALE = "female"
    MIXED = "mixed"


@dataclass
class Hostel:
    """
    Hostel entity.

    A building that holds rooms; capacity is the total number of beds.
    """

    id: Optional[str]
    name: str
    address: str
    gender: HostelGender
    capacity: int
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate hostel on initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("name cannot be empty")
        if self.capacity < 0:
            raise ValueError("capacity cannot be negative")
        if self.updated_at < self.created_at:
            raise ValueError("updated_at cannot be before created_at")

    @classmethod
    def new(cls, name: str, address: str, gender: HostelGender, capacity: int) -> "Hostel":
        now = datetime.now(timezone.utc)
        return cls(
            id=None,
            name=name.strip(),
            address=address,
            gender=HostelGender(gender),
            capacity=capacity,
            created_at=now,
            updated_at=now,
        )

    def touch(self, timestamp: Optional[datetime] = None) -> None:
        """Record a modification."""
        self.updated_at = timestamp or datetime.now(timezone.utc)
