"""
Room Application DTOs
=====================
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RoomCreateRequest(BaseModel):
    """Request model for adding a room to a hostel."""
    model_config = ConfigDict(str_strip_whitespace=True)

    hostel_id: str = Field(..., description="UUID of the hostel the room belongs to")
    room_number: str = Field(..., min_length=1, max_length=50, description="Room number, unique within the hostel")
    capacity: int = Field(..., ge=1, le=50, description="Number of beds")
    floor: int = Field(default=0, ge=0, description="Floor number")


class RoomUpdateRequest(BaseModel):
    """Request model for updating a room. The hostel cannot be changed."""
    model_config = ConfigDict(str_strip_whitespace=True)

    room_number: Optional[str] = Field(None, min_length=1, max_length=50)
    capacity: Optional[int] = Field(None, ge=1, le=50)
    floor: Optional[int] = Field(None, ge=0)


class RoomResponse(BaseModel):
    """Response model for a room."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    hostel_id: str
    room_number: str
    capacity: int
    floor: int
    created_at: datetime
    updated_at: datetime
