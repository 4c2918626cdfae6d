"""
Hostel Student Application DTOs
===============================
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class HostelStudentCreateRequest(BaseModel):
    """Request model for allocating a student to a room."""
    model_config = ConfigDict(str_strip_whitespace=True)

    room_id: str = Field(..., description="UUID of the room; the hostel is taken from the room")
    student_id: str = Field(..., min_length=1, max_length=100, description="Student registration number")
    full_name: str = Field(..., min_length=1, max_length=200)
    email: Optional[str] = Field(None, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")


class HostelStudentUpdateRequest(BaseModel):
    """Request model for updating an allocation. Setting room_id moves the student."""
    model_config = ConfigDict(str_strip_whitespace=True)

    room_id: Optional[str] = None
    full_name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[str] = Field(None, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")


class HostelStudentResponse(BaseModel):
    """Response model for an allocation."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    hostel_id: str
    room_id: str
    student_id: str
    full_name: str
    email: Optional[str] = None
    allocated_at: datetime
    updated_at: datetime
    vacated_at: Optional[datetime] = None
    is_active: bool
