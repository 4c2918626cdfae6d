"""
Hostel Application DTOs
=======================

Pydantic models for hostel API requests and responses.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from hostel_service.hostels.domain.entities import HostelGender


# ========== Request DTOs ==========

class HostelCreateRequest(BaseModel):
    """Request model for creating a hostel."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200, description="Hostel name (unique)")
    address: str = Field(..., min_length=1, max_length=500, description="Street address")
    gender: HostelGender = Field(default=HostelGender.MIXED, description="Who the hostel accommodates")
    capacity: int = Field(..., ge=0, description="Total number of beds")


class HostelUpdateRequest(BaseModel):
    """Request model for updating a hostel. Omitted fields are left unchanged."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    address: Optional[str] = Field(None, min_length=1, max_length=500)
    gender: Optional[HostelGender] = None
    capacity: Optional[int] = Field(None, ge=0)


# ========== Response DTOs ==========

class HostelResponse(BaseModel):
    """Response model for a hostel."""
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Hostel UUID")
    name: str
    address: str
    gender: HostelGender
    capacity: int
    created_at: datetime
    updated_at: datetime
