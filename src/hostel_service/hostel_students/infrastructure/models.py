"""
Hostel Student Infrastructure Models
====================================
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from hostel_service.infrastructure.database import Base


class HostelStudentModel(Base):
    """
    Database model for HostelStudent entity.

    Maps to the 'hostel_students' table.
    """
    __tablename__ = "hostel_students"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    hostel_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("hostels.id", ondelete="CASCADE"), nullable=False, index=True
    )
    room_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    student_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)

    allocated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    vacated_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
