"""
Hostel Infrastructure Models
============================

SQLAlchemy ORM model for the hostels table.
"""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from hostel_service.infrastructure.database import Base


class HostelModel(Base):
    """
    Database model for Hostel entity.

    Maps to the 'hostels' table.
    """
    __tablename__ = "hostels"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    gender: Mapped[str] = mapped_column(String(20), nullable=False, default="mixed")
    capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
