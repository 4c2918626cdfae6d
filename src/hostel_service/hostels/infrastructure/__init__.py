"""
Hostel Infrastructure Layer
===========================

- Models: SQLAlchemy ORM models
- Repositories: Data access layer
"""

from hostel_service.hostels.infrastructure.models import HostelModel
from hostel_service.hostels.infrastructure.repositories import SQLAlchemyHostelRepository

__all__ = ["HostelModel", "SQLAlchemyHostelRepository"]
