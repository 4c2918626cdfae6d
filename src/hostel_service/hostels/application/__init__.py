"""
Hostel Application Layer
========================

Contains:
- Services: Use cases and the repository interface they depend on
- DTOs: Data transfer objects for API serialization
"""

from hostel_service.hostels.application.dto import (
    HostelCreateRequest,
    HostelUpdateRequest,
    HostelResponse,
)
from hostel_service.hostels.application.services import (
    IHostelRepository,
    IHostelAppService,
    HostelAppService,
)

__all__ = [
    # DTOs
    "HostelCreateRequest",
    "HostelUpdateRequest",
    "HostelResponse",
    # Services
    "IHostelAppService",
    "HostelAppService",
    # Repository Interfaces
    "IHostelRepository",
]
