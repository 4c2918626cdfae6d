"""
Hostel Student Application Layer
================================
"""

from hostel_service.hostel_students.application.dto import (
    HostelStudentCreateRequest,
    HostelStudentUpdateRequest,
    HostelStudentResponse,
)
from hostel_service.hostel_students.application.services import (
    IHostelStudentRepository,
    IHostelStudentAppService,
    HostelStudentAppService,
)

__all__ = [
    "HostelStudentCreateRequest",
    "HostelStudentUpdateRequest",
    "HostelStudentResponse",
    "IHostelStudentAppService",
    "HostelStudentAppService",
    "IHostelStudentRepository",
]
