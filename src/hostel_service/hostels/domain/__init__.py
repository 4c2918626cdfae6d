"""
Hostel Domain Layer
===================

Pure Python business objects; no infrastructure dependencies.
"""

from hostel_service.hostels.domain.entities import Hostel, HostelGender

__all__ = ["Hostel", "HostelGender"]
