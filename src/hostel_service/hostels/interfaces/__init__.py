"""
Hostel Interfaces Layer
=======================

FastAPI route handlers for hostels.
"""

from hostel_service.hostels.interfaces.controllers import router as hostel_router

__all__ = ["hostel_router"]
