from hostel_service.rooms.domain.entities import Room

__all__ = ["Room"]
