from hostel_service.rooms.interfaces.controllers import router as room_router

__all__ = ["room_router"]
