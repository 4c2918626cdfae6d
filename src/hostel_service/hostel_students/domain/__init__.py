from hostel_service.hostel_students.domain.entities import HostelStudent, RoomPlacement

__all__ = ["HostelStudent", "RoomPlacement"]
