from hostel_service.hostel_students.interfaces.controllers import router as hostel_student_router

__all__ = ["hostel_student_router"]
