from hostel_service.hostel_students.infrastructure.models import HostelStudentModel
from hostel_service.hostel_students.infrastructure.repositories import SQLAlchemyHostelStudentRepository

__all__ = ["HostelStudentModel", "SQLAlchemyHostelStudentRepository"]
