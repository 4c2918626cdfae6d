"""
Service Registration
====================

Binds each slice's service and repository contracts to their concrete
implementations. Every binding is request-scoped.
"""

from hostel_service.hostel_students.application import (
    HostelStudentAppService,
    IHostelStudentAppService,
    IHostelStudentRepository,
)
from hostel_service.hostel_students.infrastructure import SQLAlchemyHostelStudentRepository
from hostel_service.hostels.application import HostelAppService, IHostelAppService, IHostelRepository
from hostel_service.hostels.infrastructure import SQLAlchemyHostelRepository
from hostel_service.rooms.application import IRoomAppService, IRoomRepository, RoomAppService
from hostel_service.rooms.infrastructure import SQLAlchemyRoomRepository
from hostel_service.shared.infrastructure.registry import ServiceRegistry

# Contracts the controllers resolve; checked before the app starts.
SERVICE_CONTRACTS = (
    IHostelAppService,
    IHostelRepository,
    IRoomAppService,
    IRoomRepository,
    IHostelStudentAppService,
    IHostelStudentRepository,
)


def register_services(registry: ServiceRegistry) -> ServiceRegistry:
    # Hostels
    registry.add_scoped(IHostelRepository, lambda scope: SQLAlchemyHostelRepository(scope.session))
    registry.add_scoped(IHostelAppService, lambda scope: HostelAppService(scope.resolve(IHostelRepository)))

    # Rooms
    registry.add_scoped(IRoomRepository, lambda scope: SQLAlchemyRoomRepository(scope.session))
    registry.add_scoped(IRoomAppService, lambda scope: RoomAppService(scope.resolve(IRoomRepository)))

    # Hostel students
    registry.add_scoped(IHostelStudentRepository, lambda scope: SQLAlchemyHostelStudentRepository(scope.session))
    registry.add_scoped(
        IHostelStudentAppService,
        lambda scope: HostelStudentAppService(scope.resolve(IHostelStudentRepository)),
    )
    return registry


def build_registry() -> ServiceRegistry:
    """
    Create, validate and freeze the application's registry.

    Raises:
        RegistrationException: If any contract in SERVICE_CONTRACTS is unbound
    """
    registry = register_services(ServiceRegistry())
    registry.validate(SERVICE_CONTRACTS)
    registry.freeze()
    return registry
