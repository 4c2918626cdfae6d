"""
Service Registry
================

Explicit dependency wiring for request-scoped services.

Contracts (abstract base classes) are bound to factories at startup. Each
inbound request gets its own :class:`RequestScope`, which builds every
contract at most once and is thrown away when the request finishes.

Usage:
    registry = ServiceRegistry()
    registry.add_scoped(IHostelRepository, lambda scope: SQLAlchemyHostelRepository(scope.session))
    registry.add_scoped(IHostelAppService, lambda scope: HostelAppService(scope.resolve(IHostelRepository)))
    registry.validate([IHostelAppService])
    registry.freeze()

    scope = registry.create_scope(session)
    service = scope.resolve(IHostelAppService)
"""

from typing import Any, Callable, Dict, Iterable, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from hostel_service.core import RegistrationException


T = TypeVar("T")
Factory = Callable[["RequestScope"], Any]


class ServiceRegistry:
    """Maps service contracts to request-scoped factories."""

    def __init__(self):
        self._factories: Dict[type, Factory] = {}
        self._frozen = False

    def add_scoped(self, contract: Type[T], factory: Callable[["RequestScope"], T]) -> "ServiceRegistry":
        """Bind a contract to a factory. A later binding replaces an earlier one."""
        if self._frozen:
            raise RuntimeError("Service registry is frozen; register services before startup completes")
        self._factories[contract] = factory
        return self

    def is_registered(self, contract: type) -> bool:
        return contract in self._factories

    def factory_for(self, contract: type) -> Factory:
        try:
            return self._factories[contract]
        except KeyError:
            raise RegistrationException([contract]) from None

    def validate(self, contracts: Iterable[type]) -> None:
        """
        Check that every contract has a binding.

        Raises:
            RegistrationException: Listing every missing contract
        """
        missing = [c for c in contracts if c not in self._factories]
        if missing:
            raise RegistrationException(missing)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def contracts(self) -> list:
        return list(self._factories)

    def create_scope(self, session: AsyncSession) -> "RequestScope":
        return RequestScope(self, session)


class RequestScope:
    """
    Unit of work for a single request.

    Holds the request's database session and the instances resolved so far.
    """

    def __init__(self, registry: ServiceRegistry, session: AsyncSession):
        self._registry = registry
        self._session = session
        self._instances: Dict[type, Any] = {}

    @property
    def session(self) -> AsyncSession:
        return self._session

    def resolve(self, contract: Type[T]) -> T:
        if contract not in self._instances:
            factory = self._registry.factory_for(contract)
            self._instances[contract] = factory(self)
        return self._instances[contract]
