"""Unit tests for the request-scoped service registry."""

from abc import ABC, abstractmethod
from unittest.mock import MagicMock

import pytest

from hostel_service.core import ConfigurationException, RegistrationException
from hostel_service.shared.infrastructure.registry import RequestScope, ServiceRegistry


class IGreeter(ABC):
    @abstractmethod
    def greet(self) -> str: ...


class IRepo(ABC):
    pass


class Repo(IRepo):
    def __init__(self, session):
        self.session = session


class Greeter(IGreeter):
    def __init__(self, repo: IRepo):
        self.repo = repo

    def greet(self) -> str:
        return "hello"


@pytest.fixture
def registry() -> ServiceRegistry:
    registry = ServiceRegistry()
    registry.add_scoped(IRepo, lambda scope: Repo(scope.session))
    registry.add_scoped(IGreeter, lambda scope: Greeter(scope.resolve(IRepo)))
    return registry


class TestResolution:
    """Tests for resolving contracts within a scope."""

    def test_resolves_through_contract(self, registry: ServiceRegistry) -> None:
        scope = registry.create_scope(MagicMock())
        greeter = scope.resolve(IGreeter)

        assert isinstance(greeter, Greeter)
        assert greeter.greet() == "hello"

    def test_shared_within_scope(self, registry: ServiceRegistry) -> None:
        scope = registry.create_scope(MagicMock())

        assert scope.resolve(IGreeter) is scope.resolve(IGreeter)
        assert scope.resolve(IGreeter).repo is scope.resolve(IRepo)

    def test_fresh_per_scope(self, registry: ServiceRegistry) -> None:
        first = registry.create_scope(MagicMock())
        second = registry.create_scope(MagicMock())

        assert first.resolve(IGreeter) is not second.resolve(IGreeter)
        assert first.resolve(IRepo).session is first.session
        assert second.resolve(IRepo).session is second.session

    def test_unregistered_contract(self) -> None:
        scope = RequestScope(ServiceRegistry(), MagicMock())
        with pytest.raises(RegistrationException) as exc_info:
            scope.resolve(IGreeter)
        assert exc_info.value.contracts == [IGreeter]

    def test_later_binding_wins(self, registry: ServiceRegistry) -> None:
        replacement = MagicMock(spec=IGreeter)
        registry.add_scoped(IGreeter, lambda scope: replacement)

        assert registry.create_scope(MagicMock()).resolve(IGreeter) is replacement


class TestValidation:
    """Tests for build-time checks."""

    def test_validate_passes(self, registry: ServiceRegistry) -> None:
        registry.validate([IGreeter, IRepo])

    def test_validate_reports_all_missing(self) -> None:
        registry = ServiceRegistry()
        with pytest.raises(RegistrationException) as exc_info:
            registry.validate([IGreeter, IRepo])

        assert exc_info.value.contracts == [IGreeter, IRepo]
        assert "IGreeter" in exc_info.value.message
        assert isinstance(exc_info.value, ConfigurationException)

    def test_frozen_registry_rejects_bindings(self, registry: ServiceRegistry) -> None:
        registry.freeze()
        with pytest.raises(RuntimeError):
            registry.add_scoped(IRepo, lambda scope: Repo(None))

    def test_is_registered(self, registry: ServiceRegistry) -> None:
        assert registry.is_registered(IGreeter)
        assert not registry.is_registered(str)
        assert set(registry.contracts) == {IGreeter, IRepo}
