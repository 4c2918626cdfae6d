"""Unit tests for HostelAppService with a mocked repository."""

from unittest.mock import AsyncMock

import pytest

from hostel_service.core import ResourceNotFoundException, ValidationException
from hostel_service.hostels.application import (
    HostelAppService,
    HostelCreateRequest,
    HostelUpdateRequest,
    IHostelRepository,
)
from hostel_service.hostels.domain import Hostel, HostelGender


@pytest.fixture
def repository() -> AsyncMock:
    repo = AsyncMock(spec=IHostelRepository)
    repo.get_by_name.return_value = None

    async def create(hostel: Hostel) -> Hostel:
        hostel.id = "11111111-1111-1111-1111-111111111111"
        return hostel

    repo.create.side_effect = create
    repo.update.side_effect = lambda hostel: hostel
    return repo


@pytest.fixture
def service(repository: AsyncMock) -> HostelAppService:
    return HostelAppService(repository)


def _existing(name: str = "North", hostel_id: str = "22222222-2222-2222-2222-222222222222") -> Hostel:
    hostel = Hostel.new(name=name, address="1 Road", gender=HostelGender.MIXED, capacity=10)
    hostel.id = hostel_id
    return hostel


class TestCreateHostel:
    async def test_creates(self, service: HostelAppService, repository: AsyncMock) -> None:
        hostel = await service.create_hostel(
            HostelCreateRequest(name=" North ", address="1 Road", capacity=10)
        )

        assert hostel.id == "11111111-1111-1111-1111-111111111111"
        repository.get_by_name.assert_awaited_once_with("North")
        repository.create.assert_awaited_once()

    async def test_duplicate_name(self, service: HostelAppService, repository: AsyncMock) -> None:
        repository.get_by_name.return_value = _existing()

        with pytest.raises(ValidationException):
            await service.create_hostel(HostelCreateRequest(name="North", address="x", capacity=1))

        repository.create.assert_not_awaited()


class TestUpdateHostel:
    async def test_missing(self, service: HostelAppService, repository: AsyncMock) -> None:
        repository.get_by_id.return_value = None

        with pytest.raises(ResourceNotFoundException) as exc_info:
            await service.update_hostel("nope", HostelUpdateRequest(capacity=3))

        assert exc_info.value.resource_type == "Hostel"

    async def test_keeping_own_name_is_allowed(self, service: HostelAppService, repository: AsyncMock) -> None:
        existing = _existing()
        repository.get_by_id.return_value = existing
        repository.get_by_name.return_value = existing

        updated = await service.update_hostel(existing.id, HostelUpdateRequest(name="North", capacity=12))

        assert updated.capacity == 12
        repository.update.assert_awaited_once()

    async def test_only_given_fields_change(self, service: HostelAppService, repository: AsyncMock) -> None:
        existing = _existing()
        repository.get_by_id.return_value = existing

        updated = await service.update_hostel(existing.id, HostelUpdateRequest(gender=HostelGender.FEMALE))

        assert updated.gender is HostelGender.FEMALE
        assert updated.name == "North"
        assert updated.capacity == 10


class TestDeleteHostel:
    async def test_deletes(self, service: HostelAppService, repository: AsyncMock) -> None:
        repository.delete.return_value = True
        await service.delete_hostel("abc")
        repository.delete.assert_awaited_once_with("abc")

    async def test_missing(self, service: HostelAppService, repository: AsyncMock) -> None:
        repository.delete.return_value = False
        with pytest.raises(ResourceNotFoundException):
            await service.delete_hostel("abc")
