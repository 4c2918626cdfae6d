"""
Shared API Dependencies
=======================

FastAPI dependencies that open one request scope (and one database session)
per request and resolve service contracts from it.

Usage in a controller:
    get_hostel_service = provide(IHostelAppService)

    @router.get("/")
    async def list_hostels(service: IHostelAppService = Depends(get_hostel_service)):
        ...
"""

from typing import AsyncGenerator, Callable, Type, TypeVar

from fastapi import Depends, Request

from hostel_service.infrastructure.database import DatabaseContext
from hostel_service.shared.infrastructure.registry import RequestScope, ServiceRegistry

T = TypeVar("T")


async def get_request_scope(request: Request) -> AsyncGenerator[RequestScope, None]:
    """
    Open the request's unit of work.

    FastAPI caches this dependency per request, so every service resolved
    while handling one request shares the same scope and session.
    """
    registry: ServiceRegistry = request.app.state.registry
    database: DatabaseContext = request.app.state.database

    async with database.session() as session:
        yield registry.create_scope(session)


def provide(contract: Type[T]) -> Callable[..., T]:
    """Build a dependency that resolves ``contract`` from the request scope."""

    async def resolve(scope: RequestScope = Depends(get_request_scope)) -> T:
        return scope.resolve(contract)

    resolve.__name__ = f"provide_{contract.__name__}"
    return resolve
