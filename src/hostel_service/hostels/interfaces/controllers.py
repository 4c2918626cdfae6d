"""
Hostel Controllers (API Routes)
===============================

FastAPI routes for hostel CRUD.

Controllers are thin - they delegate to application services.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from hostel_service.hostels.application.dto import (
    HostelCreateRequest,
    HostelResponse,
    HostelUpdateRequest,
)
from hostel_service.hostels.application.services import IHostelAppService
from hostel_service.shared.api.dependencies import provide

router = APIRouter(prefix="/api/hostels", tags=["Hostels"])

get_hostel_service = provide(IHostelAppService)


@router.get("", response_model=List[HostelResponse], summary="List hostels")
async def list_hostels(
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    service: IHostelAppService = Depends(get_hostel_service),
):
    hostels = await service.list_hostels(limit=limit, offset=offset)
    return [HostelResponse.model_validate(h) for h in hostels]


@router.get("/{hostel_id}", response_model=HostelResponse, summary="Get a hostel")
async def get_hostel(
    hostel_id: str,
    service: IHostelAppService = Depends(get_hostel_service),
):
    return HostelResponse.model_validate(await service.get_hostel(hostel_id))


@router.post(
    "",
    response_model=HostelResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a hostel",
    responses={400: {"description": "A hostel with that name already exists"}},
)
async def create_hostel(
    request: HostelCreateRequest,
    service: IHostelAppService = Depends(get_hostel_service),
):
    return HostelResponse.model_validate(await service.create_hostel(request))


@router.put("/{hostel_id}", response_model=HostelResponse, summary="Update a hostel")
async def update_hostel(
    hostel_id: str,
    request: HostelUpdateRequest,
    service: IHostelAppService = Depends(get_hostel_service),
):
    return HostelResponse.model_validate(await service.update_hostel(hostel_id, request))


@router.delete(
    "/{hostel_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a hostel",
    description="Deletes the hostel together with its rooms and allocations.",
)
async def delete_hostel(
    hostel_id: str,
    service: IHostelAppService = Depends(get_hostel_service),
):
    await service.delete_hostel(hostel_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
