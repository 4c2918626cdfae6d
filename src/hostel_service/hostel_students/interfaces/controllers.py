"""
Hostel Student Controllers (API Routes)
=======================================
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from hostel_service.hostel_students.application.dto import (
    HostelStudentCreateRequest,
    HostelStudentResponse,
    HostelStudentUpdateRequest,
)
from hostel_service.hostel_students.application.services import IHostelStudentAppService
from hostel_service.shared.api.dependencies import provide

router = APIRouter(prefix="/api/hostel-students", tags=["Hostel Students"])

get_hostel_student_service = provide(IHostelStudentAppService)


@router.get("", response_model=List[HostelStudentResponse], summary="List allocations")
async def list_hostel_students(
    hostel_id: Optional[str] = Query(None, description="Only allocations in this hostel"),
    active_only: bool = Query(False, description="Hide vacated allocations"),
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    service: IHostelStudentAppService = Depends(get_hostel_student_service),
):
    students = await service.list_students(
        hostel_id=hostel_id, active_only=active_only, limit=limit, offset=offset
    )
    return [HostelStudentResponse.model_validate(s) for s in students]


@router.get("/{allocation_id}", response_model=HostelStudentResponse, summary="Get an allocation")
async def get_hostel_student(
    allocation_id: str,
    service: IHostelStudentAppService = Depends(get_hostel_student_service),
):
    return HostelStudentResponse.model_validate(await service.get_student(allocation_id))


@router.post(
    "",
    response_model=HostelStudentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Allocate a student to a room",
    responses={
        400: {"description": "Room is full or student already allocated"},
        404: {"description": "Room not found"},
    },
)
async def allocate_hostel_student(
    request: HostelStudentCreateRequest,
    service: IHostelStudentAppService = Depends(get_hostel_student_service),
):
    return HostelStudentResponse.model_validate(await service.allocate_student(request))


@router.put("/{allocation_id}", response_model=HostelStudentResponse, summary="Update or move an allocation")
async def update_hostel_student(
    allocation_id: str,
    request: HostelStudentUpdateRequest,
    service: IHostelStudentAppService = Depends(get_hostel_student_service),
):
    return HostelStudentResponse.model_validate(await service.update_student(allocation_id, request))


@router.delete(
    "/{allocation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Vacate an allocation",
    description="Marks the allocation as vacated; the record is kept for history.",
)
async def vacate_hostel_student(
    allocation_id: str,
    service: IHostelStudentAppService = Depends(get_hostel_student_service),
):
    await service.vacate_student(allocation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
