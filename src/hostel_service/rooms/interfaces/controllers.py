"""
Room Controllers (API Routes)
=============================
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from hostel_service.rooms.application.dto import RoomCreateRequest, RoomResponse, RoomUpdateRequest
from hostel_service.rooms.application.services import IRoomAppService
from hostel_service.shared.api.dependencies import provide

router = APIRouter(prefix="/api/rooms", tags=["Rooms"])

get_room_service = provide(IRoomAppService)


@router.get("", response_model=List[RoomResponse], summary="List rooms")
async def list_rooms(
    hostel_id: Optional[str] = Query(None, description="Only rooms of this hostel"),
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    service: IRoomAppService = Depends(get_room_service),
):
    rooms = await service.list_rooms(hostel_id=hostel_id, limit=limit, offset=offset)
    return [RoomResponse.model_validate(r) for r in rooms]


@router.get("/{room_id}", response_model=RoomResponse, summary="Get a room")
async def get_room(
    room_id: str,
    service: IRoomAppService = Depends(get_room_service),
):
    return RoomResponse.model_validate(await service.get_room(room_id))


@router.post(
    "",
    response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a room to a hostel",
    responses={
        400: {"description": "Room number already used in the hostel"},
        404: {"description": "Hostel not found"},
    },
)
async def create_room(
    request: RoomCreateRequest,
    service: IRoomAppService = Depends(get_room_service),
):
    return RoomResponse.model_validate(await service.create_room(request))


@router.put("/{room_id}", response_model=RoomResponse, summary="Update a room")
async def update_room(
    room_id: str,
    request: RoomUpdateRequest,
    service: IRoomAppService = Depends(get_room_service),
):
    return RoomResponse.model_validate(await service.update_room(room_id, request))


@router.delete(
    "/{room_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a room",
)
async def delete_room(
    room_id: str,
    service: IRoomAppService = Depends(get_room_service),
):
    await service.delete_room(room_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
