"""Room-related FastAPI routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from Database.db import FrontDeskDB
from Database.deps import get_db
from Database.line_format import PersistenceError

from .models import (
    BookingFields,
    MessageResponse,
    OccupiedStayListResponse,
    RoomListResponse,
    RoomResponse,
)
from .utils import _not_found, _storage_failure

logger = logging.getLogger(__name__)

ROOM = "room"

# mount api router
# handlers call the stores directly on the event loop (no run_in_threadpool)
# so only one request at a time touches the in-memory state and its files
room_router = APIRouter()

@room_router.get("/health", response_model=MessageResponse)
async def health_check() -> MessageResponse:
    """Quick liveness probe for the room service."""

    return MessageResponse(status=status.HTTP_200_OK, message="Room service is healthy")

@room_router.get("", response_model=RoomListResponse)
async def list_rooms(db: FrontDeskDB = Depends(get_db)) -> RoomListResponse:
    return RoomListResponse(status=status.HTTP_200_OK, rooms=db.rooms.list_all())

@room_router.get("/available", response_model=RoomListResponse)
async def list_available_rooms(db: FrontDeskDB = Depends(get_db)) -> RoomListResponse:
    """Free rooms, ascending by number."""

    return RoomListResponse(status=status.HTTP_200_OK, rooms=db.rooms.list_available())

@room_router.get("/occupied", response_model=OccupiedStayListResponse)
async def list_occupied_rooms(db: FrontDeskDB = Depends(get_db)) -> OccupiedStayListResponse:
    """Occupied rooms with their occupant's name ("Unknown" when the customer is gone)."""

    return OccupiedStayListResponse(status=status.HTTP_200_OK, stays=db.billing.occupied_stays())

@room_router.get("/{room_number}", response_model=RoomResponse)
async def get_room(room_number: int, db: FrontDeskDB = Depends(get_db)) -> RoomResponse:

    room = db.rooms.get_by_number(room_number)
    if room is None:
        _not_found(room_number, logger, ROOM)

    return RoomResponse(status=status.HTTP_200_OK, room=room)

@room_router.post("/{room_number}/book", response_model=RoomResponse)
async def book_room(
    room_number: int, fields: BookingFields, db: FrontDeskDB = Depends(get_db)
) -> RoomResponse:
    """
    Book a free room for a customer.

    Args:
        room_number: Room to book (path parameter).
        fields: Customer identifier; not checked against the customer list.
        db: Front desk storage injected via dependency.

    Returns:
        RoomResponse wrapping the booked room.

    Raises:
        HTTPException: 404 for an unknown room, 409 when it is already occupied.
    """

    if db.rooms.get_by_number(room_number) is None:
        _not_found(room_number, logger, ROOM)

    try:
        booked = db.rooms.book(room_number, fields.customer_id)
    except PersistenceError as exc:
        raise _storage_failure(exc, logger, "book room") from exc

    if not booked:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Room {room_number} is already booked.",
        )

    return RoomResponse(status=status.HTTP_200_OK, room=db.rooms.get_by_number(room_number))

@room_router.post("/{room_number}/checkout", response_model=RoomResponse)
async def check_out_room(room_number: int, db: FrontDeskDB = Depends(get_db)) -> RoomResponse:
    """
    Release an occupied room.

    Raises:
        HTTPException: 404 for an unknown room, 409 when it is not occupied.
    """

    if db.rooms.get_by_number(room_number) is None:
        _not_found(room_number, logger, ROOM)

    try:
        checked_out = db.rooms.check_out(room_number)
    except PersistenceError as exc:
        raise _storage_failure(exc, logger, "check out room") from exc

    if not checked_out:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Room {room_number} is not occupied.",
        )

    return RoomResponse(status=status.HTTP_200_OK, room=db.rooms.get_by_number(room_number))
