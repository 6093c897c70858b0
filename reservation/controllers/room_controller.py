"""HTTP controller layer for room listing, booking and reset."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field

from reservation.controllers.dependencies import get_booking_service
from reservation.domain.constraints import BOOK_SUCCESS_MSG, RESET_MSG
from reservation.domain.models import (
    Booked,
    BookingOutcome,
    InvalidRequest,
    Rejected,
    RoomSnapshot,
)
from reservation.services.booking_service import BookingService
from reservation.utils.logger import get_logger


logger = get_logger(__name__)

router = APIRouter(prefix="/api/rooms", tags=["rooms"])

STATUS_SUCCESS = "success"


class RoomResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    room_number: int = Field(alias="roomNumber", gt=0)
    floor: int = Field(gt=0)
    booked: bool

    @classmethod
    def from_snapshot(cls, room: RoomSnapshot) -> RoomResponse:
        return cls(room_number=room.number, floor=room.floor, booked=room.occupied)


class BookingResponse(BaseModel):
    status: str
    message: str
    roomlist: list[RoomResponse]


class MessageResponse(BaseModel):
    message: str


def _to_booking_response(outcome: BookingOutcome) -> BookingResponse:
    if isinstance(outcome, InvalidRequest):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=outcome.message,
        )
    if isinstance(outcome, Rejected):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=outcome.message,
        )
    if isinstance(outcome, Booked):
        return BookingResponse(
            status=STATUS_SUCCESS,
            message=BOOK_SUCCESS_MSG,
            roomlist=[RoomResponse.from_snapshot(room) for room in outcome.rooms],
        )
    raise TypeError(f"Unhandled booking outcome: {outcome!r}")


@router.get(
    "/all",
    response_model=dict[int, list[RoomResponse]],
    status_code=status.HTTP_200_OK,
)
def get_all_rooms(
    service: BookingService = Depends(get_booking_service),
) -> dict[int, list[RoomResponse]]:
    """Every room grouped by floor, with current occupancy."""
    try:
        floors = service.list_all_rooms()
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected room listing failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list rooms",
        ) from exc
    return {
        floor: [RoomResponse.from_snapshot(room) for room in rooms]
        for floor, rooms in floors.items()
    }


@router.post(
    "/book",
    response_model=BookingResponse,
    status_code=status.HTTP_200_OK,
)
def book_rooms(
    number_of_rooms: int = Query(alias="numberOfRooms"),
    service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    """Book rooms; 400 for a non-positive count, 409 when allocation is rejected."""
    try:
        outcome = service.book_rooms(number_of_rooms)
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected booking failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to book rooms",
        ) from exc
    return _to_booking_response(outcome)


@router.post(
    "/reset",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
def reset_bookings(
    service: BookingService = Depends(get_booking_service),
) -> MessageResponse:
    service.reset_bookings()
    return MessageResponse(message=RESET_MSG)


@router.get(
    "/bookedRooms",
    response_model=list[RoomResponse],
    status_code=status.HTTP_200_OK,
)
def get_booked_rooms(
    service: BookingService = Depends(get_booking_service),
) -> list[RoomResponse]:
    return [RoomResponse.from_snapshot(room) for room in service.list_booked_rooms()]
