"""Domain-level constants and validation rules for the hotel layout."""

from __future__ import annotations

from dataclasses import dataclass


MAX_ROOMS_PER_BOOKING = 5
VERTICAL_TRAVEL_WEIGHT = 2
ROOM_NUMBER_BASE = 100

BOOK_SUCCESS_MSG = "Rooms booked successfully"
BOOK_LIMIT_MSG = f"You can only book a maximum of {MAX_ROOMS_PER_BOOKING} rooms at a time."
NOT_ENOUGH_ROOMS_MSG = "Not enough rooms available!"
NO_ROOMS_MSG = "No rooms available"
INVALID_COUNT_MSG = "Number of rooms must be positive."
RESET_MSG = "All bookings have been reset."


class InventoryLayoutError(ValueError):
    """Raised when the configured hotel layout cannot produce a valid inventory."""


@dataclass(frozen=True)
class HotelLayout:
    floor_count: int
    rooms_per_floor: int
    top_floor_rooms: int


def validate_hotel_layout(layout: HotelLayout) -> None:
    if layout.floor_count <= 0:
        raise InventoryLayoutError("floor_count must be > 0")
    if not 0 < layout.rooms_per_floor < ROOM_NUMBER_BASE:
        raise InventoryLayoutError(f"rooms_per_floor must be in (0, {ROOM_NUMBER_BASE})")
    if layout.top_floor_rooms <= 0:
        raise InventoryLayoutError("top_floor_rooms must be > 0")
    if layout.top_floor_rooms > layout.rooms_per_floor:
        raise InventoryLayoutError("top_floor_rooms must not exceed rooms_per_floor")
