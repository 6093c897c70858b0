"""Synchronized booking gateway over the shared room inventory."""

from __future__ import annotations

from threading import Lock
from typing import Optional

from reservation.domain.constraints import INVALID_COUNT_MSG
from reservation.domain.models import BookingOutcome, InvalidRequest, RoomSnapshot
from reservation.repository.room_inventory import RoomInventory
from reservation.services.allocation_service import allocate_rooms
from reservation.utils.config import Settings, get_settings
from reservation.utils.logger import get_logger


logger = get_logger(__name__)


class BookingService:
    """Serializes every inventory read and write behind one lock.

    Rooms never leave this class as mutable objects; callers receive
    ``RoomSnapshot`` copies taken while the lock is held.
    """

    def __init__(
        self,
        inventory: Optional[RoomInventory] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._inventory = inventory or RoomInventory.from_settings(self._settings)
        self._lock = Lock()

    def list_all_rooms(self) -> dict[int, list[RoomSnapshot]]:
        with self._lock:
            return {
                floor: [room.snapshot() for room in rooms]
                for floor, rooms in self._inventory.iter_floors()
            }

    def book_rooms(self, number_of_rooms: int) -> BookingOutcome:
        if number_of_rooms <= 0:
            logger.warning("Booking rejected | requested=%s | message=%s", number_of_rooms, INVALID_COUNT_MSG)
            return InvalidRequest(message=INVALID_COUNT_MSG)

        logger.info("Attempting to book %s rooms", number_of_rooms)
        with self._lock:
            return allocate_rooms(self._inventory, number_of_rooms)

    def reset_bookings(self) -> None:
        logger.info("Resetting all bookings")
        with self._lock:
            self._inventory.clear_occupancy()

    def list_booked_rooms(self) -> list[RoomSnapshot]:
        with self._lock:
            return [room.snapshot() for room in self._inventory.occupied_rooms()]
