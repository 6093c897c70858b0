"""In-memory room inventory shared by the booking service."""

from __future__ import annotations

from typing import Iterator, Mapping, Optional, Sequence

from reservation.domain.constraints import (
    ROOM_NUMBER_BASE,
    HotelLayout,
    validate_hotel_layout,
)
from reservation.domain.models import Room
from reservation.utils.config import Settings, get_settings
from reservation.utils.logger import get_logger


logger = get_logger(__name__)


class InventoryIntegrityError(Exception):
    """Raised when rooms do not form a consistent floor mapping."""


def build_floor_rooms(layout: HotelLayout) -> dict[int, list[Room]]:
    """Lay out floors 1..N; the top floor carries its own smaller room count."""
    validate_hotel_layout(layout)
    floors: dict[int, list[Room]] = {}
    top_floor = layout.floor_count
    for floor in range(1, top_floor):
        base_number = floor * ROOM_NUMBER_BASE
        floors[floor] = [
            Room(floor, base_number + offset)
            for offset in range(1, layout.rooms_per_floor + 1)
        ]
    top_base_number = top_floor * ROOM_NUMBER_BASE
    floors[top_floor] = [
        Room(top_floor, top_base_number + offset)
        for offset in range(1, layout.top_floor_rooms + 1)
    ]
    return floors


class RoomInventory:
    """Fixed floor -> rooms mapping; only room occupancy is ever mutated.

    The inventory does no locking of its own. Callers that share it across
    threads must serialize access (see ``BookingService``).
    """

    def __init__(self, floors: Mapping[int, Sequence[Room]]) -> None:
        seen: set[tuple[int, int]] = set()
        ordered: dict[int, tuple[Room, ...]] = {}
        for floor in sorted(floors):
            rooms = tuple(floors[floor])
            for room in rooms:
                if room.floor != floor:
                    raise InventoryIntegrityError(
                        f"Room {room.number} reports floor {room.floor} but is listed under floor {floor}"
                    )
                if room.identity in seen:
                    raise InventoryIntegrityError(
                        f"Duplicate room identity floor={room.floor} number={room.number}"
                    )
                seen.add(room.identity)
            ordered[floor] = rooms
        self._floors = ordered

    @classmethod
    def from_layout(cls, layout: HotelLayout) -> RoomInventory:
        inventory = cls(build_floor_rooms(layout))
        logger.info(
            "Hotel floors and rooms initialized | floors=%s | rooms=%s",
            len(inventory.floor_numbers),
            inventory.room_count,
        )
        return inventory

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> RoomInventory:
        resolved = settings or get_settings()
        return cls.from_layout(resolved.hotel_layout)

    @property
    def floor_numbers(self) -> list[int]:
        return list(self._floors)

    @property
    def room_count(self) -> int:
        return sum(len(rooms) for rooms in self._floors.values())

    def rooms_on_floor(self, floor: int) -> tuple[Room, ...]:
        return self._floors.get(floor, ())

    def iter_floors(self) -> Iterator[tuple[int, tuple[Room, ...]]]:
        yield from self._floors.items()

    def iter_rooms(self) -> Iterator[Room]:
        for rooms in self._floors.values():
            yield from rooms

    def vacant_rooms(self) -> list[Room]:
        return [room for room in self.iter_rooms() if not room.occupied]

    def occupied_rooms(self) -> list[Room]:
        return [room for room in self.iter_rooms() if room.occupied]

    def clear_occupancy(self) -> None:
        for room in self.iter_rooms():
            room.occupied = False
