"""Room allocation search: single floor first, cheapest cross-floor set second."""

from __future__ import annotations

from itertools import combinations
from typing import Iterator, Optional, Sequence

from reservation.domain.constraints import (
    BOOK_LIMIT_MSG,
    MAX_ROOMS_PER_BOOKING,
    NO_ROOMS_MSG,
    NOT_ENOUGH_ROOMS_MSG,
)
from reservation.domain.models import Booked, Rejected, RejectionReason, Room
from reservation.domain.travel import total_travel_time
from reservation.repository.room_inventory import RoomInventory
from reservation.utils.logger import get_logger


logger = get_logger(__name__)


def find_single_floor_rooms(
    inventory: RoomInventory,
    count: int,
) -> Optional[tuple[int, list[Room]]]:
    """Return the first floor (ascending) holding ``count`` vacancies.

    Floors are not compared by travel cost; the lowest qualifying floor wins
    and its vacancies are taken in stored order.
    """
    for floor, rooms in inventory.iter_floors():
        available: list[Room] = []
        for room in rooms:
            if room.occupied:
                continue
            available.append(room)
            if len(available) == count:
                return floor, available
    return None


def iter_room_combinations(pool: Sequence[Room], count: int) -> Iterator[tuple[Room, ...]]:
    """Lazily yield ``count``-sized combinations in lexicographic pool order."""
    yield from combinations(pool, count)


def find_cheapest_combination(
    pool: Sequence[Room],
    count: int,
) -> Optional[tuple[tuple[Room, ...], int]]:
    """Scan every combination and keep the first one at the minimum travel time."""
    best_combo: Optional[tuple[Room, ...]] = None
    best_cost: Optional[int] = None
    for combo in iter_room_combinations(pool, count):
        cost = total_travel_time(combo)
        if best_cost is None or cost < best_cost:
            best_combo = combo
            best_cost = cost
    if best_combo is None or best_cost is None:
        return None
    return best_combo, best_cost


def _commit(rooms: Sequence[Room]) -> Booked:
    for room in rooms:
        room.occupied = True
    return Booked(rooms=tuple(room.snapshot() for room in rooms))


def _reject(reason: RejectionReason, message: str) -> Rejected:
    logger.warning("Booking failed | reason=%s | message=%s", reason.value, message)
    return Rejected(reason=reason, message=message)


def allocate_rooms(inventory: RoomInventory, count: int) -> Booked | Rejected:
    """Pick and occupy ``count`` rooms, or explain why none were taken.

    Nothing is marked occupied unless a complete set has been chosen. The
    caller owns synchronization of ``inventory``.
    """
    if count > MAX_ROOMS_PER_BOOKING:
        return _reject(RejectionReason.LIMIT_EXCEEDED, BOOK_LIMIT_MSG)
    if count <= 0:
        return Booked()

    single_floor = find_single_floor_rooms(inventory, count)
    if single_floor is not None:
        floor, rooms = single_floor
        outcome = _commit(rooms)
        logger.info(
            "Booked rooms on a single floor | floor=%s | rooms=%s",
            floor,
            [room.number for room in rooms],
        )
        return outcome

    pool = inventory.vacant_rooms()
    if len(pool) < count:
        return _reject(RejectionReason.NOT_ENOUGH_ROOMS, NOT_ENOUGH_ROOMS_MSG)

    cheapest = find_cheapest_combination(pool, count)
    if cheapest is None:
        return _reject(RejectionReason.NO_ROOMS, NO_ROOMS_MSG)

    rooms, cost = cheapest
    outcome = _commit(rooms)
    logger.info(
        "Booked rooms across floors | travel_time=%s | pool=%s | rooms=%s",
        cost,
        len(pool),
        [room.number for room in rooms],
    )
    return outcome
