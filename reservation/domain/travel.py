"""Travel-time metric used to rank candidate room sets."""

from __future__ import annotations

from typing import Iterable, Protocol

from reservation.domain.constraints import VERTICAL_TRAVEL_WEIGHT


class Located(Protocol):
    @property
    def floor(self) -> int: ...

    @property
    def number(self) -> int: ...


def travel_time(first: Located, second: Located) -> int:
    vertical = VERTICAL_TRAVEL_WEIGHT * abs(first.floor - second.floor)
    horizontal = abs(first.number - second.number)
    return vertical + horizontal


def total_travel_time(rooms: Iterable[Located]) -> int:
    """Sum of hops when visiting the rooms in (floor, number) order.

    This walks the rooms along the natural floor/number axis rather than
    solving for the optimal tour.
    """
    ordered = sorted(rooms, key=lambda room: (room.floor, room.number))
    return sum(
        travel_time(current, following)
        for current, following in zip(ordered, ordered[1:])
    )
