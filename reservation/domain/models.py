"""Domain models for room inventory and booking outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Room:
    """A hotel room; identity is fixed, only occupancy changes."""

    __slots__ = ("_floor", "_number", "occupied")

    def __init__(self, floor: int, number: int, occupied: bool = False) -> None:
        self._floor = floor
        self._number = number
        self.occupied = occupied

    @property
    def floor(self) -> int:
        return self._floor

    @property
    def number(self) -> int:
        return self._number

    @property
    def identity(self) -> tuple[int, int]:
        return (self._floor, self._number)

    def snapshot(self) -> RoomSnapshot:
        return RoomSnapshot(floor=self._floor, number=self._number, occupied=self.occupied)

    def __repr__(self) -> str:
        return f"Room(floor={self._floor}, number={self._number}, occupied={self.occupied})"


@dataclass(frozen=True)
class RoomSnapshot:
    floor: int
    number: int
    occupied: bool


class RejectionReason(str, Enum):
    LIMIT_EXCEEDED = "LIMIT_EXCEEDED"
    NOT_ENOUGH_ROOMS = "NOT_ENOUGH_ROOMS"
    NO_ROOMS = "NO_ROOMS"


@dataclass(frozen=True)
class Booked:
    rooms: tuple[RoomSnapshot, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Rejected:
    reason: RejectionReason
    message: str
    rooms: tuple[RoomSnapshot, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class InvalidRequest:
    message: str


BookingOutcome = Union[Booked, Rejected, InvalidRequest]
