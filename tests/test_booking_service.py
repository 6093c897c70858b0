from __future__ import annotations

import random
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import FrozenInstanceError, replace

import pytest

from reservation.domain.constraints import INVALID_COUNT_MSG
from reservation.domain.models import Booked, InvalidRequest, Rejected, RejectionReason
from reservation.repository.room_inventory import RoomInventory
from reservation.services.booking_service import BookingService
from reservation.utils.config import get_settings


def _build_service(**layout_overrides) -> BookingService:
    settings = replace(get_settings(), **layout_overrides)
    return BookingService(inventory=RoomInventory.from_settings(settings), settings=settings)


def _identities(rooms) -> list[tuple[int, int]]:
    return [(room.floor, room.number) for room in rooms]


@pytest.mark.parametrize("requested", [0, -1, -100])
def test_non_positive_count_is_invalid_and_touches_nothing(requested: int) -> None:
    service = _build_service()

    outcome = service.book_rooms(requested)

    assert outcome == InvalidRequest(message=INVALID_COUNT_MSG)
    assert service.list_booked_rooms() == []


def test_booked_rooms_round_trip_through_listing() -> None:
    service = _build_service()

    outcome = service.book_rooms(4)

    assert isinstance(outcome, Booked)
    assert len(outcome.rooms) == 4
    booked = service.list_booked_rooms()
    assert set(_identities(outcome.rooms)) <= set(_identities(booked))
    assert all(room.occupied for room in booked)


def test_ceiling_rejection_leaves_inventory_untouched() -> None:
    service = _build_service()
    service.book_rooms(2)

    outcome = service.book_rooms(6)

    assert isinstance(outcome, Rejected)
    assert outcome.reason is RejectionReason.LIMIT_EXCEEDED
    assert len(service.list_booked_rooms()) == 2


def test_reset_is_idempotent() -> None:
    service = _build_service()
    service.book_rooms(5)
    service.book_rooms(3)

    service.reset_bookings()
    after_first = service.list_all_rooms()
    service.reset_bookings()
    after_second = service.list_all_rooms()

    assert after_first == after_second
    assert service.list_booked_rooms() == []
    assert not any(room.occupied for rooms in after_second.values() for room in rooms)


def test_booking_after_reset_starts_from_first_floor_again() -> None:
    service = _build_service()
    service.book_rooms(5)
    service.book_rooms(5)

    service.reset_bookings()
    outcome = service.book_rooms(2)

    assert isinstance(outcome, Booked)
    assert [room.number for room in outcome.rooms] == [101, 102]


def test_list_all_rooms_returns_read_only_snapshots() -> None:
    service = _build_service()
    floors = service.list_all_rooms()

    assert list(floors) == list(range(1, 11))
    with pytest.raises(FrozenInstanceError):
        floors[1][0].occupied = True  # type: ignore[misc]
    assert service.list_booked_rooms() == []


def test_snapshots_do_not_track_later_changes() -> None:
    service = _build_service()
    before = service.list_all_rooms()

    service.book_rooms(1)

    assert before[1][0].occupied is False
    assert service.list_all_rooms()[1][0].occupied is True


def test_booked_rooms_are_listed_in_inventory_order() -> None:
    service = _build_service(floor_count=3, rooms_per_floor=3, top_floor_rooms=2)
    service.book_rooms(3)
    service.book_rooms(1)
    service.book_rooms(2)

    booked = service.list_booked_rooms()

    assert [room.number for room in booked] == [101, 102, 103, 201, 202, 203]


def test_occupied_rooms_stay_unique_subset_of_inventory() -> None:
    service = _build_service(floor_count=4, rooms_per_floor=6, top_floor_rooms=4)
    all_rooms = {
        (room.floor, room.number)
        for rooms in service.list_all_rooms().values()
        for room in rooms
    }
    rng = random.Random(7)

    for _ in range(40):
        service.book_rooms(rng.randint(1, 6))
        booked = _identities(service.list_booked_rooms())
        assert len(booked) == len(set(booked))
        assert set(booked) <= all_rooms


@pytest.mark.parametrize(
    ("workers", "per_request", "layout"),
    [
        (8, 2, {"floor_count": 2, "rooms_per_floor": 10, "top_floor_rooms": 6}),
        (5, 3, {"floor_count": 2, "rooms_per_floor": 10, "top_floor_rooms": 5}),
        (20, 1, {"floor_count": 3, "rooms_per_floor": 8, "top_floor_rooms": 4}),
    ],
)
def test_concurrent_bookings_never_share_a_room(workers: int, per_request: int, layout: dict) -> None:
    service = _build_service(**layout)
    total_rooms = sum(len(rooms) for rooms in service.list_all_rooms().values())
    assert total_rooms == workers * per_request

    barrier = threading.Barrier(workers)

    def book() -> object:
        barrier.wait()
        return service.book_rooms(per_request)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        outcomes = list(executor.map(lambda _: book(), range(workers)))

    assert all(isinstance(outcome, Booked) for outcome in outcomes)
    claimed = [identity for outcome in outcomes for identity in _identities(outcome.rooms)]
    assert len(claimed) == len(set(claimed)) == total_rooms

    booked = _identities(service.list_booked_rooms())
    everything = [
        (room.floor, room.number)
        for rooms in service.list_all_rooms().values()
        for room in rooms
    ]
    assert booked == everything


def test_concurrent_reads_see_whole_bookings_only() -> None:
    service = _build_service(floor_count=4, rooms_per_floor=10, top_floor_rooms=10)
    stop = threading.Event()
    observed_sizes: list[int] = []

    def reader() -> None:
        while not stop.is_set():
            observed_sizes.append(len(service.list_booked_rooms()))

    reader_thread = threading.Thread(target=reader)
    reader_thread.start()
    try:
        for _ in range(8):
            service.book_rooms(5)
    finally:
        stop.set()
        reader_thread.join()

    assert all(size % 5 == 0 for size in observed_sizes)
