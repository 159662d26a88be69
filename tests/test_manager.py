from concurrent.futures import ThreadPoolExecutor

from moviebooking.domain import Seat, Theater
from moviebooking.manager import BookingManager
from moviebooking.repository import make_in_memory_repository


def _manager() -> BookingManager:
    return BookingManager(make_in_memory_repository())


def test_atomic_booking():
    mgr = _manager()
    assert mgr.book(1, 101, [Seat(0, "A1")]) is True
    assert mgr.book(1, 101, [Seat(0, "A1")]) is False


def test_concurrent_race():
    mgr = _manager()
    with ThreadPoolExecutor(max_workers=2) as pool:
        futures = [pool.submit(mgr.book, 1, 101, [Seat(1, "A2")]) for _ in range(2)]
        results = [f.result() for f in futures]
    assert sorted(results) == [False, True]
    assert Seat(1) not in mgr.free_seats(1, 101)


def test_concurrent_independent_bookings():
    mgr = _manager()
    with ThreadPoolExecutor(max_workers=2) as pool:
        f1 = pool.submit(mgr.book, 2, 201, [Seat(0, "A1")])
        f2 = pool.submit(mgr.book, 2, 201, [Seat(5, "A6")])
        assert f1.result() is True
        assert f2.result() is True
    assert mgr.free_seats(2, 201) != []
    assert len(mgr.free_seats(2, 201)) == Theater.CAPACITY - 2


def test_free_seats_list_updates():
    mgr = _manager()
    before = len(mgr.free_seats(1, 101))
    assert mgr.book(1, 101, [Seat(2, "A3")]) is True
    after = len(mgr.free_seats(1, 101))
    assert after == before - 1


def test_out_of_range_seat_is_rejected():
    mgr = _manager()
    assert mgr.book(1, 101, [Seat(25, "A26")]) is False


def test_non_existent_movie_or_theater():
    mgr = _manager()
    assert mgr.book(999, 101, [Seat(0, "A1")]) is False
    assert mgr.book(1, 999, [Seat(0, "A1")]) is False


def test_book_all_seats_then_reject():
    mgr = _manager()
    for i in range(Theater.CAPACITY):
        assert mgr.book(1, 101, [Seat.from_index(i)]) is True
    assert mgr.free_seats(1, 101) == []
    assert mgr.book(1, 101, [Seat(0, "A1")]) is False


def test_movies_and_theaters_forwarded():
    mgr = _manager()
    assert [m.title for m in mgr.movies()] == ["Interstellar", "Inception"]
    assert sorted(t.id for t in mgr.theaters(1)) == [101, 102]
    assert mgr.theaters(999) == []