"""Data access for the booking domain, with an in-memory implementation."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence

from .domain import Movie, Seat, Theater


class UnknownIdError(LookupError):
    """Raised when a movie or theater id is not known to the repository."""


class BookingRepository(ABC):
    """Persistence boundary for movies, theaters and seat bookings."""

    @abstractmethod
    def movies(self) -> list[Movie]:
        """Return every known movie."""

    @abstractmethod
    def theaters(self, movie_id: int) -> list[Theater]:
        """Return the theaters showing ``movie_id``; empty if it is unknown."""

    @abstractmethod
    def free_seats(self, movie_id: int, theater_id: int) -> list[Seat]:
        """Return the free seats of one movie/theater pair."""

    @abstractmethod
    def book(self, movie_id: int, theater_id: int, seats: Sequence[Seat]) -> bool:
        """Book all of ``seats`` or none; return whether the booking happened."""


@dataclass
class _Entry:
    movie: Movie
    theaters: dict[int, Theater] = field(default_factory=dict)


class InMemoryRepository(BookingRepository):
    """Thread-safe repository holding a fixed dataset in memory."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._db: dict[int, _Entry] = {}
        self._seed()

    def _seed(self) -> None:
        for movie in (Movie(1, "Interstellar"), Movie(2, "Inception")):
            self._db[movie.id] = _Entry(movie)
        for movie_id, theater in (
            (1, Theater(101, "CinemaA-Hall1")),
            (1, Theater(102, "CinemaA-Hall2")),
            (2, Theater(201, "CinemaB-Hall1")),
        ):
            self._db[movie_id].theaters[theater.id] = theater

    def movies(self) -> list[Movie]:
        with self._lock:
            return [entry.movie for entry in self._db.values()]

    def theaters(self, movie_id: int) -> list[Theater]:
        with self._lock:
            entry = self._db.get(movie_id)
            return list(entry.theaters.values()) if entry else []

    def free_seats(self, movie_id: int, theater_id: int) -> list[Seat]:
        """Return the free seats; raise :class:`UnknownIdError` for unknown ids."""
        with self._lock:
            try:
                theater = self._db[movie_id].theaters[theater_id]
            except KeyError:
                raise UnknownIdError(
                    f"unknown movie {movie_id} / theater {theater_id}"
                ) from None
        return theater.free_seats()

    def book(self, movie_id: int, theater_id: int, seats: Sequence[Seat]) -> bool:
        with self._lock:
            entry = self._db.get(movie_id)
            theater = entry.theaters.get(theater_id) if entry else None
        if theater is None:
            return False
        return theater.try_book(seats)


def make_in_memory_repository() -> InMemoryRepository:
    """Create a fresh, seeded in-memory repository."""
    return InMemoryRepository()