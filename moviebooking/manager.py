"""Application façade over a booking repository."""

from __future__ import annotations

from typing import Sequence

from .domain import Movie, Seat, Theater
from .repository import BookingRepository


class BookingManager:
    """Expose the booking use-cases while delegating storage to a repository."""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def movies(self) -> list[Movie]:
        """List all movies currently playing."""
        return self._repository.movies()

    def theaters(self, movie_id: int) -> list[Theater]:
        """List the theaters screening ``movie_id``."""
        return self._repository.theaters(movie_id)

    def free_seats(self, movie_id: int, theater_id: int) -> list[Seat]:
        """Return seat availability for one movie and hall."""
        return self._repository.free_seats(movie_id, theater_id)

    def book(self, movie_id: int, theater_id: int, seats: Sequence[Seat]) -> bool:
        """Reserve all of ``seats`` or none; return whether they were booked."""
        return self._repository.book(movie_id, theater_id, seats)