"""Request-level booking service with status-coded errors."""

from __future__ import annotations

import enum
import re
from typing import Iterable

from .domain import Movie, Seat, Theater
from .manager import BookingManager
from .repository import UnknownIdError

_LEADING_DIGITS = re.compile(r"\d+")


class StatusCode(enum.Enum):
    """Outcome codes reported by the booking service."""

    OK = 0
    INVALID_ARGUMENT = 3
    NOT_FOUND = 5
    ALREADY_EXISTS = 6


class ServiceError(Exception):
    """A request failed with a status code and message."""

    def __init__(self, code: StatusCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class BookingService:
    """Validate requests and forward them to a :class:`BookingManager`."""

    def __init__(self, manager: BookingManager) -> None:
        self._manager = manager

    def list_movies(self) -> list[Movie]:
        """Return every movie currently playing."""
        return self._manager.movies()

    def list_theaters(self, movie_id: int) -> list[Theater]:
        """Return the theaters showing ``movie_id``."""
        theaters = self._manager.theaters(movie_id)
        if not theaters:
            raise ServiceError(StatusCode.NOT_FOUND, "movie id not found")
        return theaters

    def list_free_seats(self, movie_id: int, theater_id: int) -> list[Seat]:
        """Return the still-free seats of a movie and theater pair."""
        try:
            seats = self._manager.free_seats(movie_id, theater_id)
        except UnknownIdError:
            seats = []
        if not seats:
            raise ServiceError(StatusCode.NOT_FOUND, "movie/theater id not found")
        return seats

    def book_seats(self, movie_id: int, theater_id: int, seats: Iterable[Seat]) -> bool:
        """Reserve the seats atomically; raise :class:`ServiceError` on failure."""
        labels: set[str] = set()
        request: list[Seat] = []
        for seat in seats:
            if seat.label in labels:
                raise ServiceError(
                    StatusCode.INVALID_ARGUMENT, "duplicate seat label in request"
                )
            labels.add(seat.label)
            request.append(Seat(seat.index % 256, seat.label))

        if not request:
            raise ServiceError(StatusCode.INVALID_ARGUMENT, "no seats provided")

        if not self._manager.book(movie_id, theater_id, request):
            raise ServiceError(
                StatusCode.ALREADY_EXISTS, "one or more seats already booked"
            )
        return True


def seat_from_label(label: str) -> Seat:
    """Turn a label such as ``A17`` into a seat with index ``16``.

    A label whose second character is not a digit yields index ``-1``.
    """
    number = 0
    if len(label) > 1 and label[1].isdigit():
        match = _LEADING_DIGITS.match(label, 1)
        number = int(match.group())
    return Seat(number - 1, label)