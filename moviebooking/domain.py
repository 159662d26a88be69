"""Domain value types: movies, seats and theater halls."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import ClassVar, Iterable


@dataclass(frozen=True)
class Movie:
    """Immutable description of a movie available for booking."""

    id: int = 0
    title: str = ""
    description: str = ""


@dataclass(frozen=True, eq=False)
class Seat:
    """One seat in a theater row; identity is the zero-based index alone."""

    index: int
    label: str = ""

    @classmethod
    def from_index(cls, index: int) -> "Seat":
        """Build the seat at ``index`` with its ``A<n>`` label (``5`` -> ``A6``)."""
        return cls(index, f"A{index + 1}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seat):
            return NotImplemented
        return self.index == other.index

    def __hash__(self) -> int:
        return hash(self.index)


@dataclass(eq=False)
class Theater:
    """A single screening hall with a fixed row of seats and atomic booking."""

    CAPACITY: ClassVar[int] = 20

    id: int
    name: str
    _occupied: set[int] = field(default_factory=set, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def free_seats(self) -> list[Seat]:
        """Return the seats not yet taken, in index order."""
        with self._lock:
            taken = frozenset(self._occupied)
        return [Seat.from_index(i) for i in range(self.CAPACITY) if i not in taken]

    def try_book(self, seats: Iterable[Seat]) -> bool:
        """Reserve every seat in ``seats`` or none of them.

        Returns ``False`` without any change if a seat index is out of range
        or already taken.
        """
        wanted = [seat.index for seat in seats]
        with self._lock:
            if any(not 0 <= index < self.CAPACITY for index in wanted):
                return False
            if any(index in self._occupied for index in wanted):
                return False
            self._occupied.update(wanted)
        return True