# moviebooking

A small movie seat booking library. It keeps movies, theaters and seats in
memory and reserves seats atomically. A booking takes every requested seat
or none of them, even when many threads book at the same time.

## Model (`moviebooking.domain`)

- `Movie`: a frozen dataclass with `id`, `title` and `description`. All
  three have defaults.
- `Seat`: a zero-based `index` and a `label` such as `"A7"`. Two seats are
  equal, and hash the same, when their indices match. `Seat.from_index(5)`
  gives the seat labelled `"A6"`.
- `Theater`: a hall with an `id`, a `name` and a fixed single row of
  `Theater.CAPACITY` (20) seats.
  - `free_seats()` lists the open seats in index order.
  - `try_book(seats)` reserves all of the given seats. If any seat is
    already taken or has an index outside `0 … 19`, it returns `False` and
    changes nothing.

## Repository and manager

`moviebooking.repository` defines the abstract `BookingRepository` and the
thread-safe `InMemoryRepository`. `make_in_memory_repository()` returns an
`InMemoryRepository` seeded with this data:

| Movie id | Title        | Theaters                                   |
|----------|--------------|--------------------------------------------|
| 1        | Interstellar | 101 `CinemaA-Hall1`, 102 `CinemaA-Hall2`   |
| 2        | Inception    | 201 `CinemaB-Hall1`                        |

`moviebooking.manager.BookingManager` forwards every call to any
`BookingRepository`:

```python
from moviebooking.domain import Seat
from moviebooking.manager import BookingManager
from moviebooking.repository import make_in_memory_repository

manager = BookingManager(make_in_memory_repository())

for movie in manager.movies():
    print(movie.id, movie.title)

print([t.name for t in manager.theaters(1)])
print(len(manager.free_seats(1, 101)))          # 20

assert manager.book(1, 101, [Seat.from_index(0)])
assert not manager.book(1, 101, [Seat.from_index(0)])   # already taken
assert not manager.book(999, 101, [Seat.from_index(0)]) # unknown movie
```

For an unknown movie, `theaters()` returns an empty list. For an unknown
movie or theater, `free_seats()` raises `UnknownIdError` (a `LookupError`)
and `book()` returns `False`.

## Service layer (`moviebooking.service`)

`BookingService` wraps a manager and applies request-level rules. When a
request fails, it raises `ServiceError`, which carries a `code` (a
`StatusCode`) and a `message`:

- `list_theaters(movie_id)` raises `NOT_FOUND` when no theaters are found.
- `list_free_seats(movie_id, theater_id)` raises `NOT_FOUND` when the ids
  are unknown and also when no seat is free.
- `book_seats(movie_id, theater_id, seats)`:
  - raises `INVALID_ARGUMENT` for an empty seat list;
  - raises `INVALID_ARGUMENT` for a list that repeats a label;
  - raises `ALREADY_EXISTS` when the manager refuses the booking, whether
    the cause is a taken seat, an out-of-range index or an unknown id;
  - returns `True` on success.

  Seat indices are reduced modulo 256 before booking.

`seat_from_label("A17")` gives a `Seat` with index 16. When the second
character of a label is not a digit, the index is -1.

```python
from moviebooking.manager import BookingManager
from moviebooking.repository import make_in_memory_repository
from moviebooking.service import BookingService, ServiceError, seat_from_label

service = BookingService(BookingManager(make_in_memory_repository()))
service.book_seats(2, 201, [seat_from_label("A1"), seat_from_label("A2")])

try:
    service.book_seats(2, 201, [seat_from_label("A1")])
except ServiceError as err:
    print(err.code)   # StatusCode.ALREADY_EXISTS
```

## Endpoints (`moviebooking.endpoints`)

These functions build address strings:

- `tcp("127.0.0.1", 50051)` gives `"127.0.0.1:50051"`.
- `ipc("/tmp/booking.sock")` gives `"unix:/tmp/booking.sock"`. On Windows
  it gives an empty string.

The defaults are `127.0.0.1`, `50051` and `/tmp/booking.sock`.

## What it does not do

- The package has no network server and no command-line client.
  `BookingService` is called in-process, and the endpoint helpers only
  build strings.
- Nothing is persisted. All bookings are lost when the process ends.