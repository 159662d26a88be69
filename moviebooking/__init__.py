"""In-memory movie seat booking with atomic, all-or-nothing reservations."""

__version__ = "1.0.0"