"""Values that may be absent."""

from __future__ import annotations


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour, or None for an invalid hour."""
    if time_of_day < 0 or time_of_day > 24:
        return None
    if time_of_day < 22:
        return 5
    return 0