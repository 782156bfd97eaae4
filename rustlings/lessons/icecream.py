"""How much ice cream is left at a given hour."""

from __future__ import annotations

_U16_MAX = 2**16 - 1


def maybe_icecream(time_of_day: int) -> int | None:
    """Five before 22h, none left from 22h to 23h, None for invalid hours."""
    if not 0 <= time_of_day <= _U16_MAX:
        raise ValueError(f"time_of_day must be in 0..={_U16_MAX}, got {time_of_day}")
    if time_of_day >= 24:
        return None
    if time_of_day >= 22:
        return 0
    return 5