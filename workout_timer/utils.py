from __future__ import annotations

import random
from datetime import datetime
from typing import Any, List, Optional, Sequence, TypeVar

T = TypeVar("T")


def _rng(rng: Optional[random.Random]) -> Any:
    # module-level functions share the global instance
    return rng if rng is not None else random


def shuffle(items: List[T], rng: Optional[random.Random] = None) -> List[T]:
    """Fisher-Yates shuffle in place. Returns the same list for chaining."""
    r = _rng(rng)
    i = len(items)
    while i > 1:
        j = r.randrange(i)
        i -= 1
        items[i], items[j] = items[j], items[i]
    return items


def unique_random_sample(items: Sequence[T], n: int, rng: Optional[random.Random] = None) -> List[T]:
    if n <= 0:
        return []
    copy = list(items)
    shuffle(copy, rng)
    return copy[:n]


def random_int_inclusive(lo: int, hi: int, rng: Optional[random.Random] = None) -> int:
    # Misconfigured ranges (min > max) are read as [max, min]
    if lo > hi:
        lo, hi = hi, lo
    return _rng(rng).randint(lo, hi)


def repeat_to_length(items: Sequence[T], length: int) -> List[T]:
    if not items:
        return []
    return [items[i % len(items)] for i in range(max(0, length))]


def days_difference(earlier: datetime, later: datetime) -> int:
    """Calendar days between two timestamps, ignoring time of day."""
    return (later.date() - earlier.date()).days


def describe_last_time(when: Optional[datetime], now: datetime) -> str:
    if when is None:
        return "Never"
    days = days_difference(when, now)
    if days <= 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    return f"{days} days ago"


def seconds_to_time_string(seconds: int | float) -> str:
    seconds = int(seconds)
    return f"{seconds // 60}:{seconds % 60:02d}"


def new_identifier(rng: Optional[random.Random] = None) -> str:
    return str(_rng(rng).randrange(10**14, 10**17))
