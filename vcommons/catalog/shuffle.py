"""Seeded shuffling for the daily featured rotation.

The arithmetic mirrors the site's JavaScript exactly (32-bit wraparound,
``Math.imul`` and unsigned shifts) so both sides produce the same order for
the same day.
"""

import math
from datetime import date
from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")

MASK_32 = 0xFFFFFFFF
MULBERRY_INCREMENT = 0x6D2B79F5


def _to_int32(value: int) -> int:
    value &= MASK_32
    return value - 0x100000000 if value & 0x80000000 else value


def _imul(a: int, b: int) -> int:
    """Low 32 bits of a product, as unsigned."""
    return (a * b) & MASK_32


def string_hash(text: str) -> int:
    """31-multiplier rolling hash with signed 32-bit overflow at every step."""
    h = 0
    for char in text:
        h = _to_int32((h << 5) - h + ord(char))
    return h


def daily_seed_key(day: date) -> str:
    """Date key for the seed, e.g. ``2024-0-15`` for 15 January 2024.

    The month is zero-based and nothing is zero-padded.
    """
    return f"{day.year}-{day.month - 1}-{day.day}"


def daily_seed(day: date) -> int:
    """Seed for the given UTC day."""
    return abs(string_hash(daily_seed_key(day)))


def mulberry32(seed: int) -> Callable[[], float]:
    """Return a mulberry32 generator producing floats in [0, 1)."""
    state = seed & MASK_32

    def random() -> float:
        nonlocal state
        state = (state + MULBERRY_INCREMENT) & MASK_32
        t = _imul(state ^ (state >> 15), state | 1)
        t = ((t + _imul(t ^ (t >> 7), t | 61)) & MASK_32) ^ t
        return ((t ^ (t >> 14)) & MASK_32) / 4294967296

    return random


def seeded_shuffle(items: Sequence[T], seed: int) -> List[T]:
    """Fisher-Yates shuffle driven by mulberry32. The input is not modified."""
    random = mulberry32(seed)
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = math.floor(random() * (i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
