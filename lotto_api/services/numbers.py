from __future__ import annotations

import secrets
from typing import Optional, Protocol

MAX_WINNING_NUMBER = 999_999
NUMBER_WIDTH = 6


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int:
        ...


_system_random = secrets.SystemRandom()


def generate_winning_number(rng: Optional[RandomSource] = None) -> str:
    """Draw a uniformly random six digit string, e.g. ``"004217"``."""
    source = rng if rng is not None else _system_random
    value = source.randint(0, MAX_WINNING_NUMBER)
    if not 0 <= value <= MAX_WINNING_NUMBER:
        raise ValueError(f"Random source returned out-of-range value: {value}")
    return str(value).zfill(NUMBER_WIDTH)
