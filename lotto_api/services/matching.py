"""Prize tiers for six digit tickets.

Rules are checked in a fixed order and the first one that matches decides the
outcome, so a ticket is paid for one tier only:

1. exact match with the winning number
2. last three digits
3. last two digits
4. first three digits
5. running number (winning number plus or minus one)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from ..models import STATUS_LOST, STATUS_WON

FIRST_PRIZE = 6_000_000
LAST_THREE_PRIZE = 4_000
LAST_TWO_PRIZE = 2_000
FIRST_THREE_PRIZE = 4_000
RUNNING_NUMBER_PRIZE = 100_000

TIER_FIRST_PRIZE = "first_prize"
TIER_LAST_THREE = "last_three_digits"
TIER_LAST_TWO = "last_two_digits"
TIER_FIRST_THREE = "first_three_digits"
TIER_RUNNING_NUMBER = "running_number"


class DrawDigits(Protocol):
    winning_number: str
    first_three_digits: str
    last_three_digits: str
    last_two_digits: str


@dataclass(frozen=True)
class MatchResult:
    status: str
    prize_amount: int
    tier: Optional[str] = None

    @property
    def won(self) -> bool:
        return self.status == STATUS_WON


LOST = MatchResult(status=STATUS_LOST, prize_amount=0)


def split_winning_number(winning_number: str) -> Tuple[str, str, str]:
    """Return ``(first_three, last_three, last_two)`` for a winning number."""
    return winning_number[:3], winning_number[-3:], winning_number[-2:]


def match_ticket(number: str, draw: DrawDigits) -> MatchResult:
    if number == draw.winning_number:
        return MatchResult(STATUS_WON, FIRST_PRIZE, TIER_FIRST_PRIZE)
    if number[-3:] == draw.last_three_digits:
        return MatchResult(STATUS_WON, LAST_THREE_PRIZE, TIER_LAST_THREE)
    if number[-2:] == draw.last_two_digits:
        return MatchResult(STATUS_WON, LAST_TWO_PRIZE, TIER_LAST_TWO)
    if number[:3] == draw.first_three_digits:
        return MatchResult(STATUS_WON, FIRST_THREE_PRIZE, TIER_FIRST_THREE)

    # Numeric adjacency; 000000 and 999999 are not neighbours.
    if abs(int(number) - int(draw.winning_number)) == 1:
        return MatchResult(STATUS_WON, RUNNING_NUMBER_PRIZE, TIER_RUNNING_NUMBER)

    return LOST
