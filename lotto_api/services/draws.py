from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import List, Optional

from ..db import MAX_ROW_ID, session_scope
from ..models import Draw
from ..schemas import is_valid_ticket_number
from .matching import split_winning_number
from .numbers import RandomSource, generate_winning_number
from .periods import next_draw_date
from .tickets import SettlementStats, TicketRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrawOutcome:
    draw: Draw
    settlement: SettlementStats


def build_draw(draw_date: str, winning_number: str) -> Draw:
    if not is_valid_ticket_number(winning_number):
        raise ValueError(f"Winning number must be 6 digits, got {winning_number!r}")
    first_three, last_three, last_two = split_winning_number(winning_number)
    return Draw(
        date=draw_date,
        winning_number=winning_number,
        first_three_digits=first_three,
        last_three_digits=last_three,
        last_two_digits=last_two,
    )


class DrawRepository:
    def get_draw(self, draw_id: int) -> Optional[Draw]:
        if not 0 < draw_id <= MAX_ROW_ID:
            return None
        with session_scope() as session:
            draw = session.get(Draw, draw_id)
            if draw:
                session.expunge(draw)
            return draw

    def list_draws(self) -> List[Draw]:
        with session_scope() as session:
            draws = session.query(Draw).order_by(Draw.id).all()
            for draw in draws:
                session.expunge(draw)
            return draws


class DrawService:
    """Creates draws and settles the tickets scheduled for them."""

    def __init__(self, ticket_repo: Optional[TicketRepository] = None) -> None:
        self._tickets = ticket_repo or TicketRepository()

    def run_draw(self, now: dt.date, rng: Optional[RandomSource] = None) -> DrawOutcome:
        return self.record_draw(next_draw_date(now), generate_winning_number(rng))

    def record_draw(self, draw_date: str, winning_number: str) -> DrawOutcome:
        draw = build_draw(draw_date, winning_number)
        with session_scope() as session:
            session.add(draw)
            session.flush()
            stats = self._tickets.settle(session, draw)
            session.refresh(draw)
            session.expunge(draw)

        logger.info(
            "Draw %s for %s: winning number %s, settled %s tickets, %s winners, %s paid",
            draw.id,
            draw.date,
            draw.winning_number,
            stats.updated,
            stats.winners,
            stats.total_prize,
        )
        return DrawOutcome(draw=draw, settlement=stats)
