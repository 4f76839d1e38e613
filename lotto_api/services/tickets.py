from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from ..db import MAX_ROW_ID, session_scope
from ..errors import ValidationError
from ..models import STATUS_PENDING, STATUS_WON, Draw, Ticket
from ..schemas import is_valid_ticket_number
from .matching import match_ticket

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SettlementStats:
    updated: int = 0
    winners: int = 0
    total_prize: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"updated": self.updated, "winners": self.winners, "total_prize": self.total_prize}


class TicketRepository:
    def create_ticket(self, user_id: int, number: str, draw_date: str) -> Ticket:
        if not is_valid_ticket_number(number):
            raise ValidationError("Invalid ticket number. Must be 6 digits.", details={"number": number})

        with session_scope() as session:
            ticket = Ticket(
                user_id=user_id,
                number=number,
                draw_date=draw_date,
                status=STATUS_PENDING,
                prize_amount=0,
            )
            session.add(ticket)
            session.flush()
            session.refresh(ticket)
            session.expunge(ticket)
            return ticket

    def get_ticket(self, ticket_id: int) -> Optional[Ticket]:
        if not 0 < ticket_id <= MAX_ROW_ID:
            return None
        with session_scope() as session:
            ticket = session.get(Ticket, ticket_id)
            if ticket:
                session.expunge(ticket)
            return ticket

    def list_for_user(self, user_id: int) -> List[Ticket]:
        with session_scope() as session:
            tickets = session.query(Ticket).filter(Ticket.user_id == user_id).order_by(Ticket.id).all()
            for ticket in tickets:
                session.expunge(ticket)
            return tickets

    def list_for_draw_date(self, draw_date: str) -> List[Ticket]:
        with session_scope() as session:
            tickets = session.query(Ticket).filter(Ticket.draw_date == draw_date).order_by(Ticket.id).all()
            for ticket in tickets:
                session.expunge(ticket)
            return tickets

    def settle(self, session: Session, draw: Draw) -> SettlementStats:
        """Apply ``draw`` to every pending ticket scheduled for its date.

        Runs inside the caller's session so the draw row and the ticket
        updates commit together. Tickets already won or lost keep their result.
        """
        updated = 0
        winners = 0
        total_prize = 0
        tickets = (
            session.query(Ticket)
            .filter(Ticket.draw_date == draw.date, Ticket.status == STATUS_PENDING)
            .order_by(Ticket.id)
            .all()
        )
        for ticket in tickets:
            result = match_ticket(ticket.number, draw)
            ticket.status = result.status
            ticket.prize_amount = result.prize_amount
            updated += 1
            if result.won:
                winners += 1
                total_prize += result.prize_amount
                logger.debug("Ticket %s won %s (%s)", ticket.id, result.prize_amount, result.tier)

        session.flush()
        return SettlementStats(updated=updated, winners=winners, total_prize=total_prize)

    def summarize_draw_dates(self) -> List[Dict[str, object]]:
        with session_scope() as session:
            stats_rows = (
                session.query(
                    Ticket.draw_date.label("draw_date"),
                    func.count(Ticket.id).label("ticket_count"),
                    func.sum(case((Ticket.status != STATUS_PENDING, 1), else_=0)).label("settled_count"),
                    func.sum(case((Ticket.status == STATUS_WON, 1), else_=0)).label("winner_count"),
                )
                .group_by(Ticket.draw_date)
                .all()
            )
            stats_map = {row.draw_date: row for row in stats_rows}

            draw_map: Dict[str, List[str]] = {}
            for draw_date, winning_number in session.query(Draw.date, Draw.winning_number).order_by(Draw.id):
                draw_map.setdefault(draw_date, []).append(winning_number)

            results: List[Dict[str, object]] = []
            for draw_date in sorted(set(stats_map) | set(draw_map), reverse=True):
                row = stats_map.get(draw_date)
                results.append(
                    {
                        "draw_date": draw_date,
                        "ticket_count": int(row.ticket_count) if row else 0,
                        "settled_count": int(row.settled_count or 0) if row else 0,
                        "winner_count": int(row.winner_count or 0) if row else 0,
                        "winning_numbers": draw_map.get(draw_date, []),
                    }
                )
            return results
