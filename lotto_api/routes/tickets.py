from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from ..auth import current_actor, require_actor
from ..config import load_settings
from ..errors import NotFoundError
from ..schemas import TicketPurchaseRequest, TicketResponse
from ..services.periods import next_draw_date, today
from ..services.tickets import TicketRepository

bp = Blueprint("tickets", __name__)
ticket_repo = TicketRepository()


@bp.before_request
def verify_actor():
    require_actor()


@bp.get("")
def list_tickets():
    actor = current_actor()
    tickets = ticket_repo.list_for_user(actor.id)
    return jsonify([TicketResponse(**ticket.to_dict()).model_dump() for ticket in tickets])


@bp.post("")
def purchase_ticket():
    actor = current_actor()
    payload = request.get_json(force=True, silent=True) or {}
    data = TicketPurchaseRequest.model_validate(payload)

    settings = load_settings()
    draw_date = next_draw_date(today(settings.lottery.timezone))
    ticket = ticket_repo.create_ticket(user_id=actor.id, number=data.number, draw_date=draw_date)
    current_app.logger.debug("User %s bought ticket %s for %s", actor.id, ticket.id, draw_date)

    return jsonify(TicketResponse(**ticket.to_dict()).model_dump()), 201


@bp.get("/<int:ticket_id>")
def get_ticket(ticket_id: int):
    actor = current_actor()
    ticket = ticket_repo.get_ticket(ticket_id)
    if not ticket or ticket.user_id != actor.id:
        raise NotFoundError("ticket not found")
    return jsonify(TicketResponse(**ticket.to_dict()).model_dump())
