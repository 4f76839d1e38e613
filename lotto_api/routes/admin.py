from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from ..auth import require_actor
from ..config import load_settings
from ..schemas import (
    DrawDateSummaryResponse,
    DrawResponse,
    DrawTriggerRequest,
    UserCreateRequest,
    UserResponse,
)
from ..services.draws import DrawRepository, DrawService
from ..services.periods import today
from ..services.tickets import TicketRepository
from ..services.users import UserRepository

bp = Blueprint("admin", __name__)
draw_repo = DrawRepository()
ticket_repo = TicketRepository()
user_repo = UserRepository()
draw_service = DrawService(ticket_repo)


@bp.before_request
def verify_admin():
    require_actor(admin=True)


@bp.post("/draw")
def trigger_draw():
    payload = request.get_json(force=True, silent=True) or {}
    DrawTriggerRequest.model_validate(payload)

    settings = load_settings()
    outcome = draw_service.run_draw(today(settings.lottery.timezone))
    current_app.logger.info(
        "Draw %s triggered for %s, %s tickets settled",
        outcome.draw.id,
        outcome.draw.date,
        outcome.settlement.updated,
    )

    response = DrawResponse(**outcome.draw.to_dict(), settlement=outcome.settlement.to_dict())
    return jsonify(response.model_dump()), 201


@bp.get("/draws")
def list_draws():
    draws = draw_repo.list_draws()
    return jsonify([DrawResponse(**draw.to_dict()).model_dump(exclude={"settlement"}) for draw in draws])


@bp.get("/draw-dates")
def list_draw_dates():
    summary = ticket_repo.summarize_draw_dates()
    return jsonify([DrawDateSummaryResponse(**row).model_dump() for row in summary])


@bp.post("/users")
def create_user():
    payload = request.get_json(force=True, silent=True) or {}
    data = UserCreateRequest.model_validate(payload)
    user = user_repo.create_user(data.username, data.role)
    current_app.logger.info("Created %s account %s (id %s)", user.role, user.username, user.id)
    return jsonify(UserResponse(**user.to_dict()).model_dump()), 201
