"""Actor resolution at the HTTP boundary.

Credentials are verified by the gateway in front of this service, which
forwards the authenticated user's id in the ``X-Actor-Id`` header. The id has
to name a user in the user store; the role always comes from the store.
"""

from __future__ import annotations

from typing import Optional

from flask import g, request

from .errors import AuthenticationError, AuthorizationError
from .schemas import Actor
from .services.users import UserRepository

ACTOR_HEADER = "X-Actor-Id"

user_repo = UserRepository()


def resolve_actor() -> Optional[Actor]:
    raw = request.headers.get(ACTOR_HEADER, "").strip()
    if not (raw.isascii() and raw.isdigit()):
        return None
    user = user_repo.get_user(int(raw))
    if user is None:
        return None
    return Actor(id=user.id, role=user.role)


def require_actor(admin: bool = False) -> Actor:
    actor = resolve_actor()
    if actor is None:
        raise AuthenticationError()
    if admin and not actor.is_admin:
        raise AuthorizationError()
    g.actor = actor
    return actor


def current_actor() -> Actor:
    actor = getattr(g, "actor", None)
    if actor is None:
        raise AuthenticationError()
    return actor
