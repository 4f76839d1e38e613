from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import IntegrityError

from ..db import MAX_ROW_ID, session_scope
from ..errors import ConflictError
from ..models import ROLE_ADMIN, ROLE_USER, User


class UserRepository:
    def create_user(self, username: str, role: str = ROLE_USER) -> User:
        if role not in (ROLE_USER, ROLE_ADMIN):
            raise ValueError(f"Unknown role: {role}")
        try:
            with session_scope() as session:
                if session.query(User).filter(User.username == username).first() is not None:
                    raise ConflictError("Username already exists", details={"username": username})
                user = User(username=username, role=role)
                session.add(user)
                session.flush()
                session.refresh(user)
                session.expunge(user)
                return user
        except IntegrityError as exc:
            raise ConflictError("Username already exists", details={"username": username}) from exc

    def ensure_user(self, username: str, role: str) -> User:
        existing = self.get_by_username(username)
        if existing is not None:
            return existing
        return self.create_user(username, role)

    def get_user(self, user_id: int) -> Optional[User]:
        if not 0 < user_id <= MAX_ROW_ID:
            return None
        with session_scope() as session:
            user = session.get(User, user_id)
            if user:
                session.expunge(user)
            return user

    def get_by_username(self, username: str) -> Optional[User]:
        with session_scope() as session:
            user = session.query(User).filter(User.username == username).first()
            if user:
                session.expunge(user)
            return user

