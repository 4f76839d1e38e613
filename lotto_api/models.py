from __future__ import annotations

import datetime as dt

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

ROLE_USER = "user"
ROLE_ADMIN = "admin"

STATUS_PENDING = "pending"
STATUS_WON = "won"
STATUS_LOST = "lost"


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc).replace(tzinfo=None)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(64), nullable=False, unique=True)
    role = Column(String(16), nullable=False, default=ROLE_USER)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "role": self.role,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    number = Column(String(6), nullable=False)
    draw_date = Column(String(10), nullable=False, index=True)
    status = Column(String(16), nullable=False, default=STATUS_PENDING)
    prize_amount = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "number": self.number,
            "draw_date": self.draw_date,
            "status": self.status,
            "prize_amount": self.prize_amount,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


class Draw(Base):
    __tablename__ = "draws"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(String(10), nullable=False, index=True)
    winning_number = Column(String(6), nullable=False)
    # Cached slices of winning_number, fixed at creation.
    first_three_digits = Column(String(3), nullable=False)
    last_three_digits = Column(String(3), nullable=False)
    last_two_digits = Column(String(2), nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date,
            "winning_number": self.winning_number,
            "first_three_digits": self.first_three_digits,
            "last_three_digits": self.last_three_digits,
            "last_two_digits": self.last_two_digits,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
