from __future__ import annotations

import re
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

# ASCII digits only; \d would also accept other Unicode digits.
TICKET_NUMBER_PATTERN = re.compile(r"[0-9]{6}")


def is_valid_ticket_number(value: object) -> bool:
    return isinstance(value, str) and TICKET_NUMBER_PATTERN.fullmatch(value) is not None


class TicketPurchaseRequest(BaseModel):
    number: str = Field(..., description="Six digit ticket number, e.g. '012345'.")

    @field_validator("number")
    @classmethod
    def validate_number(cls, value: str) -> str:
        if not is_valid_ticket_number(value):
            raise ValueError("Invalid ticket number. Must be 6 digits.")
        return value


class TicketResponse(BaseModel):
    id: int
    user_id: int
    number: str
    draw_date: str
    status: Literal["pending", "won", "lost"]
    prize_amount: int


class DrawTriggerRequest(BaseModel):
    """A draw needs no input; unknown keys are ignored."""


class SettlementResponse(BaseModel):
    updated: int
    winners: int
    total_prize: int


class DrawResponse(BaseModel):
    id: int
    date: str
    winning_number: str
    first_three_digits: str
    last_three_digits: str
    last_two_digits: str
    settlement: Optional[SettlementResponse] = None


class DrawDateSummaryResponse(BaseModel):
    draw_date: str
    ticket_count: int
    settled_count: int
    winner_count: int
    winning_numbers: List[str] = Field(default_factory=list)


class UserCreateRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    role: Literal["user", "admin"] = "user"

    @field_validator("username")
    @classmethod
    def strip_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Username must not be blank.")
        return value


class UserResponse(BaseModel):
    id: int
    username: str
    role: Literal["user", "admin"]


class Actor(BaseModel):
    """Identity handed to the lottery core by the authentication boundary."""

    id: int
    role: Literal["user", "admin"]

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
