"""Twice-monthly draw calendar: draws settle on the 1st and the 16th."""

from __future__ import annotations

import datetime as dt
from zoneinfo import ZoneInfo

CUTOVER_DAY = 16


def next_draw_date(now: dt.date) -> str:
    """Return the ISO date of the draw a ticket bought on ``now`` belongs to.

    Before the 16th the draw is the 16th of the same month; from the 16th
    onwards it is the 1st of the following month.
    """
    if isinstance(now, dt.datetime):
        now = now.date()

    if now.day < CUTOVER_DAY:
        return now.replace(day=CUTOVER_DAY).isoformat()
    if now.month == 12:
        return dt.date(now.year + 1, 1, 1).isoformat()
    return dt.date(now.year, now.month + 1, 1).isoformat()


def today(timezone: str) -> dt.date:
    return dt.datetime.now(ZoneInfo(timezone)).date()
