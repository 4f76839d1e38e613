from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv


@dataclass(frozen=True)
class FlaskSettings:
    secret_key: str = "lotto-dev-secret"
    debug: bool = False


@dataclass(frozen=True)
class LotterySettings:
    timezone: str = "Asia/Bangkok"
    bootstrap_admin_username: Optional[str] = "admin"


@dataclass(frozen=True)
class AppSettings:
    flask: FlaskSettings
    lottery: LotterySettings
    database_url: str
    log_level: str = "INFO"


def _timezone(key: str, default: str) -> str:
    value = os.getenv(key) or default
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise RuntimeError(f"Invalid timezone in {key}: {value}") from exc
    return value


@lru_cache(maxsize=1)
def load_settings(dotenv_path: Optional[str] = None) -> AppSettings:
    if dotenv_path:
        load_dotenv(dotenv_path)
    else:
        load_dotenv()

    flask_settings = FlaskSettings(
        secret_key=os.getenv("FLASK_SECRET_KEY", "lotto-dev-secret"),
        debug=os.getenv("FLASK_DEBUG", "0") == "1",
    )

    lottery_settings = LotterySettings(
        timezone=_timezone("DRAW_TIMEZONE", "Asia/Bangkok"),
        # An empty value disables the start-up admin account.
        bootstrap_admin_username=os.getenv("BOOTSTRAP_ADMIN_USERNAME", "admin") or None,
    )

    return AppSettings(
        flask=flask_settings,
        lottery=lottery_settings,
        database_url=os.getenv("DATABASE_URL", "sqlite:///:memory:"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
