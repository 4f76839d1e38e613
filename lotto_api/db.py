from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool

SessionLocal = scoped_session(sessionmaker(autoflush=False, autocommit=False, future=True))
engine: Optional[Engine] = None

# Largest value an SQLite INTEGER primary key can hold.
MAX_ROW_ID = 2**63 - 1

# One unit of work at a time across the process.
_lock = threading.RLock()


def _is_memory_url(database_url: str) -> bool:
    return database_url.startswith("sqlite") and (
        database_url.endswith(":memory:") or database_url in ("sqlite://", "sqlite:///")
    )


def init_engine(database_url: str) -> Engine:
    global engine
    if engine is not None:
        SessionLocal.remove()
        engine.dispose()

    if _is_memory_url(database_url):
        # Every session must see the same in-memory database.
        engine = create_engine(
            database_url,
            future=True,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url, future=True, echo=False, pool_pre_ping=True)
    SessionLocal.configure(bind=engine)
    return engine


@contextmanager
def session_scope() -> Iterator[Session]:
    if engine is None:
        raise RuntimeError("Database engine is not initialised; call init_engine() first")
    with _lock:
        session = SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
