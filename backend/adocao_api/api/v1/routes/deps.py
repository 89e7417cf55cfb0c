"""Module: deps."""

from typing import Annotated, Generator

from fastapi import Path
from sqlalchemy.orm import Session

from adocao_api.db.session import SessionLocal

# Largest value a BIGINT primary key (and SQLite INTEGER) can hold.
MAX_ID = 2**63 - 1

# Path id: out-of-range values are rejected as 400 before touching the DB.
EntityId = Annotated[int, Path(le=MAX_ID)]


# Dependency provider: one DB session per request lifecycle.
# Tests override this with a session bound to an in-memory engine.
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
