"""Module: session."""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from adocao_api.core.config import settings


def build_engine(url: str, **kwargs):
    connect_args = {}
    if url.startswith("sqlite"):
        # Route handlers run in the threadpool; sessions hop threads.
        connect_args["check_same_thread"] = False

    engine = create_engine(url, connect_args=connect_args, future=True, **kwargs)

    if engine.dialect.name == "sqlite":
        # SQLite ignores REFERENCES clauses unless asked per connection.
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = build_engine(settings.database_url, pool_pre_ping=True)

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
