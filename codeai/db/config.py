"""Database configuration for the CodeAI chat backend."""
from typing import Callable, Generator

from sqlalchemy import event
from sqlmodel import Session, create_engine

from codeai.config import DATABASE_URL, IS_SQLITE

if IS_SQLITE:
    print(f"[DB CONFIG] Using SQLite database: {DATABASE_URL}")
else:
    print("[DB CONFIG] Using PostgreSQL database")

connect_args = {"check_same_thread": False} if IS_SQLITE else {}
engine = create_engine(DATABASE_URL, echo=False, connect_args=connect_args)


def enable_sqlite_foreign_keys(target_engine) -> None:
    """Turn on FK enforcement so conversation deletes cascade in SQLite."""

    @event.listens_for(target_engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


if IS_SQLITE:
    enable_sqlite_foreign_keys(engine)


def get_session() -> Generator[Session, None, None]:
    """Dependency for getting database sessions."""
    with Session(engine) as session:
        yield session


def get_session_factory() -> Callable[[], Session]:
    """
    Dependency returning a factory for fresh sessions.

    Streaming responses outlive the request-scoped session, so the
    message pipeline opens its own session through this factory.
    """
    return lambda: Session(engine)
