"""
SQLAlchemy engine, session factory and declarative base.

One engine per application; one session per request.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all ORM records."""


def build_engine(url: str) -> Engine:
    """Build a SQLAlchemy engine for the given URL.

    SQLite connections are shared across threads so the engine can serve
    FastAPI's thread pool; in-memory databases use a single static
    connection so every session sees the same data.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker:
    """Return a session factory bound to engine."""
    return sessionmaker(bind=engine, autoflush=True, expire_on_commit=True)


def create_schema(engine: Engine) -> None:
    """Create all tables known to the declarative base."""
    # Record modules register their tables on import
    from userbase.infrastructure.users import model  # noqa: F401

    Base.metadata.create_all(engine)
    logger.info("Database schema ready (%s).", engine.url.get_backend_name())
