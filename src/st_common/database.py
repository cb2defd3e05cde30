"""Synchronous SQLAlchemy engine for the user snapshot store.

The store is only touched at startup (load) and after a registration
(save), so a plain sync engine is enough.
"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from config.settings import settings


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""

    pass


def make_engine(url: str, echo: bool = False) -> Engine:
    # SQLite connections are handed across FastAPI's worker threads
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=echo, connect_args=connect_args)


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(engine, expire_on_commit=False)


engine: Engine = make_engine(settings.DATABASE_URL, echo=settings.DEBUG)

session_factory = make_session_factory(engine)
