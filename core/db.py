# core/db.py
from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()


def make_engine(database_url: str):
    """Create an engine; SQLite connections may be shared with Flet's handler threads."""
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, future=True, connect_args=connect_args)


def make_session_factory(engine):
    # expire_on_commit=False keeps loaded attributes readable after the session closes
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)


@contextmanager
def session_scope(session_factory):
    """Yield a session for one unit of work and always close it."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
