"""Engine, session factory and the request-scoped session dependency."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from catalog.config import get_settings


def connect_args_for(database_url: str) -> dict[str, Any]:
    """DBAPI connect arguments for a database URL.

    SQLite connections are shared across the threads FastAPI runs sync
    handlers on, so the same-thread check is turned off for them.
    """
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


def make_engine(database_url: str) -> Engine:
    """Create an engine for the catalog database at ``database_url``."""
    return create_engine(
        database_url,
        pool_pre_ping=True,
        connect_args=connect_args_for(database_url),
    )


def make_session_factory(bind: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)


engine = make_engine(get_settings().database_url)
SessionLocal = make_session_factory(engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Yield a catalog session for one request and close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create the catalog tables that do not exist yet."""
    # Registers Category and Product on Base.metadata
    from catalog import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
