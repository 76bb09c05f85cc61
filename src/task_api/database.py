"""Database connection and session management using SQLAlchemy.

The engine and its connection pool are created once per application by
``open_database`` and disposed when the application shuts down. Request
handlers get a short-lived ``Session`` through the ``get_db`` dependency.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Generator, Iterator, Tuple

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import Settings
from .models import Base

logger = logging.getLogger(__name__)


@dataclass
class Database:
    """Engine and session factory shared by every request of one application."""
    engine: Engine
    session_factory: sessionmaker

    def session(self) -> Session:
        return self.session_factory()


def _engine_options(db_url: str) -> Dict[str, Any]:
    """Pool and driver options for the dialect of ``db_url``."""
    if db_url.startswith("postgresql"):
        # Bounded pool, excess checkouts wait up to pool_timeout
        return {"pool_size": 10, "max_overflow": 20, "pool_timeout": 30, "pool_pre_ping": True}
    options: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if db_url == "sqlite:///:memory:":
        # One shared connection holds the in-memory database
        options["poolclass"] = StaticPool
    return options


def create_engine_and_session_factory(db_url: str) -> Tuple[Engine, sessionmaker]:
    """Create the engine for ``db_url`` and a session factory bound to it.

    Raises:
        Exception: If engine creation fails.
    """
    try:
        engine = create_engine(db_url, **_engine_options(db_url))
    except Exception as e:
        logger.error(f"Failed to create database engine: {e}", exc_info=True)
        raise

    session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    return engine, session_factory


@contextmanager
def open_database(settings: Settings) -> Iterator[Database]:
    """Acquire the task store for the lifetime of the application.

    The ``task`` table is created when missing. The engine is disposed on
    every exit path, including a failure while creating the table.
    """
    engine, session_factory = create_engine_and_session_factory(settings.database_url)
    try:
        Base.metadata.create_all(bind=engine)
        logger.info(f"Database ready ({engine.url.render_as_string(hide_password=True)})")
        yield Database(engine=engine, session_factory=session_factory)
    finally:
        engine.dispose()
        logger.info("Database engine disposed")


def get_db(request: Request) -> Generator[Session, None, None]:
    """Get a database session for one request.
    
    Yields:
        SQLAlchemy Session instance.
        
    Ensures proper cleanup of the session even if errors occur.
    """
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()


def check_db_connection(database: Database) -> bool:
    """Check database connectivity.
    
    Returns:
        True if connection successful, False otherwise.
    """
    try:
        with database.session() as db:
            db.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection check failed: {e}", exc_info=True)
        return False
