# =============================================================================
# lib/database.py - SQLAlchemy Engine & Session Wrapper
# =============================================================================
# This module owns the single SQLAlchemy engine for the process and hands out
# ORM sessions. It follows the singleton pattern: the engine is created lazily
# from settings.DATABASE_URL on first use and shared afterwards.
#
# Usage:
#   from lib.database import Database
#   with Database.new_session() as db:
#       db.get(Joke, joke_id)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)

# Declarative base shared by every table in lib/tables.py
Base = declarative_base()


class DatabaseError(Exception):
    """
    Error while setting up or talking to the database.

    Carries a suggestion on how to fix the problem, not just what failed.
    """

    def __init__(
        self,
        message: str,
        code: str = "DATABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite ignores FOREIGN KEY clauses unless this is set per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Process-wide holder for the SQLAlchemy engine and session factory.

    All methods are class methods so callers never instantiate it.

    Example:
        Database.create_tables()
        with Database.new_session() as db:
            user = db.query(User).filter_by(username="kody").first()
    """

    _engine: Engine | None = None
    _session_factory: sessionmaker | None = None

    @classmethod
    def configure(cls, url: str, echo: bool = False, **engine_kwargs: Any) -> Engine:
        """
        (Re)create the engine for ``url``.

        SQLite connections are opened with ``check_same_thread=False`` because
        FastAPI runs sync dependencies in a thread pool, and with foreign keys
        switched on so jokes must reference an existing user and are deleted
        with it.

        Raises:
            DatabaseError: If the URL cannot be turned into an engine
        """
        if url.startswith("sqlite"):
            connect_args = engine_kwargs.pop("connect_args", {})
            connect_args.setdefault("check_same_thread", False)
            engine_kwargs["connect_args"] = connect_args

        try:
            engine = create_engine(url, echo=echo, future=True, **engine_kwargs)
        except (SQLAlchemyError, ValueError) as e:
            raise DatabaseError(
                message=f"Failed to create database engine: {e}",
                code="ENGINE_INIT_FAILED",
                suggestion="Check DATABASE_URL in your .env file",
                details={"url": url},
            )

        if engine.dialect.name == "sqlite":
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)

        if cls._engine is not None:
            cls._engine.dispose()

        cls._engine = engine
        cls._session_factory = sessionmaker(
            bind=engine,
            autoflush=False,
            expire_on_commit=False,
            future=True,
        )
        logger.info(f"Database engine configured for {engine.url.render_as_string(hide_password=True)}")
        return engine

    @classmethod
    def get_engine(cls) -> Engine:
        """Get or create the singleton engine from settings."""
        if cls._engine is None:
            cls.configure(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
        return cls._engine

    @classmethod
    def create_tables(cls) -> None:
        """Create all tables that don't exist yet."""
        # Registers User/Joke on Base.metadata
        from lib import tables  # noqa: F401

        Base.metadata.create_all(cls.get_engine(), checkfirst=True)

    @classmethod
    def drop_tables(cls) -> None:
        """Drop every table. Only used by tests and the seed script."""
        from lib import tables  # noqa: F401

        Base.metadata.drop_all(cls.get_engine())

    @classmethod
    def new_session(cls) -> Session:
        """Open a new ORM session bound to the engine."""
        if cls._session_factory is None:
            cls.get_engine()
        return cls._session_factory()

    @classmethod
    def ping(cls) -> bool:
        """Return True if a trivial query succeeds."""
        try:
            with cls.get_engine().connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Database ping failed: {e}")
            return False
