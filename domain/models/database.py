"""
Database configuration and session management.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.exceptions import StoreError

logger = logging.getLogger("menucalendar.database")

# Create SQLAlchemy Base
Base = declarative_base()


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Handle on the single-file SQLite store.

    Opened once at startup and closed at shutdown. Every unit of work takes
    its own session through session(); sessions may be used from worker
    threads, so the connection is not pinned to the creating thread.
    """

    def __init__(self, path: str, echo: bool = False):
        self.path = path
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def url(self) -> str:
        return f"sqlite:///{self.path}"

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database is not open")
        return self._engine

    def open(self) -> "Database":
        """Create the engine and make sure the schema exists."""
        if self._engine is not None:
            return self

        kwargs = {"connect_args": {"check_same_thread": False}}
        if self.path == ":memory:":
            # one shared connection, otherwise every thread sees its own empty db
            kwargs["poolclass"] = StaticPool

        engine = create_engine(self.url, echo=self.echo, future=True, **kwargs)
        event.listen(engine, "connect", _enable_foreign_keys)

        self._engine = engine
        self._session_factory = sessionmaker(bind=engine, future=True, expire_on_commit=False)
        try:
            self.init_schema()
        except SQLAlchemyError as e:
            self.close()
            raise StoreError(str(getattr(e, "orig", None) or e)) from e
        logger.info("Connected to the SQLite database at %s", self.path)
        return self

    def init_schema(self) -> None:
        """Create tables that do not exist yet"""
        # models must be registered on Base before create_all
        from domain.models import meal, menu  # noqa: F401

        with self.engine.begin() as conn:
            Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database connection closed")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session and make sure it is closed after use."""
        if self._session_factory is None:
            raise RuntimeError("Database is not open")
        db = self._session_factory()
        try:
            yield db
        finally:
            db.close()

    def __enter__(self) -> "Database":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
