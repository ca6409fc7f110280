"""
Database setup with SQLAlchemy 2.0.
Provides the process-wide store handle, session management, and base model.
"""
from typing import Generator
from contextlib import contextmanager
from pathlib import Path

from fastapi import Request
from sqlalchemy import MetaData, create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from inventory_api.logging_config import get_logger

logger = get_logger("database")


# Naming convention for constraints
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=NAMING_CONVENTION)


class Base(DeclarativeBase):
    """Base class for all database models."""
    metadata = metadata


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Store:
    """
    Handle on the relational store.

    Created once at startup and held for the lifetime of the process.
    Repositories and the auth service receive sessions from it, never
    the engine itself.
    """

    def __init__(self, url: str, echo: bool = False, foreign_keys: bool = False):
        self.url = url
        self.engine: Engine = self._build_engine(url, echo, foreign_keys)
        self.session_factory = sessionmaker(
            self.engine,
            class_=Session,
            expire_on_commit=False,
            autoflush=False
        )

    @staticmethod
    def _build_engine(url: str, echo: bool, foreign_keys: bool) -> Engine:
        parsed = make_url(url)

        if parsed.get_backend_name() != "sqlite":
            return create_engine(url, echo=echo, pool_pre_ping=True)

        database = parsed.database
        if database and database != ":memory:":
            Path(database).parent.mkdir(parents=True, exist_ok=True)
            engine = create_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False}
            )
        else:
            # In-memory SQLite lives on one connection; share it
            engine = create_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool
            )

        if foreign_keys:
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)

        return engine

    def create_all(self) -> None:
        """Create missing tables. Use Alembic for managed databases."""
        # Import all models to ensure they're registered
        from inventory_api.models import user, category, product  # noqa: F401

        Base.metadata.create_all(self.engine)
        logger.info("Database tables ensured")

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.

        Usage:
            with store.session() as db:
                db.execute(select(Category)).scalars().all()
        """
        db = self.session_factory()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def ping(self) -> bool:
        """Health check for database connection."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception:
            logger.warning("Database ping failed", exc_info=True)
            return False

    def dispose(self) -> None:
        """Close database connections."""
        self.engine.dispose()


def get_store(request: Request) -> Store:
    """Dependency returning the application's store handle."""
    return request.app.state.store


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints.
    Provides a database session and ensures proper cleanup.
    """
    with get_store(request).session() as db:
        yield db
