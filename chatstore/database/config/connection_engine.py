"""
Connection Engine (SQLAlchemy asyncio)

Purpose
-------
Centralizes database initialization for the persistence layer:
- Defines shared MetaData for table and schema objects.
- Exposes a Declarative Base class for ORM models.
- Provides `Database`, an explicitly constructed owner of the async Engine
  (connection pool + SQL execution entry point) and its session factory.

Notes
-----
- A `Database` is injectable: tests and callers construct their own and pass it
  with `db=` or register it with `set_database(...)`.
- `get_database()` lazily builds the process default from `settings` on first use.
- In-memory SQLite URLs share one connection (`StaticPool`) and SQLite connections
  enable foreign keys, so FK ordering is enforced the same way PostgreSQL does.
- All ORM models must inherit from `declarativeBase` to participate in schema
  creation.
"""

import logging

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool
from sqlalchemy.schema import MetaData

from chatstore.database.config.config import settings

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Metadata object: stores schema-level information about tables,
# constraints, indexes, etc. Shared across all models.
# --------------------------------------------------------------------
metadata = MetaData()
"""
Metadata object: Stores schema-level information about tables, constraints, indexes, etc. Shared across all models.
"""

# --------------------------------------------------------------------
# Declarative Base: root class for ORM models.
# --------------------------------------------------------------------
declarativeBase = declarative_base(metadata=metadata)
"""Declarative Base: Root class for ORM models.
All model classes should inherit from this to gain ORM features and automatic schema generation.
"""


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Owner of one async Engine and its session factory.

    Parameters
    ----------
    url : str
        SQLAlchemy async URL, e.g. ``postgresql+asyncpg://user:pw@host/db``.
    echo : bool
        Log every SQL statement.
    pool_size : int | None
        Pool size for server backends; ignored for SQLite.
    """

    def __init__(self, url: str, echo: bool = False, pool_size: int | None = None):
        self.url = make_url(url)
        kwargs = {"echo": echo, "pool_pre_ping": True}

        if self.url.get_backend_name() == "sqlite":
            kwargs.pop("pool_pre_ping")
            if self.url.database in (None, "", ":memory:"):
                kwargs["poolclass"] = StaticPool
                kwargs["connect_args"] = {"check_same_thread": False}
        elif pool_size is not None:
            kwargs["pool_size"] = pool_size

        self.engine: AsyncEngine = create_async_engine(self.url, **kwargs)
        if self.url.get_backend_name() == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.session_factory = async_sessionmaker(
            bind=self.engine,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, config=None) -> "Database":
        """Build a `Database` from `Settings` (defaults to the module singleton)."""
        config = config or settings
        return cls(config.DATABASE_URL, echo=config.DB_ECHO, pool_size=config.DB_POOL_SIZE)

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    async def create_all(self) -> None:
        """Create every table registered on `metadata`."""
        # Entities register themselves on import.
        import chatstore.database.entities  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        logger.info("Schema created on %s", self.url.render_as_string(hide_password=True))

    async def drop_all(self) -> None:
        import chatstore.database.entities  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.drop_all)

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()

    def __repr__(self) -> str:
        return f"Database(url={self.url.render_as_string(hide_password=True)!r})"


_default_database: Database | None = None


def set_database(db: Database | None) -> None:
    """Register `db` as the process default used when no `db=` is passed."""
    global _default_database
    _default_database = db


def get_database() -> Database:
    """Return the process default `Database`, building it from settings on first use."""
    global _default_database
    if _default_database is None:
        _default_database = Database.from_settings()
    return _default_database
