"""
Database session configuration.

This module handles database engine creation and session management
using synchronous SQLAlchemy. Any SQL backend SQLAlchemy supports works;
SQLite is the default.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from backend.app.core.config import settings


def enable_sqlite_transactions(engine: Engine) -> Engine:
    """
    Make SQLite transactions start at BEGIN instead of at the first write.
    
    pysqlite defers BEGIN until a DML statement, so reads issued at the start
    of a transaction would otherwise run in autocommit mode. Other dialects
    are returned untouched.
    """
    if engine.dialect.name != "sqlite":
        return engine

    @event.listens_for(engine, "connect")
    def disable_pysqlite_autobegin(dbapi_conn, connection_record):
        dbapi_conn.isolation_level = None

    @event.listens_for(engine, "begin")
    def emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


def create_db_engine(url: str, echo: bool = False, **kwargs) -> Engine:
    """Create an engine with SQLite transaction handling applied."""
    return enable_sqlite_transactions(create_engine(url, echo=echo, future=True, **kwargs))


# Create engine
engine = create_db_engine(settings.database_url, echo=settings.db_echo)

# Create session factory
SessionLocal = sessionmaker(
    engine,
    expire_on_commit=False,
    autoflush=False,
)

# Create declarative base for models
Base = declarative_base()


def init_db(bind: Engine = None) -> None:
    """
    Create all tables registered on ``Base``.
    
    Existing tables are left untouched.
    """
    # Import models to ensure they are registered with Base
    from backend.app.models.parcel import Parcel  # noqa: F401

    Base.metadata.create_all(bind or engine)
