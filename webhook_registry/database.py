from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import DATABASE_URL, SQL_ECHO

Base = declarative_base()

SessionLocal = sessionmaker(autoflush=False)


def is_memory_url(url: str) -> bool:
    database = make_url(url).database
    return database in (None, "", ":memory:") or "mode=memory" in url


def make_engine(url: str = DATABASE_URL, echo: bool = SQL_ECHO) -> Engine:
    """Create an engine for the registry store.

    On SQLite the pysqlite driver is switched out of its implicit transaction
    handling so that BEGIN is emitted for every transaction, DDL included, and
    foreign keys are enforced on every connection. Without this, CREATE TABLE
    statements are committed immediately and ON DELETE CASCADE is ignored.

    A connection may ask for ``BEGIN IMMEDIATE`` (or ``EXCLUSIVE``) through the
    ``begin_mode`` execution option. An in-memory store is held on a single
    shared connection, otherwise every thread would see its own empty database.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if is_memory_url(url):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=echo, **kwargs)

        @event.listens_for(engine, "connect")
        def _on_connect(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        @event.listens_for(engine, "begin")
        def _on_begin(conn):
            mode = conn.get_execution_options().get("begin_mode")
            conn.exec_driver_sql(f"BEGIN {mode}" if mode else "BEGIN")

        return engine

    return create_engine(url, echo=echo, pool_pre_ping=True)


# Database dependency
def get_db(request: Request):
    db = SessionLocal(bind=request.app.state.engine)
    try:
        yield db
    finally:
        db.close()
