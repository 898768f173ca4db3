"""
Pytest configuration and shared fixtures for webhook_registry tests.

Every test gets its own file-backed SQLite store so transactional DDL and
foreign-key cascades behave as they do in the running service.
"""

import pytest
from sqlalchemy import event

from webhook_registry.database import make_engine


@pytest.fixture
def engine(tmp_path):
    """Fresh, empty registry store."""
    db_engine = make_engine(f"sqlite:///{tmp_path / 'registry.db'}")
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def executed(engine):
    """Record the text of every statement sent to the store."""
    statements = []

    def record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(engine, "before_cursor_execute", record)
    yield statements
    event.remove(engine, "before_cursor_execute", record)
