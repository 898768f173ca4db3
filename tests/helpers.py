"""Catalog lookups shared by the tests."""

from sqlalchemy import inspect


def table_names(engine):
    return set(inspect(engine).get_table_names())


def index_names(engine, table):
    """Map each index on ``table`` to whether it is unique."""
    return {ix["name"]: bool(ix["unique"]) for ix in inspect(engine).get_indexes(table)}


def foreign_keys(engine, table):
    """(from column, referenced table, ON DELETE action) for each foreign key."""
    with engine.connect() as conn:
        rows = conn.exec_driver_sql(f"PRAGMA foreign_key_list({table})").fetchall()
    return {(row[3], row[2], row[6]) for row in rows}
