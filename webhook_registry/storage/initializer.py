"""
Brings the registry store to its expected schema at startup.

The managed tables are created only if they are missing from the catalog, and
every statement runs on the connection handed in by the caller, inside the
caller's transaction. Nothing here commits or rolls back: a failure leaves
the decision to the caller, whose rollback discards any table created earlier
in the same attempt.
"""
from types import MappingProxyType
from typing import Callable, Iterable, List, Mapping, Set
import logging

from sqlalchemy import Table, inspect
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import CreateIndex, CreateTable, ExecutableDDLElement

from ..exceptions import CatalogQueryError, SchemaCreationError
from ..models import Subscriber, Target, target_subscriber

logger = logging.getLogger(__name__)

TableCreator = Callable[[Connection], None]


def read_table_names(connection: Connection) -> Set[str]:
    """Return the names of all tables currently in the store's catalog."""
    try:
        return set(inspect(connection).get_table_names())
    except SQLAlchemyError as e:
        raise CatalogQueryError(f"Could not read table catalog: {e}") from e


def execute_statements(connection: Connection, table_name: str, statements: Iterable[ExecutableDDLElement]) -> None:
    """Run DDL statements in order, stopping at the first one that fails."""
    for statement in statements:
        try:
            connection.execute(statement)
        except SQLAlchemyError as e:
            sql = str(statement.compile(dialect=connection.dialect)).strip()
            raise SchemaCreationError(table_name, sql, str(getattr(e, "orig", None) or e)) from e


def table_creator(table: Table) -> TableCreator:
    # CREATE TABLE first, then each index; CreateTable never emits indexes itself.
    def create(connection: Connection) -> None:
        statements = [CreateTable(table)]
        statements += [CreateIndex(index) for index in sorted(table.indexes, key=lambda ix: ix.name)]
        execute_statements(connection, table.name, statements)

    return create


# Referenced tables come before the tables that reference them.
TABLE_CREATORS: Mapping[str, TableCreator] = MappingProxyType({
    Target.__tablename__: table_creator(Target.__table__),
    Subscriber.__tablename__: table_creator(Subscriber.__table__),
    target_subscriber.name: table_creator(target_subscriber),
})


def missing_tables(existing: Set[str]) -> List[str]:
    return [name for name in TABLE_CREATORS if name not in existing]


def initialize(connection: Connection) -> bool:
    """
    Create every managed table that is absent from the catalog.

    Returns True if at least one table was created, False if the store was
    already fully initialized (in which case nothing is written).

    Raises:
        CatalogQueryError: the catalog could not be read.
        SchemaCreationError: a table or index could not be created; tables
            after the failing one are not attempted.
    """
    to_create = missing_tables(read_table_names(connection))
    if not to_create:
        logger.debug("Schema already initialized, nothing to create")
        return False

    for name in to_create:
        logger.info(f"Creating table {name}")
        TABLE_CREATORS[name](connection)

    return True


def ensure_schema(engine: Engine) -> bool:
    """Run initialize() in its own transaction, committing only if it succeeds.

    On SQLite the transaction takes the write lock before the catalog is read,
    so an initializer started while another is running waits for it and then
    finds the tables already in place.
    """
    with engine.connect() as connection:
        connection.execution_options(begin_mode="IMMEDIATE")
        with connection.begin():
            created = initialize(connection)
    if created:
        logger.info("Schema initialized")
    return created
