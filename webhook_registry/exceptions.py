class SchemaInitError(Exception):
    """Base class for failures while bringing the store to its expected schema."""


class CatalogQueryError(SchemaInitError):
    """The store's table catalog could not be read."""


class SchemaCreationError(SchemaInitError):
    """A CREATE TABLE / CREATE INDEX statement failed.

    Carries the table whose creation was in progress and the text of the
    statement that failed.
    """

    def __init__(self, table: str, statement: str, reason: str = ""):
        self.table = table
        self.statement = statement
        message = f"Failed to create table {table!r}: {statement}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
