from .initializer import TABLE_CREATORS, ensure_schema, initialize, read_table_names

__all__ = ["TABLE_CREATORS", "ensure_schema", "initialize", "read_table_names"]
