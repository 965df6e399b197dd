"""Schema introspection against Vertica's ``v_catalog`` system tables."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from ..config.settings import VerticaConstants
from ..utils.sql_security import validate_optional_identifier, validate_sql_identifier

logger = logging.getLogger(__name__)

SYSTEM_SCHEMAS = ("v_catalog", "v_monitor", "v_internal", "v_func")

SCHEMA_NAMES_SQL = (
    "SELECT schema_name FROM v_catalog.schemata "
    "WHERE schema_name NOT IN ({}) ORDER BY schema_name"
).format(", ".join(f"'{name}'" for name in SYSTEM_SCHEMAS))

TABLE_NAMES_SQL = (
    "SELECT table_name FROM v_catalog.tables "
    "WHERE table_schema = ? ORDER BY table_name"
)

VIEW_NAMES_SQL = (
    "SELECT table_name FROM v_catalog.views "
    "WHERE table_schema = ? ORDER BY table_name"
)

COLUMNS_SQL = (
    "SELECT column_name, data_type, is_nullable, column_default "
    "FROM v_catalog.columns "
    "WHERE table_schema = ? AND table_name = ? "
    "ORDER BY ordinal_position"
)

HAS_TABLE_SQL = (
    "SELECT COUNT(*) FROM ("
    "SELECT table_name FROM v_catalog.tables "
    "WHERE LOWER(table_schema) = LOWER(?) AND LOWER(table_name) = LOWER(?) "
    "UNION ALL "
    "SELECT table_name FROM v_catalog.views "
    "WHERE LOWER(table_schema) = LOWER(?) AND LOWER(table_name) = LOWER(?)"
    ") AS found"
)


@dataclass(frozen=True)
class ColumnInfo:
    """A column as reported by ``v_catalog.columns``."""

    name: str
    data_type: str
    nullable: bool
    default: Optional[str] = None


class VerticaSchemaManager:
    """Read schemas, tables, views and columns through a driver connection."""

    def __init__(self, connection: Any) -> None:
        self.connection = connection

    def _resolve_schema(self, schema: Optional[str]) -> str:
        schema = validate_optional_identifier(schema)
        if schema is None:
            schema = self.connection.fetch_column(VerticaConstants.CURRENT_SCHEMA_SQL)
            logger.debug("Resolved current schema to %s", schema)
        return schema

    def list_schema_names(self) -> List[str]:
        return [row[0] for row in self.connection.fetch_all(SCHEMA_NAMES_SQL)]

    def list_table_names(self, schema: Optional[str] = None) -> List[str]:
        schema = self._resolve_schema(schema)
        return [row[0] for row in self.connection.fetch_all(TABLE_NAMES_SQL, (schema,))]

    def list_view_names(self, schema: Optional[str] = None) -> List[str]:
        schema = self._resolve_schema(schema)
        return [row[0] for row in self.connection.fetch_all(VIEW_NAMES_SQL, (schema,))]

    def list_table_columns(self, table: str, schema: Optional[str] = None) -> List[ColumnInfo]:
        """Return the columns of ``table`` in ordinal order."""
        table = validate_sql_identifier(table)
        schema = self._resolve_schema(schema)
        rows = self.connection.fetch_all(COLUMNS_SQL, (schema, table))
        return [
            ColumnInfo(name=name, data_type=data_type, nullable=bool(nullable), default=default)
            for name, data_type, nullable, default in rows
        ]

    def table_exists(self, table: str, schema: Optional[str] = None) -> bool:
        table = validate_sql_identifier(table)
        schema = self._resolve_schema(schema)
        count = self.connection.fetch_column(HAS_TABLE_SQL, (schema, table, schema, table))
        return bool(count)


__all__ = [
    "ColumnInfo",
    "VerticaSchemaManager",
    "SYSTEM_SCHEMAS",
]
