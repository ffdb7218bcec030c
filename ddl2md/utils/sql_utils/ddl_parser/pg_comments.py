# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
PostgreSQL COMMENT ON support.

PostgreSQL keeps column and table comments in separate statements:

    COMMENT ON COLUMN public.users.name IS '用户名';
    COMMENT ON TABLE users IS '用户表';

They are applied to the already parsed tables by name after every CREATE TABLE
has been parsed.
"""

import re
from typing import Dict, List

from ddl2md.schemas.ddl_models import AppliedComments, Table
from ddl2md.utils.loggings import get_logger

logger = get_logger(__name__)

# =============================================================================
# PRE-COMPILED REGEX PATTERNS FOR COMMENT ON
# =============================================================================

_IDENT = r'(?:"([^"]+)"|(\w+))'

_COLUMN_COMMENT_RE = re.compile(
    r"COMMENT\s+ON\s+COLUMN\s+"
    r'(?:(?:"[^"]+"|\w+)\.)?'
    + _IDENT + r"\." + _IDENT +
    r"\s+IS\s+'((?:''|[^'])*)'\s*;",
    re.IGNORECASE,
)

_TABLE_COMMENT_RE = re.compile(
    r"COMMENT\s+ON\s+TABLE\s+"
    r'(?:(?:"[^"]+"|\w+)\.)?'
    + _IDENT +
    r"\s+IS\s+'((?:''|[^'])*)'\s*;",
    re.IGNORECASE,
)


class _TableIndex:
    """Case-insensitive lookup from names to parsed tables and column positions."""

    def __init__(self, tables: List[Table]):
        self.tables: Dict[str, Table] = {}
        self.columns: Dict[str, Dict[str, int]] = {}
        for table in tables:
            key = table.name.lower()
            # Same rule as a dict built in input order: the last table wins
            self.tables[key] = table
            positions: Dict[str, int] = {}
            for position, column in enumerate(table.fields):
                positions.setdefault(column.name.lower(), position)
            self.columns[key] = positions

    def find_table(self, name: str):
        return self.tables.get(name.lower())

    def find_column_position(self, table_name: str, column_name: str):
        return self.columns.get(table_name.lower(), {}).get(column_name.lower())


def _unescape(literal: str) -> str:
    return literal.replace("''", "'")


def apply_postgres_comments(sql: str, tables: List[Table]) -> AppliedComments:
    """
    Apply COMMENT ON COLUMN / COMMENT ON TABLE statements to parsed tables.

    Column comments overwrite any inline comment. Statements naming an unknown
    table or column are ignored. Applying the same SQL twice leaves the tables
    unchanged.

    Args:
        sql: Original SQL text, comments not stripped
        tables: Parsed tables, updated in place

    Returns:
        How many column and table comments were applied
    """
    applied = AppliedComments()
    if not tables or not sql:
        return applied

    index = _TableIndex(tables)

    for match in _COLUMN_COMMENT_RE.finditer(sql):
        table_name = match.group(1) or match.group(2) or ""
        column_name = match.group(3) or match.group(4) or ""
        table = index.find_table(table_name)
        if table is None:
            logger.debug(f"COMMENT ON COLUMN for unknown table {table_name} ignored")
            continue
        position = index.find_column_position(table_name, column_name)
        if position is None:
            logger.debug(f"COMMENT ON COLUMN for unknown column {table_name}.{column_name} ignored")
            continue
        table.fields[position].constraints.comment = _unescape(match.group(5) or "")
        applied.columns += 1

    for match in _TABLE_COMMENT_RE.finditer(sql):
        table_name = match.group(1) or match.group(2) or ""
        table = index.find_table(table_name)
        if table is None:
            logger.debug(f"COMMENT ON TABLE for unknown table {table_name} ignored")
            continue
        table.table_comment = _unescape(match.group(3) or "")
        applied.tables += 1

    if applied.columns or applied.tables:
        logger.debug(f"Applied {applied.columns} column comment(s) and {applied.tables} table comment(s)")

    return applied
