# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Core DDL parsing functions and regex patterns.

This module finds CREATE TABLE statements, cuts out their bodies and turns
each body into a Table. Two strategies are provided:

- multi-table: every CREATE TABLE is segmented with a quote-aware scan, a
  broken statement is skipped and the others are kept
- single-table: the first CREATE TABLE name plus everything between the first
  "(" and the last ")" of the input, used when the multi-table scan finds
  nothing usable
"""

import re
from typing import List, Mapping, NamedTuple, Optional, Tuple

from ddl2md.schemas.ddl_models import ParseMode, ParseReport, SkippedTable, SkipReason, Table, TableParseResult
from ddl2md.utils.exceptions import DDLConvertException, ErrorCode
from ddl2md.utils.loggings import get_logger
from ddl2md.utils.sql_utils.ddl_cleaner import find_matching_paren, skip_statement_tail, strip_sql_comments
from ddl2md.utils.sql_utils.ddl_parser.fields import parse_fields

logger = get_logger(__name__)

# =============================================================================
# PRE-COMPILED REGEX PATTERNS FOR DDL PARSING
# =============================================================================

_QUALIFIED_NAME = r'(?:[`"]?(?P<schema>\w+)[`"]?\.)?[`"]?(?P<name>\w+)[`"]?'

_CREATE_TABLE_RE = re.compile(
    r"CREATE\s+TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?" + _QUALIFIED_NAME + r"\s*\(",
    re.IGNORECASE,
)

_TABLE_NAME_RE = re.compile(
    r"CREATE\s+TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?" + _QUALIFIED_NAME,
    re.IGNORECASE,
)

_BODY_RE = re.compile(r"\((.*)\)", re.DOTALL)


class TableSegment(NamedTuple):
    """One CREATE TABLE statement cut out of the SQL text."""

    name: str
    schema_name: Optional[str]
    body: Optional[str]  # None when the closing parenthesis is missing
    start: int
    end: int


# =============================================================================
# SEGMENTATION
# =============================================================================

def segment_create_tables(sql: str) -> List[TableSegment]:
    """
    Find every CREATE TABLE statement and its parenthesized body.

    Args:
        sql: SQL text with comments already removed

    Returns:
        Segments in source order; a segment whose body never closes has
        ``body`` set to None

    Raises:
        DDLConvertException: DDL_NO_CREATE_TABLE when no statement is found
    """
    segments: List[TableSegment] = []
    pos = 0

    while True:
        match = _CREATE_TABLE_RE.search(sql, pos)
        if not match:
            break

        open_pos = match.end() - 1
        close_pos = find_matching_paren(sql, open_pos)
        if close_pos is None:
            segments.append(
                TableSegment(match.group("name"), match.group("schema"), None, match.start(), len(sql))
            )
            # Keep looking for later statements after this header
            pos = match.end()
            continue

        end = skip_statement_tail(sql, close_pos + 1)
        segments.append(
            TableSegment(
                match.group("name"),
                match.group("schema"),
                sql[open_pos + 1:close_pos],
                match.start(),
                end,
            )
        )
        pos = end

    if not segments:
        raise DDLConvertException(ErrorCode.DDL_NO_CREATE_TABLE)

    return segments


def parse_table_body(
    name: str,
    body: str,
    schema_name: Optional[str] = None,
    type_synonyms: Optional[Mapping[str, str]] = None,
) -> TableParseResult:
    """Parse the body of one table; ``table`` is None when no column could be parsed."""
    columns, skipped_fields = parse_fields(body, table_name=name, type_synonyms=type_synonyms)
    if not columns:
        return TableParseResult(skipped_fields=skipped_fields)
    return TableParseResult(
        table=Table(name=name, schema_name=schema_name, fields=columns),
        skipped_fields=skipped_fields,
    )


# =============================================================================
# PARSING STRATEGIES
# =============================================================================

def parse_multiple_ddl(sql: str, type_synonyms: Optional[Mapping[str, str]] = None) -> ParseReport:
    """
    Parse every CREATE TABLE statement in the SQL text.

    A statement that cannot be parsed is recorded as skipped and logged; the
    remaining statements are still parsed.

    Raises:
        DDLConvertException: DDL_NO_CREATE_TABLE when no statement is found,
            DDL_NO_TABLES_PARSED when every statement was skipped
    """
    stripped = strip_sql_comments(sql)
    report = ParseReport(mode=ParseMode.MULTI)

    for segment in segment_create_tables(stripped):
        if segment.body is None:
            message = f"{ErrorCode.DDL_UNBALANCED_PARENTHESES.desc}: {segment.name}"
            logger.warning(f"Failed to parse table {segment.name}: {message}")
            report.skipped_tables.append(
                SkippedTable(name=segment.name, reason=SkipReason.UNBALANCED_PARENTHESES, message=message)
            )
            continue

        result = parse_table_body(segment.name, segment.body, segment.schema_name, type_synonyms)
        report.skipped_fields.extend(result.skipped_fields)
        if result.table is None:
            message = f"{ErrorCode.DDL_NO_COLUMNS.desc}: {segment.name}"
            logger.warning(f"Failed to parse table {segment.name}: {message}")
            report.skipped_tables.append(SkippedTable(name=segment.name, reason=SkipReason.NO_COLUMNS, message=message))
            continue

        report.tables.append(result.table)

    if not report.tables:
        skipped_names = ", ".join(t.name for t in report.skipped_tables)
        raise DDLConvertException(
            ErrorCode.DDL_NO_TABLES_PARSED,
            f"{ErrorCode.DDL_NO_TABLES_PARSED.desc} (skipped: {skipped_names})",
        )

    return report


def extract_single_table(sql: str) -> Tuple[str, Optional[str], str]:
    """
    Locate the table name and field body treating the input as one statement.

    Returns:
        Tuple of (table_name, schema_name, body)

    Raises:
        DDLConvertException: DDL_NO_CREATE_TABLE or DDL_NO_FIELD_BODY
    """
    stripped = strip_sql_comments(sql)

    name_match = _TABLE_NAME_RE.search(stripped)
    if not name_match:
        raise DDLConvertException(ErrorCode.DDL_NO_CREATE_TABLE)

    body_match = _BODY_RE.search(stripped)
    if not body_match:
        raise DDLConvertException(ErrorCode.DDL_NO_FIELD_BODY)

    return name_match.group("name"), name_match.group("schema"), body_match.group(1)


def parse_single_ddl(sql: str, type_synonyms: Optional[Mapping[str, str]] = None) -> ParseReport:
    """
    Parse the whole input as one CREATE TABLE statement.

    Raises:
        DDLConvertException: DDL_NO_CREATE_TABLE, DDL_NO_FIELD_BODY or
            DDL_NO_COLUMNS
    """
    name, schema_name, body = extract_single_table(sql)
    result = parse_table_body(name, body, schema_name, type_synonyms)
    if result.table is None:
        raise DDLConvertException(ErrorCode.DDL_NO_COLUMNS, f"{ErrorCode.DDL_NO_COLUMNS.desc}: {name}")

    return ParseReport(mode=ParseMode.SINGLE, tables=[result.table], skipped_fields=result.skipped_fields)
