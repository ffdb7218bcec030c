# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Field splitting and column definition parsing.
"""

import re
from typing import List, Mapping, Optional, Tuple, Union

from ddl2md.schemas.ddl_models import Column, SkippedField, SkipReason
from ddl2md.utils.loggings import get_logger
from ddl2md.utils.sql_utils.ddl_parser.constraints import parse_constraints
from ddl2md.utils.sql_utils.ddl_parser.type_normalizer import normalize_type

logger = get_logger(__name__)

# =============================================================================
# PRE-COMPILED REGEX PATTERNS FOR FIELD PARSING
# =============================================================================

_IDENTIFIER_QUOTES_RE = re.compile(r'[`"]')

# PRIMARY KEY (...), FOREIGN KEY (...), UNIQUE (...), CHECK (...)
_TABLE_CONSTRAINT_RE = re.compile(
    r"^(?:PRIMARY\s+KEY|FOREIGN\s+KEY|UNIQUE|CHECK)\s*\(",
    re.IGNORECASE,
)

# Only applied when the field does not start with a quoted identifier
_NAMED_CONSTRAINT_RE = re.compile(
    r"^(?:CONSTRAINT\s"
    r"|EXCLUDE\s*\("
    r"|(?:(?:UNIQUE|FULLTEXT|SPATIAL)\s+)?(?:KEY|INDEX)\s+(?:\w+\s*)?\((?!\s*\d))",
    re.IGNORECASE,
)

# Multi-word type spellings read as one token
_MULTI_WORD_TYPES = (
    r"DOUBLE\s+PRECISION"
    r"|CHARACTER\s+VARYING"
    r"|BIT\s+VARYING"
    r"|(?:TIMESTAMP|TIME)(?:\s*\(\s*\d+\s*\))?\s+WITH(?:OUT)?\s+TIME\s+ZONE"
)

_FIELD_RE = re.compile(
    r"^(?P<name>\w+)\s+"
    r"(?P<type>(?:" + _MULTI_WORD_TYPES + r"|\w+)(?:\([^)]*\))?(?:\[\d*\])*)"
    r"\s*(?P<rest>.*)$",
    re.IGNORECASE | re.DOTALL,
)


def split_fields(body: str) -> List[str]:
    """
    Split a table body at top-level commas.

    Only parentheses are tracked, quotes are not: "a DECIMAL(10,2), b INT"
    gives two fields, while a comma inside a quoted default splits the field.

    Args:
        body: Text between the outer parentheses of CREATE TABLE

    Returns:
        Raw field strings in order
    """
    fields = []
    current = []
    depth = 0

    for char in body:
        if char == "(":
            depth += 1
            current.append(char)
        elif char == ")":
            depth -= 1
            current.append(char)
        elif char == "," and depth == 0:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    last = "".join(current)
    if last.strip():
        fields.append(last)

    return fields


def is_table_constraint(field: str) -> bool:
    """Whether a raw field string is a table-level constraint rather than a column."""
    stripped = field.strip()
    unquoted = _IDENTIFIER_QUOTES_RE.sub("", stripped).strip()

    if _TABLE_CONSTRAINT_RE.match(unquoted):
        return True

    if stripped.startswith(("`", '"')):
        return False
    return bool(_NAMED_CONSTRAINT_RE.match(unquoted))


def parse_field(
    field: str,
    table_name: Optional[str] = None,
    type_synonyms: Optional[Mapping[str, str]] = None,
) -> Union[Column, SkippedField]:
    """
    Parse one raw field string.

    Args:
        field: Field text as produced by split_fields
        table_name: Owning table, recorded on skipped fields
        type_synonyms: Type keyword mapping passed to normalize_type

    Returns:
        A Column, or a SkippedField saying why no column was produced
    """
    if not field.strip():
        return SkippedField(raw=field, reason=SkipReason.EMPTY, table_name=table_name)

    if is_table_constraint(field):
        return SkippedField(raw=field.strip(), reason=SkipReason.TABLE_CONSTRAINT, table_name=table_name)

    cleaned = _IDENTIFIER_QUOTES_RE.sub("", field).strip()
    match = _FIELD_RE.match(cleaned)
    if not match:
        return SkippedField(raw=cleaned, reason=SkipReason.UNPARSEABLE, table_name=table_name)

    return Column(
        name=match.group("name"),
        type=normalize_type(match.group("type"), type_synonyms),
        constraints=parse_constraints(match.group("rest").strip()),
        raw=cleaned,
    )


def parse_fields(
    body: str,
    table_name: str,
    type_synonyms: Optional[Mapping[str, str]] = None,
) -> Tuple[List[Column], List[SkippedField]]:
    """
    Parse every field of a table body.

    Malformed fields are reported as skipped and never abort the table.

    Returns:
        Tuple of (columns, skipped_fields)
    """
    columns: List[Column] = []
    skipped: List[SkippedField] = []

    for raw_field in split_fields(body):
        outcome = parse_field(raw_field, table_name=table_name, type_synonyms=type_synonyms)
        if isinstance(outcome, Column):
            columns.append(outcome)
            continue
        if outcome.reason != SkipReason.EMPTY:
            logger.debug(f"Skipped field in table {table_name} ({outcome.reason}): {outcome.raw}")
        skipped.append(outcome)

    return columns, skipped
