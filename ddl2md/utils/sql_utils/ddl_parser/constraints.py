# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Column constraint clause parsing.

The clause that follows a column type is tokenized once on the recognized
keywords; flags, the DEFAULT expression and the COMMENT literal are all read
from that single token stream. Keyword matching is textual and
case-insensitive, so keywords inside quoted text are tokens too.
"""

import re
from typing import List, NamedTuple, Optional

from ddl2md.schemas.ddl_models import ColumnConstraints

# =============================================================================
# PRE-COMPILED REGEX PATTERNS FOR CONSTRAINT PARSING
# =============================================================================

# Longer spellings come first so NOT NULL / PRIMARY KEY win over NULL / PRIMARY
_KEYWORD_RE = re.compile(
    r"(?P<ws>\s*)(?P<kw>NOT\s+NULL|PRIMARY\s+KEY|PRIMARY|AUTO_INCREMENT|AUTOINCREMENT"
    r"|UNIQUE|DEFAULT|COMMENT|ON\s+UPDATE|NULL)",
    re.IGNORECASE,
)

_COMMENT_LITERAL_RE = re.compile(
    r"\s+(?:'((?:[^']|'')*)'|\"([^\"\\\n]*)\")",
)

_ON_UPDATE_RE = re.compile(r"ON\s+UPDATE", re.IGNORECASE)
_TRAILING_COMMA_RE = re.compile(r",\s*$")
_SPACES_RE = re.compile(r"\s+")

# Keywords that end a DEFAULT expression
DEFAULT_TERMINATORS = frozenset(
    {
        "COMMENT",
        "ON UPDATE",
        "NOT NULL",
        "NULL",
        "UNIQUE",
        "PRIMARY",
        "PRIMARY KEY",
        "AUTO_INCREMENT",
        "AUTOINCREMENT",
    }
)


class KeywordToken(NamedTuple):
    keyword: str
    start: int  # index where the keyword text starts
    end: int  # index after the keyword text
    ws_start: int  # index where the whitespace before the keyword starts


def tokenize_constraints(clause: str) -> List[KeywordToken]:
    """Return the recognized keywords of a constraint clause in order."""
    tokens = []
    for match in _KEYWORD_RE.finditer(clause):
        keyword = _SPACES_RE.sub(" ", match.group("kw")).upper()
        tokens.append(KeywordToken(keyword, match.start("kw"), match.end("kw"), match.start("ws")))
    return tokens


def parse_constraints(clause: str) -> ColumnConstraints:
    """
    Parse the constraint clause of a column definition.

    Example: "NOT NULL DEFAULT 'pending' COMMENT '状态'" ->
    nullable=False, default="'pending'", comment="状态"

    Args:
        clause: Text after the column type, mixed case

    Returns:
        ColumnConstraints; rules that do not match keep their defaults
    """
    constraints = ColumnConstraints()
    if not clause or not clause.strip():
        return constraints

    tokens = tokenize_constraints(clause)
    keywords = {token.keyword for token in tokens}

    if "NOT NULL" in keywords:
        constraints.nullable = False

    if "PRIMARY KEY" in keywords:
        constraints.primary_key = True
        constraints.nullable = False

    if "UNIQUE" in keywords:
        constraints.unique = True

    if "AUTO_INCREMENT" in keywords or "AUTOINCREMENT" in keywords:
        constraints.auto_increment = True

    constraints.default = _extract_default(clause, tokens)
    constraints.comment = _extract_comment(clause, tokens)

    return constraints


def _extract_default(clause: str, tokens: List[KeywordToken]) -> Optional[str]:
    """Read the DEFAULT expression up to the next terminator keyword."""
    for index, token in enumerate(tokens):
        if token.keyword != "DEFAULT":
            continue
        if token.end >= len(clause) or not clause[token.end].isspace():
            continue

        value_start = token.end
        while value_start < len(clause) and clause[value_start].isspace():
            value_start += 1
        if value_start >= len(clause):
            continue

        value_end = len(clause)
        for follower in tokens[index + 1:]:
            # The terminator needs whitespace in front of it and at least one value character before that
            if (
                follower.keyword in DEFAULT_TERMINATORS
                and follower.ws_start < follower.start
                and follower.ws_start > value_start
            ):
                value_end = follower.ws_start
                break

        value = clause[value_start:value_end].strip()
        value = _TRAILING_COMMA_RE.sub("", value).strip()

        if _is_quoted_literal(value):
            return value

        # CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP keeps the first part only
        if _ON_UPDATE_RE.search(value):
            value = _ON_UPDATE_RE.split(value, maxsplit=1)[0].strip()
        return value

    return None


def _extract_comment(clause: str, tokens: List[KeywordToken]) -> Optional[str]:
    """Read the quoted literal that follows the first COMMENT keyword carrying one."""
    for token in tokens:
        if token.keyword != "COMMENT":
            continue
        match = _COMMENT_LITERAL_RE.match(clause, token.end)
        if not match:
            continue
        if match.group(1) is not None:
            return match.group(1).replace("''", "'")
        return match.group(2) or ""
    return None


def _is_quoted_literal(value: str) -> bool:
    return len(value) >= 2 and value[0] in ("'", '"') and value[-1] == value[0]
