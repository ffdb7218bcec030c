# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
DDL cleaning and scanning utilities.

This module provides comment stripping and the quote-aware parenthesis
scanner used to find where a CREATE TABLE body ends.
"""

import re
from typing import Optional

from ddl2md.utils.loggings import get_logger

logger = get_logger(__name__)

# =============================================================================
# PRE-COMPILED REGEX PATTERNS
# =============================================================================

_LINE_COMMENT_RE = re.compile(r"--.*$", re.MULTILINE)
_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

QUOTE_CHARS = ("'", '"', "`")


# =============================================================================
# SHARED QUOTE PARSING UTILITIES
# =============================================================================

class QuoteState:
    """Track which quote character, if any, is currently open."""
    __slots__ = ('quote_char',)

    def __init__(self):
        self.quote_char: str = ""

    @property
    def in_string(self) -> bool:
        return bool(self.quote_char)

    def feed(self, char: str, prev_char: str) -> None:
        """Update the state for one character.

        A quote preceded by a backslash never opens or closes a literal, and a
        literal is only closed by the same quote character that opened it.
        """
        if char not in QUOTE_CHARS or prev_char == "\\":
            return
        if not self.quote_char:
            self.quote_char = char
        elif char == self.quote_char:
            self.quote_char = ""

    def reset(self):
        """Close any open literal."""
        self.quote_char = ""


def strip_sql_comments(sql: str) -> str:
    """
    Remove ``--`` line comments and ``/* */`` block comments.

    The removal is textual, so comment markers inside string literals are
    removed as well.
    """
    sql = sql.strip()
    sql = _LINE_COMMENT_RE.sub("", sql)
    sql = _BLOCK_COMMENT_RE.sub("", sql)
    return sql


def find_matching_paren(text: str, open_pos: int) -> Optional[int]:
    """
    Find the closing parenthesis matching the one at ``open_pos``.

    Parentheses inside quoted literals (single, double or backtick quoted) are
    ignored.

    Args:
        text: SQL text to scan
        open_pos: Index of the opening parenthesis

    Returns:
        Index of the matching ``)``, or None when the text ends first
    """
    state = QuoteState()
    depth = 0

    for i in range(open_pos, len(text)):
        char = text[i]
        prev_char = text[i - 1] if i > 0 else ""
        state.feed(char, prev_char)

        if state.in_string:
            continue

        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return i

    return None


def skip_statement_tail(text: str, pos: int) -> int:
    """Return the index after any semicolons and whitespace starting at ``pos``."""
    while pos < len(text) and (text[pos] == ";" or text[pos].isspace()):
        pos += 1
    return pos
