# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Input validation for DDL text.

Checks performed before any scanning so oversized or binary input is rejected
up front instead of being walked character by character.
"""

from typing import Any, Tuple

# 500KB max DDL size; real-world schema dumps for documentation stay well below
MAX_SQL_LENGTH = 512000


def validate_sql_input(sql: Any, max_length: int = MAX_SQL_LENGTH) -> Tuple[bool, str]:
    """
    Validate SQL input for type and size.

    Args:
        sql: Input to validate
        max_length: Maximum allowed length for SQL string

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(sql, str):
        return False, f"SQL must be a string, got {type(sql).__name__}"

    if len(sql) > max_length:
        return False, f"SQL length ({len(sql)}) exceeds maximum allowed ({max_length})"

    # NULL bytes usually mean a binary file was passed in
    if "\x00" in sql:
        return False, "NULL bytes not allowed in SQL"

    return True, ""
