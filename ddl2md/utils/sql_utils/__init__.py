# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
SQL Utilities Module

This module provides the DDL scanning and parsing utilities used by the
converter, split into submodules:

- validation: Input validation functions
- ddl_cleaner: Comment stripping and quote-aware parenthesis scanning
- ddl_parser: DDL parsing into Table models
"""

# Re-export all public functions
from .validation import (
    validate_sql_input,
)

from .ddl_cleaner import (
    QuoteState,
    find_matching_paren,
    skip_statement_tail,
    strip_sql_comments,
)

from .ddl_parser import (
    apply_postgres_comments,
    normalize_type,
    parse_constraints,
    parse_field,
    parse_multiple_ddl,
    parse_single_ddl,
    segment_create_tables,
    split_fields,
)

# Re-export constants
from .validation import (
    MAX_SQL_LENGTH,
)

__all__ = [
    # Validation functions
    "validate_sql_input",
    # DDL cleaner
    "QuoteState",
    "find_matching_paren",
    "skip_statement_tail",
    "strip_sql_comments",
    # DDL parser
    "apply_postgres_comments",
    "normalize_type",
    "parse_constraints",
    "parse_field",
    "parse_multiple_ddl",
    "parse_single_ddl",
    "segment_create_tables",
    "split_fields",
    # Constants
    "MAX_SQL_LENGTH",
]
