# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
DDL Parser sub-package.

This package turns CREATE TABLE text into Table models, split into focused
modules:

- core: Table segmentation and the multi-/single-table parsing strategies
- fields: Top-level comma splitting and column definition parsing
- constraints: Constraint clause tokenizing (NOT NULL, DEFAULT, COMMENT...)
- type_normalizer: Dialect type synonym normalization
- pg_comments: PostgreSQL COMMENT ON statements
"""

from .core import (
    TableSegment,
    extract_single_table,
    parse_multiple_ddl,
    parse_single_ddl,
    parse_table_body,
    segment_create_tables,
)

from .fields import (
    is_table_constraint,
    parse_field,
    parse_fields,
    split_fields,
)

from .constraints import (
    parse_constraints,
    tokenize_constraints,
)

from .type_normalizer import (
    normalize_type,
)

from .pg_comments import (
    apply_postgres_comments,
)

__all__ = [
    "TableSegment",
    "extract_single_table",
    "parse_multiple_ddl",
    "parse_single_ddl",
    "parse_table_body",
    "segment_create_tables",
    "is_table_constraint",
    "parse_field",
    "parse_fields",
    "split_fields",
    "parse_constraints",
    "tokenize_constraints",
    "normalize_type",
    "apply_postgres_comments",
]
