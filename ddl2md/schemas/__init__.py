# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

from .ddl_models import (
    AppliedComments,
    Column,
    ColumnConstraints,
    ConversionResult,
    ParseMode,
    ParseReport,
    SkippedField,
    SkippedTable,
    SkipReason,
    Table,
    TableParseResult,
)

__all__ = [
    "AppliedComments",
    "Column",
    "ColumnConstraints",
    "ConversionResult",
    "ParseMode",
    "ParseReport",
    "SkippedField",
    "SkippedTable",
    "SkipReason",
    "Table",
    "TableParseResult",
]
