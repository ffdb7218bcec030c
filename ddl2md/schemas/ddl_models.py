# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Models produced by the DDL parsing pipeline.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class ColumnConstraints(BaseModel):
    """Constraints parsed from the clause that follows a column type."""

    nullable: bool = Field(True, description="False when NOT NULL or PRIMARY KEY is present")
    primary_key: bool = Field(False, description="Column-level PRIMARY KEY")
    unique: bool = Field(False, description="Column-level UNIQUE")
    auto_increment: bool = Field(False, description="AUTO_INCREMENT / AUTOINCREMENT")
    default: Optional[str] = Field(None, description="Raw default expression")
    comment: Optional[str] = Field(None, description="Column comment with quote escaping undone")

    @model_validator(mode="after")
    def _primary_key_not_nullable(self) -> "ColumnConstraints":
        if self.primary_key and self.nullable:
            self.nullable = False
        return self


class Column(BaseModel):
    """One parsed column definition."""

    name: str = Field(..., description="Unquoted column name")
    type: str = Field(..., description="Normalized type, parameter suffix kept verbatim")
    constraints: ColumnConstraints = Field(default_factory=ColumnConstraints)
    raw: str = Field("", description="Field text the column was parsed from")


class Table(BaseModel):
    """One parsed CREATE TABLE statement."""

    name: str = Field(..., description="Unquoted table name")
    schema_name: Optional[str] = Field(None, description="Schema qualifier of the table name, if any")
    fields: List[Column] = Field(default_factory=list, description="Columns in declaration order")
    table_comment: Optional[str] = Field(None, description="Set from COMMENT ON TABLE")


class SkipReason(str, Enum):
    """Why a field or a table produced no output."""

    TABLE_CONSTRAINT = "table_constraint"
    UNPARSEABLE = "unparseable"
    EMPTY = "empty"
    UNBALANCED_PARENTHESES = "unbalanced_parentheses"
    NO_COLUMNS = "no_columns"

    def __str__(self) -> str:
        return self.value


class SkippedField(BaseModel):
    """A field string that did not become a Column."""

    raw: str = Field(..., description="Field text as split from the table body")
    reason: SkipReason
    table_name: Optional[str] = Field(None, description="Table the field belongs to")


class SkippedTable(BaseModel):
    """A CREATE TABLE statement that did not become a Table."""

    name: str
    reason: SkipReason
    message: str = ""


class TableParseResult(BaseModel):
    """Outcome of parsing one table body."""

    table: Optional[Table] = None
    skipped_fields: List[SkippedField] = Field(default_factory=list)


class ParseMode(str, Enum):
    MULTI = "multi"
    SINGLE = "single"

    def __str__(self) -> str:
        return self.value


class ParseReport(BaseModel):
    """Tables produced by one parse together with everything that was skipped."""

    mode: ParseMode = ParseMode.MULTI
    tables: List[Table] = Field(default_factory=list)
    skipped_tables: List[SkippedTable] = Field(default_factory=list)
    skipped_fields: List[SkippedField] = Field(default_factory=list)


class AppliedComments(BaseModel):
    """Number of COMMENT ON statements that matched a parsed table or column."""

    columns: int = 0
    tables: int = 0


class ConversionResult(BaseModel):
    """Markdown output of a conversion and the parse report behind it."""

    markdown: str
    report: ParseReport
