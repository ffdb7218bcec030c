# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
SQL DDL to Markdown converter.

``convert`` is the single entry point used by callers: it takes raw SQL text
and returns a complete Markdown document, or raises DDLConvertException with a
message that can be shown to the user as is.
"""

from typing import List, Optional

from ddl2md.configuration.converter_config import ConverterConfig
from ddl2md.schemas.ddl_models import AppliedComments, ConversionResult, ParseReport, Table
from ddl2md.utils.exceptions import DDLConvertException, ErrorCode
from ddl2md.utils.loggings import get_logger
from ddl2md.utils.markdown_renderer import MarkdownRenderer
from ddl2md.utils.sql_utils.ddl_parser import apply_postgres_comments, parse_multiple_ddl, parse_single_ddl
from ddl2md.utils.sql_utils.validation import validate_sql_input

logger = get_logger(__name__)


class DDL2Markdown:
    """Convert CREATE TABLE DDL into Markdown tables.

    The converter only holds configuration; every call builds its own tables,
    so one instance can be shared between threads.
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config or ConverterConfig()
        self.type_synonyms = self.config.resolved_type_synonyms()
        self.renderer = MarkdownRenderer(self.config.markdown)

    def parse_ddl(self, sql: str) -> ParseReport:
        """Parse the input as a single CREATE TABLE statement."""
        return parse_single_ddl(sql, type_synonyms=self.type_synonyms)

    def parse_multiple_ddl(self, sql: str) -> ParseReport:
        """Parse every CREATE TABLE statement in the input."""
        return parse_multiple_ddl(sql, type_synonyms=self.type_synonyms)

    def apply_postgres_comments(self, sql: str, tables: List[Table]) -> AppliedComments:
        """Apply COMMENT ON COLUMN / TABLE statements found in ``sql`` to ``tables``."""
        return apply_postgres_comments(sql, tables)

    def generate_markdown(self, table: Table) -> str:
        return self.renderer.render_table(table)

    def generate_multiple_markdown(self, tables: List[Table]) -> str:
        return self.renderer.render_tables(tables)

    def convert(self, sql: str) -> str:
        """
        Convert DDL text into Markdown.

        Args:
            sql: One or more CREATE TABLE statements, optionally followed by
                PostgreSQL COMMENT ON statements

        Returns:
            Markdown document with one section per table

        Raises:
            DDLConvertException: when no table can be produced
        """
        return self.convert_with_report(sql).markdown

    def convert_with_report(self, sql: str) -> ConversionResult:
        """Convert DDL text and also return what was parsed and skipped."""
        is_valid, error_msg = validate_sql_input(sql, max_length=self.config.max_sql_length)
        if not is_valid:
            raise DDLConvertException(ErrorCode.COMMON_VALIDATION_FAILED, error_msg)

        report = self._parse(sql)
        self.apply_postgres_comments(sql, report.tables)

        if len(report.tables) == 1:
            markdown = self.generate_markdown(report.tables[0])
        else:
            markdown = self.generate_multiple_markdown(report.tables)

        logger.debug(
            f"Converted {len(report.tables)} table(s) in {report.mode} mode, "
            f"skipped {len(report.skipped_tables)} table(s) and {len(report.skipped_fields)} field(s)"
        )
        return ConversionResult(markdown=markdown, report=report)

    def _parse(self, sql: str) -> ParseReport:
        """Multi-table parsing first, the whole input as one table second."""
        try:
            return self.parse_multiple_ddl(sql)
        except DDLConvertException as multi_error:
            logger.info(f"Multi-table parsing failed ({multi_error}), retrying as a single table")
            try:
                return self.parse_ddl(sql)
            except DDLConvertException as single_error:
                raise DDLConvertException(
                    ErrorCode.DDL_CONVERSION_FAILED,
                    f"{ErrorCode.DDL_CONVERSION_FAILED.desc}: {multi_error.message}; "
                    f"single table parsing: {single_error.message}",
                ) from single_error


def convert(sql: str, config: Optional[ConverterConfig] = None) -> str:
    """Convert DDL text into Markdown with the given or the default configuration."""
    return DDL2Markdown(config).convert(sql)


def convert_with_report(sql: str, config: Optional[ConverterConfig] = None) -> ConversionResult:
    """Like ``convert`` but also returns the parse report."""
    return DDL2Markdown(config).convert_with_report(sql)
