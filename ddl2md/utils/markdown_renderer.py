# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Markdown Table Renderer

Renders parsed tables as Markdown documentation:

    ## users

    | 字段名 | 类型 | 键类型 | 非空 | 默认值 | 说明 |
    |--------|------|--------|------|--------|------|
    | id | INT | PRIMARY KEY | 是 | - | 主键 |
"""

from typing import List, Optional

from ddl2md.configuration.converter_config import MarkdownConfig
from ddl2md.schemas.ddl_models import Column, Table
from ddl2md.utils.constants import KEY_PRIMARY, KEY_UNIQUE


class MarkdownRenderer:
    """Render Table models into the Markdown table format."""

    def __init__(self, config: Optional[MarkdownConfig] = None):
        self.config = config or MarkdownConfig()

    def render_table(self, table: Table) -> str:
        """Render one table: heading, blank line, header, separator and one row per column."""
        lines = [f"## {table.name}", ""]

        if self.config.render_table_comment and table.table_comment:
            lines.append(table.table_comment)
            lines.append("")

        lines.append(self._format_row(self.config.headers))
        lines.append("|" + "|".join(self.config.separators) + "|")

        for column in table.fields:
            lines.append(self._format_row(self._column_cells(column)))

        return "\n".join(lines) + "\n"

    def render_tables(self, tables: List[Table]) -> str:
        """Render tables in order, one blank line between blocks."""
        return "\n".join(self.render_table(table) for table in tables)

    def _column_cells(self, column: Column) -> List[str]:
        constraints = column.constraints

        # 键类型优先级：PRIMARY KEY > UNIQUE
        if constraints.primary_key:
            key_type = KEY_PRIMARY
        elif constraints.unique:
            key_type = KEY_UNIQUE
        else:
            key_type = self.config.empty_marker

        not_null = self.config.nullable_marker if constraints.nullable else self.config.not_null_marker
        default = constraints.default if constraints.default else self.config.empty_marker
        comment = constraints.comment if constraints.comment else ""

        return [
            self._escape_cell(column.name),
            self._escape_cell(column.type),
            key_type,
            not_null,
            self._escape_cell(default),
            self._escape_cell(comment),
        ]

    @staticmethod
    def _format_row(cells: List[str]) -> str:
        return "| " + " | ".join(cells) + " |"

    @staticmethod
    def _escape_cell(value: str) -> str:
        """Keep a cell on one line and its pipes out of the column structure."""
        value = value.replace("|", "\\|")
        value = value.replace("\r\n", "\n").replace("\r", "\n")
        return value.replace("\n", "<br>")
