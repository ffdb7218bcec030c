#!/usr/bin/env python3
# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Command-line interface for DDL to Markdown conversion.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table as RichTable
from rich.text import Text

from ddl2md.configuration.converter_config import load_converter_config
from ddl2md.converter import DDL2Markdown
from ddl2md.schemas.ddl_models import ParseReport
from ddl2md.utils.exceptions import DDLConvertException
from ddl2md.utils.loggings import configure_logging, get_logger

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """创建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        prog="ddl2md",
        description="Convert SQL CREATE TABLE statements into Markdown tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # From a file
  ddl2md schema.sql -o schema.md

  # From stdin
  mysqldump --no-data mydb | ddl2md > schema.md

  # With a config file
  ddl2md --config=conf/ddl2md.yml schema.sql
        """,
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="FILE",
        help="SQL files to convert; reads stdin when omitted or '-'",
    )
    parser.add_argument("-o", "--output", help="Write Markdown to this file instead of stdout")
    parser.add_argument("--config", help="Path to converter configuration file (YAML)")
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print skipped tables and fields to stderr",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Verbose output (-v for INFO, -vv for DEBUG)",
    )

    return parser


class DDL2MarkdownCLI:
    """DDL 转 Markdown CLI"""

    def __init__(self, args):
        self.args = args
        self.console = Console(stderr=True)

    def run(self) -> int:
        """执行CLI主流程"""
        if self.args.verbose:
            configure_logging(debug=self.args.verbose >= 2)
        else:
            configure_logging(debug=False, console_output=False)

        try:
            config = load_converter_config(self.args.config)
            sql = self._read_inputs(self.args.inputs)
            result = DDL2Markdown(config).convert_with_report(sql)
        except DDLConvertException as e:
            logger.error(f"Conversion failed: {e}")
            self.console.print(e.message, style="red", markup=False, highlight=False, soft_wrap=True)
            return 1
        except OSError as e:
            logger.error(f"Failed to read input: {e}")
            self.console.print(f"Failed to read input: {e}", style="red", markup=False, highlight=False, soft_wrap=True)
            return 1

        self._write_output(result.markdown)

        if self.args.report:
            self._print_report(result.report)

        logger.info(f"Converted {len(result.report.tables)} table(s)")
        return 0

    def _read_inputs(self, inputs: List[str]) -> str:
        """读取输入：文件列表或标准输入"""
        if not inputs:
            return sys.stdin.read()

        parts = []
        for item in inputs:
            if item == "-":
                parts.append(sys.stdin.read())
            else:
                logger.debug(f"Reading SQL from: {item}")
                parts.append(Path(item).read_text(encoding="utf-8"))
        return "\n".join(parts)

    def _write_output(self, markdown: str) -> None:
        if self.args.output:
            output_path = Path(self.args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(markdown, encoding="utf-8")
            logger.info(f"Markdown written to: {output_path}")
        else:
            sys.stdout.write(markdown)

    def _print_report(self, report: ParseReport) -> None:
        """输出跳过的表和字段"""
        summary = RichTable(title=f"Parse report ({report.mode} mode)")
        summary.add_column("Kind")
        summary.add_column("Table")
        summary.add_column("Reason")
        summary.add_column("Detail", overflow="fold")

        for skipped_table in report.skipped_tables:
            summary.add_row("table", Text(skipped_table.name), str(skipped_table.reason), Text(skipped_table.message))
        for skipped_field in report.skipped_fields:
            summary.add_row(
                "field", Text(skipped_field.table_name or ""), str(skipped_field.reason), Text(skipped_field.raw)
            )

        self.console.print(f"Parsed {len(report.tables)} table(s)", highlight=False)
        if summary.row_count:
            self.console.print(summary)


def main(argv: Optional[List[str]] = None):
    """CLI入口"""
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = DDL2MarkdownCLI(args)
    sys.exit(cli.run())
