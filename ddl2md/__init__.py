# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
ddl2md: convert SQL CREATE TABLE statements into Markdown documentation tables.
"""

from .configuration import ConverterConfig, load_converter_config
from .converter import DDL2Markdown, convert, convert_with_report
from .schemas import Column, ColumnConstraints, ConversionResult, ParseReport, Table
from .utils.exceptions import DDLConvertException, ErrorCode

__version__ = "0.1.0"

__all__ = [
    "Column",
    "ColumnConstraints",
    "ConversionResult",
    "ConverterConfig",
    "DDL2Markdown",
    "DDLConvertException",
    "ErrorCode",
    "ParseReport",
    "Table",
    "convert",
    "convert_with_report",
    "load_converter_config",
]
