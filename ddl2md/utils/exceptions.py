# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Error codes and the exception raised by the DDL conversion pipeline.
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """Error codes with a stable code string and a default description."""

    # Common
    COMMON_VALIDATION_FAILED = ("100001", "Input validation failed")
    CONFIG_LOAD_FAILED = ("100002", "Failed to load converter configuration")

    # DDL parsing
    DDL_NO_CREATE_TABLE = ("200001", "No CREATE TABLE statement found")
    DDL_NO_FIELD_BODY = ("200002", "No field definition body found for the table")
    DDL_UNBALANCED_PARENTHESES = ("200003", "No matching closing parenthesis for the table body")
    DDL_NO_COLUMNS = ("200004", "No column definition could be parsed")
    DDL_NO_TABLES_PARSED = ("200005", "No CREATE TABLE statement could be parsed")
    DDL_CONVERSION_FAILED = ("200006", "DDL conversion failed")

    def __init__(self, code: str, desc: str):
        self.code = code
        self.desc = desc


class DDLConvertException(Exception):
    """Raised when DDL text cannot be converted.

    The string form of the exception is the human readable message, so callers
    can surface it verbatim.
    """

    def __init__(self, code: ErrorCode, message: Optional[str] = None):
        self.code = code
        self.message = message or code.desc
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"DDLConvertException(code={self.code.code}, message={self.message!r})"
