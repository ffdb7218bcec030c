# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

import logging

from ddl2md.utils.exceptions import DDLConvertException, ErrorCode
from ddl2md.utils.loggings import ROOT_LOGGER_NAME, configure_logging, get_logger
from ddl2md.utils.sql_utils.validation import MAX_SQL_LENGTH, validate_sql_input


class TestValidateSqlInput:
    def test_valid(self):
        assert validate_sql_input("CREATE TABLE t (id INT);") == (True, "")

    def test_non_string(self):
        is_valid, message = validate_sql_input(b"CREATE TABLE t (id INT);")
        assert is_valid is False
        assert "bytes" in message

    def test_too_long(self):
        is_valid, message = validate_sql_input("x" * (MAX_SQL_LENGTH + 1))
        assert is_valid is False
        assert "exceeds" in message

    def test_custom_limit(self):
        assert validate_sql_input("12345", max_length=5)[0] is True
        assert validate_sql_input("123456", max_length=5)[0] is False

    def test_null_bytes(self):
        assert validate_sql_input("CREATE\x00TABLE")[0] is False


class TestDDLConvertException:
    def test_default_message_from_code(self):
        error = DDLConvertException(ErrorCode.DDL_NO_CREATE_TABLE)
        assert str(error) == "No CREATE TABLE statement found"
        assert error.code.code == "200001"

    def test_custom_message(self):
        error = DDLConvertException(ErrorCode.DDL_NO_COLUMNS, "No column definition could be parsed: t")
        assert error.message == "No column definition could be parsed: t"
        assert "200004" in repr(error)


class TestLogging:
    def test_get_logger_namespaced(self):
        assert get_logger("converter").name == "ddl2md.converter"
        assert get_logger("ddl2md.cli").name == "ddl2md.cli"
        assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME

    def test_configure_logging_levels_and_file(self, tmp_path):
        configure_logging(debug=True, log_dir=str(tmp_path), console_output=False)
        root = logging.getLogger(ROOT_LOGGER_NAME)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

        get_logger("test").debug("written to file")
        for handler in root.handlers:
            handler.flush()
        assert "written to file" in (tmp_path / "ddl2md.log").read_text(encoding="utf-8")

        configure_logging(debug=False, console_output=False)
        assert root.level == logging.INFO
        assert isinstance(root.handlers[0], logging.NullHandler)
