# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

import pytest

from ddl2md.utils.sql_utils.ddl_parser import normalize_type


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("int", "INT"),
        ("integer", "INT"),
        ("INTEGER", "INT"),
        ("bool", "BOOLEAN"),
        ("varchar(50)", "VARCHAR(50)"),
        ("decimal(10, 2)", "DECIMAL(10, 2)"),
        ("numeric(12,4)", "NUMERIC(12,4)"),
        ("int(11)", "INT(11)"),
        ("longtext", "LONGTEXT"),
        ("geometry", "GEOMETRY"),
    ],
)
def test_base_keyword_normalized(raw, expected):
    assert normalize_type(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("int4", "INT"),
        ("int8", "BIGINT"),
        ("float8", "DOUBLE"),
        ("double precision", "DOUBLE"),
        ("double   precision", "DOUBLE"),
        ("character varying(255)", "VARCHAR(255)"),
        ("character(2)", "CHAR(2)"),
        ("text[]", "TEXT[]"),
        ("integer[3]", "INT[3]"),
    ],
)
def test_postgres_spellings(raw, expected):
    assert normalize_type(raw) == expected


def test_parameters_kept_verbatim():
    assert normalize_type("ENUM('a','B')") == "ENUM('a','B')"


def test_custom_synonyms_replace_builtin_table():
    assert normalize_type("serial", {"SERIAL": "INT"}) == "INT"
    # A mapping without the keyword leaves it uppercased
    assert normalize_type("integer", {"SERIAL": "INT"}) == "INTEGER"
