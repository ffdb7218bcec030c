# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Shared fixtures for unit tests.
"""

import pytest

from ddl_samples import MYSQL_USERS_DDL, POSTGRES_POSTS_DDL, TWO_TABLES_DDL


@pytest.fixture
def mysql_users_ddl():
    return MYSQL_USERS_DDL


@pytest.fixture
def postgres_posts_ddl():
    return POSTGRES_POSTS_DDL


@pytest.fixture
def two_tables_ddl():
    return TWO_TABLES_DDL


@pytest.fixture
def sql_file(tmp_path):
    """Write DDL text to a temporary .sql file and return its path."""

    def _write(content: str, name: str = "schema.sql"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
