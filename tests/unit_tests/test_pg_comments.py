# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Unit tests for PostgreSQL COMMENT ON handling.
"""

from ddl2md.schemas import Column, ColumnConstraints, Table
from ddl2md.utils.sql_utils.ddl_parser import apply_postgres_comments, parse_multiple_ddl


def _table(name, *columns, comment=None):
    fields = [Column(name=c, type="INT", constraints=ColumnConstraints(comment=comment)) for c in columns]
    return Table(name=name, fields=fields)


class TestApplyPostgresComments:
    def test_column_and_table_comments(self, postgres_posts_ddl):
        tables = parse_multiple_ddl(postgres_posts_ddl).tables
        applied = apply_postgres_comments(postgres_posts_ddl, tables)

        posts = tables[0]
        by_name = {c.name: c.constraints.comment for c in posts.fields}
        assert by_name["title"] == "标题"
        assert by_name["body"] == "It's the body"
        assert by_name["id"] is None
        assert posts.table_comment == "文章表"
        assert applied.columns == 2
        assert applied.tables == 1

    def test_overrides_inline_comment(self):
        tables = [_table("users", "name", comment="inline")]
        apply_postgres_comments("COMMENT ON COLUMN users.name IS '用户名';", tables)
        assert tables[0].fields[0].constraints.comment == "用户名"

    def test_lookup_is_case_insensitive(self):
        tables = [_table("users", "name")]
        applied = apply_postgres_comments("comment on column USERS.NAME is 'x';", tables)
        assert applied.columns == 1
        assert tables[0].fields[0].constraints.comment == "x"

    def test_quoted_identifiers_with_schema(self):
        tables = parse_multiple_ddl('CREATE TABLE "Users" ("UserName" TEXT);').tables
        sql = 'COMMENT ON COLUMN "public"."Users"."UserName" IS \'名字\';'
        applied = apply_postgres_comments(sql, tables)
        assert applied.columns == 1
        assert tables[0].fields[0].constraints.comment == "名字"

    def test_unknown_table_or_column_ignored(self):
        tables = [_table("users", "id")]
        sql = "COMMENT ON COLUMN users.missing IS 'a';\nCOMMENT ON COLUMN other.id IS 'b';\nCOMMENT ON TABLE other IS 'c';"
        applied = apply_postgres_comments(sql, tables)
        assert applied.columns == 0
        assert applied.tables == 0
        assert tables[0].fields[0].constraints.comment is None
        assert tables[0].table_comment is None

    def test_applying_twice_is_idempotent(self, postgres_posts_ddl):
        tables = parse_multiple_ddl(postgres_posts_ddl).tables
        apply_postgres_comments(postgres_posts_ddl, tables)
        first = [t.model_dump() for t in tables]
        apply_postgres_comments(postgres_posts_ddl, tables)
        assert [t.model_dump() for t in tables] == first

    def test_no_tables(self):
        applied = apply_postgres_comments("COMMENT ON TABLE t IS 'x';", [])
        assert applied.columns == 0
        assert applied.tables == 0

    def test_duplicate_column_name_first_wins(self):
        tables = [_table("t", "dup", "dup")]
        apply_postgres_comments("COMMENT ON COLUMN t.dup IS 'x';", tables)
        assert tables[0].fields[0].constraints.comment == "x"
        assert tables[0].fields[1].constraints.comment is None

    def test_statement_without_semicolon_not_applied(self):
        tables = [_table("t", "a")]
        applied = apply_postgres_comments("COMMENT ON COLUMN t.a IS 'x'", tables)
        assert applied.columns == 0
