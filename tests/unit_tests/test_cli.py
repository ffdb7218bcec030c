# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Tests for the ddl2md command-line interface.
"""

import io
import sys

import pytest

from ddl2md.cli import DDL2MarkdownCLI, create_parser, main


def _run(argv):
    args = create_parser().parse_args(argv)
    return DDL2MarkdownCLI(args).run()


class TestCreateParser:
    def test_defaults(self):
        args = create_parser().parse_args([])
        assert args.inputs == []
        assert args.output is None
        assert args.config is None
        assert args.report is False
        assert args.verbose == 0

    def test_options(self):
        args = create_parser().parse_args(["a.sql", "b.sql", "-o", "out.md", "--report", "-vv"])
        assert args.inputs == ["a.sql", "b.sql"]
        assert args.output == "out.md"
        assert args.report is True
        assert args.verbose == 2


class TestDDL2MarkdownCLI:
    def test_file_to_stdout(self, sql_file, capsys):
        path = sql_file("CREATE TABLE t (id INT PRIMARY KEY);")
        assert _run([str(path)]) == 0

        out = capsys.readouterr().out
        assert out.startswith("## t\n\n")
        assert "| id | INT | PRIMARY KEY | 是 | - |  |" in out

    def test_multiple_files_concatenated(self, sql_file, capsys):
        first = sql_file("CREATE TABLE a (id INT);", name="a.sql")
        second = sql_file("CREATE TABLE b (id INT);\nCOMMENT ON COLUMN a.id IS '编号';", name="b.sql")
        assert _run([str(first), str(second)]) == 0

        out = capsys.readouterr().out
        assert "## a" in out
        assert "## b" in out
        assert "| id | INT | - | 否 | - | 编号 |" in out

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("CREATE TABLE s (name TEXT NOT NULL);"))
        assert _run([]) == 0
        assert "| name | TEXT | - | 是 | - |  |" in capsys.readouterr().out

    def test_output_file(self, sql_file, tmp_path, capsys):
        path = sql_file("CREATE TABLE t (id INT);")
        output = tmp_path / "docs" / "schema.md"
        assert _run([str(path), "-o", str(output)]) == 0

        assert output.read_text(encoding="utf-8").startswith("## t\n")
        assert capsys.readouterr().out == ""

    def test_conversion_failure(self, sql_file, capsys):
        path = sql_file("SELECT * FROM t;")
        assert _run([str(path)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No CREATE TABLE statement found" in captured.err

    def test_missing_input_file(self, tmp_path, capsys):
        assert _run([str(tmp_path / "missing.sql")]) == 1
        assert "Failed to read input" in capsys.readouterr().err

    def test_invalid_config(self, sql_file, tmp_path, capsys):
        path = sql_file("CREATE TABLE t (id INT);")
        config = tmp_path / "bad.yml"
        config.write_text("max_sql_length: -1\n", encoding="utf-8")
        assert _run([str(path), "--config", str(config)]) == 1
        assert "Invalid config" in capsys.readouterr().err

    def test_report(self, sql_file, capsys):
        path = sql_file("CREATE TABLE t (id INT, PRIMARY KEY (id));")
        assert _run([str(path), "--report"]) == 0
        assert "Parsed 1 table(s)" in capsys.readouterr().err


def test_main_exit_code(sql_file):
    path = sql_file("CREATE TABLE t (id INT);")
    with pytest.raises(SystemExit) as exc_info:
        main([str(path), "-o", str(path.with_suffix(".md"))])
    assert exc_info.value.code == 0
    assert path.with_suffix(".md").exists()


def test_usage_error_exit_code(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--no-such-option"])
    assert exc_info.value.code == 2
    assert "usage: ddl2md" in capsys.readouterr().err
