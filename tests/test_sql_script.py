from unittest.mock import MagicMock

import pytest

from cricket_database.ddl import CRICKET_SCHEMA_SQL, SCHEMA_INDEXES, SCHEMA_TABLES
from cricket_database.utils.sql_script import (
    ScriptStatementError,
    count_statements,
    execute_script,
    split_sql_batches,
)


def test_schema_script_splits_into_one_batch_per_object():
    batches = list(split_sql_batches(CRICKET_SCHEMA_SQL))

    assert len(batches) == len(SCHEMA_TABLES) + len(SCHEMA_INDEXES)
    assert all(b.endswith(";") for b in batches)
    assert batches[0].startswith("CREATE TABLE IF NOT EXISTS teams")
    assert "idx_powerplays_innings" in batches[-1]


def test_comment_lines_stay_with_following_statement():
    script = "-- header\nCREATE TABLE a (id INT);\n\n-- only a comment\n"

    assert list(split_sql_batches(script)) == ["-- header\nCREATE TABLE a (id INT);"]


def test_trailing_statement_without_semicolon_is_kept():
    script = "CREATE TABLE a (id INT);\nCREATE TABLE b (id INT)"

    assert list(split_sql_batches(script)) == ["CREATE TABLE a (id INT);", "CREATE TABLE b (id INT)"]


def test_count_statements_of_empty_script():
    assert count_statements("") == 0
    assert count_statements("\n  -- nothing here\n") == 0


def test_execute_script_reports_failing_statement():
    conn = MagicMock()
    conn.exec_driver_sql.side_effect = [None, RuntimeError("syntax error")]

    with pytest.raises(ScriptStatementError) as exc_info:
        execute_script(conn, "CREATE TABLE a (id INT);\nCREATE TABLEX b;\nCREATE TABLE c (id INT);")

    assert exc_info.value.index == 1
    assert exc_info.value.statement == "CREATE TABLEX b;"
    assert isinstance(exc_info.value.cause, RuntimeError)
    assert conn.exec_driver_sql.call_count == 2
