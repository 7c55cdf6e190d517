"""Helpers for running multi-statement SQL scripts through SQLAlchemy.

Scripts are split into single statements so that drivers which refuse
multi-statement execution (sqlite3, prepared-statement drivers) can run them
on the same connection, inside whatever transaction the caller holds.
"""

from __future__ import annotations

from typing import Iterator, List

from sqlalchemy.engine import Connection


class ScriptStatementError(Exception):
    """A statement inside a SQL script failed."""

    def __init__(self, index: int, statement: str, cause: BaseException):
        super().__init__(f"statement #{index + 1} failed: {cause}")
        self.index = index
        self.statement = statement
        self.cause = cause


def _is_comment_only(batch: str) -> bool:
    return all(
        not line.strip() or line.strip().startswith("--")
        for line in batch.splitlines()
    )


def split_sql_batches(sql_text: str) -> Iterator[str]:
    """Yield executable SQL statements.

    - Splits on lines ending with a semicolon.
    - Comment lines stay attached to the statement that follows them.
    - Batches made only of comments or whitespace are dropped.
    """
    buffer: List[str] = []
    for line in sql_text.splitlines(keepends=True):
        buffer.append(line)
        if line.strip().endswith(";"):
            batch = "".join(buffer).strip()
            if batch and not _is_comment_only(batch):
                yield batch
            buffer.clear()
    # trailing batch without a terminating semicolon
    tail = "".join(buffer).strip()
    if tail and not _is_comment_only(tail):
        yield tail


def count_statements(sql_text: str) -> int:
    return sum(1 for _ in split_sql_batches(sql_text))


def execute_script(conn: Connection, sql_text: str) -> int:
    """Execute every statement of ``sql_text`` on ``conn``; returns the count.

    Raises ScriptStatementError wrapping the first failing statement.
    """
    executed = 0
    for index, batch in enumerate(split_sql_batches(sql_text)):
        try:
            # exec_driver_sql passes DDL through without bind-parameter parsing
            conn.exec_driver_sql(batch)
        except Exception as exc:
            raise ScriptStatementError(index, batch, exc) from exc
        executed += 1
    return executed

