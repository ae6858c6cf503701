"""
Database access helpers (raw SQL) using the embedded SQLite engine.

A single `Database` object is created on startup (see `api/main.py`), kept on
`app.state.db` and handed to routes through the `get_db` dependency.

SQL parameter style:
- sqlite3 uses positional placeholders: ?, ?, ?, ...
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from fastapi import Request

from .errors import StorageError

SCHEMA = """
CREATE TABLE IF NOT EXISTS salary_submissions (
    id TEXT PRIMARY KEY,
    position TEXT NOT NULL,
    location TEXT NOT NULL,
    company TEXT,
    baseSalary REAL NOT NULL,
    totalComp REAL NOT NULL,
    experience REAL NOT NULL,
    selfEmployed TEXT NOT NULL,
    clinicalHoursPerWeek TEXT,
    benefits TEXT,
    additionalNotes TEXT,
    submittedAt TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS admin_users (
    id TEXT PRIMARY KEY,
    username TEXT UNIQUE NOT NULL,
    password_hash TEXT NOT NULL,
    created_at TEXT NOT NULL
);
"""


def _record_to_dict(record: sqlite3.Row) -> dict[str, Any]:
    return dict(record)


class Database:
    """
    Owns the SQLite file. Every operation opens its own short-lived
    connection, so one instance is safe to share across request threads.
    """

    def __init__(self, path: str | Path, *, timeout_s: float = 30.0):
        self._path = str(path)
        self._timeout_s = timeout_s

    @property
    def path(self) -> str:
        return self._path

    @contextmanager
    def _get_conn(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = sqlite3.connect(self._path, timeout=self._timeout_s)
        except sqlite3.Error as exc:
            raise StorageError("Database error") from exc
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        except sqlite3.Error as exc:
            raise StorageError("Database error") from exc
        finally:
            conn.close()

    def init_schema(self) -> None:
        """
        Create tables if they don't exist. Idempotent.
        """
        parent = Path(self._path).parent
        if self._path != ":memory:":
            parent.mkdir(parents=True, exist_ok=True)
        with self._get_conn() as conn:
            conn.executescript(SCHEMA)

    def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        with self._get_conn() as conn:
            row = conn.execute(sql, args).fetchone()
        return _record_to_dict(row) if row is not None else None

    def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        with self._get_conn() as conn:
            rows = conn.execute(sql, args).fetchall()
        return [_record_to_dict(r) for r in rows]

    def execute(self, sql: str, *args: Any) -> int:
        """
        Run a statement (INSERT/DELETE/DDL) and return the affected row count.
        """
        with self._get_conn() as conn:
            cursor = conn.execute(sql, args)
            return cursor.rowcount


def get_db(request: Request) -> Database:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise StorageError("Database error")
    return db
