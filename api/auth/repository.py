"""
Admin credential persistence helpers.
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from core.db import Database


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def get_admin_by_username(db: Database, username: str) -> dict | None:
    return db.fetch_one(
        """
        SELECT id, username, password_hash, created_at
        FROM admin_users
        WHERE username = ?
        """,
        username,
    )


def find_admin_by_credentials(db: Database, username: str, password_hash: str) -> dict | None:
    return db.fetch_one(
        """
        SELECT id, username, password_hash, created_at
        FROM admin_users
        WHERE username = ?
          AND password_hash = ?
        """,
        username,
        password_hash,
    )


def ensure_default_admin(db: Database, *, username: str, password_hash: str) -> bool:
    """
    Insert the bootstrap admin unless a row with that username exists.
    Returns True when a row was created.
    """
    existing = db.fetch_one("SELECT id FROM admin_users WHERE username = ?", username)
    if existing is not None:
        return False

    inserted = db.execute(
        """
        INSERT OR IGNORE INTO admin_users (id, username, password_hash, created_at)
        VALUES (?, ?, ?, ?)
        """,
        str(uuid4()),
        username,
        password_hash,
        _utc_now_iso(),
    )
    return inserted > 0
