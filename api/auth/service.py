"""
Admin auth business logic.

Two token modes (see `core.settings.admin_token_mode`):
- opaque: login hands out a random token that is never stored; any non-empty
  bearer value is accepted afterwards. This matches the existing web client.
- jwt: login hands out a signed, expiring token that is verified per request.
"""

from __future__ import annotations

import logging

from core import settings
from core.db import Database
from core.errors import AuthError, NotFoundError, ValidationError
from submissions import repository as submission_repository

from . import repository, schemas, security

logger = logging.getLogger(__name__)


def _find_admin(db: Database, username: str, password: str) -> dict | None:
    if settings.admin_password_scheme() == "sha256":
        return repository.find_admin_by_credentials(
            db,
            username,
            security.legacy_hash_password(password),
        )

    admin_row = repository.get_admin_by_username(db, username)
    if admin_row is None:
        return None
    if not security.verify_password(password, str(admin_row.get("password_hash") or "")):
        return None
    return admin_row


def _issue_token(admin_row: dict) -> str:
    if settings.admin_token_mode() == "jwt":
        return security.build_access_token(
            admin_id=str(admin_row["id"]),
            username=str(admin_row["username"]),
        )
    return security.build_opaque_token()


def seed_default_admin(db: Database) -> bool:
    username = settings.admin_username()
    password_hash = security.hash_password(settings.admin_default_password())
    created = repository.ensure_default_admin(db, username=username, password_hash=password_hash)
    if created:
        logger.warning(
            "Seeded default admin account %r; rotate its password out-of-band.",
            username,
        )
    return created


def login(db: Database, payload: schemas.LoginRequest) -> schemas.LoginResponse:
    username = (payload.username or "").strip()
    password = payload.password or ""
    if not username or not password:
        raise ValidationError("Username and password required")

    admin_row = _find_admin(db, username, password)
    if admin_row is None:
        logger.info("Rejected admin login for %r", username)
        raise AuthError("Invalid credentials")

    return schemas.LoginResponse(token=_issue_token(admin_row), message="Login successful")


def authorize(token: str) -> None:
    """
    Gate for admin routes. In opaque mode a non-empty token is enough.
    """
    if not (token or "").strip():
        raise AuthError("No token provided")

    if settings.admin_token_mode() != "jwt":
        return None

    try:
        security.decode_access_token(token)
    except security.AuthSecurityError as exc:
        raise AuthError("Invalid token") from exc


def delete_submission(db: Database, submission_id: str) -> schemas.MessageResponse:
    removed = submission_repository.delete_submission(db, submission_id)
    if removed == 0:
        raise NotFoundError("Submission not found")

    logger.info("Deleted salary submission %s", submission_id)
    return schemas.MessageResponse(message="Submission deleted successfully")
