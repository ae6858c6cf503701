"""
Auth security helpers.
"""

from __future__ import annotations

import hashlib
import hmac
import secrets
import time
from typing import Any

import bcrypt
import jwt

from core import settings


class AuthSecurityError(RuntimeError):
    pass


def now_epoch_s() -> int:
    return int(time.time())


def legacy_hash_password(plain_password: str) -> str:
    """
    Unsalted SHA-256 hex digest, kept for hashes stored by older deployments.
    """
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    return hashlib.sha256(password).hexdigest()


def hash_password(plain_password: str, *, scheme: str | None = None) -> str:
    scheme = scheme or settings.admin_password_scheme()
    if scheme == "sha256":
        return legacy_hash_password(plain_password)

    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False

    if not password_hash.startswith("$2"):
        return hmac.compare_digest(legacy_hash_password(plain_password), password_hash)

    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def build_opaque_token() -> str:
    # 32 random bytes, hex-encoded (64 chars). Never stored.
    return secrets.token_hex(32)


def build_access_token(*, admin_id: str, username: str) -> str:
    issued_at = now_epoch_s()
    expires_at = issued_at + (settings.access_token_expire_minutes() * 60)

    payload = {
        "sub": admin_id,
        "username": username,
        "type": "access",
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(payload, settings.jwt_secret(), algorithm=settings.jwt_algorithm())


def decode_access_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        payload = jwt.decode(raw, settings.jwt_secret(), algorithms=[settings.jwt_algorithm()])
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    token_type = str(payload.get("type") or "").strip().lower()
    if token_type != "access":
        raise AuthSecurityError("Token is not an access token.")

    return payload
