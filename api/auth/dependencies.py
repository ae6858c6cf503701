"""
Auth dependencies for protected FastAPI routes.
"""

from __future__ import annotations

from fastapi import Depends, Header

from core.errors import AuthError

from . import service


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise AuthError("No token provided")

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise AuthError("No token provided")

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise AuthError("No token provided")
    return token


def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return _extract_bearer_token(authorization)


def require_admin(token: str = Depends(get_bearer_token)) -> str:
    service.authorize(token)
    return token
