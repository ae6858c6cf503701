"""
Environment-driven settings.

All values are read lazily so tests can override them with monkeypatch.
"""

from __future__ import annotations

import os

TOKEN_MODES = ("opaque", "jwt")
PASSWORD_SCHEMES = ("bcrypt", "sha256")


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    value = os.environ.get(name, "").strip().lower()
    return value if value in choices else default


def database_path() -> str:
    return _env_str("DATABASE_PATH", "database.sqlite")


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return ["*"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def admin_username() -> str:
    return _env_str("ADMIN_USERNAME", "admin")


def admin_default_password() -> str:
    # Change this in production, or rotate the stored hash out-of-band.
    return _env_str("ADMIN_DEFAULT_PASSWORD", "admin123")


def admin_password_scheme() -> str:
    return _env_choice("ADMIN_PASSWORD_SCHEME", PASSWORD_SCHEMES, "bcrypt")


def admin_token_mode() -> str:
    """
    `opaque`: random token, any non-empty bearer value is accepted.
    `jwt`: signed expiring token, verified on every protected request.
    """
    return _env_choice("ADMIN_TOKEN_MODE", TOKEN_MODES, "opaque")


DEFAULT_JWT_SECRET = "dev-change-this-secret-before-deploying"


def jwt_secret() -> str:
    # Local default keeps development simple.
    # In production, set JWT_SECRET in environment.
    return _env_str("JWT_SECRET", DEFAULT_JWT_SECRET)


def jwt_algorithm() -> str:
    return _env_str("JWT_ALG", "HS256")


def access_token_expire_minutes() -> int:
    return _env_int("ACCESS_TOKEN_EXPIRE_MIN", 60)


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def host() -> str:
    return _env_str("HOST", "0.0.0.0")


def port() -> int:
    return _env_int("PORT", 3001)
