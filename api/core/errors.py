"""
Application error types.

Every error carries the HTTP status it maps to and a message that is safe to
show to clients. `main.py` turns them into `{"error": "..."}` responses.
"""

from __future__ import annotations


class AppError(RuntimeError):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = 400


class AuthError(AppError):
    status_code = 401


class NotFoundError(AppError):
    status_code = 404


# Storage failures are explicit and separable from other runtime errors.
class StorageError(AppError):
    status_code = 500
