"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    # Presence is checked by the service so a missing field is a 400, not a 422.
    username: str | None = Field(default=None, max_length=320)
    password: str | None = Field(default=None, max_length=128)


class LoginResponse(BaseModel):
    token: str
    message: str


class MessageResponse(BaseModel):
    message: str
