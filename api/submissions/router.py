"""
Public submission endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from core.db import Database, get_db

from . import schemas, service

router = APIRouter(prefix="/api")


@router.get("/submissions", response_model=list[schemas.SubmissionResponse])
def list_submissions(db: Database = Depends(get_db)) -> list[schemas.SubmissionResponse]:
    return service.list_submissions(db)


@router.post(
    "/submissions",
    status_code=status.HTTP_201_CREATED,
    response_model=schemas.SubmissionCreatedResponse,
)
def create_submission(
    payload: Any = Body(default=None),
    db: Database = Depends(get_db),
) -> schemas.SubmissionCreatedResponse:
    # Raw body goes to the validation gate so rejects stay a plain 400.
    return service.create_submission(db, payload)
