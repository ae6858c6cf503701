"""
Admin endpoints: login, full listing, delete.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database, get_db
from submissions import schemas as submission_schemas
from submissions import service as submission_service

from . import dependencies, schemas, service

router = APIRouter(prefix="/api/admin")


@router.post("/login", response_model=schemas.LoginResponse)
def login(
    payload: schemas.LoginRequest,
    db: Database = Depends(get_db),
) -> schemas.LoginResponse:
    return service.login(db, payload)


@router.get("/submissions", response_model=list[submission_schemas.SubmissionResponse])
def list_submissions(
    _: str = Depends(dependencies.require_admin),
    db: Database = Depends(get_db),
) -> list[submission_schemas.SubmissionResponse]:
    return submission_service.list_submissions(db)


@router.delete("/submissions/{submission_id}", response_model=schemas.MessageResponse)
def delete_submission(
    submission_id: str,
    _: str = Depends(dependencies.require_admin),
    db: Database = Depends(get_db),
) -> schemas.MessageResponse:
    return service.delete_submission(db, submission_id)
