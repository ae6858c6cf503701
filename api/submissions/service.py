"""
Submission orchestration.

Create flow:
1) Validation gate (no store access on reject)
2) Insert with a fresh id
3) Shape `{id, message}`

List flow (public and admin share it):
1) Fetch rows ordered by `submittedAt` desc
2) Normalize `selfEmployed` to "yes"/"no"
"""

from __future__ import annotations

import logging
from typing import Any

from core.db import Database
from core.errors import ValidationError

from . import repository, schemas
from .validation import check_submission

logger = logging.getLogger(__name__)


def _to_submission_response(row: dict) -> schemas.SubmissionResponse:
    return schemas.SubmissionResponse(
        id=str(row["id"]),
        position=str(row["position"]),
        location=str(row["location"]),
        company=str(row.get("company") or ""),
        baseSalary=float(row["baseSalary"]),
        totalComp=float(row["totalComp"]),
        experience=float(row["experience"]),
        # Anything other than "yes" reads back as "no".
        selfEmployed="yes" if row.get("selfEmployed") == "yes" else "no",
        clinicalHoursPerWeek=str(row.get("clinicalHoursPerWeek") or ""),
        benefits=list(row.get("benefits") or []),
        additionalNotes=str(row.get("additionalNotes") or ""),
        submittedAt=str(row["submittedAt"]),
    )


def create_submission(db: Database, payload: Any) -> schemas.SubmissionCreatedResponse:
    result = check_submission(payload)
    if not result.accepted or result.submission is None:
        raise ValidationError(result.reason or "Missing required fields")

    submission_id = repository.insert_submission(db, result.submission)
    logger.info("Stored salary submission %s", submission_id)
    return schemas.SubmissionCreatedResponse(
        id=submission_id,
        message="Salary submission created successfully",
    )


def list_submissions(db: Database) -> list[schemas.SubmissionResponse]:
    rows = repository.list_submissions(db)
    return [_to_submission_response(row) for row in rows]
