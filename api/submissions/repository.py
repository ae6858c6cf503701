"""
Submission persistence (raw SQL).

`benefits` is stored as a JSON array string; `encode_benefits` and
`decode_benefits` are the only places that know about that encoding.
"""

from __future__ import annotations

import json
from uuid import uuid4

from core.db import Database

from .validation import NewSubmission

SUBMISSION_COLUMNS = (
    "id, position, location, company, baseSalary, totalComp, experience, "
    "selfEmployed, clinicalHoursPerWeek, benefits, additionalNotes, submittedAt"
)


def encode_benefits(benefits: list[str] | None) -> str:
    return json.dumps(list(benefits or []), ensure_ascii=True)


def decode_benefits(raw: str | None) -> list[str]:
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except ValueError:
        return []
    if not isinstance(value, list):
        return []
    return [str(item) for item in value]


def insert_submission(db: Database, record: NewSubmission) -> str:
    submission_id = str(uuid4())
    db.execute(
        f"""
        INSERT INTO salary_submissions ({SUBMISSION_COLUMNS})
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        submission_id,
        record.position,
        record.location,
        record.company,
        record.base_salary,
        record.total_comp,
        record.experience,
        record.self_employed,
        record.clinical_hours_per_week,
        encode_benefits(record.benefits),
        record.additional_notes,
        record.submitted_at,
    )
    return submission_id


def list_submissions(db: Database) -> list[dict]:
    """
    All rows, newest `submittedAt` first (string ordering, ISO-8601 assumed).
    """
    rows = db.fetch_all(
        f"""
        SELECT {SUBMISSION_COLUMNS}
        FROM salary_submissions
        ORDER BY submittedAt DESC
        """
    )
    for row in rows:
        row["benefits"] = decode_benefits(row.get("benefits"))
    return rows


def delete_submission(db: Database, submission_id: str) -> int:
    return db.execute(
        """
        DELETE FROM salary_submissions
        WHERE id = ?
        """,
        submission_id,
    )
