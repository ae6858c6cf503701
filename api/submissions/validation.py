"""
Submission validation gate.

Pure decision over an inbound payload: either the payload is accepted (and
normalized into a `NewSubmission`) or it is rejected with one generic reason.
The gate does not report which field failed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

MISSING_FIELDS = "Missing required fields"

SELF_EMPLOYED_VALUES = ("yes", "no")


@dataclass(frozen=True)
class NewSubmission:
    position: str
    location: str
    base_salary: float
    total_comp: float
    experience: float
    self_employed: str
    submitted_at: str
    company: str = ""
    clinical_hours_per_week: str = ""
    benefits: list[str] = field(default_factory=list)
    additional_notes: str = ""


@dataclass(frozen=True)
class ValidationResult:
    accepted: bool
    reason: str | None = None
    submission: NewSubmission | None = None


def _reject() -> ValidationResult:
    return ValidationResult(accepted=False, reason=MISSING_FIELDS)


def _non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _amount(value: Any) -> float | None:
    """
    Non-negative number (or numeric string); None when unusable.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return number


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def check_submission(payload: Any) -> ValidationResult:
    if not isinstance(payload, dict):
        return _reject()

    position = payload.get("position")
    location = payload.get("location")
    if not _non_empty_str(position) or not _non_empty_str(location):
        return _reject()

    base_salary = _amount(payload.get("baseSalary"))
    total_comp = _amount(payload.get("totalComp"))
    experience = _amount(payload.get("experience"))
    if base_salary is None or total_comp is None or experience is None:
        return _reject()

    self_employed = payload.get("selfEmployed")
    if self_employed not in SELF_EMPLOYED_VALUES:
        return _reject()

    benefits = payload.get("benefits")
    if benefits is None:
        benefits = []
    if not isinstance(benefits, list) or not all(isinstance(b, str) for b in benefits):
        return _reject()

    submitted_at = payload.get("submittedAt")
    if not _non_empty_str(submitted_at):
        submitted_at = _utc_now_iso()

    return ValidationResult(
        accepted=True,
        submission=NewSubmission(
            position=position,
            location=location,
            base_salary=base_salary,
            total_comp=total_comp,
            experience=experience,
            self_employed=self_employed,
            submitted_at=submitted_at,
            company=_text(payload.get("company")),
            clinical_hours_per_week=_text(payload.get("clinicalHoursPerWeek")),
            benefits=list(benefits),
            additional_notes=_text(payload.get("additionalNotes")),
        ),
    )
