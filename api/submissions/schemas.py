"""
Submission API schemas (response models).

Field names follow the JSON contract used by the web client (camelCase).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SubmissionCreatedResponse(BaseModel):
    id: str
    message: str


class SubmissionResponse(BaseModel):
    id: str
    position: str
    location: str
    company: str = ""
    baseSalary: float
    totalComp: float
    experience: float
    selfEmployed: str
    clinicalHoursPerWeek: str = ""
    benefits: list[str] = Field(default_factory=list)
    additionalNotes: str = ""
    submittedAt: str
