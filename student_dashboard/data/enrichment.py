"""
Enrichment helpers that join accounts with their credentials and compute the
derived views shared by the roster and profile pages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from student_dashboard.data.models import (
    Account,
    CredentialRecord,
    EnrichedStudent,
    StudentProfile,
)
from student_dashboard.data.skills import normalize_skills, skill_vocabulary


ROSTER_COLUMNS = [
    "id",
    "name",
    "email",
    "phone",
    "joined_at",
    "skill_count",
    "skills",
]


def enrich_students(
    accounts: Sequence[Account],
    credentials: Sequence[CredentialRecord],
) -> Tuple[List[EnrichedStudent], List[str]]:
    """
    Attach normalized skills to every account and collect the global skill
    vocabulary.

    Every account yields exactly one EnrichedStudent, including accounts that
    own no credentials. The vocabulary covers all credentials passed in,
    regardless of owner, and is sorted.
    """
    skills_by_student: Dict[str, List[str]] = {account.id: [] for account in accounts}

    for credential in credentials:
        owner = credential.student_id
        if owner is not None and owner in skills_by_student:
            skills_by_student[owner].extend(normalize_skills(credential.skills_acquired))

    students = []
    for account in accounts:
        unique = [skill for skill in dict.fromkeys(skills_by_student[account.id]) if skill]
        students.append(EnrichedStudent.from_account(account, unique))

    available_skills = skill_vocabulary(credential.skills_acquired for credential in credentials)
    return students, available_skills


def assemble_profile(account: Account, credentials: Sequence[CredentialRecord]) -> StudentProfile:
    """Build a profile that keeps each credential exactly as the backend returned it."""
    return StudentProfile(
        id=account.id,
        name=account.name,
        email=account.email,
        phone=account.phone,
        role=account.role,
        created_at=account.created_at,
        credentials=list(credentials),
    )


@dataclass
class ProfileSummary:
    credential_count: int
    average_score: Optional[float]
    best_score: Optional[float]


def profile_summary(profile: StudentProfile) -> ProfileSummary:
    scores = pd.Series(
        [credential.score for credential in profile.credentials],
        dtype="float64",
    ).dropna()
    return ProfileSummary(
        credential_count=len(profile.credentials),
        average_score=float(scores.mean()) if not scores.empty else None,
        best_score=float(scores.max()) if not scores.empty else None,
    )


def _coerce_datetime(series: pd.Series) -> pd.Series:
    parsed = pd.to_datetime(series, errors="coerce", utc=True, format="ISO8601")
    if pd.api.types.is_datetime64_any_dtype(parsed):
        return parsed.dt.tz_convert(None)
    return parsed


def roster_frame(students: Sequence[EnrichedStudent]) -> pd.DataFrame:
    """Tabular view of the roster used for the table and CSV export."""
    if not students:
        return pd.DataFrame(columns=ROSTER_COLUMNS)
    frame = pd.DataFrame(
        {
            "id": [s.id for s in students],
            "name": [s.name for s in students],
            "email": [s.email for s in students],
            "phone": [s.phone for s in students],
            "joined_at": _coerce_datetime(pd.Series([s.created_at for s in students], dtype=object)),
            "skill_count": [len(s.skills) for s in students],
            "skills": [", ".join(s.skills) for s in students],
        }
    )
    return frame[ROSTER_COLUMNS]


def skill_counts(students: Sequence[EnrichedStudent]) -> pd.DataFrame:
    """Number of students holding each skill, most common first."""
    exploded = pd.Series([skill for student in students for skill in student.skills], dtype=object)
    if exploded.empty:
        return pd.DataFrame(columns=["skill", "students"])
    counts = (
        exploded.value_counts()
        .rename_axis("skill")
        .reset_index(name="students")
        .sort_values(["students", "skill"], ascending=[False, True], kind="mergesort")
        .reset_index(drop=True)
    )
    return counts
