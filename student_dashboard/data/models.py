"""
Typed views over the backend's `users` and `credentials` rows, plus the
derived roster and profile models built from them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional


def _opt_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _to_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def _required_id(row: Mapping[str, Any]) -> str:
    value = row["id"]
    if value is None:
        raise KeyError("id")
    return str(value)


@dataclass
class Account:
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    role: str = ""
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Account":
        return cls(
            id=_required_id(row),
            name=str(row.get("name") or ""),
            email=str(row.get("email") or ""),
            phone=_opt_str(row.get("phone")),
            role=str(row.get("role") or ""),
            created_at=_opt_str(row.get("created_at")),
        )


@dataclass
class CredentialRecord:
    student_id: Optional[str]
    # Raw free-text field; never split here
    skills_acquired: Any = None
    id: Optional[str] = None
    score: Optional[float] = None
    rank: Optional[str] = None
    credential_name: Optional[str] = None
    certificate_url: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "CredentialRecord":
        return cls(
            student_id=_opt_str(row.get("student_id")),
            skills_acquired=row.get("skills_acquired"),
            id=_opt_str(row.get("id")),
            score=_to_float(row.get("score")),
            rank=_opt_str(row.get("rank")),
            credential_name=_opt_str(row.get("credential_name")),
            certificate_url=_opt_str(row.get("certificate_url")),
            created_at=_opt_str(row.get("created_at")),
        )


@dataclass
class EnrichedStudent:
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    role: str = ""
    created_at: Optional[str] = None
    skills: List[str] = field(default_factory=list)

    @classmethod
    def from_account(cls, account: Account, skills: List[str]) -> "EnrichedStudent":
        return cls(
            id=account.id,
            name=account.name,
            email=account.email,
            phone=account.phone,
            role=account.role,
            created_at=account.created_at,
            skills=list(skills),
        )


@dataclass
class StudentProfile:
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    role: str = ""
    created_at: Optional[str] = None
    credentials: List[CredentialRecord] = field(default_factory=list)
