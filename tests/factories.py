"""
Factory helpers for building test objects.
Imported by conftest.py fixtures AND directly by test modules.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from student_dashboard.config import BackendSettings
from student_dashboard.data.models import Account, CredentialRecord, EnrichedStudent


def make_settings(**overrides: Any) -> BackendSettings:
    values: Dict[str, Any] = {"url": "https://demo.supabase.co", "api_key": "anon-key"}
    values.update(overrides)
    return BackendSettings(**values)


def make_account(
    id: str = "s1",
    name: str = "Ana",
    email: str = "a@x.com",
    phone: Optional[str] = "555",
    role: str = "student",
    created_at: Optional[str] = "2024-04-01T09:30:00+00:00",
) -> Account:
    return Account(id=id, name=name, email=email, phone=phone, role=role, created_at=created_at)


def make_credential(student_id: Optional[str] = "s1", skills: Any = "Python", **fields: Any) -> CredentialRecord:
    return CredentialRecord(student_id=student_id, skills_acquired=skills, **fields)


def make_student(
    id: str = "s1",
    name: str = "Ana",
    email: str = "a@x.com",
    phone: Optional[str] = "555",
    skills: Optional[List[str]] = None,
) -> EnrichedStudent:
    return EnrichedStudent(id=id, name=name, email=email, phone=phone, role="student", skills=list(skills or []))


def account_row(account: Account) -> Dict[str, Any]:
    return {
        "id": account.id,
        "name": account.name,
        "email": account.email,
        "phone": account.phone,
        "role": account.role,
        "created_at": account.created_at,
    }


class FakeClient:
    """Stands in for SupabaseClient; answers `select` from a table -> rows map.

    A table mapped to an exception instance raises it instead.
    """

    def __init__(self, tables: Dict[str, Any]):
        self.tables = tables
        self.calls: List[Dict[str, Any]] = []

    def select(self, table, columns="*", eq=None, in_=None, limit=None):
        self.calls.append(
            {"table": table, "columns": columns, "eq": eq, "in_": in_, "limit": limit}
        )
        response = self.tables[table]
        if isinstance(response, Exception):
            raise response
        return response

    def tables_called(self) -> List[str]:
        return [call["table"] for call in self.calls]
