"""
Fetch pipelines for the roster and profile views.

Each pipeline issues the accounts query first and the credentials query only
once the first has succeeded. Failures end the pipeline in the FAILED state
with a message for the page; no partial data is ever returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

from student_dashboard.config import BackendSettings
from student_dashboard.data.client import BackendError, SupabaseClient
from student_dashboard.data.enrichment import assemble_profile, enrich_students
from student_dashboard.data.models import (
    Account,
    CredentialRecord,
    EnrichedStudent,
    StudentProfile,
)

logger = logging.getLogger(__name__)

ROSTER_ACCOUNT_COLUMNS = "id,name,email,role,phone,created_at"
ROSTER_CREDENTIAL_COLUMNS = "id,student_id,skills_acquired"

PROFILE_ERROR_FALLBACK = "An error occurred while fetching student profile"

# Postgres "invalid_text_representation", e.g. a non-uuid value for a uuid column
INVALID_TEXT_REPRESENTATION = "22P02"

T = TypeVar("T")


class FetchState(str, Enum):
    IDLE = "idle"
    FETCHING_ACCOUNTS = "fetching-accounts"
    FETCHING_CREDENTIALS = "fetching-credentials"
    READY = "ready"
    FAILED = "failed"


@dataclass
class RosterResult:
    students: List[EnrichedStudent] = field(default_factory=list)
    available_skills: List[str] = field(default_factory=list)
    error_message: Optional[str] = None
    state: FetchState = FetchState.IDLE


@dataclass
class ProfileResult:
    profile: Optional[StudentProfile] = None
    error_message: Optional[str] = None
    state: FetchState = FetchState.IDLE

    @property
    def not_found(self) -> bool:
        return self.state == FetchState.READY and self.profile is None


def _parse_rows(rows: Sequence[Dict[str, Any]], parse: Callable[[Dict[str, Any]], T], table: str) -> List[T]:
    try:
        return [parse(row) for row in rows]
    except (KeyError, TypeError, AttributeError) as exc:
        raise BackendError(f"Malformed row in '{table}': {exc!r}") from exc


class _Pipeline:
    def __init__(self, client: SupabaseClient, settings: BackendSettings) -> None:
        self.client = client
        self.settings = settings
        self.state = FetchState.IDLE

    def _transition(self, state: FetchState) -> None:
        logger.debug("%s: %s -> %s", type(self).__name__, self.state.value, state.value)
        self.state = state


class RosterPipeline(_Pipeline):
    """Load every student account and the skills from their credentials."""

    def fetch_accounts(self) -> List[Account]:
        rows = self.client.select(
            self.settings.accounts_table,
            ROSTER_ACCOUNT_COLUMNS,
            eq={"role": self.settings.student_role},
        )
        return _parse_rows(rows, Account.from_row, self.settings.accounts_table)

    def fetch_credentials(self, student_ids: List[str]) -> List[CredentialRecord]:
        if not student_ids:
            return []
        rows = self.client.select(
            self.settings.credentials_table,
            ROSTER_CREDENTIAL_COLUMNS,
            in_={"student_id": student_ids},
        )
        return _parse_rows(rows, CredentialRecord.from_row, self.settings.credentials_table)

    def run(self) -> RosterResult:
        logger.info("Loading student roster")
        try:
            self._transition(FetchState.FETCHING_ACCOUNTS)
            accounts = self.fetch_accounts()
            self._transition(FetchState.FETCHING_CREDENTIALS)
            credentials = self.fetch_credentials([account.id for account in accounts])
        except BackendError as exc:
            self._transition(FetchState.FAILED)
            logger.warning("Roster fetch failed: %s", exc)
            return RosterResult(error_message=str(exc), state=self.state)

        students, available_skills = enrich_students(accounts, credentials)
        self._transition(FetchState.READY)
        logger.info(
            "Roster loaded: %d students, %d credentials, %d distinct skills",
            len(students),
            len(credentials),
            len(available_skills),
        )
        return RosterResult(
            students=students,
            available_skills=available_skills,
            state=self.state,
        )


class ProfilePipeline(_Pipeline):
    """Load one student account and its credentials, unmodified."""

    def fetch_account(self, student_id: str) -> Optional[Account]:
        try:
            rows = self.client.select(
                self.settings.accounts_table,
                "*",
                eq={"id": student_id, "role": self.settings.student_role},
                limit=1,
            )
        except BackendError as exc:
            if exc.code != INVALID_TEXT_REPRESENTATION:
                raise
            logger.info("Student id %r is not a valid identifier: %s", student_id, exc)
            return None
        accounts = _parse_rows(rows, Account.from_row, self.settings.accounts_table)
        return accounts[0] if accounts else None

    def fetch_credentials(self, student_id: str) -> List[CredentialRecord]:
        rows = self.client.select(
            self.settings.credentials_table,
            "*",
            eq={"student_id": student_id},
        )
        return _parse_rows(rows, CredentialRecord.from_row, self.settings.credentials_table)

    def run(self, student_id: str) -> ProfileResult:
        logger.info("Loading profile for student %s", student_id)
        try:
            self._transition(FetchState.FETCHING_ACCOUNTS)
            account = self.fetch_account(student_id)
            if account is None:
                self._transition(FetchState.READY)
                logger.info("No student account with id %s", student_id)
                return ProfileResult(state=self.state)
            self._transition(FetchState.FETCHING_CREDENTIALS)
            credentials = self.fetch_credentials(account.id)
        except BackendError as exc:
            self._transition(FetchState.FAILED)
            logger.warning("Profile fetch for %s failed: %s", student_id, exc)
            return ProfileResult(error_message=str(exc) or PROFILE_ERROR_FALLBACK, state=self.state)

        profile = assemble_profile(account, credentials)
        self._transition(FetchState.READY)
        logger.info("Profile loaded for %s with %d credentials", student_id, len(credentials))
        return ProfileResult(profile=profile, state=self.state)


def load_roster(client: SupabaseClient, settings: BackendSettings) -> RosterResult:
    return RosterPipeline(client, settings).run()


def load_profile(client: SupabaseClient, settings: BackendSettings, student_id: str) -> ProfileResult:
    return ProfilePipeline(client, settings).run(student_id)
