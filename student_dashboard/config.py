"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

import streamlit as st


@dataclass(frozen=True)
class ViewConfig:
    key: str
    label: str


ROSTER_VIEW = ViewConfig("roster", "Student Dashboard")
PROFILE_VIEW = ViewConfig("profile", "Student Profile")

# Query parameter carrying the student id of the profile view
PROFILE_QUERY_PARAM = "student"

LOG_FORMAT = "%(levelname)s  %(name)s  %(message)s"


@dataclass(frozen=True)
class BackendSettings:
    url: str
    api_key: str
    accounts_table: str = "users"
    credentials_table: str = "credentials"
    student_role: str = "student"
    timeout: Optional[float] = None
    log_level: str = "INFO"


def _get_secret(name: str, default: str | None = None) -> str | None:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        pass
    return default


def _first_secret(*names: str) -> str | None:
    for name in names:
        value = _get_secret(name)
        if value:
            return value.strip()
    return None


def _available_secret_keys() -> list[str]:
    keys: list[str] = []
    try:
        sec = getattr(st, "secrets", None)
        if isinstance(sec, dict):
            keys = list(sec.keys())
        elif sec is not None:
            keys = list(sec.to_dict().keys())  # type: ignore[attr-defined]
    except Exception:
        pass
    return sorted(set(str(k) for k in keys))


def _parse_timeout(raw: str | None) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise RuntimeError(f"SUPABASE_TIMEOUT must be a number of seconds, got {raw!r}")
    return value if value > 0 else None


def load_settings() -> BackendSettings:
    """Resolve backend settings from the environment and Streamlit secrets."""
    url = _first_secret("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL")
    api_key = _first_secret("SUPABASE_ANON_KEY", "SUPABASE_KEY", "NEXT_PUBLIC_SUPABASE_ANON_KEY")

    if not url or not api_key:
        missing = [name for name, value in (("SUPABASE_URL", url), ("SUPABASE_ANON_KEY", api_key)) if not value]
        raise RuntimeError(
            f"{', '.join(missing)} missing (env or secrets). "
            f"Secrets keys: {_available_secret_keys()}"
        )

    return BackendSettings(
        url=url,
        api_key=api_key,
        accounts_table=_get_secret("SUPABASE_ACCOUNTS_TABLE", "users") or "users",
        credentials_table=_get_secret("SUPABASE_CREDENTIALS_TABLE", "credentials") or "credentials",
        student_role=_get_secret("STUDENT_ROLE", "student") or "student",
        timeout=_parse_timeout(_get_secret("SUPABASE_TIMEOUT")),
        log_level=(_get_secret("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    """Install the root handler once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root.setLevel(level)
