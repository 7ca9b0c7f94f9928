"""
Shared pytest fixtures for the student dashboard test suite.
Nothing here talks to a real backend; the client is always faked.
"""

import pytest

import student_dashboard.config as config
from factories import make_account, make_settings


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def no_streamlit_secrets(monkeypatch):
    """Make secret lookups depend on environment variables only."""
    monkeypatch.setattr(config.st, "secrets", {}, raising=False)
    for name in (
        "SUPABASE_URL",
        "NEXT_PUBLIC_SUPABASE_URL",
        "SUPABASE_ANON_KEY",
        "SUPABASE_KEY",
        "NEXT_PUBLIC_SUPABASE_ANON_KEY",
        "SUPABASE_ACCOUNTS_TABLE",
        "SUPABASE_CREDENTIALS_TABLE",
        "STUDENT_ROLE",
        "SUPABASE_TIMEOUT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def roster_accounts():
    return [
        make_account(id="s1", name="Ana", email="a@x.com", phone="555"),
        make_account(id="s2", name="Ben", email="b@x.com", phone="999"),
        make_account(id="s3", name="Cy", email="c@x.com", phone=None),
    ]
