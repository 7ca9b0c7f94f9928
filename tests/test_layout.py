"""
Tests for the skill chip selection held in session state.
Streamlit's session state is replaced by a plain dict.
"""

import pytest

import student_dashboard.ui.layout as layout


@pytest.fixture
def session_state(monkeypatch):
    state = {}
    monkeypatch.setattr(layout.st, "session_state", state)
    return state


class TestSkillChips:
    def test_click_selects_skill(self, session_state):
        layout._toggle_skill_selection("Go")
        assert session_state[layout.SKILLS_KEY] == ("Go",)

    def test_clicks_keep_selection_order(self, session_state):
        layout._toggle_skill_selection("Rust")
        layout._toggle_skill_selection("Go")
        assert session_state[layout.SKILLS_KEY] == ("Rust", "Go")

    def test_second_click_deselects(self, session_state):
        layout._toggle_skill_selection("Go")
        layout._toggle_skill_selection("Rust")
        layout._toggle_skill_selection("Go")
        assert session_state[layout.SKILLS_KEY] == ("Rust",)

    def test_clear_drops_selection(self, session_state):
        session_state[layout.SKILLS_KEY] = ("Go", "Rust")
        layout._clear_skill_selection()
        assert layout.SKILLS_KEY not in session_state

    def test_clear_without_selection_is_harmless(self, session_state):
        layout._clear_skill_selection()
        assert session_state == {}


class TestPruneSelection:
    def test_drops_skills_missing_after_refresh(self, session_state):
        session_state[layout.SKILLS_KEY] = ("Go", "Cobol", "Rust")
        layout._prune_selection(["Go", "Rust"])
        assert session_state[layout.SKILLS_KEY] == ("Go", "Rust")

    def test_no_selection_left_untouched(self, session_state):
        layout._prune_selection(["Go"])
        assert layout.SKILLS_KEY not in session_state
