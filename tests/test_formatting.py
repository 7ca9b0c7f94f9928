"""
Tests for display formatting helpers and HTML cards.
"""

import pytest

from factories import make_credential, make_student
from student_dashboard.ui.components.cards import credential_card, student_card
from student_dashboard.ui.components.formatting import (
    MISSING,
    avatar_initial,
    format_joined_date,
    format_number,
    format_phone,
    format_score,
)


class TestJoinedDate:
    def test_short_month(self):
        assert format_joined_date("2024-10-05T08:00:00+00:00") == "Oct 5, 2024"

    def test_long_month(self):
        assert format_joined_date("2024-10-05T08:00:00.123456+00:00", long_month=True) == "October 5, 2024"

    @pytest.mark.parametrize("value", [None, "", "yesterday-ish"])
    def test_missing_or_invalid(self, value):
        assert format_joined_date(value) == "N/A"


class TestPhone:
    def test_present(self):
        assert format_phone("555-0100") == "555-0100"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_fallback(self, value):
        assert format_phone(value) == "No phone number"
        assert format_phone(value, fallback="No phone number provided") == "No phone number provided"


class TestNumbers:
    def test_format_number(self):
        assert format_number(1234.5, 1) == "1,234.5"
        assert format_number(None) == MISSING

    @pytest.mark.parametrize(
        "value, expected",
        [(85, "85"), (85.0, "85"), (85.5, "85.5"), (85.25, "85.25"), (None, MISSING), ("abc", MISSING)],
    )
    def test_format_score(self, value, expected):
        assert format_score(value) == expected


class TestAvatarInitial:
    def test_uppercases_first_letter(self):
        assert avatar_initial("ana") == "A"

    def test_empty_name(self):
        assert avatar_initial("") == "?"
        assert avatar_initial(None) == "?"


class TestCards:
    def test_student_card_escapes_and_highlights(self):
        student = make_student(name="<b>Ana</b>", phone=None, skills=["Go", "Rust"])
        markup = student_card(student, selected_skills=("Rust",))
        assert "&lt;b&gt;Ana&lt;/b&gt;" in markup
        assert "No phone number" in markup
        assert markup.count("box-shadow") == 1
        assert "\n" not in markup

    def test_student_card_without_skills_has_no_skill_section(self):
        markup = student_card(make_student(skills=[]))
        assert "Skills" not in markup

    def test_credential_card_keeps_raw_skill_string(self):
        credential = make_credential(
            skills="Python, SQL",
            credential_name="Data Analyst",
            score=90.0,
            rank="Gold",
            certificate_url="https://example.com/cert?id=1&v=2",
        )
        markup = credential_card(credential)
        assert "Python, SQL" in markup
        assert "Rank: Gold" in markup
        assert "Score: 90" in markup
        assert 'href="https://example.com/cert?id=1&amp;v=2"' in markup

    def test_credential_card_without_url_has_no_link(self):
        markup = credential_card(make_credential(certificate_url=None))
        assert "View Certificate" not in markup
