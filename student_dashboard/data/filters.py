"""
Filter utilities that apply the roster search and skill selection to the
enriched student list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from student_dashboard.data.models import EnrichedStudent


@dataclass(frozen=True)
class RosterFilters:
    search_term: str = ""
    selected_skills: Tuple[str, ...] = ()


DEFAULT_FILTERS = RosterFilters()


def _contains(haystack: Optional[str], needle: str) -> bool:
    if haystack is None:
        return False
    return needle in str(haystack).lower()


def matches_search(student: EnrichedStudent, search_term: str) -> bool:
    if not search_term:
        return True
    needle = search_term.lower()
    return (
        _contains(student.name, needle)
        or _contains(student.email, needle)
        or _contains(student.phone, needle)
    )


def matches_skills(student: EnrichedStudent, selected_skills: Iterable[str]) -> bool:
    # Exact, case-sensitive membership
    return all(skill in student.skills for skill in selected_skills)


def student_matches(
    student: EnrichedStudent,
    search_term: str = "",
    selected_skills: Sequence[str] = (),
) -> bool:
    """
    Return True when the student passes both the text search and the skill
    selection. An empty search term and an empty selection match everyone.
    """
    return matches_search(student, search_term) and matches_skills(student, selected_skills)


def apply_roster_filters(
    students: Sequence[EnrichedStudent],
    filters: RosterFilters = DEFAULT_FILTERS,
) -> List[EnrichedStudent]:
    return [
        student
        for student in students
        if student_matches(student, filters.search_term, filters.selected_skills)
    ]


def toggle_skill(selected: Sequence[str], skill: str) -> Tuple[str, ...]:
    """Add `skill` to the selection, or remove it if it is already selected."""
    if skill in selected:
        return tuple(s for s in selected if s != skill)
    return tuple(selected) + (skill,)


def serialize_filters(filters: RosterFilters) -> Dict[str, Any]:
    """
    Convert the RosterFilters dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    return {
        "search_term": filters.search_term,
        "selected_skills": list(filters.selected_skills),
    }
