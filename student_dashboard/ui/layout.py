"""
Layout helpers for the Streamlit application (page setup, roster filter bar).
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import streamlit as st

from student_dashboard.config import PROFILE_QUERY_PARAM
from student_dashboard.data.filters import RosterFilters, toggle_skill

SEARCH_KEY = "sd_search_term"
SKILLS_KEY = "sd_selected_skills"
CHIP_COLUMNS = 6


def setup_page() -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title="Student Dashboard",
        layout="wide",
        page_icon=":mortar_board:",
    )


def _prune_selection(available_skills: Sequence[str]) -> None:
    # A refresh can drop skills that were selected before it
    selected = st.session_state.get(SKILLS_KEY)
    if selected:
        st.session_state[SKILLS_KEY] = tuple(skill for skill in selected if skill in available_skills)


def _toggle_skill_selection(skill: str) -> None:
    st.session_state[SKILLS_KEY] = toggle_skill(st.session_state.get(SKILLS_KEY, ()), skill)


def _clear_skill_selection() -> None:
    _clear_state_keys([SKILLS_KEY])


def _skill_chips(available_skills: Sequence[str], selected: Sequence[str]) -> None:
    for idx in range(0, len(available_skills), CHIP_COLUMNS):
        cols = st.columns(CHIP_COLUMNS)
        for col, skill in zip(cols, available_skills[idx: idx + CHIP_COLUMNS]):
            col.button(
                skill,
                key=f"sd_chip_{skill}",
                type="primary" if skill in selected else "secondary",
                on_click=_toggle_skill_selection,
                args=(skill,),
                use_container_width=True,
            )


def roster_filters_ui(available_skills: Sequence[str]) -> RosterFilters:
    """
    Render the search box and skill selector and return the selected values.
    """
    search = st.text_input(
        "Search",
        placeholder="Search by name, email or phone...",
        key=SEARCH_KEY,
        label_visibility="collapsed",
    ).strip()

    _prune_selection(available_skills)
    selected: Tuple[str, ...] = tuple(st.session_state.get(SKILLS_KEY, ()))
    st.caption(f"Filter by skills ({len(selected)} selected)" if selected else "Filter by skills")
    if available_skills:
        _skill_chips(list(available_skills), selected)
    else:
        st.caption("No skills recorded yet")

    if selected:
        st.button("Clear skill filter", key="sd_clear_skills", type="secondary", on_click=_clear_skill_selection)

    return RosterFilters(search_term=search, selected_skills=selected)


def open_profile(student_id: str) -> None:
    st.query_params[PROFILE_QUERY_PARAM] = student_id


def back_to_roster() -> None:
    if PROFILE_QUERY_PARAM in st.query_params:
        del st.query_params[PROFILE_QUERY_PARAM]


def _clear_state_keys(keys: List[str]) -> None:
    for key in keys:
        if key in st.session_state:
            del st.session_state[key]
