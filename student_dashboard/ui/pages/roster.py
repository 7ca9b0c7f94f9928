from __future__ import annotations

from typing import List, Sequence

import streamlit as st

from student_dashboard.data.enrichment import roster_frame, skill_counts
from student_dashboard.data.filters import apply_roster_filters
from student_dashboard.data.loader import RosterResult
from student_dashboard.data.models import EnrichedStudent
from student_dashboard.ui.components.cards import student_card
from student_dashboard.ui.components.charts import bar_chart, render_plotly
from student_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from student_dashboard.ui.components.tables import render_table
from student_dashboard.ui.layout import open_profile
from student_dashboard.ui.pages.context import PageContext

GRID_COLUMNS = 3
TOP_SKILLS = 15


def _roster_kpis(result: RosterResult, matching: Sequence[EnrichedStudent]) -> List[KpiCard]:
    without_skills = sum(1 for student in result.students if not student.skills)
    return [
        KpiCard(label="Students", value=len(result.students)),
        KpiCard(label="Matching", value=len(matching)),
        KpiCard(label="Distinct Skills", value=len(result.available_skills)),
        KpiCard(
            label="No Skills Recorded",
            value=without_skills,
            help_text="Students whose credentials list no skills.",
        ),
    ]


def _render_grid(students: Sequence[EnrichedStudent], selected_skills: Sequence[str]) -> None:
    for idx in range(0, len(students), GRID_COLUMNS):
        row = students[idx: idx + GRID_COLUMNS]
        cols = st.columns(GRID_COLUMNS)
        for col, student in zip(cols, row):
            with col:
                st.markdown(student_card(student, selected_skills), unsafe_allow_html=True)
                st.button(
                    "View profile",
                    key=f"sd_view_{student.id}",
                    on_click=open_profile,
                    args=(student.id,),
                    use_container_width=True,
                )


def _render_empty_state() -> None:
    st.markdown("#### No results found")
    st.caption("Try adjusting your search terms.")


def _render_insights(students: Sequence[EnrichedStudent]) -> None:
    counts = skill_counts(students)
    if not counts.empty:
        fig = bar_chart(
            counts.head(TOP_SKILLS),
            x="students",
            y="skill",
            orientation="h",
            title=f"Top {min(TOP_SKILLS, len(counts))} skills in current selection",
            xaxis_title="Students",
            text_auto=True,
        )
        render_plotly(fig)

    render_table(
        roster_frame(students),
        column_config={
            "id": None,
            "name": st.column_config.TextColumn("Name"),
            "email": st.column_config.TextColumn("Email"),
            "phone": st.column_config.TextColumn("Phone"),
            "joined_at": st.column_config.DatetimeColumn("Joined", format="MMM D, YYYY"),
            "skill_count": st.column_config.NumberColumn("Skills", format="%d"),
            "skills": st.column_config.TextColumn("Skill list"),
        },
        export_file_name="students_filtered.csv",
        empty_message="No students to export.",
    )


def render(result: RosterResult, context: PageContext) -> None:
    if result.error_message:
        st.error(result.error_message)

    filters = context.filters
    matching = apply_roster_filters(result.students, filters)

    render_kpi_cards(_roster_kpis(result, matching), columns=4)

    tab_cards, tab_insights = st.tabs(["Students", "Skills & Export"])
    with tab_cards:
        if matching:
            _render_grid(matching, filters.selected_skills)
        else:
            _render_empty_state()
    with tab_insights:
        _render_insights(matching)
