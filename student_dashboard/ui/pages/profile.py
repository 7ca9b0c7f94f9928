from __future__ import annotations

import html

import streamlit as st

from student_dashboard.data.enrichment import profile_summary
from student_dashboard.data.loader import ProfileResult
from student_dashboard.data.models import StudentProfile
from student_dashboard.ui.components.cards import credential_card
from student_dashboard.ui.components.formatting import (
    MISSING,
    avatar_initial,
    format_joined_date,
    format_phone,
    format_score,
)
from student_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from student_dashboard.ui.layout import back_to_roster
from student_dashboard.ui.pages.context import PageContext

NOT_FOUND_MESSAGE = "Student not found"


def _render_header(profile: StudentProfile) -> None:
    st.markdown(
        f'<div style="display:flex;align-items:center;gap:24px;margin-bottom:16px;">'
        f'<div style="height:96px;width:96px;border-radius:50%;background:#dbeafe;'
        f'display:flex;align-items:center;justify-content:center;">'
        f'<span style="font-size:2.5rem;font-weight:500;color:#2563eb;">'
        f"{html.escape(avatar_initial(profile.name))}</span></div>"
        f'<div><h1 style="margin:0;">{html.escape(profile.name)}</h1>'
        f'<p style="color:#6b7280;margin:4px 0 0 0;">{html.escape(profile.role)}</p></div>'
        f"</div>",
        unsafe_allow_html=True,
    )


def _render_contact(profile: StudentProfile) -> None:
    st.subheader("Contact Information")
    col_email, col_phone, col_joined = st.columns(3)
    # Backend values are shown as plain text, never parsed as markdown
    col_email.text(f"✉️ {profile.email}")
    col_phone.text(f"📞 {format_phone(profile.phone, fallback='No phone number provided')}")
    col_joined.text(f"📅 Joined {format_joined_date(profile.created_at, long_month=True)}")


def _render_credentials(profile: StudentProfile) -> None:
    st.subheader("Certificates & Achievements")
    if not profile.credentials:
        st.markdown("#### No certificates")
        st.caption("No certificates have been added to this profile yet.")
        return
    for credential in profile.credentials:
        st.markdown(credential_card(credential), unsafe_allow_html=True)


def render(result: ProfileResult, context: PageContext) -> None:
    st.button("← Back to Dashboard", key="sd_back", on_click=back_to_roster)

    if result.error_message:
        st.error(result.error_message)
        return
    if result.profile is None:
        st.warning(NOT_FOUND_MESSAGE)
        return

    profile = result.profile
    _render_header(profile)

    summary = profile_summary(profile)
    render_kpi_cards(
        [
            KpiCard(label="Certificates", value=summary.credential_count),
            KpiCard(
                label="Average Score",
                value_display=format_score(round(summary.average_score, 2))
                if summary.average_score is not None
                else MISSING,
            ),
            KpiCard(label="Best Score", value_display=format_score(summary.best_score)),
        ],
        columns=3,
    )

    _render_contact(profile)
    _render_credentials(profile)
