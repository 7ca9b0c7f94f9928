"""
HTML card snippets for students and credentials.

All backend values are escaped before being interpolated into markup.
"""

from __future__ import annotations

import html
from typing import Sequence

from student_dashboard.data.models import CredentialRecord, EnrichedStudent
from student_dashboard.ui.components.formatting import (
    format_joined_date,
    format_phone,
    format_score,
)

CARD_BG = "#1f2937"
CARD_BORDER = "#374151"
CHIP_BG = "#374151"
BLUE = "#60a5fa"
GREY = "#d1d5db"
MUTED = "#9ca3af"


def _e(value) -> str:
    return html.escape("" if value is None else str(value))


def _compact(markup: str) -> str:
    # Indented lines would otherwise render as markdown code blocks
    return "".join(line.strip() for line in markup.splitlines())


def skill_chip(skill: str, selected: bool = False) -> str:
    color = BLUE if selected else GREY
    ring = f"box-shadow:0 0 0 1px {BLUE};" if selected else ""
    return (
        f'<span style="background:{CHIP_BG};color:{color};{ring}border-radius:12px;'
        f'padding:2px 10px;font-size:0.75rem;font-weight:500;margin:0 4px 4px 0;'
        f'display:inline-block;">{_e(skill)}</span>'
    )


def student_card(student: EnrichedStudent, selected_skills: Sequence[str] = ()) -> str:
    skills_html = ""
    if student.skills:
        chips = "".join(skill_chip(skill, skill in selected_skills) for skill in student.skills)
        skills_html = (
            f'<div style="margin-top:12px;">'
            f'<div style="color:{MUTED};font-size:0.8rem;font-weight:600;margin-bottom:6px;">Skills</div>'
            f"{chips}</div>"
        )
    return _compact(f"""
    <div style="background:{CARD_BG};border:1px solid {CARD_BORDER};border-radius:8px;
                padding:20px;margin-bottom:8px;">
      <div style="color:#fff;font-size:1.2rem;font-weight:600;">{_e(student.name)}</div>
      <div style="color:{BLUE};margin-top:6px;">{_e(student.email)}</div>
      <div style="color:{GREY};margin-top:12px;">📞 {_e(format_phone(student.phone))}</div>
      <div style="color:{GREY};margin-top:4px;">📅 Joined {_e(format_joined_date(student.created_at))}</div>
      {skills_html}
    </div>""")


def credential_card(credential: CredentialRecord) -> str:
    skills = credential.skills_acquired
    if isinstance(skills, (list, tuple)):
        skills = ", ".join(str(s) for s in skills)
    link = ""
    if credential.certificate_url:
        link = (
            f'<a href="{_e(credential.certificate_url)}" target="_blank" rel="noopener noreferrer" '
            f'style="background:#2563eb;color:#fff;padding:8px 16px;border-radius:6px;'
            f'text-decoration:none;font-weight:500;">View Certificate</a>'
        )
    return _compact(f"""
    <div style="background:#fff;border:1px solid #e5e7eb;border-radius:8px;padding:20px;
                margin-bottom:12px;display:flex;justify-content:space-between;align-items:center;
                flex-wrap:wrap;gap:12px;">
      <div>
        <div style="color:#111827;font-size:1.2rem;font-weight:600;">{_e(credential.credential_name or "Untitled credential")}</div>
        <div style="color:#4b5563;margin-top:6px;">{_e(skills)}</div>
        <div style="margin-top:10px;color:#374151;">
          ⭐ Score: {_e(format_score(credential.score))}
          <span style="background:#dbeafe;color:#1e40af;border-radius:12px;padding:2px 12px;
                       margin-left:12px;font-size:0.85rem;font-weight:500;">Rank: {_e(credential.rank or "–")}</span>
        </div>
      </div>
      <div>{link}</div>
    </div>""")
