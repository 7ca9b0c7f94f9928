"""Quick validation script for roster enrichment outputs.

Run with `python scripts/validate_enrichment.py` to ensure every student is
kept and skills are normalized into the expected vocabulary.
"""

from __future__ import annotations

from student_dashboard.data.enrichment import enrich_students, roster_frame
from student_dashboard.data.models import Account, CredentialRecord


def main() -> None:
    accounts = [
        Account(id="s1", name="Ana", email="a@x.com", phone="555", role="student",
                created_at="2024-04-01T09:30:00+00:00"),
        Account(id="s2", name="Ben", email="b@x.com", phone=None, role="student",
                created_at="2024-05-15T12:00:00.123456+00:00"),
        Account(id="s3", name="Cy", email="c@x.com", role="student"),
    ]
    credentials = [
        CredentialRecord(student_id="s1", skills_acquired="Python, , Go,React"),
        CredentialRecord(student_id="s1", skills_acquired=" Go "),
        CredentialRecord(student_id="s2", skills_acquired="Rust"),
        CredentialRecord(student_id="s3", skills_acquired=None),
    ]

    students, vocabulary = enrich_students(accounts, credentials)

    if [s.id for s in students] != ["s1", "s2", "s3"]:
        raise SystemExit(f"Unexpected roster order/cardinality: {[s.id for s in students]}")

    assert vocabulary == ["Go", "Python", "React", "Rust"], vocabulary
    assert students[0].skills == ["Python", "Go", "React"], students[0].skills
    assert students[2].skills == [], "Student without skills should keep an empty list"

    frame = roster_frame(students)
    assert frame["joined_at"].notna().sum() == 2, "Both timestamps should parse"

    print("Enrichment validation passed. Students:", len(students), "Skills:", len(vocabulary))


if __name__ == "__main__":
    main()
