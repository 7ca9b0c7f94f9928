"""
Normalization of the free-text `skills_acquired` credential field.

The backend stores skills as a single string that may hold one skill or
several joined by commas. Tokens keep their original casing, so "Python"
and "python" stay distinct.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Set


def _clean_tokens(pieces: Iterable[Any]) -> List[str]:
    tokens: List[str] = []
    for piece in pieces:
        if not isinstance(piece, str):
            continue
        token = piece.strip()
        if token:
            tokens.append(token)
    return tokens


def normalize_skills(value: Any) -> List[str]:
    """Convert one credential's skill field into trimmed, non-empty tokens.

    Strings are split on every comma when one is present, otherwise the whole
    trimmed value is the single token. Lists of strings are trimmed element
    by element without further splitting. Anything else yields no tokens.
    """
    if value is None:
        return []
    if isinstance(value, str):
        if not value:
            return []
        if "," in value:
            return _clean_tokens(value.split(","))
        return _clean_tokens([value])
    if isinstance(value, (list, tuple)):
        return _clean_tokens(value)
    return []


def skill_vocabulary(values: Iterable[Any]) -> List[str]:
    """Sorted, deduplicated union of the tokens found in `values`."""
    vocabulary: Set[str] = set()
    for value in values:
        vocabulary.update(normalize_skills(value))
    return sorted(vocabulary)
