"""
Filter engine: the displayed subset is a pure function of (all terms, selected subject, search text).
"""

from typing import List, Optional, Sequence, Union

from data.models import Subject, Term


def normalize_search(search_text: Optional[str]) -> str:
    """Trimmed, lower-cased needle; empty means no search filter."""
    return (search_text or "").strip().lower()


def filter_terms(
    all_terms: Sequence[Term],
    selected_subject: Optional[Union[Subject, str]] = None,
    search_text: str = "",
) -> List[Term]:
    """
    Subject filter, then case-insensitive substring search over term OR definition.
    Stable: relative order of all_terms is kept.
    """
    filtered = list(all_terms)
    if selected_subject is not None:
        subject = Subject.parse(selected_subject)
        filtered = [t for t in filtered if t.subject == subject]
    needle = normalize_search(search_text)
    if needle:
        filtered = [t for t in filtered if needle in t.term.lower() or needle in t.definition.lower()]
    return filtered
