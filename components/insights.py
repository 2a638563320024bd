"""
Summary text and tabular views of the dictionary.
All strings use ** for bold; UI converts to HTML <strong> when rendering in boxes.
"""

from typing import Dict, Optional, Sequence

import pandas as pd

from components.filter_engine import normalize_search
from data.models import Subject, Term

TERM_COLUMNS = ["subject", "term", "definition", "id"]


def terms_to_frame(terms: Sequence[Term]) -> pd.DataFrame:
    """Terms as a DataFrame (subject, term, definition, id), order kept."""
    if not terms:
        return pd.DataFrame(columns=TERM_COLUMNS)
    return pd.DataFrame(
        [{"subject": t.subject.value, "term": t.term, "definition": t.definition, "id": t.id} for t in terms],
        columns=TERM_COLUMNS,
    )


def subject_counts(terms: Sequence[Term], subjects: Optional[Sequence[Subject]] = None) -> pd.DataFrame:
    """Term count per subject, zero-filled, in enum (or given) order."""
    subjects = list(subjects) if subjects is not None else list(Subject)
    counts: Dict[Subject, int] = {s: 0 for s in subjects}
    for t in terms:
        if t.subject in counts:
            counts[t.subject] += 1
    return pd.DataFrame({"subject": [s.value for s in subjects], "term_count": [counts[s] for s in subjects]})


def get_results_summary(
    displayed: int,
    total: int,
    selected_subject: Optional[Subject] = None,
    search_text: str = "",
) -> str:
    """E.g. 'Showing **3** of **24** terms in **Physics** matching “force”.'"""
    if total == 0:
        return "No terms loaded."
    scope = f" in **{selected_subject.value}**" if selected_subject else ""
    needle = normalize_search(search_text)
    match = f" matching “{search_text.strip()}”" if needle else ""
    return f"Showing **{displayed}** of **{total}** terms{scope}{match}."


def get_load_summary(counts: Dict[Subject, int]) -> str:
    """E.g. 'Loaded **24** terms: Physics 10, Mathematics 8, Biology 6.'"""
    if not counts:
        return "No subjects loaded."
    total = sum(counts.values())
    parts = [f"{s.value} {n}" for s, n in counts.items()]
    return f"Loaded **{total}** terms: " + ", ".join(parts) + "."
