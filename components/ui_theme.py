"""
Shared UI for the dictionary: light sky theme, term cards and status boxes.
Insight text uses HTML <strong> so bold renders correctly (no literal **).
"""

import html
import re
from typing import Sequence

import streamlit as st

from data.models import Subject, Term


_BOLD = re.compile(r"\*\*(.+?)\*\*")


def _md_to_html(text: str) -> str:
    """Escaped text with **spans** turned into <strong>; safe inside raw HTML boxes."""
    return _BOLD.sub(r"<strong>\1</strong>", html.escape(str(text or ""), quote=True))


SUBJECT_BADGE_CLASS = {
    Subject.Physics: "tdict-badge-physics",
    Subject.Mathematics: "tdict-badge-math",
    Subject.Biology: "tdict-badge-biology",
}

CSS = """
<style>
    .stApp {
        background: linear-gradient(135deg, #e0f2fe 0%, #f0f9ff 50%, #cffafe 100%);
        color: #1e293b;
    }
    .main .block-container {
        padding-top: 1.5rem;
        padding-bottom: 2.5rem;
        max-width: 1100px;
    }
    h1 { color: #0369a1; font-size: 2.5rem; font-weight: 700; text-align: center; margin-bottom: 0.25rem; }
    .tdict-subtitle { color: #0284c7; font-size: 1.1rem; text-align: center; margin-bottom: 1.5rem; }

    /* Term cards */
    .tdict-card {
        background: #ffffff;
        border: 1px solid #bae6fd;
        border-radius: 12px;
        padding: 1.25rem 1.5rem;
        margin-bottom: 1rem;
        box-shadow: 0 4px 14px rgba(2,132,199,0.08);
        transition: transform 0.2s ease, box-shadow 0.2s ease;
    }
    .tdict-card:hover { transform: translateY(-2px); box-shadow: 0 8px 20px rgba(2,132,199,0.16); }
    .tdict-card h3 { color: #0369a1; font-size: 1.15rem; font-weight: 600; margin: 0 0 0.5rem 0; }
    .tdict-card p { color: #475569; font-size: 0.95rem; line-height: 1.55; margin: 0 0 0.75rem 0; }
    .tdict-badge { display: inline-block; font-size: 0.75rem; font-weight: 600; padding: 2px 10px; border-radius: 999px; }
    .tdict-badge-physics { background: #e0e7ff; color: #4338ca; }
    .tdict-badge-math { background: #d1fae5; color: #047857; }
    .tdict-badge-biology { background: #fef3c7; color: #b45309; }

    /* Status boxes */
    .tdict-insight {
        background: rgba(255,255,255,0.7);
        border: 1px solid #bae6fd;
        border-radius: 12px;
        padding: 0.75rem 1.25rem;
        margin: 0.75rem 0;
        color: #0c4a6e;
    }
    .tdict-insight strong { color: #0369a1; }
    .tdict-empty {
        text-align: center;
        padding: 2.5rem 1.5rem;
        color: #0ea5e9;
    }
    .tdict-empty strong { display: block; font-size: 1.25rem; margin-bottom: 0.5rem; }
    .tdict-error-box {
        text-align: center;
        background: #fef2f2;
        border: 1px solid #fecaca;
        border-radius: 12px;
        padding: 2rem 1.5rem;
        margin: 1rem 0;
        color: #475569;
    }
    .tdict-error-box strong { display: block; color: #dc2626; font-size: 1.25rem; margin-bottom: 0.5rem; }
    .tdict-error-box code { background: #fee2e2; padding: 1px 4px; border-radius: 4px; }
</style>
"""


def inject_theme():
    st.markdown(CSS, unsafe_allow_html=True)


def render_insight(text: str, box_class: str = "tdict-insight"):
    """Render insight text; converts **bold** to HTML <strong> so it displays correctly."""
    st.markdown(f'<div class="{box_class}">{_md_to_html(text)}</div>', unsafe_allow_html=True)


def render_status(title: str, description: str = "", box_class: str = "tdict-empty"):
    st.markdown(
        f'<div class="{box_class}"><strong>{html.escape(title)}</strong>{_md_to_html(description)}</div>',
        unsafe_allow_html=True,
    )


def term_card_html(term: Term) -> str:
    badge = SUBJECT_BADGE_CLASS.get(term.subject, "")
    return (
        f'<div class="tdict-card">'
        f"<h3>{html.escape(term.term)}</h3>"
        f"<p>{html.escape(term.definition)}</p>"
        f'<span class="tdict-badge {badge}">{html.escape(term.subject.value)}</span>'
        f"</div>"
    )


def render_term_grid(terms: Sequence[Term], columns: int = 3):
    """Cards laid out round-robin across `columns` Streamlit columns."""
    columns = max(1, int(columns))
    cols = st.columns(columns)
    for i, term in enumerate(terms):
        with cols[i % columns]:
            st.markdown(term_card_html(term), unsafe_allow_html=True)
