"""
Terminology Dictionary
Browse Physics, Mathematics and Biology terms; filter by subject and search terms or definitions.
Start with:  python -m streamlit run app.py
"""

import logging

import streamlit as st

from components.browser_state import ERROR, LOADING, NO_MATCHES, NO_TERMS, RESULTS
from components.charts import subject_count_chart
from components.data_loader import ensure_terms_loaded, get_browser_state
from components.insights import get_results_summary, subject_counts, terms_to_frame
from components.ui_theme import inject_theme, render_insight, render_status, render_term_grid
from data.models import Subject
from utils.config import get_app_config

ALL_SUBJECTS = "All Subjects"

cfg = get_app_config()
logging.basicConfig(level=cfg.get("log_level", "INFO"))

st.set_page_config(
    page_title=cfg["title"],
    page_icon="📚",
    layout="wide",
    initial_sidebar_state="collapsed",
)
inject_theme()

state = ensure_terms_loaded(get_browser_state())

st.markdown(f"# {cfg['title']}")
st.markdown(
    f'<div class="tdict-subtitle">{cfg["subtitle"]}</div>',
    unsafe_allow_html=True,
)

# ----- Inputs -----
search = st.text_input(
    "Search",
    key="search_text",
    placeholder="Search for terms or definitions...",
    label_visibility="collapsed",
)
state.set_search_text(search)

choice = st.radio(
    "Subject",
    [ALL_SUBJECTS] + [s.value for s in Subject],
    key="subject_choice",
    horizontal=True,
    label_visibility="collapsed",
)
state.set_selected_subject(None if choice == ALL_SUBJECTS else choice)

view = state.view()

# ----- Sidebar -----
with st.sidebar:
    st.markdown("## 📚 Dictionary")
    st.plotly_chart(subject_count_chart(subject_counts(state.all_terms)), use_container_width=True)
    show_table = st.checkbox("Table view", value=False, help="Show the current results as a sortable table.")
    if view.kind == RESULTS:
        st.download_button(
            "Download results (CSV)",
            terms_to_frame(view.displayed_terms).to_csv(index=False).encode("utf-8"),
            file_name="terms.csv",
            mime="text/csv",
        )
    for w in state.warnings:
        st.warning(w)

# ----- Results -----
if view.kind == LOADING:
    render_status("Loading terms...", "The dictionary has not finished loading. Reload the page if this persists.")
elif view.kind == ERROR:
    render_status(
        "Error Loading Data",
        f"{view.error} Please ensure the JSON files (e.g. data/terms/physics.json) exist, are valid JSON, and are correctly formatted.",
        box_class="tdict-error-box",
    )
elif view.kind == NO_TERMS:
    render_status(
        "No terms available.",
        view.notice or "It seems the dictionary data files are empty or could not be processed.",
    )
elif view.kind == NO_MATCHES:
    render_status("No terms match your current search or filter.", "Try adjusting your search or filter criteria.")
elif view.kind == RESULTS:
    render_insight(get_results_summary(len(view.displayed_terms), view.total_terms, state.selected_subject, state.search_text))
    if show_table:
        st.dataframe(terms_to_frame(view.displayed_terms).drop(columns=["id"]), use_container_width=True, hide_index=True)
    else:
        render_term_grid(view.displayed_terms, columns=cfg.get("grid_columns", 3))

st.markdown("---")
st.caption(f"© {cfg['title']}")
