"""Sources: where each subject's terms come from and how the load went."""
import pandas as pd
import streamlit as st

from components.charts import subject_count_chart
from components.data_loader import ensure_terms_loaded, get_browser_state
from components.insights import get_load_summary, subject_counts
from components.ui_theme import inject_theme, render_insight, render_status
from data.collectors.source_fetcher import resolve_location
from data.models import LoadStatus
from utils.config import get_sources_config, get_subject_sources

inject_theme()
st.title("Sources")
st.caption("Configured term sources and the result of this session's load.")

state = ensure_terms_loaded(get_browser_state())
cfg = get_sources_config()
sources = get_subject_sources()

st.subheader("Configured sources")
st.dataframe(
    pd.DataFrame(
        [
            {
                "subject": s.subject.value,
                "key": s.key,
                "location": resolve_location(s.location),
                "terms": state.counts.get(s.subject),
            }
            for s in sources
        ]
    ),
    use_container_width=True,
    hide_index=True,
)
st.caption(f"Load policy: **{cfg['load_policy']}** · Timeout: **{cfg.get('timeout_seconds')}s**")

st.subheader("Load status")
if state.status == LoadStatus.FAILED:
    render_status("Load failed", state.error or "", box_class="tdict-error-box")
elif state.status == LoadStatus.SUCCEEDED_EMPTY:
    render_status("No terms found", state.notice or "")
else:
    render_insight(get_load_summary(state.counts))
    st.plotly_chart(subject_count_chart(subject_counts(state.all_terms)), use_container_width=True)
for w in state.warnings:
    st.warning(w)
