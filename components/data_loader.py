"""
Session wiring for the Streamlit app: one BrowserState per session, loaded exactly once.
"""

import logging

import streamlit as st

from components.browser_state import BrowserState
from data.loaders.term_loader import UNKNOWN_ERROR_MESSAGE, load_terms
from data.models import LoadResult, LoadStatus
from utils.config import get_sources_config, get_subject_sources

logger = logging.getLogger(__name__)

STATE_KEY = "browser_state"


def get_browser_state() -> BrowserState:
    """Return this session's BrowserState, creating it on first access."""
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = BrowserState()
    return st.session_state[STATE_KEY]


def _failed(message: str) -> LoadResult:
    return LoadResult(terms=[], error=message, status=LoadStatus.FAILED)


def ensure_terms_loaded(state: BrowserState) -> BrowserState:
    """
    Run the aggregate load once; later reruns in the session are no-ops.
    The state always ends terminal, except when Streamlit interrupts the run
    (rerun/stop), which puts it back to NOT_STARTED for the next run.
    """
    if state.status != LoadStatus.NOT_STARTED:
        return state
    state.begin_loading()
    try:
        with st.spinner("Loading terms…"):
            try:
                cfg = get_sources_config()
                sources = get_subject_sources()
            except ValueError as e:
                logger.error("Invalid term source configuration: %s", e)
                result = _failed(f"Invalid configuration: {e}")
            else:
                try:
                    result = load_terms(
                        sources,
                        timeout=cfg.get("timeout_seconds"),
                        max_workers=cfg.get("max_workers"),
                        policy=cfg["load_policy"],
                    )
                except Exception:
                    logger.exception("Dictionary load failed")
                    result = _failed(UNKNOWN_ERROR_MESSAGE)
            state.apply_load_result(result)
    except BaseException:
        if state.status == LoadStatus.LOADING:
            state.abort_loading()
        raise
    logger.info("Dictionary load finished: %s (%d terms)", result.status.value, len(result.terms))
    return state
