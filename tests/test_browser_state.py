"""Presentation boundary: load status transitions and view branching."""
import pytest

from components.browser_state import ERROR, LOADING, NO_MATCHES, NO_TERMS, RESULTS, BrowserState
from data.loaders.term_loader import NO_TERMS_MESSAGE
from data.models import LoadResult, LoadStatus, Subject


def loaded(terms):
    state = BrowserState()
    state.begin_loading()
    state.apply_load_result(LoadResult(terms=terms, error=None, status=LoadStatus.SUCCEEDED))
    return state


def test_starts_loading():
    state = BrowserState()
    assert state.is_loading
    assert state.view().kind == LOADING
    state.begin_loading()
    assert state.view().kind == LOADING
    assert state.displayed_terms == []


def test_results_and_setters(sample_terms):
    state = loaded(sample_terms)
    assert state.view().kind == RESULTS
    assert state.displayed_terms == sample_terms
    state.set_selected_subject("Biology")
    assert [t.term for t in state.displayed_terms] == ["Enzyme"]
    state.set_search_text("xyz-no-match")
    view = state.view()
    assert view.kind == NO_MATCHES
    assert view.displayed_terms == [] and view.total_terms == len(sample_terms)
    state.set_selected_subject(None)
    state.set_search_text("")
    assert state.displayed_terms == sample_terms


def test_unchanged_inputs_return_same_list(sample_terms):
    state = loaded(sample_terms)
    state.set_search_text("force")
    first = state.displayed_terms
    state.set_search_text("  FORCE ")
    assert state.displayed_terms is first
    state.set_selected_subject(Subject.Physics)
    assert state.displayed_terms is not first


def test_failed_load():
    state = BrowserState()
    state.begin_loading()
    state.apply_load_result(LoadResult(terms=[], error="Failed to load Physics terms", status=LoadStatus.FAILED))
    view = state.view()
    assert view.kind == ERROR
    assert view.error == "Failed to load Physics terms"
    assert not view.is_loading


def test_empty_load_is_not_an_error():
    state = BrowserState()
    state.begin_loading()
    state.apply_load_result(
        LoadResult(terms=[], error=None, status=LoadStatus.SUCCEEDED_EMPTY, notice=NO_TERMS_MESSAGE)
    )
    view = state.view()
    assert view.kind == NO_TERMS
    assert view.error is None and view.notice == NO_TERMS_MESSAGE


def test_terminal_states_are_final(sample_terms):
    state = loaded(sample_terms)
    with pytest.raises(RuntimeError):
        state.begin_loading()
    with pytest.raises(RuntimeError):
        state.apply_load_result(LoadResult(terms=[], error="x", status=LoadStatus.FAILED))


def test_unknown_subject_rejected():
    with pytest.raises(ValueError):
        BrowserState().set_selected_subject("Chemistry")


def test_abort_only_from_loading(sample_terms):
    state = BrowserState()
    with pytest.raises(RuntimeError):
        state.abort_loading()
    state.begin_loading()
    state.abort_loading()
    assert state.status == LoadStatus.NOT_STARTED
    with pytest.raises(RuntimeError):
        loaded(sample_terms).abort_loading()


def test_counts_copied_from_result(sample_terms):
    state = BrowserState()
    state.begin_loading()
    state.apply_load_result(
        LoadResult(terms=sample_terms, error=None, status=LoadStatus.SUCCEEDED, counts={Subject.Physics: 2})
    )
    assert state.counts == {Subject.Physics: 2}
