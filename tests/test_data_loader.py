"""Session load wiring: runs once, always ends in a terminal state."""
import pytest
import yaml

from components import data_loader
from components.browser_state import ERROR, BrowserState
from data.loaders.term_loader import UNKNOWN_ERROR_MESSAGE
from data.models import LoadResult, LoadStatus, Subject, Term


def _fake_loader(calls):
    def fake_load_terms(sources, timeout=None, max_workers=None, policy="all_or_nothing"):
        calls.append(len(sources))
        term = Term(id="phy-1", subject=Subject.Physics, term="Force", definition="push")
        return LoadResult(terms=[term], error=None, status=LoadStatus.SUCCEEDED)

    return fake_load_terms


def test_loads_once_per_session(monkeypatch):
    calls = []
    monkeypatch.setattr(data_loader, "load_terms", _fake_loader(calls))
    state = BrowserState()
    data_loader.ensure_terms_loaded(state)
    data_loader.ensure_terms_loaded(state)
    assert calls == [3]
    assert state.status == LoadStatus.SUCCEEDED
    assert [t.term for t in state.displayed_terms] == ["Force"]


def test_invalid_config_ends_failed(tmp_path, monkeypatch):
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({"sources": {"max_workers": -1}}), encoding="utf-8")
    monkeypatch.setenv("TERMS_CONFIG_PATH", str(path))
    calls = []
    monkeypatch.setattr(data_loader, "load_terms", _fake_loader(calls))
    state = data_loader.ensure_terms_loaded(BrowserState())
    assert state.status == LoadStatus.FAILED
    assert "max_workers" in state.error
    assert state.view().kind == ERROR
    data_loader.ensure_terms_loaded(state)
    assert calls == []
    assert state.status == LoadStatus.FAILED


def test_unexpected_loader_error_ends_failed(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("executor gone")

    monkeypatch.setattr(data_loader, "load_terms", boom)
    state = data_loader.ensure_terms_loaded(BrowserState())
    assert state.status == LoadStatus.FAILED
    assert state.error == UNKNOWN_ERROR_MESSAGE
    assert not state.is_loading


class Interrupted(BaseException):
    pass


def test_interrupted_load_can_run_again(monkeypatch):
    def interrupt(*args, **kwargs):
        raise Interrupted()

    monkeypatch.setattr(data_loader, "load_terms", interrupt)
    state = BrowserState()
    with pytest.raises(Interrupted):
        data_loader.ensure_terms_loaded(state)
    assert state.status == LoadStatus.NOT_STARTED

    calls = []
    monkeypatch.setattr(data_loader, "load_terms", _fake_loader(calls))
    data_loader.ensure_terms_loaded(state)
    assert calls == [3]
    assert state.status == LoadStatus.SUCCEEDED
