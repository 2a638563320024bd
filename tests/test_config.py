"""Config loading and source validation."""
import pytest
import yaml

from data.models import Subject
from utils.config import get_app_config, get_sources_config, get_subject_sources, load_config


def test_project_config_loads():
    cfg = load_config()
    assert isinstance(cfg, dict)
    sources = get_subject_sources(cfg)
    assert [s.subject for s in sources] == [Subject.Physics, Subject.Mathematics, Subject.Biology]
    assert [s.key for s in sources] == ["phy", "math", "bio"]


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg == {}
    assert get_app_config(cfg)["grid_columns"] == 3
    assert get_sources_config(cfg)["load_policy"] == "all_or_nothing"
    assert len(get_subject_sources(cfg)) == 3


def test_config_path_from_env(tmp_path, monkeypatch):
    path = tmp_path / "alt.yaml"
    path.write_text(yaml.safe_dump({"app": {"title": "Glossary"}}), encoding="utf-8")
    monkeypatch.setenv("TERMS_CONFIG_PATH", str(path))
    assert get_app_config()["title"] == "Glossary"


def test_unknown_subject_rejected():
    cfg = {"sources": {"subjects": [{"subject": "Chemistry", "location": "c.json"}]}}
    with pytest.raises(ValueError, match="Chemistry"):
        get_subject_sources(cfg)


def test_duplicate_subject_rejected():
    entry = {"subject": "Physics", "location": "p.json"}
    with pytest.raises(ValueError):
        get_subject_sources({"sources": {"subjects": [entry, dict(entry, key="p2")]}})


def test_unknown_policy_rejected():
    with pytest.raises(ValueError):
        get_sources_config({"sources": {"load_policy": "sometimes"}})


def test_key_defaults_to_subject_name():
    (source,) = get_subject_sources({"sources": {"subjects": [{"subject": "Biology", "location": "b.json"}]}})
    assert source.key == "biology"


@pytest.mark.parametrize(
    "override",
    [{"max_workers": 0}, {"max_workers": -1}, {"max_workers": "4"}, {"timeout_seconds": 0}, {"timeout_seconds": "10s"}],
)
def test_invalid_loader_settings_rejected(override):
    with pytest.raises(ValueError):
        get_sources_config({"sources": override})


def test_null_timeout_and_workers_allowed():
    cfg = get_sources_config({"sources": {"timeout_seconds": None, "max_workers": None}})
    assert cfg["timeout_seconds"] is None and cfg["max_workers"] is None
