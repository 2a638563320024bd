"""Configuration loader for the dictionary app and scripts."""
import os
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv

from data.loaders.term_loader import LOAD_POLICIES
from data.models import Subject, SubjectSource

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_SUBJECTS = [
    {"subject": "Physics", "location": "data/terms/physics.json", "key": "phy"},
    {"subject": "Mathematics", "location": "data/terms/mathematics.json", "key": "math"},
    {"subject": "Biology", "location": "data/terms/biology.json", "key": "bio"},
]


def _config_path() -> Path:
    raw = os.getenv("TERMS_CONFIG_PATH", "").strip()
    if not raw:
        return PROJECT_ROOT / "config.yaml"
    p = Path(raw)
    return p if p.is_absolute() else PROJECT_ROOT / p


def load_config(path: Optional[Path] = None) -> dict:
    path = path or _config_path()
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_app_config(cfg: Optional[dict] = None) -> dict:
    cfg = load_config() if cfg is None else cfg
    app = {
        "title": "Terminology Dictionary",
        "subtitle": "Explore terms from Physics, Mathematics, and Biology.",
        "grid_columns": 3,
        "log_level": "INFO",
    }
    app.update(cfg.get("app") or {})
    return app


def get_sources_config(cfg: Optional[dict] = None) -> dict:
    """Loader settings with defaults filled in; validates policy, timeout and worker count."""
    cfg = load_config() if cfg is None else cfg
    sources = {"load_policy": "all_or_nothing", "timeout_seconds": 10, "max_workers": 4}
    sources.update(cfg.get("sources") or {})
    if sources["load_policy"] not in LOAD_POLICIES:
        raise ValueError(
            f"sources.load_policy must be one of {', '.join(LOAD_POLICIES)}, got {sources['load_policy']!r}"
        )
    timeout = sources["timeout_seconds"]
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0):
        raise ValueError(f"sources.timeout_seconds must be a positive number or null, got {timeout!r}")
    workers = sources["max_workers"]
    if workers is not None and (isinstance(workers, bool) or not isinstance(workers, int) or workers < 1):
        raise ValueError(f"sources.max_workers must be a positive integer or null, got {workers!r}")
    return sources


def get_subject_sources(cfg: Optional[dict] = None) -> List[SubjectSource]:
    """
    Configured (subject, location, key) records, in display order.
    Every subject must belong to Subject and appear once; keys must be unique.
    """
    entries = get_sources_config(cfg).get("subjects") or DEFAULT_SUBJECTS
    out: List[SubjectSource] = []
    seen_subjects = set()
    seen_keys = set()
    for entry in entries:
        subject = Subject.parse(entry["subject"])
        location = str(entry["location"])
        key = str(entry.get("key") or subject.value.lower())
        if subject in seen_subjects:
            raise ValueError(f"Subject {subject.value} is configured more than once")
        if key in seen_keys:
            raise ValueError(f"Source key {key!r} is configured more than once")
        seen_subjects.add(subject)
        seen_keys.add(key)
        out.append(SubjectSource(subject=subject, location=location, key=key))
    return out
