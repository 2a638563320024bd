"""Shared fixtures: term lists and on-disk source files."""
import json

import pytest

from data.models import Subject, SubjectSource, Term


def make_term(subject: Subject, term: str, definition: str, n: int = 1) -> Term:
    return Term(id=f"{subject.value[:3].lower()}-{n}", subject=subject, term=term, definition=definition)


@pytest.fixture
def sample_terms():
    return [
        make_term(Subject.Physics, "Velocity", "Rate of change of position", 1),
        make_term(Subject.Physics, "Force", "Push or pull on an object", 2),
        make_term(Subject.Mathematics, "Integral", "Area under curve", 1),
        make_term(Subject.Biology, "Enzyme", "Protein that speeds up a reaction", 1),
        make_term(Subject.Mathematics, "Vector", "Quantity with magnitude and direction; used for force", 2),
    ]


@pytest.fixture
def write_sources(tmp_path):
    """Write {Subject: record-or-raw-text} to tmp files; return SubjectSource list in enum order."""

    def _write(records):
        sources = []
        for subject, record in records.items():
            path = tmp_path / f"{subject.value.lower()}.json"
            path.write_text(record if isinstance(record, str) else json.dumps(record), encoding="utf-8")
            sources.append(SubjectSource(subject=subject, location=str(path), key=subject.value[:3].lower()))
        return sources

    return _write
