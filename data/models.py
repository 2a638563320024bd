"""
Dictionary data model: subjects, term entities, source descriptors and load outcomes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union


class Subject(str, Enum):
    """Closed set of subjects the dictionary covers."""

    Physics = "Physics"
    Mathematics = "Mathematics"
    Biology = "Biology"

    @classmethod
    def parse(cls, value: Union["Subject", str]) -> "Subject":
        """Accept a Subject or its string value; anything else raises ValueError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            known = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown subject {value!r}. Expected one of: {known}") from None


@dataclass(frozen=True)
class Term:
    id: str
    subject: Subject
    term: str
    definition: str

    def __post_init__(self):
        if not isinstance(self.subject, Subject):
            raise ValueError(f"Term subject must be a Subject, got {self.subject!r}")
        if not self.term or not self.term.strip():
            raise ValueError("Term label must be non-empty")


@dataclass(frozen=True)
class SubjectSource:
    """Where one subject's term -> definition mapping lives."""

    subject: Subject
    location: str
    key: str


class LoadStatus(str, Enum):
    NOT_STARTED = "not_started"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    SUCCEEDED_EMPTY = "succeeded_empty"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (LoadStatus.SUCCEEDED, LoadStatus.SUCCEEDED_EMPTY, LoadStatus.FAILED)


@dataclass
class LoadResult:
    """
    Outcome of the aggregate load.

    Exactly one of three shapes:
    - SUCCEEDED: terms non-empty, error None
    - SUCCEEDED_EMPTY: terms empty, error None, notice set
    - FAILED: terms empty, error set
    """

    terms: List[Term]
    error: Optional[str]
    status: LoadStatus
    notice: Optional[str] = None
    warnings: List[str] = field(default_factory=list)
    counts: Dict[Subject, int] = field(default_factory=dict)

    @property
    def no_terms_found(self) -> bool:
        return self.status == LoadStatus.SUCCEEDED_EMPTY
