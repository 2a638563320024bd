"""
Presentation boundary for the dictionary view.

BrowserState owns the loaded terms, the load status and the two user inputs
(selected subject, search text). The view reads `view()` after any setter call
and renders whatever kind it gets back; it holds no business logic itself.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from components.filter_engine import filter_terms, normalize_search
from data.models import LoadResult, LoadStatus, Subject, Term

# View kinds
LOADING = "loading"
ERROR = "error"
NO_TERMS = "no_terms"
NO_MATCHES = "no_matches"
RESULTS = "results"


@dataclass(frozen=True)
class BrowserView:
    kind: str
    is_loading: bool
    error: Optional[str]
    notice: Optional[str]
    displayed_terms: List[Term]
    total_terms: int


@dataclass
class BrowserState:
    all_terms: List[Term] = field(default_factory=list)
    status: LoadStatus = LoadStatus.NOT_STARTED
    error: Optional[str] = None
    notice: Optional[str] = None
    warnings: List[str] = field(default_factory=list)
    counts: Dict[Subject, int] = field(default_factory=dict)
    selected_subject: Optional[Subject] = None
    search_text: str = ""
    _cache_key: Optional[Tuple] = field(default=None, init=False, repr=False, compare=False)
    _cache: List[Term] = field(default_factory=list, init=False, repr=False, compare=False)

    @property
    def is_loading(self) -> bool:
        return self.status in (LoadStatus.NOT_STARTED, LoadStatus.LOADING)

    def begin_loading(self) -> None:
        if self.status != LoadStatus.NOT_STARTED:
            raise RuntimeError(f"Cannot start loading from state {self.status.value}")
        self.status = LoadStatus.LOADING

    def abort_loading(self) -> None:
        """LOADING -> NOT_STARTED, for a load interrupted before it produced a result."""
        if self.status != LoadStatus.LOADING:
            raise RuntimeError(f"Cannot abort loading from state {self.status.value}")
        self.status = LoadStatus.NOT_STARTED

    def apply_load_result(self, result: LoadResult) -> None:
        if self.status != LoadStatus.LOADING:
            raise RuntimeError(f"Cannot apply a load result in state {self.status.value}")
        if not result.status.is_terminal:
            raise RuntimeError(f"Load result has non-terminal status {result.status.value}")
        self.all_terms = list(result.terms)
        self.error = result.error
        self.notice = result.notice
        self.warnings = list(result.warnings)
        self.counts = dict(result.counts)
        self.status = result.status

    def set_search_text(self, text: str) -> None:
        self.search_text = text or ""

    def set_selected_subject(self, subject: Optional[Union[Subject, str]]) -> None:
        self.selected_subject = None if subject is None else Subject.parse(subject)

    @property
    def displayed_terms(self) -> List[Term]:
        """Filtered subset; unchanged inputs return the same list object."""
        if self.is_loading:
            return []
        key = (id(self.all_terms), len(self.all_terms), self.selected_subject, normalize_search(self.search_text))
        if key != self._cache_key:
            self._cache = filter_terms(self.all_terms, self.selected_subject, self.search_text)
            self._cache_key = key
        return self._cache

    def view(self) -> BrowserView:
        displayed = self.displayed_terms
        if self.is_loading:
            kind = LOADING
        elif self.error:
            kind = ERROR
        elif not self.all_terms:
            kind = NO_TERMS
        elif not displayed:
            kind = NO_MATCHES
        else:
            kind = RESULTS
        return BrowserView(
            kind=kind,
            is_loading=self.is_loading,
            error=self.error,
            notice=self.notice,
            displayed_terms=displayed,
            total_terms=len(self.all_terms),
        )
