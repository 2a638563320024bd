"""
Term loader: fetch every subject's source concurrently, normalize into Term entities,
and classify the aggregate outcome (succeeded / succeeded-empty / failed).
"""

import logging
import uuid
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from data.errors import SourceUnavailable, TermSourceError
from data.collectors.source_fetcher import fetch_source_record
from data.models import LoadResult, LoadStatus, Subject, SubjectSource, Term

logger = logging.getLogger(__name__)

ALL_OR_NOTHING = "all_or_nothing"
PARTIAL = "partial"
LOAD_POLICIES = (ALL_OR_NOTHING, PARTIAL)

NO_TERMS_MESSAGE = (
    "No terms found. Please check that the data files are correctly placed, "
    "formatted as JSON objects, and contain data."
)
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred while loading terms."

# fetch(source, timeout) -> term -> definition mapping
Fetcher = Callable[[SubjectSource, Optional[float]], Dict[str, str]]


def _make_term_id(key: str, position: int) -> str:
    return f"{key}-{position}-{uuid.uuid4().hex[:12]}"


def record_to_terms(record: Dict[str, str], source: SubjectSource) -> List[Term]:
    """One Term per (label, definition) pair, in record order, each with a fresh id."""
    return [
        Term(id=_make_term_id(source.key, i), subject=source.subject, term=label, definition=definition)
        for i, (label, definition) in enumerate(record.items(), start=1)
    ]


def _load_one(source: SubjectSource, fetch: Fetcher, timeout: Optional[float]) -> List[Term]:
    record = fetch(source, timeout)
    if not record:
        logger.warning(
            "No terms found in %s for %s. The file might be empty.", source.location, source.subject.value
        )
        return []
    terms = record_to_terms(record, source)
    logger.info("Loaded %d %s terms from %s", len(terms), source.subject.value, source.location)
    return terms


def _collect(
    sources: Sequence[SubjectSource],
    fetch: Fetcher,
    timeout: Optional[float],
    max_workers: Optional[int],
) -> List[Tuple[SubjectSource, Optional[List[Term]], Optional[BaseException]]]:
    """
    Run every fetch concurrently and wait for all of them (or the deadline).

    Every source gets its own worker so the deadline starts when its fetch starts;
    max_workers never shrinks the pool below the number of sources.
    """
    workers = max(max_workers or 0, len(sources))
    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="term-source")
    try:
        futures = [executor.submit(_load_one, s, fetch, timeout) for s in sources]
        _, not_done = wait(futures, timeout=timeout)
        outcomes = []
        for source, future in zip(sources, futures):
            if future in not_done:
                outcomes.append(
                    (
                        source,
                        None,
                        SourceUnavailable(
                            f"Timed out loading {source.subject.value} terms from {source.location} "
                            f"after {timeout}s.",
                            source.subject,
                            source.location,
                        ),
                    )
                )
                continue
            exc = future.exception()
            outcomes.append((source, None, exc) if exc else (source, future.result(), None))
        return outcomes
    finally:
        # Hung retrievals are abandoned, not awaited.
        executor.shutdown(wait=False, cancel_futures=True)


def _error_message(exc: BaseException) -> str:
    if isinstance(exc, TermSourceError):
        return str(exc)
    logger.error("Unexpected error while loading terms", exc_info=exc)
    return UNKNOWN_ERROR_MESSAGE


def load_terms(
    sources: Sequence[SubjectSource],
    fetch: Fetcher = fetch_source_record,
    timeout: Optional[float] = None,
    max_workers: Optional[int] = None,
    policy: str = ALL_OR_NOTHING,
) -> LoadResult:
    """
    Aggregate load over all configured sources.

    - all_or_nothing: any failed subject fails the whole load (empty terms + one error message).
    - partial: failed subjects become warnings; the load fails only if every subject failed.
    All retrievals succeeding with zero combined terms yields SUCCEEDED_EMPTY with a notice.
    """
    if policy not in LOAD_POLICIES:
        raise ValueError(f"Unknown load policy {policy!r}. Expected one of: {', '.join(LOAD_POLICIES)}")
    if not sources:
        logger.warning("No term sources configured.")
        return LoadResult(terms=[], error=None, status=LoadStatus.SUCCEEDED_EMPTY, notice=NO_TERMS_MESSAGE)

    outcomes = _collect(sources, fetch, timeout, max_workers)
    failures = [(source, _error_message(exc)) for source, _, exc in outcomes if exc is not None]

    if failures and (policy == ALL_OR_NOTHING or len(failures) == len(outcomes)):
        message = failures[0][1]
        logger.error("Error loading terms: %s", message)
        return LoadResult(
            terms=[],
            error=message,
            status=LoadStatus.FAILED,
            warnings=[m for _, m in failures[1:]],
        )

    terms: List[Term] = []
    counts: Dict[Subject, int] = {}
    for source, subject_terms, exc in outcomes:
        if exc is not None:
            continue
        counts[source.subject] = len(subject_terms)
        terms.extend(subject_terms)
    warnings = [m for _, m in failures]
    for m in warnings:
        logger.warning("Skipping subject: %s", m)

    if not terms:
        logger.warning("No terms were loaded. Check the data files, their paths and format.")
        return LoadResult(
            terms=[],
            error=None,
            status=LoadStatus.SUCCEEDED_EMPTY,
            notice=NO_TERMS_MESSAGE,
            warnings=warnings,
            counts=counts,
        )
    return LoadResult(terms=terms, error=None, status=LoadStatus.SUCCEEDED, warnings=warnings, counts=counts)
