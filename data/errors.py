"""Errors raised while retrieving per-subject term sources."""

from data.models import Subject


class TermSourceError(Exception):
    """A subject's source could not be turned into a term -> definition mapping."""

    def __init__(self, message: str, subject: Subject, location: str):
        super().__init__(message)
        self.subject = subject
        self.location = location


class SourceUnavailable(TermSourceError):
    """Retrieval failed: IO/network error, timeout, or non-success status."""


class MalformedSource(TermSourceError):
    """Retrieved content is not a flat JSON object of string -> string."""
