"""
Source retrieval for the term dictionary.
Each subject resolves to one JSON object (term -> definition) read from a local file or fetched over HTTP.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional
from urllib.parse import urljoin

import requests
from dotenv import load_dotenv

from data.errors import MalformedSource, SourceUnavailable
from data.models import SubjectSource

load_dotenv()
logger = logging.getLogger(__name__)

# Project root (parent of data/)
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def _is_remote(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def resolve_location(location: str, base_url: Optional[str] = None) -> str:
    """
    Absolute URL or filesystem path for a configured location.
    Relative locations join onto base_url (or TERMS_BASE_URL) when set, else the project root.
    """
    if _is_remote(location):
        return location
    base_url = base_url if base_url is not None else os.getenv("TERMS_BASE_URL", "").strip()
    if base_url:
        return urljoin(base_url.rstrip("/") + "/", location.lstrip("/"))
    p = Path(location)
    if not p.is_absolute():
        p = PROJECT_ROOT / p
    return str(p)


def _read_remote(source: SubjectSource, url: str, timeout: Optional[float]) -> str:
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.Timeout:
        raise SourceUnavailable(
            f"Timed out loading {source.subject.value} terms from {url} after {timeout}s.",
            source.subject,
            url,
        )
    except requests.RequestException as e:
        raise SourceUnavailable(
            f"Failed to load {source.subject.value} terms from {url}: {e}", source.subject, url
        )
    if not resp.ok:
        raise SourceUnavailable(
            f"Failed to load {source.subject.value} terms from {url}. Status: {resp.status_code}",
            source.subject,
            url,
        )
    return resp.text


def _read_local(source: SubjectSource, path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        raise SourceUnavailable(
            f"Failed to load {source.subject.value} terms from {path}. File not found.",
            source.subject,
            path,
        )
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(
            f"Failed to load {source.subject.value} terms from {path}: {e}", source.subject, path
        )


def parse_source_record(text: str, source: SubjectSource, location: Optional[str] = None) -> Dict[str, str]:
    """Parse raw content into a term -> definition dict, preserving key order."""
    location = location or source.location
    try:
        data = json.loads(text)
    except ValueError:
        raise MalformedSource(
            f"Failed to parse {source.subject.value} terms from {location}. "
            "Please ensure the data files are in valid JSON format.",
            source.subject,
            location,
        )
    if not isinstance(data, dict):
        raise MalformedSource(
            f"{source.subject.value} terms at {location} must be a JSON object of term -> definition, "
            f"got {type(data).__name__}.",
            source.subject,
            location,
        )
    for term, definition in data.items():
        if not term.strip():
            raise MalformedSource(
                f"{source.subject.value} terms at {location} contain an empty term label.",
                source.subject,
                location,
            )
        if not isinstance(definition, str):
            raise MalformedSource(
                f"Definition of '{term}' in {location} must be a string, got {type(definition).__name__}.",
                source.subject,
                location,
            )
    return data


def fetch_source_record(
    source: SubjectSource,
    timeout: Optional[float] = None,
    base_url: Optional[str] = None,
) -> Dict[str, str]:
    """
    Retrieve one subject's source record.
    Raises SourceUnavailable when it cannot be read and MalformedSource when it is not a flat string map.
    """
    location = resolve_location(source.location, base_url=base_url)
    logger.debug("Fetching %s terms from %s", source.subject.value, location)
    if _is_remote(location):
        text = _read_remote(source, location, timeout)
    else:
        text = _read_local(source, location)
    return parse_source_record(text, source, location)
