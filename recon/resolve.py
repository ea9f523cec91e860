"""Pick a single value per result field from competing metadata candidates."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple
from urllib.parse import urlparse

from .errors import InputError
from .models import MetaCandidate
from .properties import PROPERTY_MAP, eligible_identifiers


def resolve(field_name: str, candidates: Iterable[MetaCandidate]) -> str:
    """Return the value of the highest-priority candidate eligible for a field.

    Candidates are scanned in extraction order and only a strictly greater
    priority replaces the current best, so the earliest of equal candidates
    wins. Returns an empty string when nothing is eligible.
    """
    eligible = eligible_identifiers(field_name)
    best_value = ""
    best_priority = 0.0
    for candidate in candidates:
        if candidate.identifier in eligible and candidate.priority > best_priority:
            best_value = candidate.value
            best_priority = candidate.priority
    return best_value


def resolve_all(candidates: Sequence[MetaCandidate]) -> Dict[str, str]:
    return {field_name: resolve(field_name, candidates) for field_name in PROPERTY_MAP}


def validate_confidence(min_confidence: float) -> None:
    if not 0 <= min_confidence <= 1:
        raise InputError(
            f"min_confidence must be between 0 and 1, got {min_confidence!r}"
        )


def filter_candidates(
    candidates: Iterable[MetaCandidate],
    min_confidence: float,
) -> List[MetaCandidate]:
    """Drop candidates whose priority is at or below ``min_confidence``."""
    validate_confidence(min_confidence)
    return [c for c in candidates if c.priority > min_confidence]


def host_of(url: str) -> str:
    netloc = urlparse(url).netloc
    return netloc.rpartition("@")[2]


def canonical_location(resolved_url: str, requested_url: str) -> Tuple[str, str]:
    """Return ``(url, host)`` for the result.

    A resolved canonical URL wins when it parses as an absolute URL; anything
    else falls back to the URL that was requested.
    """
    if resolved_url:
        try:
            parsed = urlparse(resolved_url)
        except ValueError:  # e.g. an invalid IPv6 literal
            return requested_url, host_of(requested_url)
        if parsed.scheme and parsed.netloc:
            return parsed.geturl(), host_of(resolved_url)
    return requested_url, host_of(requested_url)
