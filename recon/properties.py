"""Recognized metadata properties and the result fields they feed."""

from __future__ import annotations

from typing import Dict, Tuple

CANONICAL_WEIGHT = 1.0
FALLBACK_WEIGHT = 0.5

CANONICAL_IMAGE_PROPERTY = "og:image"
TITLE_PROPERTY = "title"

TARGETED_PROPERTIES: Dict[str, float] = {
    "og:site_name": CANONICAL_WEIGHT,
    "og:title": CANONICAL_WEIGHT,
    "og:type": CANONICAL_WEIGHT,
    "og:description": CANONICAL_WEIGHT,
    "og:author": CANONICAL_WEIGHT,
    "og:publisher": CANONICAL_WEIGHT,
    "og:url": CANONICAL_WEIGHT,
    CANONICAL_IMAGE_PROPERTY: CANONICAL_WEIGHT,
    "site_name": FALLBACK_WEIGHT,
    TITLE_PROPERTY: FALLBACK_WEIGHT,
    "type": FALLBACK_WEIGHT,
    "description": FALLBACK_WEIGHT,
    "author": FALLBACK_WEIGHT,
    "publisher": FALLBACK_WEIGHT,
}

# Order inside each tuple is irrelevant; weights decide between identifiers.
PROPERTY_MAP: Dict[str, Tuple[str, ...]] = {
    "URL": ("og:url",),
    "Site": ("og:site_name", "site_name"),
    "Title": ("og:title", "title"),
    "Type": ("og:type", "type"),
    "Description": ("og:description", "description"),
    "Author": ("og:author", "author"),
    "Publisher": ("og:publisher", "publisher"),
}


def property_weight(identifier: str) -> float:
    """Return the registry weight for an identifier, or 0 if unrecognized."""
    return TARGETED_PROPERTIES.get(identifier, 0.0)


def eligible_identifiers(field_name: str) -> Tuple[str, ...]:
    return PROPERTY_MAP.get(field_name, ())
