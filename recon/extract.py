"""Metadata and image extraction from a markup event stream."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .markup import EventType, MarkupEvent
from .models import ImageReference, MetaCandidate
from .properties import (
    CANONICAL_IMAGE_PROPERTY,
    FALLBACK_WEIGHT,
    TITLE_PROPERTY,
    property_weight,
)


class TagKind(Enum):
    """Tags the extractor reacts to."""

    META = "meta"
    IMG = "img"
    TITLE = "title"

    @classmethod
    def from_name(cls, name: str) -> Optional["TagKind"]:
        try:
            return cls(name.lower())
        except ValueError:
            return None


def parse_meta(event: MarkupEvent) -> Optional[MetaCandidate]:
    """Build a candidate from a ``<meta>`` tag if it names a known property."""
    identifier = ""
    content = ""
    priority = 0.0
    for key, value in event.attrs:
        if key in ("property", "name"):
            weight = property_weight(value.strip())
            if weight:
                identifier = value.strip()
                priority = weight
        elif key == "content":
            content = value.strip()

    if priority > 0:
        return MetaCandidate(identifier=identifier, value=content, priority=priority)
    return None


def parse_img(event: MarkupEvent) -> Optional[ImageReference]:
    src = event.attr("src")
    if not src:
        return None
    return ImageReference(source_url=src, alt_text=event.attr("alt"))


def parse_title(event: MarkupEvent) -> MetaCandidate:
    return MetaCandidate(identifier=TITLE_PROPERTY, value=event.data, priority=FALLBACK_WEIGHT)


def extract(
    events: Iterable[MarkupEvent],
) -> Tuple[List[MetaCandidate], List[ImageReference]]:
    """Collect metadata candidates and image references in document order.

    Errors raised by the event source propagate unchanged.
    """
    candidates: List[MetaCandidate] = []
    image_refs: List[ImageReference] = []
    awaiting_title = False

    for event in events:
        if awaiting_title:
            awaiting_title = False
            if event.type is EventType.TEXT:
                candidates.append(parse_title(event))
                continue

        if event.type is EventType.TEXT:
            continue

        kind = TagKind.from_name(event.name)
        if kind is TagKind.META:
            candidate = parse_meta(event)
            if candidate is None:
                continue
            candidates.append(candidate)
            if candidate.identifier == CANONICAL_IMAGE_PROPERTY:
                image_refs.append(
                    ImageReference(source_url=candidate.value, alt_text="", preferred=True)
                )
        elif kind is TagKind.IMG:
            ref = parse_img(event)
            if ref is not None:
                image_refs.append(ref)
        elif kind is TagKind.TITLE:
            awaiting_title = True

    return candidates, image_refs
