"""High-level orchestration: fetch a page, extract metadata and rank images."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import List, Optional, Sequence
from urllib.parse import urlparse

import requests

from .client import build_session, fetch
from .config import ParserConfig
from .errors import InputError
from .extract import extract
from .images import ImagePipeline
from .markup import iter_events
from .models import ImageDescriptor, MetaCandidate, Result
from .resolve import canonical_location, filter_candidates, resolve_all, validate_confidence

logger = logging.getLogger("recon")


def validate_url(url: str) -> None:
    """Reject URLs that could never be fetched, before touching the network."""
    if not url or not url.strip():
        raise InputError("url must not be empty")
    try:
        parsed = urlparse(url)
    except ValueError as exc:
        raise InputError(f"invalid url {url!r}: {exc}") from exc
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InputError(f"invalid url {url!r}: expected an absolute http(s) URL")


def build_result(
    requested_url: str,
    candidates: Sequence[MetaCandidate],
    images: List[ImageDescriptor],
) -> Result:
    """Combine resolved properties and ranked images into a :class:`Result`."""
    fields = resolve_all(candidates)
    url, host = canonical_location(fields["URL"], requested_url)
    return Result(
        url=url,
        host=host,
        site=fields["Site"],
        title=fields["Title"],
        type=fields["Type"],
        description=fields["Description"],
        author=fields["Author"],
        publisher=fields["Publisher"],
        images=images,
        scraped_at=datetime.now(timezone.utc),
    )


class Parser:
    """Reusable page parser.

    A ``session`` may be supplied to control transport, proxies or cookies;
    otherwise one is built from ``config``. Either way the configured
    User-Agent and headers go out with every request, and the same session is
    used for the page and every image on it.
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or ParserConfig()
        self.session = session or build_session(self.config)

    def parse(self, url: str) -> Result:
        return self.parse_with_confidence(url, 0.0)

    def parse_with_confidence(self, url: str, min_confidence: float) -> Result:
        """Parse ``url`` ignoring metadata whose priority is at or below the threshold.

        Raises :class:`InputError` for bad input, :class:`FetchError` when the
        page cannot be retrieved and :class:`MarkupError` when it cannot be
        tokenized. Image failures never raise; such images are left out.
        """
        validate_url(url)
        validate_confidence(min_confidence)

        start = time.perf_counter()
        logger.info("Fetching %s", url)
        resp = fetch(self.session, url, self.config)
        try:
            final_url = resp.url or url
            events = iter_events(resp.content, self.config.token_max_buffer)
            candidates, image_refs = extract(events)
        finally:
            resp.close()

        candidates = filter_candidates(candidates, min_confidence)
        logger.debug(
            "Found %d metadata candidates and %d image references on %s",
            len(candidates),
            len(image_refs),
            final_url,
        )

        pipeline = ImagePipeline(self.session, self.config)
        images = pipeline.resolve_images(final_url, image_refs)
        result = build_result(url, candidates, images)
        logger.info(
            "Parsed %s in %.2fs (%d images)",
            url,
            time.perf_counter() - start,
            len(images),
        )
        return result


def parse(url: str, config: Optional[ParserConfig] = None) -> Result:
    """Parse ``url`` with a fresh :class:`Parser`."""
    return Parser(config).parse(url)


def parse_with_confidence(
    url: str,
    min_confidence: float,
    config: Optional[ParserConfig] = None,
) -> Result:
    return Parser(config).parse_with_confidence(url, min_confidence)
