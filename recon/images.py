"""Concurrent image fetching, measuring and ranking."""

from __future__ import annotations

import base64
import io
import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple
from urllib.parse import urljoin, urlsplit

import requests
from PIL import Image

from .client import fetch
from .config import OPTIMAL_ASPECT_RATIO, ParserConfig
from .errors import FetchError
from .models import ImageDescriptor, ImageReference

logger = logging.getLogger("recon")

# Declared content type -> Pillow format name.
DECODER_FORMATS = {
    "image/jpeg": "JPEG",
    "image/gif": "GIF",
    "image/png": "PNG",
}


@dataclass
class FetchedImage:
    """Raw image bytes waiting to be measured."""

    url: str
    content_type: str
    data: bytes
    alt_text: str
    preferred: bool


def decode_data_url(url: str, ref: ImageReference) -> FetchedImage:
    """Decode an inline ``data:`` image; raises ``ValueError`` when malformed."""
    header, sep, body = url.partition(";")
    if not sep:
        raise ValueError("malformed data url")
    payload = body.replace("base64,", "", 1)
    data = base64.b64decode(payload, validate=True)
    content_type = header.split(":", 1)[1] if ":" in header else ""
    return FetchedImage(
        url=url,
        content_type=content_type,
        data=data,
        alt_text=ref.alt_text,
        preferred=ref.preferred,
    )


def measure(content_type: str, data: bytes) -> Tuple[int, int]:
    """Return pixel ``(width, height)`` using the decoder for ``content_type``.

    Unrecognized content types measure as ``(0, 0)``. Bytes that the chosen
    decoder rejects raise ``OSError``.
    """
    media_type = content_type.split(";")[0].strip().lower()
    image_format = DECODER_FORMATS.get(media_type)
    if image_format is None:
        return 0, 0
    with Image.open(io.BytesIO(data), formats=[image_format]) as img:
        return img.size


def describe(fetched: FetchedImage) -> ImageDescriptor:
    width, height = measure(fetched.content_type, fetched.data)
    aspect_ratio = width / height if height > 0 else 0.0
    return ImageDescriptor(
        url=fetched.url,
        content_type=fetched.content_type,
        width=width,
        height=height,
        alt_text=fetched.alt_text,
        aspect_ratio=aspect_ratio,
        preferred=fetched.preferred,
    )


def rank_images(
    images: Iterable[ImageDescriptor],
    optimal_aspect_ratio: float = OPTIMAL_ASPECT_RATIO,
) -> List[ImageDescriptor]:
    """Order preferred images first, then by closeness to the optimal ratio.

    Unmeasured images have a ratio of 0 and so sink to the end of their tier.
    """
    return sorted(
        images,
        key=lambda image: (
            not image.preferred,
            abs(image.aspect_ratio - optimal_aspect_ratio),
        ),
    )


class ImagePipeline:
    """Fetches and measures a page's images in parallel under one deadline."""

    def __init__(self, session: requests.Session, config: ParserConfig) -> None:
        self.session = session
        self.config = config

    def _download(self, url: str, ref: ImageReference) -> FetchedImage:
        resp = fetch(self.session, url, self.config, what="image")
        try:
            return FetchedImage(
                url=url,
                content_type=resp.headers.get("Content-Type", ""),
                data=resp.content,
                alt_text=ref.alt_text,
                preferred=ref.preferred,
            )
        finally:
            resp.close()

    def analyze(self, base_url: str, ref: ImageReference) -> Optional[ImageDescriptor]:
        """Resolve, fetch and measure one reference; ``None`` means dropped."""
        try:
            url = urljoin(base_url, ref.source_url)
            if urlsplit(url).scheme == "data":
                fetched = decode_data_url(url, ref)
            else:
                fetched = self._download(url, ref)
            return describe(fetched)
        except FetchError as exc:
            logger.debug("Dropping image: %s", exc)
        except (ValueError, OSError, Image.DecompressionBombError) as exc:
            logger.debug("Dropping image %s: %s", ref.source_url[:200], exc)
        return None

    def resolve_images(
        self,
        base_url: str,
        refs: Sequence[ImageReference],
    ) -> List[ImageDescriptor]:
        """Return ranked descriptors for whatever finishes before the deadline.

        Workers still running when the deadline passes are abandoned; their
        results are never read.
        """
        if not refs:
            return []

        timeout = max(self.config.image_lookup_timeout, 0.0)
        executor = ThreadPoolExecutor(
            max_workers=len(refs), thread_name_prefix="recon-image"
        )
        try:
            futures = [executor.submit(self.analyze, base_url, ref) for ref in refs]
            done, pending = wait(futures, timeout=timeout)
        finally:
            executor.shutdown(wait=False)

        if pending:
            logger.debug(
                "Image lookup deadline of %.2fs passed with %d of %d images outstanding",
                timeout,
                len(pending),
                len(futures),
            )

        collected = []
        for future in futures:
            if future not in done:
                continue
            descriptor = future.result()
            if descriptor is not None:
                collected.append(descriptor)
        return rank_images(collected, self.config.optimal_aspect_ratio)
