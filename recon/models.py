"""Data models used throughout the parsing pipeline."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class MetaCandidate:
    """A metadata value found in one tag occurrence on the page."""

    identifier: str
    value: str
    priority: float


@dataclass(frozen=True)
class ImageReference:
    """Raw image reference discovered while walking the markup."""

    source_url: str
    alt_text: str = ""
    preferred: bool = False


@dataclass(frozen=True)
class ImageDescriptor:
    """A fetched and measured image."""

    url: str
    content_type: str
    width: int = 0
    height: int = 0
    alt_text: str = ""
    aspect_ratio: float = 0.0
    preferred: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "url": self.url,
            "type": self.content_type,
            "width": self.width,
            "height": self.height,
            "alt": self.alt_text,
            "aspectRatio": self.aspect_ratio,
        }
        if self.preferred:
            data["preferred"] = True
        return data


@dataclass
class Result:
    """Summary of a parsed page.

    ``url`` and ``host`` come from the page's canonical ``og:url`` when it is
    a valid absolute URL, otherwise from the URL that was requested.
    """

    url: str = ""
    host: str = ""
    site: str = ""
    title: str = ""
    type: str = ""
    description: str = ""
    author: str = ""
    publisher: str = ""
    images: List[ImageDescriptor] = field(default_factory=list)
    scraped_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable mapping with the public key names."""
        return {
            "url": self.url,
            "host": self.host,
            "site_name": self.site,
            "title": self.title,
            "type": self.type,
            "description": self.description,
            "author": self.author,
            "publisher": self.publisher,
            "images": [image.to_dict() for image in self.images],
            "scraped": self.scraped_at.isoformat() if self.scraped_at else None,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
