"""Configuration objects and constants for the parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

DEFAULT_USER_AGENT = (
    "recon (similar to Facebot, facebookexternalhit/1.1)"
)

# Seconds spent downloading and measuring images before giving up on the rest.
DEFAULT_IMAGE_LOOKUP_TIMEOUT = 10.0
DEFAULT_REQUEST_TIMEOUT = 30.0

# Width / height of a standard social card image.
OPTIMAL_ASPECT_RATIO = 1.91


@dataclass
class ParserConfig:
    """Settings that control fetching, tokenizing and image lookup."""

    image_lookup_timeout: float = DEFAULT_IMAGE_LOOKUP_TIMEOUT
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    token_max_buffer: int = 0
    headers: Dict[str, str] = field(default_factory=dict)
    user_agent: str = DEFAULT_USER_AGENT
    optimal_aspect_ratio: float = OPTIMAL_ASPECT_RATIO
