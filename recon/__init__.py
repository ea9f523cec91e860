"""Scrape a web page for its social card metadata and best images."""

from .config import (
    DEFAULT_IMAGE_LOOKUP_TIMEOUT,
    OPTIMAL_ASPECT_RATIO,
    ParserConfig,
)
from .errors import FetchError, InputError, MarkupError, ReconError
from .models import ImageDescriptor, Result
from .parser import Parser, parse, parse_with_confidence

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_IMAGE_LOOKUP_TIMEOUT",
    "OPTIMAL_ASPECT_RATIO",
    "FetchError",
    "ImageDescriptor",
    "InputError",
    "MarkupError",
    "Parser",
    "ParserConfig",
    "ReconError",
    "Result",
    "parse",
    "parse_with_confidence",
]
