"""Exceptions raised while parsing a page."""

from __future__ import annotations


class ReconError(Exception):
    """Base class for every error raised by recon."""


class InputError(ReconError, ValueError):
    """Raised for bad caller input before any network activity happens."""


class FetchError(ReconError):
    """Raised when a page or image cannot be retrieved."""


class MarkupError(ReconError):
    """Raised when the page markup cannot be tokenized."""
