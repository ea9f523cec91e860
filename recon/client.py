"""HTTP session construction and fetch helpers."""

from __future__ import annotations

import logging
from typing import Dict

import requests

from .config import ParserConfig
from .errors import FetchError

logger = logging.getLogger("recon")


def request_headers(config: ParserConfig) -> Dict[str, str]:
    """Headers sent with every request; extra headers override the User-Agent."""
    return {"User-Agent": config.user_agent, **config.headers}


def build_session(config: ParserConfig) -> requests.Session:
    """Create a session with a cookie jar, our User-Agent and any extra headers."""
    session = requests.Session()
    session.headers.update(request_headers(config))
    return session


def fetch(
    session: requests.Session,
    url: str,
    config: ParserConfig,
    what: str = "page",
) -> requests.Response:
    """GET ``url`` and return the response, raising on transport or status errors.

    Headers from ``config`` are sent on the request itself so they apply to
    caller-supplied sessions too. The caller owns the returned response and
    should close it.
    """
    logger.debug("GET %s", url)
    try:
        resp = session.get(
            url,
            headers=request_headers(config),
            timeout=config.request_timeout,
            allow_redirects=True,
        )
    except requests.RequestException as exc:
        raise FetchError(f"fetching {what} {url}: {exc}") from exc

    if not 200 <= resp.status_code < 300:
        resp.close()
        raise FetchError(
            f"fetching {what} {url}: {resp.status_code} {resp.reason or ''}".rstrip()
        )
    return resp
