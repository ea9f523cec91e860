import io
import threading
from typing import Dict, List, Optional, Union

import pytest
from PIL import Image
from requests.structures import CaseInsensitiveDict


def make_image(image_format: str, size=(191, 100)) -> bytes:
    """Return encoded image bytes of the given Pillow format and size."""
    mode = "P" if image_format == "GIF" else "RGB"
    buf = io.BytesIO()
    Image.new(mode, size).save(buf, format=image_format)
    return buf.getvalue()


class FakeResponse:
    def __init__(
        self,
        content: bytes = b"",
        status_code: int = 200,
        content_type: str = "text/html",
        url: str = "",
        reason: str = "OK",
    ):
        self.content = content
        self.status_code = status_code
        self.reason = reason
        self.url = url
        self.headers = CaseInsensitiveDict()
        if content_type:
            self.headers["Content-Type"] = content_type
        self.closed = False

    def close(self):
        self.closed = True


class FakeSession:
    """Stand-in for ``requests.Session`` serving canned responses by URL.

    A route may be a response, an exception to raise, or a ``threading.Event``
    that the request blocks on before answering 404.
    """

    def __init__(self, routes: Optional[Dict[str, Union[FakeResponse, Exception, threading.Event]]] = None):
        self.routes = dict(routes or {})
        self.calls: List[str] = []
        self.sent_headers: List[Dict[str, str]] = []
        self.headers: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, url, headers=None, timeout=None, allow_redirects=True):
        with self._lock:
            self.calls.append(url)
            self.sent_headers.append(dict(headers or {}))
        route = self.routes.get(url)
        if route is None:
            return FakeResponse(status_code=404, reason="Not Found", url=url)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, threading.Event):
            route.wait(5)
            return FakeResponse(status_code=404, reason="Not Found", url=url)
        if not route.url:
            route.url = url
        return route


@pytest.fixture
def release():
    """An event that blocks slow routes until the test finishes."""
    event = threading.Event()
    yield event
    event.set()


@pytest.fixture
def png_bytes():
    return make_image("PNG", (191, 100))


@pytest.fixture
def jpeg_bytes():
    return make_image("JPEG", (100, 100))


@pytest.fixture
def gif_bytes():
    return make_image("GIF", (50, 100))
