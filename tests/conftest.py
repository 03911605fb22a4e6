"""
Test configuration and fixtures for photo_scout tests
"""

import io
import logging
import pytest
from PIL import Image


class FakeResponse:
    """Stand-in for aiohttp.ClientResponse with a canned body"""

    def __init__(self, status=200, body=b""):
        self.status = status
        self._body = body.encode("utf-8") if isinstance(body, str) else body
        self.content_length = len(self._body)

    async def text(self):
        return self._body.decode("utf-8")

    async def read(self):
        return self._body


class FakeRequest:
    def __init__(self, outcome):
        self.outcome = outcome

    async def __aenter__(self):
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Serves routes from a dict and records the order URLs were requested

    Route values may be an HTML string, image bytes, a FakeResponse, or an
    exception instance to raise. Unknown URLs answer 404.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.requests = []

    def get(self, url, headers=None, timeout=None):
        self.requests.append(url)
        outcome = self.routes.get(url)
        if outcome is None:
            outcome = FakeResponse(status=404, body="not found")
        elif isinstance(outcome, (str, bytes)):
            outcome = FakeResponse(body=outcome)
        return FakeRequest(outcome)


def make_image(width, height, fmt="PNG"):
    """Encode a solid-colour image of the given size"""
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color=(200, 120, 40)).save(buffer, format=fmt)
    return buffer.getvalue()


def page(*body_parts):
    return "<html><body>" + "".join(body_parts) + "</body></html>"


@pytest.fixture
def fake_session():
    def _build(routes):
        return FakeSession(routes)
    return _build


@pytest.fixture
def test_logger():
    logger = logging.getLogger("photo_scout.tests")
    logger.setLevel(logging.DEBUG)
    return logger
