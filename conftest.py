"""Root conftest for pytest configuration and shared fixtures.

Loaded before both testpaths (tests/ and kissmetrics/), making its
fixtures available to centralized tests AND colocated adapter tests.
"""

import os

import httpx
import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)

# ---------------------------------------------------------------------------
# Environment variables, set before settings are instantiated.
# Uses setdefault so real env vars are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("KISSMETRICS_ENVIRONMENT", "test")


# Invisible 1x1 GIF, what KISSmetrics answers every call with.
PIXEL = (
    b"GIF89a\x01\x00\x01\x00\x80\x00\x00\x00\x00\x00\xff\xff\xff!\xf9\x04\x01\x00\x00\x00\x00"
    b",\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"
)


class RequestLog:
    """Transport handler that records requests and answers like KISSmetrics."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(200, headers={"Content-Type": "image/gif"}, content=PIXEL)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def request_log() -> RequestLog:
    """Records every request sent through ``mock_client``."""
    return RequestLog()


@pytest.fixture
def mock_client(request_log):
    """httpx.Client whose transport answers every request with the tracking pixel."""
    with httpx.Client(transport=httpx.MockTransport(request_log)) as client:
        yield client


@pytest.fixture
def fake_tracker():
    """Fake tracker that records calls in memory."""
    from kissmetrics.adapters.tracker.fake import FakeKissmetricsTracker

    return FakeKissmetricsTracker()
