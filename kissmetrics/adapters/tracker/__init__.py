"""Tracker adapters: httpx-backed and Fake implementations."""

from kissmetrics.adapters.tracker.fake import FakeKissmetricsTracker
from kissmetrics.adapters.tracker.http import KissmetricsTracker, create_client

__all__ = ["FakeKissmetricsTracker", "KissmetricsTracker", "create_client"]
