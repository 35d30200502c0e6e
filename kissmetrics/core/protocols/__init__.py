"""Protocols for dependency injection."""

from kissmetrics.core.protocols.tracker import PropertiesLike, TrackerProtocol

__all__ = [
    "PropertiesLike",
    "TrackerProtocol",
]
