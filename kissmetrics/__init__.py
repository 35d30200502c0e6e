"""Client for the KISSmetrics tracking API.

Usage:
    import httpx
    import kissmetrics

    with httpx.Client() as client:
        kissmetrics.call(
            client,
            api_key,
            kissmetrics.Record(
                event_name="Purchased",
                identity="user-42",
                timestamp=kissmetrics.generate_timestamp(),
                properties=[("item", "Widget")],
            ),
        )
"""

from kissmetrics.adapters.tracker import FakeKissmetricsTracker, KissmetricsTracker, create_client
from kissmetrics.core.calls import Alias, CallType, Record, SetProps
from kissmetrics.core.config import Environment, KissmetricsSettings
from kissmetrics.core.dispatcher import acall, call, request_url
from kissmetrics.core.exceptions import (
    KissmetricsException,
    KissmetricsTransportError,
    ReservedPropertyError,
)
from kissmetrics.core.naming import EventName, Identity
from kissmetrics.core.protocols import TrackerProtocol
from kissmetrics.core.query import call_info
from kissmetrics.core.text import APIKey, Property, SimpleText
from kissmetrics.core.timestamp import AUTOMATIC, Automatic, Manual, Timestamp, generate_timestamp

__all__ = [
    "AUTOMATIC",
    "APIKey",
    "Alias",
    "Automatic",
    "CallType",
    "Environment",
    "EventName",
    "FakeKissmetricsTracker",
    "Identity",
    "KissmetricsException",
    "KissmetricsSettings",
    "KissmetricsTracker",
    "KissmetricsTransportError",
    "Manual",
    "Property",
    "Record",
    "ReservedPropertyError",
    "SetProps",
    "SimpleText",
    "Timestamp",
    "TrackerProtocol",
    "acall",
    "call",
    "call_info",
    "create_client",
    "generate_timestamp",
    "request_url",
]
