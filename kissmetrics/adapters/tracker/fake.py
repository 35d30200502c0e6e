"""Fake KISSmetrics tracker for testing."""

from typing import Optional

from kissmetrics.core.calls import Alias, CallType, Record, SetProps, as_properties
from kissmetrics.core.naming import EventNameLike, IdentityLike, render_event_name
from kissmetrics.core.protocols.tracker import PropertiesLike
from kissmetrics.core.timestamp import AUTOMATIC, Timestamp


class FakeKissmetricsTracker:
    """In-memory test double for TrackerProtocol.

    Records every call value for assertions instead of sending it.

    Usage:
        tracker = FakeKissmetricsTracker()
        signup(user, tracker=tracker)
        assert tracker.has("Signed Up")
    """

    def __init__(self) -> None:
        """Initialize with empty call list."""
        self.calls: list[CallType] = []

    def send(self, call_type: CallType) -> None:
        """Record an already built call."""
        self.calls.append(call_type)

    def record(
        self,
        event_name: EventNameLike,
        identity: IdentityLike,
        properties: Optional[PropertiesLike] = None,
        timestamp: Optional[Timestamp] = None,
    ) -> None:
        """Record the event for later assertions."""
        self.send(
            Record(
                event_name=event_name,
                identity=identity,
                timestamp=timestamp or AUTOMATIC,
                properties=as_properties(properties),
            )
        )

    def set_properties(
        self,
        identity: IdentityLike,
        properties: PropertiesLike,
        timestamp: Optional[Timestamp] = None,
    ) -> None:
        """Record the property update for later assertions."""
        self.send(
            SetProps(
                identity=identity,
                timestamp=timestamp or AUTOMATIC,
                properties=as_properties(properties),
            )
        )

    def alias(self, identity: IdentityLike, identity2: IdentityLike) -> None:
        """Record the alias for later assertions."""
        self.send(Alias(identity=identity, identity2=identity2))

    # Test helpers

    def has(self, event_name: EventNameLike) -> bool:
        """Return True if an event with the given name was recorded."""
        return bool(self.get_all(event_name))

    def get(self, event_name: EventNameLike) -> Record:
        """Return the first recorded event matching name, or raise AssertionError."""
        matches = self.get_all(event_name)
        if matches:
            return matches[0]
        raise AssertionError(
            f"No KISSmetrics event {event_name!r} recorded. "
            f"Recorded: {[r.event_name for r in self.records]}"
        )

    def get_all(self, event_name: EventNameLike) -> list[Record]:
        """Return all recorded events matching name."""
        wanted = render_event_name(event_name)
        return [r for r in self.records if render_event_name(r.event_name) == wanted]

    @property
    def records(self) -> list[Record]:
        """All ``Record`` calls, in order."""
        return [c for c in self.calls if isinstance(c, Record)]

    @property
    def aliases(self) -> list[Alias]:
        """All ``Alias`` calls, in order."""
        return [c for c in self.calls if isinstance(c, Alias)]

    @property
    def property_updates(self) -> list[SetProps]:
        """All ``SetProps`` calls, in order."""
        return [c for c in self.calls if isinstance(c, SetProps)]

    def clear(self) -> None:
        """Reset recorded calls."""
        self.calls.clear()
