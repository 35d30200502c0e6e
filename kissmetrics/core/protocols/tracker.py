"""Protocol for KISSmetrics tracking adapters."""

from typing import Mapping, Optional, Protocol, Sequence, Union, runtime_checkable

from kissmetrics.core.naming import EventNameLike, IdentityLike
from kissmetrics.core.text import Property
from kissmetrics.core.timestamp import Timestamp

PropertiesLike = Union[Mapping[Union[bytes, str], str], Sequence[Property]]


@runtime_checkable
class TrackerProtocol(Protocol):
    """Fire-and-forget tracking.

    Adapter boundary between application code and the KISSmetrics API.
    Application code depends on this protocol; tests swap in
    ``FakeKissmetricsTracker``.
    """

    def record(
        self,
        event_name: EventNameLike,
        identity: IdentityLike,
        properties: Optional[PropertiesLike] = None,
        timestamp: Optional[Timestamp] = None,
    ) -> None:
        """Record an event done by ``identity``.

        Args:
            event_name: Name of the event being recorded.
            identity: Person doing the event.
            properties: Optional extra properties, as a mapping or pairs.
            timestamp: Explicit timestamp. When omitted the implementation
                picks one (see ``KissmetricsSettings.MANUAL_TIMESTAMPS``).
        """
        ...

    def set_properties(
        self,
        identity: IdentityLike,
        properties: PropertiesLike,
        timestamp: Optional[Timestamp] = None,
    ) -> None:
        """Set properties on ``identity`` without recording an event."""
        ...

    def alias(self, identity: IdentityLike, identity2: IdentityLike) -> None:
        """Tell KISSmetrics that both identities are the same person."""
        ...
