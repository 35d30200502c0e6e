"""KISSmetrics tracker adapter."""

import logging
from typing import Optional

import httpx

from kissmetrics.core.calls import Alias, CallType, Record, SetProps, as_properties
from kissmetrics.core.config import KissmetricsSettings
from kissmetrics.core.dispatcher import call
from kissmetrics.core.exceptions import KissmetricsTransportError
from kissmetrics.core.naming import EventNameLike, IdentityLike
from kissmetrics.core.protocols.tracker import PropertiesLike
from kissmetrics.core.timestamp import AUTOMATIC, Timestamp, generate_timestamp

logger = logging.getLogger(__name__)


def create_client(settings: KissmetricsSettings) -> httpx.Client:
    """Build a keep-alive client suitable for ``call``.

    The caller owns the client and should close it on shutdown.
    """
    return httpx.Client(timeout=settings.TIMEOUT, follow_redirects=False)


class KissmetricsTracker:
    """Wraps ``call`` behind TrackerProtocol.

    Builds the call values from plain arguments, stamps them according to
    ``MANUAL_TIMESTAMPS`` and sends them over the shared client. Tracking
    is fire-and-forget: failures are logged, and only re-raised when
    ``RAISE_ERRORS`` is set. Caller mistakes (wrong field types, reserved
    property names) always raise.
    """

    def __init__(self, settings: KissmetricsSettings, client: httpx.Client) -> None:
        """Configure the tracker from settings."""
        self._client = client
        self._api_key = settings.API_KEY
        self._enabled = settings.sends_calls
        self._manual_timestamps = settings.MANUAL_TIMESTAMPS
        self._raise_errors = settings.RAISE_ERRORS

        if self._enabled:
            logger.info(
                "KISSmetrics tracker initialized (env=%s)", settings.ENVIRONMENT.value
            )
        else:
            logger.info("KISSmetrics tracker disabled (env=%s)", settings.ENVIRONMENT.value)

    @property
    def enabled(self) -> bool:
        """Whether calls are sent to KISSmetrics."""
        return self._enabled

    def _timestamp(self, timestamp: Optional[Timestamp]) -> Timestamp:
        if timestamp is not None:
            return timestamp
        return generate_timestamp() if self._manual_timestamps else AUTOMATIC

    def send(self, call_type: CallType) -> None:
        """Send an already built call."""
        if not self._enabled:
            return

        try:
            call(self._client, self._api_key.get_secret_value(), call_type)
        except KissmetricsTransportError as e:
            if self._raise_errors:
                raise
            logger.error(
                "Failed to send KISSmetrics %s call: %s", type(call_type).__name__, e
            )

    def record(
        self,
        event_name: EventNameLike,
        identity: IdentityLike,
        properties: Optional[PropertiesLike] = None,
        timestamp: Optional[Timestamp] = None,
    ) -> None:
        """Record an event done by ``identity``."""
        self.send(
            Record(
                event_name=event_name,
                identity=identity,
                timestamp=self._timestamp(timestamp),
                properties=as_properties(properties),
            )
        )

    def set_properties(
        self,
        identity: IdentityLike,
        properties: PropertiesLike,
        timestamp: Optional[Timestamp] = None,
    ) -> None:
        """Set properties on ``identity`` without recording an event."""
        self.send(
            SetProps(
                identity=identity,
                timestamp=self._timestamp(timestamp),
                properties=as_properties(properties),
            )
        )

    def alias(self, identity: IdentityLike, identity2: IdentityLike) -> None:
        """Alias two identities as the same person."""
        self.send(Alias(identity=identity, identity2=identity2))
