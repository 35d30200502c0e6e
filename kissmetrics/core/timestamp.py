"""Timestamps used by KISSmetrics to ignore duplicated events.

``Automatic`` lets the server stamp the call when it arrives. That is fine
for realtime calls, but resending an ``Automatic`` call that appeared to
fail may record the event twice. ``Manual`` carries the instant with the
call, so the server can drop duplicates and resending is safe.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Tuple, Union

from kissmetrics.core.text import MANUAL_TIMESTAMP_ARG, TIMESTAMP_ARG

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

QueryArgs = List[Tuple[bytes, bytes]]


@dataclass(frozen=True)
class Automatic:
    """Use the KISSmetrics server time as the timestamp."""

    def query_args(self) -> QueryArgs:
        """No arguments: the server fills in the time."""
        return []


@dataclass(frozen=True)
class Manual:
    """Use ``instant`` as the timestamp.

    A naive ``instant`` is taken to be UTC. See also ``generate_timestamp``.
    """

    instant: datetime

    def __post_init__(self) -> None:
        """Require a full datetime; a bare date has no time of day."""
        if not isinstance(self.instant, datetime):
            raise TypeError(
                f"Manual.instant must be a datetime, got {type(self.instant).__name__}"
            )

    @property
    def epoch_seconds(self) -> int:
        """Whole seconds since the Unix epoch, rounded down."""
        instant = self.instant
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        return (instant - EPOCH) // timedelta(seconds=1)

    def query_args(self) -> QueryArgs:
        """``_d=1`` flags the call as manually stamped, ``_t`` carries the time."""
        return [
            (MANUAL_TIMESTAMP_ARG, b"1"),
            (TIMESTAMP_ARG, str(self.epoch_seconds).encode("ascii")),
        ]


Timestamp = Union[Automatic, Manual]

AUTOMATIC = Automatic()


def generate_timestamp() -> Manual:
    """Generate a ``Manual`` timestamp with the current time."""
    return Manual(datetime.now(timezone.utc))
