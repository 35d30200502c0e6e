"""Event name and identity capabilities.

Plain ``bytes`` (and ``str``) work out of the box, but any type may stand
in for an event name or an identity by implementing a single rendering
method::

    @dataclass(frozen=True)
    class UserId:
        value: int

        def to_identity(self) -> bytes:
            return b"user-%d" % self.value

Rendering must be pure and total: no I/O, no exceptions, same output for
the same input. The rendering method wins over the built-in handling, so a
``str`` subclass with ``to_identity`` renders through that method.
"""

from typing import Protocol, Union, runtime_checkable

from kissmetrics.core.text import SimpleText


@runtime_checkable
class EventName(Protocol):
    """A type that can be used as the name of a recorded event."""

    def to_event_name(self) -> SimpleText:
        """Render the event name."""
        ...


@runtime_checkable
class Identity(Protocol):
    """A type that identifies the person a call is about."""

    def to_identity(self) -> SimpleText:
        """Render the identity."""
        ...


EventNameLike = Union[bytes, str, EventName]
IdentityLike = Union[bytes, str, Identity]


def is_event_name(value: object) -> bool:
    """Return True if ``value`` can be rendered as an event name."""
    return isinstance(value, (bytes, str, EventName))


def is_identity(value: object) -> bool:
    """Return True if ``value`` can be rendered as an identity."""
    return isinstance(value, (bytes, str, Identity))


def render_event_name(value: EventNameLike) -> SimpleText:
    """Render an event name to ``SimpleText``. Bytes are returned as-is."""
    if isinstance(value, EventName):
        return value.to_event_name()
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"Cannot render {type(value).__name__} as an event name")


def render_identity(value: IdentityLike) -> SimpleText:
    """Render an identity to ``SimpleText``. Bytes are returned as-is."""
    if isinstance(value, Identity):
        return value.to_identity()
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"Cannot render {type(value).__name__} as an identity")
