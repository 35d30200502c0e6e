"""The calls that may be made to KISSmetrics.

The official clients expose one function per call (``record``, ``set``,
``identify``, ``alias``). Here a call is a value instead, and a single
``call`` function sends any of them:

* ``Record`` records an event. ``event_name`` is the name of the event,
  ``identity`` the person doing it and ``properties`` any other optional
  properties.
* ``SetProps`` sets user properties without recording an event.
* ``Alias`` tells KISSmetrics that ``identity`` and ``identity2`` are the
  same person.

Event names and identities are independent type parameters: a ``Record``
may pair a plain ``bytes`` event name with a custom ``UserId`` identity.

See also http://support.kissmetrics.com/apis/specifications.
"""

from dataclasses import dataclass, field
from typing import Generic, Mapping, Sequence, Tuple, TypeVar, Union

from kissmetrics.core.naming import EventNameLike, IdentityLike, is_event_name, is_identity
from kissmetrics.core.text import Property
from kissmetrics.core.timestamp import AUTOMATIC, Automatic, Manual, Timestamp

E = TypeVar("E", bound=EventNameLike)
I = TypeVar("I", bound=IdentityLike)  # noqa: E741
I2 = TypeVar("I2", bound=IdentityLike)


def _check_event_name(call_name: str, field_name: str, value: object) -> None:
    if not is_event_name(value):
        raise TypeError(
            f"{call_name}.{field_name} must be bytes, str or implement EventName, "
            f"got {type(value).__name__}"
        )


def _check_identity(call_name: str, field_name: str, value: object) -> None:
    if not is_identity(value):
        raise TypeError(
            f"{call_name}.{field_name} must be bytes, str or implement Identity, "
            f"got {type(value).__name__}"
        )


def _check_timestamp(call_name: str, value: object) -> None:
    if not isinstance(value, (Automatic, Manual)):
        raise TypeError(
            f"{call_name}.timestamp must be Automatic or Manual, got {type(value).__name__}"
        )


def _freeze_properties(call_name: str, properties: Sequence[Property]) -> Tuple[Property, ...]:
    frozen = tuple(properties)
    for prop in frozen:
        if not isinstance(prop, tuple) or len(prop) != 2:
            raise TypeError(f"{call_name}.properties must hold (name, value) pairs, got {prop!r}")
        name, value = prop
        if not isinstance(name, (bytes, str)):
            raise TypeError(
                f"{call_name} property names must be bytes or str, got {type(name).__name__}"
            )
        if not isinstance(value, str):
            raise TypeError(
                f"{call_name} property {name!r} must have a str value, got {type(value).__name__}"
            )
    return frozen


@dataclass(frozen=True)
class Record(Generic[E, I]):
    """Record an event."""

    event_name: E
    identity: I
    timestamp: Timestamp = AUTOMATIC
    properties: Tuple[Property, ...] = field(default=())

    def __post_init__(self) -> None:
        """Validate field types and freeze the property list."""
        _check_event_name("Record", "event_name", self.event_name)
        _check_identity("Record", "identity", self.identity)
        _check_timestamp("Record", self.timestamp)
        object.__setattr__(self, "properties", _freeze_properties("Record", self.properties))


@dataclass(frozen=True)
class SetProps(Generic[I]):
    """Set user properties without recording an event."""

    identity: I
    timestamp: Timestamp = AUTOMATIC
    properties: Tuple[Property, ...] = field(default=())

    def __post_init__(self) -> None:
        """Validate field types and freeze the property list."""
        _check_identity("SetProps", "identity", self.identity)
        _check_timestamp("SetProps", self.timestamp)
        object.__setattr__(self, "properties", _freeze_properties("SetProps", self.properties))


@dataclass(frozen=True)
class Alias(Generic[I, I2]):
    """Alias two identities as the same one.

    Aliasing merges identities; it carries neither a timestamp nor
    properties.
    """

    identity: I
    identity2: I2

    def __post_init__(self) -> None:
        """Validate field types."""
        _check_identity("Alias", "identity", self.identity)
        _check_identity("Alias", "identity2", self.identity2)


CallType = Union[Record, SetProps, Alias]


def as_properties(
    properties: Union[None, Mapping[Union[bytes, str], str], Sequence[Property]],
) -> Tuple[Property, ...]:
    """Return ``properties`` as a tuple of pairs.

    Accepts ``None``, a mapping (insertion order is kept) or a sequence of
    ``(name, value)`` pairs.
    """
    if properties is None:
        return ()
    if isinstance(properties, Mapping):
        return tuple(properties.items())
    return tuple(properties)
