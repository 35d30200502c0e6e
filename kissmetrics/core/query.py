"""Turn a call into the URL path and ordered query arguments it is sent with.

Argument order is stable so the exact request line is reproducible: the
server does not depend on it, tests do.
"""

from typing import Iterable, List, Tuple

from kissmetrics.core.calls import Alias, CallType, Record, SetProps
from kissmetrics.core.exceptions import ReservedPropertyError
from kissmetrics.core.naming import render_event_name, render_identity
from kissmetrics.core.text import (
    EVENT_NAME_ARG,
    IDENTITY_ARG,
    RESERVED_KEYS,
    Property,
    encode_value,
    to_simple_text,
)
from kissmetrics.core.timestamp import QueryArgs

RECORD_PATH = "/e"
SET_PROPS_PATH = "/s"
ALIAS_PATH = "/a"


def property_args(properties: Iterable[Property]) -> QueryArgs:
    """Encode properties as query arguments, keeping their order.

    Raises:
        ReservedPropertyError: If a property name is one of the keys the
            API uses for its own fields (``_k``, ``_n``, ``_p``, ``_d``, ``_t``).
    """
    args: QueryArgs = []
    for name, value in properties:
        key = to_simple_text(name)
        if key in RESERVED_KEYS:
            raise ReservedPropertyError(key.decode("ascii"))
        args.append((key, encode_value(value)))
    return args


def call_info(call_type: CallType) -> Tuple[str, QueryArgs]:
    """Return the URL path and the query arguments for ``call_type``.

    The API key is not included; the dispatcher prepends it.
    """
    if isinstance(call_type, Record):
        args: List[Tuple[bytes, bytes]] = [
            (EVENT_NAME_ARG, render_event_name(call_type.event_name)),
            (IDENTITY_ARG, render_identity(call_type.identity)),
        ]
        args.extend(call_type.timestamp.query_args())
        args.extend(property_args(call_type.properties))
        return RECORD_PATH, args

    if isinstance(call_type, SetProps):
        args = [(IDENTITY_ARG, render_identity(call_type.identity))]
        args.extend(call_type.timestamp.query_args())
        args.extend(property_args(call_type.properties))
        return SET_PROPS_PATH, args

    if isinstance(call_type, Alias):
        return ALIAS_PATH, [
            (IDENTITY_ARG, render_identity(call_type.identity)),
            (EVENT_NAME_ARG, render_identity(call_type.identity2)),
        ]

    raise TypeError(f"Unknown KISSmetrics call type: {type(call_type).__name__}")
