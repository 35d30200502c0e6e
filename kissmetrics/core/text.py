"""Text rules shared by every call.

KISSmetrics names and identities (``SimpleText``) are limited to at most
255 bytes, and the server changes all commas (``,``) and colons (``:``)
into spaces. Nothing is checked by this library: a value breaking those
rules is silently mangled server-side instead of failing locally.

Property values are free text limited to 8 KiB, also unchecked.
"""

from typing import Tuple, Union

SimpleText = bytes
"""Names and identities, sent as raw bytes."""

APIKey = Union[bytes, str]
"""Your KISSmetrics API key. Sent verbatim as the ``_k`` argument."""

Property = Tuple[Union[SimpleText, str], str]
"""A ``(name, value)`` pair. The name follows the ``SimpleText`` rules."""

# Query argument keys the API uses for its own fields.
API_KEY_ARG = b"_k"
EVENT_NAME_ARG = b"_n"
IDENTITY_ARG = b"_p"
MANUAL_TIMESTAMP_ARG = b"_d"
TIMESTAMP_ARG = b"_t"

RESERVED_KEYS = frozenset(
    {API_KEY_ARG, EVENT_NAME_ARG, IDENTITY_ARG, MANUAL_TIMESTAMP_ARG, TIMESTAMP_ARG}
)


def normalize_note(value: SimpleText) -> SimpleText:
    """Return ``value`` untouched.

    The server does the normalization (commas and colons become spaces,
    long values are cut). This function exists so that callers have a
    single place documenting that the client does not.
    """
    return value


def to_simple_text(value: Union[bytes, str]) -> SimpleText:
    """Return ``value`` as bytes, UTF-8 encoding text."""
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"Expected bytes or str, got {type(value).__name__}")


def encode_value(text: str) -> bytes:
    """UTF-8 encode a property value.

    No escaping happens here; percent-encoding is applied when the query
    string is rendered.
    """
    return text.encode("utf-8")
