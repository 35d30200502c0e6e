"""Send calls to the KISSmetrics tracking endpoint.

KISSmetrics never reports errors: every request is answered with
``200 OK`` and an invisible 1x1 GIF, whether the event was recorded or
not. ``call`` therefore only reports transport failures (e.g. a problem
with your server's Internet connection). The body is still read in full
so that the connection goes back to the client's pool and is reused via
keep-alive.

There is no automatic retry. Resending a call is only safe when it carries
a ``Manual`` timestamp; wrap ``call`` in your own retry policy if needed.
"""

import logging
from typing import List, Tuple
from urllib.parse import quote

import httpx

from kissmetrics.core.calls import CallType
from kissmetrics.core.exceptions import KissmetricsTransportError
from kissmetrics.core.query import call_info
from kissmetrics.core.text import API_KEY_ARG, APIKey, to_simple_text

logger = logging.getLogger(__name__)

TRACKING_SCHEME = "https"
TRACKING_HOST = "trk.kissmetrics.com"
TRACKING_PORT = 443


def render_query(args: List[Tuple[bytes, bytes]]) -> str:
    """Percent-encode ``key=value`` pairs and join them with ``&``.

    Only ``A-Z a-z 0-9 - _ . ~`` are left as-is; a space becomes ``%20``.
    """
    return "&".join(f"{quote(key, safe='')}={quote(value, safe='')}" for key, value in args)


def build_request(api_key: APIKey, call_type: CallType) -> Tuple[str, str]:
    """Return the API path and the full signed URL for ``call_type``."""
    path, args = call_info(call_type)
    query = render_query([(API_KEY_ARG, to_simple_text(api_key)), *args])
    return path, f"{TRACKING_SCHEME}://{TRACKING_HOST}:{TRACKING_PORT}{path}?{query}"


def request_url(api_key: APIKey, call_type: CallType) -> str:
    """Return the full URL ``call_type`` is sent to, API key included."""
    return build_request(api_key, call_type)[1]


def call(client: httpx.Client, api_key: APIKey, call_type: CallType) -> None:
    """Call the KISSmetrics API.

    Performs exactly one ``GET`` over ``client``. Redirects are never
    followed so the API key cannot leak to another host.

    Args:
        client: Reusable HTTP client, configured by the caller (timeouts,
            pool size, TLS trust).
        api_key: Your KISSmetrics API key.
        call_type: Which call you would like to make.

    Raises:
        KissmetricsTransportError: If the request could not be made.
        ReservedPropertyError: If a property name is a reserved key.
    """
    path, url = build_request(api_key, call_type)
    try:
        with client.stream("GET", url, follow_redirects=False) as response:
            response.read()
    except httpx.RequestError as exc:
        raise KissmetricsTransportError(path, f"Failed to reach KISSmetrics: {exc}") from exc
    logger.debug("KISSmetrics call sent to %s", path)


async def acall(client: httpx.AsyncClient, api_key: APIKey, call_type: CallType) -> None:
    """Awaitable version of ``call`` for an ``httpx.AsyncClient``."""
    path, url = build_request(api_key, call_type)
    try:
        async with client.stream("GET", url, follow_redirects=False) as response:
            await response.aread()
    except httpx.RequestError as exc:
        raise KissmetricsTransportError(path, f"Failed to reach KISSmetrics: {exc}") from exc
    logger.debug("KISSmetrics call sent to %s", path)
