"""Shared exceptions module."""

from typing import Optional


class KissmetricsException(Exception):
    """Base exception for the KISSmetrics client."""

    pass


class KissmetricsTransportError(KissmetricsException):
    """Exception raised when a call could not be delivered to KISSmetrics.

    Covers DNS failures, refused connections, TLS errors, timeouts and
    connections dropped mid-transfer. The underlying ``httpx`` error is
    chained as ``__cause__``.

    KISSmetrics answers every request with ``200 OK`` and a 1x1 GIF, so the
    absence of this error only means the request went out, not that the
    event was recorded.
    """

    def __init__(self, path: str, message: Optional[str] = "Failed to reach KISSmetrics"):
        """Create a new KissmetricsTransportError instance.

        Args:
        ----
            path (str): The API path of the failed call (``/e``, ``/s`` or ``/a``).
            message (str, optional): The error message. Has default message.

        """
        self.path = path
        self.message = message
        super().__init__(f"{message} ({path})")


class ReservedPropertyError(KissmetricsException, ValueError):
    """Exception raised when a property name collides with a reserved query key."""

    def __init__(self, name: str):
        """Create a new ReservedPropertyError instance.

        Args:
        ----
            name (str): The offending property name.

        """
        self.name = name
        self.message = f"Property name '{name}' is reserved by the KISSmetrics API"
        super().__init__(self.message)
