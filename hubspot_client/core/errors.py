"""
Errors raised by the HubSpot client.
"""

from typing import Any


class HubSpotServiceError(Exception):
    """Raised when a HubSpot API call fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        detail: Any = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class HubSpotSerializationError(HubSpotServiceError):
    """Request payload could not be encoded to JSON."""


class HubSpotTransportError(HubSpotServiceError):
    """Network-level failure before a response was received (DNS, refused, timeout)."""


class HubSpotAPIError(HubSpotServiceError):
    """
    HubSpot answered with a status other than the one the endpoint expects.
    The message embeds the status line and the raw response body.
    """

    def __init__(
        self,
        status_code: int,
        reason: str,
        body: bytes,
    ) -> None:
        self.reason = reason
        self.body = body
        text = body.decode("utf-8", errors="replace")
        super().__init__(
            f"Error: {status_code} {reason} details: {text}",
            status_code=status_code,
            detail=text,
        )
