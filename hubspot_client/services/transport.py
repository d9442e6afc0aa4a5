"""
Request/response transport: turns a declarative HubSpotRequest into one HTTP
call and normalizes the outcome into a HubSpotResponse or an exception.
"""

import json
import logging
from collections.abc import Iterable
from typing import Any

import requests
from pydantic import BaseModel, ConfigDict, Field

from hubspot_client.core.errors import HubSpotAPIError, HubSpotTransportError

logger = logging.getLogger(__name__)


class HubSpotRequest(BaseModel):
    """What HTTP call to make. Built fresh for every operation."""

    model_config = ConfigDict(frozen=True)

    url: str
    method: str
    ok_status_code: int
    body: bytes | None = None
    headers: dict[str, str] = Field(default_factory=dict, repr=False)
    params: dict[str, str] = Field(default_factory=dict, repr=False)


class HubSpotResponse:
    """Raw body and status of a call that returned the expected status."""

    def __init__(self, body: bytes, status_code: int) -> None:
        self.body = body
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"HubSpotResponse(status_code={self.status_code}, body={self.body!r})"

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body as JSON (raises ValueError on an empty or non-JSON body)."""
        return json.loads(self.body)


def _redact(text: str, secrets: Iterable[str]) -> str:
    # requests embeds the full URL, query string included, in its exception text.
    for secret in secrets:
        if secret:
            text = text.replace(secret, "***")
    return text


def execute(request: HubSpotRequest, timeout: float | None = None) -> HubSpotResponse:
    """
    Issue the request and compare the status with request.ok_status_code.
    Raises HubSpotTransportError on network failure, HubSpotAPIError on a status mismatch.
    """
    headers = {"Content-Type": "application/json"}
    headers.update(request.headers)

    logger.debug("HubSpot %s %s", request.method, request.url)
    try:
        resp = requests.request(
            method=request.method,
            url=request.url,
            headers=headers,
            params=request.params or None,
            data=request.body,
            timeout=timeout,
        )
    except requests.RequestException as e:
        reason = _redact(str(e), request.params.values())
        logger.warning("HubSpot %s %s failed: %s", request.method, request.url, reason)
        raise HubSpotTransportError(f"HubSpot request failed: {reason}") from e

    try:
        body = resp.content
        if resp.status_code != request.ok_status_code:
            logger.warning(
                "HubSpot %s %s -> %s %s (expected %d)",
                request.method,
                request.url,
                resp.status_code,
                resp.reason,
                request.ok_status_code,
            )
            raise HubSpotAPIError(resp.status_code, resp.reason or "", body)
    finally:
        resp.close()

    logger.debug("HubSpot %s %s -> %s", request.method, request.url, resp.status_code)
    return HubSpotResponse(body=body, status_code=resp.status_code)
