"""
HubSpot endpoint methods: transactional email, contact upsert, list membership,
workflow enrollment. Bearer token or hapikey auth, one HTTP call per method,
no retries.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError

from hubspot_client.core.config import HubSpotConfig, get_settings
from hubspot_client.core.errors import HubSpotSerializationError
from hubspot_client.schemas import (
    ContactBody,
    ListBody,
    Message,
    Property,
    SendEmailRequest,
)
from hubspot_client.services.transport import HubSpotRequest, HubSpotResponse, execute

logger = logging.getLogger(__name__)

LIST_ADD = "add"
LIST_REMOVE = "remove"


class HubSpotService:
    """
    Thin client over a fixed set of HubSpot v1/v2 endpoints.
    Holds only the immutable HubSpotConfig, so one instance can be shared across threads.
    """

    def __init__(self, config: HubSpotConfig) -> None:
        self._config = config

    @property
    def config(self) -> HubSpotConfig:
        return self._config

    def _url(self, path: str) -> str:
        return f"{self._config.base_url}/{path.lstrip('/')}"

    def _build_request(
        self,
        method: str,
        path: str,
        ok_status_code: int,
        body: bytes | None = None,
    ) -> HubSpotRequest:
        """Fill in URL and auth for one call."""
        return HubSpotRequest(
            url=self._url(path),
            method=method,
            ok_status_code=ok_status_code,
            body=body,
            headers=self._config.auth_headers(),
            params=self._config.auth_params(),
        )

    def _request(
        self,
        method: str,
        path: str,
        ok_status_code: int,
        body: bytes | None = None,
    ) -> HubSpotResponse:
        request = self._build_request(method, path, ok_status_code, body=body)
        return execute(request, timeout=self._config.timeout)

    # -------------------------------------------------------------------------
    # Transactional email
    # -------------------------------------------------------------------------

    def single_email(self, email_id: int, email_to: str) -> None:
        """Send template email_id to one recipient with no personalization."""
        try:
            req = SendEmailRequest(email_id=email_id, message=Message(to=email_to))
        except ValidationError as e:
            raise HubSpotSerializationError(f"invalid request: {e!s}") from e
        self.email(req)

    def email(self, send_email_request: SendEmailRequest | Mapping[str, Any]) -> None:
        """
        Send a single templated email, optionally with contact/custom merge fields.
        Expects 200; the send result is not returned.
        example: https://api.hubapi.com/email/public/v1/singleEmail/send
        """
        if not isinstance(send_email_request, SendEmailRequest):
            try:
                send_email_request = SendEmailRequest.model_validate(send_email_request)
            except ValidationError as e:
                raise HubSpotSerializationError(f"invalid request: {e!s}") from e
        body = send_email_request.to_json()
        self._request("POST", "/email/public/v1/singleEmail/send", 200, body=body)
        logger.debug("HubSpot email %s sent", send_email_request.email_id)

    # -------------------------------------------------------------------------
    # Contacts
    # -------------------------------------------------------------------------

    def create_or_update_contact(
        self,
        email_address: str,
        properties: Iterable[Property | Mapping[str, Any]],
    ) -> HubSpotResponse:
        """
        Upsert a contact keyed by email. Returns the envelope so callers can read
        the contact vid / isNew flag.
        example: https://api.hubapi.com/contacts/v1/contact/createOrUpdate/email/testingapis@hubspot.com
        """
        try:
            req = ContactBody(properties=list(properties))
        except ValidationError as e:
            raise HubSpotSerializationError(f"invalid request: {e!s}") from e
        path = f"/contacts/v1/contact/createOrUpdate/email/{_path_email(email_address)}"
        return self._request("POST", path, 200, body=req.to_json())

    # -------------------------------------------------------------------------
    # Lists
    # -------------------------------------------------------------------------

    def add_contacts_to_list(self, emails: Iterable[str], list_id: int) -> HubSpotResponse:
        """example: https://api.hubapi.com/contacts/v1/lists/226468/add"""
        return self._update_list_with_contacts(list_id, emails, LIST_ADD)

    def remove_contacts_from_list(self, emails: Iterable[str], list_id: int) -> HubSpotResponse:
        """example: https://api.hubapi.com/contacts/v1/lists/226468/remove"""
        return self._update_list_with_contacts(list_id, emails, LIST_REMOVE)

    def _update_list_with_contacts(
        self,
        list_id: int,
        emails: Iterable[str],
        action: str,
    ) -> HubSpotResponse:
        try:
            req = ListBody(emails=list(emails))
        except ValidationError as e:
            raise HubSpotSerializationError(f"invalid request: {e!s}") from e
        return self._request("POST", f"/contacts/v1/lists/{list_id}/{action}", 200, body=req.to_json())

    # -------------------------------------------------------------------------
    # Workflows
    # -------------------------------------------------------------------------

    def add_contact_to_workflow(self, email: str, workflow_id: int) -> None:
        """
        Enroll a contact. Expects 204; an unknown contact or workflow raises
        HubSpotAPIError with "404 Not Found" in the message.
        example: https://api.hubapi.com/automation/v2/workflows/10900/enrollments/contacts/testingapis@hubspot.com
        """
        self._update_workflow_for_contact(email, workflow_id, "POST")

    def remove_contact_from_workflow(self, email: str, workflow_id: int) -> None:
        """Un-enroll a contact (DELETE on the enrollment URL). Expects 204."""
        self._update_workflow_for_contact(email, workflow_id, "DELETE")

    def _update_workflow_for_contact(self, email: str, workflow_id: int, method: str) -> None:
        path = f"/automation/v2/workflows/{workflow_id}/enrollments/contacts/{_path_email(email)}"
        self._request(method, path, 204)


def _path_email(email: str) -> str:
    # '@' stays literal to match HubSpot's documented URLs.
    return quote(email, safe="@")


def get_hubspot_service(
    access_token: str | None = None,
    api_key: str | None = None,
    base_url: str | None = None,
    timeout: float | None = None,
) -> HubSpotService:
    """Return a HubSpotService; base URL and timeout default from Settings."""
    settings = get_settings()
    config = HubSpotConfig(
        base_url=base_url or settings.hubspot_base_url,
        access_token=access_token,
        api_key=api_key,
        timeout=timeout if timeout is not None else settings.hubspot_timeout,
    )
    return HubSpotService(config)
