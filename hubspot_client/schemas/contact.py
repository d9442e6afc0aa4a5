"""
Contact upsert and static list membership payloads, plus typed views of their
success bodies.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from hubspot_client.schemas.common import HubSpotPayload


class Property(HubSpotPayload):
    """One contact property; value is any JSON value and is always written."""
    property: str
    value: Any


class ContactBody(HubSpotPayload):
    """Body for POST /contacts/v1/contact/createOrUpdate/email/{email}."""
    properties: list[Property]


class ListBody(HubSpotPayload):
    """Body for POST /contacts/v1/lists/{listId}/add and /remove."""
    emails: list[str]


class ContactUpsertResult(BaseModel):
    """Success body of createOrUpdate, e.g. {"vid": 751, "isNew": true}."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    vid: int
    is_new: bool = Field(..., alias="isNew")


class ListUpdateResult(BaseModel):
    """Per-address breakdown returned by list add/remove."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    updated: list[int] = Field(default_factory=list)
    discarded: list[int] = Field(default_factory=list)
    invalid_vids: list[int] = Field(default_factory=list, alias="invalidVids")
    invalid_emails: list[str] = Field(default_factory=list, alias="invalidEmails")
