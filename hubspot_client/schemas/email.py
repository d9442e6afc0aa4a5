"""
Transactional email (single send) payloads.
"""

from pydantic import Field, field_validator

from hubspot_client.schemas.common import HubSpotPayload, empty_to_none


class MergeField(HubSpotPayload):
    """Name/value pair substituted into the email template at send time."""
    name: str
    value: str


class Message(HubSpotPayload):
    """Recipient and envelope. Only `to` is required."""
    to: str = Field(..., min_length=1, description="Recipient address")
    from_: str | None = Field(default=None, alias="from")
    send_id: str | None = Field(default=None, alias="sendId")
    reply_to: str | None = Field(default=None, alias="replyTo")
    reply_to_list: list[str] | None = Field(default=None, alias="replyToList")
    cc: list[str] | None = None
    bcc: list[str] | None = None

    @field_validator("from_", "send_id", "reply_to", "reply_to_list", "cc", "bcc", mode="before")
    @classmethod
    def omit_empty(cls, v: object) -> object:
        return empty_to_none(v)


class SendEmailRequest(HubSpotPayload):
    """Body for POST /email/public/v1/singleEmail/send."""
    email_id: int = Field(..., alias="emailId")
    message: Message
    contact_properties: list[MergeField] | None = Field(default=None, alias="contactProperties")
    custom_properties: list[MergeField] | None = Field(default=None, alias="customProperties")

    @field_validator("contact_properties", "custom_properties", mode="before")
    @classmethod
    def omit_empty(cls, v: object) -> object:
        return empty_to_none(v)
