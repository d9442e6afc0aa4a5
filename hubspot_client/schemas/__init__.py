# Pydantic payload schemas for the wrapped HubSpot endpoints.

from hubspot_client.schemas.common import HubSpotPayload
from hubspot_client.schemas.contact import (
    ContactBody,
    ContactUpsertResult,
    ListBody,
    ListUpdateResult,
    Property,
)
from hubspot_client.schemas.email import MergeField, Message, SendEmailRequest

__all__ = [
    "HubSpotPayload",
    "ContactBody",
    "ContactUpsertResult",
    "ListBody",
    "ListUpdateResult",
    "Property",
    "MergeField",
    "Message",
    "SendEmailRequest",
]
