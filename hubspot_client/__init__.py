"""
Client for HubSpot transactional email, contact upsert, list membership and
workflow enrollment endpoints.
"""

from hubspot_client.core.config import HubSpotConfig, Settings, get_settings
from hubspot_client.core.errors import (
    HubSpotAPIError,
    HubSpotSerializationError,
    HubSpotServiceError,
    HubSpotTransportError,
)
from hubspot_client.core.logging_config import configure_logging
from hubspot_client.schemas import (
    ContactBody,
    ContactUpsertResult,
    ListBody,
    ListUpdateResult,
    MergeField,
    Message,
    Property,
    SendEmailRequest,
)
from hubspot_client.services import (
    HubSpotRequest,
    HubSpotResponse,
    HubSpotService,
    execute,
    get_hubspot_service,
)

__version__ = "0.1.0"

__all__ = [
    "HubSpotConfig",
    "Settings",
    "get_settings",
    "HubSpotAPIError",
    "HubSpotSerializationError",
    "HubSpotServiceError",
    "HubSpotTransportError",
    "configure_logging",
    "ContactBody",
    "ContactUpsertResult",
    "ListBody",
    "ListUpdateResult",
    "MergeField",
    "Message",
    "Property",
    "SendEmailRequest",
    "HubSpotRequest",
    "HubSpotResponse",
    "HubSpotService",
    "execute",
    "get_hubspot_service",
]
