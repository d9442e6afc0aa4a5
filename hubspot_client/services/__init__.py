# Services: transport and HubSpot endpoint methods

from hubspot_client.services.hubspot_service import (
    HubSpotService,
    get_hubspot_service,
)
from hubspot_client.services.transport import (
    HubSpotRequest,
    HubSpotResponse,
    execute,
)

__all__ = [
    "HubSpotService",
    "get_hubspot_service",
    "HubSpotRequest",
    "HubSpotResponse",
    "execute",
]
