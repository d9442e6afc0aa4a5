"""
Common Pydantic base for request payloads sent to HubSpot.
"""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic_core import PydanticSerializationError

from hubspot_client.core.errors import HubSpotSerializationError


def empty_to_none(v: object) -> object:
    """Optional fields are omitted from the wire when empty ("" or [])."""
    if v == "" or v == []:
        return None
    return v


class HubSpotPayload(BaseModel):
    """
    Field names are snake_case in Python, camelCase on the wire.
    Optional fields that are None, "" or [] are dropped on dump, including after
    attribute assignment; required fields are always written.
    """

    model_config = ConfigDict(populate_by_name=True)

    @model_serializer(mode="wrap")
    def drop_unset_optionals(
        self,
        handler: SerializerFunctionWrapHandler,
        info: SerializationInfo,
    ) -> Any:
        data = handler(self)
        if not isinstance(data, dict):
            return data
        for name, field in type(self).model_fields.items():
            if field.is_required():
                continue
            key = field.alias if (info.by_alias and field.alias) else name
            if key in data and empty_to_none(data[key]) is None:
                del data[key]
        return data

    def to_json(self) -> bytes:
        """Serialize with wire aliases."""
        try:
            return self.model_dump_json(by_alias=True).encode("utf-8")
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise HubSpotSerializationError(f"invalid request: {e!s}") from e
