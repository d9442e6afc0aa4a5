"""
Client configuration.
Settings class using pydantic-settings for library defaults, plus the immutable
per-client HubSpotConfig (base URL + exactly one credential).
"""

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

DEFAULT_BASE_URL = "https://api.hubapi.com"


class Settings(BaseSettings):
    """
    Library defaults loaded from environment and .env.
    Credentials are not read here; pass them to HubSpotConfig.
    """

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    hubspot_base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="HubSpot API root, without trailing slash",
        validation_alias="HUBSPOT_BASE_URL",
    )
    hubspot_timeout: float | None = Field(
        default=None,
        description="Per-request timeout in seconds; unset means no timeout",
        validation_alias="HUBSPOT_TIMEOUT",
    )
    hubspot_log_level: str = Field(
        default="WARNING",
        description="Level used by configure_logging()",
        validation_alias="HUBSPOT_LOG_LEVEL",
    )

    @field_validator("hubspot_base_url", mode="before")
    @classmethod
    def normalize_base_url(cls, v: object) -> str:
        """Empty env value falls back to the public API root."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_BASE_URL
        return str(v).strip().rstrip("/")

    @field_validator("hubspot_timeout", mode="before")
    @classmethod
    def empty_timeout_is_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("hubspot_log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: object) -> str:
        if v is None or (isinstance(v, str) and not v.strip()):
            return "WARNING"
        return str(v).strip().upper()


@lru_cache()
def get_settings() -> Settings:
    return Settings()


class HubSpotConfig(BaseModel):
    """
    Immutable client configuration.

    Exactly one of access_token (sent as ``Authorization: Bearer``) or api_key
    (sent as the ``hapikey`` query parameter) must be set.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    access_token: str | None = Field(default=None, repr=False)
    api_key: str | None = Field(default=None, repr=False)
    timeout: float | None = None

    @field_validator("base_url")
    @classmethod
    def strip_base_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("base_url must not be empty")
        return v

    @field_validator("access_token", "api_key", mode="before")
    @classmethod
    def blank_credential_is_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def one_credential(self) -> "HubSpotConfig":
        if self.access_token and self.api_key:
            raise ValueError("Set either access_token or api_key, not both")
        if not self.access_token and not self.api_key:
            raise ValueError("HubSpot credential not configured: set access_token or api_key")
        return self

    @property
    def uses_api_key(self) -> bool:
        return self.api_key is not None

    def auth_headers(self) -> dict[str, str]:
        """Headers carrying the bearer token (empty in api-key mode)."""
        if self.access_token:
            return {"Authorization": f"Bearer {self.access_token}"}
        return {}

    def auth_params(self) -> dict[str, str]:
        """Query params carrying the api key (empty in bearer mode)."""
        if self.api_key:
            return {"hapikey": self.api_key}
        return {}
