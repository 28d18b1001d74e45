from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .urls import NVD_CVE_API_URL

APP_NAME = "nvd-search"
APP_VERSION = "0.1.0"
USER_AGENT = f"{APP_NAME}/{APP_VERSION}"


class AppConfig(BaseSettings):
    """Application configuration with automatic environment variable loading.

    All settings can be overridden via environment variables with the NVD_SEARCH_ prefix.
    For example:
        - NVD_SEARCH_API_KEY=xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx
        - NVD_SEARCH_TIMEOUT_SECONDS=60
        - NVD_SEARCH_RAISE_ON_TRANSPORT_ERROR=true

    Alternatively, settings can be provided programmatically:
        client = NvdClient(api_key="...")
    """

    model_config = SettingsConfigDict(
        env_prefix="NVD_SEARCH_",
        case_sensitive=False,
        extra="forbid",
    )

    api_key: Optional[str] = Field(
        default=None,
        description="NVD API key, sent as the 'apiKey' header (raises the public rate limit)",
    )

    base_url: str = Field(
        default=NVD_CVE_API_URL,
        description="CVE API endpoint queried by search()",
    )

    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout in seconds",
    )

    raise_on_transport_error: bool = Field(
        default=False,
        description="Raise NvdTransportError on network/HTTP/decoding failures instead of returning no results",
    )
