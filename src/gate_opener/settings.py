"""
gate_opener.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide Sigma Cloud credentials from repr/logging.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process-wide configuration:
    - Strict env-driven configuration
    - Secrets are assumed present; they are not validated beyond their type
    """

    model_config = SettingsConfigDict(env_prefix="GATE_OPENER_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "gate-opener"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Sigma Cloud (directory, receiver registry, event ingestion)
    sigma_api_base_url: str = "https://api.segware.com.br"
    sigma_auth_url: str = "https://cloud.segware.com.br/server/v2/auth"
    sigma_bearer_token: str = Field(default="", repr=False)
    sigma_username: str = Field(default="", repr=False)
    sigma_password: str = Field(default="", repr=False)

    # Device gateway; the request's `server` field supplies the port.
    gateway_base_url: str = "http://localhost"

    http_timeout_seconds: float = 30.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Credentials here are static for the process lifetime; nothing derived from them
# (e.g. login tokens) is cached across requests.
