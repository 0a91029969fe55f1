"""Configuration management for the HUD.ai client."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .api_clients.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_API_URL = "https://api.hud.ai"
DEFAULT_BASE_AUTH_URL = "https://auth.hud.ai"

# Environment variable -> config field
ENV_VARIABLES = {
    "HUDAI_CLIENT_ID": "client_id",
    "HUDAI_CLIENT_SECRET": "client_secret",
    "HUDAI_REDIRECT_URI": "redirect_uri",
    "HUDAI_BASE_API_URL": "base_api_url",
    "HUDAI_BASE_AUTH_URL": "base_auth_url",
}

# Keys accepted in the camelCase form used by the JavaScript SDK
CAMEL_CASE_KEYS = {
    "clientId": "client_id",
    "clientSecret": "client_secret",
    "redirectUri": "redirect_uri",
    "baseApiUrl": "base_api_url",
    "baseAuthUrl": "base_auth_url",
    "tokenExpiryUnit": "token_expiry_unit",
}


class TransportOptions(BaseModel):
    """Options handed to the underlying httpx client."""

    model_config = ConfigDict(extra="forbid")

    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    connect_timeout: float = Field(
        default=10.0, description="Connection timeout in seconds"
    )
    headers: Dict[str, str] = Field(
        default_factory=dict, description="Extra headers sent with every request"
    )
    verify: bool = Field(default=True, description="Verify SSL certificates")
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects")

    @field_validator("timeout", "connect_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v


class HudAiClientConfig(BaseModel):
    """Configuration for a HudAiClient instance."""

    model_config = ConfigDict(extra="forbid")

    client_id: str = Field(description="OAuth client identifier")
    client_secret: Optional[str] = Field(
        default=None, description="OAuth client secret (enables client_credentials)"
    )
    redirect_uri: Optional[str] = Field(
        default=None, description="Redirect URI registered for the authorization code flow"
    )
    base_api_url: str = Field(
        default=DEFAULT_BASE_API_URL, description="Prefix for all resource endpoints"
    )
    base_auth_url: str = Field(
        default=DEFAULT_BASE_AUTH_URL, description="Prefix for the auth endpoints"
    )
    request: TransportOptions = Field(
        default_factory=TransportOptions, description="HTTP transport options"
    )
    # OAuth2 servers declare expires_in in seconds; the legacy SDK added it as ms
    token_expiry_unit: Literal["seconds", "milliseconds"] = Field(
        default="seconds", description="Unit of the token endpoint's expires_in"
    )

    @field_validator("client_id")
    @classmethod
    def strip_client_id(cls, v: str) -> str:
        return v.strip()

    @field_validator("client_secret", "redirect_uri")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("base_api_url", "base_auth_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"URL must start with http:// or https://: {v}")
        return v.rstrip("/")


def normalize_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Translate camelCase configuration keys into field names."""
    return {CAMEL_CASE_KEYS.get(key, key): value for key, value in data.items()}


def build_config(data: Mapping[str, Any]) -> HudAiClientConfig:
    """Validate a configuration mapping.

    Raises:
        ConfigurationError: If the mapping is not a valid configuration
    """
    try:
        return HudAiClientConfig(**normalize_keys(data))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid client configuration: {e}") from e


class ConfigManager:
    """Loads client configuration from a JSON file and the environment.

    Precedence, lowest first: config file, ``HUDAI_*`` environment variables,
    explicit overrides passed to :meth:`load`.
    """

    DEFAULT_CONFIG_PATH = Path.home() / ".hudai" / "config.json"

    def __init__(
        self,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.config_path = config_path or self.DEFAULT_CONFIG_PATH
        self.environ = os.environ if environ is None else environ

    def _load_file(self) -> Dict[str, Any]:
        if not self.config_path.exists():
            return {}

        try:
            with open(self.config_path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load config from {self.config_path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {self.config_path} must contain a JSON object"
            )
        logger.debug(f"Loaded configuration file {self.config_path}")
        return normalize_keys(data)

    def _load_environment(self) -> Dict[str, Any]:
        return {
            field: self.environ[name]
            for name, field in ENV_VARIABLES.items()
            if self.environ.get(name)
        }

    def load(self, overrides: Optional[Mapping[str, Any]] = None) -> HudAiClientConfig:
        """Merge all configuration sources into a validated config.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        data = self._load_file()
        data.update(self._load_environment())
        if overrides:
            data.update(
                {k: v for k, v in normalize_keys(overrides).items() if v is not None}
            )

        if not data.get("client_id"):
            raise ConfigurationError(
                "client_id is required (config file, HUDAI_CLIENT_ID or --client-id)"
            )
        return build_config(data)
