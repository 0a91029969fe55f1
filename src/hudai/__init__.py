"""
HUD.ai client - async SDK for the HUD.ai API.

Handles OAuth2 token exchange and refresh transparently and exposes typed
list/get/create/update/delete/search operations for every HUD.ai resource.
"""

__version__ = "1.0.0"

from .api_clients.exceptions import (  # noqa: E402
    ApiError,
    AuthExchangeError,
    ConfigurationError,
    HudAiError,
    InvalidResponseError,
    NetworkError,
    NotFoundError,
)
from .client import HudAiClient  # noqa: E402
from .config import ConfigManager, HudAiClientConfig  # noqa: E402

__all__ = [
    "ApiError",
    "AuthExchangeError",
    "ConfigManager",
    "ConfigurationError",
    "HudAiClient",
    "HudAiClientConfig",
    "HudAiError",
    "InvalidResponseError",
    "NetworkError",
    "NotFoundError",
]
