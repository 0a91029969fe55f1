"""Authentication and request pipeline for the HUD.ai API.

All HTTP functionality lives here; resources only describe which requests
to make.
"""

from .credentials import ClientIdentity, CredentialState
from .exceptions import (
    ApiError,
    AuthExchangeError,
    ConfigurationError,
    DNSResolutionError,
    HudAiError,
    InvalidResponseError,
    NetworkConnectionError,
    NetworkError,
    NetworkTimeoutError,
    NotFoundError,
    RateLimitError,
    ServerError,
    SSLCertificateError,
)
from .request_dispatcher import RequestDescriptor, RequestDispatcher
from .resource import ResourceClient
from .token_exchanger import TokenExchanger
from .transport import HttpTransport

__all__ = [
    # State
    "ClientIdentity",
    "CredentialState",
    # Pipeline
    "HttpTransport",
    "RequestDescriptor",
    "RequestDispatcher",
    "ResourceClient",
    "TokenExchanger",
    # Errors
    "ApiError",
    "AuthExchangeError",
    "ConfigurationError",
    "DNSResolutionError",
    "HudAiError",
    "InvalidResponseError",
    "NetworkConnectionError",
    "NetworkError",
    "NetworkTimeoutError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "SSLCertificateError",
]
