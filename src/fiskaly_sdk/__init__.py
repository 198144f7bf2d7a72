"""
fiskaly SDK for Python

Main entry point for the SDK
"""

from fiskaly_sdk.client import (
    FiskalyClient,
    SDK_VERSION,
    ErrorHandler,
    JsonRpcTransport,
    Transport,
)
from fiskaly_sdk.exceptions import (
    FiskalyError,
    ErrorKind,
    UsageError,
    TransportError,
    TransportTimeoutError,
    MalformedResponseError,
    ServiceError,
    UpstreamHttpError,
    UpstreamTimeoutError,
    ConfigError,
)

# Configuration
from fiskaly_sdk.config import (
    FiskalySettings,
    ConfigLoader,
    ConfigValidator,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)

# Models
from fiskaly_sdk.models import (
    ClientConfiguration,
    ConfigParams,
    RequestDescriptor,
    RequestResponse,
    VersionInfo,
)

__version__ = "1.1.500"

__all__ = [
    # Client
    "FiskalyClient",
    "SDK_VERSION",
    "ErrorHandler",
    "JsonRpcTransport",
    "Transport",
    # Exceptions
    "FiskalyError",
    "ErrorKind",
    "UsageError",
    "TransportError",
    "TransportTimeoutError",
    "MalformedResponseError",
    "ServiceError",
    "UpstreamHttpError",
    "UpstreamTimeoutError",
    "ConfigError",
    # Configuration
    "FiskalySettings",
    "ConfigLoader",
    "ConfigValidator",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    # Models
    "ClientConfiguration",
    "ConfigParams",
    "RequestDescriptor",
    "RequestResponse",
    "VersionInfo",
]
