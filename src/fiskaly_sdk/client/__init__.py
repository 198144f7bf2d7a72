"""
Client module for the fiskaly SDK
"""

from fiskaly_sdk.client.fiskaly_client import FiskalyClient, SDK_VERSION
from fiskaly_sdk.client.error_handler import ErrorHandler, HTTP_ERROR, HTTP_TIMEOUT_ERROR
from fiskaly_sdk.client.transport import JsonRpcTransport, Transport

__all__ = [
    "FiskalyClient",
    "SDK_VERSION",
    "ErrorHandler",
    "HTTP_ERROR",
    "HTTP_TIMEOUT_ERROR",
    "JsonRpcTransport",
    "Transport",
]
