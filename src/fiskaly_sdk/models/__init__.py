"""Models module initialization"""

from fiskaly_sdk.models.configuration import ClientConfiguration, ConfigParams
from fiskaly_sdk.models.request import RequestDescriptor, RequestResponse
from fiskaly_sdk.models.version import VersionInfo

__all__ = [
    "ClientConfiguration",
    "ConfigParams",
    "RequestDescriptor",
    "RequestResponse",
    "VersionInfo",
]
