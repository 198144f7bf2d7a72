"""Exception classes for the fiskaly SDK"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Discriminant for every failure the SDK raises"""
    USAGE = "USAGE"
    TRANSPORT = "TRANSPORT"
    TRANSPORT_TIMEOUT = "TRANSPORT_TIMEOUT"
    SERVICE = "SERVICE"
    CONFIG = "CONFIG"
    UNKNOWN = "UNKNOWN"


class FiskalyError(Exception):
    """
    Base exception for fiskaly SDK errors

    All errors in the SDK extend from this class. The ``kind`` attribute
    allows callers to branch on the failure tier without relying on the
    class hierarchy.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(
        self,
        message: str,
        code: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "kind": self.kind.value,
            "message": self.message,
            "code": self.code,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }

    def has_code(self, code: Any) -> bool:
        """Check if error has a specific code"""
        return self.code == code

    def is_kind(self, kind: ErrorKind) -> bool:
        """Check if error belongs to a kind"""
        return self.kind == kind

    def get_description(self) -> str:
        """Get human-readable error description"""
        parts = [self.message]

        if self.code is not None:
            parts.insert(0, f"[{self.code}]")

        return " ".join(parts)


class UsageError(FiskalyError):
    """Caller supplied invalid or missing arguments"""

    kind = ErrorKind.USAGE

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message, code="USAGE_ERROR")
        self.field = field


class TransportError(FiskalyError):
    """
    Transport layer failure

    The fiskaly service was unreachable, answered with a non-protocol
    response, or did not answer in time.
    """

    kind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: str = "TRANSPORT_ERROR",
    ) -> None:
        super().__init__(message, code=code)
        self.status_code = status_code

    def get_description(self) -> str:
        description = super().get_description()
        if self.status_code:
            description += f" (HTTP {self.status_code})"
        return description


class TransportTimeoutError(TransportError):
    """The fiskaly service did not answer within the transport timeout"""

    kind = ErrorKind.TRANSPORT_TIMEOUT

    def __init__(self, message: str = "Request timed out") -> None:
        super().__init__(message, status_code=None, code="TRANSPORT_TIMEOUT")


class MalformedResponseError(TransportError):
    """The service answered, but not with a usable RPC result"""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message, status_code=status_code, code="MALFORMED_RESPONSE")


class ServiceError(FiskalyError):
    """
    Error object returned by the fiskaly service

    ``code`` and ``message`` are kept exactly as the service sent them so they
    can be correlated with service-side logs.
    """

    kind = ErrorKind.SERVICE

    def __init__(
        self,
        message: str,
        code: Optional[Any] = None,
        data: Optional[Any] = None,
    ) -> None:
        super().__init__(message, code=code)
        self.data = data


class UpstreamHttpError(ServiceError):
    """The API behind the fiskaly service answered with an HTTP error"""

    def __init__(
        self,
        message: str,
        code: Optional[Any] = None,
        data: Optional[Any] = None,
        status: Optional[int] = None,
        request_id: Optional[str] = None,
        error: Optional[str] = None,
        error_code: Optional[str] = None,
        upstream_message: Optional[str] = None,
    ) -> None:
        super().__init__(message, code=code, data=data)
        self.upstream_message = upstream_message
        self.status = status
        self.request_id = request_id
        self.error = error
        self.error_code = error_code

    def get_description(self) -> str:
        description = super().get_description()
        if self.status:
            description += f" (HTTP {self.status})"
        if self.request_id:
            description += f" [request {self.request_id}]"
        return description


class UpstreamTimeoutError(ServiceError):
    """The API behind the fiskaly service timed out"""


class ConfigError(FiskalyError):
    """Configuration error"""

    kind = ErrorKind.CONFIG

    def __init__(
        self,
        message: str,
        code: str = "CONFIG_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)
