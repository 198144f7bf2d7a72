"""
JSON-RPC transport for the fiskaly service
Handles HTTP communication with connection pooling and request tracing
"""

import time
import uuid
import logging
from typing import Any, Dict, Optional, Protocol

import requests
from requests.adapters import HTTPAdapter

from fiskaly_sdk.exceptions import MalformedResponseError


# Logger for this module
logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30000  # milliseconds

JSONRPC_VERSION = "2.0"

# Sensitive fields that should be redacted in logs
SENSITIVE_FIELDS = [
    "authorization",
    "api_key",
    "api_secret",
    "context",
    "body",
]


class Transport(Protocol):
    """Anything that can send an RPC method with parameters"""

    def send(self, method: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        ...


def redact_sensitive_data(obj: Any) -> Any:
    """Redact sensitive data from object for logging"""
    if isinstance(obj, list):
        return [redact_sensitive_data(item) for item in obj]

    if isinstance(obj, dict):
        redacted = {}
        for key, value in obj.items():
            lower_key = str(key).lower()
            if lower_key in SENSITIVE_FIELDS:
                redacted[key] = "[REDACTED]"
            elif isinstance(value, (dict, list)):
                redacted[key] = redact_sensitive_data(value)
            else:
                redacted[key] = value
        return redacted

    return obj


class JsonRpcTransport:
    """
    JSON-RPC 2.0 client for the fiskaly service

    Features:
    - Connection keep-alive via session pooling
    - Request ID generation for traceability
    - Redacted debug logging of outbound calls

    Requests are never retried; a failed call raises the underlying
    ``requests`` exception for the caller to classify.

    Example:
        >>> transport = JsonRpcTransport("http://localhost:8080/invoke")
        >>> result = transport.send("version")
    """

    def __init__(
        self,
        url: str,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Create a new transport bound to one endpoint

        Args:
            url: URL of the fiskaly service JSON-RPC endpoint
            timeout: Request timeout in milliseconds
            session: Optional pre-configured requests session
        """
        self._url = url
        self._timeout = timeout or DEFAULT_TIMEOUT
        self._session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create requests session with connection pooling"""
        session = requests.Session()

        session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

        adapter = HTTPAdapter(
            pool_connections=10,
            pool_maxsize=10,
            max_retries=0,
        )

        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def _generate_request_id(self) -> str:
        """Generate unique request ID for traceability"""
        timestamp = hex(int(time.time() * 1000))[2:]
        unique_id = uuid.uuid4().hex[:8]
        return f"fiskaly-{timestamp}-{unique_id}"

    def send(self, method: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Invoke an RPC method

        Args:
            method: RPC method name
            params: Parameter object, omitted from the envelope when None

        Returns:
            The ``result`` member of the reply, or ``{"error": ...}`` when the
            reply carries an error object

        Raises:
            requests.RequestException: On connection, timeout or HTTP failures
            ValueError: If the reply is not JSON
            MalformedResponseError: If the reply is not a JSON-RPC envelope
        """
        request_id = self._generate_request_id()

        payload: Dict[str, Any] = {
            "jsonrpc": JSONRPC_VERSION,
            "method": method,
            "id": request_id,
        }
        if params is not None:
            payload["params"] = params

        logger.debug(
            f"RPC {method} [{request_id}] -> {self._url} "
            f"params={redact_sensitive_data(params)}"
        )

        start_time = time.time()
        response = self._session.post(
            self._url,
            json=payload,
            headers={"X-Request-ID": request_id},
            timeout=self._timeout / 1000.0,
        )
        duration = int((time.time() - start_time) * 1000)

        try:
            reply = response.json()
        except ValueError:
            response.raise_for_status()
            raise

        logger.debug(f"RPC {method} [{request_id}] <- HTTP {response.status_code} in {duration}ms")

        if isinstance(reply, dict) and reply.get("error") is not None:
            return {"error": reply["error"]}

        response.raise_for_status()

        if not isinstance(reply, dict) or "result" not in reply:
            raise MalformedResponseError(
                f"Reply to {method} is not a JSON-RPC result envelope",
                status_code=response.status_code,
            )

        return reply["result"]

    @property
    def url(self) -> str:
        """Get endpoint URL"""
        return self._url

    @property
    def timeout(self) -> int:
        """Get request timeout in milliseconds"""
        return self._timeout

    def close(self) -> None:
        """Close the HTTP session"""
        self._session.close()

    def __enter__(self) -> "JsonRpcTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
