"""
Error classification for fiskaly RPC calls

Maps transport faults and error objects embedded in RPC results onto the
SDK exception taxonomy.
"""

import base64
import binascii
import json
from typing import Any, Dict, Mapping, Optional

import requests

from fiskaly_sdk.exceptions import (
    FiskalyError,
    MalformedResponseError,
    ServiceError,
    TransportError,
    TransportTimeoutError,
    UpstreamHttpError,
    UpstreamTimeoutError,
)


# Error codes the service uses when relaying failures of the upstream API
HTTP_ERROR = -20000
HTTP_TIMEOUT_ERROR = -21000


class ErrorHandler:
    """
    Classifies RPC failures

    ``throw_on_error`` inspects a decoded result, ``from_transport_exception``
    converts an exception raised by the transport. Neither logs nor recovers.
    """

    @classmethod
    def throw_on_error(cls, response: Any) -> Dict[str, Any]:
        """
        Raise if the decoded RPC result carries an error

        Args:
            response: Decoded RPC result

        Returns:
            The response, unchanged, when it carries no error

        Raises:
            ServiceError: The service returned an error object
            MalformedResponseError: The result is not a usable RPC result
        """
        if not isinstance(response, Mapping):
            raise MalformedResponseError(
                f"Expected an RPC result object, got {type(response).__name__}"
            )

        error = response.get("error")
        if error is None:
            return response

        if not isinstance(error, Mapping) or error.get("code") is None:
            raise MalformedResponseError(f"Unrecognized error object in RPC result: {error!r}")

        raise cls._service_error(error)

    @classmethod
    def from_transport_exception(cls, error: Exception) -> FiskalyError:
        """Convert an exception raised by the transport into an SDK error"""
        if isinstance(error, FiskalyError):
            return error

        if isinstance(error, requests.exceptions.Timeout):
            return TransportTimeoutError(f"Request timed out: {error}")

        if isinstance(error, requests.exceptions.InvalidJSONError):
            return MalformedResponseError(f"Could not decode RPC response: {error}")

        if isinstance(error, requests.exceptions.HTTPError):
            status_code = error.response.status_code if error.response is not None else None
            return TransportError(f"HTTP error: {error}", status_code=status_code)

        if isinstance(error, requests.exceptions.ConnectionError):
            return TransportError(f"Connection error: {error}")

        if isinstance(error, requests.exceptions.RequestException):
            return TransportError(f"Request error: {error}")

        if isinstance(error, ValueError):
            return MalformedResponseError(f"Could not decode RPC response: {error}")

        return TransportError(f"Transport error: {error}")

    @classmethod
    def _service_error(cls, error: Mapping[str, Any]) -> ServiceError:
        code = error.get("code")
        message = error.get("message") or ""
        data = error.get("data")

        if code == HTTP_TIMEOUT_ERROR:
            return UpstreamTimeoutError(message, code=code, data=data)

        if code == HTTP_ERROR:
            return cls._upstream_http_error(message, code, data)

        return ServiceError(message, code=code, data=data)

    @classmethod
    def _upstream_http_error(cls, message: str, code: Any, data: Any) -> UpstreamHttpError:
        response = data.get("response") if isinstance(data, Mapping) else None
        if not isinstance(response, Mapping):
            return UpstreamHttpError(message, code=code, data=data)

        body = cls._decode_body(response.get("body"))
        return UpstreamHttpError(
            message,
            code=code,
            data=data,
            status=body.get("status_code") or response.get("status"),
            request_id=cls._request_id(response.get("header") or response.get("headers")),
            error=body.get("error"),
            error_code=body.get("code"),
            upstream_message=body.get("message"),
        )

    @staticmethod
    def _decode_body(body: Any) -> Dict[str, Any]:
        """Decode a base64 JSON body, empty when it is not one"""
        if not isinstance(body, str) or not body:
            return {}
        try:
            decoded = json.loads(base64.b64decode(body))
        except (binascii.Error, ValueError):
            return {}
        return decoded if isinstance(decoded, dict) else {}

    @staticmethod
    def _request_id(headers: Any) -> Optional[str]:
        if not isinstance(headers, Mapping):
            return None
        for key, value in headers.items():
            if key.lower() == "x-request-id":
                if isinstance(value, (list, tuple)):
                    return value[0] if value else None
                return value
        return None
