"""
fiskaly API client

Owns the session context and carries it through every RPC call.
"""

import logging
import threading
from typing import Any, Dict, Mapping, Optional, Union

import requests
from pydantic import ValidationError

from fiskaly_sdk.client.error_handler import ErrorHandler
from fiskaly_sdk.client.transport import JsonRpcTransport, Transport
from fiskaly_sdk.config.settings import FiskalySettings
from fiskaly_sdk.exceptions import FiskalyError, MalformedResponseError, UsageError
from fiskaly_sdk.models import (
    ClientConfiguration,
    ConfigParams,
    RequestDescriptor,
    RequestResponse,
    VersionInfo,
)


# Identification tag sent with create-context; bump when the wire contract changes
SDK_VERSION = "1.1.500"

# Logger for this module
logger = logging.getLogger(__name__)


class FiskalyClient:
    """
    fiskaly API client

    Every context-bearing call sends the context stored right before the call
    and, once the response passed error classification, replaces it with the
    context the service returned. Calls on one instance are serialised.

    Use one of the factories instead of the constructor:

    Example:
        >>> client = FiskalyClient.create_using_credentials(
        ...     "http://localhost:8080/invoke",
        ...     "api-key",
        ...     "api-secret",
        ...     "https://kassensichv.io/api/v1",
        ... )
        >>> client.get_version().smaers_version
        >>> client.request("GET", "/tss")
    """

    def __init__(self, transport: Transport, context: str = "") -> None:
        self._transport = transport
        self._context = context
        self._lock = threading.Lock()

    @classmethod
    def create_using_credentials(
        cls,
        fiskaly_service: str,
        api_key: str,
        api_secret: str,
        base_url: str,
        *,
        timeout: Optional[int] = None,
        transport: Optional[Transport] = None,
    ) -> "FiskalyClient":
        """
        Create a client and obtain a fresh context from the service

        Args:
            fiskaly_service: URL of the fiskaly service
            api_key: API key
            api_secret: API secret
            base_url: Base URL of the API the service talks to
            timeout: Transport timeout in milliseconds
            transport: Transport to use instead of a JsonRpcTransport

        Raises:
            UsageError: If an argument is missing, naming the first one
            TransportError: If the service could not be reached
            ServiceError: If the service rejected the credentials
        """
        cls._require(
            fiskaly_service=fiskaly_service,
            api_key=api_key,
            api_secret=api_secret,
            base_url=base_url,
        )

        owns_transport = transport is None
        client = cls(transport or JsonRpcTransport(fiskaly_service.strip(), timeout=timeout))
        try:
            client._create_context(api_key.strip(), api_secret.strip(), base_url.strip())
        except FiskalyError:
            if owns_transport:
                client.close()
            raise

        return client

    @classmethod
    def create_using_context(
        cls,
        fiskaly_service: str,
        context: str,
        *,
        timeout: Optional[int] = None,
        transport: Optional[Transport] = None,
    ) -> "FiskalyClient":
        """
        Resume a session from a previously issued context

        No call is made to the service.

        Raises:
            UsageError: If an argument is missing
        """
        cls._require(fiskaly_service=fiskaly_service, context=context)

        client = cls(transport or JsonRpcTransport(fiskaly_service.strip(), timeout=timeout))
        client._update_context(context)
        return client

    @classmethod
    def from_settings(
        cls,
        settings: FiskalySettings,
        *,
        transport: Optional[Transport] = None,
    ) -> "FiskalyClient":
        """Create a client from resolved settings using credentials"""
        return cls.create_using_credentials(
            settings.fiskaly_service,
            settings.api_key,
            settings.api_secret,
            settings.base_url,
            timeout=settings.timeout,
            transport=transport,
        )

    @staticmethod
    def _require(**arguments: Any) -> None:
        """Raise UsageError for the first blank argument, in argument order"""
        for name, value in arguments.items():
            if value is None or (isinstance(value, str) and not value.strip()):
                raise UsageError(f"{name} must be provided", field=name)
            if not isinstance(value, str):
                raise UsageError(f"{name} must be a string", field=name)

    def _create_context(self, api_key: str, api_secret: str, base_url: str) -> None:
        params = {
            "base_url": base_url,
            "api_key": api_key,
            "api_secret": api_secret,
            "sdk_version": SDK_VERSION,
        }

        with self._lock:
            response = self._call("create-context", params)
            if not response.get("context"):
                raise MalformedResponseError("create-context response carries no context")
            self._install_context(response)

        logger.info(f"Created fiskaly context for {base_url}")

    def _call(self, method: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Send one RPC call and classify the outcome"""
        try:
            response = self._transport.send(method, params)
        except (requests.RequestException, ValueError) as e:
            raise ErrorHandler.from_transport_exception(e) from e

        return ErrorHandler.throw_on_error(response)

    def _install_context(self, response: Mapping[str, Any]) -> None:
        """Replace the stored context with the one in the response, if any"""
        context = response.get("context")
        if context is None or context == "":
            return
        if not isinstance(context, str):
            raise MalformedResponseError(
                f"Expected context to be a string, got {type(context).__name__}"
            )
        self._update_context(context)

    def _update_context(self, context: str) -> None:
        if context != self._context:
            logger.debug("fiskaly context rotated")
        self._context = context

    def get_context(self) -> str:
        """Get the current base64 encoded context"""
        return self._context

    @property
    def context(self) -> str:
        """Current base64 encoded context"""
        return self._context

    @property
    def transport(self) -> Transport:
        return self._transport

    def get_config(self) -> ClientConfiguration:
        """
        Get the current configuration of the fiskaly service

        Raises:
            TransportError: If the service could not be reached
            ServiceError: If the service returned an error
        """
        with self._lock:
            response = self._call("config", {"context": self._context})
            config = self._decode_config(response)
            self._install_context(response)
            return config

    def configure(
        self, config_params: Union[ConfigParams, Mapping[str, Any]]
    ) -> ClientConfiguration:
        """
        Configure the fiskaly service

        Args:
            config_params: Fields to change; unset fields are not sent

        Returns:
            Configuration after the change

        Raises:
            UsageError: If config_params is invalid
            TransportError: If the service could not be reached
            ServiceError: If the service returned an error
        """
        if not isinstance(config_params, ConfigParams):
            try:
                config_params = ConfigParams.model_validate(dict(config_params or {}))
            except (ValidationError, TypeError) as e:
                raise UsageError(f"Invalid config params: {e}", field="config_params") from e

        with self._lock:
            response = self._call(
                "config",
                {"config": config_params.to_params(), "context": self._context},
            )
            config = self._decode_config(response)
            self._install_context(response)
            return config

    def get_version(self) -> VersionInfo:
        """
        Get version information of the fiskaly client and SMAERS

        This call neither sends nor receives a context.
        """
        with self._lock:
            response = self._call("version")

        client = response.get("client")
        smaers = response.get("smaers")
        if not isinstance(client, Mapping) or not isinstance(smaers, Mapping):
            raise MalformedResponseError("version response lacks client or smaers information")

        try:
            return VersionInfo(
                client_version=client.get("version"),
                client_source_hash=client.get("source_hash"),
                client_commit_hash=client.get("commit_hash"),
                smaers_version=smaers.get("version"),
            )
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid version response: {e}") from e

    def request(
        self,
        method: str = "GET",
        path: str = "/",
        query: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, Any]] = None,
        body: Optional[str] = None,
        destination_file: Optional[str] = None,
    ) -> RequestResponse:
        """
        Execute a request through the fiskaly service

        Args:
            method: HTTP method
            path: Path relative to the base URL
            query: Query parameters
            headers: Request headers
            body: Base64 encoded JSON body, forwarded as is
            destination_file: Store the response body in this file

        Returns:
            Raw response payload and the new context

        Raises:
            UsageError: If method or path is empty
            TransportError: If the service could not be reached
            ServiceError: If the service returned an error
        """
        try:
            descriptor = RequestDescriptor(
                method=method,
                path=path,
                query=query,
                headers=headers,
                body=body,
                destination_file=destination_file,
            )
        except ValidationError as e:
            raise UsageError(f"Invalid request: {e}", field="request") from e

        with self._lock:
            response = self._call(
                "request",
                {"request": descriptor.to_params(), "context": self._context},
            )
            payload = response.get("response")
            if payload is not None and not isinstance(payload, Mapping):
                raise MalformedResponseError("request response payload is not an object")

            self._install_context(response)
            return RequestResponse(response=dict(payload or {}), context=self._context)

    def _decode_config(self, response: Mapping[str, Any]) -> ClientConfiguration:
        try:
            return ClientConfiguration.model_validate(response.get("config"))
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid config response: {e}") from e

    def close(self) -> None:
        """Close the underlying transport"""
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "FiskalyClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
