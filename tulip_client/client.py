"""
Tulip API client.

This module ties request building, the HTTP transport and response parsing
together: one service call sends one signed multipart request and either
returns the response or raises the error matching the API response code.
"""

import logging
from typing import Any, Mapping, Optional

import requests

from .constants import DEFAULT_API_VERSION, DEFAULT_CONFIG, ResponseCode
from .exceptions import ConfigurationError, ERROR_CLASSES, TransportError
from .request_builder import RequestBuilder, SignedRequest
from .response_parser import ResponseParser
from .transport import RequestsTransport, Transport

logger = logging.getLogger(__name__)


class TulipClient:
    """
    Client for calling Tulip API services.

    Requests are signed with HMAC-SHA256 when both a client ID and a shared
    secret are configured, and sent unsigned otherwise.
    """

    def __init__(
        self,
        base_url: str,
        api_version: str = DEFAULT_API_VERSION,
        client_id: Optional[str] = None,
        shared_secret: Optional[str] = None,
        transport: Optional[Transport] = None,
        **config
    ):
        """
        Initialize Tulip client.

        Args:
            base_url: URL of the Tulip installation, without trailing slash
            api_version: API version, "1.0" or "1.1"
            client_id: Client identifier for authentication
            shared_secret: Shared secret for authentication
            transport: Transport used to send requests, a requests based
                transport is created on first use when omitted
            **config: Configuration options (timeout in seconds, None to wait forever)
        """
        self.base_url = base_url
        self.api_version = api_version
        self.client_id = client_id
        self.shared_secret = shared_secret
        self.transport = transport

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self.request_builder = RequestBuilder(base_url, api_version, client_id, shared_secret)

    def _validate_config(self):
        """Validate client configuration."""
        if not self.base_url:
            raise ConfigurationError("base_url cannot be empty")

        if not self.api_version:
            raise ConfigurationError("api_version cannot be empty")

        timeout = self.config['timeout']
        if timeout is not None and (
            isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0
        ):
            raise ConfigurationError("timeout must be a positive number or None")

        if bool(self.client_id) != bool(self.shared_secret):
            logger.warning("Only one of client_id and shared_secret is set, requests will not be signed")

    def get_service_url(self, service_name: str, action: str) -> str:
        """Return the full API URL for the service and action."""
        return self.request_builder.get_service_url(service_name, action)

    def set_transport(self, transport: Transport):
        """Set the transport used to send requests."""
        self.transport = transport

    def _get_transport(self) -> Transport:
        if self.transport is None:
            self.transport = RequestsTransport(timeout=self.config['timeout'])
        return self.transport

    def call_service(
        self,
        service_name: str,
        action: str,
        parameters: Optional[Mapping[str, Any]] = None,
        files: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """
        Call a Tulip API service.

        Args:
            service_name: Name of the API service, e.g. "contact"
            action: Action of the service, e.g. "list"
            parameters: Scalar request parameters
            files: Open file objects to upload, not closed by the client

        Returns:
            The transport response

        Raises:
            NotAuthorizedError: When not authenticated / authorized correctly
            UnknownServiceError: When the service / action is not known
            ParametersRequiredError: When required parameters are missing or incorrect
            NonExistingObjectError: When the requested object does not exist
            UnknownError: For response code 0, unknown codes and unreadable bodies
            TransportError: When the request failed without a response
        """
        transport = self._get_transport()
        request = self.request_builder.build(service_name, action, parameters, files)

        try:
            response = transport.send(request)
        except requests.RequestException as e:
            if e.response is None:
                raise TransportError(f"HTTP request failed: {e}", request=request) from e
            logger.debug("HTTP error from %s, reading API response code: %s", request.url, e)
            response = e.response

        self._validate_response_code(request, response)

        return response

    def _validate_response_code(self, request: SignedRequest, response: Any):
        """Raise the error matching the API response code, unless it is SUCCESS."""
        parser = ResponseParser(response)
        outcome = parser.outcome
        if outcome is ResponseCode.SUCCESS:
            return

        logger.debug("API response code %d (%s) from %s", parser.response_code, outcome.name, request.url)
        raise ERROR_CLASSES[outcome](parser.error_message, request=request, response=response)

    def close(self):
        """Close the transport, when it can be closed."""
        close = getattr(self.transport, 'close', None)
        if close is not None:
            close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
