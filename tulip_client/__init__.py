"""
Tulip API Client Library

A Python client library for calling Tulip API services with HMAC-signed
multipart requests and XML responses.

Example usage:
    from tulip_client import TulipClient

    client = TulipClient("https://api.example.com", "1.1", "client-id", "shared-secret")
    response = client.call_service("contact", "list")
"""

from .client import TulipClient
from .exceptions import (
    TulipClientError,
    ConfigurationError,
    TransportError,
    RequestError,
    NotAuthorizedError,
    UnknownServiceError,
    ParametersRequiredError,
    NonExistingObjectError,
    UnknownError
)
from .constants import (
    HEADER_CLIENT_ID,
    HEADER_CLIENT_AUTHENTICATION,
    DEFAULT_API_VERSION,
    DEFAULT_CONFIG,
    ResponseCode
)
from .request_builder import RequestBuilder, SignedRequest
from .response_parser import ParsedResponse, ResponseParser
from .transport import RequestsTransport, Transport

__version__ = "1.0.0"
__all__ = [
    "TulipClient",
    "TulipClientError",
    "ConfigurationError",
    "TransportError",
    "RequestError",
    "NotAuthorizedError",
    "UnknownServiceError",
    "ParametersRequiredError",
    "NonExistingObjectError",
    "UnknownError",
    "HEADER_CLIENT_ID",
    "HEADER_CLIENT_AUTHENTICATION",
    "DEFAULT_API_VERSION",
    "DEFAULT_CONFIG",
    "ResponseCode",
    "RequestBuilder",
    "SignedRequest",
    "ParsedResponse",
    "ResponseParser",
    "RequestsTransport",
    "Transport"
]
