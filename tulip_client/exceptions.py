"""
Custom exceptions for the Tulip API client library.
"""

from .constants import ResponseCode


class TulipClientError(Exception):
    """Base exception for Tulip client errors."""
    pass


class ConfigurationError(TulipClientError):
    """Raised when client configuration is invalid."""
    pass


class TransportError(TulipClientError):
    """Raised when the HTTP request fails without a usable response."""

    def __init__(self, message, request=None):
        super().__init__(message)
        self.request = request


class RequestError(TulipClientError):
    """
    Raised when the API reports an unsuccessful response code.

    Carries the signed request and the response for diagnostics.
    """

    response_code = ResponseCode.UNKNOWN_ERROR

    def __init__(self, message, request=None, response=None):
        super().__init__(message)
        self.message = message
        self.request = request
        self.response = response


class NotAuthorizedError(RequestError):
    """Raised when not authenticated / authorized correctly."""
    response_code = ResponseCode.NOT_AUTHORIZED


class UnknownServiceError(RequestError):
    """Raised when the called service / action is not known to the API."""
    response_code = ResponseCode.UNKNOWN_SERVICE


class ParametersRequiredError(RequestError):
    """Raised when required parameters were not provided or incorrect."""
    response_code = ResponseCode.PARAMETERS_REQUIRED


class NonExistingObjectError(RequestError):
    """Raised when a requested object was not found."""
    response_code = ResponseCode.NON_EXISTING_OBJECT


class UnknownError(RequestError):
    """Raised when an (unknown) error occurs within the API."""
    response_code = ResponseCode.UNKNOWN_ERROR


ERROR_CLASSES = {
    ResponseCode.NOT_AUTHORIZED: NotAuthorizedError,
    ResponseCode.UNKNOWN_SERVICE: UnknownServiceError,
    ResponseCode.PARAMETERS_REQUIRED: ParametersRequiredError,
    ResponseCode.NON_EXISTING_OBJECT: NonExistingObjectError,
    ResponseCode.UNKNOWN_ERROR: UnknownError,
}
