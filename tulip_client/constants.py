"""
Constants for the Tulip API client library.
"""

from enum import IntEnum

# HTTP Headers
HEADER_CLIENT_ID = "X-Client-ID"
HEADER_CLIENT_AUTHENTICATION = "X-Client-Authentication"

# API versions with a known object identifier parameter
API_VERSION_1_0 = "1.0"
API_VERSION_1_1 = "1.1"
DEFAULT_API_VERSION = API_VERSION_1_1

# Parameter signed as object identifier, per API version
OBJECT_IDENTIFIER_PARAMETERS = {
    API_VERSION_1_0: "api_id",
    API_VERSION_1_1: "id",
}

# Parameter that is never sent when its value is None
IDENTIFIER_PARAMETER = "id"

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 30,              # HTTP timeout in seconds
}

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class ResponseCode(IntEnum):
    """Response codes returned in the `code` attribute of the XML response."""

    UNKNOWN_ERROR = 0
    SUCCESS = 1000
    NOT_AUTHORIZED = 1001
    UNKNOWN_SERVICE = 1003
    PARAMETERS_REQUIRED = 1004
    NON_EXISTING_OBJECT = 1005
