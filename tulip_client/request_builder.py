"""
Request construction for the Tulip API.

Builds the service URL, the HMAC-SHA256 authentication headers and the
multipart/form-data body for a single service call.
"""

import enum
import hashlib
import hmac
import logging
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from urllib3.fields import RequestField, guess_content_type
from urllib3.filepost import encode_multipart_formdata

from .constants import (
    HEADER_CLIENT_ID,
    HEADER_CLIENT_AUTHENTICATION,
    DEFAULT_API_VERSION,
    DEFAULT_CONTENT_TYPE,
    IDENTIFIER_PARAMETER,
    OBJECT_IDENTIFIER_PARAMETERS
)

logger = logging.getLogger(__name__)


class ParameterKind(enum.Enum):
    """Kind of a parameter value, deciding whether it is sent."""

    NULL = "null"
    SCALAR = "scalar"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class SignedRequest:
    """Fully built request, ready to be handed to a transport."""

    url: str
    headers: Mapping[str, str]
    body: bytes
    method: str = "POST"


def classify_parameter(value: Any) -> ParameterKind:
    """Return the kind of a parameter value."""
    if value is None:
        return ParameterKind.NULL
    if isinstance(value, (bool, int, float, str, bytes)):
        return ParameterKind.SCALAR
    return ParameterKind.UNSUPPORTED


def to_string(value: Any) -> str:
    """
    Coerce a scalar (or None) to the string sent over the wire.

    Booleans are sent as "1" and "", None as "" and integral floats
    without decimals.
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, bytes):
        return value.decode('utf-8')
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_service_url(base_url: str, api_version: str, service_name: str, action: str) -> str:
    """Return the full API URL for the service and action."""
    return f"{base_url}/api/{api_version}/{service_name}/{action}"


def get_object_identifier(api_version: str, parameters: Mapping[str, Any]) -> str:
    """
    Return the object identifier included in the signed message.

    Version 1.1 signs the `id` parameter and version 1.0 the `api_id`
    parameter; other versions never sign an identifier.
    """
    parameter_name = OBJECT_IDENTIFIER_PARAMETERS.get(api_version)
    if parameter_name is None:
        return ""

    value = parameters.get(parameter_name)
    if classify_parameter(value) is not ParameterKind.SCALAR:
        return ""
    return to_string(value)


def sign(shared_secret: str, message: str) -> str:
    """
    Generate a HMAC-SHA256 signature.

    Args:
        shared_secret: Secret key shared with the API
        message: Message to sign

    Returns:
        Lowercase hex-encoded HMAC signature
    """
    mac = hmac.new(
        shared_secret.encode('utf-8'),
        message.encode('utf-8'),
        hashlib.sha256
    )
    return mac.hexdigest()


def build_auth_headers(
    client_id: Optional[str],
    shared_secret: Optional[str],
    api_version: str,
    url: str,
    parameters: Mapping[str, Any]
) -> Dict[str, str]:
    """
    Build the authentication headers for a request.

    The signed message is the client ID, the full URL and the object
    identifier concatenated. It holds no nonce or timestamp.

    Args:
        client_id: Client identifier, or None
        shared_secret: Shared secret, or None
        api_version: API version the URL points to
        url: Full service URL
        parameters: Request parameters

    Returns:
        The authentication headers, empty when credentials are incomplete
    """
    if not client_id or not shared_secret:
        return {}

    object_identifier = get_object_identifier(api_version, parameters)
    signature = sign(shared_secret, client_id + url + object_identifier)

    return {
        HEADER_CLIENT_ID: client_id,
        HEADER_CLIENT_AUTHENTICATION: signature
    }


def is_file(value: Any) -> bool:
    """Return True for an open, readable file-like object."""
    if not callable(getattr(value, 'read', None)):
        return False
    if getattr(value, 'closed', False):
        return False

    readable = getattr(value, 'readable', None)
    return readable() if callable(readable) else True


def _file_name(file_object: Any, default: str) -> str:
    name = getattr(file_object, 'name', None)
    if isinstance(name, (str, bytes)) and name:
        return os.path.basename(os.fsdecode(name))
    return default


def _file_field(name: str, file_object: Any) -> RequestField:
    filename = _file_name(file_object, name)
    contents = file_object.read()
    if isinstance(contents, str):
        contents = contents.encode('utf-8')

    return RequestField.from_tuples(
        name,
        (filename, contents, guess_content_type(filename, DEFAULT_CONTENT_TYPE))
    )


def build_multipart_body(
    parameters: Mapping[str, Any],
    files: Mapping[str, Any],
    boundary: Optional[str] = None
) -> Tuple[bytes, str]:
    """
    Encode parameters and files as a multipart/form-data body.

    Scalars are sent as strings. None values are sent empty, except for the
    `id` parameter which is left out. Other values are skipped, as are
    entries in `files` that are not open file objects. File objects are read
    but not closed.

    Args:
        parameters: Form fields, in sending order
        files: File objects, in sending order, sent after the parameters
        boundary: Multipart boundary, random when omitted

    Returns:
        Tuple of (body, content type header value)
    """
    fields = []
    for name, value in parameters.items():
        kind = classify_parameter(value)
        if kind is ParameterKind.UNSUPPORTED:
            logger.debug("Skipping parameter %r with unsupported type %s", name, type(value).__name__)
            continue
        if kind is ParameterKind.NULL and name == IDENTIFIER_PARAMETER:
            continue

        fields.append(RequestField.from_tuples(name, to_string(value)))

    for name, file_object in files.items():
        if not is_file(file_object):
            logger.debug("Skipping file %r: not an open file object", name)
            continue

        fields.append(_file_field(name, file_object))

    return encode_multipart_formdata(fields, boundary=boundary)


class RequestBuilder:
    """
    Builds signed multipart requests for service calls.

    Signing is enabled only when both the client ID and the shared secret
    are set.
    """

    def __init__(
        self,
        base_url: str,
        api_version: str = DEFAULT_API_VERSION,
        client_id: Optional[str] = None,
        shared_secret: Optional[str] = None
    ):
        self.base_url = base_url
        self.api_version = api_version
        self.client_id = client_id
        self.shared_secret = shared_secret

    def get_service_url(self, service_name: str, action: str) -> str:
        """Return the full API URL for the service and action."""
        return build_service_url(self.base_url, self.api_version, service_name, action)

    def build(
        self,
        service_name: str,
        action: str,
        parameters: Optional[Mapping[str, Any]] = None,
        files: Optional[Mapping[str, Any]] = None,
        boundary: Optional[str] = None
    ) -> SignedRequest:
        """
        Build the request for a service call.

        Args:
            service_name: Name of the API service
            action: Action of the service
            parameters: Scalar parameters
            files: File objects to upload
            boundary: Multipart boundary, random when omitted

        Returns:
            SignedRequest holding URL, headers and body
        """
        parameters = parameters or {}
        files = files or {}

        url = self.get_service_url(service_name, action)
        headers = build_auth_headers(
            self.client_id,
            self.shared_secret,
            self.api_version,
            url,
            parameters
        )
        body, content_type = build_multipart_body(parameters, files, boundary=boundary)
        headers['Content-Type'] = content_type

        return SignedRequest(url=url, headers=MappingProxyType(headers), body=body)
