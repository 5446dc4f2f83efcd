"""
HTTP transport used to send signed requests.

Any object with a `send(request)` method can be used as transport. Failures
must be raised as `requests.RequestException`; when the server did answer,
the exception carries the response in its `response` attribute.
"""

import logging
from typing import Optional, Protocol

import requests

from .constants import DEFAULT_CONFIG
from .request_builder import SignedRequest

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Sends a SignedRequest and returns the response."""

    def send(self, request: SignedRequest) -> requests.Response:
        ...


class RequestsTransport:
    """
    Transport backed by a `requests.Session`.

    Non-2xx responses are raised as `requests.HTTPError` carrying the
    response, so the API error body can still be read by the caller.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = DEFAULT_CONFIG['timeout']):
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(self, request: SignedRequest) -> requests.Response:
        prepared = self.session.prepare_request(
            requests.Request(
                request.method,
                request.url,
                headers=dict(request.headers),
                data=request.body
            )
        )

        logger.debug("Sending %s %s (%d bytes)", request.method, request.url, len(request.body))
        response = self.session.send(prepared, timeout=self.timeout)
        logger.debug("Received HTTP %s from %s", response.status_code, request.url)

        response.raise_for_status()
        return response

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()
