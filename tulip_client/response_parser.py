"""
Response parsing for the Tulip API.

The API reports its outcome in the XML body, for example::

    <response code="1004"><error>Missing parameter: id</error>...</response>

Only `/response/@code` and `/response/error` are read. A body that is not
well-formed XML is treated as an empty document, which reads as response
code 0 without an error message.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional, Union

from lxml import etree

from .constants import ResponseCode

logger = logging.getLogger(__name__)

_NOT_PARSED = object()
_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*")


@dataclass(frozen=True)
class ParsedResponse:
    """Outcome read from a response body."""

    code: int
    error_message: str


def parse_xml(raw_body: Union[bytes, str, None]) -> Optional[etree._Element]:
    """
    Parse a response body as XML.

    Never raises on bad input: empty or malformed bodies return None.

    Args:
        raw_body: Response body

    Returns:
        The root element, or None when the body is not well-formed XML
    """
    if not raw_body:
        return None
    if isinstance(raw_body, str):
        raw_body = raw_body.encode('utf-8')

    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        return etree.fromstring(raw_body, parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        logger.debug("Discarding malformed XML response body: %s", e)
        return None


def get_response_code(document: Optional[etree._Element]) -> int:
    """Return the integer value of `/response/@code`, or 0."""
    if document is None:
        return 0

    values = document.xpath('/response/@code')
    if not values:
        return 0
    if not _INTEGER.fullmatch(values[0]):
        return 0
    return int(values[0])


def get_error_message(document: Optional[etree._Element]) -> str:
    """Return the text of the first `/response/error` node, or ""."""
    if document is None:
        return ""

    nodes = document.xpath('/response/error')
    if not nodes:
        return ""
    return "".join(nodes[0].itertext())


def classify(code: int) -> ResponseCode:
    """Map a response code to its ResponseCode, UNKNOWN_ERROR when unknown."""
    try:
        return ResponseCode(code)
    except ValueError:
        return ResponseCode.UNKNOWN_ERROR


def read_body(response: Any) -> Union[bytes, str, None]:
    """Return the body of a transport response."""
    if hasattr(response, 'get_body'):
        return response.get_body()
    return response.content


class ResponseParser:
    """
    Reads the response code and error message from an API response.

    The body is read and parsed once, on first access of any accessor.
    """

    def __init__(self, response: Any):
        self.response = response
        self._document = _NOT_PARSED

    @property
    def document(self) -> Optional[etree._Element]:
        """The parsed root element, None when the body is not XML."""
        if self._document is _NOT_PARSED:
            self._document = parse_xml(read_body(self.response))
        return self._document

    @property
    def response_code(self) -> int:
        return get_response_code(self.document)

    @property
    def error_message(self) -> str:
        return get_error_message(self.document)

    @property
    def outcome(self) -> ResponseCode:
        return classify(self.response_code)

    def parse(self) -> ParsedResponse:
        return ParsedResponse(code=self.response_code, error_message=self.error_message)
