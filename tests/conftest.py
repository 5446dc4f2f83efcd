"""
Shared fixtures for Tulip client tests.
"""

import pathlib

import pytest
import requests

RESOURCES = pathlib.Path(__file__).parent / "resources"

SUCCESS_BODY = (
    "<?xml version='1.0' encoding='UTF-8'?>"
    "<response code='1000'><result offset='0' limit='0' total='0'/></response>"
)


def make_response(body, status_code=200):
    """Create a requests.Response with the given body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode('utf-8') if isinstance(body, str) else body
    return response


def error_body(code, message):
    return (
        "<?xml version='1.0' encoding='UTF-8'?>"
        f"<response code='{code}'><error>{message}</error>"
        "<result offset='0' limit='0' total='0'/></response>"
    )


@pytest.fixture
def upload_file():
    """Open the upload test file."""
    with open(RESOURCES / "fileupload-test.txt", "rb") as f:
        yield f
