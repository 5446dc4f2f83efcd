#!/usr/bin/env python3
"""
Basic usage examples for the Tulip API client library.

This script demonstrates how to call Tulip API services with signed
requests and how API errors surface as exceptions.
"""

import logging
import sys

from tulip_client import (
    TulipClient,
    TulipClientError,
    NotAuthorizedError,
    NonExistingObjectError,
    ResponseParser
)


def main():
    """Run basic usage examples."""

    # Server configuration
    tulip_url = "https://api.example.com"
    client_id = "client1"
    shared_secret = "python-client-demo-secret"

    logging.basicConfig(level=logging.DEBUG)

    print("=== Tulip API Client Basic Usage Examples ===\n")

    # Create client
    print("1. Creating Tulip client...")
    client = TulipClient(tulip_url, "1.1", client_id, shared_secret, timeout=10)
    print(f"   Client created for: {tulip_url}")
    print(f"   Client id: {client_id}")
    print(f"   Shared secret: {shared_secret[:8]}...\n")

    with client:
        try:
            # Example 1: List contacts
            print("2. Listing contacts...")
            url = client.get_service_url("contact", "list")
            print(f"   URL: {url}")
            response = client.call_service("contact", "list", {"offset": 0, "limit": 10})
            print(f"   ✓ Response code: {ResponseParser(response).response_code}")
            print()

            # Example 2: Save a contact, the id is part of the signature
            print("3. Saving a contact...")
            client.call_service("contact", "save", {"id": 1, "firstname": "Jane", "lastname": "Doe"})
            print("   ✓ Contact saved")
            print()

            # Example 3: Upload a file
            print("4. Uploading a photo...")
            with open(__file__, "rb") as attachment:
                client.call_service("contact", "save", {"id": 1}, {"photo": attachment})
            print("   ✓ Photo uploaded")
            print()

            # Example 4: Missing object
            print("5. Requesting a contact that does not exist...")
            try:
                client.call_service("contact", "detail", {"id": 999999})
            except NonExistingObjectError as e:
                print(f"   ✓ Got expected error: {e}")
            print()

        except NotAuthorizedError as e:
            print(f"   ✗ Not authorized: {e}")
            sys.exit(1)
        except TulipClientError as e:
            print(f"   ✗ Tulip client error: {e}")
            sys.exit(1)

    print("=== Examples completed ===")


if __name__ == "__main__":
    main()
