#!/usr/bin/env python3
"""
Basic usage example for the API Platform client library.

Performs the gateway handshake and sends one signed request. Endpoint and
credentials are read from the API_PLATFORM_URL, API_PLATFORM_CLIENT_ID and
API_PLATFORM_TOKEN_BLOCK environment variables.
"""

import logging
import os
import sys

from api_platform_client import ApiPlatformClient, ApiPlatformClientError


def main():
    """Run basic usage example."""
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    endpoint_url = os.environ.get("API_PLATFORM_URL", "http://localhost:8080")
    client_id = os.environ.get("API_PLATFORM_CLIENT_ID", "client1")
    token_block = os.environ.get("API_PLATFORM_TOKEN_BLOCK", "")

    print("=== API Platform Client Usage Example ===\n")

    with ApiPlatformClient(endpoint_url, client_id, token_block, timeout=30) as client:
        try:
            print("1. Requesting access token...")
            client.request_access_token()
            token_info = client.last_token_response
            print(f"   ✓ Token acquired, type={token_info.token_type} expires_in={token_info.expires_in}s\n")

            print("2. Requesting sign block...")
            client.request_sign_block()
            header = client.last_sign_block_response.res_header
            print(f"   ✓ Sign block acquired (rtnCode={header.rtn_code}, rtnMsg={header.rtn_msg})\n")

            print("3. Signing a payload...")
            print(f"   SignCode: {client.sign_payload(b'{}')}\n")

            print("4. Sending signed request...")
            response = client.post("/api/v1/echo", json={"message": "hello"})
            print(f"   Status: {response.status_code}")
            print(f"   Body: {response.text[:200]}")
        except ApiPlatformClientError as e:
            print(f"   ✗ {e.kind.value}: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
