"""
API Platform Client Library

A Python client for the API Platform gateway. It performs the two-step
handshake (access token, then sign block) and sends SHA-256 signed
requests.

Example usage:
    from api_platform_client import ApiPlatformClient

    client = ApiPlatformClient("https://gateway.example.com", "client-id", "token-block")
    client.request_access_token()
    client.request_sign_block()
    response = client.send_request("/api/v1/orders", "POST", json_payload={"id": 1})
"""

from .client import ApiPlatformClient, basic_auth_credential
from .exceptions import (
    ErrorKind,
    ApiPlatformClientError,
    InvalidCredentialError,
    ClientUnauthorizedError,
    ApiPlatformGeneralError,
    ConfigurationError
)
from .payloads import (
    ClientConfig,
    SessionState,
    TokenResponse,
    SignBlockResHeader,
    SignBlockResponse
)
from .constants import (
    TOKEN_PATH,
    SIGN_BLOCK_PATH,
    HEADER_SIGN_CODE,
    DEFAULT_CONFIG
)

__version__ = "1.0.0"
__all__ = [
    "ApiPlatformClient",
    "basic_auth_credential",
    "ErrorKind",
    "ApiPlatformClientError",
    "InvalidCredentialError",
    "ClientUnauthorizedError",
    "ApiPlatformGeneralError",
    "ConfigurationError",
    "ClientConfig",
    "SessionState",
    "TokenResponse",
    "SignBlockResHeader",
    "SignBlockResponse",
    "TOKEN_PATH",
    "SIGN_BLOCK_PATH",
    "HEADER_SIGN_CODE",
    "DEFAULT_CONFIG"
]
