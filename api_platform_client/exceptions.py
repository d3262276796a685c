"""
Custom exceptions for API Platform client library.
"""

import enum


class ErrorKind(enum.Enum):
    """Closed set of failures raised by the client itself."""
    INVALID_CREDENTIAL = "invalid_credential"
    CLIENT_UNAUTHORIZED = "client_unauthorized"
    API_PLATFORM_GENERAL_ERROR = "api_platform_general_error"
    CONFIGURATION = "configuration"


class ApiPlatformClientError(Exception):
    """Base exception for API Platform client errors."""
    kind = None


class InvalidCredentialError(ApiPlatformClientError):
    """Raised when an auth endpoint rejects the client credentials (HTTP 401)."""
    kind = ErrorKind.INVALID_CREDENTIAL

    def __init__(self, message="invalid client credentials, check client_id and client_token_block"):
        super().__init__(message)


class ClientUnauthorizedError(ApiPlatformClientError):
    """Raised when a call needs a token or sign block that was not acquired yet."""
    kind = ErrorKind.CLIENT_UNAUTHORIZED

    def __init__(self, message="client unauthorized"):
        super().__init__(message)


class ApiPlatformGeneralError(ApiPlatformClientError):
    """Raised when an auth endpoint answers with any other non-200 status."""
    kind = ErrorKind.API_PLATFORM_GENERAL_ERROR

    def __init__(self, message="api platform general error", status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(ApiPlatformClientError):
    """Raised when client configuration is invalid."""
    kind = ErrorKind.CONFIGURATION
