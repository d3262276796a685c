"""
Constants for the API Platform client library.
"""

# Gateway endpoints, relative to the configured endpoint URL
TOKEN_PATH = "/tsmpaa/oauth/token"
SIGN_BLOCK_PATH = "/tsmpaa/getSignBlock"

# HTTP Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_SIGN_CODE = "SignCode"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
GRANT_TYPE_CLIENT_CREDENTIALS = "client_credentials"

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': None,     # HTTP timeout in seconds, None leaves it to the transport
    'user_agent': None,
}
