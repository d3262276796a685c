"""
API Platform client.

This module implements the gateway handshake (bearer token, then sign
block) and dispatch of SHA-256 signed JSON requests.
"""

import base64
import hashlib
import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import requests
from requests.structures import CaseInsensitiveDict

from .constants import (
    TOKEN_PATH,
    SIGN_BLOCK_PATH,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_SIGN_CODE,
    FORM_CONTENT_TYPE,
    GRANT_TYPE_CLIENT_CREDENTIALS,
    DEFAULT_CONFIG
)
from .exceptions import (
    InvalidCredentialError,
    ClientUnauthorizedError,
    ApiPlatformGeneralError,
    ConfigurationError
)
from .payloads import ClientConfig, SessionState, TokenResponse, SignBlockResponse

logger = logging.getLogger(__name__)


def basic_auth_credential(client_id: str, client_token_block: str) -> str:
    """
    Build the HTTP Basic credential for the token endpoint.

    Args:
        client_id: Client identifier
        client_token_block: Client secret

    Returns:
        base64 of ``client_id:client_token_block``
    """
    credential = f"{client_id}:{client_token_block}"
    return base64.b64encode(credential.encode('utf-8')).decode('ascii')


class ApiPlatformClient:
    """
    Client for the API Platform gateway.

    A business request may only be sent once both an access token and a
    sign block have been acquired. Tokens expire after about a day and are
    never renewed automatically, call :meth:`request_access_token` again.

    Instances are not thread-safe.
    """

    def __init__(self, endpoint_url: str, client_id: str, client_token_block: str, **config):
        """
        Initialize API Platform client.

        Args:
            endpoint_url: Base URL of the API Platform (test or production)
            client_id: Client identifier
            client_token_block: Client secret
            **config: Configuration options (timeout, user_agent)
        """
        self.client_config = ClientConfig(endpoint_url, client_id, client_token_block)
        self.state = SessionState()
        self.last_token_response: Optional[TokenResponse] = None
        self.last_sign_block_response: Optional[SignBlockResponse] = None

        self.config = {**DEFAULT_CONFIG, **config}
        self._validate_config()

        self.session = requests.Session()
        if self.config['user_agent']:
            self.session.headers['User-Agent'] = self.config['user_agent']

    def _validate_config(self):
        """Validate client configuration."""
        timeout = self.config['timeout']
        if timeout is not None and timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    @property
    def endpoint_url(self) -> str:
        return self.client_config.endpoint_url

    @property
    def access_token(self) -> Optional[str]:
        return self.state.access_token

    @property
    def sign_block(self) -> Optional[str]:
        return self.state.sign_block

    def _url(self, path: str) -> str:
        return urljoin(self.endpoint_url + '/', path.lstrip('/'))

    def _check_auth_response(self, response: requests.Response, what: str):
        """Map a non-200 answer from an auth endpoint to a client error."""
        if response.status_code == 200:
            return
        if response.status_code == 401:
            logger.warning("API Platform rejected %s request: invalid credentials", what)
            raise InvalidCredentialError()
        logger.warning("API Platform %s request failed with status %d", what, response.status_code)
        raise ApiPlatformGeneralError(
            f"api platform general error (HTTP {response.status_code})",
            status_code=response.status_code
        )

    def request_access_token(self) -> str:
        """
        Request an access token with the client credentials grant.

        Returns:
            The access token, also kept in the session state

        Raises:
            InvalidCredentialError: On HTTP 401
            ApiPlatformGeneralError: On any other non-200 status
        """
        headers = {
            HEADER_CONTENT_TYPE: FORM_CONTENT_TYPE,
            HEADER_AUTHORIZATION: "Basic " + basic_auth_credential(
                self.client_config.client_id,
                self.client_config.client_token_block
            ),
        }
        payload = {'grant_type': GRANT_TYPE_CLIENT_CREDENTIALS}

        logger.debug("Requesting access token for client %s", self.client_config.client_id)
        response = self.session.request(
            'POST',
            self._url(TOKEN_PATH),
            headers=headers,
            data=payload,
            timeout=self.config['timeout']
        )
        self._check_auth_response(response, "access token")

        token_response = TokenResponse.from_dict(response.json())
        self.last_token_response = token_response
        self.state.access_token = token_response.access_token
        logger.debug("Access token acquired (expires_in=%s)", token_response.expires_in)
        return self.state.access_token

    def request_sign_block(self) -> str:
        """
        Request the sign block used to sign every request body.

        Returns:
            The sign block, also kept in the session state

        Raises:
            ClientUnauthorizedError: If no access token was acquired yet
            InvalidCredentialError: On HTTP 401
            ApiPlatformGeneralError: On any other non-200 status
        """
        if not self.state.has_token:
            raise ClientUnauthorizedError()

        headers = {HEADER_AUTHORIZATION: "Bearer " + self.state.access_token}

        logger.debug("Requesting sign block")
        response = self.session.request(
            'GET',
            self._url(SIGN_BLOCK_PATH),
            headers=headers,
            timeout=self.config['timeout']
        )
        self._check_auth_response(response, "sign block")

        sign_block_response = SignBlockResponse.from_dict(response.json())
        self.last_sign_block_response = sign_block_response
        self.state.sign_block = sign_block_response.sign_block
        logger.debug("Sign block acquired (rtnCode=%s)", sign_block_response.res_header.rtn_code)
        return self.state.sign_block

    def authenticate(self) -> SessionState:
        """Acquire an access token and then a sign block."""
        self.request_access_token()
        self.request_sign_block()
        return self.state

    def sign_payload(self, data: bytes) -> str:
        """
        Sign data with the current sign block.

        The signature is the hex SHA-256 of the sign block followed by the
        data. No check is made here, without a sign block the data is
        hashed alone.
        """
        sign_block = (self.state.sign_block or "").encode('utf-8')
        return hashlib.sha256(sign_block + data).hexdigest()

    def _prepare_request_body(self, json_payload: Any) -> bytes:
        """Serialize a JSON payload the way it is signed and sent."""
        return json.dumps(json_payload, separators=(',', ':'), allow_nan=False).encode('utf-8')

    def send_request(self, endpoint: str, method: str,
                     headers: Optional[Dict[str, str]] = None,
                     json_payload: Any = None) -> requests.Response:
        """
        Send a signed request to the API Platform.

        Args:
            endpoint: Absolute URL or path relative to the endpoint URL
            method: HTTP method
            headers: Extra headers, applied last so they override
                ``Authorization`` and ``SignCode``
            json_payload: Value serialized as the JSON body

        Returns:
            requests.Response object, whatever its status

        Raises:
            ClientUnauthorizedError: If the token or the sign block is missing
        """
        if not self.state.has_token:
            raise ClientUnauthorizedError()
        if not self.state.has_sign_block:
            raise ClientUnauthorizedError()

        body = self._prepare_request_body(json_payload)
        signature = self.sign_payload(body)

        request_headers = CaseInsensitiveDict()
        request_headers[HEADER_AUTHORIZATION] = "Bearer " + self.state.access_token
        request_headers[HEADER_SIGN_CODE] = signature
        if headers:
            request_headers.update(headers)

        url = self._url(endpoint)
        logger.debug("Sending signed %s request to %s", method, url)
        return self.session.request(
            method,
            url,
            headers=request_headers,
            data=body,
            timeout=self.config['timeout']
        )

    def get(self, endpoint: str, headers: Optional[Dict[str, str]] = None) -> requests.Response:
        """Send signed GET request."""
        return self.send_request(endpoint, 'GET', headers)

    def post(self, endpoint: str, json=None, headers: Optional[Dict[str, str]] = None) -> requests.Response:
        """Send signed POST request."""
        return self.send_request(endpoint, 'POST', headers, json)

    def put(self, endpoint: str, json=None, headers: Optional[Dict[str, str]] = None) -> requests.Response:
        """Send signed PUT request."""
        return self.send_request(endpoint, 'PUT', headers, json)

    def delete(self, endpoint: str, headers: Optional[Dict[str, str]] = None) -> requests.Response:
        """Send signed DELETE request."""
        return self.send_request(endpoint, 'DELETE', headers)

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
