"""
Response payloads and session state for the API Platform client.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _require_object(data: Any, name: str) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{name} must be a JSON object, got {type(data).__name__}")
    return data


def _str_field(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _int_field(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass but not a JSON number
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class ClientConfig:
    """Endpoint and long-lived client credentials."""
    endpoint_url: str
    client_id: str
    client_token_block: str

    def __post_init__(self):
        object.__setattr__(self, 'endpoint_url', self.endpoint_url.rstrip('/'))


@dataclass(frozen=True)
class TokenResponse:
    """Body of a successful token request."""
    access_token: str = ""
    token_type: str = ""
    expires_in: int = 0
    scope: str = ""
    node: str = ""
    jti: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "TokenResponse":
        data = _require_object(data, "token response")
        return cls(
            access_token=_str_field(data, 'access_token'),
            token_type=_str_field(data, 'token_type'),
            expires_in=_int_field(data, 'expires_in'),
            scope=_str_field(data, 'scope'),
            node=_str_field(data, 'node'),
            jti=_str_field(data, 'jti'),
        )


@dataclass(frozen=True)
class SignBlockResHeader:
    rtn_code: str = ""
    rtn_msg: str = ""


@dataclass(frozen=True)
class SignBlockResponse:
    """
    Body of a successful sign block request.

    The ``ResHeader`` part is kept as returned. A 200 response whose header
    reports a failure code is not told apart from a real success.
    """
    res_header: SignBlockResHeader
    sign_block: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "SignBlockResponse":
        data = _require_object(data, "sign block response")
        header = _require_object(data.get('ResHeader'), "ResHeader")
        body = _require_object(data.get('Res_getSignBlock'), "Res_getSignBlock")
        return cls(
            res_header=SignBlockResHeader(
                rtn_code=_str_field(header, 'rtnCode'),
                rtn_msg=_str_field(header, 'rtnMsg'),
            ),
            sign_block=_str_field(body, 'signBlock'),
        )


@dataclass
class SessionState:
    """
    Runtime secrets of one client session.

    Owned by a single client instance. Nothing here is synchronized, share
    the owning client across threads only behind an external lock.
    """
    access_token: Optional[str] = None
    sign_block: Optional[str] = None

    @property
    def has_token(self) -> bool:
        return bool(self.access_token)

    @property
    def has_sign_block(self) -> bool:
        return bool(self.sign_block)

    @property
    def is_authenticated(self) -> bool:
        return self.has_token and self.has_sign_block

    def reset(self):
        self.access_token = None
        self.sign_block = None
