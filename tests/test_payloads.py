"""
Tests for response payload parsing and session state.
"""

import pytest

from api_platform_client import (
    ClientConfig,
    SessionState,
    TokenResponse,
    SignBlockResponse
)


class TestTokenResponse:

    def test_from_dict(self):
        response = TokenResponse.from_dict({
            "access_token": "tok123",
            "token_type": "bearer",
            "expires_in": 86399,
            "scope": "read write",
            "node": "node-1",
            "jti": "a1b2c3",
        })

        assert response.access_token == "tok123"
        assert response.token_type == "bearer"
        assert response.expires_in == 86399
        assert response.scope == "read write"
        assert response.node == "node-1"
        assert response.jti == "a1b2c3"

    def test_from_dict_missing_fields(self):
        response = TokenResponse.from_dict({"access_token": "tok123"})

        assert response.access_token == "tok123"
        assert response.token_type == ""
        assert response.expires_in == 0

    def test_from_dict_not_an_object(self):
        with pytest.raises(ValueError):
            TokenResponse.from_dict(["tok123"])

    def test_from_dict_null_fields(self):
        response = TokenResponse.from_dict({"access_token": "tok123", "scope": None, "expires_in": None})

        assert response.scope == ""
        assert response.expires_in == 0

    @pytest.mark.parametrize("field,value", [
        ("access_token", 12345),
        ("token_type", True),
        ("scope", ["read"]),
        ("node", {"id": 1}),
        ("jti", 1.5),
        ("expires_in", "86399"),
        ("expires_in", 86399.5),
        ("expires_in", True),
    ])
    def test_from_dict_wrong_field_type(self, field, value):
        with pytest.raises(ValueError, match=field):
            TokenResponse.from_dict({"access_token": "tok123", field: value})


class TestSignBlockResponse:

    def test_from_dict(self):
        response = SignBlockResponse.from_dict({
            "ResHeader": {"rtnCode": "1200", "rtnMsg": "Success"},
            "Res_getSignBlock": {"signBlock": "sb456"},
        })

        assert response.sign_block == "sb456"
        assert response.res_header.rtn_code == "1200"
        assert response.res_header.rtn_msg == "Success"

    def test_from_dict_without_header(self):
        response = SignBlockResponse.from_dict({"Res_getSignBlock": {"signBlock": "sb456"}})

        assert response.sign_block == "sb456"
        assert response.res_header.rtn_code == ""

    def test_from_dict_empty(self):
        assert SignBlockResponse.from_dict({}).sign_block == ""

    def test_from_dict_nested_not_an_object(self):
        with pytest.raises(ValueError):
            SignBlockResponse.from_dict({"Res_getSignBlock": "sb456"})

    def test_from_dict_empty_string_section(self):
        with pytest.raises(ValueError):
            SignBlockResponse.from_dict({"ResHeader": "", "Res_getSignBlock": {"signBlock": "sb456"}})

    @pytest.mark.parametrize("body", [
        {"Res_getSignBlock": {"signBlock": 456}},
        {"ResHeader": {"rtnCode": 1200}, "Res_getSignBlock": {"signBlock": "sb456"}},
        {"ResHeader": {"rtnMsg": False}, "Res_getSignBlock": {"signBlock": "sb456"}},
    ])
    def test_from_dict_wrong_field_type(self, body):
        with pytest.raises(ValueError):
            SignBlockResponse.from_dict(body)


class TestSessionState:

    def test_lifecycle(self):
        state = SessionState()
        assert state.has_token is False
        assert state.is_authenticated is False

        state.access_token = "tok123"
        assert state.has_token is True
        assert state.is_authenticated is False

        state.sign_block = "sb456"
        assert state.is_authenticated is True

        state.reset()
        assert state.access_token is None
        assert state.sign_block is None

    def test_empty_strings_count_as_absent(self):
        state = SessionState(access_token="", sign_block="")

        assert state.has_token is False
        assert state.has_sign_block is False


class TestClientConfig:

    def test_strips_trailing_slash(self):
        config = ClientConfig("https://gateway.example.com/", "abc", "xyz")

        assert config.endpoint_url == "https://gateway.example.com"

    def test_immutable(self):
        config = ClientConfig("https://gateway.example.com", "abc", "xyz")

        with pytest.raises(AttributeError):
            config.client_id = "other"
