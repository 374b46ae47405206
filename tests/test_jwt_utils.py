from datetime import timedelta

import jwt
import pytest

from recipe_api.config.config_settings.config_schema import SecuritySettings
from recipe_api.core.exceptions import (
    InvalidTokenException,
    JwtSecretMissingException,
    TokenExpiredException,
)
from recipe_api.utils.jwt_utils import (
    ACCESS_TOKEN_TTL,
    create_access_token,
    decode_token,
    decode_token_with,
    issue_token_for,
)

SECRET = "unit-test-secret-with-enough-bytes-for-hs256"
CLAIMS = {"sub": "5f0c3a52-8a4c-4d6c-9d43-0e6a8c1b2f11", "username": "alice", "email": "alice@recipes.io"}


def test_issue_and_decode():
    token, expires, jti = create_access_token(CLAIMS, SECRET)
    payload = decode_token(token, SECRET)

    assert expires == ACCESS_TOKEN_TTL == timedelta(hours=1)
    assert payload["sub"] == CLAIMS["sub"]
    assert payload["username"] == "alice"
    assert payload["email"] == "alice@recipes.io"
    assert payload["jti"] == jti
    assert payload["exp"] - payload["iat"] == 3600


def test_wrong_secret_rejected():
    token, _, _ = create_access_token(CLAIMS, SECRET)
    with pytest.raises(InvalidTokenException):
        decode_token(token, "another-secret-with-enough-bytes-for-hs256")


def test_expired_token_rejected():
    token, _, _ = create_access_token(CLAIMS, SECRET, expires_delta=timedelta(seconds=-30))
    with pytest.raises(TokenExpiredException) as exc_info:
        decode_token(token, SECRET)
    # 过期也属于无效令牌
    assert isinstance(exc_info.value, InvalidTokenException)
    assert exc_info.value.message == "Invalid token"


def test_malformed_token_rejected():
    with pytest.raises(InvalidTokenException):
        decode_token("not.a.jwt", SECRET)


def test_missing_subject_rejected():
    token = jwt.encode(
        {"username": "alice", "jti": "x", "exp": 9999999999, "iss": "recipe-api", "type": "access"},
        SECRET,
        algorithm="HS256",
    )
    with pytest.raises(InvalidTokenException):
        decode_token(token, SECRET)


def test_wrong_issuer_rejected():
    token, _, _ = create_access_token(CLAIMS, SECRET, issuer="someone-else")
    with pytest.raises(InvalidTokenException):
        decode_token(token, SECRET)


def test_missing_secret():
    with pytest.raises(JwtSecretMissingException):
        create_access_token(CLAIMS, "")
    with pytest.raises(JwtSecretMissingException):
        decode_token("whatever", None)


def test_settings_driven_helpers():
    security = SecuritySettings(secret=SECRET, token_expire_minutes=5, jwt_issuer="recipes-test")
    token, expires, _ = issue_token_for(CLAIMS, security)
    assert expires == timedelta(minutes=5)
    assert decode_token_with(token, security)["iss"] == "recipes-test"
