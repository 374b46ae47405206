# recipe_api/utils/jwt_utils.py

from datetime import datetime, timedelta, UTC
from typing import Tuple
import uuid

import jwt
from jwt import ExpiredSignatureError, PyJWTError

from recipe_api.config.config_settings.config_schema import SecuritySettings
from recipe_api.core.exceptions import (
    InvalidTokenException,
    TokenExpiredException,
    JwtSecretMissingException,
)

ALGORITHM = "HS256"
ISSUER = "recipe-api"
ACCESS_TOKEN_TTL = timedelta(hours=1)
TOKEN_TYPE = "access"


# =====================
# Token 生成
# =====================

def create_access_token(
    data: dict,
    secret: str,
    expires_delta: timedelta = ACCESS_TOKEN_TTL,
    algorithm: str = ALGORITHM,
    issuer: str = ISSUER,
) -> Tuple[str, timedelta, str]:
    """
    返回 (token, expires_delta, jti)

    data 里放 sub / username / email 等业务声明，
    exp、iat、nbf、iss、jti、type 由这里统一补齐。
    """
    if not secret:
        raise JwtSecretMissingException()

    now = datetime.now(UTC)
    jti = str(uuid.uuid4())
    to_encode = {
        **data,
        "exp": now + expires_delta,
        "iat": now,
        "nbf": now,
        "iss": issuer,
        "jti": jti,
        "type": TOKEN_TYPE,
    }
    encoded = jwt.encode(to_encode, secret, algorithm=algorithm)
    return encoded, expires_delta, jti


# =====================
# Token 解码
# =====================

def decode_token(
    token: str,
    secret: str,
    algorithm: str = ALGORITHM,
    issuer: str = ISSUER,
) -> dict:
    """
    校验签名、过期时间和签发者，返回载荷。
    无状态校验，没有吊销列表：令牌在过期前一直有效。
    """
    if not secret:
        raise JwtSecretMissingException()
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            issuer=issuer,
            options={"require": ["exp", "sub", "jti"]},
        )
    except ExpiredSignatureError:
        raise TokenExpiredException()
    except PyJWTError:
        raise InvalidTokenException()

    validate_token_type(payload, TOKEN_TYPE)
    if not payload.get("sub"):
        raise InvalidTokenException()
    return payload


# =====================
# Token 类型验证
# =====================

def validate_token_type(payload: dict, expected: str):
    if payload.get("type") != expected:
        raise InvalidTokenException()


# =====================
# 按配置签发/校验
# =====================

def issue_token_for(claims: dict, security: SecuritySettings) -> Tuple[str, timedelta, str]:
    return create_access_token(
        claims,
        secret=security.secret,
        expires_delta=timedelta(minutes=security.token_expire_minutes),
        algorithm=security.jwt_algorithm,
        issuer=security.jwt_issuer,
    )


def decode_token_with(token: str, security: SecuritySettings) -> dict:
    return decode_token(
        token,
        secret=security.secret,
        algorithm=security.jwt_algorithm,
        issuer=security.jwt_issuer,
    )
