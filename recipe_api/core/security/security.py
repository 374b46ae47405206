# recipe_api/core/security/security.py
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from recipe_api.api.dependencies.settings import get_app_settings
from recipe_api.config.config_settings.config_schema import AppConfig
from recipe_api.core.exceptions import (
    InvalidTokenException,
    JwtSecretMissingException,
    MissingTokenException,
)
from recipe_api.schemas.users.user_context import UserContext
from recipe_api.utils.jwt_utils import decode_token_with

# auto_error=False：缺少令牌时由我们自己抛 MissingTokenException，保持统一的错误体
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: AppConfig = Depends(get_app_settings),
) -> UserContext:
    """
    鉴权闸门：只校验 Authorization: Bearer <token> 的签名和有效期，不查库、无副作用。
    校验顺序：缺少令牌 -> 缺少密钥配置 -> 令牌无效。
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenException()

    security = settings.security_settings
    if not security.secret:
        raise JwtSecretMissingException()

    payload = decode_token_with(credentials.credentials, security)

    try:
        user_id = UUID(str(payload["sub"]))
    except (KeyError, ValueError):
        raise InvalidTokenException()

    return UserContext(
        id=user_id,
        username=payload.get("username"),
        email=payload.get("email"),
        jti=payload.get("jti"),
    )
