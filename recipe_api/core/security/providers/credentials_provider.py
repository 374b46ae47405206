from datetime import timedelta
from typing import Optional

from recipe_api.core.logger import get_logger
from recipe_api.core.security.hasher import get_hasher
from recipe_api.core.security.providers.auth_provider import AuthProvider
from recipe_api.schemas.users.user_schemas import CredentialsRequest

logger = get_logger("credentials_provider")


class CredentialsProvider(AuthProvider[CredentialsRequest]):
    """用户名/邮箱 + 密码登录"""

    async def authenticate(self) -> Optional[tuple[str, timedelta]]:
        hasher = get_hasher(self.security.bcrypt_rounds)
        user = await self.get_user_by_identity(self.data.identifier)

        if not user:
            # 用户不存在时也跑一次 bcrypt，让两种失败路径耗时一致
            hasher.verify_dummy(self.data.password)
            logger.info("登录失败：账号不存在")
            return None

        if not hasher.verify(self.data.password, user.hashed_password):
            logger.info(f"登录失败：密码错误 user_id={user.id}")
            return None

        return self.get_access_token(user)
