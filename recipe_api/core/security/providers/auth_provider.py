import abc
from datetime import timedelta
from typing import TypeVar, Generic, Optional

from recipe_api.config.config_settings.config_schema import SecuritySettings
from recipe_api.infra.db.repository_factory_auto import RepositoryFactory
from recipe_api.models.user import User
from recipe_api.utils.jwt_utils import issue_token_for

T = TypeVar("T")  # 泛型参数：用于接受各种认证请求数据


class AuthProvider(Generic[T], metaclass=abc.ABCMeta):
    """
    抽象认证提供器基类，用于定义统一认证接口与通用工具函数。
    子类如 CredentialsProvider 应继承此类。
    """

    def __init__(self, repo_factory: RepositoryFactory, security: SecuritySettings, data: T) -> None:
        self.db = repo_factory
        self.security = security
        self.data = data
        self._cached_user: Optional[User] = None

    def get_access_token(self, user: User) -> tuple[str, timedelta]:
        """
        签发 access token，声明里带上 sub / username / email，jti 由 jwt_utils 生成。
        """
        payload = {
            "sub": str(user.id),
            "username": user.username,
            "email": user.email,
        }
        token, expires, _jti = issue_token_for(payload, self.security)
        return token, expires

    async def get_user_by_identity(self, identity: str) -> Optional[User]:
        """
        获取用户（支持缓存），identity 可以是用户名也可以是邮箱。
        """
        if self._cached_user:
            return self._cached_user

        self._cached_user = await self.db.user.get_by_identity(identity)
        return self._cached_user

    async def get_user(self) -> Optional[User]:
        return self._cached_user

    @abc.abstractmethod
    async def authenticate(self) -> Optional[tuple[str, timedelta]]:
        """
        子类必须实现的认证方法。返回 (token, expires) 或 None 表示认证失败。
        """
        raise NotImplementedError("Subclasses must implement this method.")
