# recipe_api/services/auth/auth_service.py
from sqlalchemy.exc import IntegrityError

from recipe_api.config.config_settings.config_schema import AppConfig
from recipe_api.core.exceptions import (
    InvalidCredentialsException,
    JwtSecretMissingException,
    UserAlreadyExistsException,
)
from recipe_api.core.security.hasher import get_hasher
from recipe_api.core.security.providers import CredentialsProvider
from recipe_api.infra.db.repository_factory_auto import RepositoryFactory
from recipe_api.models.user import User
from recipe_api.repo.crud.users.user_repo import UserRepository
from recipe_api.schemas.users.user_schemas import CredentialsRequest, UserCreate
from recipe_api.services._base_service import BaseService


class AuthService(BaseService):
    """注册与登录。"""

    def __init__(self, factory: RepositoryFactory, settings: AppConfig):
        super().__init__(settings)
        self.factory = factory
        self.user_repo: UserRepository = factory.get_repo_by_type(UserRepository)

    async def register_user(self, user_in: UserCreate) -> User:
        """
        创建账号，用户名或邮箱任意一个已被占用都返回 409。
        先查重再插入；并发注册漏过查重时由唯一索引兜底，同样转成 409。
        """
        existing = await self.user_repo.get_by_username_or_email(user_in.username, user_in.email)
        if existing:
            raise UserAlreadyExistsException()

        hasher = get_hasher(self.settings.security_settings.bcrypt_rounds)
        try:
            user = await self.user_repo.create({
                "username": user_in.username,
                "email": user_in.email,
                "hashed_password": hasher.hash(user_in.password),
            })
            await self.factory.commit()
        except IntegrityError:
            await self.factory.rollback()
            raise UserAlreadyExistsException()

        self.logger.info(f"用户注册成功: user_id={user.id}")
        return user

    async def login_user(self, data: CredentialsRequest) -> tuple[User, str]:
        """
        校验凭证并签发令牌，返回 (user, token)。
        账号不存在和密码错误返回同一个 401，不泄露账号是否存在。
        """
        security = self.settings.security_settings
        if not security.secret:
            raise JwtSecretMissingException()

        provider = CredentialsProvider(self.factory, security, data)
        result = await provider.authenticate()
        if result is None:
            raise InvalidCredentialsException()

        token, _expires = result
        user = await provider.get_user()
        self.logger.info(f"用户登录成功: user_id={user.id}")
        return user, token
