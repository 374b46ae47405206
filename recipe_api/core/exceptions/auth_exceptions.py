# === 认证/登录相关异常 ===
from recipe_api.core.exceptions.jwt_exceptions import UnauthorizedException
from recipe_api.core.response_codes import ResponseCodeEnum


class InvalidCredentialsException(UnauthorizedException):
    """用户不存在与密码错误返回同一个异常，避免账号枚举。"""
    def __init__(self, message: str = None):
        super().__init__(message or ResponseCodeEnum.INVALID_CREDENTIALS.message)
        self.code = ResponseCodeEnum.INVALID_CREDENTIALS.code
