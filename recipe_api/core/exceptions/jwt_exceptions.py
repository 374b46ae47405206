from recipe_api.core.exceptions.base_exception import BaseBusinessException, MissingConfigException
from recipe_api.core.response_codes import ResponseCodeEnum


class UnauthorizedException(BaseBusinessException):
    def __init__(self, message: str = None):
        super().__init__(ResponseCodeEnum.AUTH_ERROR, status_code=401, message=message)

class MissingTokenException(UnauthorizedException):
    def __init__(self, message: str = None):
        super().__init__(message or ResponseCodeEnum.TOKEN_MISSING.message)
        self.code = ResponseCodeEnum.TOKEN_MISSING.code

class InvalidTokenException(UnauthorizedException):
    def __init__(self, message: str = None):
        super().__init__(message or ResponseCodeEnum.TOKEN_INVALID.message)
        self.code = ResponseCodeEnum.TOKEN_INVALID.code

class TokenExpiredException(InvalidTokenException):
    # 对外消息与 InvalidToken 相同，只用业务码区分过期
    def __init__(self, message: str = None):
        super().__init__(message)
        self.code = ResponseCodeEnum.TOKEN_EXPIRED.code

class JwtSecretMissingException(MissingConfigException):
    def __init__(self, message: str = None):
        super().__init__(message, code_enum=ResponseCodeEnum.JWT_SECRET_MISSING)
