from recipe_api.core.exceptions.base_exception import AlreadyExistsException, NotFoundException
from recipe_api.core.response_codes import ResponseCodeEnum

# === 用户相关异常 ===
class UserAlreadyExistsException(AlreadyExistsException):
    def __init__(self, message: str = None):
        super().__init__(message, code_enum=ResponseCodeEnum.USER_ALREADY_EXISTS)

class UserNotFoundException(NotFoundException):
    def __init__(self, message: str = None):
        super().__init__(message, code_enum=ResponseCodeEnum.USER_NOT_FOUND)
