# recipe_api/core/exceptions/base_exception.py

from typing import Optional

from recipe_api.core.response_codes import ResponseCodeEnum


class BaseBusinessException(Exception):
    """
    业务异常基类。
    路由层不做捕获，统一由 global_exception 中注册的处理器转换为 {code, message}。
    """
    def __init__(
            self,
            code_enum: Optional[ResponseCodeEnum] = None,
            code: Optional[int] = None,
            status_code: int = 400,
            message: Optional[str] = None,
    ):
        code_enum = code_enum or ResponseCodeEnum.SERVER_ERROR
        self.code = code if code is not None else code_enum.code
        self.message = message or code_enum.message
        self.status_code = status_code
        super().__init__(self.message)

    def __str__(self):
        return f"[{self.code}] {self.message}"


class InvalidInputException(BaseBusinessException):
    """
    请求参数缺失或格式不正确。
    """
    def __init__(self, message: str = None, code_enum: ResponseCodeEnum = ResponseCodeEnum.VALIDATION_ERROR):
        super().__init__(code_enum, status_code=400, message=message)


class NotFoundException(BaseBusinessException):
    """
    当请求的资源在数据库中不存在时抛出。
    """
    def __init__(self, message: str = None, code_enum: ResponseCodeEnum = ResponseCodeEnum.NOT_FOUND):
        super().__init__(code_enum, status_code=404, message=message)


class AlreadyExistsException(BaseBusinessException):
    """
    当尝试创建一个已存在的资源时抛出（例如，用户名或邮箱重复）。
    """
    def __init__(self, message: str = None, code_enum: ResponseCodeEnum = ResponseCodeEnum.ALREADY_EXISTS):
        super().__init__(code_enum, status_code=409, message=message)


class MissingConfigException(BaseBusinessException):
    """
    运行所需的配置项缺失（例如 JWT 密钥），属于服务端错误。
    """
    def __init__(self, message: str = None, code_enum: ResponseCodeEnum = ResponseCodeEnum.CONFIG_MISSING):
        super().__init__(code_enum, status_code=500, message=message)
