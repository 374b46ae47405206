from enum import Enum


class ResponseCodeEnum(Enum):

    # === 通用响应码 ===
    VALIDATION_ERROR = (40001, "Missing or invalid fields")
    NO_UPDATE_FIELDS = (40002, "No valid fields to update")
    INVALID_ID = (40003, "Invalid recipe id")
    AUTH_ERROR = (40100, "Unauthorized")
    NOT_FOUND = (40400, "Resource not found")
    ALREADY_EXISTS = (40900, "Resource already exists")
    SERVER_ERROR = (50000, "Internal server error")
    CONFIG_MISSING = (50001, "Server configuration missing")

    # === 用户相关 ===
    USER_ALREADY_EXISTS = (40910, "User already exists")
    USER_NOT_FOUND = (40411, "User not found")

    # === 菜谱相关 ===
    RECIPE_NOT_FOUND = (40420, "Recipe not found")

    # === 登录/注册/Token ===
    INVALID_CREDENTIALS = (40103, "Invalid credentials")
    TOKEN_MISSING = (40108, "Missing token")
    TOKEN_EXPIRED = (40104, "Token expired")
    TOKEN_INVALID = (40105, "Invalid token")
    JWT_SECRET_MISSING = (50002, "JWT secret not configured")

    def __init__(self, code: int, message: str):
        self._code = code
        self._message = message

    @property
    def code(self):
        return self._code

    @property
    def message(self):
        return self._message
