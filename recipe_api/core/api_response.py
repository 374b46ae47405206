from typing import Any, Optional, Dict

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from recipe_api.core.logger import logger
from recipe_api.core.response_codes import ResponseCodeEnum


# === 错误响应体 ===
class ErrorResponse(BaseModel):
    code: int
    message: str

    model_config = {
        "json_schema_extra": {
            "example": {
                "code": 40420,
                "message": "Recipe not found",
            }
        }
    }


class MessageResponse(BaseModel):
    message: str


# === 自动序列化工具 ===
def to_json_compatible(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump()

    if isinstance(data, (list, tuple)):
        return [to_json_compatible(item) for item in data]

    if isinstance(data, dict):
        return {k: to_json_compatible(v) for k, v in data.items()}

    return data  # int, str, bool, None, etc.


# === 成功响应 ===
def response_success(
    data: Any = None,
    http_status: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    # 先自定义序列化（处理 Pydantic），再交给 jsonable_encoder 处理 datetime, UUID 等
    encoded_data = jsonable_encoder(to_json_compatible(data))
    logger.debug(f"Response Success | http_status: {http_status}")
    return JSONResponse(status_code=http_status, content=encoded_data, headers=headers)


def response_message(message: str, http_status: int = 200) -> JSONResponse:
    return response_success(data=MessageResponse(message=message), http_status=http_status)


# === 错误响应 ===
def response_error(
    code: ResponseCodeEnum,
    http_status: int = 400,
    message: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    business_code: Optional[int] = None,
) -> JSONResponse:
    final_message = message or code.message
    final_code = business_code if business_code is not None else code.code
    logger.warning(f"Response Error | http_status: {http_status}, code: {final_code}, message: {final_message}")

    return JSONResponse(
        status_code=http_status,
        content=ErrorResponse(code=final_code, message=final_message).model_dump(),
        headers=headers,
    )
