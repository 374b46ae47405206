# recipe_api/core/global_exception.py

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from recipe_api.core.api_response import response_error
from recipe_api.core.exceptions import BaseBusinessException, UnauthorizedException
from recipe_api.core.logger import logger
from recipe_api.core.response_codes import ResponseCodeEnum


async def business_exception_handler(request: Request, exc: BaseBusinessException):
    logger.warning(
        f"Business Exception | code: {exc.code}, message: {exc.message}, path: {request.url.path}"
    )
    return response_error(
        code=ResponseCodeEnum.SERVER_ERROR,
        http_status=exc.status_code,
        message=exc.message,
        business_code=exc.code,
    )


async def auth_exception_handler(request: Request, exc: UnauthorizedException):
    # TokenExpiredException, InvalidTokenException 等都统一返回 401 并带上 Bearer 质询头
    return response_error(
        code=ResponseCodeEnum.AUTH_ERROR,
        http_status=401,
        message=exc.message,
        headers={"WWW-Authenticate": "Bearer"},
        business_code=exc.code,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # 请求体缺字段、类型不对、JSON 解析失败都按 400 处理，不回传校验细节
    logger.info(f"Validation Error | path: {request.url.path} | errors: {exc.errors()}")
    return response_error(
        code=ResponseCodeEnum.VALIDATION_ERROR,
        http_status=400,
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"Unhandled Exception | {repr(exc)} | path: {request.url.path}")
    return response_error(
        code=ResponseCodeEnum.SERVER_ERROR,
        http_status=500,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UnauthorizedException, auth_exception_handler)
    app.add_exception_handler(BaseBusinessException, business_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
