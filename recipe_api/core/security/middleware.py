# recipe_api/core/security/middleware.py
import time

from starlette.middleware.base import BaseHTTPMiddleware
from fastapi import Request

from recipe_api.core.logger import get_logger

logger = get_logger("audit")


class AuditMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        # 记录 method、路径、状态码、耗时和客户端 IP，不记录请求体和 Authorization 头
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        client = request.client.host if request.client else "-"
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({elapsed_ms:.1f}ms) client={client}"
        )
        return response
