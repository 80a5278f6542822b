"""LoggingMiddleware -- 请求级日志

每个请求分配 request_id（ULID）并绑定到 structlog contextvars，
完成时记录状态码与耗时，响应头返回 X-Request-ID。
"""

import time

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from ulid import ULID

from ..config import SESSION_COOKIE_NAME

REQUEST_ID_HEADER = "X-Request-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class LoggingMiddleware(BaseHTTPMiddleware):
    """请求级日志中间件"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = str(ULID())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            authenticated=SESSION_COOKIE_NAME in request.cookies,
        )
        log = structlog.get_logger()

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            await log.aexception("request_failed", duration_ms=_elapsed_ms(started))
            raise

        await log.ainfo(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
