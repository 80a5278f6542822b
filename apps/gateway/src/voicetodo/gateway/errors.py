"""异常处理器 -- 将领域异常与请求校验失败映射为 HTTP 响应

错误响应统一为 {"message": "..."}，不暴露结构化错误码。
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse
from voicetodo.core.exceptions import AuthenticationError

log = structlog.get_logger()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def _authentication_error_handler(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    return error_response(401, exc.message)


async def _request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # 请求体/参数校验失败统一返回 400（而非 FastAPI 默认的 422）
    log.info("request_validation_failed", error_count=len(exc.errors()))
    return error_response(400, "Invalid request data")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AuthenticationError, _authentication_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_error_handler)
