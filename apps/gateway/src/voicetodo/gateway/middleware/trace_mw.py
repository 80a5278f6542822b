"""TraceMiddleware -- 为单任务操作绑定 task_id 到日志上下文

task_id 从 /api/tasks/{task_id} 路径中提取。
"""

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

ULID_LENGTH = 26


def extract_task_id(path: str) -> str | None:
    """从路径中提取 ULID 形式的 task_id，不匹配时返回 None"""
    parts = path.strip("/").split("/")
    if len(parts) >= 3 and parts[:2] == ["api", "tasks"]:
        task_id = parts[2]
        if len(task_id) == ULID_LENGTH:
            return task_id
    return None


class TraceMiddleware(BaseHTTPMiddleware):
    """任务级追踪中间件"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        task_id = extract_task_id(request.url.path)
        if task_id:
            structlog.contextvars.bind_contextvars(task_id=task_id)

        return await call_next(request)
