"""任务路由 -- 所有端点都要求有效会话

GET /api/tasks: 当前用户的任务列表，按 createdAt 倒序。
POST /api/tasks: 创建任务。
GET /api/tasks/{task_id}: 任务详情。
PATCH /api/tasks/{task_id}: 部分更新。
DELETE /api/tasks/{task_id}: 删除任务。

任务不存在与不属于当前用户统一返回 404。
"""

import structlog
from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse
from voicetodo.core.exceptions import NotFoundError, ValidationError
from voicetodo.core.models import TaskCreate, TaskUpdate

from ..deps import get_task_service, require_user_id
from ..errors import error_response
from ..services.task_service import TaskService

log = structlog.get_logger()

router = APIRouter()


@router.get("/api/tasks")
async def list_tasks(
    user_id: str = Depends(require_user_id),
    service: TaskService = Depends(get_task_service),
):
    """查询当前用户的任务列表"""
    try:
        tasks = await service.list_tasks(user_id)
    except Exception:
        log.exception("task_list_failed", user_id=user_id)
        return error_response(500, "Failed to fetch tasks")

    return [t.to_json() for t in tasks]


@router.post("/api/tasks")
async def create_task(
    body: TaskCreate,
    user_id: str = Depends(require_user_id),
    service: TaskService = Depends(get_task_service),
):
    """创建任务，成功返回 201"""
    try:
        task = await service.create_task(user_id, body)
    except ValidationError as e:
        return error_response(400, e.message)

    return JSONResponse(status_code=201, content=task.to_json())


@router.get("/api/tasks/{task_id}")
async def get_task(
    task_id: str,
    user_id: str = Depends(require_user_id),
    service: TaskService = Depends(get_task_service),
):
    """查询任务详情"""
    try:
        task = await service.get_task(user_id, task_id)
    except NotFoundError as e:
        return error_response(404, e.message)

    return task.to_json()


@router.patch("/api/tasks/{task_id}")
async def update_task(
    task_id: str,
    body: TaskUpdate,
    user_id: str = Depends(require_user_id),
    service: TaskService = Depends(get_task_service),
):
    """部分更新任务，未传入的字段保持不变"""
    try:
        task = await service.update_task(user_id, task_id, body)
    except NotFoundError as e:
        return error_response(404, e.message)
    except ValidationError as e:
        return error_response(400, e.message)

    return task.to_json()


@router.delete("/api/tasks/{task_id}")
async def delete_task(
    task_id: str,
    user_id: str = Depends(require_user_id),
    service: TaskService = Depends(get_task_service),
):
    """删除任务"""
    try:
        await service.delete_task(user_id, task_id)
    except NotFoundError as e:
        return error_response(404, e.message)

    return {"message": "Task deleted successfully"}
