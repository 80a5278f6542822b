"""到期提醒路由

GET /api/reminders/due: 返回未完成、提醒时间已到或将在 window_s 秒内到达的任务。
浏览器按分钟轮询此端点展示通知。
"""

from fastapi import APIRouter, Depends, Query
from voicetodo.core.config import MAX_REMINDER_WINDOW_S

from ..config import GatewayConfig
from ..deps import get_config, get_task_service, require_user_id
from ..services.task_service import TaskService

router = APIRouter()


@router.get("/api/reminders/due")
async def list_due_reminders(
    window_s: int | None = Query(
        default=None,
        ge=0,
        le=MAX_REMINDER_WINDOW_S,
        description="提前量（秒），缺省使用 VOICETODO_REMINDER_WINDOW_S",
    ),
    user_id: str = Depends(require_user_id),
    service: TaskService = Depends(get_task_service),
    config: GatewayConfig = Depends(get_config),
):
    """查询到期提醒，按提醒时间升序"""
    effective_window = config.reminder_window_s if window_s is None else window_s
    tasks = await service.list_due_reminders(user_id, effective_window)
    return [t.to_json() for t in tasks]
