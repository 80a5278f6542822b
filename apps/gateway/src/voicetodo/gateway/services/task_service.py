"""TaskService -- 按用户归属限定的任务增删改查

所有操作都以已认证的 user_id 为作用域：
- 任务不存在与任务属于其他用户对调用方不可区分，统一为 NotFoundError
- 校验在任何写入之前完成，多字段更新不会被部分应用
"""

from datetime import timedelta

import structlog
from voicetodo.core.exceptions import NotFoundError, ValidationError
from voicetodo.core.models import Task, TaskCreate, TaskUpdate
from voicetodo.core.store import StoreGroup

log = structlog.get_logger()


def _clean_title(title: str) -> str:
    """标题去除首尾空白后不能为空"""
    cleaned = title.strip()
    if not cleaned:
        raise ValidationError("Title is required")
    return cleaned


class TaskService:
    """任务业务服务"""

    def __init__(self, store_group: StoreGroup) -> None:
        self._stores = store_group

    async def list_tasks(self, user_id: str) -> list[Task]:
        """查询当前用户的任务，最新创建的在前"""
        return await self._stores.task_store.list_tasks(user_id)

    async def get_task(self, user_id: str, task_id: str) -> Task:
        """查询单个任务

        Raises:
            NotFoundError: 任务不存在或不属于当前用户
        """
        task = await self._stores.task_store.get_task(task_id)
        if task is None or task.user_id != user_id:
            raise NotFoundError()
        return task

    async def create_task(self, user_id: str, data: TaskCreate) -> Task:
        """创建任务

        Raises:
            ValidationError: 标题为空
        """
        title = _clean_title(data.title)
        task = await self._stores.task_store.create_task(
            data.model_copy(update={"title": title}), user_id
        )
        log.info(
            "task_created",
            task_id=task.task_id,
            user_id=user_id,
            priority=task.priority.value,
            has_voice_note=task.voice_note_data is not None,
        )
        return task

    async def update_task(self, user_id: str, task_id: str, update: TaskUpdate) -> Task:
        """部分更新任务

        Raises:
            ValidationError: 更新中的标题为空
            NotFoundError: 任务不存在或不属于当前用户
        """
        changes = update.changes()
        if "title" in changes:
            changes["title"] = _clean_title(changes["title"])

        await self.get_task(user_id, task_id)

        task = await self._stores.task_store.update_task(task_id, changes)
        if task is None:
            raise NotFoundError()

        log.info("task_updated", task_id=task_id, fields=sorted(changes))
        return task

    async def delete_task(self, user_id: str, task_id: str) -> None:
        """删除任务；已删除的任务再次删除同样返回 NotFoundError

        Raises:
            NotFoundError: 任务不存在或不属于当前用户
        """
        await self.get_task(user_id, task_id)

        if not await self._stores.task_store.delete_task(task_id):
            raise NotFoundError()

        log.info("task_deleted", task_id=task_id)

    async def list_due_reminders(self, user_id: str, window_s: int) -> list[Task]:
        """查询到期提醒：未完成且 reminder_date <= now + window 的任务

        已过期但未完成的提醒同样返回，按提醒时间升序。
        """
        deadline = self._stores.clock() + timedelta(seconds=window_s)
        tasks = await self._stores.task_store.list_tasks(user_id)
        due = [
            t
            for t in tasks
            if not t.completed
            and t.reminder_date is not None
            and t.reminder_date <= deadline
        ]
        due.sort(key=lambda t: t.reminder_date)
        return due
