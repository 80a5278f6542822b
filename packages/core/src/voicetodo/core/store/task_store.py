"""TaskStore 内存实现

以 task_id 为键的字典。所有方法在读与写之间没有 await，
在单事件循环下每个操作都是原子的。
"""

from typing import Any

from ulid import ULID

from ..models.task import Task, TaskCreate
from .protocols import Clock, utc_now


class InMemoryTaskStore:
    """TaskStore 的内存实现"""

    def __init__(self, clock: Clock = utc_now) -> None:
        self._tasks: dict[str, Task] = {}
        self._clock = clock

    async def list_tasks(self, user_id: str) -> list[Task]:
        """查询指定用户的任务，按 created_at 倒序"""
        tasks = [t for t in self._tasks.values() if t.user_id == user_id]
        tasks.sort(key=lambda t: t.created_at, reverse=True)
        return tasks

    async def get_task(self, task_id: str) -> Task | None:
        return self._tasks.get(task_id)

    async def create_task(self, data: TaskCreate, user_id: str) -> Task:
        now = self._clock()
        task = Task(
            task_id=str(ULID()),
            title=data.title,
            completed=False,
            priority=data.priority,
            reminder_date=data.reminder_date,
            voice_note_data=data.voice_note_data,
            voice_note_duration=data.voice_note_duration,
            user_id=user_id,
            created_at=now,
            updated_at=now,
        )
        self._tasks[task.task_id] = task
        return task

    async def update_task(self, task_id: str, changes: dict[str, Any]) -> Task | None:
        """浅合并：传入字段整体替换原值，updated_at 刷新为当前时间"""
        task = self._tasks.get(task_id)
        if task is None:
            return None
        updated = task.model_copy(update={**changes, "updated_at": self._clock()})
        self._tasks[task_id] = updated
        return updated

    async def delete_task(self, task_id: str) -> bool:
        return self._tasks.pop(task_id, None) is not None

    def clear(self) -> None:
        self._tasks.clear()
