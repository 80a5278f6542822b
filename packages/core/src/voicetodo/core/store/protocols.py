"""Store Protocol 接口定义

定义 UserStore、TaskStore、SessionStore 的抽象接口，
使用 Python Protocol 实现结构化子类型（duck typing）。
当前只有内存实现；持久化后端只需满足同一接口，调用方无需改动。
"""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, Protocol

from ..models.session import Session
from ..models.task import Task, TaskCreate
from ..models.user import User

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class UserStore(Protocol):
    """User 存储接口"""

    async def get_user(self, user_id: str) -> User | None:
        """根据 user_id 查询用户"""
        ...

    async def get_user_by_username(self, username: str) -> User | None:
        """根据用户名查询用户"""
        ...

    async def create_user(self, username: str, password: str) -> User:
        """创建用户，分配新 ID

        Raises:
            UserExistsError: 用户名已存在
        """
        ...


class TaskStore(Protocol):
    """Task 存储接口 -- 不做归属校验，由调用方负责"""

    async def list_tasks(self, user_id: str) -> list[Task]:
        """查询指定用户的任务，按 created_at 倒序"""
        ...

    async def get_task(self, task_id: str) -> Task | None:
        """根据 task_id 查询任务"""
        ...

    async def create_task(self, data: TaskCreate, user_id: str) -> Task:
        """创建任务，填充默认值与时间戳"""
        ...

    async def update_task(self, task_id: str, changes: dict[str, Any]) -> Task | None:
        """浅合并字段并刷新 updated_at，任务不存在返回 None"""
        ...

    async def delete_task(self, task_id: str) -> bool:
        """删除任务，返回是否实际删除"""
        ...


class SessionStore(Protocol):
    """Session 存储接口"""

    async def create_session(self, user_id: str) -> Session:
        """创建会话，expires_at = now + TTL"""
        ...

    async def get_session(self, session_id: str) -> Session | None:
        """查询未过期的会话；已过期的会话在此时删除并返回 None"""
        ...

    async def delete_session(self, session_id: str) -> bool:
        """删除会话，返回是否实际删除"""
        ...
