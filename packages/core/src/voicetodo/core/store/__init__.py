"""VoiceTodo Core Store -- 内存实现

提供工厂函数创建 Store 实例组。Store 实例在应用生命周期内创建并显式注入，
不存在模块级单例。
"""

from collections.abc import Iterable
from datetime import timedelta

import structlog

from .protocols import Clock, SessionStore, TaskStore, UserStore, utc_now
from .session_store import InMemorySessionStore
from .task_store import InMemoryTaskStore
from .user_store import InMemoryUserStore

log = structlog.get_logger()


class StoreGroup:
    """Store 实例组 -- users / tasks / sessions 三个集合的唯一持有者"""

    def __init__(
        self,
        session_ttl: timedelta,
        clock: Clock = utc_now,
    ) -> None:
        self.clock = clock
        self.user_store = InMemoryUserStore()
        self.task_store = InMemoryTaskStore(clock)
        self.session_store = InMemorySessionStore(session_ttl, clock)

    async def close(self) -> None:
        """释放所有集合（进程退出时调用，数据不做持久化）"""
        self.session_store.clear()
        self.task_store.clear()
        self.user_store.clear()


async def create_store_group(
    session_ttl: timedelta,
    seed_users: Iterable[tuple[str, str]] = (),
    clock: Clock = utc_now,
) -> StoreGroup:
    """创建 Store 实例组

    Args:
        session_ttl: 会话有效期
        seed_users: 启动时预置的 (用户名, 密码) 列表
        clock: 时间源，测试中可替换

    Returns:
        StoreGroup 实例
    """
    store_group = StoreGroup(session_ttl=session_ttl, clock=clock)
    for username, password in seed_users:
        user = await store_group.user_store.create_user(username, password)
        log.info("user_seeded", user_id=user.user_id, username=username)
    return store_group


__all__ = [
    "StoreGroup",
    "create_store_group",
    "InMemoryUserStore",
    "InMemoryTaskStore",
    "InMemorySessionStore",
    "UserStore",
    "TaskStore",
    "SessionStore",
    "Clock",
    "utc_now",
]
