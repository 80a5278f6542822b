"""packages/core 测试配置 -- 核心层 fixture"""

from datetime import timedelta

import pytest_asyncio
from voicetodo.core.store import StoreGroup, create_store_group


@pytest_asyncio.fixture
async def store_group(clock) -> StoreGroup:
    """预置 admin 账号、使用可控时钟的 Store 实例组"""
    return await create_store_group(
        session_ttl=timedelta(hours=24),
        seed_users=[("admin", "admin123")],
        clock=clock,
    )
