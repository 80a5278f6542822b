"""apps/gateway 测试配置 -- httpx AsyncClient + 注入的 Store"""

from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient, Response
from voicetodo.core.store import StoreGroup, create_store_group
from voicetodo.gateway.config import GatewayConfig


@pytest_asyncio.fixture
async def store_group(clock) -> StoreGroup:
    return await create_store_group(
        session_ttl=timedelta(hours=24),
        seed_users=[("admin", "admin123")],
        clock=clock,
    )


@pytest_asyncio.fixture
async def app(store_group: StoreGroup):
    """创建测试用 FastAPI app（lifespan 不运行，Store 直接注入）"""
    from voicetodo.gateway.main import create_app

    return create_app(
        config=GatewayConfig(environment="test"),
        store_group=store_group,
    )


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """提供 httpx AsyncClient 用于测试（cookie 在同一 client 内保持）"""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def make_client(app) -> AsyncGenerator[Callable[[], Awaitable[AsyncClient]], None]:
    """按需创建独立 client（模拟多个浏览器/用户）"""
    clients: list[AsyncClient] = []

    async def _make() -> AsyncClient:
        ac = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(ac)
        return ac

    yield _make

    for ac in clients:
        await ac.aclose()


async def _login(
    client: AsyncClient, username: str = "admin", password: str = "admin123"
) -> Response:
    return await client.post(
        "/api/auth/login",
        json={"username": username, "password": password},
    )


@pytest.fixture
def login() -> Callable[..., Awaitable[Response]]:
    """登录辅助函数：login(client, username, password)"""
    return _login


@pytest_asyncio.fixture
async def auth_client(client: AsyncClient) -> AsyncClient:
    """已以 admin 登录的 client"""
    resp = await _login(client)
    assert resp.status_code == 200
    return client
