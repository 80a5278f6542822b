"""集成测试共享 fixture -- 与生产一致：通过 lifespan 创建 Store"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from voicetodo.gateway.config import GatewayConfig


@pytest_asyncio.fixture
async def integration_app():
    """集成测试用 FastAPI app，手动驱动 lifespan"""
    from voicetodo.gateway.main import create_app

    app = create_app(config=GatewayConfig(environment="test"))
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client(integration_app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=integration_app),
        base_url="http://test",
    ) as ac:
        yield ac
