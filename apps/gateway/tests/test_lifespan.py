"""FastAPI lifespan 测试

测试内容：
1. 启动时创建 Store 并预置管理员账号
2. 关闭时释放 Store
3. 已注入的 Store 不被替换
"""

from voicetodo.core.store import StoreGroup
from voicetodo.gateway.config import GatewayConfig
from voicetodo.gateway.main import create_app


class TestLifespan:
    async def test_store_created_and_seeded(self):
        app = create_app(config=GatewayConfig(environment="test"))
        assert app.state.store_group is None

        async with app.router.lifespan_context(app):
            store_group = app.state.store_group
            assert store_group is not None
            admin = await store_group.user_store.get_user_by_username("admin")
            assert admin is not None
            assert admin.check_password("admin123")

        assert app.state.store_group is None
        assert store_group.user_store.count() == 0

    async def test_seed_credentials_from_env(self, monkeypatch):
        monkeypatch.setenv("VOICETODO_ADMIN_USERNAME", "owner")
        monkeypatch.setenv("VOICETODO_ADMIN_PASSWORD", "pw")
        app = create_app(config=GatewayConfig(environment="test"))

        async with app.router.lifespan_context(app):
            user_store = app.state.store_group.user_store
            assert await user_store.get_user_by_username("owner") is not None
            assert await user_store.get_user_by_username("admin") is None

    async def test_injected_store_is_kept(self, store_group: StoreGroup):
        app = create_app(config=GatewayConfig(environment="test"), store_group=store_group)
        async with app.router.lifespan_context(app):
            assert app.state.store_group is store_group
