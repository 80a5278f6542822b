"""FastAPI 应用主文件

app 创建 + lifespan 管理：Store 初始化/释放 + 路由与异常处理器注册。
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from voicetodo.core.config import get_admin_credentials
from voicetodo.core.store import StoreGroup, create_store_group

from .config import GatewayConfig, load_gateway_config
from .errors import register_exception_handlers
from .middleware.logging_config import setup_logfire, setup_logging
from .middleware.logging_mw import LoggingMiddleware
from .middleware.trace_mw import TraceMiddleware
from .routes import auth, health, reminders, tasks

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """应用生命周期管理：启动时创建 Store 并预置管理员账号，关闭时释放"""
    config: GatewayConfig = app.state.config

    # 已注入 Store（测试或嵌入场景）时不再重复创建
    if getattr(app.state, "store_group", None) is None:
        app.state.store_group = await create_store_group(
            session_ttl=config.session_ttl,
            seed_users=[get_admin_credentials()],
        )
    log.info(
        "app_started",
        environment=config.environment,
        session_ttl_s=config.cookie_max_age,
    )

    yield

    if getattr(app.state, "store_group", None) is not None:
        await app.state.store_group.close()
        app.state.store_group = None
    log.info("app_stopped")


def create_app(
    config: GatewayConfig | None = None,
    store_group: StoreGroup | None = None,
) -> FastAPI:
    """创建 FastAPI 应用实例

    Args:
        config: Gateway 配置，缺省从环境变量加载
        store_group: 预先构建的 Store 实例组，缺省在 lifespan 中创建
    """
    app = FastAPI(
        title="VoiceTodo API",
        version="0.1.0",
        description="VoiceTodo 任务管理 API（语音备注、提醒、会话认证）",
        lifespan=lifespan,
    )
    app.state.config = config or load_gateway_config()
    app.state.store_group = store_group

    # 注册中间件（顺序：先 Trace 后 Logging，Logging 位于最外层）
    app.add_middleware(TraceMiddleware)
    app.add_middleware(LoggingMiddleware)

    setup_logging()
    setup_logfire()

    register_exception_handlers(app)

    app.include_router(auth.router, tags=["auth"])
    app.include_router(tasks.router, tags=["tasks"])
    app.include_router(reminders.router, tags=["reminders"])
    app.include_router(health.router, tags=["health"])

    return app


# 默认 app 实例（uvicorn 入口）
app = create_app()
