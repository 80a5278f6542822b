"""依赖注入模块 -- 通过 FastAPI Depends 注入 Store 与服务实例

Store 实例通过 app.state 管理，在 lifespan 中初始化/清理。
"""

from fastapi import Cookie, Depends, Request
from voicetodo.core.store import StoreGroup

from .config import SESSION_COOKIE_NAME, GatewayConfig
from .services.auth_service import AuthService
from .services.task_service import TaskService


def get_store_group(request: Request) -> StoreGroup:
    """从 app.state 获取 StoreGroup 实例"""
    return request.app.state.store_group


def get_config(request: Request) -> GatewayConfig:
    """从 app.state 获取 GatewayConfig 实例"""
    return request.app.state.config


def get_auth_service(store_group: StoreGroup = Depends(get_store_group)) -> AuthService:
    return AuthService(store_group)


def get_task_service(store_group: StoreGroup = Depends(get_store_group)) -> TaskService:
    return TaskService(store_group)


def get_session_id(
    session_id: str | None = Cookie(default=None, alias=SESSION_COOKIE_NAME),
) -> str | None:
    """从请求 cookie 中提取会话令牌（可能缺失）"""
    return session_id


async def require_user_id(
    session_id: str | None = Depends(get_session_id),
    auth_service: AuthService = Depends(get_auth_service),
) -> str:
    """认证闸门 -- 失败时抛出 AuthenticationError，由全局处理器转为 401"""
    return await auth_service.authenticate(session_id)
