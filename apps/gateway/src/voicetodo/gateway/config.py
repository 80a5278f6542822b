"""GatewayConfig -- HTTP 层配置加载

从环境变量加载配置，非法值记录 warning 并回退默认值。
"""

import os
from datetime import timedelta
from typing import Literal

import structlog
from pydantic import BaseModel, Field
from voicetodo.core.config import (
    MAX_REMINDER_WINDOW_S,
    get_reminder_window_s,
    get_session_ttl,
)

log = structlog.get_logger()

SESSION_COOKIE_NAME = "sessionId"


class GatewayConfig(BaseModel):
    """Gateway 配置 -- 从环境变量加载

    环境变量:
        VOICETODO_ENV: 运行环境（development/production）
        VOICETODO_HOST / VOICETODO_PORT: uvicorn 监听地址
        VOICETODO_SESSION_TTL_HOURS: 会话有效期（小时，默认 24）
        VOICETODO_REMINDER_WINDOW_S: 到期提醒窗口（秒，默认 60）
    """

    environment: Literal["development", "production", "test"] = Field(
        default="development",
        description="运行环境；production 时 cookie 带 Secure 标记",
    )
    host: str = Field(default="127.0.0.1", description="监听地址")
    port: int = Field(default=5000, ge=1, le=65535, description="监听端口")
    session_ttl: timedelta = Field(
        default=timedelta(hours=24),
        description="会话有效期，同时作为 cookie max-age",
    )
    reminder_window_s: int = Field(
        default=60, ge=0, le=MAX_REMINDER_WINDOW_S, description="到期提醒窗口（秒）"
    )

    @property
    def secure_cookies(self) -> bool:
        return self.environment == "production"

    @property
    def cookie_max_age(self) -> int:
        return int(self.session_ttl.total_seconds())


def load_gateway_config() -> GatewayConfig:
    """从环境变量加载 Gateway 配置

    Returns:
        GatewayConfig 实例
    """
    kwargs: dict = {
        "session_ttl": get_session_ttl(),
        "reminder_window_s": get_reminder_window_s(),
    }

    if val := os.environ.get("VOICETODO_ENV"):
        if val in ("development", "production", "test"):
            kwargs["environment"] = val
        else:
            log.warning(
                "invalid_env_config",
                env_var="VOICETODO_ENV",
                value=val,
                fallback="development",
            )

    if val := os.environ.get("VOICETODO_HOST"):
        kwargs["host"] = val

    if val := os.environ.get("VOICETODO_PORT"):
        try:
            port = int(val)
        except ValueError:
            port = 0
        if 1 <= port <= 65535:
            kwargs["port"] = port
        else:
            log.warning(
                "invalid_port_config",
                env_var="VOICETODO_PORT",
                value=val,
                fallback=5000,
            )

    return GatewayConfig(**kwargs)
