"""配置常量模块 -- 可通过环境变量覆盖

包含预置管理员账号、会话有效期、提醒窗口等可配置项。
"""

import os
from datetime import timedelta

import structlog

log = structlog.get_logger()

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"
DEFAULT_SESSION_TTL_HOURS = 24
MAX_SESSION_TTL_HOURS = 366 * 24
DEFAULT_REMINDER_WINDOW_S = 60
# 提醒窗口上限（一年），避免时间运算溢出
MAX_REMINDER_WINDOW_S = 366 * 24 * 3600


def _get_int(env_var: str, default: int, maximum: int | None = None) -> int:
    """读取正整数环境变量，非法或越界值回退到默认值（不阻塞启动）"""
    val = os.environ.get(env_var)
    if not val:
        return default
    try:
        parsed = int(val)
    except ValueError:
        parsed = 0
    if parsed <= 0 or (maximum is not None and parsed > maximum):
        log.warning("invalid_int_config", env_var=env_var, value=val, fallback=default)
        return default
    return parsed


def get_admin_credentials() -> tuple[str, str]:
    """获取启动时预置的管理员账号（用户名, 密码）"""
    return (
        os.environ.get("VOICETODO_ADMIN_USERNAME") or DEFAULT_ADMIN_USERNAME,
        os.environ.get("VOICETODO_ADMIN_PASSWORD") or DEFAULT_ADMIN_PASSWORD,
    )


def get_session_ttl() -> timedelta:
    """会话有效期，同时作为 cookie max-age"""
    return timedelta(
        hours=_get_int(
            "VOICETODO_SESSION_TTL_HOURS",
            DEFAULT_SESSION_TTL_HOURS,
            maximum=MAX_SESSION_TTL_HOURS,
        )
    )


def get_reminder_window_s() -> int:
    """到期提醒查询的默认时间窗口（秒）"""
    return _get_int(
        "VOICETODO_REMINDER_WINDOW_S",
        DEFAULT_REMINDER_WINDOW_S,
        maximum=MAX_REMINDER_WINDOW_S,
    )
