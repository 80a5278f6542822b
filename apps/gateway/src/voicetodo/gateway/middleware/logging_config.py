"""structlog 配置模块

VOICETODO_LOG_FORMAT 选择渲染方式（dev 控制台 / json），
VOICETODO_LOG_LEVEL 设置根日志级别。
所有日志在渲染前去除密码与语音备注内容，stdlib 日志（uvicorn 等）同样适用。
"""

import logging
import os

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

# 不允许出现在日志中的字段：登录密码、base64 语音数据
SENSITIVE_KEYS = frozenset(
    {"password", "voice_note_data", "voiceNoteData"}
)


def drop_sensitive_fields(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """structlog processor：移除敏感字段"""
    for key in SENSITIVE_KEYS & event_dict.keys():
        del event_dict[key]
    return event_dict


def build_shared_processors() -> list[Processor]:
    """structlog 与 stdlib 日志共用的处理链"""
    return [
        structlog.contextvars.merge_contextvars,
        drop_sensitive_fields,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _select_renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer()


def setup_logging() -> None:
    """初始化 structlog，并把 stdlib 根 logger 接到同一渲染器"""
    log_format = os.environ.get("VOICETODO_LOG_FORMAT", "dev").lower()
    log_level = os.environ.get("VOICETODO_LOG_LEVEL", "INFO").upper()
    shared_processors = build_shared_processors()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_select_renderer(log_format),
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level, logging.INFO))


def setup_logfire() -> None:
    """LOGFIRE_SEND_TO_LOGFIRE=true 时启用 Logfire（需安装 apm 可选依赖）

    初始化失败只记录 warning，服务照常以本地日志运行。
    """
    if os.environ.get("LOGFIRE_SEND_TO_LOGFIRE", "false").lower() != "true":
        return

    try:
        import logfire

        logfire.configure()
        logfire.instrument_fastapi()
    except Exception as e:
        structlog.get_logger().warning("logfire_init_failed", error=str(e))
