"""
Structlog 日志配置模块
"""
import logging
import structlog
from structlog.stdlib import ProcessorFormatter

from core.config import settings


def configure_logging() -> None:
    """structlog 与标准库 logging 共用同一渲染链；DEBUG 时输出控制台格式，否则 JSON。"""
    pre_chain = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.DEBUG
        else structlog.processors.JSONRenderer()
    )
    handler = logging.StreamHandler()
    handler.setFormatter(ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[ProcessorFormatter.remove_processors_meta, renderer],
    ))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    # LOG_LEVEL 优先，否则按 DEBUG 推断
    root.setLevel((settings.LOG_LEVEL or ("DEBUG" if settings.DEBUG else "INFO")).upper())


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """获取 structlog logger 实例。"""
    return structlog.get_logger(name)


# 初始化配置
configure_logging()
