import logging
import sys
from pathlib import Path

from loguru import logger

from src.storefront.runtime.context import get_config

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Loggers that would otherwise flood the console with per-statement output
_QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")


class InterceptHandler(logging.Handler):
    """Forward stdlib `logging` records (uvicorn, sqlalchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Request logging middleware already covers access lines
        if record.name == "uvicorn.access":
            return

        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def configure_logging() -> None:
    """Install loguru sinks from the `logging` config section.

    Console output is always colorized plain text. A file sink is added
    only when `logging.file` is set, rotated by size and written as JSON
    when `logging.format` is `json`.
    """
    config = get_config()
    cfg = config.logging
    verbose_traces = config.app.environment != "production"

    logger.remove()
    logger.configure(extra={"request_id": "-"})

    logger.add(
        sys.stderr,
        level=cfg.level,
        format=CONSOLE_FORMAT,
        colorize=True,
        backtrace=verbose_traces,
        diagnose=verbose_traces,
    )

    if cfg.file:
        path = Path(cfg.file)
        path.parent.mkdir(parents=True, exist_ok=True)
        as_json = cfg.format == "json"
        logger.add(
            str(path),
            level=cfg.level,
            format="{message}" if as_json else CONSOLE_FORMAT,
            serialize=as_json,
            rotation=f"{cfg.max_size_mb} MB",
            retention=cfg.backup_count,
            enqueue=True,
            backtrace=verbose_traces,
            diagnose=verbose_traces,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in list(logging.root.manager.loggerDict):
        stdlog = logging.getLogger(name)
        stdlog.handlers = []
        stdlog.propagate = True

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.CRITICAL)

    logger.bind(
        app_level=cfg.level, app_format=cfg.format, app_file=cfg.file
    ).info("Logging configured for {} environment", config.app.environment)
