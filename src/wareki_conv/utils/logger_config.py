"""logger_config.py: This module configures the logging.
This module uses structlog to configure logging.
"""

import logging
import sys
from enum import IntEnum
from pathlib import Path

import structlog
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer

_HANDLER_NAME = "wareki_conv"


class LEVEL(IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    FATAL = logging.FATAL

    @classmethod
    def from_name(cls, name: str) -> "LEVEL":
        """レベル名 (大文字小文字は問わない) から取得."""
        try:
            return cls[name.strip().upper()]
        except KeyError as e:
            msg = f"Unknown log level: {name}"
            raise ValueError(msg) from e


def configure_logger(
    logging_level: int | LEVEL = logging.WARNING,
    log_file: Path | str | None = None,
) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(logging_level)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M.%S", utc=False),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # 再設定時にハンドラが重複しないよう以前のものを外す
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    # 標準出力は変換結果に使うので、ログは標準エラーに出す
    handler_console = logging.StreamHandler(sys.stderr)
    handler_console.set_name(_HANDLER_NAME)
    handler_console.setFormatter(structlog.stdlib.ProcessorFormatter(processor=ConsoleRenderer()))
    root_logger.addHandler(handler_console)

    if log_file:
        handler_file = logging.FileHandler(log_file, encoding="utf-8")
        handler_file.set_name(_HANDLER_NAME)
        handler_file.setFormatter(structlog.stdlib.ProcessorFormatter(processor=JSONRenderer()))
        root_logger.addHandler(handler_file)
