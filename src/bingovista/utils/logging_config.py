"""
Logging configuration for bingovista.

The console shows warnings by default; the optional CSV file receives
everything down to DEBUG. Codec loggers are capped separately so that
per-goal decode warnings can be hidden when decoding many boards.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..settings import AppSettings

CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(message)s"

# Loggers that report problems in individual goals and boards
CODEC_LOGGERS = (
    "bingovista.text_codec",
    "bingovista.binary_codec",
    "bingovista.board",
)

RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[35m",
}


class ColoredFormatter(logging.Formatter):
    """Console formatter colouring the level name."""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        # Copy so other handlers still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{RESET}"
        return super().format(record)


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


class CSVFormatter(logging.Formatter):
    """Semicolon-separated lines: time; level; uptime; logger; line; message."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return ";".join(
            [
                _quote(self.formatTime(record, self.datefmt)),
                record.levelname.ljust(8),
                _quote(f"{int(record.relativeCreated)} ms"),
                _quote(record.name),
                _quote(str(record.lineno)),
                _quote(message),
            ]
        )


def _console_handler(level: str, use_colors: bool) -> logging.Handler:
    formatter_class = ColoredFormatter if use_colors else logging.Formatter
    handler = logging.StreamHandler()
    handler.setLevel(getattr(logging, level.upper(), logging.WARNING))
    handler.setFormatter(formatter_class(fmt=CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    return handler


def _file_handler(log_path: Path) -> logging.Handler:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(CSVFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(settings: "AppSettings") -> None:
    """
    Setup application logging with console and file handlers.

    Replaces any handlers already installed on the root logger.

    Args:
        settings: AppSettings instance for all logging configuration
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    logging.getLogger("bingovista").setLevel(logging.DEBUG)
    codec_level = getattr(logging, settings.codec_log_level.upper(), logging.WARNING)
    for name in CODEC_LOGGERS:
        logging.getLogger(name).setLevel(codec_level)

    if settings.console_logging:
        root_logger.addHandler(
            _console_handler(settings.console_log_level, settings.console_use_colors)
        )

    log_path: Optional[Path] = None
    if settings.file_logging:
        try:
            log_path = Path(settings.log_file_path)
            root_logger.addHandler(_file_handler(log_path))
        except OSError as e:
            # Continue with console logging only
            log_path = None
            root_logger.warning(f"Could not setup file logging: {e}")

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized")
    logger.debug(
        f"Console: {settings.console_logging} ({settings.console_log_level}), "
        f"codec loggers: {logging.getLevelName(codec_level)}"
    )
    if log_path is not None:
        logger.debug(f"File logging: DEBUG at {log_path.absolute()}")
