"""
Logging-related settings for bingovista.

Codec loggers (per-goal decode warnings) have their own level so that bulk
decoding of shared boards can be quietened without hiding CLI errors.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/bingovista.csv"

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings:
    """Console, file and codec logging options."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_bool(self, key: str, default: bool = False) -> bool:
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _set(self, key: str, value: object) -> None:
        self.settings.setValue(key, value)
        self.settings.sync()

    def _set_level(self, key: str, value: str) -> None:
        level = value.upper()
        if level not in VALID_LEVELS:
            logger.warning(f"Invalid log level for {key}: {value}, keeping {self._get_str(key)}")
            return
        self._set(key, level)

    # === CONSOLE ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._get_bool("logging/console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set("logging/console_enabled", value)

    @property
    def console_log_level(self) -> str:
        """Console handler level name (WARNING unless changed)."""
        return self._get_str("logging/console_level", "WARNING")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._set_level("logging/console_level", value)

    @property
    def console_use_colors(self) -> bool:
        """Check if the console level names are coloured."""
        return self._get_bool("logging/console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set("logging/console_use_colors", value)

    # === CODEC ===

    @property
    def codec_log_level(self) -> str:
        """Level of the goal and board codec loggers."""
        return self._get_str("logging/codec_level", "WARNING")

    @codec_log_level.setter
    def codec_log_level(self, value: str) -> None:
        self._set_level("logging/codec_level", value)

    # === FILE ===

    @property
    def file_logging(self) -> bool:
        """Check if CSV file logging is enabled."""
        return self._get_bool("logging/file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set("logging/file_enabled", value)

    @property
    def log_file_path(self) -> str:
        """CSV log file, relative to the working directory unless absolute."""
        return self._get_str("logging/file_path", LOG_FILE_PATH) or LOG_FILE_PATH

    @log_file_path.setter
    def log_file_path(self, value: str) -> None:
        self._set("logging/file_path", str(value))

    @property
    def log_file_absolute_path(self) -> Path:
        """Resolved path of the CSV log file."""
        return Path(self.log_file_path).resolve()
