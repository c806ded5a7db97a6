"""
Core settings management for bingovista.
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QSettings

from .codec import CodecSettings
from .logging import LoggingSettings
from .migration import SettingsMigrator
from .types import ConfigError, ConfigVersion, ValidationResult
from .validation import SettingsValidator

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to application settings with automatic
    cross-platform storage and validation.
    """

    def __init__(self, profile: str = "default"):
        """Initialize settings with organization, application name, and profile.

        Args:
            profile: Settings profile name (default: "default")

        Raises:
            ConfigError: if the profile name is empty or contains "/"
        """
        if not profile or "/" in profile:
            raise ConfigError(f"Invalid settings profile name: {profile!r}")
        self.settings = QSettings("bingovista", "bingovista")
        self.profile = profile

        # Use profile as a group: bingovista/bingovista/default/...
        self.settings.beginGroup(profile)

        # Initialize subsystems
        self._migrator = SettingsMigrator(self.settings)
        self._validator = SettingsValidator(self)
        self._logging = LoggingSettings(self.settings)
        self._codec = CodecSettings(self.settings)

        # Ensure version and migrate if needed
        self._migrator.ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def codec(self) -> CodecSettings:
        """Access codec settings subsystem."""
        return self._codec

    # === VERSION AND FIRST RUN ===

    @property
    def is_first_run(self) -> bool:
        """Check if this is the first run of the application."""
        return self._get_bool("app/first_run", True)

    def set_first_run_complete(self) -> None:
        """Mark first run as complete."""
        self.settings.setValue("app/first_run", False)
        self.settings.sync()

    @property
    def version(self) -> str:
        """Get configuration version."""
        return self._get_str("app/version", ConfigVersion.CURRENT.value)

    # === HELPER METHODS ===

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_bool(self, key: str, default: bool = False) -> bool:
        """Type-safe boolean retrieval from settings."""
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    # === CODEC SETTINGS (DELEGATED) ===

    @property
    def data_file(self) -> Optional[Path]:
        """Get override path of the game tables file."""
        return self._codec.data_file

    @data_file.setter
    def data_file(self, value: Optional[Path]) -> None:
        """Set override path of the game tables file."""
        self._codec.data_file = value

    @property
    def default_comments(self) -> str:
        """Get comments given to boards parsed from text."""
        return self._codec.default_comments

    @default_comments.setter
    def default_comments(self, value: str) -> None:
        """Set comments given to boards parsed from text."""
        self._codec.default_comments = value

    @property
    def text_include_shelter(self) -> bool:
        """Check if text boards are written with the shelter part."""
        return self._codec.text_include_shelter

    @text_include_shelter.setter
    def text_include_shelter(self, value: bool) -> None:
        """Set whether text boards are written with the shelter part."""
        self._codec.text_include_shelter = value

    @property
    def pad_binary(self) -> bool:
        """Check if binary boards are padded to a multiple of 3 bytes."""
        return self._codec.pad_binary

    @pad_binary.setter
    def pad_binary(self, value: bool) -> None:
        """Set binary board padding."""
        self._codec.pad_binary = value

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        """Set console logging enabled state."""
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        """Set console logging level."""
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        """Set console color usage."""
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        """Set file logging enabled state."""
        self._logging.file_logging = value

    @property
    def codec_log_level(self) -> str:
        """Get level of the goal and board codec loggers."""
        return self._logging.codec_log_level

    @codec_log_level.setter
    def codec_log_level(self, value: str) -> None:
        """Set level of the goal and board codec loggers."""
        self._logging.codec_log_level = value

    @property
    def log_file_path(self) -> str:
        """Get CSV log file path."""
        return self._logging.log_file_path

    @log_file_path.setter
    def log_file_path(self, value: str) -> None:
        """Set CSV log file path."""
        self._logging.log_file_path = value

    @property
    def log_file_absolute_path(self) -> Path:
        """Get absolute path to log file."""
        return self._logging.log_file_absolute_path

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
