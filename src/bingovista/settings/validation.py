"""
Settings validation system for bingovista.
"""

import logging
from typing import List, TYPE_CHECKING

from .logging import VALID_LEVELS
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration.

        A missing tables override is an error since no board can be decoded
        without it; everything else only warns.
        """
        errors: List[str] = []
        warnings: List[str] = []

        data_file = self.settings.data_file
        if data_file is not None:
            if not data_file.exists():
                errors.append(f"Game tables file does not exist: {data_file}")
            elif data_file.suffix.lower() != ".json":
                warnings.append(f"Game tables file might be invalid (not .json): {data_file}")

        for name, level in (
            ("console", self.settings.console_log_level),
            ("codec", self.settings.codec_log_level),
        ):
            if level.upper() not in VALID_LEVELS:
                warnings.append(f"Unknown {name} log level: {level}")

        if self.settings.file_logging:
            log_dir = self.settings.log_file_absolute_path.parent
            if log_dir.exists() and not log_dir.is_dir():
                warnings.append(f"Log directory is not a directory: {log_dir}")

        if not self.settings.default_comments:
            warnings.append("Default board comments are empty")

        for warning in warnings:
            logger.debug(f"Settings warning: {warning}")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
