"""
Settings migration system for bingovista.
"""

import logging
from typing import TYPE_CHECKING

from .types import ConfigVersion

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


class SettingsMigrator:
    """Handles configuration migration between versions."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def ensure_version(self) -> None:
        """Ensure configuration version is set and handle migrations."""
        current_version = str(self.settings.value("app/version", ""))

        if not current_version:
            # First run - set current version
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.setValue("app/first_run", True)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")
        elif current_version != ConfigVersion.CURRENT.value:
            self._migrate_config(current_version, ConfigVersion.CURRENT.value)

    def _migrate_config(self, from_version: str, to_version: str) -> None:
        """Migrate configuration from old version to new version."""
        logger.info(f"Migrating configuration from {from_version} to {to_version}")

        if from_version == ConfigVersion.V1_0.value and to_version == ConfigVersion.V1_1.value:
            self._migrate_1_0_to_1_1()

        self.settings.setValue("app/version", to_version)
        self.settings.setValue("app/migrated_from", from_version)
        self.settings.sync()
        logger.info(f"Migration from {from_version} to {to_version} completed")

    def _migrate_1_0_to_1_1(self) -> None:
        """Migrate from version 1.0 to 1.1 - codec options moved to their own group."""
        logger.debug("Performing migration from 1.0 to 1.1")

        old_data_file = str(self.settings.value("paths/tables", "") or "")
        if old_data_file:
            self.settings.setValue("codec/data_file", old_data_file)
            self.settings.remove("paths/tables")
            logger.info(f"Migrated tables path to codec/data_file: {old_data_file}")

        # 1.0 stored the inverse flag
        no_padding = self.settings.value("board/no_padding", None)
        if no_padding is not None:
            padded = str(no_padding).lower() not in ("true", "1", "yes")
            self.settings.setValue("codec/pad_binary", padded)
            self.settings.remove("board/no_padding")
            logger.info(f"Migrated board/no_padding={no_padding} to codec/pad_binary={padded}")
