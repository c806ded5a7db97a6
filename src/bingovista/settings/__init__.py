"""
Settings package for bingovista.

This package provides a modular, type-safe configuration management system
using Qt's QSettings for cross-platform storage.

Usage:
    from bingovista.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .codec import CodecSettings
from .logging import LoggingSettings
from .types import ConfigVersion, ConfigError, ValidationResult

__all__ = [
    "AppSettings",
    "CodecSettings",
    "LoggingSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
]
