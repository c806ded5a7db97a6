"""
Codec-related settings for bingovista.
"""

from pathlib import Path
from typing import Optional, TYPE_CHECKING

from ..constants import DEFAULT_COMMENTS

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class CodecSettings:
    """Manages board codec settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

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

    @property
    def data_file(self) -> Optional[Path]:
        """Get override path of the game tables file (None = bundled copy)."""
        path_str = self._get_str("codec/data_file", "")
        return Path(path_str) if path_str else None

    @data_file.setter
    def data_file(self, value: Optional[Path]) -> None:
        """Set override path of the game tables file."""
        self.settings.setValue("codec/data_file", str(value) if value else "")
        self.settings.sync()

    @property
    def default_comments(self) -> str:
        """Get comments given to boards parsed from text."""
        return self._get_str("codec/default_comments", DEFAULT_COMMENTS)

    @default_comments.setter
    def default_comments(self, value: str) -> None:
        """Set comments given to boards parsed from text."""
        self.settings.setValue("codec/default_comments", value)
        self.settings.sync()

    @property
    def text_include_shelter(self) -> bool:
        """Check if text boards are written with the shelter part."""
        return self._get_bool("codec/text_include_shelter", False)

    @text_include_shelter.setter
    def text_include_shelter(self, value: bool) -> None:
        """Set whether text boards are written with the shelter part."""
        self.settings.setValue("codec/text_include_shelter", value)
        self.settings.sync()

    @property
    def pad_binary(self) -> bool:
        """Check if binary boards are padded to a multiple of 3 bytes."""
        return self._get_bool("codec/pad_binary", True)

    @pad_binary.setter
    def pad_binary(self, value: bool) -> None:
        """Set binary board padding."""
        self.settings.setValue("codec/pad_binary", value)
        self.settings.sync()
