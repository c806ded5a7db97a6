"""
File loader for the static Bingo game tables.

Reads the bundled ``tables.json`` (or an override file) with orjson.
"""

import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

import orjson

from ..errors import BingoError

# Keys every tables file must provide
REQUIRED_KEYS = (
    "passages",
    "region_codes",
    "region_names",
    "region_names_saint",
    "creature_names",
    "item_names",
    "characters",
    "perks",
    "vista_points",
)

RawTables = Dict[str, Any]


class TablesLoadError(BingoError):
    """Raised when the tables file cannot be read or is incomplete."""
    pass


class GameTablesLoader:
    """Loads the enumeration and display tables from JSON."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load(self, path: Optional[Path] = None) -> RawTables:
        """Load tables from ``path``, or from the copy shipped with the package.

        Args:
            path: Optional override file

        Returns:
            Mapping of table name to its raw JSON value

        Raises:
            TablesLoadError: if the file is unreadable, not a JSON object,
                or lacks a required table
        """
        try:
            if path is None:
                bundled = resources.files("bingovista") / "data" / "tables.json"
                raw = bundled.read_bytes()
                source = "<bundled tables.json>"
            else:
                with Path(path).open("rb") as f:  # orjson works with bytes
                    raw = f.read()
                source = str(path)
            data = orjson.loads(raw)
        except (OSError, orjson.JSONDecodeError) as e:
            self.logger.error(f"Error reading tables file {path}: {e}")
            raise TablesLoadError(f"cannot read tables: {e}") from e

        if not isinstance(data, dict):
            raise TablesLoadError(f"{source}: top level must be an object")

        missing = [key for key in REQUIRED_KEYS if key not in data]
        if missing:
            raise TablesLoadError(f"{source}: missing tables: {', '.join(missing)}")

        self.logger.debug(f"Loaded {len(data)} tables from {source}")
        return data
