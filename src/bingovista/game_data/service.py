"""
Main service for the static Bingo game data.

Wraps the enumeration tables together with the display lookups (names,
icons and colours) used when describing and painting goals.
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from .loaders import GameTablesLoader, RawTables
from .tables import EnumerationTables

if TYPE_CHECKING:
    from ..settings import AppSettings

WHITE = "#ffffff"


class GameDataService:
    """Enumeration tables plus display lookups for goal generators."""

    def __init__(
        self,
        data_file: Optional[Path] = None,
        settings: Optional["AppSettings"] = None,
    ):
        """Load game tables.

        Args:
            data_file: Optional override of the bundled tables file.
            settings: App settings; ``codec/data_file`` is used when
                ``data_file`` is not given.
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        if data_file is None and settings is not None:
            data_file = settings.data_file
        self.loader = GameTablesLoader()
        self.raw: RawTables = self.loader.load(data_file)
        self.enums = EnumerationTables.from_raw(self.raw)
        self.logger.debug(f"Game data ready with {len(self.enums.names())} lists")

    # === RAW TABLE ACCESS ===

    def table(self, name: str) -> Any:
        """Raw table by name (empty dict if absent)."""
        return self.raw.get(name, {})

    def color(self, name: str) -> str:
        """Named palette colour, white if unknown."""
        return self.raw["colors"].get(name, WHITE) if "colors" in self.raw else WHITE

    # === REGIONS ===

    def region_name(self, code: str) -> str:
        """Display name of a region code, including its Saint name if any.

        Returns an empty string for unknown codes.
        """
        normal = self.raw["region_names"].get(code, "")
        saint = self.raw["region_names_saint"].get(code, "")
        if normal and saint:
            return f"{normal} / {saint}"
        return normal or saint

    @staticmethod
    def region_of_room(room: str) -> str:
        """Region code prefix of a room name (text before the first "_")."""
        pos = room.find("_")
        return room[:pos] if pos >= 0 else ""

    # === ENTITIES (CREATURES AND ITEMS) ===

    def entity_display_name(self, name: str) -> str:
        """Plural display text of an item or creature, or the name itself."""
        return (
            self.raw["item_names"].get(name)
            or self.raw["creature_names"].get(name)
            or name
        )

    def quantify(self, amount: int, name: str) -> str:
        """Describe ``amount`` of an entity in English.

        ``quantify(3, "Spear")`` gives "3 Spears"; ``quantify(1, "Spear")``
        gives "a Spear".
        """
        text = self.entity_display_name(name)
        if amount != 1:
            return f"{amount} {text}"
        text = re.sub(r"Mice$", "Mouse", text)
        text = re.sub(r"ies$", "y", text)
        text = re.sub(r"ches$", "ch", text)
        text = re.sub(r"s$", "", text)
        article = "an" if re.match(r"[AEIOU]", text, re.IGNORECASE) else "a"
        return f"{article} {text}"

    def entity_color(self, name: str) -> str:
        """Icon colour of an item or creature."""
        item_colors = self.raw.get("item_colors", {})
        return (
            item_colors.get(name)
            or self.raw.get("creature_colors", {}).get(name)
            or item_colors.get("Default", WHITE)
        )

    def item_icon(self, name: str) -> str:
        """Atlas icon of an item (empty if unknown)."""
        return self.raw.get("item_icons", {}).get(name, "")

    def creature_icon(self, name: str) -> str:
        """Atlas icon of a creature (empty if unknown)."""
        return self.raw.get("creature_icons", {}).get(name, "")

    def entity_icon(self, name: str) -> str:
        """Atlas icon of an item, falling back to creatures."""
        return self.item_icon(name) or self.creature_icon(name)

    # === PEARLS ===

    def pearl_name(self, pearl: str) -> str:
        """Colour name of a data pearl."""
        return self.raw.get("pearl_names", {}).get(pearl, pearl)

    def pearl_region(self, pearl: str) -> str:
        """Region code a data pearl is found in."""
        return self.raw.get("pearl_regions", {}).get(pearl, "")

    def pearl_color(self, pearl: str) -> str:
        """Icon colour of a data pearl."""
        return self.raw.get("pearl_colors", {}).get(pearl, self.entity_color("Pearl"))

    # === CHARACTERS, PASSAGES AND PERKS ===

    def passage_name(self, passage: str) -> str:
        """Display name of a passage, "unknown" if not listed."""
        return self.raw["passages"].get(passage, "unknown")

    def character_name(self, code: str) -> Optional[str]:
        """Display name of a character code (e.g. "White" -> "Survivor")."""
        return self.raw["characters"].get(code)

    def character_code(self, display: str) -> Optional[str]:
        """Character code of a display name (e.g. "Survivor" -> "White")."""
        for code, name in self.raw["characters"].items():
            if name == display:
                return code
        return None

    def character_names(self) -> List[str]:
        """Display names of all characters, in binary encoding order."""
        return list(self.raw["characters"].values())

    def perk_names(self, perks: int) -> List[str]:
        """Names of the perks set in a bitmask."""
        names: Dict[str, str] = self.raw.get("perk_names", {})
        return [
            names.get(key, key)
            for key, bit in self.raw["perks"].items()
            if perks & bit
        ]

    # === VISTAS AND UNLOCKS ===

    def stock_vista_index(self, region: str, room: str, x: int, y: int) -> int:
        """1-based index of a stock vista point, or 0 if customised."""
        for i, point in enumerate(self.raw["vista_points"]):
            if (
                point["region"] == region
                and point["room"] == room
                and point["x"] == x
                and point["y"] == y
            ):
                return i + 1
        return 0

    def unlock_kind(self, token: str) -> str:
        """Which arena unlock group a token belongs to ("" if none)."""
        for kind in ("blue", "gold", "green", "red"):
            if token in self.raw.get(f"unlocks_{kind}", []):
                return kind
        return ""

    def gold_unlock_name(self, token: str) -> str:
        """Display name of a gold (arena) unlock token."""
        name = self.region_name(token)
        if name:
            return name
        return self.raw.get("unlocks_gold_names", {}).get(token, token)
