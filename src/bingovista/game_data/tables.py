"""
Enumeration tables: named, order-stable lists of valid symbolic values.

The position of a value in its list is its binary encoding (1-based, 0
meaning absent), so lists must only ever grow at the end.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .loaders import RawTables

# Renamed list identifiers; both spellings of a pair are accepted
LIST_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("regionsreal", "regions"),
    ("weaponsnojelly", "weapons"),
)

BOOLEAN_VALUES = ["false", "true"]


def list_names_match(found: str, expected: str) -> bool:
    """Check a list identifier against the expected one, honouring aliases."""
    if found == expected:
        return True
    return any({found, expected} == set(pair) for pair in LIST_ALIASES)


class EnumerationTables:
    """Lookup between symbolic values and their 1-based list indices."""

    def __init__(self, lists: Mapping[str, Sequence[Any]]):
        self._lists: Dict[str, Tuple[Any, ...]] = {
            name: tuple(values) for name, values in lists.items()
        }
        self._indices: Dict[str, Dict[Any, int]] = {}
        for name, values in self._lists.items():
            index: Dict[Any, int] = {}
            for i, value in enumerate(values):
                # First occurrence wins for duplicated vista coordinates
                index.setdefault(value, i + 1)
            self._indices[name] = index

    @classmethod
    def from_raw(cls, raw: RawTables) -> "EnumerationTables":
        """Build the standard set of lists from raw JSON tables."""
        weapons = list(raw.get("weapons", []))
        region_codes = list(raw["region_codes"])
        vistas: List[Dict[str, Any]] = list(raw["vista_points"])
        lists: Dict[str, List[Any]] = {
            "banitem": list(raw.get("food", [])) + list(raw.get("bannable", [])),
            "boolean": list(BOOLEAN_VALUES),
            "characters": list(raw["characters"].keys()),
            "chatlogs": list(raw.get("chatlogs", [])),
            "craft": list(raw.get("craftable", [])),
            "creatures": ["Any Creature"] + list(raw["creature_names"].keys()),
            "depths": list(raw.get("depthable", [])),
            "echoes": region_codes,
            "EXPFLAGS": list(raw["perks"].keys()),
            "expobject": list(raw.get("storable", [])),
            "food": list(raw.get("food", [])),
            "friend": list(raw.get("befriendable", [])),
            "gates": list(raw.get("gates", [])),
            "items": list(raw["item_names"].keys()),
            "passage": list(raw["passages"].keys()),
            # The first two entries are unused placeholders
            "pearls": list(raw.get("pearls", []))[2:],
            "pinnable": list(raw.get("pinnable", [])),
            "regions": region_codes,
            "regionsreal": region_codes,
            "subregions": list(raw.get("subregions", [])),
            "theft": list(raw.get("theft", [])),
            "tolls": list(raw.get("bombable_outposts", [])),
            "transport": list(raw.get("transportable", [])),
            "unlocks": (
                list(raw.get("unlocks_blue", []))
                + list(raw.get("unlocks_gold", []))
                + list(raw.get("unlocks_red", []))
                + list(raw.get("unlocks_green", []))
            ),
            "vista_region": [v["region"] for v in vistas],
            "vista_room": [v["room"] for v in vistas],
            "vista_x": [v["x"] for v in vistas],
            "vista_y": [v["y"] for v in vistas],
            "weapons": weapons,
            "weaponsnojelly": weapons,
        }
        return cls(lists)

    def names(self) -> List[str]:
        """All list names, sorted."""
        return sorted(self._lists)

    def has_list(self, name: str) -> bool:
        """Check whether a list exists."""
        return name in self._lists

    def get(self, name: str) -> Tuple[Any, ...]:
        """Values of a list, in encoding order.

        Raises:
            KeyError: if the list does not exist
        """
        return self._lists[name]

    def index_of(self, name: str, value: Any) -> int:
        """1-based index of ``value`` in list ``name``, or 0 if absent."""
        return self._indices[name].get(value, 0)

    def value_at(self, name: str, index: int) -> Optional[Any]:
        """Value at 1-based ``index`` in list ``name``, or None if out of range."""
        values = self._lists[name]
        if 1 <= index <= len(values):
            return values[index - 1]
        return None

    def contains(self, name: str, value: Any) -> bool:
        """Check membership of ``value`` in list ``name``."""
        return value in self._indices.get(name, {})

    def indices_of(self, name: str, values: Iterable[Any]) -> List[int]:
        """Map several values to indices; absent values map to 0."""
        return [self.index_of(name, v) for v in values]
