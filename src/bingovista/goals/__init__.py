"""
Goal Type Registry for Bingo boards.

``DEFINITIONS`` is ordered by binary type byte. Entries are only ever
appended; extended layouts of an existing goal are added as upgrades and
listed in ``UPGRADES``.
"""

from typing import Dict, List, Tuple

from .creatures import (
    CREATURE_GATE,
    DAMAGE,
    DAMAGE_EX,
    DAMAGE_EX2,
    DEPTHS,
    DODGE_LEVIATHAN,
    HATCH_NOODLE,
    KILL,
    MAUL_TYPES,
    MAUL_X,
    PIN,
    RIV_CELL,
    TAME,
    TAME_EX,
    TRANSPORT,
)
from .general import (
    ACHIEVEMENT,
    CHALLENGE,
    CYCLE_SCORE,
    GLOBAL_SCORE,
    HELL,
    TRADE,
    TRADE_TRADED,
    UNLOCK,
)
from .items import (
    COLLECT_PEARL,
    CRAFT,
    DONT_USE_ITEM,
    EAT,
    GREEN_NEURON,
    ITEM_HOARD,
    KARMA_FLOWER,
    MOON_CLOAK,
    NEURON_DELIVERY,
    NO_NEEDLE_TRADING,
    PEARL_DELIVERY,
    PEARL_HOARD,
    POPCORN,
    SAINT_DELIVERY,
    SAINT_POPCORN,
    STEAL,
)
from .regions import (
    ALL_REGIONS_EXCEPT,
    BOMB_TOLL,
    BROADCAST,
    ECHO,
    ENTER_REGION,
    ENTER_REGION_FROM,
    NO_REGION,
    VISTA,
    VISTA_EX,
)
from .registry import NAME_ALIASES, GoalRegistry
from .schema import BinaryField, GoalDefinition, TextField

DEFINITIONS: Tuple[GoalDefinition, ...] = (
    CHALLENGE,  # 0
    ACHIEVEMENT,
    ALL_REGIONS_EXCEPT,
    BOMB_TOLL,
    COLLECT_PEARL,
    CRAFT,  # 5
    CREATURE_GATE,
    CYCLE_SCORE,
    DAMAGE,
    DEPTHS,
    DODGE_LEVIATHAN,  # 10
    DONT_USE_ITEM,
    EAT,
    ECHO,
    ENTER_REGION,
    GLOBAL_SCORE,  # 15
    GREEN_NEURON,
    HATCH_NOODLE,
    HELL,
    ITEM_HOARD,
    KARMA_FLOWER,  # 20
    KILL,
    MAUL_TYPES,
    MAUL_X,
    NEURON_DELIVERY,
    NO_NEEDLE_TRADING,  # 25
    NO_REGION,
    PEARL_DELIVERY,
    PEARL_HOARD,
    PIN,
    POPCORN,  # 30
    RIV_CELL,
    SAINT_DELIVERY,
    SAINT_POPCORN,
    STEAL,
    TAME,  # 35
    TRADE,
    TRADE_TRADED,
    TRANSPORT,
    UNLOCK,
    VISTA,  # 40
    VISTA_EX,
    ENTER_REGION_FROM,
    MOON_CLOAK,
    BROADCAST,
    DAMAGE_EX,  # 45
    TAME_EX,
    DAMAGE_EX2,
)

# Root goal -> upgrades, most compact layout first
UPGRADES: Dict[str, List[str]] = {
    DAMAGE.name: [DAMAGE_EX2.name, DAMAGE_EX.name],
    TAME.name: [TAME_EX.name],
    VISTA.name: [VISTA_EX.name],
}

REGISTRY = GoalRegistry(DEFINITIONS, UPGRADES, NAME_ALIASES)

__all__ = [
    "REGISTRY",
    "DEFINITIONS",
    "UPGRADES",
    "NAME_ALIASES",
    "GoalRegistry",
    "GoalDefinition",
    "BinaryField",
    "TextField",
]
