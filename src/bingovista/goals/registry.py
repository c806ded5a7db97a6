"""
Goal Type Registry and Upgrade Index.

The registry is an ordered list of goal definitions; a definition's position
is its binary type byte. The upgrade index maps a root goal name to the
newer definitions that extend it.
"""

import logging
from typing import Dict, Iterator, List, Mapping, Optional, Sequence

from ..errors import UnknownChallengeNumber, UnknownGoalType
from .schema import GoalDefinition

logger = logging.getLogger(__name__)

# Historical or misspelled goal names accepted on text input
NAME_ALIASES: Dict[str, str] = {
    "BingoMoonCloak": "BingoMoonCloakChallenge",
    "BingoAllRegionsExceptChallenge": "BingoAllRegionsExcept",
    "BingoNoNeedleTradingCheallenge": "BingoNoNeedleTradingChallenge",
}


class GoalRegistry:
    """Ordered goal definitions with name lookup and upgrade candidates."""

    def __init__(
        self,
        definitions: Sequence[GoalDefinition],
        upgrades: Mapping[str, Sequence[str]],
        aliases: Optional[Mapping[str, str]] = None,
    ):
        self._definitions: List[GoalDefinition] = list(definitions)
        self._aliases: Dict[str, str] = dict(aliases or {})
        self._by_name: Dict[str, int] = {}
        for index, definition in enumerate(self._definitions):
            if definition.name in self._by_name:
                raise ValueError(f"duplicate goal definition: {definition.name}")
            self._by_name[definition.name] = index

        self._upgrades: Dict[str, List[str]] = {}
        for root, names in upgrades.items():
            if root not in self._by_name:
                raise ValueError(f"upgrade root not registered: {root}")
            for name in names:
                if name not in self._by_name:
                    raise ValueError(f"upgrade not registered: {name}")
                if self.get(name).root != root:
                    raise ValueError(f"upgrade {name} does not name {root} as root")
            self._upgrades[root] = list(names)

        logger.debug(
            f"Goal registry built with {len(self._definitions)} definitions, "
            f"{len(self._upgrades)} upgraded"
        )

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[GoalDefinition]:
        return iter(self._definitions)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.resolve_name(name) in self._by_name

    def resolve_name(self, name: str) -> str:
        """Apply name aliases."""
        return self._aliases.get(name, name)

    def get(self, name: str) -> GoalDefinition:
        """Definition by name (aliases honoured).

        Raises:
            UnknownGoalType: if the name is not registered
        """
        index = self._by_name.get(self.resolve_name(name))
        if index is None:
            raise UnknownGoalType(name)
        return self._definitions[index]

    def at(self, number: int) -> GoalDefinition:
        """Definition by binary type byte.

        Raises:
            UnknownChallengeNumber: if out of range
        """
        if not 0 <= number < len(self._definitions):
            raise UnknownChallengeNumber(number)
        return self._definitions[number]

    def number_of(self, name: str) -> int:
        """Binary type byte of a definition."""
        self.get(name)
        return self._by_name[self.resolve_name(name)]

    def upgrades_of(self, name: str) -> List[GoalDefinition]:
        """Upgrade definitions of a root goal, in index order."""
        root = self.get(name).goal_name
        return [self.get(n) for n in self._upgrades.get(root, [])]

    def candidates(self, name: str) -> List[GoalDefinition]:
        """``[root, *upgrades]`` for a goal name, in decode order."""
        root = self.get(self.get(name).goal_name)
        return [root] + self.upgrades_of(root.name)

    def root_names(self) -> List[str]:
        """Names of all goals that are not upgrade variants."""
        return [d.name for d in self._definitions if d.root is None]

    def upgrade_index(self) -> Dict[str, List[str]]:
        """Copy of the upgrade index."""
        return {root: list(names) for root, names in self._upgrades.items()}
