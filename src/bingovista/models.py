"""
Data models for Bingo goals and boards.

Contains the abstract goal representation produced by both codecs, the
board container and the paint primitives describing how a goal square is
drawn. Models carry no codec logic.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .constants import ANY_CHARACTER, DEFAULT_COMMENTS

ParamValue = Union[str, int, bool, List[str]]
GoalParams = Dict[str, ParamValue]


# =============================================================================
# Paint primitives
# =============================================================================

@dataclass(frozen=True)
class IconPaint:
    """Icon drawn from the game's sprite atlas."""
    value: str
    color: str
    scale: float = 1.0
    rotation: int = 0
    background: Optional["IconPaint"] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        data: Dict[str, Any] = {
            "type": "icon",
            "value": self.value,
            "scale": self.scale,
            "color": self.color,
            "rotation": self.rotation,
        }
        if self.background is not None:
            data["background"] = self.background.to_dict()
        return data


@dataclass(frozen=True)
class TextPaint:
    """Short text drawn inside the goal square."""
    value: str
    color: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        return {"type": "text", "value": self.value, "color": self.color}


@dataclass(frozen=True)
class BreakPaint:
    """Line separator between paint rows."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        return {"type": "break"}


PaintPrimitive = Union[IconPaint, TextPaint, BreakPaint]


# =============================================================================
# Goals and boards
# =============================================================================

@dataclass(frozen=True)
class AbstractGoal:
    """Decoded goal, independent of the format it came from.

    ``name`` is always the root goal name, even when the goal was decoded
    through an upgraded variant. ``params`` holds the typed parameter values
    used for re-encoding; ``items`` and ``values`` are the user-facing labels
    and their string values.
    """
    name: str
    category: str
    items: List[str] = field(default_factory=list)
    values: List[str] = field(default_factory=list)
    description: str = ""
    comments: str = ""
    paint: List[PaintPrimitive] = field(default_factory=list)
    error: str = ""
    params: GoalParams = field(default_factory=dict)

    @property
    def is_placeholder(self) -> bool:
        """True for the empty challenge class, used for failed goals too."""
        return self.name == "BingoChallenge"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        return {
            "name": self.name,
            "category": self.category,
            "items": list(self.items),
            "values": list(self.values),
            "description": self.description,
            "comments": self.comments,
            "paint": [p.to_dict() for p in self.paint],
            "error": self.error,
            "params": dict(self.params),
        }


@dataclass(frozen=True)
class ModPack:
    """Mod pack reference stored in the binary board header."""
    hash: int
    data: bytes = b""

    @property
    def hash_hex(self) -> str:
        """Hash formatted the way mod packs are usually listed."""
        return f"{self.hash:08x}"


@dataclass
class Board:
    """A whole Bingo board.

    ``goals`` normally holds ``width * height`` entries, but decoding is
    tolerant of ragged boards. ``character`` is the display name
    (e.g. "Survivor"), or "Any".
    """
    comments: str = DEFAULT_COMMENTS
    character: str = ANY_CHARACTER
    perks: int = 0
    shelter: str = ""
    mods: List[ModPack] = field(default_factory=list)
    width: int = 0
    height: int = 0
    goals: List[AbstractGoal] = field(default_factory=list)
    version: str = ""
    text: str = ""
    binary: bytes = b""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        return {
            "comments": self.comments,
            "character": self.character,
            "perks": self.perks,
            "shelter": self.shelter,
            "mods": [{"hash": m.hash_hex, "data": m.data.hex()} for m in self.mods],
            "width": self.width,
            "height": self.height,
            "version": self.version,
            "goals": [g.to_dict() for g in self.goals],
            "text": self.text,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }
