"""
Declarative schema for goal types.

A goal type declares its binary layout as a tuple of BinaryField and its
text layout as a tuple of TextField. The codecs walk these descriptors
generically; a definition only supplies code where the layout cannot be
expressed declaratively (preconditions, custom encoders) and for the
description, comment and paint generators.
"""

from dataclasses import dataclass, replace
from typing import Callable, List, Mapping, Optional, Sequence, Tuple, TYPE_CHECKING

from ..constants import INT_MAX
from ..models import GoalParams, PaintPrimitive, ParamValue

if TYPE_CHECKING:
    from ..game_data import GameDataService

DescribeFn = Callable[[GoalParams, "GameDataService"], str]
PaintFn = Callable[[GoalParams, "GameDataService"], List[PaintPrimitive]]
AcceptsFn = Callable[[GoalParams, "GameDataService"], bool]
BinaryEncodeFn = Callable[
    [GoalParams, "GameDataService", int], Optional[bytes]
]

# Setting-box data types
STRING = "System.String"
INT32 = "System.Int32"
BOOLEAN = "System.Boolean"


# =============================================================================
# Binary layout
# =============================================================================

@dataclass(frozen=True)
class BinaryField:
    """One parameter in a goal's binary record.

    ``offset`` is relative to the payload for numbers and strings, and
    relative to the flags byte for booleans (offset 0 is the flags byte
    itself). ``size`` 0 on strings means "up to a zero byte or the end".
    """
    param: str
    kind: str  # "number" | "bool" | "string" | "pstr"
    offset: int = 0
    size: int = 1
    bit: int = 0
    enum: Optional[str] = None

    @classmethod
    def number(
        cls, param: str, offset: int, size: int = 1, enum: Optional[str] = None
    ) -> "BinaryField":
        """Unsigned little-endian number, optionally an enum index."""
        return cls(param, "number", offset=offset, size=size, enum=enum)

    @classmethod
    def flag(cls, param: str, bit: int, offset: int = 0) -> "BinaryField":
        """Single bit, normally in the high nibble of the flags byte."""
        return cls(param, "bool", offset=offset, size=0, bit=bit)

    @classmethod
    def string(
        cls, param: str, offset: int, size: int = 0, enum: Optional[str] = None
    ) -> "BinaryField":
        """UTF-8 text, or a byte list of enum indices when ``enum`` is set."""
        return cls(param, "string", offset=offset, size=size, enum=enum)

    @classmethod
    def pointer_string(
        cls, param: str, offset: int, size: int = 0, enum: Optional[str] = None
    ) -> "BinaryField":
        """String found at the payload offset stored in byte ``offset``."""
        return cls(param, "pstr", offset=offset, size=size, enum=enum)


# =============================================================================
# Text layout
# =============================================================================

@dataclass(frozen=True)
class TextField:
    """One ``><``-separated field of a goal's text form.

    ``setting`` fields are 5-part setting boxes
    (``type|value|label|position|list``); ``number`` fields are bare
    integers; ``list`` fields are ``|``-joined strings; ``string`` fields are
    copied verbatim; ``blank`` fields are ignored on input and written as
    ``literal``. A ``number`` field without a param is validated but not
    stored, and written as ``literal``.
    """
    kind: str
    param: Optional[str] = None
    datatype: str = ""
    label: str = ""
    position: str = "0"
    list_name: str = "NULL"
    literal: str = "0"

    @classmethod
    def setting(
        cls, param: str, datatype: str, label: str, position: int, list_name: str = "NULL"
    ) -> "TextField":
        """Setting box holding one typed parameter."""
        return cls(
            "setting",
            param,
            datatype=datatype,
            label=label,
            position=str(position),
            list_name=list_name,
        )

    @classmethod
    def choice(cls, param: str, label: str, position: int, list_name: str) -> "TextField":
        """String setting validated against an enumeration list."""
        return cls.setting(param, STRING, label, position, list_name)

    @classmethod
    def integer(cls, param: str, label: str, position: int) -> "TextField":
        """Int32 setting."""
        return cls.setting(param, INT32, label, position)

    @classmethod
    def boolean(cls, param: str, label: str, position: int) -> "TextField":
        """Boolean setting."""
        return cls.setting(param, BOOLEAN, label, position)

    @classmethod
    def number(cls, param: Optional[str] = None, literal: str = "0") -> "TextField":
        """Bare integer; unnamed numbers are progress placeholders."""
        return cls("number", param, literal=literal)

    @classmethod
    def items(cls, param: str) -> "TextField":
        """``|``-joined list of strings."""
        return cls("list", param)

    @classmethod
    def text(cls, param: str) -> "TextField":
        """Verbatim string."""
        return cls("string", param)

    @classmethod
    def blank(cls, literal: str = "") -> "TextField":
        """Unused field, written as ``literal``."""
        return cls("blank", literal=literal)


# Progress placeholders closing most text forms: completed, revealed
DONE_FIELDS: Tuple[TextField, ...] = (TextField.number(), TextField.number())


def _no_text(params: GoalParams, data: "GameDataService") -> str:
    return ""


def _no_paint(params: GoalParams, data: "GameDataService") -> List[PaintPrimitive]:
    return []


def _always(params: GoalParams, data: "GameDataService") -> bool:
    return True


# =============================================================================
# Goal definition
# =============================================================================

@dataclass(frozen=True)
class GoalDefinition:
    """One goal type.

    ``params`` gives the default value of every parameter, which also fixes
    its Python type. ``root`` is set on upgrade variants and names the goal
    whose generators and name they share.
    """
    name: str
    params: Mapping[str, ParamValue]
    binary: Tuple[BinaryField, ...] = ()
    text: Tuple[TextField, ...] = ()
    category: str = ""
    describe: DescribeFn = _no_text
    comment: DescribeFn = _no_text
    paint: PaintFn = _no_paint
    root: Optional[str] = None
    # Older text layouts accepted on input only
    legacy_text: Tuple[Tuple[TextField, ...], ...] = ()
    # Labelled params shown to users; derived from settings when empty
    labels: Tuple[Tuple[str, str], ...] = ()
    text_accepts: AcceptsFn = _always
    binary_accepts: AcceptsFn = _always
    encode_binary: Optional[BinaryEncodeFn] = None

    @property
    def goal_name(self) -> str:
        """Name reported on decoded goals: the root name for upgrades."""
        return self.root or self.name

    def item_labels(self) -> Tuple[Tuple[str, str], ...]:
        """``(label, param)`` pairs shown as the goal's items."""
        if self.labels:
            return self.labels
        return tuple(
            (f.label, f.param)
            for f in self.text
            if f.kind == "setting" and f.param is not None
        )

    def text_layouts(self) -> Tuple[Tuple[TextField, ...], ...]:
        """Primary text layout followed by legacy ones."""
        return (self.text,) + self.legacy_text

    def upgrade(
        self,
        name: str,
        binary: Sequence[BinaryField] = (),
        text: Sequence[TextField] = (),
        **changes: object,
    ) -> "GoalDefinition":
        """Derive an upgrade variant sharing this goal's generators.

        Hooks tied to the root's own layouts are reset unless given in
        ``changes``.
        """
        fields: dict = {
            "legacy_text": (),
            "text_accepts": _always,
            "binary_accepts": _always,
            "encode_binary": None,
        }
        fields.update(changes)
        return replace(
            self,
            name=name,
            root=self.name,
            binary=tuple(binary),
            text=tuple(text),
            **fields,
        )


def clamp_amount(value: ParamValue, maximum: int = INT_MAX) -> int:
    """Coerce a parameter to an integer in ``0..maximum``."""
    try:
        number = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0
    return max(0, min(number, maximum))


__all__ = [
    "BinaryField",
    "TextField",
    "GoalDefinition",
    "DONE_FIELDS",
    "STRING",
    "INT32",
    "BOOLEAN",
    "clamp_amount",
]
