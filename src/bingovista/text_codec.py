"""
Text Codec: goal strings of the form ``Name~field0><field1><...``.

Decoding picks the first candidate layout (root, then upgrades) whose field
count matches, then decodes every field independently. Field problems are
collected into the goal's error string and never abort the goal.
"""

import logging
import re
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

from .abstract import build_goal, format_value, merged_params, placeholder_goal
from .constants import FIELD_SEPARATOR, INT_MAX, LIST_SEPARATOR, TAG_SEPARATOR
from .errors import FieldCountMismatch, GoalDecodeError, GoalEncodeError, MalformedGoal
from .game_data.tables import EnumerationTables, list_names_match
from .goals import REGISTRY, GoalRegistry
from .goals.schema import BOOLEAN, INT32, STRING, GoalDefinition, TextField, clamp_amount
from .models import AbstractGoal, GoalParams, ParamValue

if TYPE_CHECKING:
    from .game_data import GameDataService

# Leading integer, the way the game's own parser reads numbers
_INTEGER = re.compile(r"^\s*([+-]?\d+)")

FieldResult = Tuple[ParamValue, str]


def parse_integer(raw: str) -> Optional[int]:
    """Leading integer of ``raw``, or None if it does not start with one."""
    match = _INTEGER.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def parse_bounded(raw: str, default: int, maximum: int = INT_MAX) -> Tuple[int, str]:
    """Parse an integer clamped to ``0..maximum``.

    Returns:
        ``(value, error)``; ``error`` is empty when the number was in range.
    """
    number = parse_integer(raw)
    if number is None:
        return default, "not a number"
    if number > maximum:
        return maximum, "number out of range; setting to maximum"
    if number < 0:
        return 0, "number negative; setting to zero"
    return number, ""


def check_setting_box(
    raw: str,
    field: TextField,
    default: ParamValue,
    enums: EnumerationTables,
) -> FieldResult:
    """Decode a ``type|value|label|position|list`` setting box.

    Structural problems (part count, data type) give back ``default``;
    other problems keep the best value that could be read.

    Returns:
        ``(value, error)``; ``error`` is empty for a well-formed box.
    """
    parts = raw.split(LIST_SEPARATOR)
    if len(parts) < 5:
        return default, "SettingBox parameters missing"
    if len(parts) > 5:
        return default, "SettingBox parameters excess"
    datatype, text, label, position, list_name = parts
    if datatype != field.datatype:
        return default, "SettingBox type mismatch"

    errors: List[str] = []
    if label != field.label:
        errors.append("name mismatch")
    if position != field.position:
        errors.append("position mismatch")

    value: ParamValue = default
    if datatype == BOOLEAN:
        if text in ("true", "false"):
            value = text == "true"
        else:
            errors.append("invalid Boolean value")
    elif datatype == INT32:
        number = parse_integer(text)
        if number is None:
            errors.append(f"Int32 value {text} not a number")
        elif number > INT_MAX:
            value = INT_MAX
            errors.append("Int32 number out of range")
        elif number < 0:
            value = 0
            errors.append("Int32 number negative")
        else:
            value = number
    elif datatype == STRING:
        value = text
        if enums.has_list(list_name) and not enums.contains(list_name, text):
            errors.append("value not found in list")
        if not list_names_match(list_name, field.list_name):
            errors.append(f'list mismatch "{list_name}"')
    else:
        errors.append(f'unknown type "{datatype}"')
    if datatype != STRING and list_name != "NULL":
        errors.append(f'list mismatch "{list_name}"')

    if errors:
        return value, "SettingBox " + ", ".join(errors)
    return value, ""


class TextCodec:
    """Decodes and encodes single goals in the text format."""

    def __init__(self, data: "GameDataService", registry: GoalRegistry = REGISTRY):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.data = data
        self.registry = registry

    # === DECODING ===

    def split(self, goal_string: str) -> Tuple[str, List[str]]:
        """Split a goal string into its name tag and raw fields.

        Raises:
            MalformedGoal: if there is not exactly one ``~``
        """
        sections = goal_string.split(TAG_SEPARATOR)
        if len(sections) < 2:
            raise MalformedGoal("not a goal, or goal has no parameters")
        if len(sections) > 2:
            raise MalformedGoal("not a goal, or has too many sections")
        name, body = sections
        return name, body.split(FIELD_SEPARATOR)

    def select_layout(
        self, name: str, fields: Sequence[str]
    ) -> Tuple[GoalDefinition, Tuple[TextField, ...]]:
        """First candidate layout with as many fields as the input.

        Raises:
            UnknownGoalType: if the name is not registered
            FieldCountMismatch: if no layout has a matching field count
        """
        for definition in self.registry.candidates(name):
            for layout in definition.text_layouts():
                if layout and len(layout) == len(fields):
                    return definition, layout
        raise FieldCountMismatch(name, len(fields))

    def parse(self, goal_string: str) -> Tuple[GoalDefinition, GoalParams, List[str]]:
        """Decode a goal string into its definition, params and field errors.

        Raises:
            GoalDecodeError: if the goal cannot be decoded at all
        """
        name, fields = self.split(goal_string)
        definition, layout = self.select_layout(name, fields)
        params = merged_params(definition, {})
        errors: List[str] = []
        for index, (field, raw) in enumerate(zip(layout, fields)):
            value, error = self.decode_field(field, raw, definition)
            if field.param is not None and field.param in params:
                params[field.param] = value
            if error:
                label = f' "{field.param}"' if field.param else ""
                errors.append(f"parameter {index}{label}, {error}")
        return definition, params, errors

    def decode_field(
        self, field: TextField, raw: str, definition: GoalDefinition
    ) -> FieldResult:
        """Decode one raw field according to its descriptor."""
        default = definition.params.get(field.param, "") if field.param else ""
        if field.kind == "setting":
            # Early boards stored some integer settings as bare numbers
            if (
                field.datatype == INT32
                and LIST_SEPARATOR not in raw
                and parse_integer(raw) is not None
            ):
                return parse_bounded(raw, int(default))
            return check_setting_box(raw, field, default, self.data.enums)
        if field.kind == "number":
            if isinstance(default, bool):
                number, error = parse_bounded(raw, int(default))
                return number != 0, error
            return parse_bounded(raw, int(default or 0))
        if field.kind == "list":
            return ([] if raw == "" else raw.split(LIST_SEPARATOR)), ""
        if field.kind == "string":
            return raw, ""
        return default, ""

    def decode(self, goal_string: str) -> AbstractGoal:
        """Decode one goal string.

        Never raises for bad input: goals that cannot be decoded become
        placeholder goals whose description starts with "Error:".
        """
        try:
            definition, params, errors = self.parse(goal_string.strip())
        except GoalDecodeError as e:
            self.logger.warning(f"Cannot decode goal {goal_string[:60]!r}: {e}")
            return placeholder_goal(str(e), self.data)
        error = ""
        if errors:
            error = f"{definition.goal_name}: " + "; ".join(errors)
            self.logger.warning(error)
        return build_goal(definition, params, self.data, error)

    # === ENCODING ===

    def select_encoder(self, name: str, params: GoalParams) -> GoalDefinition:
        """Most extended candidate able to represent ``params``.

        Raises:
            GoalEncodeError: if no candidate accepts the params
        """
        for definition in reversed(self.registry.candidates(name)):
            if not definition.text:
                continue
            if definition.text_accepts(merged_params(definition, params), self.data):
                return definition
        raise GoalEncodeError(f"{name}: no text layout can represent these parameters")

    def encode(self, goal: AbstractGoal) -> str:
        """Encode a goal as ``Name~field0><field1><...``.

        Raises:
            UnknownGoalType: if the goal name is not registered
            GoalEncodeError: if no candidate layout accepts the params
        """
        definition = self.select_encoder(goal.name, goal.params)
        params = merged_params(definition, goal.params)
        fields = [self.encode_field(field, params) for field in definition.text]
        return definition.goal_name + TAG_SEPARATOR + FIELD_SEPARATOR.join(fields)

    @staticmethod
    def encode_field(field: TextField, params: GoalParams) -> str:
        """Render one field from the params."""
        if field.kind == "blank" or field.param is None:
            return field.literal
        value = params[field.param]
        if field.kind == "setting":
            if field.datatype == INT32:
                value = clamp_amount(value)
            return LIST_SEPARATOR.join(
                [field.datatype, format_value(value), field.label, field.position, field.list_name]
            )
        if field.kind == "number":
            return str(clamp_amount(value))
        return format_value(value)
