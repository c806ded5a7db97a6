"""
Binary Codec: one goal record ``type, flags, length, payload[length]``.

Decoding dereferences the registry by the type byte and walks the
definition's binary fields. Encoding tries the root layout first, then the
upgrades, and keeps the first one able to represent the parameters.
"""

import logging
from typing import List, Tuple, TYPE_CHECKING

from .abstract import build_goal, merged_params, placeholder_goal
from .binary import apply_bool, apply_uint, clamp, read_bit, read_cstring, read_uint
from .constants import CHAR_MAX, GOAL_LENGTH, INT_MAX
from .errors import GoalDecodeError, GoalEncodeError, MalformedGoal
from .goals import REGISTRY, GoalRegistry
from .goals.schema import BinaryField, GoalDefinition, clamp_amount
from .models import AbstractGoal, GoalParams, ParamValue

if TYPE_CHECKING:
    from .game_data import GameDataService

# Largest payload a record's length byte can describe
MAX_PAYLOAD = 255


def number_capacity(size: int) -> int:
    """Largest count stored in a ``size``-byte number field."""
    if size == 1:
        return CHAR_MAX
    if size == 2:
        return INT_MAX
    return (1 << (8 * size)) - 1


def _place(payload: bytearray, offset: int, data: bytes) -> None:
    end = offset + len(data)
    if len(payload) < end:
        payload.extend(bytes(end - len(payload)))
    payload[offset:end] = data


class BinaryCodec:
    """Decodes and encodes single goal records."""

    def __init__(self, data: "GameDataService", registry: GoalRegistry = REGISTRY):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.data = data
        self.registry = registry

    # === DECODING ===

    def parse(self, record: bytes) -> Tuple[GoalDefinition, GoalParams, List[str]]:
        """Decode a record into its definition, params and field errors.

        Raises:
            MalformedGoal: if the record is shorter than its prefix
            UnknownChallengeNumber: if the type byte is not registered
        """
        record = bytes(record)
        if len(record) < GOAL_LENGTH:
            raise MalformedGoal(
                f"goal record too short: {len(record)} bytes, expected at least {GOAL_LENGTH}"
            )
        record = record[:GOAL_LENGTH + record[2]]
        definition = self.registry.at(record[0])
        params = merged_params(definition, {})
        errors: List[str] = []
        for field in definition.binary:
            value, field_errors = self.decode_field(field, record)
            if field_errors:
                errors.extend(field_errors)
            else:
                params[field.param] = value
        return definition, params, errors

    def _read_string(self, field: BinaryField, record: bytes, start: int) -> bytes:
        if field.size == 0:
            return read_cstring(record, start)
        return record[start:start + field.size]

    def _lookup(self, field: BinaryField, index: int, errors: List[str]) -> ParamValue:
        value = self.data.enums.value_at(field.enum, index)  # type: ignore[arg-type]
        if value is None:
            errors.append(
                f"param {field.param} formatter {field.enum} value {index} out of bounds"
            )
            return ""
        return value

    def decode_field(self, field: BinaryField, record: bytes) -> Tuple[ParamValue, List[str]]:
        """Read one field; a non-empty error list means the default is kept."""
        errors: List[str] = []
        if field.kind == "bool":
            return bool(read_bit(record, 1 + field.offset, field.bit)), errors

        if field.kind == "number":
            number = read_uint(record, GOAL_LENGTH + field.offset, field.size)
            if field.enum is None:
                return number, errors
            return self._lookup(field, number, errors), errors

        start = GOAL_LENGTH + field.offset
        if field.kind == "pstr":
            start = GOAL_LENGTH + (record[start] if start < len(record) else 0)
        raw = self._read_string(field, record, start)
        if field.enum is None:
            return raw.decode("utf-8", errors="replace"), errors
        values = [self._lookup(field, index, errors) for index in raw]
        return [str(v) for v in values], errors

    def decode(self, record: bytes) -> AbstractGoal:
        """Decode one record, turning failures into a placeholder goal."""
        try:
            definition, params, errors = self.parse(record)
        except GoalDecodeError as e:
            self.logger.warning(f"Cannot decode goal record: {e}")
            return placeholder_goal(str(e), self.data)
        error = ""
        if errors:
            error = f"{definition.goal_name}: " + "; ".join(errors)
            self.logger.warning(error)
        return build_goal(definition, params, self.data, error)

    # === ENCODING ===

    def encode(self, goal: AbstractGoal) -> bytes:
        """Encode a goal with the most compact layout that can hold it.

        Raises:
            UnknownGoalType: if the goal name is not registered
            GoalEncodeError: if no candidate layout accepts the params
        """
        for definition in self.registry.candidates(goal.name):
            params = merged_params(definition, goal.params)
            if not definition.binary_accepts(params, self.data):
                continue
            number = self.registry.number_of(definition.name)
            if definition.encode_binary is not None:
                record = definition.encode_binary(params, self.data, number)
                if record is None:
                    continue
                return record
            return self.encode_fields(definition, params, number)
        raise GoalEncodeError(f"{goal.name}: no binary layout can represent these parameters")

    def encode_fields(self, definition: GoalDefinition, params: GoalParams, number: int) -> bytes:
        """Generic encoder placing every field at its declared position."""
        enums = self.data.enums
        prefix = bytearray([number, 0, 0])
        payload = bytearray()
        pointers: List[Tuple[int, bytes]] = []
        for field in definition.binary:
            value = params[field.param]
            if field.kind == "bool":
                if field.offset == 0:
                    apply_bool(prefix, 1, field.bit, value)
                else:
                    if len(payload) < field.offset - 1:
                        payload.extend(bytes(field.offset - 1 - len(payload)))
                    apply_bool(payload, field.offset - 2, field.bit, value)
            elif field.kind == "number":
                if field.enum is not None:
                    count = enums.index_of(field.enum, value)
                else:
                    count = clamp_amount(value, number_capacity(field.size))
                chunk = bytearray(field.size)
                apply_uint(chunk, 0, field.size, clamp(count, (1 << (8 * field.size)) - 1))
                _place(payload, field.offset, bytes(chunk))
            else:
                data = self._string_bytes(field, value)
                if field.kind == "pstr":
                    pointers.append((field.offset, data))
                else:
                    _place(payload, field.offset, data)
        # Pointed-to strings follow every fixed field
        for offset, data in pointers:
            _place(payload, offset, b"\x00")
            payload[offset] = clamp(len(payload), MAX_PAYLOAD)
            payload.extend(data)
        payload = payload[:MAX_PAYLOAD]
        prefix[2] = len(payload)
        return bytes(prefix) + bytes(payload)

    def _string_bytes(self, field: BinaryField, value: ParamValue) -> bytes:
        if field.enum is not None:
            values = value if isinstance(value, list) else [value]
            data = bytes(clamp(i, 255) for i in self.data.enums.indices_of(field.enum, values))
        else:
            data = str(value).encode("utf-8")
        if field.size:
            data = data[:field.size].ljust(field.size, b"\x00")
        return data
