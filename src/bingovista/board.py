"""
Board Assembler: whole boards in the text and binary formats.

Binary header (little-endian, 21 bytes)::

    [0]  u32  magic number "RwBi"
    [4]  u8   version major
    [5]  u8   version minor
    [6]  u8   width
    [7]  u8   height
    [8]  u8   character (1-based, 0 = Any)
    [9]  u16  shelter pointer (0 = none)
    [11] u32  perks bitmask
    [15] u16  goals pointer
    [17] u16  mods pointer (0 = none)
    [19] u16  reserved, must be 0

followed by the zero-terminated comments, the zero-terminated shelter, the
mod list and the goal records.
"""

import logging
import math
import re
import warnings
from typing import List, Optional, TYPE_CHECKING

from .abstract import PLACEHOLDER, build_goal
from .binary import (
    apply_long,
    apply_short,
    find_zero,
    pad_to_multiple,
    read_long,
    read_short,
)
from .binary_codec import BinaryCodec
from .constants import (
    ANY_CHARACTER,
    DEFAULT_COMMENTS,
    FIELD_SEPARATOR,
    GOAL_LENGTH,
    GOAL_SEPARATOR,
    HEADER_LENGTH,
    MAGIC_NUMBER,
    MODPACK_END,
    MODPACK_HEADER_LENGTH,
    MODPACK_PACK,
    TAG_SEPARATOR,
    VERSION_MAJOR,
    VERSION_MINOR,
    version_string,
)
from .errors import (
    BoardFormatError,
    InsufficientData,
    MagicNumberMismatch,
    MissingTerminator,
    ModListError,
    PointerOutOfBounds,
    ReservedFieldNotZero,
    VersionNewerThanSupported,
)
from .goals import REGISTRY
from .models import AbstractGoal, Board, ModPack
from .text_codec import TextCodec

if TYPE_CHECKING:
    from .game_data import GameDataService

# Character prefix of the first goal: "White;" (0.90+) or "White_" (0.86)
_HEADER = re.compile(r"^([A-Za-z]{1,12})([_;])")
# Character and shelter prefix: "White;SU_S01;" (1.3)
_HEADER_SHELTER = re.compile(r"^([A-Za-z]{1,12});([^;~]*);")
_GOAL_SEPARATOR = re.compile(r"\s*" + GOAL_SEPARATOR + r"\s*")

RANDOM_SHELTER = "random"


class BoardAssembler:
    """Frames goal codecs into whole boards."""

    def __init__(
        self,
        data: "GameDataService",
        text_codec: Optional[TextCodec] = None,
        binary_codec: Optional[BinaryCodec] = None,
        default_comments: str = DEFAULT_COMMENTS,
        include_shelter: bool = False,
        pad_binary: bool = True,
    ):
        """Create an assembler.

        Args:
            data: Game data service providing the enumeration tables
            text_codec: Goal text codec (created from ``data`` if omitted)
            binary_codec: Goal binary codec (created from ``data`` if omitted)
            default_comments: Comments given to boards parsed from text
            include_shelter: Write the shelter part when rendering text boards
            pad_binary: Pad binary boards with zeroes to a multiple of 3 bytes
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.data = data
        self.text_codec = text_codec or TextCodec(data)
        self.binary_codec = binary_codec or BinaryCodec(data)
        self.default_comments = default_comments
        self.include_shelter = include_shelter
        self.pad_binary = pad_binary

    # === CHARACTERS ===

    def _character_from_code(self, code: str) -> str:
        return self.data.character_name(code) or ANY_CHARACTER

    def _character_code(self, display: str) -> str:
        return self.data.character_code(display) or ANY_CHARACTER

    def _character_index(self, display: str) -> int:
        names = self.data.character_names()
        return names.index(display) + 1 if display in names else 0

    @staticmethod
    def _record_errors(board: Board, index: int, goal: AbstractGoal) -> None:
        if goal.error:
            board.errors.append(f"Goal {index}, {goal.error}")

    # === TEXT BOARDS ===

    def parse_text(self, text: str) -> Board:
        """Parse a text board; never raises for malformed goals."""
        source = _GOAL_SEPARATOR.sub(GOAL_SEPARATOR, text.strip())
        goals = source.split(GOAL_SEPARATOR)
        size = math.ceil(math.sqrt(len(goals)))
        board = Board(
            comments=self.default_comments,
            width=size,
            height=size,
            text=source,
        )

        first = goals[0]
        with_shelter = _HEADER_SHELTER.match(first)
        plain = _HEADER.match(first)
        if with_shelter:
            board.version = "1.3"
            board.character = self._character_from_code(with_shelter.group(1))
            shelter = with_shelter.group(2)
            board.shelter = "" if shelter == RANDOM_SHELTER else shelter
            goals[0] = first[with_shelter.end():]
        elif plain:
            board.version = "0.90" if plain.group(2) == ";" else "0.86"
            board.character = self._character_from_code(plain.group(1))
            goals[0] = first[plain.end():]
        else:
            board.version = "0.85"

        if len(goals) == 1 and not goals[0]:
            board.goals.append(
                build_goal(REGISTRY.get(PLACEHOLDER), {"desc": "Empty board"}, self.data)
            )
            return board

        for index, goal_string in enumerate(goals):
            if TAG_SEPARATOR not in goal_string or FIELD_SEPARATOR not in goal_string:
                message = f"Error extracting goal: {goal_string}"
                goal = build_goal(
                    REGISTRY.get(PLACEHOLDER), {"desc": message}, self.data, error=message
                )
            else:
                goal = self.text_codec.decode(goal_string)
            self._record_errors(board, index, goal)
            board.goals.append(goal)

        self.logger.debug(
            f"Parsed v{board.version} text board: {len(board.goals)} goals, "
            f"{len(board.errors)} with errors"
        )
        return board

    def render_text(self, board: Board, include_shelter: Optional[bool] = None) -> str:
        """Render a board in the text format.

        Raises:
            GoalEncodeError: if a goal cannot be written as text
        """
        if include_shelter is None:
            include_shelter = self.include_shelter
        header = self._character_code(board.character) + ";"
        if include_shelter:
            header += (board.shelter or RANDOM_SHELTER) + ";"
        return header + GOAL_SEPARATOR.join(self.text_codec.encode(g) for g in board.goals)

    # === MOD LIST ===

    @staticmethod
    def encode_mods(mods: List[ModPack]) -> bytes:
        """Serialize the mod list, including its end marker; empty if no mods."""
        if not mods:
            return b""
        out = bytearray()
        for mod in mods:
            if len(mod.data) > 255:
                raise BoardFormatError(f"mod pack {mod.hash_hex} data longer than 255 bytes")
            record = bytearray(MODPACK_HEADER_LENGTH)
            record[0] = MODPACK_PACK
            record[1] = len(mod.data)
            apply_long(record, 2, mod.hash & 0xFFFFFFFF)
            out += record + bytes(mod.data)
        out.append(MODPACK_END)
        return bytes(out)

    @staticmethod
    def decode_mods(data: bytes, start: int, end: int) -> List[ModPack]:
        """Read mod records from ``start`` up to the end marker or ``end``.

        Raises:
            ModListError: on an empty list, an unknown record type or a
                truncated record
        """
        mods: List[ModPack] = []
        offset = start
        while offset < end:
            kind = data[offset]
            if kind == MODPACK_END:
                if offset == start:
                    raise ModListError(f"empty mod list at offset 0x{offset:x}")
                break
            if kind != MODPACK_PACK:
                raise ModListError(
                    f"unknown mod pack type {kind} at offset 0x{offset:x}, mod pack {len(mods)}"
                )
            if offset + MODPACK_HEADER_LENGTH > end:
                raise ModListError(
                    f"truncated mod pack header at offset 0x{offset:x}, mod pack {len(mods)}"
                )
            length = data[offset + 1]
            body = offset + MODPACK_HEADER_LENGTH
            if body + length > end:
                raise ModListError(
                    f"truncated mod pack body at offset 0x{offset:x}, mod pack {len(mods)}"
                )
            mods.append(ModPack(hash=read_long(data, offset + 2), data=bytes(data[body:body + length])))
            offset = body + length
        return mods

    # === BINARY BOARDS ===

    def encode_binary(self, board: Board, pad: Optional[bool] = None) -> bytes:
        """Serialize a board to the binary format.

        Raises:
            GoalEncodeError: if a goal cannot be written in binary
            BoardFormatError: if the board does not fit the header fields
        """
        if pad is None:
            pad = self.pad_binary
        width = board.width or math.ceil(math.sqrt(len(board.goals)))
        height = board.height or width
        if not (0 < width < 256 and 0 < height < 256):
            raise BoardFormatError(f"board size {width}x{height} out of range")

        comments = board.comments.encode("utf-8") + b"\x00"
        shelter = board.shelter.encode("utf-8") + b"\x00"
        mods = self.encode_mods(board.mods)
        goals = b"".join(self.binary_codec.encode(g) for g in board.goals)

        shelter_offset = HEADER_LENGTH + len(comments)
        mods_offset = shelter_offset + len(shelter)
        goals_offset = mods_offset + len(mods)
        if goals_offset > 0xFFFF:
            raise BoardFormatError(f"board header strings too long ({goals_offset} bytes)")

        header = bytearray(HEADER_LENGTH)
        apply_long(header, 0, MAGIC_NUMBER)
        header[4] = VERSION_MAJOR
        header[5] = VERSION_MINOR
        header[6] = width
        header[7] = height
        header[8] = self._character_index(board.character)
        apply_short(header, 9, shelter_offset)
        apply_long(header, 11, board.perks & 0xFFFFFFFF)
        apply_short(header, 15, goals_offset)
        apply_short(header, 17, mods_offset if mods else 0)
        apply_short(header, 19, 0)

        result = bytes(header) + comments + shelter + mods + goals
        if pad:
            result = pad_to_multiple(result, 3)
        self.logger.debug(f"Encoded {len(board.goals)} goals into {len(result)} bytes")
        return result

    def decode_binary(self, data: bytes) -> Board:
        """Parse a binary board.

        Per-goal failures become placeholder goals listed in
        ``Board.errors``. A newer format version is reported through
        ``warnings.warn`` and ``Board.warnings`` and decoding proceeds.

        Raises:
            BoardFormatError: on any structural problem with the header
        """
        data = bytes(data)
        if len(data) < HEADER_LENGTH:
            raise InsufficientData(
                f"insufficient data, found {len(data)}, expected: {HEADER_LENGTH} bytes"
            )
        magic = read_long(data, 0)
        if magic != MAGIC_NUMBER:
            raise MagicNumberMismatch(magic, MAGIC_NUMBER)

        board = Board(
            comments="",
            width=data[6],
            height=data[7],
            version=version_string(data[4], data[5]),
            binary=data,
        )
        if (data[4] << 8) + data[5] > (VERSION_MAJOR << 8) + VERSION_MINOR:
            message = (
                f"board version {board.version} is newer than supported "
                f"v{version_string()}; some goals or features may be unsupported"
            )
            self.logger.warning(message)
            board.warnings.append(message)
            warnings.warn(message, VersionNewerThanSupported, stacklevel=2)

        goals_offset = read_short(data, 15)
        if goals_offset < HEADER_LENGTH or goals_offset >= len(data):
            raise PointerOutOfBounds(f"goals pointer 0x{goals_offset:x} out of bounds")

        mods_offset = read_short(data, 17)
        if mods_offset:
            if mods_offset < HEADER_LENGTH:
                raise PointerOutOfBounds(f"mods pointer 0x{mods_offset:x} inside header")
            if mods_offset >= goals_offset:
                raise PointerOutOfBounds(f"mods pointer 0x{mods_offset:x} inside goals list")

        shelter_offset = read_short(data, 9)
        if shelter_offset:
            if shelter_offset < HEADER_LENGTH:
                raise PointerOutOfBounds(f"shelter pointer 0x{shelter_offset:x} inside header")
            if shelter_offset >= len(data):
                raise PointerOutOfBounds(f"shelter pointer 0x{shelter_offset:x} out of bounds")
            end = find_zero(data, shelter_offset)
            if end < 0:
                raise MissingTerminator("shelter string missing terminator")
            if end >= goals_offset:
                raise PointerOutOfBounds("shelter string overlapping goals")
            if mods_offset and end >= mods_offset:
                raise PointerOutOfBounds("shelter string overlapping mods")
            board.shelter = data[shelter_offset:end].decode("utf-8", errors="replace")

        board.perks = read_long(data, 11)
        reserved = read_short(data, 19)
        if reserved != 0:
            raise ReservedFieldNotZero(f"reserved: 0x{reserved:x}, expected: 0x0")

        end = find_zero(data, HEADER_LENGTH)
        if end < 0 or end >= (mods_offset or goals_offset):
            raise MissingTerminator("comments missing terminator")
        if shelter_offset and end >= shelter_offset:
            raise PointerOutOfBounds(f"shelter pointer 0x{shelter_offset:x} inside comments")
        board.comments = data[HEADER_LENGTH:end].decode("utf-8", errors="replace")

        if mods_offset:
            board.mods = self.decode_mods(data, mods_offset, goals_offset)

        characters = self.data.character_names()
        if data[8] > len(characters):
            raise PointerOutOfBounds(f"character {data[8]} out of bounds")
        board.character = characters[data[8] - 1] if data[8] else ANY_CHARACTER

        offset = goals_offset
        for index in range(board.width * board.height):
            if offset + GOAL_LENGTH > len(data):
                break
            record = data[offset:offset + GOAL_LENGTH + data[offset + 2]]
            goal = self.binary_codec.decode(record)
            self._record_errors(board, index, goal)
            board.goals.append(goal)
            offset += len(record)

        board.text = self.render_text(board)
        self.logger.debug(
            f"Decoded v{board.version} binary board: {len(board.goals)} goals, "
            f"{len(board.errors)} with errors"
        )
        return board
