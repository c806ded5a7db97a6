"""
Main service for Bingo board codecs.

Ties the game data, both goal codecs and the board assembler together
behind the entry points used by applications.
"""

import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from .binary import from_base64u, to_base64u
from .binary_codec import BinaryCodec
from .board import BoardAssembler
from .constants import DEFAULT_COMMENTS
from .game_data import GameDataService
from .goals import REGISTRY, GoalRegistry
from .models import AbstractGoal, Board
from .text_codec import TextCodec

if TYPE_CHECKING:
    from .settings import AppSettings


class BingoService:
    """Facade over the goal and board codecs."""

    def __init__(
        self,
        settings: Optional["AppSettings"] = None,
        data: Optional[GameDataService] = None,
        data_file: Optional[Path] = None,
        registry: GoalRegistry = REGISTRY,
    ):
        """Create the codec stack.

        Args:
            settings: App settings providing codec options (defaults apply without)
            data: Preloaded game data; loaded from ``data_file`` or settings if omitted
            data_file: Optional override of the bundled tables file
            registry: Goal registry to use
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings
        self.data = data or GameDataService(data_file=data_file, settings=settings)
        self.text_codec = TextCodec(self.data, registry)
        self.binary_codec = BinaryCodec(self.data, registry)
        self.assembler = BoardAssembler(
            self.data,
            self.text_codec,
            self.binary_codec,
            default_comments=settings.default_comments if settings else DEFAULT_COMMENTS,
            include_shelter=settings.text_include_shelter if settings else False,
            pad_binary=settings.pad_binary if settings else True,
        )
        self.logger.debug(f"Bingo service ready with {len(registry)} goal types")

    # === SINGLE GOALS ===

    def decode_text(self, goal_string: str) -> AbstractGoal:
        """Decode one text goal; failures give a placeholder goal."""
        return self.text_codec.decode(goal_string)

    def encode_text(self, goal: AbstractGoal) -> str:
        """Encode one goal as text."""
        return self.text_codec.encode(goal)

    def decode_binary_goal(self, record: bytes) -> AbstractGoal:
        """Decode one binary goal record; failures give a placeholder goal."""
        return self.binary_codec.decode(record)

    def encode_binary_goal(self, goal: AbstractGoal) -> bytes:
        """Encode one goal as a binary record."""
        return self.binary_codec.encode(goal)

    # === WHOLE BOARDS ===

    def decode_binary_board(self, data: bytes) -> Board:
        """Parse a binary board."""
        return self.assembler.decode_binary(data)

    def encode_binary_board(self, board: Board) -> bytes:
        """Serialize a board to binary."""
        return self.assembler.encode_binary(board)

    def decode_text_board(self, text: str) -> Board:
        """Parse a text board."""
        return self.assembler.parse_text(text)

    def encode_text_board(self, board: Board) -> str:
        """Render a board as text."""
        return self.assembler.render_text(board)

    # === URL-SAFE BASE64 ===

    def board_to_base64(self, board: Board) -> str:
        """Binary board as a URL-safe base64 string."""
        return to_base64u(self.encode_binary_board(board))

    def board_from_base64(self, text: str) -> Board:
        """Parse a URL-safe base64 binary board.

        Raises:
            ValueError: if the text is not valid base64
            BoardFormatError: if the decoded board is malformed
        """
        return self.decode_binary_board(from_base64u(text))
