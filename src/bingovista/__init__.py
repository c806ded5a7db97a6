"""
bingovista: codec for Rain World Bingo boards

Decodes and encodes challenge boards between the in-game text format, the
compact binary format used in share links, and abstract goal objects.
"""

__version__ = "1.20.0"
__author__ = "bingovista Contributors"

# Core service imports
from .service import BingoService
from .game_data import GameDataService
from .utils.logging_config import setup_logging

# Main data models
from .models import (
    AbstractGoal, Board, ModPack,
    IconPaint, TextPaint, BreakPaint
)

__all__ = [
    # Services
    'BingoService',
    'GameDataService',

    # Logging
    'setup_logging',

    # Data models
    'AbstractGoal',
    'Board',
    'ModPack',
    'IconPaint',
    'TextPaint',
    'BreakPaint',
]
