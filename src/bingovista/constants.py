"""
Wire-format constants for Bingo boards.

Changing any of these values breaks boards that have already been shared.
"""

# "RwBi" = Rain World Bingo board, little-endian
MAGIC_NUMBER = 0x69427752

VERSION_MAJOR = 1
VERSION_MINOR = 20

# Size of the fixed binary board header
HEADER_LENGTH = 21

# Goal record prefix: type, flags, length
GOAL_LENGTH = 3

# Practical maximum for counts and amounts (fits in a 16-bit field)
INT_MAX = 30000

# Practical maximum for counts stored in one byte
CHAR_MAX = 250

# Text format separators
TAG_SEPARATOR = "~"
FIELD_SEPARATOR = "><"
GOAL_SEPARATOR = "bChG"
LIST_SEPARATOR = "|"

# Mod list record types
MODPACK_END = 0
MODPACK_PACK = 1
MODPACK_HEADER_LENGTH = 6

DEFAULT_COMMENTS = "Untitled"
ANY_CHARACTER = "Any"


def version_string(major: int = VERSION_MAJOR, minor: int = VERSION_MINOR) -> str:
    """Format a board version as shown to users, e.g. ``1.20``."""
    return f"{major}.{minor}"
