"""
Exception hierarchy for the Bingo board codec.

Per-goal errors derive from GoalDecodeError and are recovered into
placeholder goals by the board assembler. Whole-board errors derive from
BoardFormatError and are propagated to the caller.
"""


class BingoError(Exception):
    """Base class for all codec errors."""
    pass


class GoalDecodeError(BingoError):
    """A single goal could not be decoded."""
    pass


class UnknownGoalType(GoalDecodeError):
    """Goal name tag is not present in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown goal: {name}")


class UnknownChallengeNumber(GoalDecodeError):
    """Binary type byte does not index a registry entry."""

    def __init__(self, number: int):
        self.number = number
        super().__init__(f"unknown challenge number {number}")


class FieldCountMismatch(GoalDecodeError):
    """Text field count matches none of the candidate schemas."""

    def __init__(self, name: str, found: int):
        self.name = name
        self.found = found
        super().__init__(f"{name}: no matching decoder")


class MalformedGoal(GoalDecodeError):
    """Goal text or record does not have the basic goal shape."""
    pass


class GoalEncodeError(BingoError):
    """No variant of a goal type can represent the given parameters."""
    pass


class BoardFormatError(BingoError):
    """Whole-board structure is invalid; no partial board is produced."""
    pass


class InsufficientData(BoardFormatError):
    """Buffer is shorter than the fixed header."""
    pass


class MagicNumberMismatch(BoardFormatError):
    """Header magic number is not the Bingo board magic."""

    def __init__(self, found: int, expected: int):
        self.found = found
        self.expected = expected
        super().__init__(
            f"unknown magic number: 0x{found:x}, expected: 0x{expected:x}"
        )


class PointerOutOfBounds(BoardFormatError):
    """A header pointer refers outside its allowed range."""
    pass


class MissingTerminator(BoardFormatError):
    """A zero-terminated header string has no terminator before its limit."""
    pass


class ReservedFieldNotZero(BoardFormatError):
    """The reserved header field holds a non-zero value."""
    pass


class ModListError(BoardFormatError):
    """The mod list is truncated or holds an unknown record type."""
    pass


class VersionNewerThanSupported(UserWarning):
    """Board was written by a newer format version; decoding is best-effort."""
    pass
