"""Shared fixtures for bingovista tests."""

from typing import Iterator, Optional

import pytest

from bingovista.binary import apply_long, apply_short
from bingovista.constants import HEADER_LENGTH, MAGIC_NUMBER


@pytest.fixture(scope="session")
def data():
    """Game data loaded once from the bundled tables."""
    from bingovista.game_data import GameDataService

    return GameDataService()


@pytest.fixture(scope="session")
def service(data):
    """Codec facade with default options."""
    from bingovista.service import BingoService

    return BingoService(data=data)


@pytest.fixture
def settings() -> Iterator["AppSettings"]:
    """Settings on a scratch profile, emptied before and after the test."""
    from bingovista.settings import AppSettings

    scratch = AppSettings("pytest")
    scratch.settings.remove("")
    scratch.sync()
    fresh = AppSettings("pytest")
    fresh.console_logging = False
    fresh.file_logging = False
    yield fresh
    fresh.settings.remove("")
    fresh.sync()


def make_board(
    goals: bytes,
    width: int = 3,
    height: int = 3,
    comments: bytes = b"Test",
    shelter: Optional[bytes] = None,
    mods: bytes = b"",
    version: tuple = (1, 20),
    character: int = 0,
    reserved: int = 0,
) -> bytes:
    """Assemble a binary board by hand."""
    body = bytearray(comments + b"\x00")
    shelter_offset = 0
    if shelter is not None:
        shelter_offset = HEADER_LENGTH + len(body)
        body += shelter + b"\x00"
    mods_offset = HEADER_LENGTH + len(body) if mods else 0
    body += mods
    goals_offset = HEADER_LENGTH + len(body)

    header = bytearray(HEADER_LENGTH)
    apply_long(header, 0, MAGIC_NUMBER)
    header[4], header[5] = version
    header[6] = width
    header[7] = height
    header[8] = character
    apply_short(header, 9, shelter_offset)
    apply_long(header, 11, 0)
    apply_short(header, 15, goals_offset)
    apply_short(header, 17, mods_offset)
    apply_short(header, 19, reserved)
    return bytes(header) + bytes(body) + goals


@pytest.fixture
def board_bytes():
    """Builder for hand-made binary boards."""
    return make_board
