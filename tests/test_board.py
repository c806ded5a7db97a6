"""Tests for whole boards in the text and binary formats."""

import pytest

from bingovista.binary import apply_short

ENTER_CC = "BingoEnterRegionChallenge~System.String|CC|Region|0|regionsreal><0><0"
HELL = "BingoHellChallenge~0><System.Int32|3|Amount|0|NULL><0><0"
DODGE = bytes([10, 0, 0])


class TestBinaryBoardDecoding:
    """Test binary header parsing and goal iteration."""

    def test_single_goal(self, service, board_bytes) -> None:
        """Test a minimal well-formed board."""
        board = service.decode_binary_board(board_bytes(DODGE, width=1, height=1))

        assert board.version == "1.20"
        assert board.comments == "Test"
        assert board.character == "Any"
        assert board.shelter == ""
        assert board.mods == []
        assert (board.width, board.height) == (1, 1)
        assert [g.name for g in board.goals] == ["BingoDodgeLeviathanChallenge"]
        assert board.goals[0].description == "Dodge a Leviathan's bite"
        assert board.errors == []
        assert board.text == "Any;BingoDodgeLeviathanChallenge~0><0"

    def test_character_and_shelter(self, service, board_bytes) -> None:
        """Test the character index and shelter string."""
        data = board_bytes(DODGE, width=1, height=1, character=2, shelter=b"SU_S01")
        board = service.decode_binary_board(data)

        assert board.character == "Survivor"
        assert board.shelter == "SU_S01"

    def test_short_board(self, service, board_bytes) -> None:
        """Test boards with fewer goals than squares stop at the end of data."""
        board = service.decode_binary_board(board_bytes(DODGE * 2))

        assert len(board.goals) == 2

    def test_goal_errors_collected(self, service, board_bytes) -> None:
        """Test bad goals become placeholders listed in the board errors."""
        board = service.decode_binary_board(
            board_bytes(DODGE + bytes([99, 0, 0]), width=2, height=1)
        )

        assert board.goals[1].is_placeholder
        assert board.errors == ["Goal 1, unknown challenge number 99"]

    def test_insufficient_data(self, service) -> None:
        """Test buffers shorter than the header."""
        from bingovista.errors import InsufficientData

        with pytest.raises(InsufficientData):
            service.decode_binary_board(bytes(10))

    def test_magic_number(self, service, board_bytes) -> None:
        """Test a wrong magic number."""
        from bingovista.errors import MagicNumberMismatch

        data = bytearray(board_bytes(DODGE))
        data[0] = 0
        with pytest.raises(MagicNumberMismatch, match="unknown magic number"):
            service.decode_binary_board(bytes(data))

    def test_reserved_field(self, service, board_bytes) -> None:
        """Test the reserved header field must be zero."""
        from bingovista.errors import ReservedFieldNotZero

        with pytest.raises(ReservedFieldNotZero):
            service.decode_binary_board(board_bytes(DODGE, reserved=1))

    def test_comments_terminator(self, service, board_bytes) -> None:
        """Test comments must end before the goals."""
        from bingovista.errors import MissingTerminator

        data = bytearray(board_bytes(DODGE, comments=b"Test"))
        data[25] = ord("!")
        with pytest.raises(MissingTerminator, match="comments"):
            service.decode_binary_board(bytes(data))

    def test_shelter_inside_comments(self, service, board_bytes) -> None:
        """Test the shelter string must start after the comments."""
        from bingovista.binary import apply_short
        from bingovista.errors import PointerOutOfBounds

        data = bytearray(board_bytes(DODGE, comments=b"Test", shelter=b"SU_S01"))
        apply_short(data, 9, 22)
        with pytest.raises(PointerOutOfBounds, match="inside comments"):
            service.decode_binary_board(bytes(data))

    def test_goals_pointer(self, service, board_bytes) -> None:
        """Test a goals pointer past the end of data."""
        from bingovista.errors import PointerOutOfBounds

        data = bytearray(board_bytes(DODGE))
        apply_short(data, 15, 500)
        with pytest.raises(PointerOutOfBounds, match="goals pointer"):
            service.decode_binary_board(bytes(data))

    def test_shelter_pointer(self, service, board_bytes) -> None:
        """Test a shelter pointer inside the header."""
        from bingovista.errors import PointerOutOfBounds

        data = bytearray(board_bytes(DODGE))
        apply_short(data, 9, 5)
        with pytest.raises(PointerOutOfBounds, match="shelter pointer"):
            service.decode_binary_board(bytes(data))

    def test_character_out_of_bounds(self, service, board_bytes) -> None:
        """Test a character index past the character list."""
        from bingovista.errors import PointerOutOfBounds

        with pytest.raises(PointerOutOfBounds, match="character"):
            service.decode_binary_board(board_bytes(DODGE, character=11))

    def test_newer_version(self, service, board_bytes) -> None:
        """Test newer boards decode with a warning."""
        from bingovista.errors import VersionNewerThanSupported

        with pytest.warns(VersionNewerThanSupported):
            board = service.decode_binary_board(board_bytes(DODGE, version=(2, 0)))

        assert board.version == "2.0"
        assert len(board.warnings) == 1
        assert len(board.goals) == 1


class TestModList:
    """Test the mod pack list."""

    def test_round_trip(self) -> None:
        """Test mod records and the end marker."""
        from bingovista.board import BoardAssembler
        from bingovista.models import ModPack

        mods = [ModPack(hash=0xDEADBEEF, data=b"abc"), ModPack(hash=1)]
        encoded = BoardAssembler.encode_mods(mods)

        assert encoded[:6] == bytes([1, 3, 0xEF, 0xBE, 0xAD, 0xDE])
        assert encoded[-1] == 0
        assert BoardAssembler.decode_mods(encoded, 0, len(encoded)) == mods

    def test_no_mods(self) -> None:
        """Test an empty list writes nothing."""
        from bingovista.board import BoardAssembler

        assert BoardAssembler.encode_mods([]) == b""

    def test_board_with_mods(self, service, board_bytes) -> None:
        """Test mods are read from the board header."""
        data = board_bytes(DODGE, mods=bytes([1, 1, 4, 3, 2, 1, 0x7F, 0]))
        board = service.decode_binary_board(data)

        assert len(board.mods) == 1
        assert board.mods[0].hash_hex == "01020304"
        assert board.mods[0].data == b"\x7f"

    def test_empty_list(self, service, board_bytes) -> None:
        """Test a mod list holding only the end marker."""
        from bingovista.errors import ModListError

        with pytest.raises(ModListError, match="empty mod list"):
            service.decode_binary_board(board_bytes(DODGE, mods=b"\x00"))

    def test_unknown_type(self, service, board_bytes) -> None:
        """Test an unknown mod record type."""
        from bingovista.errors import ModListError

        with pytest.raises(ModListError, match="unknown mod pack type 7"):
            service.decode_binary_board(board_bytes(DODGE, mods=b"\x07"))

    def test_truncated(self, service, board_bytes) -> None:
        """Test a record running into the goals."""
        from bingovista.errors import ModListError

        with pytest.raises(ModListError, match="truncated"):
            service.decode_binary_board(board_bytes(DODGE, mods=bytes([1, 9, 0])))


class TestTextBoards:
    """Test text board headers and goal lists."""

    def test_character_header(self, service) -> None:
        """Test the "Char;" header of v0.90 boards."""
        board = service.decode_text_board(f"White;{ENTER_CC}bChG{HELL}")

        assert board.version == "0.90"
        assert board.character == "Survivor"
        assert (board.width, board.height) == (2, 2)
        assert [g.name for g in board.goals] == [
            "BingoEnterRegionChallenge",
            "BingoHellChallenge",
        ]
        assert board.errors == []

    def test_underscore_header(self, service) -> None:
        """Test the "Char_" header of v0.86 boards."""
        board = service.decode_text_board(f"Red_{ENTER_CC}")

        assert board.version == "0.86"
        assert board.character == "Hunter"

    def test_no_header(self, service) -> None:
        """Test v0.85 boards without a character."""
        board = service.decode_text_board(ENTER_CC)

        assert board.version == "0.85"
        assert board.character == "Any"
        assert board.goals[0].params["region"] == "CC"

    def test_shelter_header(self, service) -> None:
        """Test the "Char;Shelter;" header of v1.3 boards."""
        board = service.decode_text_board(f"Saint;SU_S01;{ENTER_CC}")

        assert board.version == "1.3"
        assert board.character == "Saint"
        assert board.shelter == "SU_S01"

    def test_random_shelter(self, service) -> None:
        """Test "random" means no fixed shelter."""
        board = service.decode_text_board(f"Saint;random;{ENTER_CC}")

        assert board.shelter == ""

    def test_separator_whitespace(self, service) -> None:
        """Test whitespace around goal separators is ignored."""
        board = service.decode_text_board(f"White;{ENTER_CC} bChG\n{HELL}\n")

        assert len(board.goals) == 2
        assert board.errors == []

    def test_goal_errors(self, service) -> None:
        """Test goal errors are listed by goal index."""
        board = service.decode_text_board(f"White;{ENTER_CC}bChGBingoFooChallenge~a><b")

        assert board.goals[1].is_placeholder
        assert board.errors == ["Goal 1, unknown goal: BingoFooChallenge"]

    def test_unreadable_goal(self, service) -> None:
        """Test text that is not a goal at all."""
        board = service.decode_text_board(f"White;{ENTER_CC}bChGnonsense")

        assert board.goals[1].is_placeholder
        assert board.errors == ["Goal 1, Error extracting goal: nonsense"]

    def test_empty_board(self, service) -> None:
        """Test an empty board holds a single empty challenge."""
        board = service.decode_text_board("White;")

        assert len(board.goals) == 1
        assert board.goals[0].description == "Empty board"
        assert board.errors == []

    def test_render(self, service) -> None:
        """Test rendering writes the character header and goals."""
        text = f"White;{ENTER_CC}bChG{HELL}"

        assert service.encode_text_board(service.decode_text_board(text)) == text

    def test_render_shelter(self, service) -> None:
        """Test the shelter part is written on request."""
        board = service.decode_text_board(f"Saint;SU_S01;{ENTER_CC}")
        render = service.assembler.render_text

        assert render(board, include_shelter=True) == f"Saint;SU_S01;{ENTER_CC}"
        board.shelter = ""
        assert render(board, include_shelter=True) == f"Saint;random;{ENTER_CC}"
        assert render(board) == f"Saint;{ENTER_CC}"


class TestBinaryBoardEncoding:
    """Test writing boards in the binary format."""

    def test_round_trip(self, service) -> None:
        """Test a text board survives the binary format."""
        source = service.decode_text_board(f"Gourmand;{ENTER_CC}bChG{HELL}")
        source.comments = "Round trip"
        source.perks = 0x21
        source.shelter = "SU_S01"
        board = service.decode_binary_board(service.encode_binary_board(source))

        assert board.comments == "Round trip"
        assert board.character == "Gourmand"
        assert board.perks == 0x21
        assert board.shelter == "SU_S01"
        assert (board.width, board.height) == (2, 2)
        assert [g.params for g in board.goals] == [g.params for g in source.goals]
        assert [g.description for g in board.goals] == [g.description for g in source.goals]

    def test_header_layout(self, service) -> None:
        """Test header fields are written at their positions."""
        from bingovista.binary import read_long, read_short

        board = service.decode_text_board(f"White;{ENTER_CC}")
        data = service.assembler.encode_binary(board, pad=False)

        assert data[:4] == b"RwBi"
        assert (data[4], data[5]) == (1, 20)
        assert (data[6], data[7], data[8]) == (1, 1, 2)
        assert read_short(data, 9) == 21 + len("Untitled") + 1
        assert read_long(data, 11) == 0
        assert read_short(data, 17) == 0
        assert read_short(data, 19) == 0
        assert data[read_short(data, 15):] == bytes([14, 0, 1, 2])

    def test_padding(self, service) -> None:
        """Test binary boards are padded to a multiple of three bytes."""
        board = service.decode_text_board(f"White;{ENTER_CC}")

        padded = service.assembler.encode_binary(board)
        unpadded = service.assembler.encode_binary(board, pad=False)
        assert len(padded) % 3 == 0
        assert padded.rstrip(b"\x00") == unpadded.rstrip(b"\x00")

    def test_mods(self, service) -> None:
        """Test mods survive the binary format."""
        from bingovista.models import ModPack

        board = service.decode_text_board(f"White;{ENTER_CC}")
        board.mods = [ModPack(hash=0x12345678, data=b"pack")]
        decoded = service.decode_binary_board(service.encode_binary_board(board))

        assert decoded.mods == board.mods

    def test_empty_board(self, service) -> None:
        """Test boards without goals or size cannot be written."""
        from bingovista.errors import BoardFormatError
        from bingovista.models import Board

        with pytest.raises(BoardFormatError, match="out of range"):
            service.encode_binary_board(Board())

    def test_base64(self, service) -> None:
        """Test the URL-safe base64 form of a board."""
        board = service.decode_text_board(f"Rivulet;{ENTER_CC}bChG{HELL}")
        text = service.board_to_base64(board)

        assert "+" not in text and "/" not in text and "=" not in text
        decoded = service.board_from_base64(text)
        assert decoded.character == "Rivulet"
        assert decoded.text == f"Rivulet;{ENTER_CC}bChG{HELL}"
