"""Tests for the command-line entry point."""

import orjson
import pytest

from bingovista.__main__ import main

ENTER_CC = "BingoEnterRegionChallenge~System.String|CC|Region|0|regionsreal><0><0"
PROFILE = ["--profile", "pytest"]


class TestGoalCommand:
    """Test decoding single goals."""

    def test_goal(self, settings, capsys) -> None:
        """Test the plain goal summary."""
        assert main(PROFILE + ["goal", ENTER_CC]) == 0

        out = capsys.readouterr().out
        assert out.splitlines() == [
            "BingoEnterRegionChallenge: Enter Chimney Canopy / Solitary Towers.",
            "  Region: CC",
        ]

    def test_goal_json(self, settings, capsys) -> None:
        """Test the JSON goal output."""
        assert main(PROFILE + ["goal", "--json", ENTER_CC]) == 0

        goal = orjson.loads(capsys.readouterr().out)
        assert goal["name"] == "BingoEnterRegionChallenge"
        assert goal["params"] == {"region": "CC"}
        assert goal["paint"][1] == {"type": "text", "value": "CC", "color": "#ffffff"}

    def test_goal_error(self, settings, capsys) -> None:
        """Test goals with errors give a failing status."""
        assert main(PROFILE + ["goal", "BingoFooChallenge~a><b"]) == 1

        assert "error: unknown goal: BingoFooChallenge" in capsys.readouterr().out


class TestBoardCommands:
    """Test decoding and encoding whole boards."""

    def test_decode_text_board(self, settings, capsys) -> None:
        """Test a text board decodes to JSON."""
        assert main(PROFILE + ["decode", f"White;{ENTER_CC}"]) == 0

        board = orjson.loads(capsys.readouterr().out)
        assert board["character"] == "Survivor"
        assert board["version"] == "0.90"
        assert [g["name"] for g in board["goals"]] == ["BingoEnterRegionChallenge"]

    def test_encode_and_decode(self, settings, capsys) -> None:
        """Test a text board encoded to base64 decodes back to text."""
        assert main(PROFILE + ["encode", "--comments", "CLI", f"Red;{ENTER_CC}"]) == 0
        encoded = capsys.readouterr().out.strip()

        assert main(PROFILE + ["decode", "--format", "text", encoded]) == 0
        assert capsys.readouterr().out.strip() == f"Red;{ENTER_CC}"

    def test_decode_binary_file(self, settings, service, capsys, tmp_path) -> None:
        """Test binary board files are recognised by their magic number."""
        board = service.decode_text_board(f"Saint;{ENTER_CC}")
        board.perks = 0x21
        path = tmp_path / "board.bin"
        path.write_bytes(service.encode_binary_board(board))

        assert main(PROFILE + ["decode", str(path)]) == 0
        output = orjson.loads(capsys.readouterr().out)
        assert output["character"] == "Saint"
        assert output["perk_names"] == ["Perk: Scavenger Lantern", "Perk: Karma Flower"]

    def test_strict(self, settings, capsys) -> None:
        """Test --strict fails on boards with goal errors."""
        source = f"White;{ENTER_CC}bChGBingoFooChallenge~a><b"

        assert main(PROFILE + ["decode", source]) == 0
        assert main(PROFILE + ["--strict", "decode", source]) == 1

    def test_invalid_board(self, settings, capsys) -> None:
        """Test unreadable input gives a failing status."""
        assert main(PROFILE + ["decode", "not*a*board!"]) == 1

    def test_version(self, capsys) -> None:
        """Test --version prints the package version."""
        from bingovista import __version__

        with pytest.raises(SystemExit):
            main(["--version"])
        assert __version__ in capsys.readouterr().out
