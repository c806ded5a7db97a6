"""Tests for binary goal records."""

import pytest

from bingovista.models import AbstractGoal


def _goal(name: str, **params) -> AbstractGoal:
    return AbstractGoal(name=name, category="", params=params)


class TestBinaryDecoding:
    """Test decoding single goal records."""

    def test_no_payload(self, service) -> None:
        """Test a goal without parameters."""
        goal = service.decode_binary_goal(bytes([10, 0, 0]))

        assert goal.name == "BingoDodgeLeviathanChallenge"
        assert goal.description == "Dodge a Leviathan's bite"
        assert goal.error == ""

    def test_enum_field(self, service) -> None:
        """Test enum fields are 1-based list indices."""
        goal = service.decode_binary_goal(bytes([14, 0, 1, 2]))

        assert goal.name == "BingoEnterRegionChallenge"
        assert goal.params["region"] == "CC"

    def test_enum_out_of_bounds(self, service) -> None:
        """Test indices past the list keep the default and report it."""
        goal = service.decode_binary_goal(bytes([14, 0, 1, 200]))

        assert goal.name == "BingoEnterRegionChallenge"
        assert goal.params["region"] == "SU"
        assert goal.error == (
            "BingoEnterRegionChallenge: param region formatter regionsreal value 200 out of bounds"
        )

    def test_flag_and_numbers(self, service) -> None:
        """Test flag bits in the flags byte and numbers in the payload."""
        goal = service.decode_binary_goal(bytes([19, 0x10, 2, 5, 1]))

        assert goal.name == "BingoItemHoardChallenge"
        assert goal.params["anyShelter"] is True
        assert goal.params["amount"] == 5
        assert goal.params["item"] == "FirecrackerPlant"

    def test_string_list(self, service) -> None:
        """Test enum byte strings run to the end of the record."""
        goal = service.decode_binary_goal(bytes([2, 0, 4, 23, 3, 2, 4]))

        assert goal.name == "BingoAllRegionsExcept"
        assert goal.params["amount"] == 3
        assert goal.params["remaining"] == ["CC", "DM"]

    def test_upgrade_fallback(self, service) -> None:
        """Test root and extended records decode to the same goal name."""
        root = service.decode_binary_goal(bytes([8, 0, 4, 2, 3, 3, 0]))
        extended = service.decode_binary_goal(bytes([47, 0x10, 5, 2, 3, 3, 0, 2]))

        assert root.name == extended.name == "BingoDamageChallenge"
        assert root.params["weapon"] == extended.params["weapon"] == "Spear"
        assert root.params["victim"] == extended.params["victim"] == "GreenLizard"
        assert root.params["amount"] == extended.params["amount"] == 3
        assert root.params["inOneCycle"] is False
        assert extended.params["inOneCycle"] is True
        assert extended.params["region"] == "CC"

    def test_stock_vista(self, service) -> None:
        """Test stock vista points are stored as one index."""
        goal = service.decode_binary_goal(bytes([41, 0, 1, 1]))

        assert goal.name == "BingoVistaChallenge"
        assert goal.params == {"region": "CC", "room": "CC_A10", "x": 734, "y": 506}

    def test_trailing_bytes_ignored(self, service) -> None:
        """Test bytes past the declared length are not read."""
        goal = service.decode_binary_goal(bytes([10, 0, 0, 99, 99]))

        assert goal.name == "BingoDodgeLeviathanChallenge"
        assert goal.error == ""

    def test_unknown_number(self, service) -> None:
        """Test an unregistered type byte gives a placeholder."""
        goal = service.decode_binary_goal(bytes([99, 0, 0]))

        assert goal.is_placeholder
        assert goal.error == "unknown challenge number 99"
        assert goal.description == "Error: unknown challenge number 99"

    def test_short_record(self, service) -> None:
        """Test records shorter than the prefix give a placeholder."""
        goal = service.decode_binary_goal(bytes([14, 0]))

        assert goal.is_placeholder
        assert "too short" in goal.error

    def test_parse_raises(self, service) -> None:
        """Test the strict parser raises instead of substituting."""
        from bingovista.errors import MalformedGoal, UnknownChallengeNumber

        with pytest.raises(UnknownChallengeNumber):
            service.binary_codec.parse(bytes([99, 0, 0]))
        with pytest.raises(MalformedGoal):
            service.binary_codec.parse(b"")


class TestBinaryEncoding:
    """Test encoding goals as binary records."""

    def test_enum_field(self, service) -> None:
        """Test enum values are written as 1-based indices."""
        record = service.encode_binary_goal(_goal("BingoEnterRegionChallenge", region="CC"))

        assert record == bytes([14, 0, 1, 2])

    def test_count_clamped(self, service) -> None:
        """Test one-byte counts are clamped to their practical maximum."""
        record = service.encode_binary_goal(_goal("BingoHellChallenge", amount=999))

        assert record == bytes([18, 0, 1, 250])

    def test_compact_upgrade_preferred(self, service) -> None:
        """Test the root layout is used when it can hold the params."""
        record = service.encode_binary_goal(
            _goal("BingoDamageChallenge", weapon="Spear", victim="GreenLizard", amount=3)
        )

        assert record == bytes([8, 0, 4, 2, 3, 3, 0])

    def test_extended_upgrade(self, service) -> None:
        """Test the next upgrade is used when the root cannot hold the params."""
        record = service.encode_binary_goal(
            _goal(
                "BingoDamageChallenge",
                weapon="Spear",
                victim="GreenLizard",
                amount=3,
                inOneCycle=True,
                region="CC",
            )
        )

        assert record == bytes([47, 0x10, 5, 2, 3, 3, 0, 2])

    def test_full_upgrade(self, service) -> None:
        """Test a subregion needs the full layout."""
        goal = _goal("BingoDamageChallenge", amount=2, subregion="...")
        record = service.encode_binary_goal(goal)

        assert record[0] == 45
        assert service.decode_binary_goal(record).params["subregion"] == "..."

    def test_tame_variants(self, service) -> None:
        """Test specific and counted befriending goals."""
        specific = service.encode_binary_goal(_goal("BingoTameChallenge", crit="CicadaB"))
        counted = service.encode_binary_goal(
            _goal("BingoTameChallenge", specific=False, amount=4)
        )

        assert specific == bytes([35, 0, 1, 2])
        assert counted == bytes([46, 0, 2, 1, 4])

    def test_stock_vista(self, service) -> None:
        """Test stock vista points use the one-byte form."""
        record = service.encode_binary_goal(_goal("BingoVistaChallenge"))

        assert record == bytes([41, 0, 1, 1])

    def test_custom_vista(self, service) -> None:
        """Test customised vista points store every field."""
        goal = _goal("BingoVistaChallenge", region="CC", room="CC_X1", x=10, y=20)
        record = service.encode_binary_goal(goal)

        assert record == bytes([40, 0, 10, 2, 10, 0, 20, 0]) + b"CC_X1"
        assert service.decode_binary_goal(record).params == goal.params

    def test_flag_in_payload(self, service) -> None:
        """Test a flag bit alongside payload numbers."""
        goal = _goal("BingoItemHoardChallenge", anyShelter=True, amount=5)

        assert service.encode_binary_goal(goal) == bytes([19, 0x10, 2, 5, 1])

    def test_round_trip_from_text(self, service) -> None:
        """Test text goals survive a binary round trip."""
        text = "BingoEnterRegionChallenge~System.String|DM|Region|0|regionsreal><0><0"
        goal = service.decode_text(text)
        decoded = service.decode_binary_goal(service.encode_binary_goal(goal))

        assert decoded.params == goal.params
        assert decoded.description == goal.description
        assert service.encode_text(decoded) == text

    def test_unknown_goal(self, service) -> None:
        """Test encoding an unregistered goal raises UnknownGoalType."""
        from bingovista.errors import UnknownGoalType

        with pytest.raises(UnknownGoalType):
            service.encode_binary_goal(_goal("BingoFooChallenge"))


class TestNumberCapacity:
    """Test field size limits."""

    def test_capacity(self) -> None:
        """Test the practical maximum per field size."""
        from bingovista.binary_codec import number_capacity

        assert number_capacity(1) == 250
        assert number_capacity(2) == 30000
        assert number_capacity(4) == 0xFFFFFFFF


class TestPointerStrings:
    """Test strings stored behind a payload offset."""

    def test_pointer_string(self, data) -> None:
        """Test pointer strings are written after the fixed fields and read back."""
        from bingovista.binary_codec import BinaryCodec
        from bingovista.goals import BinaryField, GoalDefinition, GoalRegistry

        note = GoalDefinition(
            name="BingoNoteChallenge",
            params={"amount": 1, "note": ""},
            binary=(
                BinaryField.pointer_string("note", 0),
                BinaryField.number("amount", 1),
            ),
        )
        codec = BinaryCodec(data, GoalRegistry([note], {}))
        record = codec.encode(_goal("BingoNoteChallenge", amount=7, note="hi"))

        assert record == bytes([0, 0, 4, 2, 7]) + b"hi"
        assert codec.decode(record).params == {"amount": 7, "note": "hi"}
