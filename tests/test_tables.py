"""Tests for enumeration tables, game data lookups and byte helpers."""

import pytest


class TestEnumerationTables:
    """Test index and value lookups."""

    def test_index_stability(self, data) -> None:
        """Test every value maps back to itself through its index."""
        enums = data.enums
        for name in enums.names():
            for value in enums.get(name):
                index = enums.index_of(name, value)
                assert index > 0
                # Vista coordinates repeat; the first occurrence wins
                assert enums.value_at(name, index) == value

    def test_absent_value(self, data) -> None:
        """Test unknown values index as 0 and 0 is never a valid index."""
        assert data.enums.index_of("regionsreal", "XX") == 0
        assert data.enums.value_at("regionsreal", 0) is None
        size = len(data.enums.get("regionsreal"))
        assert data.enums.value_at("regionsreal", size + 1) is None

    def test_region_order(self, data) -> None:
        """Test regions are 1-based with the wildcard first."""
        assert data.enums.value_at("regions", 1) == "Any Region"
        assert data.enums.index_of("regions", "CC") == 2

    def test_list_aliases(self) -> None:
        """Test renamed list identifiers are accepted both ways."""
        from bingovista.game_data import list_names_match

        assert list_names_match("regions", "regionsreal")
        assert list_names_match("regionsreal", "regions")
        assert list_names_match("weapons", "weaponsnojelly")
        assert not list_names_match("regions", "creatures")


class TestGameDataService:
    """Test display lookups used by goal generators."""

    def test_region_name_with_saint(self, data) -> None:
        """Test regions renamed for Saint show both names."""
        assert data.region_name("CC") == "Chimney Canopy / Solitary Towers"
        assert data.region_name("XX") == ""

    def test_quantify(self, data) -> None:
        """Test singular and plural entity phrases."""
        assert data.quantify(3, "Spear") == "3 Spears"
        assert data.quantify(1, "Spear") == "a Spear"

    def test_characters(self, data) -> None:
        """Test character codes and display names."""
        assert data.character_name("White") == "Survivor"
        assert data.character_code("Hunter") == "Red"
        assert data.character_names()[0] == "Monk"

    def test_perk_names(self, data) -> None:
        """Test perk bits map to display names."""
        assert data.perk_names(0) == []
        assert data.perk_names(0x21) == ["Perk: Scavenger Lantern", "Perk: Karma Flower"]

    def test_stock_vista(self, data) -> None:
        """Test stock vista points are found by their coordinates."""
        assert data.stock_vista_index("CC", "CC_A10", 734, 506) == 1
        assert data.stock_vista_index("CC", "CC_A10", 1, 1) == 0

    def test_missing_tables_file(self, tmp_path) -> None:
        """Test a missing override file raises TablesLoadError."""
        from bingovista.game_data import GameDataService, TablesLoadError

        with pytest.raises(TablesLoadError):
            GameDataService(data_file=tmp_path / "nope.json")

    def test_incomplete_tables_file(self, tmp_path) -> None:
        """Test an override file without required tables is rejected."""
        from bingovista.game_data import GameDataService, TablesLoadError

        path = tmp_path / "tables.json"
        path.write_bytes(b'{"passages": {}}')
        with pytest.raises(TablesLoadError, match="missing tables"):
            GameDataService(data_file=path)


class TestByteHelpers:
    """Test little-endian helpers and URL-safe base64."""

    def test_base64u_round_trip(self) -> None:
        """Test the URL-safe alphabet and padding substitution."""
        from bingovista.binary import from_base64u, to_base64u

        raw = bytes([0, 255, 16, 32])
        encoded = to_base64u(raw)
        assert encoded == "AP8QIA**"
        assert from_base64u(encoded) == raw

    def test_base64u_alphabet(self) -> None:
        """Test "+" and "/" are replaced."""
        from bingovista.binary import from_base64u, to_base64u

        raw = bytes([0xFB, 0xFF, 0xBF])
        assert to_base64u(raw) == "-_-_"
        assert from_base64u("-_-_") == raw

    def test_base64u_invalid(self) -> None:
        """Test invalid characters raise ValueError."""
        from bingovista.binary import from_base64u

        with pytest.raises(ValueError):
            from_base64u("not base64!")

    def test_little_endian(self) -> None:
        """Test multi-byte values are little-endian."""
        from bingovista.binary import apply_long, apply_short, read_long, read_short

        buf = bytearray(6)
        apply_long(buf, 0, 0x69427752)
        apply_short(buf, 4, 0x1234)
        assert bytes(buf[:4]) == b"RwBi"
        assert buf[4:] == bytearray([0x34, 0x12])
        assert read_long(buf, 0) == 0x69427752
        assert read_short(buf, 4) == 0x1234

    def test_apply_overflow(self) -> None:
        """Test values wider than the field raise instead of wrapping."""
        from bingovista.binary import apply_short

        with pytest.raises(ValueError):
            apply_short(bytearray(2), 0, 70000)

    def test_padding(self) -> None:
        """Test padding to a multiple of three."""
        from bingovista.binary import pad_to_multiple

        assert pad_to_multiple(b"ab") == b"ab\x00"
        assert pad_to_multiple(b"abc") == b"abc"

    def test_bits(self) -> None:
        """Test flag bits are set, cleared and read back."""
        from bingovista.binary import apply_bool, read_bit

        buf = bytearray([0x01])
        apply_bool(buf, 0, 4, "true")
        assert buf[0] == 0x11
        apply_bool(buf, 0, 0, False)
        assert buf[0] == 0x10
        assert read_bit(buf, 0, 4) == 1
        assert read_bit(buf, 5, 4) == 0

    def test_cstring(self) -> None:
        """Test strings end at a zero byte or the end of data."""
        from bingovista.binary import read_cstring

        assert read_cstring(b"\x00ab\x00cd", 1) == b"ab"
        assert read_cstring(b"\x00ab", 1) == b"ab"
