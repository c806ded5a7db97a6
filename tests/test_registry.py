"""Tests for the goal registry and upgrade index."""

import pytest


class TestGoalRegistry:
    """Test goal lookup by name and by type byte."""

    def test_size_and_order(self) -> None:
        """Test type bytes are stable registry positions."""
        from bingovista.goals import REGISTRY

        assert len(REGISTRY) == 48
        assert REGISTRY.at(0).name == "BingoChallenge"
        assert REGISTRY.at(8).name == "BingoDamageChallenge"
        assert REGISTRY.at(10).name == "BingoDodgeLeviathanChallenge"
        assert REGISTRY.at(14).name == "BingoEnterRegionChallenge"
        assert REGISTRY.at(18).name == "BingoHellChallenge"
        assert REGISTRY.at(35).name == "BingoTameChallenge"
        assert REGISTRY.at(40).name == "BingoVistaChallenge"
        assert REGISTRY.at(47).name == "BingoDamageEx2Challenge"

    def test_number_of(self) -> None:
        """Test name to type byte lookup."""
        from bingovista.goals import REGISTRY

        assert REGISTRY.number_of("BingoVistaExChallenge") == 41
        assert REGISTRY.number_of("BingoTameExChallenge") == 46

    def test_unknown_number(self) -> None:
        """Test out-of-range type bytes raise UnknownChallengeNumber."""
        from bingovista.errors import UnknownChallengeNumber
        from bingovista.goals import REGISTRY

        with pytest.raises(UnknownChallengeNumber, match="99"):
            REGISTRY.at(99)

    def test_unknown_name(self) -> None:
        """Test unregistered names raise UnknownGoalType."""
        from bingovista.errors import UnknownGoalType
        from bingovista.goals import REGISTRY

        with pytest.raises(UnknownGoalType, match="unknown goal: BingoFooChallenge"):
            REGISTRY.get("BingoFooChallenge")
        assert "BingoFooChallenge" not in REGISTRY

    def test_name_aliases(self) -> None:
        """Test historical goal names resolve to the current ones."""
        from bingovista.goals import REGISTRY

        assert REGISTRY.get("BingoMoonCloak").name == "BingoMoonCloakChallenge"
        assert REGISTRY.get("BingoAllRegionsExceptChallenge").name == "BingoAllRegionsExcept"
        assert "BingoNoNeedleTradingCheallenge" in REGISTRY


class TestUpgradeIndex:
    """Test upgrade variants and candidate ordering."""

    def test_candidates(self) -> None:
        """Test candidates list the root first, then its upgrades."""
        from bingovista.goals import REGISTRY

        names = [d.name for d in REGISTRY.candidates("BingoDamageChallenge")]
        assert names == [
            "BingoDamageChallenge",
            "BingoDamageEx2Challenge",
            "BingoDamageExChallenge",
        ]

    def test_candidates_from_upgrade(self) -> None:
        """Test an upgrade name yields the same candidates as its root."""
        from bingovista.goals import REGISTRY

        from_root = REGISTRY.candidates("BingoTameChallenge")
        from_upgrade = REGISTRY.candidates("BingoTameExChallenge")
        assert from_root == from_upgrade

    def test_upgrades_report_root_name(self) -> None:
        """Test every upgrade shares its root's goal name."""
        from bingovista.goals import REGISTRY

        for root, names in REGISTRY.upgrade_index().items():
            for name in names:
                assert REGISTRY.get(name).goal_name == root

    def test_root_names_exclude_upgrades(self) -> None:
        """Test upgrades are not listed as root goals."""
        from bingovista.goals import REGISTRY

        roots = REGISTRY.root_names()
        assert "BingoVistaChallenge" in roots
        assert "BingoVistaExChallenge" not in roots
        assert len(roots) == 48 - 4

    def test_no_upgrades(self) -> None:
        """Test a goal without upgrades is its only candidate."""
        from bingovista.goals import REGISTRY

        assert REGISTRY.upgrades_of("BingoHellChallenge") == []
        assert [d.name for d in REGISTRY.candidates("BingoHellChallenge")] == [
            "BingoHellChallenge"
        ]

    def test_registry_validation(self) -> None:
        """Test upgrades must name a registered root."""
        from bingovista.goals import GoalDefinition, GoalRegistry

        root = GoalDefinition(name="BingoRootChallenge", params={})
        upgrade = root.upgrade("BingoRootExChallenge")
        stray = GoalDefinition(name="BingoStrayChallenge", params={})

        registry = GoalRegistry([root, upgrade], {root.name: [upgrade.name]})
        assert registry.get("BingoRootExChallenge").root == "BingoRootChallenge"

        with pytest.raises(ValueError, match="does not name"):
            GoalRegistry([root, stray], {root.name: [stray.name]})
        with pytest.raises(ValueError, match="duplicate"):
            GoalRegistry([root, root], {})

    def test_registry_with_aliases_and_upgrades(self) -> None:
        """Test a registry built with both aliases and upgrades."""
        from bingovista.goals import GoalDefinition, GoalRegistry

        root = GoalDefinition(name="BingoRootChallenge", params={})
        upgrade = root.upgrade("BingoRootExChallenge")

        registry = GoalRegistry(
            [root, upgrade],
            {root.name: [upgrade.name]},
            aliases={"BingoOldRoot": root.name},
        )
        assert registry.get("BingoOldRoot") is root
        assert registry.number_of("BingoOldRoot") == 0
        assert registry.candidates("BingoOldRoot") == [root, upgrade]
