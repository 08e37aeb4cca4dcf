"""
Tests for the bloodline/element efficiency calculator.
"""

import pytest

from spellforge.context import SpellContext
from spellforge.efficiency import EfficiencyCalculator, tier_percentage


@pytest.fixture
def calc(context: SpellContext) -> EfficiencyCalculator:
    return EfficiencyCalculator(context)


class TestEfficiency:
    """Test tier lookup and special cases."""

    def test_sun_is_neutral_either_side(self, calc: EfficiencyCalculator) -> None:
        assert calc.efficiency("Sun", "Fire") == ("Neutral 50%", 50)
        assert calc.efficiency("Fire", "Sun") == ("Neutral 50%", 50)
        assert calc.efficiency("Sun", "Sun") == ("Neutral 50%", 50)

    def test_self_match(self, calc: EfficiencyCalculator) -> None:
        assert calc.efficiency("Fire", "Fire") == ("Best 100%", 100)

    @pytest.mark.parametrize(
        "element,expected",
        [
            ("Lightning", ("Best 80%", 80)),
            ("Earth", ("Good 60%", 60)),
            ("Wind", ("Moderate 40%", 40)),
            ("Water", ("Weak 20%", 20)),
            ("Moon", ("Neutral 50%", 50)),
        ],
    )
    def test_tiers(self, calc: EfficiencyCalculator, element: str, expected: tuple[str, int]) -> None:
        assert calc.efficiency("Fire", element) == expected

    def test_unlisted_element_is_neutral(self, calc: EfficiencyCalculator) -> None:
        assert calc.efficiency("Fire", "Shadow") == ("Neutral 50%", 50)

    def test_unknown_bloodline_is_neutral(self, calc: EfficiencyCalculator) -> None:
        assert calc.efficiency("Starlight", "Fire") == ("Neutral 50%", 50)

    def test_duplicate_entry_first_tier_wins(self, calc: EfficiencyCalculator) -> None:
        """Test an element listed under two tiers resolves by tier priority."""
        assert calc.efficiency("Water", "Moon") == ("Good 60%", 60)


class TestTierPercentage:
    """Test percentage parsing from tier labels."""

    @pytest.mark.parametrize(
        "label,expected",
        [("Best 80%", 80), ("Good 60%", 60), ("Weak 20%", 20), ("Best 100%", 100)],
    )
    def test_parse(self, label: str, expected: int) -> None:
        assert tier_percentage(label) == expected

    def test_label_without_percentage(self) -> None:
        assert tier_percentage("Neutral") == 50
