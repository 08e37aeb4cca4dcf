"""
Bloodline/element efficiency lookup.
"""

import logging
import re

from .context import TIER_ORDER, SpellContext

logger = logging.getLogger("spellforge")

NEUTRAL = ("Neutral 50%", 50)
SELF_AFFINITY = ("Best 100%", 100)

# Universally neutral, whichever side it appears on
NEUTRAL_ELEMENT = "Sun"

_PERCENT = re.compile(r"(\d+)%")


def tier_percentage(label: str) -> int:
    """Parse the percentage out of a tier label ("Good 60%" → 60)."""
    match = _PERCENT.search(label)
    return int(match.group(1)) if match else NEUTRAL[1]


class EfficiencyCalculator:
    """Look up how well a bloodline channels an element.

    Example:
        >>> calc = EfficiencyCalculator(context)
        >>> calc.efficiency("Fire", "Fire")
        ('Best 100%', 100)
        >>> calc.efficiency("Sun", "Water")
        ('Neutral 50%', 50)
    """

    def __init__(self, context: SpellContext) -> None:
        self.context = context

    def efficiency(self, bloodline: str, element: str) -> tuple[str, int]:
        """Return the affinity tier label and percentage.

        Args:
            bloodline: Caster bloodline name
            element: Spell element name

        Returns:
            (label, percentage), ("Neutral 50%", 50) when nothing applies
        """
        if element == NEUTRAL_ELEMENT or bloodline == NEUTRAL_ELEMENT:
            return NEUTRAL
        if bloodline == element:
            return SELF_AFFINITY

        tiers = self.context.affinity_tiers(bloodline)
        for tier in TIER_ORDER:
            if element in tiers.get(tier, []):
                return tier, tier_percentage(tier)

        logger.debug(f"No affinity tier for bloodline '{bloodline}' and element '{element}'")
        return NEUTRAL


__all__ = ["EfficiencyCalculator", "tier_percentage"]
