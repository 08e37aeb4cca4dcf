"""
Component extraction: turn a free-text prompt into a complete ComponentSet.

The matcher fills Effect, Element, Duration and Range; Level comes from an
explicit "level N" / "Nth level" mention. Anything left unset falls back to a
default, and the Duration default depends on the final Effect.
"""

import logging
import re

from .context import SpellContext
from .matcher import DEFAULT_MATCH_THRESHOLD, ComponentMatcher
from .models import Category, ComponentSet

logger = logging.getLogger("spellforge")

# "level 4", "Level 4", "4th level", "4 level"
LEVEL_PATTERN = re.compile(r"level\s*(\d+)|(\d+)(?:st|nd|rd|th)?\s*level", re.IGNORECASE)

MIN_LEVEL = 1
MAX_LEVEL = 10

# Categories resolved by the matcher, in extraction order
MATCHED_CATEGORIES = (Category.EFFECT, Category.ELEMENT, Category.DURATION, Category.RANGE)

DEFAULT_EFFECT = "Creation"
DEFAULT_ELEMENT = "Moon"
DEFAULT_RANGE = "30ft"
DEFAULT_LEVEL = "1"

# Effect → default Duration
DURATION_BY_EFFECT = {
    "Creation": "10_minute",
    "Damage": "Instant",
    "Shield": "5_minute",
    "Heal": "Instant",
}
FALLBACK_DURATION = "1_minute"


def extract_level(prompt: str) -> str | None:
    """Find an explicit spell level in a prompt.

    Args:
        prompt: Original, case-preserved prompt

    Returns:
        Level as a string ("1".."10"), or None if absent or out of range

    Example:
        >>> extract_level("a 3rd level fire spell")
        '3'
        >>> extract_level("Level 7 heal")
        '7'
        >>> extract_level("a level 15 spell") is None
        True
    """
    if not prompt:
        return None

    match = LEVEL_PATTERN.search(prompt)
    if not match:
        return None

    raw = match.group(1) or match.group(2)
    value = int(raw)
    if not MIN_LEVEL <= value <= MAX_LEVEL:
        logger.debug(f"Ignoring out-of-range level {value} in {prompt!r}")
        return None
    return str(value)


def default_duration(effect: str) -> str:
    """Duration used when the prompt names none, keyed by effect."""
    return DURATION_BY_EFFECT.get(effect, FALLBACK_DURATION)


class ComponentExtractor:
    """Extract all five spell components from a prompt.

    Example:
        >>> extractor = ComponentExtractor(context)
        >>> extractor.extract("").as_dict()
        {'Effect': 'Creation', 'Element': 'Moon', 'Level': '1', 'Duration': '10_minute', 'Range': '30ft'}
    """

    def __init__(
        self,
        context: SpellContext,
        matcher: ComponentMatcher | None = None,
        threshold: int = DEFAULT_MATCH_THRESHOLD,
    ) -> None:
        self.context = context
        self.matcher = matcher or ComponentMatcher(context, threshold=threshold)

    def extract(self, prompt: str) -> ComponentSet:
        """Extract a complete component set from a prompt.

        Args:
            prompt: Free-text spell description

        Returns:
            ComponentSet with every slot filled
        """
        components = ComponentSet()

        for category in MATCHED_CATEGORIES:
            value = self.matcher.match(prompt, category, self.context.candidates(category))
            if value is not None:
                components.set(category, value)

        level = extract_level(prompt)
        if level is not None:
            components.level = level

        self._apply_defaults(components)
        return components

    def _apply_defaults(self, components: ComponentSet) -> None:
        # Effect must be final before the Duration default is chosen
        if components.effect is None:
            self._default(components, Category.EFFECT, DEFAULT_EFFECT)
        if components.element is None:
            self._default(components, Category.ELEMENT, DEFAULT_ELEMENT)
        if components.duration is None:
            self._default(components, Category.DURATION, default_duration(components.effect))
        if components.range is None:
            self._default(components, Category.RANGE, DEFAULT_RANGE)
        if components.level is None:
            self._default(components, Category.LEVEL, DEFAULT_LEVEL)

    @staticmethod
    def _default(components: ComponentSet, category: Category, value: str) -> None:
        logger.debug(f"No {category.value} found in prompt, defaulting to {value}")
        components.set(category, value)
        components.defaulted.append(category)


__all__ = ["ComponentExtractor", "extract_level", "default_duration"]
