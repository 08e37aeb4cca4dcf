"""
Spell generation: name assembly, description selection and formatting.

Randomness is confined to this module and comes from an injected
``random.Random``, so the same seed always produces the same spell while
extraction and matching stay deterministic.
"""

import logging
import random

from .config import SpellforgeConfig
from .context import SpellContext
from .efficiency import EfficiencyCalculator
from .element_mapper import FALLBACK_ELEMENT, ElementMapper
from .extractor import ComponentExtractor
from .models import Category, ComponentSet, Spell

logger = logging.getLogger("spellforge")

# Categories whose affixes make up a spell name, in display order
NAME_CATEGORIES = (Category.ELEMENT, Category.EFFECT, Category.RANGE)

# Template family used when an effect has no templates of its own
ANY_EFFECT = "Any"

DEFAULT_TEMPLATE = (
    "A level {LEVEL} {ELEMENT} spell of {EFFECT}, lasting {DURATION} with a range of {RANGE}."
)

PLACEHOLDERS = {
    "{EFFECT}": Category.EFFECT,
    "{ELEMENT}": Category.ELEMENT,
    "{LEVEL}": Category.LEVEL,
    "{DURATION}": Category.DURATION,
    "{RANGE}": Category.RANGE,
}


def format_template(template: str, components: ComponentSet) -> str:
    """Substitute the component placeholders in a template verbatim.

    Example:
        >>> format_template("{ELEMENT} {EFFECT}", ComponentSet(effect="Heal", element="Water"))
        'Water Heal'
    """
    text = template
    for token, category in PLACEHOLDERS.items():
        text = text.replace(token, components.get(category) or "")
    return text


class SpellGenerator:
    """Assemble spells from prompts or from random component choices."""

    def __init__(
        self,
        context: SpellContext,
        rng: random.Random | None = None,
        config: SpellforgeConfig | None = None,
    ) -> None:
        self.context = context
        self.config = config or SpellforgeConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.extractor = ComponentExtractor(context, threshold=self.config.match_threshold)
        self.mapper = ElementMapper(context, threshold=self.config.element_match_threshold)
        self.calculator = EfficiencyCalculator(context)

    def random_components(self) -> ComponentSet:
        """Pick one component per category at random."""
        components = ComponentSet()
        for category in Category:
            components.set(category, self.rng.choice(self.context.candidates(category)))
        return components

    def compose_name(self, components: ComponentSet) -> str:
        """Join the display affixes of the name categories.

        Components without a registered affix contribute their own name, with
        underscores shown as spaces.
        """
        parts = []
        for category in NAME_CATEGORIES:
            value = components.get(category)
            if not value:
                continue
            affix = self.context.affix_for(category, value)
            parts.append(affix if affix else value.replace("_", " "))
        return " ".join(parts)

    def describe(self, components: ComponentSet) -> str:
        """Pick and format a description template for the components."""
        by_element = self.context.templates.get(components.effect or "") or self.context.templates.get(ANY_EFFECT, {})
        element_key = self.mapper.map_element(components.element or "", self.context.template_elements)

        choices = by_element.get(element_key) or by_element.get(FALLBACK_ELEMENT) or [DEFAULT_TEMPLATE]
        if element_key not in by_element:
            logger.debug(f"No '{element_key}' templates for effect '{components.effect}', using fallback")

        return format_template(self.rng.choice(choices), components)

    def build(self, components: ComponentSet, bloodline: str | None = None) -> Spell:
        """Turn a complete component set into a Spell."""
        spell = Spell(
            name=self.compose_name(components),
            components=components,
            description=self.describe(components),
            bloodline=bloodline,
        )
        if bloodline:
            spell.efficiency_label, spell.efficiency = self.calculator.efficiency(bloodline, components.element)
        return spell

    def from_prompt(self, prompt: str, bloodline: str | None = None) -> Spell:
        """Extract components from a prompt and build a spell from them."""
        return self.build(self.extractor.extract(prompt), bloodline)

    def random_spell(self, bloodline: str | None = None) -> Spell:
        return self.build(self.random_components(), bloodline)


__all__ = ["SpellGenerator", "format_template", "DEFAULT_TEMPLATE"]
