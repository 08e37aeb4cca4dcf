"""
spellforge - procedural spell names and flavor text.

Infers spell components (Effect, Element, Level, Duration, Range) from
free-text descriptions, maps elements onto description templates, and rates
bloodline/element efficiency.
"""

from .config import SpellforgeConfig, load_config
from .context import SpellContext, load_context
from .efficiency import EfficiencyCalculator
from .element_mapper import ElementMapper
from .exceptions import ConfigError, SpellforgeError, VocabularyError
from .extractor import ComponentExtractor, extract_level
from .generator import SpellGenerator
from .lexical import similarity, stem
from .matcher import ComponentMatcher
from .models import Category, ComponentSet, MatchCandidate, MatchReason, Spell

__version__ = "0.1.0"

__all__ = [
    "Category",
    "ComponentExtractor",
    "ComponentMatcher",
    "ComponentSet",
    "ConfigError",
    "EfficiencyCalculator",
    "ElementMapper",
    "MatchCandidate",
    "MatchReason",
    "Spell",
    "SpellContext",
    "SpellGenerator",
    "SpellforgeConfig",
    "SpellforgeError",
    "VocabularyError",
    "extract_level",
    "load_config",
    "load_context",
    "similarity",
    "stem",
]
