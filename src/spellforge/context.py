"""
Immutable spell data context and its YAML loader.

Every engine (matcher, extractor, element mapper, efficiency calculator,
generator) receives one SpellContext at construction time. The context is
built once, validated, and never mutated afterwards.
"""

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .exceptions import VocabularyError
from .models import Category

logger = logging.getLogger("spellforge")

DEFAULT_DATA_FILE = Path(__file__).parent / "data" / "spell_data.yaml"

# Affinity tiers in lookup priority order
TIER_ORDER = ("Best 80%", "Good 60%", "Moderate 40%", "Weak 20%", "Neutral 50%")


@lru_cache(maxsize=None)
def compile_pattern(pattern: str) -> re.Pattern:
    """Compile a duration pattern for case-insensitive search."""
    return re.compile(pattern, re.IGNORECASE)


class SpellContext(BaseModel):
    """Read-only tables driving extraction, mapping and efficiency.

    Attributes:
        vocabulary: Category name → ordered canonical component names
        affixes: Category name → component → display affix for spell names
        synonyms: Category name → component → synonym phrases
        duration_patterns: Duration component → regex patterns
        bloodline_affinities: Bloodline → tier label → element names
        element_aliases: Generation element → template element
        template_elements: Element vocabulary used by description templates
        templates: Effect → template element → description templates

    Example:
        >>> context = SpellContext(vocabulary={
        ...     "Effect": ["Damage"], "Element": ["Fire"], "Level": ["1"],
        ...     "Duration": ["Instant"], "Range": ["Self"],
        ... })
        >>> context.candidates("Element")
        ['Fire']
    """
    model_config = ConfigDict(frozen=True)

    vocabulary: dict[str, list[str]]
    affixes: dict[str, dict[str, str]] = Field(default_factory=dict)
    synonyms: dict[str, dict[str, list[str]]] = Field(default_factory=dict)
    duration_patterns: dict[str, list[str]] = Field(default_factory=dict)
    bloodline_affinities: dict[str, dict[str, list[str]]] = Field(default_factory=dict)
    element_aliases: dict[str, str] = Field(default_factory=dict)
    template_elements: list[str] = Field(default_factory=list)
    templates: dict[str, dict[str, list[str]]] = Field(default_factory=dict)

    @field_validator("vocabulary")
    @classmethod
    def validate_vocabulary(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        """Ensure every category is present and non-empty."""
        missing = [c.value for c in Category if not v.get(c.value)]
        if missing:
            raise ValueError(f"vocabulary is missing categories: {', '.join(missing)}")
        return v

    @field_validator("duration_patterns")
    @classmethod
    def validate_duration_patterns(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        """Ensure every duration pattern compiles."""
        for duration, patterns in v.items():
            for pattern in patterns:
                try:
                    compile_pattern(pattern)
                except re.error as e:
                    raise ValueError(f"invalid pattern for duration '{duration}': {pattern!r} ({e})")
        return v

    @field_validator("bloodline_affinities")
    @classmethod
    def validate_tiers(cls, v: dict[str, dict[str, list[str]]]) -> dict[str, dict[str, list[str]]]:
        """Ensure tier labels are known ones."""
        for bloodline, tiers in v.items():
            unknown = [tier for tier in tiers if tier not in TIER_ORDER]
            if unknown:
                raise ValueError(f"bloodline '{bloodline}' has unknown tiers: {', '.join(unknown)}")
        return v

    @model_validator(mode="after")
    def warn_duplicate_tier_entries(self) -> "SpellContext":
        """Log elements listed under more than one tier of a bloodline."""
        for bloodline, tiers in self.bloodline_affinities.items():
            seen: dict[str, str] = {}
            for tier in TIER_ORDER:
                for element in tiers.get(tier, []):
                    if element in seen:
                        logger.warning(
                            f"Element '{element}' listed under both '{seen[element]}' and '{tier}' "
                            f"for bloodline '{bloodline}'; '{seen[element]}' wins"
                        )
                    else:
                        seen[element] = tier
        return self

    def candidates(self, category: Category | str) -> list[str]:
        """Canonical component names for a category, in vocabulary order."""
        return list(self.vocabulary.get(Category(category).value, []))

    def synonyms_for(self, category: Category | str, component: str) -> list[str]:
        """Synonym phrases registered for a component (possibly empty)."""
        return list(self.synonyms.get(Category(category).value, {}).get(component, []))

    def patterns_for(self, duration: str) -> list[re.Pattern]:
        """Compiled regex patterns registered for a duration component."""
        return [compile_pattern(p) for p in self.duration_patterns.get(duration, [])]

    def affix_for(self, category: Category | str, component: str) -> str | None:
        return self.affixes.get(Category(category).value, {}).get(component)

    def affinity_tiers(self, bloodline: str) -> dict[str, list[str]]:
        return self.bloodline_affinities.get(bloodline, {})


def load_context(path: Path | str | None = None) -> SpellContext:
    """Load a SpellContext from a YAML data file.

    Expected YAML format:
        vocabulary:
          Effect: [Creation, Damage]
          Element: [Fire, Moon]
          ...
        synonyms:
          Element:
            Fire: [flame, blaze]
        duration_patterns:
          Instant: ['\\binstant(ly)?\\b']
        bloodline_affinities:
          Fire:
            Good 60%: [Earth]

    Args:
        path: YAML file to read; the bundled data file when omitted

    Returns:
        Validated, frozen SpellContext

    Raises:
        VocabularyError: If the file is missing, malformed or fails validation
    """
    data_path = Path(path) if path is not None else DEFAULT_DATA_FILE

    try:
        with open(data_path, "r", encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise VocabularyError(f"Spell data file not found: {data_path}", path=str(data_path)) from e
    except yaml.YAMLError as e:
        raise VocabularyError(f"Spell data file is not valid YAML: {e}", path=str(data_path)) from e

    if not isinstance(data, dict) or "vocabulary" not in data:
        raise VocabularyError("Spell data file must contain a 'vocabulary' key", path=str(data_path))

    try:
        context = SpellContext(**data)
    except ValidationError as e:
        raise VocabularyError(
            f"Spell data file failed validation: {data_path}",
            path=str(data_path),
            details={"errors": e.errors(include_url=False)},
        ) from e

    logger.debug(
        f"Loaded spell data from {data_path} "
        f"({sum(len(v) for v in context.vocabulary.values())} components)"
    )
    return context


__all__ = ["SpellContext", "load_context", "compile_pattern", "TIER_ORDER", "DEFAULT_DATA_FILE"]
