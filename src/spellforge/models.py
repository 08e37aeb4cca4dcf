"""
Data models for spell components, match results and generated spells.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Category(str, Enum):
    """The five spell component categories, in vocabulary order."""
    EFFECT = "Effect"
    ELEMENT = "Element"
    LEVEL = "Level"
    DURATION = "Duration"
    RANGE = "Range"


class MatchReason(str, Enum):
    """Which scoring stage produced a candidate's score."""
    EXACT = "exact"
    SYNONYM = "synonym"
    PATTERN = "pattern"
    STEM = "stem"
    SYNONYM_STEM = "synonym_stem"
    SIMILARITY = "similarity"


class MatchCandidate(BaseModel):
    """A scored candidate for one category."""
    name: str = Field(description="Canonical component name")
    score: int = Field(default=0, ge=0, description="Score from the stage that fired")
    reason: MatchReason | None = Field(default=None, description="Stage that produced the score")


# Category → ComponentSet field name
_SLOTS: dict[Category, str] = {
    Category.EFFECT: "effect",
    Category.ELEMENT: "element",
    Category.LEVEL: "level",
    Category.DURATION: "duration",
    Category.RANGE: "range",
}


class ComponentSet(BaseModel):
    """The five component slots of one spell.

    Slots start unset and are filled progressively by extraction. A set
    produced by ``ComponentExtractor.extract`` always has every slot filled;
    ``defaulted`` lists the categories that fell back to a default value.

    Example:
        >>> components = ComponentSet(effect="Damage", element="Fire")
        >>> components.get(Category.ELEMENT)
        'Fire'
        >>> components.missing()
        [<Category.LEVEL: 'Level'>, <Category.DURATION: 'Duration'>, <Category.RANGE: 'Range'>]
    """
    effect: str | None = None
    element: str | None = None
    level: str | None = None
    duration: str | None = None
    range: str | None = None
    defaulted: list[Category] = Field(default_factory=list)

    def get(self, category: Category | str) -> str | None:
        """Return the value held for a category, or None if unset."""
        return getattr(self, _SLOTS[Category(category)])

    def set(self, category: Category | str, value: str) -> None:
        """Fill the slot for a category."""
        setattr(self, _SLOTS[Category(category)], value)

    def missing(self) -> list[Category]:
        """Categories whose slot is still unset, in vocabulary order."""
        return [category for category in Category if self.get(category) is None]

    def is_complete(self) -> bool:
        return not self.missing()

    def as_dict(self) -> dict[str, str | None]:
        """Slot values keyed by category name ("Effect", "Element", ...)."""
        return {category.value: self.get(category) for category in Category}


class Spell(BaseModel):
    """A generated spell: name, components and flavor text."""
    name: str = Field(description="Assembled display name")
    components: ComponentSet = Field(description="Filled component slots")
    description: str = Field(description="Formatted flavor text")
    bloodline: str | None = Field(default=None, description="Caster bloodline used for efficiency")
    efficiency_label: str | None = Field(default=None, description="Affinity tier label, e.g. 'Good 60%'")
    efficiency: int | None = Field(default=None, ge=0, le=100, description="Affinity percentage")
