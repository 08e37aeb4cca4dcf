"""
Map generation-vocabulary elements onto the description-template vocabulary.

Lookup order: exact membership, then the direct alias table, then a
character-overlap score against every template element. Anything scoring
0.3 or less maps to "Any".
"""

import logging

from .context import SpellContext

logger = logging.getLogger("spellforge")

FALLBACK_ELEMENT = "Any"
DEFAULT_ELEMENT_MATCH_THRESHOLD = 0.3
FIRST_LETTER_BONUS = 0.1


class ElementMapper:
    """Resolve an element name against a template element list.

    Example:
        >>> mapper = ElementMapper(context)  # aliases: Wind → Air
        >>> mapper.map_element("Fire", ["Air", "Fire"])
        'Fire'
        >>> mapper.map_element("Wind", ["Air", "Fire"])
        'Air'
        >>> mapper.map_element("Zzz", ["Air", "Fire"])
        'Any'
    """

    def __init__(
        self,
        context: SpellContext,
        threshold: float = DEFAULT_ELEMENT_MATCH_THRESHOLD,
    ) -> None:
        self.context = context
        self.threshold = threshold

    def map_element(self, source: str, template_elements: list[str] | None = None) -> str:
        """Return the template element closest to ``source``.

        Args:
            source: Element from the generation vocabulary
            template_elements: Target names; the context's template elements when omitted

        Returns:
            A name from ``template_elements``, an alias target, or "Any"
        """
        if template_elements is None:
            template_elements = self.context.template_elements

        if source in template_elements:
            return source

        alias = self.context.element_aliases.get(source)
        if alias is not None:
            if alias not in template_elements:
                logger.warning(
                    f"Element alias '{source}' -> '{alias}' points outside the template elements"
                )
            return alias

        best_name: str | None = None
        best_score = 0.0
        for candidate in template_elements:
            score = self.score(source, candidate)
            if score > best_score:
                best_name, best_score = candidate, score

        if best_name is not None and best_score > self.threshold:
            logger.debug(f"Mapped element '{source}' to '{best_name}' (score={best_score:.2f})")
            return best_name

        logger.debug(f"No template element close to '{source}', using '{FALLBACK_ELEMENT}'")
        return FALLBACK_ELEMENT

    @staticmethod
    def score(source: str, candidate: str) -> float:
        """Character-overlap score between two element names.

        Counts each character of ``source`` (repeats included) that appears
        anywhere in ``candidate``, divides by the longer length, adds 0.1 when
        the first letters agree, and caps the result at 1.0.

        Example:
            >>> ElementMapper.score("Flame", "Fire")
            0.5
            >>> ElementMapper.score("Fire", "Fier")
            1.0
        """
        left = source.lower()
        right = candidate.lower()
        longest = max(len(left), len(right))
        if longest == 0:
            return 0.0

        shared = sum(1 for ch in left if ch in right)
        score = shared / longest
        if left and right and left[0] == right[0]:
            score += FIRST_LETTER_BONUS
        return min(score, 1.0)


__all__ = ["ElementMapper", "FALLBACK_ELEMENT"]
