"""
Component matcher: maps a free-text prompt onto one category's vocabulary.

Each candidate is scored by a fixed pipeline of stages. The first two stages
(exact name, synonym) always run; the remaining stages only run while the
candidate has no score yet. The candidate with the highest score wins, and
only a strictly greater score replaces the running best, so ties go to the
candidate that comes first in vocabulary order.

Scores are not on one scale: stages return calibrated 5-10 values while the
similarity stage returns a raw trigram count. The minimum accepted score
(3 by default) filters out incidental overlaps of one or two trigrams.
"""

import logging
from typing import Callable

from .context import SpellContext
from .lexical import MIN_STEM_LENGTH, similarity, stem
from .models import Category, MatchCandidate, MatchReason

logger = logging.getLogger("spellforge")

DEFAULT_MATCH_THRESHOLD = 3

# Stage scores
EXACT_SCORE = 10
LONG_SYNONYM_SCORE = 10
SHORT_SYNONYM_SCORE = 9
PATTERN_SCORE = 10
STEM_SCORE = 6
SYNONYM_STEM_SCORE = 5

# Synonyms longer than this score as exact hits
SHORT_SYNONYM_MAX_LENGTH = 3

Stage = Callable[[str, list[str], str], int]


class ComponentMatcher:
    """Score a prompt against the candidates of one category.

    Example:
        >>> matcher = ComponentMatcher(context)
        >>> matcher.match("a fire spell", "Element", ["Fire", "Water"])
        'Fire'
        >>> matcher.match("something else entirely", "Element", ["Fire"]) is None
        True
    """

    def __init__(self, context: SpellContext, threshold: int = DEFAULT_MATCH_THRESHOLD) -> None:
        self.context = context
        self.threshold = threshold

    def match(
        self,
        prompt: str,
        category: Category | str,
        candidates: list[str] | None = None,
    ) -> str | None:
        """Return the best-scoring candidate, or None when nothing scores high enough.

        Args:
            prompt: Free-text description (any case)
            category: Category whose synonyms and patterns apply
            candidates: Candidate names; the category's vocabulary when omitted

        Returns:
            Canonical component name, or None for "no match"
        """
        best = self.best_candidate(prompt, category, candidates)
        if best is None or best.score < self.threshold:
            return None
        return best.name

    def best_candidate(
        self,
        prompt: str,
        category: Category | str,
        candidates: list[str] | None = None,
    ) -> MatchCandidate | None:
        """Return the highest-scoring candidate regardless of the threshold.

        Ties keep the earliest candidate. Returns None if there are no
        candidates or the prompt is blank.
        """
        best: MatchCandidate | None = None
        for scored in self.score_candidates(prompt, category, candidates):
            if best is None or scored.score > best.score:
                best = scored

        if best is not None:
            logger.debug(
                f"Best {Category(category).value} candidate for {prompt!r}: "
                f"{best.name} (score={best.score}, reason={best.reason})"
            )
        return best

    def score_candidates(
        self,
        prompt: str,
        category: Category | str,
        candidates: list[str] | None = None,
    ) -> list[MatchCandidate]:
        """Score every candidate, in candidate order."""
        category = Category(category)
        if candidates is None:
            candidates = self.context.candidates(category)

        if not prompt or not prompt.strip():
            return []

        lowered = prompt.lower()
        return [self._score(candidate, lowered, category) for candidate in candidates]

    def _score(self, candidate: str, prompt: str, category: Category) -> MatchCandidate:
        synonyms = [s.lower() for s in self.context.synonyms_for(category, candidate) if s and s.strip()]
        name = candidate.lower()

        result = MatchCandidate(name=candidate)

        exact = self._exact_stage(name, synonyms, prompt)
        if exact:
            result.score, result.reason = exact, MatchReason.EXACT

        synonym = self._synonym_stage(name, synonyms, prompt)
        if synonym > result.score:
            result.score, result.reason = synonym, MatchReason.SYNONYM

        for reason, stage in self._fallback_stages(category, candidate):
            if result.score:
                break
            score = stage(name, synonyms, prompt)
            if score > result.score:
                result.score, result.reason = score, reason

        return result

    def _fallback_stages(self, category: Category, candidate: str) -> list[tuple[MatchReason, Stage]]:
        """Stages tried in order while a candidate has no score."""
        stages: list[tuple[MatchReason, Stage]] = []
        if category == Category.DURATION:
            patterns = self.context.patterns_for(candidate)
            stages.append(
                (MatchReason.PATTERN, lambda name, synonyms, prompt: self._pattern_stage(patterns, prompt))
            )
        stages.extend([
            (MatchReason.STEM, self._stem_stage),
            (MatchReason.SYNONYM_STEM, self._synonym_stem_stage),
            (MatchReason.SIMILARITY, self._similarity_stage),
        ])
        return stages

    @staticmethod
    def _exact_stage(name: str, synonyms: list[str], prompt: str) -> int:
        return EXACT_SCORE if name in prompt else 0

    @staticmethod
    def _synonym_stage(name: str, synonyms: list[str], prompt: str) -> int:
        best = 0
        for synonym in synonyms:
            if synonym in prompt:
                score = LONG_SYNONYM_SCORE if len(synonym) > SHORT_SYNONYM_MAX_LENGTH else SHORT_SYNONYM_SCORE
                best = max(best, score)
        return best

    @staticmethod
    def _pattern_stage(patterns: list, prompt: str) -> int:
        for pattern in patterns:
            if pattern.search(prompt):
                return PATTERN_SCORE
        return 0

    @staticmethod
    def _stem_stage(name: str, synonyms: list[str], prompt: str) -> int:
        stemmed = stem(name)
        if len(stemmed) >= MIN_STEM_LENGTH and stemmed in prompt:
            return STEM_SCORE
        return 0

    @staticmethod
    def _synonym_stem_stage(name: str, synonyms: list[str], prompt: str) -> int:
        for synonym in synonyms:
            stemmed = stem(synonym)
            if len(stemmed) >= MIN_STEM_LENGTH and stemmed in prompt:
                return SYNONYM_STEM_SCORE
        return 0

    @staticmethod
    def _similarity_stage(name: str, synonyms: list[str], prompt: str) -> int:
        scores = [similarity(name, prompt)]
        scores.extend(similarity(synonym, prompt) for synonym in synonyms)
        return max(scores)


__all__ = ["ComponentMatcher", "DEFAULT_MATCH_THRESHOLD"]
