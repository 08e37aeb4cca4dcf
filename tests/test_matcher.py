"""
Unit tests for the component matcher.
"""

import pytest

from spellforge.context import SpellContext
from spellforge.matcher import ComponentMatcher
from spellforge.models import Category, MatchReason


@pytest.fixture
def matcher(context: SpellContext) -> ComponentMatcher:
    return ComponentMatcher(context)


class TestExactMatch:
    """Test exact-name substring matching."""

    def test_exact_substring_wins(self, matcher: ComponentMatcher) -> None:
        assert matcher.match("a fire spell", "Element", ["Fire", "Water"]) == "Fire"

    def test_case_insensitive(self, matcher: ComponentMatcher) -> None:
        assert matcher.match("A FIRE SPELL", Category.ELEMENT, ["Fire", "Water"]) == "Fire"

    def test_exact_scores_ten(self, matcher: ComponentMatcher) -> None:
        best = matcher.best_candidate("a fire spell", "Element", ["Fire", "Water"])
        assert best.name == "Fire"
        assert best.score == 10
        assert best.reason == MatchReason.EXACT

    def test_candidates_default_to_vocabulary(self, matcher: ComponentMatcher) -> None:
        assert matcher.match("a fire spell", "Element") == "Fire"

    def test_ties_go_to_first_candidate(self, matcher: ComponentMatcher) -> None:
        """Test only a strictly greater score replaces the running best."""
        assert matcher.match("fire and water", "Element", ["Water", "Fire"]) == "Water"
        assert matcher.match("fire and water", "Element", ["Fire", "Water"]) == "Fire"

    @pytest.mark.parametrize("prompt", ["", "   "])
    def test_blank_prompt_matches_nothing(self, matcher: ComponentMatcher, prompt: str) -> None:
        assert matcher.score_candidates(prompt, "Element") == []
        assert matcher.best_candidate(prompt, "Element") is None
        assert matcher.match(prompt, "Element") is None


class TestSynonymMatch:
    """Test synonym scoring."""

    def test_long_synonym_scores_ten(self, matcher: ComponentMatcher) -> None:
        best = matcher.best_candidate("it should hurt", "Effect")
        assert best.name == "Damage"
        assert best.score == 10
        assert best.reason == MatchReason.SYNONYM

    def test_short_synonym_loses_to_long_synonym(self, context_data: dict) -> None:
        """Test a three-letter synonym scores 9 and a four-letter one 10."""
        context_data["synonyms"]["Effect"]["Damage"] = ["zap"]
        context_data["synonyms"]["Effect"]["Shield"] = ["bolt"]
        matcher = ComponentMatcher(SpellContext(**context_data))

        scored = matcher.score_candidates("zap bolt", "Effect", ["Damage", "Shield"])
        assert [(c.name, c.score) for c in scored] == [("Damage", 9), ("Shield", 10)]
        assert matcher.match("zap bolt", "Effect", ["Damage", "Shield"]) == "Shield"

        # On its own the short synonym still clears the threshold
        assert matcher.match("zap bolt", "Effect", ["Damage"]) == "Damage"

    def test_blank_synonyms_are_skipped(self, matcher: ComponentMatcher) -> None:
        """Test an empty synonym does not match every prompt."""
        assert matcher.match("nothing relevant here", "Effect", ["Summon"]) is None


class TestDurationPatterns:
    """Test the regex stage reserved for durations."""

    def test_pattern_match(self, matcher: ComponentMatcher) -> None:
        best = matcher.best_candidate("a ward lasting five minutes", "Duration")
        assert best.name == "5_minute"
        assert best.score == 10
        assert best.reason == MatchReason.PATTERN

    def test_pattern_distinguishes_ten_from_one(self, matcher: ComponentMatcher) -> None:
        assert matcher.match("holds for 10 minutes", "Duration") == "10_minute"
        assert matcher.match("holds for one minute", "Duration") == "1_minute"

    def test_patterns_only_apply_to_duration(self, matcher: ComponentMatcher) -> None:
        """Test other categories never consult duration patterns."""
        scored = matcher.score_candidates("five minutes", "Range", ["5_minute"])
        assert scored[0].reason == MatchReason.SIMILARITY
        # min, inu, nut, ute
        assert scored[0].score == 4


class TestStemMatch:
    """Test the stem and synonym-stem stages."""

    def test_candidate_stem(self, matcher: ComponentMatcher) -> None:
        best = matcher.best_candidate("raise a shield", "Effect", ["Shields"])
        assert best.score == 6
        assert best.reason == MatchReason.STEM

    def test_synonym_stem(self, context_data: dict) -> None:
        context_data["synonyms"]["Effect"]["Heal"] = ["mending"]
        matcher = ComponentMatcher(SpellContext(**context_data))

        assert matcher.match("mend the wound", "Effect") == "Heal"
        best = matcher.best_candidate("mend the wound", "Effect")
        assert best.score == 5
        assert best.reason == MatchReason.SYNONYM_STEM


class TestSimilarityFallback:
    """Test trigram fallback and the minimum score."""

    def test_three_trigrams_match(self, matcher: ComponentMatcher) -> None:
        best = matcher.best_candidate("a lizard storm", "Element", ["Blizzard"])
        assert best.score == 3
        assert best.reason == MatchReason.SIMILARITY
        assert matcher.match("a lizard storm", "Element", ["Blizzard"]) == "Blizzard"

    def test_below_threshold_is_no_match(self, matcher: ComponentMatcher) -> None:
        assert matcher.best_candidate("abcx", "Element", ["abcabc"]).score == 2
        assert matcher.match("abcx", "Element", ["abcabc"]) is None

    def test_unrelated_prompt(self, matcher: ComponentMatcher) -> None:
        assert matcher.match("zzz qqq", "Element") is None

    def test_custom_threshold(self, context: SpellContext) -> None:
        strict = ComponentMatcher(context, threshold=4)
        assert strict.match("a lizard storm", "Element", ["Blizzard"]) is None

    @pytest.mark.parametrize("prompt", ["", "   "])
    def test_blank_prompt(self, matcher: ComponentMatcher, prompt: str) -> None:
        assert matcher.score_candidates(prompt, "Effect") == []
        assert matcher.best_candidate(prompt, "Effect") is None
        assert matcher.match(prompt, "Effect") is None

    @pytest.mark.parametrize(
        "prompt",
        ["a fire spell", "heal me", "zzz", "ten minutes of stone", "a lizard storm"],
    )
    def test_never_returns_low_scores(self, matcher: ComponentMatcher, prompt: str) -> None:
        """Test every returned component scored at least the threshold."""
        for category in Category:
            result = matcher.match(prompt, category)
            if result is not None:
                best = matcher.best_candidate(prompt, category)
                assert best.name == result
                assert best.score >= matcher.threshold
