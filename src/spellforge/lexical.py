"""
Lexical similarity helpers shared by the matcher and extractor.

Both functions are pure and case-insensitive. They are deliberately crude:
no tokenization, no dictionary, just suffix stripping and trigram overlap.
"""

# Checked in this order; the first qualifying suffix wins
SUFFIXES = ("ing", "ed", "es", "s", "y", "er", "est", "ly")

# Shortest remainder a suffix may leave behind
MIN_STEM_LENGTH = 3

# Similarity scores for the non-additive cases
EXACT_SCORE = 10
STEM_SCORE = 8
CONTAINS_SCORE = 6


def stem(word: str) -> str:
    """Strip the first matching suffix from a word.

    A suffix only qualifies if stripping it leaves at least three characters.
    Words ending in "ies" matched by the "es" suffix become "...y".

    Args:
        word: Word to stem (any case)

    Returns:
        Lower-cased stem, or the lower-cased word if no suffix qualifies

    Example:
        >>> stem("Burning")
        'burn'
        >>> stem("armies")
        'army'
        >>> stem("ice")
        'ice'
    """
    lowered = word.lower()
    for suffix in SUFFIXES:
        if not lowered.endswith(suffix):
            continue
        if len(lowered) - len(suffix) < MIN_STEM_LENGTH:
            continue
        if suffix == "es" and lowered.endswith("ies"):
            return lowered[:-3] + "y"
        return lowered[: -len(suffix)]
    return lowered


def similarity(a: str, b: str) -> int:
    """Score how alike two strings are.

    Returns 10 for case-insensitive equality, 8 for equal stems, 6 when one
    contains the other, and otherwise one point per three-character window of
    ``a`` (every offset, overlapping) that occurs somewhere in ``b``.

    The trigram count is asymmetric: ``a`` supplies the windows. Callers pass
    the candidate first and the prompt second.

    Args:
        a: String supplying the trigram windows
        b: String searched for those windows

    Returns:
        Integer score, 0 when nothing overlaps

    Example:
        >>> similarity("Fire", "fire")
        10
        >>> similarity("burning", "burned")
        8
        >>> similarity("minute", "ten minutes")
        6
        >>> similarity("blizzard", "a lizard storm")
        3
    """
    left = a.lower()
    right = b.lower()

    if left == right:
        return EXACT_SCORE
    if stem(left) == stem(right):
        return STEM_SCORE
    if left in right or right in left:
        return CONTAINS_SCORE

    return sum(1 for i in range(len(left) - 2) if left[i:i + 3] in right)
