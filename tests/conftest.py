"""
Pytest configuration and fixtures for spellforge tests.
"""

import copy
import sys
from pathlib import Path

import pytest

# Add src directory to Python path to allow importing spellforge
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from spellforge.context import SpellContext  # noqa: E402


TEST_DATA = {
    "vocabulary": {
        "Effect": ["Creation", "Damage", "Shield", "Heal", "Summon"],
        "Element": ["Fire", "Water", "Earth", "Wind", "Sun", "Moon", "Shadow"],
        "Level": [str(n) for n in range(1, 11)],
        "Duration": ["Instant", "1_minute", "5_minute", "10_minute", "1_hour"],
        "Range": ["Self", "Touch", "30ft", "60ft", "120ft"],
    },
    "affixes": {
        "Effect": {"Damage": "Bolt", "Heal": "Mending"},
        "Element": {"Fire": "Ember", "Water": "Tidal"},
        "Range": {"Touch": "of Touch"},
    },
    "synonyms": {
        "Effect": {
            "Creation": ["create", "conjure", "make"],
            "Damage": ["hurt", "harm", "blast", "attack"],
            "Shield": ["protect", "ward", "barrier", "block"],
            "Heal": ["cure", "mend", "restore"],
            "Summon": ["call forth", "summoning", ""],
        },
        "Element": {
            "Fire": ["flame", "burn", "blaze"],
            "Water": ["wave", "tide", "aqua"],
            "Earth": ["stone", "rock"],
            "Wind": ["air", "gust", "breeze"],
            "Sun": ["solar", "daylight"],
            "Moon": ["lunar"],
            "Shadow": ["dark", "shade"],
        },
        "Duration": {
            "Instant": ["immediately"],
        },
        "Range": {
            "Self": ["myself", "personal"],
            "Touch": ["touching", "contact"],
            "30ft": ["nearby", "close"],
            "60ft": ["medium range"],
            "120ft": ["far away", "long range"],
        },
    },
    "duration_patterns": {
        "Instant": [r"\binstant(ly)?\b"],
        "1_minute": [r"\b(1|one)\s*min(ute)?s?\b"],
        "5_minute": [r"\b(5|five)\s*min(ute)?s?\b"],
        "10_minute": [r"\b(10|ten)\s*min(ute)?s?\b"],
        "1_hour": [r"\b(1|one|an)\s*hours?\b"],
    },
    "bloodline_affinities": {
        "Fire": {
            "Best 80%": ["Lightning"],
            "Good 60%": ["Earth"],
            "Moderate 40%": ["Wind"],
            "Weak 20%": ["Water"],
            "Neutral 50%": ["Moon"],
        },
        "Water": {
            "Good 60%": ["Moon"],
            "Weak 20%": ["Fire", "Moon"],
        },
    },
    "element_aliases": {
        "Wind": "Air",
        "Sun": "Light",
        "Shadow": "Dark",
        "Moon": "Glow",
    },
    "template_elements": ["Fire", "Water", "Earth", "Air", "Light", "Dark"],
    "templates": {
        "Damage": {
            "Fire": ["{ELEMENT} {EFFECT} at {RANGE}, level {LEVEL}, {DURATION}"],
            "Any": ["Generic {ELEMENT} {EFFECT}"],
        },
        "Any": {
            "Any": ["Fallback {EFFECT} of {ELEMENT}"],
        },
    },
}


@pytest.fixture
def context_data() -> dict:
    """Raw spell data dictionary (a fresh deep copy per test)."""
    return copy.deepcopy(TEST_DATA)


@pytest.fixture
def context(context_data: dict) -> SpellContext:
    """A small in-memory SpellContext."""
    return SpellContext(**context_data)
