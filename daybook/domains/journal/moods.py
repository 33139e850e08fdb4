"""Mood vocabulary and the static category table used by analytics."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


class MoodCategory(str, Enum):
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


# Category order here is the order of the mood distribution chart.
MOOD_CATEGORIES: Mapping[MoodCategory, Tuple[str, ...]] = MappingProxyType(
    {
        MoodCategory.POSITIVE: ("Happy", "Excited", "Relaxed", "Grateful", "Confident"),
        MoodCategory.NEUTRAL: ("Calm", "Thoughtful", "Curious", "Nostalgic", "Bored"),
        MoodCategory.NEGATIVE: ("Sad", "Angry", "Stressed", "Lonely", "Anxious"),
    }
)

_CATEGORY_BY_MOOD: Mapping[str, MoodCategory] = MappingProxyType(
    {mood: category for category, moods in MOOD_CATEGORIES.items() for mood in moods}
)


def categorize(mood: Optional[str]) -> Optional[MoodCategory]:
    """Return the category for ``mood``, or None when the mood is not in the table.

    Matching is exact. Unlisted moods fall through here and nowhere else.
    """
    if not mood:
        return None
    return _CATEGORY_BY_MOOD.get(mood)
