from __future__ import annotations

import pytest

from daybook.domains.journal.services.search import ActiveFilter, FilterKind

pytestmark = pytest.mark.unit


def test_no_filters():
    assert ActiveFilter.choose() is None
    assert ActiveFilter.choose(title="  ", mood="", tag=None) is None


def test_title_wins_over_mood_and_tag():
    active = ActiveFilter.choose(title="Trip", mood="Happy", tag="travel")
    assert active == ActiveFilter(FilterKind.TITLE, "Trip")


def test_mood_wins_over_tag():
    active = ActiveFilter.choose(mood="Happy", tag="travel")
    assert active == ActiveFilter(FilterKind.MOOD, "Happy")


def test_tag_used_alone():
    assert ActiveFilter.choose(tag=" work ") == ActiveFilter(FilterKind.TAG, "work")


def test_blank_title_falls_through_to_mood():
    assert ActiveFilter.choose(title="   ", mood="Sad").kind is FilterKind.MOOD


def test_mood_value_is_not_trimmed():
    assert ActiveFilter.choose(mood=" Happy ") == ActiveFilter(FilterKind.MOOD, " Happy ")
    assert ActiveFilter.choose(mood="   ", tag="work") == ActiveFilter(FilterKind.TAG, "work")
