"""Journal analytics: streaks, mood and tag rollups, word-count trend.

The snapshot is rebuilt from the full entry history on every call; nothing
is cached between requests.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from daybook.core.results import STORE_ERROR, ServiceResult
from daybook.domains.journal.mappers import to_display
from daybook.domains.journal.models import JournalEntry
from daybook.domains.journal.moods import MOOD_CATEGORIES, categorize
from daybook.domains.journal.schemas.journal_schemas import AnalyticsSnapshot, ChartDataPoint
from daybook.domains.journal.services import journal_service
from daybook.domains.journal.services.streaks import calculate_streaks
from daybook.extensions import db

logger = logging.getLogger(__name__)

TOP_N = 5
TREND_DAYS = 7
RECENT_ENTRIES = 5


def get_analytics(user_id: int, today: Optional[date] = None) -> ServiceResult[AnalyticsSnapshot]:
    try:
        entries = journal_service.all_entries(user_id)
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.exception("Journal store error while loading analytics for user %s", user_id)
        return ServiceResult.failure(STORE_ERROR, f"Error loading analytics: {exc}")
    return ServiceResult.success(build_snapshot(entries, today=today))


def build_snapshot(entries: Sequence[JournalEntry], today: Optional[date] = None) -> AnalyticsSnapshot:
    """Aggregate a user's entries (oldest first) into an analytics snapshot."""
    today = today or date.today()
    if not entries:
        return AnalyticsSnapshot(missed_days=today.day)

    streaks = calculate_streaks((e.entry_date for e in entries), today=today)
    return AnalyticsSnapshot(
        current_streak=streaks.current,
        longest_streak=streaks.longest,
        total_entries=len(entries),
        missed_days=missed_days_this_month(entries, today),
        mood_distribution=mood_distribution(entries),
        top_moods=_top_counts(e.primary_mood for e in entries),
        tag_usage=_top_counts(tag for e in entries for tag in (e.tags or [])),
        word_count_trend=word_count_trend(entries, today),
        recent_entries=[
            to_display(e)
            for e in sorted(entries, key=lambda e: e.entry_date, reverse=True)[:RECENT_ENTRIES]
        ],
    )


def missed_days_this_month(entries: Iterable[JournalEntry], today: date) -> int:
    written = {
        e.entry_date.day
        for e in entries
        if e.entry_date.year == today.year and e.entry_date.month == today.month and e.entry_date <= today
    }
    return today.day - len(written)


def mood_distribution(entries: Iterable[JournalEntry]) -> List[ChartDataPoint]:
    counts = {category: 0 for category in MOOD_CATEGORIES}
    for entry in entries:
        category = categorize(entry.primary_mood)
        if category is not None:
            counts[category] += 1
    return [ChartDataPoint(label=category.value, value=count) for category, count in counts.items()]


def word_count_trend(entries: Iterable[JournalEntry], today: date) -> List[ChartDataPoint]:
    words_by_day: Dict[date, int] = defaultdict(int)
    for entry in entries:
        words_by_day[entry.entry_date] += entry.word_count or 0
    days = [today - timedelta(days=offset) for offset in range(TREND_DAYS - 1, -1, -1)]
    return [ChartDataPoint(label=day.strftime("%a"), value=words_by_day.get(day, 0)) for day in days]


def _top_counts(labels: Iterable[str], limit: int = TOP_N) -> List[ChartDataPoint]:
    # dict keeps first-seen order and sorted() is stable, so ties keep that order.
    counts: Dict[str, int] = {}
    for label in labels:
        counts[label] = counts.get(label, 0) + 1
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:limit]
    return [ChartDataPoint(label=label, value=count) for label, count in ranked]
