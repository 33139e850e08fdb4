"""Journal services: per-day upsert, lookup, listing and search.

Every function returns a ``ServiceResult``; store failures are rolled back,
logged and reported as ``store_error`` instead of propagating.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Optional, Tuple, Union

from sqlalchemy.exc import SQLAlchemyError

from daybook.core.results import FUTURE_DATE, STORE_ERROR, ServiceResult
from daybook.core.utils.pagination import paginate
from daybook.domains.journal.mappers import to_display
from daybook.domains.journal.models import JournalEntry
from daybook.domains.journal.schemas.journal_schemas import JournalEntryDisplay
from daybook.domains.journal.services.search import ActiveFilter
from daybook.extensions import db

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]
Page = Tuple[List[JournalEntryDisplay], int]


def count_words(content: Optional[str]) -> int:
    if not content:
        return 0
    return len(content.split())


def _day(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def _store_failure(action: str, exc: SQLAlchemyError) -> ServiceResult:
    db.session.rollback()
    logger.exception("Journal store error while %s", action)
    return ServiceResult.failure(STORE_ERROR, f"Error {action}: {exc}")


def _find_by_date(user_id: int, entry_date: date) -> Optional[JournalEntry]:
    return JournalEntry.query.filter_by(user_id=user_id, entry_date=entry_date).first()


def upsert_entry(
    user_id: int,
    *,
    entry_date: DateLike,
    title: str,
    content: str,
    primary_mood: str,
    secondary_moods: Optional[List[str]] = None,
    tags: Optional[List[str]] = None,
    today: Optional[date] = None,
) -> ServiceResult[JournalEntry]:
    """Create or overwrite the entry for ``(user_id, entry_date)``."""
    day = _day(entry_date)
    today = today or date.today()
    if day > today:
        logger.warning("Rejected future-dated entry for user %s on %s", user_id, day)
        return ServiceResult.failure(FUTURE_DATE, "Cannot create journal for future dates")

    try:
        entry = _find_by_date(user_id, day)
        created = entry is None
        if created:
            entry = JournalEntry(user_id=user_id, entry_date=day)
            db.session.add(entry)
        entry.title = title or ""
        entry.content = content or ""
        entry.primary_mood = primary_mood or ""
        entry.secondary_moods = list(secondary_moods or [])
        entry.set_tags(list(tags or []))
        entry.word_count = count_words(content)
        entry.updated_at = datetime.utcnow()
        db.session.commit()
    except SQLAlchemyError as exc:
        return _store_failure("saving journal", exc)

    logger.info(
        "%s journal entry %s for user %s on %s",
        "Created" if created else "Updated",
        entry.id,
        user_id,
        day,
    )
    return ServiceResult.success(entry)


def get_entry_by_date(user_id: int, entry_date: DateLike) -> ServiceResult[Optional[JournalEntry]]:
    """Return the entry for that day; ``data`` is None when there is none."""
    try:
        return ServiceResult.success(_find_by_date(user_id, _day(entry_date)))
    except SQLAlchemyError as exc:
        return _store_failure("loading journal", exc)


def delete_entry(user_id: int, entry_date: DateLike) -> ServiceResult[bool]:
    """Delete the entry for that day. Deleting a missing entry is a no-op success."""
    day = _day(entry_date)
    try:
        entry = _find_by_date(user_id, day)
        if entry is None:
            return ServiceResult.success(False)
        db.session.delete(entry)
        db.session.commit()
    except SQLAlchemyError as exc:
        return _store_failure("deleting journal", exc)
    logger.info("Deleted journal entry for user %s on %s", user_id, day)
    return ServiceResult.success(True)


def list_entries(user_id: int, *, page: int = 1, page_size: int = 10) -> ServiceResult[Page]:
    """Newest-first page of a user's entries, without content."""
    try:
        query = JournalEntry.query.filter_by(user_id=user_id).order_by(JournalEntry.entry_date.desc())
        entries, total = paginate(query, page, page_size)
    except SQLAlchemyError as exc:
        return _store_failure("listing journals", exc)
    return ServiceResult.success(([to_display(e) for e in entries], total))


def search_entries(
    user_id: int,
    *,
    title: Optional[str] = None,
    mood: Optional[str] = None,
    tag: Optional[str] = None,
    date_from: Optional[DateLike] = None,
    date_to: Optional[DateLike] = None,
    page: int = 1,
    page_size: int = 10,
    include_content: bool = True,
) -> ServiceResult[Page]:
    """Filtered, newest-first page of a user's entries plus the total match count.

    Only one of title/mood/tag is applied (see ``ActiveFilter``); date bounds
    are inclusive and always applied.
    """
    query = JournalEntry.query.filter_by(user_id=user_id)
    active = ActiveFilter.choose(title=title, mood=mood, tag=tag)
    if active is not None:
        query = query.filter(active.clause())
    if date_from is not None:
        query = query.filter(JournalEntry.entry_date >= _day(date_from))
    if date_to is not None:
        query = query.filter(JournalEntry.entry_date <= _day(date_to))
    query = query.order_by(JournalEntry.entry_date.desc())

    try:
        entries, total = paginate(query, page, page_size)
    except SQLAlchemyError as exc:
        return _store_failure("searching journals", exc)
    return ServiceResult.success(
        ([to_display(e, include_content=include_content) for e in entries], total)
    )


def all_entries(user_id: int) -> List[JournalEntry]:
    """Full history for a user, oldest first. Raises on store errors."""
    return JournalEntry.query.filter_by(user_id=user_id).order_by(JournalEntry.entry_date.asc()).all()


def entries_for_report(user_id: int, date_from: DateLike, date_to: DateLike) -> ServiceResult[List[JournalEntry]]:
    """Entries within the inclusive range, oldest first, for the report renderer."""
    try:
        entries = (
            JournalEntry.query.filter_by(user_id=user_id)
            .filter(
                JournalEntry.entry_date >= _day(date_from),
                JournalEntry.entry_date <= _day(date_to),
            )
            .order_by(JournalEntry.entry_date.asc())
            .all()
        )
    except SQLAlchemyError as exc:
        return _store_failure("loading report entries", exc)
    return ServiceResult.success(entries)
