"""Journal mappers for display projections."""

from __future__ import annotations

from daybook.domains.journal.models import JournalEntry
from daybook.domains.journal.schemas.journal_schemas import JournalEntryDisplay


def to_display(entry: JournalEntry, include_content: bool = False) -> JournalEntryDisplay:
    return JournalEntryDisplay(
        id=entry.id,
        entry_date=entry.entry_date,
        title=entry.title or "",
        primary_mood=entry.primary_mood or "",
        secondary_moods=list(entry.secondary_moods or []),
        tags=list(entry.tags or []),
        word_count=entry.word_count or 0,
        content=entry.content if include_content else None,
    )


def map_entry(entry: JournalEntry, include_content: bool = True) -> dict:
    return to_display(entry, include_content=include_content).model_dump(mode="json")
