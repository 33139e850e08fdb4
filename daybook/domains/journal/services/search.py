"""Text filter selection for journal search.

A search applies at most one text filter. When several are supplied the
title filter wins, then mood, then tag; the others are dropped. Date bounds
are independent of this choice and always apply.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from daybook.domains.journal.models import JournalEntry, JournalEntryTag


class FilterKind(str, Enum):
    TITLE = "title"
    MOOD = "mood"
    TAG = "tag"


@dataclass(frozen=True)
class ActiveFilter:
    kind: FilterKind
    value: str

    @classmethod
    def choose(
        cls,
        title: Optional[str] = None,
        mood: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> Optional["ActiveFilter"]:
        for kind, value in ((FilterKind.TITLE, title), (FilterKind.MOOD, mood), (FilterKind.TAG, tag)):
            if value is not None and value.strip():
                # mood is matched verbatim
                return cls(kind, value if kind is FilterKind.MOOD else value.strip())
        return None

    def clause(self):
        """SQL predicate for this filter against ``JournalEntry``."""
        if self.kind is FilterKind.TITLE:
            return JournalEntry.title.ilike(f"%{_escape_like(self.value)}%", escape="\\")
        if self.kind is FilterKind.MOOD:
            return JournalEntry.primary_mood == self.value
        return JournalEntry.tag_rows.any(
            JournalEntryTag.name.ilike(f"%{_escape_like(self.value)}%", escape="\\")
        )


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
