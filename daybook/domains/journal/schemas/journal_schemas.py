"""Journal request/response schemas."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


def _dedupe(values: Optional[List[str]]) -> List[str]:
    seen: List[str] = []
    for value in values or []:
        value = (value or "").strip()
        if value and value not in seen:
            seen.append(value)
    return seen


class JournalEntryUpsert(BaseModel):
    title: str = Field(default="", max_length=255)
    content: str = ""
    primary_mood: str = Field(default="", max_length=64)
    secondary_moods: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)

    @field_validator("secondary_moods", "tags", mode="before")
    @classmethod
    def _none_to_list(cls, value):
        return value or []

    @field_validator("secondary_moods", "tags")
    @classmethod
    def _unique(cls, value: List[str]) -> List[str]:
        return _dedupe(value)


class JournalListFilter(BaseModel):
    page: int = 1
    per_page: Optional[int] = Field(default=None, ge=1)


class JournalSearchFilter(BaseModel):
    title: Optional[str] = None
    mood: Optional[str] = None
    tag: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    page: int = 1
    per_page: Optional[int] = Field(default=None, ge=1)
    include_content: bool = True


class ReportRange(BaseModel):
    date_from: date
    date_to: date


class JournalEntryDisplay(BaseModel):
    id: int
    entry_date: date
    title: str
    primary_mood: str
    secondary_moods: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    word_count: int = 0
    content: Optional[str] = None


class ChartDataPoint(BaseModel):
    label: str
    value: float


class AnalyticsSnapshot(BaseModel):
    current_streak: int = 0
    longest_streak: int = 0
    total_entries: int = 0
    missed_days: int = 0
    mood_distribution: List[ChartDataPoint] = Field(default_factory=list)
    top_moods: List[ChartDataPoint] = Field(default_factory=list)
    tag_usage: List[ChartDataPoint] = Field(default_factory=list)
    word_count_trend: List[ChartDataPoint] = Field(default_factory=list)
    recent_entries: List[JournalEntryDisplay] = Field(default_factory=list)
