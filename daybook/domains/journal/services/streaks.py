"""Writing streaks over a user's entry dates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Union

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class StreakSummary:
    current: int = 0
    longest: int = 0


def _as_date(value: Union[date, datetime]) -> date:
    return value.date() if isinstance(value, datetime) else value


def calculate_streaks(
    dates: Iterable[Union[date, datetime]],
    today: Optional[date] = None,
) -> StreakSummary:
    """Compute current and longest runs of consecutive calendar days.

    Duplicates are ignored. The current streak only counts when the latest
    date is today or yesterday; it is the run that ends on that date.
    """
    days: List[date] = sorted({_as_date(d) for d in dates})
    if not days:
        return StreakSummary(0, 0)

    longest = 1
    run = 1
    for prev, day in zip(days, days[1:]):
        if day - prev == ONE_DAY:
            run += 1
            longest = max(longest, run)
        else:
            run = 1

    today = today or date.today()
    current = 0
    if days[-1] in (today, today - ONE_DAY):
        current = 1
        for idx in range(len(days) - 1, 0, -1):
            if days[idx] - days[idx - 1] != ONE_DAY:
                break
            current += 1

    return StreakSummary(current=current, longest=longest)
