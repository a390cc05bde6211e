from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from config import get_settings

PERIOD_SLUGS = ("today", "month", "all", "custom")
DEFAULT_PERIOD = "month"


@dataclass(frozen=True)
class Period:
    slug: str
    start: Optional[date]
    end: Optional[date]

    @property
    def is_bounded(self) -> bool:
        return self.start is not None and self.end is not None


def local_today() -> date:
    settings = get_settings()
    tz = ZoneInfo(settings.timezone)
    return datetime.now(tz).date()


def month_bounds(day: date) -> tuple[date, date]:
    first = day.replace(day=1)
    if first.month == 12:
        next_month = first.replace(year=first.year + 1, month=1)
    else:
        next_month = first.replace(month=first.month + 1)
    return first, next_month - date.resolution


def resolve_period(
    period: Optional[str],
    custom_date: Optional[str],
    *,
    today: Optional[date] = None,
) -> Period:
    slug = (period or DEFAULT_PERIOD).strip().lower()
    if slug == "all":
        return Period("all", None, None)
    if slug == "custom":
        if not custom_date:
            raise ValueError("Custom period requires a date")
        day = date.fromisoformat(custom_date.strip())
        return Period("custom", day, day)
    if slug not in PERIOD_SLUGS:
        raise ValueError(f"Unknown period: {period}")

    today = today or local_today()
    if slug == "today":
        return Period("today", today, today)
    start, end = month_bounds(today)
    return Period("month", start, end)
