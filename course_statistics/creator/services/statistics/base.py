"""Window boundaries and calculation utilities shared by statistics services."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from course_statistics.core.datetime_utils import ensure_utc, parse_timestamp, utc_now
from course_statistics.core.exceptions import DataError
from course_statistics.creator.schemas.statistics import CountMetric, CountProgress

logger = logging.getLogger(__name__)

SEVEN_DAYS = timedelta(days=7)
THIRTY_DAYS = timedelta(days=30)


@dataclass(frozen=True)
class TimeWindows:
    """Cutoffs of the three dashboard windows, all derived from one ``now``."""

    now: datetime
    seven_day_cutoff: datetime
    thirty_day_cutoff: datetime
    month_start_cutoff: datetime

    def cutoffs(self) -> dict[str, datetime]:
        """Cutoff per progress key, in the order the dashboard shows them."""
        return {
            "lastSevenDays": self.seven_day_cutoff,
            "lastThirtyDays": self.thirty_day_cutoff,
            "thisMonth": self.month_start_cutoff,
        }


def resolve_now(now: datetime | None = None) -> datetime:
    """Return ``now`` as an aware datetime, sampling the clock if not given."""
    return utc_now() if now is None else ensure_utc(now)


def get_window_boundaries(now: datetime) -> TimeWindows:
    """Derive the 7-day, 30-day and month-to-date cutoffs.

    Args:
        now: Reference moment. Naive values are taken to be UTC.

    Returns:
        TimeWindows. The 7 and 30 day cutoffs are exact durations (168h and
        720h); the month cutoff is midnight of the 1st in ``now``'s timezone.
    """
    now = ensure_utc(now)
    return TimeWindows(
        now=now,
        seven_day_cutoff=now - SEVEN_DAYS,
        thirty_day_cutoff=now - THIRTY_DAYS,
        month_start_cutoff=now.replace(day=1, hour=0, minute=0, second=0, microsecond=0),
    )


def count_after(events: Iterable[datetime], cutoff: datetime) -> int:
    """Count events strictly newer than ``cutoff``."""
    return sum(1 for event in events if event > cutoff)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ``ndigits`` decimals with ties going away from zero."""
    quantum = Decimal(1).scaleb(-ndigits)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    # normalize -0.0
    return float(rounded) or 0.0


def calculate_growth_percent(window_count: int, total_count: int) -> int:
    """Express a window count as a percentage of the events outside the window.

    Args:
        window_count: Events inside the window.
        total_count: All events, inside and outside the window.

    Returns:
        ``round(window / (total - window) * 100)``.
        Returns 0 when nothing lies outside the window, including when
        there are no events at all.
    """
    baseline = total_count - window_count
    if baseline == 0:
        if window_count > 0:
            logger.debug(
                "Degenerate growth ratio: all %d events fall inside the window", window_count
            )
        return 0
    return int(round_half_up(window_count / baseline * 100))


def average(values: Sequence[float]) -> float | None:
    """Arithmetic mean, or None for an empty sequence."""
    if not values:
        return None
    return sum(values) / len(values)


def collect_timestamps(records: Iterable[Any], field: str) -> list[datetime]:
    """Flatten one timestamp field of ``records`` into an event sequence.

    Raises:
        DataError: A record has no value for ``field`` or it cannot be parsed.
    """
    timestamps = []
    for index, record in enumerate(records):
        value = getattr(record, field, None)
        if value is None:
            raise DataError(f"Missing {field}", field=field, index=index)
        timestamps.append(parse_timestamp(value, field=field))
    return timestamps


def build_count_metric(events: Sequence[datetime], windows: TimeWindows) -> CountMetric:
    """Assemble a count metric: total events plus growth of each window.

    Args:
        events: Flattened event timestamps.
        windows: Window cutoffs captured once for this computation.

    Returns:
        CountMetric for the dashboard.
    """
    total = len(events)
    progress = {
        key: calculate_growth_percent(count_after(events, cutoff), total)
        for key, cutoff in windows.cutoffs().items()
    }
    return CountMetric(total=total, progress=CountProgress(**progress))
