"""Course catalogue statistics service."""

from collections.abc import Sequence
from datetime import datetime

from course_statistics.creator.schemas.snapshot import Course
from course_statistics.creator.schemas.statistics import CountMetric
from course_statistics.creator.services.statistics.base import (
    build_count_metric,
    collect_timestamps,
    get_window_boundaries,
    resolve_now,
)


class CourseStatisticsService:
    """Service for the number of courses a creator has published."""

    @staticmethod
    def get_stats(courses: Sequence[Course], now: datetime | None = None) -> CountMetric:
        """Count courses by their creation date.

        Args:
            courses: The creator's courses.
            now: Reference moment. Sampled from the clock when omitted.

        Returns:
            CountMetric with the number of courses.
        """
        windows = get_window_boundaries(resolve_now(now))
        return build_count_metric(collect_timestamps(courses, "createdAt"), windows)
