"""Student enrollment statistics service."""

import logging
from collections.abc import Sequence
from datetime import datetime
from itertools import chain

from course_statistics.creator.schemas.snapshot import Course
from course_statistics.creator.schemas.statistics import CountMetric
from course_statistics.creator.services.statistics.base import (
    build_count_metric,
    collect_timestamps,
    get_window_boundaries,
    resolve_now,
)

logger = logging.getLogger(__name__)


class StudentStatisticsService:
    """Service for enrollment counts across a creator's courses."""

    @staticmethod
    def get_stats(courses: Sequence[Course], now: datetime | None = None) -> CountMetric:
        """Count enrollments and their growth per window.

        Every enrollment relation counts once, so a student enrolled in two
        courses contributes two events.

        Args:
            courses: Courses with their enrollment relations populated.
            now: Reference moment. Sampled from the clock when omitted.

        Returns:
            CountMetric with the number of enrollments.

        Raises:
            DataError: An enrollment has no enrollment date.
        """
        windows = get_window_boundaries(resolve_now(now))
        enrollments = chain.from_iterable(course.enrollments for course in courses)
        events = collect_timestamps(enrollments, "enrollmentDate")

        metric = build_count_metric(events, windows)
        logger.info("Student statistics computed: %d enrollments", metric.total)
        return metric
