"""Feedback rating statistics service."""

import logging
from collections.abc import Sequence
from datetime import datetime
from itertools import chain

from course_statistics.creator.schemas.snapshot import Course
from course_statistics.creator.schemas.statistics import AverageMetric, AverageProgress
from course_statistics.creator.services.statistics.base import (
    average,
    collect_timestamps,
    get_window_boundaries,
    resolve_now,
    round_half_up,
)

logger = logging.getLogger(__name__)


class FeedbackStatisticsService:
    """Service for average feedback ratings."""

    @staticmethod
    def get_stats(courses: Sequence[Course], now: datetime | None = None) -> AverageMetric:
        """Average rating across all feedback, and how recent feedback compares.

        Ratings are pooled across courses without per-course weighting. For
        each window the progress value is the average rating of feedback
        created after the cutoff minus the overall average, rounded to one
        decimal after subtracting. A window without feedback reports 0.0.

        Args:
            courses: Courses with their feedbacks populated.
            now: Reference moment. Sampled from the clock when omitted.

        Returns:
            AverageMetric; total is 0.0 when there is no feedback at all.

        Raises:
            DataError: A feedback has no creation date.
        """
        windows = get_window_boundaries(resolve_now(now))
        feedbacks = list(chain.from_iterable(course.feedbacks for course in courses))
        created = collect_timestamps(feedbacks, "createdAt")
        ratings = [feedback.rating for feedback in feedbacks]

        overall = average(ratings)
        if overall is None:
            return AverageMetric(
                total=0.0,
                progress=AverageProgress(lastSevenDays=0.0, lastThirtyDays=0.0, thisMonth=0.0),
            )

        progress = {}
        for key, cutoff in windows.cutoffs().items():
            window_average = average(
                [rating for rating, at in zip(ratings, created, strict=True) if at > cutoff]
            )
            progress[key] = (
                0.0 if window_average is None else round_half_up(window_average - overall, 1)
            )

        total = round_half_up(overall, 1)
        logger.info("Feedback statistics computed: %d ratings, average %.1f", len(ratings), total)
        return AverageMetric(total=total, progress=AverageProgress(**progress))

    @staticmethod
    def get_course_average(course: Course) -> float:
        """Average rating of a single course, one decimal; 0.0 without feedback."""
        overall = average([feedback.rating for feedback in course.feedbacks])
        return 0.0 if overall is None else round_half_up(overall, 1)
