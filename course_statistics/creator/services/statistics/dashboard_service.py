"""Dashboard statistics service."""

import logging
from collections.abc import Sequence
from datetime import datetime

from course_statistics.creator.schemas.snapshot import Certificate, Course
from course_statistics.creator.schemas.statistics import DashboardStatisticsResponse
from course_statistics.creator.services.statistics.base import resolve_now
from course_statistics.creator.services.statistics.certificate_service import (
    CertificateStatisticsService,
)
from course_statistics.creator.services.statistics.course_service import CourseStatisticsService
from course_statistics.creator.services.statistics.feedback_service import (
    FeedbackStatisticsService,
)
from course_statistics.creator.services.statistics.student_service import (
    StudentStatisticsService,
)

logger = logging.getLogger(__name__)


class DashboardService:
    """Service for the content creator dashboard summary."""

    @staticmethod
    def get_summary(
        courses: Sequence[Course],
        certificates: Sequence[Certificate],
        now: datetime | None = None,
    ) -> DashboardStatisticsResponse:
        """Compute every dashboard widget against a single ``now``.

        Certificates are narrowed to the given courses, so the caller can pass
        an unfiltered certificate collection.

        Args:
            courses: The creator's courses with enrollments and feedbacks populated.
            certificates: Certificate collection, filtered or not.
            now: Reference moment. Sampled from the clock once when omitted.

        Returns:
            DashboardStatisticsResponse with student, course, certificate and
            feedback metrics.
        """
        now = resolve_now(now)
        course_ids = [course.id for course in courses]

        summary = DashboardStatisticsResponse(
            generatedAt=now,
            students=StudentStatisticsService.get_stats(courses, now),
            courses=CourseStatisticsService.get_stats(courses, now),
            certificates=CertificateStatisticsService.get_stats(
                certificates, now, course_ids=course_ids
            ),
            feedback=FeedbackStatisticsService.get_stats(courses, now),
        )
        logger.info(
            "Dashboard statistics computed for %d courses at %s", len(courses), now.isoformat()
        )
        return summary
