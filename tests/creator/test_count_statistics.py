"""Tests for the student, course and certificate statistics services."""

from unittest.mock import patch

import pytest

from course_statistics.core.exceptions import DataError
from course_statistics.creator.schemas.snapshot import Course, EnrollmentRelation
from course_statistics.creator.services.statistics import (
    CertificateStatisticsService,
    CourseStatisticsService,
    StudentStatisticsService,
)
from tests.utils.factories import create_certificate_factory, create_course_factory, day

# ─────────────────────────────────────────────────────────────────────────────
# Students
# ─────────────────────────────────────────────────────────────────────────────


class TestStudentStatistics:
    """Tests for StudentStatisticsService.get_stats."""

    def test_creator_enrollments(self, creator_courses, now):
        result = StudentStatisticsService.get_stats(creator_courses, now)

        assert result.kind == "count"
        assert result.total == 12
        assert result.progress.lastThirtyDays == 200
        assert result.progress.lastSevenDays == 20
        assert result.progress.thisMonth == 71

    def test_no_courses(self, now):
        result = StudentStatisticsService.get_stats([], now)

        assert result.total == 0
        assert result.progress.lastSevenDays == 0
        assert result.progress.lastThirtyDays == 0
        assert result.progress.thisMonth == 0

    def test_courses_without_enrollments(self, now):
        courses = [create_course_factory(created_at=day(9, 1)) for _ in range(3)]
        assert StudentStatisticsService.get_stats(courses, now).total == 0

    def test_all_enrollments_inside_window(self, now):
        course = create_course_factory(enrollment_dates=[day(11, 10), day(11, 12)])
        result = StudentStatisticsService.get_stats([course], now)

        assert result.total == 2
        assert result.progress.lastSevenDays == 0
        assert result.progress.lastThirtyDays == 0
        assert result.progress.thisMonth == 0

    def test_missing_enrollment_date_raises(self, now):
        course = Course(
            id="course1",
            createdAt=day(9, 1),
            enrollments=[EnrollmentRelation(enrollmentDate=day(11, 1)), EnrollmentRelation()],
        )

        with pytest.raises(DataError) as exc_info:
            StudentStatisticsService.get_stats([course], now)

        assert exc_info.value.details["field"] == "enrollmentDate"
        assert exc_info.value.details["index"] == 1

    def test_clock_sampled_per_call(self, creator_courses):
        """Without an explicit now, each call reads the clock again."""
        with patch(
            "course_statistics.creator.services.statistics.base.utc_now",
            side_effect=[day(11, 15), day(12, 20)],
        ):
            first = StudentStatisticsService.get_stats(creator_courses)
            second = StudentStatisticsService.get_stats(creator_courses)

        assert first.progress.lastSevenDays == 20
        assert second.progress.lastSevenDays == 0
        assert second.progress.thisMonth == 0


# ─────────────────────────────────────────────────────────────────────────────
# Courses
# ─────────────────────────────────────────────────────────────────────────────


class TestCourseStatistics:
    """Tests for CourseStatisticsService.get_stats."""

    def test_creator_courses(self, creator_courses, now):
        result = CourseStatisticsService.get_stats(creator_courses, now)

        assert result.total == 3
        assert result.progress.lastSevenDays == 0
        assert result.progress.lastThirtyDays == 50
        assert result.progress.thisMonth == 0

    def test_missing_creation_date_raises(self, now):
        courses = [Course(id="course1", createdAt=None)]

        with pytest.raises(DataError) as exc_info:
            CourseStatisticsService.get_stats(courses, now)

        assert exc_info.value.details == {"field": "createdAt", "index": 0}


# ─────────────────────────────────────────────────────────────────────────────
# Certificates
# ─────────────────────────────────────────────────────────────────────────────


class TestCertificateStatistics:
    """Tests for CertificateStatisticsService."""

    def test_creator_certificates(self, creator_certificates, now):
        result = CertificateStatisticsService.get_stats(creator_certificates, now)

        assert result.total == 6
        assert result.progress.lastThirtyDays == 200
        assert result.progress.lastSevenDays == 50
        assert result.progress.thisMonth == 100

    def test_course_ids_drop_foreign_certificates(self, creator_certificates, now):
        certificates = [
            *creator_certificates,
            create_certificate_factory(day(11, 14), course_id="someone-elses-course"),
        ]

        result = CertificateStatisticsService.get_stats(
            certificates, now, course_ids=["course1", "course2", "course3"]
        )

        assert result.total == 6
        assert result.progress.lastSevenDays == 50

    def test_course_ids_subset(self, creator_certificates, now):
        result = CertificateStatisticsService.get_stats(
            creator_certificates, now, course_ids=["course1", "course2"]
        )

        # Oct 5, Oct 10, Oct 30, Nov 5
        assert result.total == 4
        assert result.progress.lastSevenDays == 0
        assert result.progress.lastThirtyDays == 100
        assert result.progress.thisMonth == 33

    def test_empty_course_ids(self, creator_certificates, now):
        result = CertificateStatisticsService.get_stats(creator_certificates, now, course_ids=[])
        assert result.total == 0

    def test_count_for_courses(self, creator_certificates):
        count = CertificateStatisticsService.count_for_courses

        assert count(creator_certificates, ["course3"]) == 2
        assert count(creator_certificates, []) == 0
