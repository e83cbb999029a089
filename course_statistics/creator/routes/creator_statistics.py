"""Statistics routes for the content creator dashboard.

The caller posts the snapshot it already fetched from the content store;
nothing here reads or writes storage.
"""

from datetime import datetime

from fastapi import APIRouter, Depends

from course_statistics.core.exceptions import NotFoundError
from course_statistics.core.schemas import ErrorResponse
from course_statistics.creator.dependencies import get_now
from course_statistics.creator.schemas.snapshot import Course
from course_statistics.creator.schemas.statistics import (
    AverageMetric,
    CertificateCountRequest,
    CertificateCountResponse,
    CertificateStatisticsRequest,
    CountMetric,
    CourseFeedbackAverageResponse,
    CourseStatisticsRequest,
    DashboardStatisticsRequest,
    DashboardStatisticsResponse,
)
from course_statistics.creator.services.filters import filter_courses_by_ids
from course_statistics.creator.services.statistics import (
    CertificateStatisticsService,
    CourseStatisticsService,
    DashboardService,
    FeedbackStatisticsService,
    StudentStatisticsService,
)

router = APIRouter(
    prefix="/course-statistics",
    tags=["course-statistics"],
    responses={422: {"model": ErrorResponse, "description": "Invalid timestamp in snapshot"}},
)


def _narrow(courses: list[Course], course_ids: list[str] | None) -> list[Course]:
    if course_ids is None:
        return courses
    return filter_courses_by_ids(courses, course_ids)


@router.post("/dashboard", response_model=DashboardStatisticsResponse)
async def get_dashboard_statistics(
    payload: DashboardStatisticsRequest,
    now: datetime = Depends(get_now),
) -> DashboardStatisticsResponse:
    """
    Get every dashboard widget for a content creator.

    Returns student, course, certificate and feedback metrics computed against
    the same moment. Certificates are narrowed to the (optionally filtered)
    courses.
    """
    courses = _narrow(payload.courses, payload.courseIds)
    return DashboardService.get_summary(courses, payload.certificates, now)


@router.post("/students", response_model=CountMetric)
async def get_student_statistics(
    payload: CourseStatisticsRequest,
    now: datetime = Depends(get_now),
) -> CountMetric:
    """Get enrollment count and growth per window."""
    return StudentStatisticsService.get_stats(_narrow(payload.courses, payload.courseIds), now)


@router.post("/courses", response_model=CountMetric)
async def get_course_statistics(
    payload: CourseStatisticsRequest,
    now: datetime = Depends(get_now),
) -> CountMetric:
    """Get course count and growth per window."""
    return CourseStatisticsService.get_stats(_narrow(payload.courses, payload.courseIds), now)


@router.post("/certificates", response_model=CountMetric)
async def get_certificate_statistics(
    payload: CertificateStatisticsRequest,
    now: datetime = Depends(get_now),
) -> CountMetric:
    """Get certificate count and growth per window."""
    return CertificateStatisticsService.get_stats(
        payload.certificates, now, course_ids=payload.courseIds
    )


@router.post("/certificates/total", response_model=CertificateCountResponse)
async def get_certificate_total(payload: CertificateCountRequest) -> CertificateCountResponse:
    """Get the number of certificates issued for a creator's courses."""
    total = CertificateStatisticsService.count_for_courses(payload.certificates, payload.courseIds)
    return CertificateCountResponse(total=total)


@router.post("/feedback", response_model=AverageMetric)
async def get_feedback_statistics(
    payload: CourseStatisticsRequest,
    now: datetime = Depends(get_now),
) -> AverageMetric:
    """Get average rating and the rating delta of each window."""
    return FeedbackStatisticsService.get_stats(_narrow(payload.courses, payload.courseIds), now)


@router.post("/courses/{course_id}/average", response_model=CourseFeedbackAverageResponse)
async def get_course_feedback_average(
    course_id: str,
    payload: CourseStatisticsRequest,
) -> CourseFeedbackAverageResponse:
    """Get the average feedback rating of a single course."""
    matches = filter_courses_by_ids(payload.courses, [course_id])
    if not matches:
        raise NotFoundError(f"Course {course_id} not found", resource="course")
    return CourseFeedbackAverageResponse(
        courseId=course_id,
        total=FeedbackStatisticsService.get_course_average(matches[0]),
    )
