"""Statistics services for the content creator dashboard.

Split into one service per dashboard widget:
- base: Window boundaries, counting and growth calculation utilities
- student_service: Enrollment counts
- course_service: Course counts
- certificate_service: Certificate counts
- feedback_service: Average ratings
- dashboard_service: All widgets against one moment
"""

from course_statistics.creator.services.statistics.base import (
    TimeWindows,
    calculate_growth_percent,
    count_after,
    get_window_boundaries,
)
from course_statistics.creator.services.statistics.certificate_service import (
    CertificateStatisticsService,
)
from course_statistics.creator.services.statistics.course_service import CourseStatisticsService
from course_statistics.creator.services.statistics.dashboard_service import DashboardService
from course_statistics.creator.services.statistics.feedback_service import (
    FeedbackStatisticsService,
)
from course_statistics.creator.services.statistics.student_service import (
    StudentStatisticsService,
)

__all__ = [
    # Base utilities
    "TimeWindows",
    "get_window_boundaries",
    "count_after",
    "calculate_growth_percent",
    # Services
    "StudentStatisticsService",
    "CourseStatisticsService",
    "CertificateStatisticsService",
    "FeedbackStatisticsService",
    "DashboardService",
]
