"""Statistics schemas for the content creator dashboard."""

from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator

from course_statistics.core.datetime_utils import UTCDatetime
from course_statistics.creator.schemas.snapshot import Certificate, Course

# ============ Metric Results ============


class CountProgress(BaseModel):
    """Growth of each window, as a percentage of the events outside it."""

    lastSevenDays: int = Field(description="Last 7 days vs. everything older")
    lastThirtyDays: int = Field(description="Last 30 days vs. everything older")
    thisMonth: int = Field(description="Month-to-date vs. everything before the 1st")


class AverageProgress(BaseModel):
    """Average rating of each window minus the overall average rating."""

    lastSevenDays: float = Field(description="Rating delta of the last 7 days")
    lastThirtyDays: float = Field(description="Rating delta of the last 30 days")
    thisMonth: float = Field(description="Rating delta of the current month")


class CountMetric(BaseModel):
    """Dashboard metric whose total is a number of events."""

    kind: Literal["count"] = "count"
    total: int = Field(description="Number of events")
    progress: CountProgress


class AverageMetric(BaseModel):
    """Dashboard metric whose total is an average rating."""

    kind: Literal["average"] = "average"
    total: float = Field(description="Average rating, one decimal")
    progress: AverageProgress


class DashboardStatisticsResponse(BaseModel):
    """All dashboard widgets computed against the same moment."""

    generatedAt: UTCDatetime = Field(description="The 'now' every window was derived from")
    students: CountMetric
    courses: CountMetric
    certificates: CountMetric
    feedback: AverageMetric


class CourseFeedbackAverageResponse(BaseModel):
    courseId: str
    total: float = Field(description="Average rating of the course, one decimal")


class CertificateCountResponse(BaseModel):
    total: int = Field(description="Certificates issued for the given courses")


# ============ Requests ============


class CourseIdsMixin(BaseModel):
    courseIds: list[str] | None = Field(
        None,
        validation_alias=AliasChoices("courseIds", "course_ids"),
        description="Restrict the computation to these course ids",
    )

    @field_validator("courseIds", mode="before")
    @classmethod
    def validate_course_ids(cls, v: Any) -> Any:
        """Convert numeric or UUID ids to string."""
        if isinstance(v, list):
            return [str(course_id) for course_id in v]
        return v

    model_config = {"populate_by_name": True}


class CourseStatisticsRequest(CourseIdsMixin):
    """Courses populated with enrollments and feedbacks."""

    courses: list[Course] = Field(default_factory=list)


class CertificateStatisticsRequest(CourseIdsMixin):
    """Flat certificate collection, optionally narrowed by course id."""

    certificates: list[Certificate] = Field(default_factory=list)


class CertificateCountRequest(BaseModel):
    certificates: list[Certificate] = Field(default_factory=list)
    courseIds: list[str] = Field(..., validation_alias=AliasChoices("courseIds", "course_ids"))

    @field_validator("courseIds", mode="before")
    @classmethod
    def validate_course_ids(cls, v: Any) -> Any:
        return [str(course_id) for course_id in v] if isinstance(v, list) else v

    model_config = {"populate_by_name": True}


class DashboardStatisticsRequest(CourseIdsMixin):
    """Everything a creator's dashboard needs in one snapshot."""

    courses: list[Course] = Field(default_factory=list)
    certificates: list[Certificate] = Field(default_factory=list)
