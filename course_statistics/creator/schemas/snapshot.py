"""Schemas for the course snapshot handed over by the data layer.

Records arrive in the data store's camelCase shape (``documentId``,
``course_relations``, nested ``course`` references on certificates), so every
field also accepts its snake_case or legacy key. Timestamps stay nullable
here: a missing date is reported as a DataError when events are flattened,
an unparseable one as soon as the record is read.
"""

from datetime import datetime
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from course_statistics.core.datetime_utils import parse_timestamp

SNAPSHOT_CONFIG = ConfigDict(from_attributes=True, populate_by_name=True, frozen=True)


def _parse_optional_timestamp(v: Any, info: ValidationInfo) -> datetime | None:
    if v is None:
        return None
    return parse_timestamp(v, field=info.field_name)


class EnrollmentRelation(BaseModel):
    """One student enrolling in one course."""

    enrollmentDate: datetime | None = Field(
        None, validation_alias=AliasChoices("enrollmentDate", "enrollment_date")
    )

    @field_validator("enrollmentDate", mode="before")
    @classmethod
    def parse_dates(cls, v: Any, info: ValidationInfo) -> datetime | None:
        return _parse_optional_timestamp(v, info)

    model_config = SNAPSHOT_CONFIG


class Feedback(BaseModel):
    """A student's rating of a course. Ratings are expected in 1..5 but not enforced."""

    rating: int
    createdAt: datetime | None = Field(
        None, validation_alias=AliasChoices("createdAt", "created_at")
    )

    @field_validator("createdAt", mode="before")
    @classmethod
    def parse_dates(cls, v: Any, info: ValidationInfo) -> datetime | None:
        return _parse_optional_timestamp(v, info)

    model_config = SNAPSHOT_CONFIG


class Course(BaseModel):
    """A content creator's course with its enrollment relations and feedback populated."""

    id: str = Field(..., validation_alias=AliasChoices("id", "documentId", "document_id"))
    createdAt: datetime | None = Field(
        None, validation_alias=AliasChoices("createdAt", "created_at")
    )
    enrollments: list[EnrollmentRelation] = Field(
        default_factory=list,
        validation_alias=AliasChoices("enrollments", "course_relations", "courseRelations"),
    )
    feedbacks: list[Feedback] = Field(default_factory=list)

    @field_validator("createdAt", mode="before")
    @classmethod
    def parse_dates(cls, v: Any, info: ValidationInfo) -> datetime | None:
        return _parse_optional_timestamp(v, info)

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: Any) -> str:
        """Convert numeric or UUID ids to string."""
        return str(v)

    @field_validator("enrollments", "feedbacks", mode="before")
    @classmethod
    def validate_relations(cls, v: Any) -> Any:
        """Unpopulated relations come back as null."""
        return [] if v is None else v

    model_config = SNAPSHOT_CONFIG


class Certificate(BaseModel):
    """A course completion certificate, associated to its course by id."""

    courseId: str | None = Field(None, validation_alias=AliasChoices("courseId", "course_id"))
    completionDate: datetime | None = Field(
        None, validation_alias=AliasChoices("completionDate", "completion_date")
    )

    @field_validator("completionDate", mode="before")
    @classmethod
    def parse_dates(cls, v: Any, info: ValidationInfo) -> datetime | None:
        return _parse_optional_timestamp(v, info)

    @model_validator(mode="before")
    @classmethod
    def lift_course_reference(cls, data: Any) -> Any:
        """Accept a populated ``course`` relation in place of ``courseId``."""
        if not isinstance(data, dict) or "course" not in data:
            return data
        if data.get("courseId") is not None or data.get("course_id") is not None:
            return data
        course = data["course"]
        if isinstance(course, dict):
            course = course.get("documentId") or course.get("id")
        return {**data, "courseId": course}

    @field_validator("courseId", mode="before")
    @classmethod
    def validate_course_id(cls, v: Any) -> str | None:
        if v is None:
            return None
        return str(v)

    model_config = SNAPSHOT_CONFIG
