"""Tests for course and certificate filtering."""

from course_statistics.creator.schemas.snapshot import Course
from course_statistics.creator.services.filters import (
    filter_certificates_by_courses,
    filter_courses_by_ids,
)
from tests.utils.factories import create_certificate_factory, day


def _courses(*ids: str) -> list[Course]:
    return [Course(id=course_id) for course_id in ids]


class TestFilterCoursesByIds:
    """Tests for filter_courses_by_ids."""

    def test_keeps_matching_courses(self):
        result = filter_courses_by_ids(_courses("1", "2", "3"), ["1", "2", "4"])
        assert [c.id for c in result] == ["1", "2"]

    def test_preserves_course_order_not_id_order(self):
        result = filter_courses_by_ids(_courses("1", "2", "3"), ["3", "1"])
        assert [c.id for c in result] == ["1", "3"]

    def test_empty_ids(self):
        assert filter_courses_by_ids(_courses("1", "2"), []) == []

    def test_empty_courses(self):
        assert filter_courses_by_ids([], ["1"]) == []

    def test_all_ids_returns_original_list(self):
        courses = _courses("3", "1", "2")
        assert filter_courses_by_ids(courses, ["1", "2", "3"]) == courses

    def test_idempotent(self):
        courses = _courses("1", "2", "3", "4")
        ids = ["4", "2", "9"]

        once = filter_courses_by_ids(courses, ids)
        assert filter_courses_by_ids(once, ids) == once

    def test_accepts_any_iterable_of_ids(self):
        result = filter_courses_by_ids(_courses("1", "2"), (i for i in ["2"]))
        assert [c.id for c in result] == ["2"]


class TestFilterCertificatesByCourses:
    """Tests for filter_certificates_by_courses."""

    def test_keeps_certificates_of_given_courses(self):
        certificates = [
            create_certificate_factory(day(11, 1), course_id="a"),
            create_certificate_factory(day(11, 2), course_id="b"),
            create_certificate_factory(day(11, 3), course_id="a"),
        ]

        result = filter_certificates_by_courses(certificates, {"a"})

        assert [c.completionDate for c in result] == [day(11, 1), day(11, 3)]

    def test_certificate_without_course_is_dropped(self):
        certificates = [create_certificate_factory(day(11, 1), course_id="a")]
        certificates.append(certificates[0].model_copy(update={"courseId": None}))

        assert len(filter_certificates_by_courses(certificates, ["a"])) == 1
