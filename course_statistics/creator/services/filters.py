from collections.abc import Iterable

from course_statistics.creator.schemas.snapshot import Certificate, Course


def filter_courses_by_ids(courses: Iterable[Course], ids: Iterable[str]) -> list[Course]:
    """Keep the courses whose id is in ``ids``, in the order of ``courses``."""
    wanted = set(ids)
    return [course for course in courses if course.id in wanted]


def filter_certificates_by_courses(
    certificates: Iterable[Certificate], course_ids: Iterable[str]
) -> list[Certificate]:
    """Keep the certificates issued for one of ``course_ids``, in input order."""
    wanted = set(course_ids)
    return [certificate for certificate in certificates if certificate.courseId in wanted]
