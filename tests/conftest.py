from pathlib import Path

from dotenv import load_dotenv

env_file = Path(__file__).parent.parent / ".env.test"
load_dotenv(env_file)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from course_statistics.creator.dependencies import get_now  # noqa: E402
from course_statistics.main import app  # noqa: E402
from tests.utils.factories import (  # noqa: E402
    create_certificate_factory,
    create_course_factory,
    day,
)


@pytest.fixture
def now():
    return day(11, 15)


@pytest.fixture
def creator_courses():
    """Three courses of one content creator, as seen on 2025-11-15."""
    return [
        create_course_factory(
            course_id="course1",
            created_at=day(10, 18),
            enrollment_dates=[day(11, 13), day(11, 14), day(10, 18), day(11, 2)],
            feedbacks=[(5, day(10, 20)), (3, day(11, 15)), (3, day(11, 15)), (3, day(11, 15))],
        ),
        create_course_factory(
            course_id="course2",
            created_at=day(9, 2),
            enrollment_dates=[day(9, 3), day(9, 3), day(10, 18), day(11, 2)],
            feedbacks=[(5, day(10, 20)), (5, day(9, 4)), (4, day(11, 15)), (4, day(11, 15))],
        ),
        create_course_factory(
            course_id="course3",
            created_at=day(9, 2),
            enrollment_dates=[day(9, 3), day(9, 3), day(10, 18), day(11, 2)],
            feedbacks=[(3, day(10, 20)), (2, day(9, 4)), (3, day(11, 15)), (3, day(11, 15))],
        ),
    ]


@pytest.fixture
def creator_certificates():
    return [
        create_certificate_factory(day(10, 5), course_id="course1"),
        create_certificate_factory(day(10, 10), course_id="course1"),
        create_certificate_factory(day(10, 30), course_id="course2"),
        create_certificate_factory(day(11, 5), course_id="course2"),
        create_certificate_factory(day(11, 10), course_id="course3"),
        create_certificate_factory(day(11, 15), course_id="course3"),
    ]


@pytest.fixture
async def test_app(now):
    app.dependency_overrides[get_now] = lambda: now

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
async def test_client(test_app):
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        yield client
