from datetime import datetime

from course_statistics.core.datetime_utils import utc_now


def get_now() -> datetime:
    """Sample the clock once per request; every window of the request uses it."""
    return utc_now()
