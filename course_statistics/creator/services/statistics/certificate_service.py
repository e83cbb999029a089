"""Certificate statistics service."""

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime

from course_statistics.creator.schemas.snapshot import Certificate
from course_statistics.creator.schemas.statistics import CountMetric
from course_statistics.creator.services.filters import filter_certificates_by_courses
from course_statistics.creator.services.statistics.base import (
    build_count_metric,
    collect_timestamps,
    get_window_boundaries,
    resolve_now,
)

logger = logging.getLogger(__name__)


class CertificateStatisticsService:
    """Service for certificates issued on a creator's courses."""

    @staticmethod
    def get_stats(
        certificates: Sequence[Certificate],
        now: datetime | None = None,
        course_ids: Iterable[str] | None = None,
    ) -> CountMetric:
        """Count certificates by completion date.

        Args:
            certificates: Certificates, possibly spanning other creators' courses.
            now: Reference moment. Sampled from the clock when omitted.
            course_ids: The creator's course ids. When given, certificates of
                other courses are dropped first; when None the collection is
                taken as already filtered.

        Returns:
            CountMetric with the number of certificates.

        Raises:
            DataError: A certificate has no completion date.
        """
        windows = get_window_boundaries(resolve_now(now))
        if course_ids is not None:
            certificates = filter_certificates_by_courses(certificates, course_ids)

        metric = build_count_metric(collect_timestamps(certificates, "completionDate"), windows)
        logger.info("Certificate statistics computed: %d certificates", metric.total)
        return metric

    @staticmethod
    def count_for_courses(certificates: Iterable[Certificate], course_ids: Iterable[str]) -> int:
        """Total certificates issued for the given courses."""
        return len(filter_certificates_by_courses(certificates, course_ids))
