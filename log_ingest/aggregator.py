"""Log Ingest - Per-IP aggregation"""

import logging
from collections import Counter
from typing import Iterable, List

from .models import AggregateResult, LogRecord
from .ranking import rank_ip

logger = logging.getLogger(__name__)


def aggregate(records: Iterable[LogRecord]) -> List[AggregateResult]:
    """Count requests per client IP, busiest first.

    Ties on count are broken by octet rank, highest address first.
    """
    ip_counts = Counter(record.client_ip for record in records)

    results = [
        AggregateResult(ip_address=ip, count=count, octet_rank=rank_ip(ip))
        for ip, count in ip_counts.items()
    ]
    results.sort(key=lambda r: (r.count, r.octet_rank), reverse=True)

    logger.debug("Aggregated %d requests into %d IPs", sum(ip_counts.values()), len(results))
    return results
