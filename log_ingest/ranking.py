"""Log Ingest - Octet ranking"""

from typing import Sequence

from .constants import OCTET_WIDTH, UINT64_RANGE
from .errors import FormatError


def octet_rank(octets: Sequence[str]) -> int:
    """Encode dotted-quad segments into one sortable integer.

    Each segment is left-padded with zeros to three digits and the segments
    are concatenated, so "10.0.0.1" becomes 010000000001. Segments longer
    than three digits are kept as they are and break the ordering.
    """
    combined = ''.join(octet.rjust(OCTET_WIDTH, '0') if octet else '' for octet in octets)
    if not combined.isascii() or not combined.isdigit():
        raise FormatError('octets', '.'.join(octets), reason='not numeric')
    rank = int(combined)
    if rank > UINT64_RANGE[1]:
        raise FormatError('octets', '.'.join(octets), reason='rank overflows 64 bits')
    return rank


def rank_ip(ip: str) -> int:
    return octet_rank(ip.split('.'))
