"""Log Ingest - Field parser"""

import logging
import re
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .constants import (
    COMMENT_MARKER, FIELD_LAYOUT, HTTP_STATUS_CODES, INT32_RANGE, MIN_FIELDS,
    SEPARATOR, TIMESTAMP_FORMATS, UINT32_RANGE,
)
from .errors import FormatError
from .models import LogRecord

logger = logging.getLogger(__name__)

INTEGER_RE = re.compile(r'[+-]?[0-9]+')


def to_integer(value: str, field: str, bounds: Tuple[int, int],
               line_number: Optional[int] = None) -> int:
    """Strictly convert ``value`` to an integer within ``bounds``.

    Raises FormatError for anything other than an optional sign followed by
    ASCII digits, or for a value outside the inclusive range.
    """
    if not INTEGER_RE.fullmatch(value):
        raise FormatError(field, value, line_number, 'not an integer')
    number = int(value)
    low, high = bounds
    if not low <= number <= high:
        raise FormatError(field, value, line_number, f'outside {low}..{high}')
    return number


def to_int(value: str, field: str, line_number: Optional[int] = None) -> int:
    return to_integer(value, field, INT32_RANGE, line_number)


def to_uint(value: str, field: str, line_number: Optional[int] = None) -> int:
    return to_integer(value, field, UINT32_RANGE, line_number)


def to_status(value: str, field: str, line_number: Optional[int] = None) -> int:
    """Numeric HTTP status, restricted to the closed HTTP_STATUS_CODES table.

    Reason-phrase names such as "OK" and undefined codes are rejected.
    """
    if not INTEGER_RE.fullmatch(value):
        raise FormatError(field, value, line_number, 'not an HTTP status code')
    code = int(value)
    if code not in HTTP_STATUS_CODES:
        raise FormatError(field, value, line_number, 'unknown HTTP status code')
    return code


def to_str(value: str, field: str, line_number: Optional[int] = None) -> str:
    return value


def parse_timestamp(date: str, time: str) -> datetime:
    """Combine the date and time fields, falling back to ``datetime.min``"""
    text = f"{date} {time}"
    for fmt in TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    logger.debug("Unparseable timestamp %r, using default", text)
    return datetime.min


CONVERTERS: Dict[str, Callable[..., object]] = {
    'str': to_str,
    'int': to_int,
    'uint': to_uint,
    'status': to_status,
}


def parse_record(fields: Sequence[str], line_number: Optional[int] = None) -> LogRecord:
    """Map the split fields of one log line onto a LogRecord.

    ``fields`` must hold at least MIN_FIELDS entries; extra fields are ignored.
    """
    if len(fields) < MIN_FIELDS:
        raise ValueError(f"Expected at least {MIN_FIELDS} fields, got {len(fields)}")

    values = {}
    for index, attribute, kind in FIELD_LAYOUT:
        if kind == 'datetime':
            values[attribute] = parse_timestamp(fields[index], fields[index + 1])
        else:
            values[attribute] = CONVERTERS[kind](fields[index], attribute, line_number)
    return LogRecord(**values)


def parse_lines(lines: Iterable[str], separator: str = SEPARATOR,
                comment_marker: str = COMMENT_MARKER) -> List[LogRecord]:
    """Parse raw log lines into records.

    Comment lines and lines with too few fields are dropped. A field that
    fails numeric or status conversion raises FormatError and aborts the
    whole parse.
    """
    records = []
    dropped = 0
    for line_number, line in enumerate(lines, 1):
        if line.startswith(comment_marker):
            continue
        fields = line.split(separator)
        if len(fields) < MIN_FIELDS:
            dropped += 1
            logger.debug("Dropping line %d: %d fields", line_number, len(fields))
            continue
        records.append(parse_record(fields, line_number))

    if dropped:
        logger.debug("Dropped %d short lines", dropped)
    return records
