"""Log Ingest package"""

from .constants import VERSION, FIELD_LAYOUT, HTTP_STATUS_CODES
from .errors import FormatError
from .models import LogRecord, AggregateResult
from .parser import parse_lines, parse_record
from .ranking import octet_rank, rank_ip
from .aggregator import aggregate
from .report import build_rows, render_csv, write_report, print_report
from .ingestor import LogIngestor, find_base_directory, read_log_lines

__all__ = [
    'VERSION', 'FIELD_LAYOUT', 'HTTP_STATUS_CODES', 'FormatError',
    'LogRecord', 'AggregateResult', 'parse_lines', 'parse_record',
    'octet_rank', 'rank_ip', 'aggregate', 'build_rows', 'render_csv',
    'write_report', 'print_report', 'LogIngestor', 'find_base_directory',
    'read_log_lines',
]
