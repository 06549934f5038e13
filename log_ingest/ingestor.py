"""Log Ingest - Pipeline driver"""

import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from .aggregator import aggregate
from .constants import COMMENT_MARKER, INPUT_DIR, SEPARATOR
from .models import AggregateResult, LogRecord
from .parser import parse_lines
from .report import write_report

logger = logging.getLogger(__name__)


def find_base_directory(start, marker: str = INPUT_DIR) -> Optional[Path]:
    """Walk up from ``start`` to the first directory holding ``marker``"""
    start = Path(start).resolve()
    for directory in [start, *start.parents]:
        if (directory / marker).is_dir():
            return directory
    return None


def read_log_lines(path) -> List[str]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Log file not found: {path}")

    with open(path, 'r', encoding='utf-8-sig', errors='ignore', newline=None) as f:
        return [line.rstrip('\r\n') for line in f]


class LogIngestor:
    """Parse an access log and rank its client IPs"""

    def __init__(self, separator: str = SEPARATOR, comment_marker: str = COMMENT_MARKER,
                 console: Optional[Console] = None):
        self.separator = separator
        self.comment_marker = comment_marker
        self.console = console
        self.records: List[LogRecord] = []
        self.results: List[AggregateResult] = []

    def ingest_lines(self, lines: List[str]) -> List[AggregateResult]:
        self.records = parse_lines(lines, self.separator, self.comment_marker)
        self.results = aggregate(self.records)
        logger.info("Parsed %d records from %d IPs", len(self.records), len(self.results))
        return self.results

    def ingest_file(self, filepath) -> List[AggregateResult]:
        self.records = []
        self.results = []

        lines = read_log_lines(filepath)
        logger.info("Read %d lines from %s", len(lines), filepath)

        if self.console:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=self.console,
                transient=True
            ) as progress:
                progress.add_task("Ingesting log...", total=None)
                return self.ingest_lines(lines)
        return self.ingest_lines(lines)

    def run(self, input_path, output_path) -> List[AggregateResult]:
        """Ingest ``input_path`` and write the CSV report to ``output_path``"""
        results = self.ingest_file(input_path)
        write_report(results, output_path)
        return results
