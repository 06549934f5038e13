"""Log Ingest - Report output"""

import csv
import io
import logging
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .constants import CSV_HEADER
from .models import AggregateResult

logger = logging.getLogger(__name__)

Row = Tuple[Union[int, str], str]


def build_rows(results: Sequence[AggregateResult]) -> List[Row]:
    """Header row followed by one (count, ip) row per result, in order"""
    rows: List[Row] = [CSV_HEADER]
    rows.extend((r.count, r.ip_address) for r in results)
    return rows


def render_csv(rows: Sequence[Row]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerows(rows)
    return buffer.getvalue()


def write_report(results: Sequence[AggregateResult], path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    content = render_csv(build_rows(results))
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)
    logger.info("Wrote %d rows to %s", len(results), path)
    return path


def print_report(results: Sequence[AggregateResult], console: Console, top: int = 10):
    total = sum(r.count for r in results)

    console.print("\n" + "═" * 70, style="cyan")
    console.print("              ACCESS LOG INGEST REPORT", style="bold cyan")
    console.print("═" * 70, style="cyan")

    console.print(Panel.fit(
        f"Total Requests: [cyan]{total:,}[/]\n"
        f"Unique IPs: [cyan]{len(results):,}[/]",
        title="Summary",
        border_style="cyan"
    ))

    if not results:
        console.print("\n[yellow]No requests found[/]")
        return

    console.print("\n" + "─" * 70, style="cyan")
    console.print("TOP IPs (by requests)", style="bold")
    table = Table(box=box.ROUNDED)
    table.add_column("IP Address", style="cyan")
    table.add_column("Requests", style="white", justify="right")
    for result in results[:top]:
        table.add_row(result.ip_address, str(result.count))
    console.print(table)

    console.print("\n" + "═" * 70, style="cyan")
