#!/usr/bin/env python3
"""Log Ingest - Entry point"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from log_ingest import VERSION, FormatError, LogIngestor, find_base_directory, print_report
from log_ingest.constants import INPUT_DIR, INPUT_FILE, OUTPUT_DIR, OUTPUT_FILE

console = Console()


def setup_logging(verbosity: int):
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Log Ingest - Count requests per client IP in a W3C access log",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("--base-dir", help=f"Directory holding {INPUT_DIR}/ and {OUTPUT_DIR}/")
    parser.add_argument("-i", "--input", help=f"Log file (default: {INPUT_DIR}/{INPUT_FILE})")
    parser.add_argument("-o", "--output", help=f"CSV report (default: {OUTPUT_DIR}/{OUTPUT_FILE})")
    parser.add_argument("--top", type=int, default=10, help="IPs shown in the console summary")
    parser.add_argument("-q", "--quiet", action="store_true", help="No console summary")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging")
    parser.add_argument("--version", action="version", version=f"LogIngest v{VERSION}")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if args.base_dir:
        base_dir = Path(args.base_dir)
    else:
        base_dir = find_base_directory(Path(__file__).parent) or Path.cwd()

    input_path = Path(args.input) if args.input else base_dir / INPUT_DIR / INPUT_FILE
    output_path = Path(args.output) if args.output else base_dir / OUTPUT_DIR / OUTPUT_FILE

    ingestor = LogIngestor(console=None if args.quiet else console)

    try:
        if not args.quiet:
            console.print(f"Started ingesting [cyan]{input_path}[/]")
        results = ingestor.run(input_path, output_path)
    except (FileNotFoundError, FormatError) as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    if not args.quiet:
        print_report(results, console, top=args.top)
        console.print(f"\n[green]Report saved to:[/] {output_path}")


if __name__ == "__main__":
    main()
