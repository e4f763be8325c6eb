"""Command-line interface for running the oracle phases locally."""
from __future__ import annotations

import argparse
import asyncio
import sys

from .config import load_config
from .fetchers import AiohttpFetcher
from .hosts import LocalProcess
from .logging_setup import configure_logging
from .phases import run_execution_phase, run_tally_phase


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="oracle-program",
        description="Multi-asset price oracle program",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    execute_parser = sub.add_parser(
        "execute", help="Fetch and price a comma-separated list of asset queries"
    )
    execute_parser.add_argument(
        "query",
        help="Asset queries, e.g. 'equity:AAPL,fx:EUR,cfd:XAU:USD'",
    )

    tally_parser = sub.add_parser(
        "tally", help="Reduce reveal payloads to the first valid result"
    )
    tally_parser.add_argument(
        "reveals",
        nargs="+",
        type=argparse.FileType("rb"),
        help="Files holding one reveal payload each",
    )

    return parser


def _report(process: LocalProcess) -> int:
    """Write the reported outcome to stdout/stderr and return the exit code."""
    if process.result is not None:
        sys.stdout.write(process.result.decode("utf-8") + "\n")
    elif process.error_message is not None:
        sys.stderr.write(process.error_message.decode("utf-8") + "\n")
    return process.exit_code


def _execute(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    process = LocalProcess(inputs=args.query.encode("utf-8"))
    fetcher = AiohttpFetcher(config.data_source)
    asyncio.run(run_execution_phase(process, fetcher, process, config.data_source))
    return _report(process)


def _tally(args: argparse.Namespace) -> int:
    bodies = []
    for handle in args.reveals:
        with handle:
            bodies.append(handle.read())
    process = LocalProcess(reveals=bodies)
    run_tally_phase(process, process)
    return _report(process)


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.log_level)

    if args.command == "execute":
        sys.exit(_execute(args))
    sys.exit(_tally(args))
