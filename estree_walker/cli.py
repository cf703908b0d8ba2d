"""Command-line entry point: run a report over an ESTree JSON file."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import constants
from .api import load_tree, run_report
from .report_types import ReportConfig, ReportKind

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="estree-walk",
        description="Walk an ESTree syntax tree and report on it",
    )
    parser.add_argument("file", help="ESTree JSON file to walk ('-' for stdin)")
    parser.add_argument(
        "--report",
        "-r",
        default=constants.REPORT_TYPES,
        choices=[kind.value for kind in ReportKind],
        help="Report to print (default: types)",
    )
    parser.add_argument(
        "--global",
        "-g",
        dest="known_globals",
        action="append",
        default=[],
        metavar="NAME",
        help="Name to treat as a known global (repeatable)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.file == "-":
            text = sys.stdin.read()
        else:
            with open(args.file, encoding="utf-8") as f:
                text = f.read()
        root = load_tree(text)
    except (OSError, ValueError) as exc:
        logger.error("Cannot load tree from %s: %s", args.file, exc)
        raise

    config = ReportConfig(
        report=ReportKind(args.report),
        known_globals=frozenset(args.known_globals),
    )
    logger.debug("Report config: %s", config)
    print(run_report(root, config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
