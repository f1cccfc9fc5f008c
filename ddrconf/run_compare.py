# ddrconf/run_compare.py
# DDR configuration comparison -- Entry Point.
#
# Standard invocation:
#   python -m ddrconf.run_compare LEFT.json RIGHT.json \
#       [--list-duplicates] [--window N] [--no-color] \
#       [--json-out PATH] [--debug]
#
# EXIT CODES:
#   0  -- Both configurations were read and compared. Differences are
#         reported on stdout and do not change the exit code.
#   2  -- INPUT_NOT_FOUND or INVALID_OPTION.
#   3  -- DATA_CORRUPTION or UNSUPPORTED_FORMAT.
#   4  -- Internal tool error.

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ddrconf.compare.exceptions import CompareConfigError
from ddrconf.compare.options import CompareOptions
from ddrconf.compare.table_checker import TableChecker
from ddrconf.failure_handler import FailureHandler
from ddrconf.report.console_reporter import ConsoleReporter
from ddrconf.storage.config_loader import ConfigLoader
from ddrconf.storage.report_serializer import ReportSerializer
from ddrconf.utils.constants import DEFAULT_LOOKAHEAD_WINDOW
from ddrconf.version import TOOL_VERSION

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"DDR timing configuration comparison tool v{TOOL_VERSION}",
        prog="ddrconf-compare",
    )
    parser.add_argument("left", help="Left (reference) timing configuration JSON.")
    parser.add_argument("right", help="Right timing configuration JSON.")
    parser.add_argument(
        "--list-duplicates",
        action="store_true",
        default=False,
        help="List duplicate registers side by side instead of a summary line.",
    )
    parser.add_argument(
        "--window",
        type=int,
        default=DEFAULT_LOOKAHEAD_WINDOW,
        help=f"Look-ahead window for relocated blocks (default {DEFAULT_LOOKAHEAD_WINDOW}).",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        default=False,
        help="Disable ANSI colors.",
    )
    parser.add_argument(
        "--json-out",
        default=None,
        help="Also write the structured report as JSON to this path.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Emit debug diagnostics on stderr.",
    )
    return parser.parse_args(argv)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> None:
    """
    Pipeline:
      ConfigLoader (left, right)
      TableChecker
      ConsoleReporter (stdout)
      ReportSerializer (--json-out only)

    On completion: exits 0.
    On input failure: FailureHandler invokes sys.exit(non-zero).
    """
    args = _parse_args(argv)
    configure_logging(args.debug)
    fh = FailureHandler(tool="ddrconf-compare")

    try:
        options = CompareOptions(
            lookahead_window=args.window,
            list_duplicates=args.list_duplicates,
        )
    except CompareConfigError as exc:
        fh.handle("INVALID_OPTION", exc.message)

    loader = ConfigLoader()
    try:
        left = loader.load(Path(args.left))
        right = loader.load(Path(args.right))
    except RuntimeError as exc:
        fh.handle_from_exception(exc)

    logger.debug("Comparing %s against %s", left.name, right.name)
    report = TableChecker(options).check_config(left, right)

    ConsoleReporter(
        stream=sys.stdout,
        color=not args.no_color,
        list_duplicates=args.list_duplicates,
    ).render(report)

    if args.json_out:
        try:
            ReportSerializer().serialize(report, Path(args.json_out))
        except OSError as exc:
            fh.handle("TOOL_INTERNAL_ERROR", f"Failed to write JSON report: {exc}")

    sys.exit(0)


if __name__ == "__main__":
    main()
