# ddrconf/run_dump.py
# DDR configuration dump -- Entry Point.
#
#   python -m ddrconf.run_dump CONFIG.json [--output PATH]
#
# Writes the checksummed text dump to PATH, or to stdout when no path is
# given. Exit codes follow ddrconf.failure_handler.FAILURE_TYPES.

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ddrconf.failure_handler import FailureHandler
from ddrconf.run_compare import configure_logging
from ddrconf.storage.config_dumper import ConfigDumper
from ddrconf.storage.config_loader import ConfigLoader
from ddrconf.version import TOOL_VERSION


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"DDR timing configuration dump tool v{TOOL_VERSION}",
        prog="ddrconf-dump",
    )
    parser.add_argument("config", help="Timing configuration JSON.")
    parser.add_argument("--output", default=None, help="Dump file to write.")
    parser.add_argument("--debug", action="store_true", default=False)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    configure_logging(args.debug)
    fh = FailureHandler(tool="ddrconf-dump")

    try:
        config = ConfigLoader().load(Path(args.config))
    except RuntimeError as exc:
        fh.handle_from_exception(exc)

    dumper = ConfigDumper()
    if args.output is None:
        sys.stdout.write(dumper.render(config))
    else:
        try:
            path = dumper.write(config, Path(args.output))
        except OSError as exc:
            fh.handle("TOOL_INTERNAL_ERROR", f"Failed to write dump: {exc}")
        print(f"Dump written: {path}")

    sys.exit(0)


if __name__ == "__main__":
    main()
