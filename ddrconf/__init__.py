# ddrconf/__init__.py
# DDR timing configuration comparison and dump tools.
# Tool Version: 1.0.0
#
# ENTRY POINTS:
#   ddrconf-compare LEFT.json RIGHT.json   (python -m ddrconf.run_compare)
#   ddrconf-dump CONFIG.json               (python -m ddrconf.run_dump)
#
# The comparison core (ddrconf.compare) is pure: it reads register lists
# and returns report values. Loading, dumping and rendering live in
# ddrconf.storage and ddrconf.report.

from .version import (
    TOOL_VERSION,
    CONFIG_FORMAT_VERSION,
    DUMP_FORMAT_VERSION,
)
from .checksum import crc32, register_list_crc, serialize_records
from .compare.comparator import RegisterListComparator, compare_register_lists
from .compare.options import CompareOptions
from .compare.table_checker import TableChecker
from .failure_handler import FailureHandler
from .storage.config_dumper import ConfigDumper
from .storage.config_loader import ConfigLoader
from .storage.config_serializer import ConfigSerializer
from .storage.report_serializer import ReportSerializer
from .report.console_reporter import ConsoleReporter
from .run_compare import main as run_compare
from .run_dump import main as run_dump

__all__ = [
    # Version constants
    "TOOL_VERSION",
    "CONFIG_FORMAT_VERSION",
    "DUMP_FORMAT_VERSION",
    # Checksum
    "crc32",
    "register_list_crc",
    "serialize_records",
    # Comparison
    "CompareOptions",
    "RegisterListComparator",
    "TableChecker",
    "compare_register_lists",
    # Storage and reporting
    "ConfigDumper",
    "ConfigLoader",
    "ConfigSerializer",
    "ConsoleReporter",
    "FailureHandler",
    "ReportSerializer",
    # Entry points
    "run_compare",
    "run_dump",
]
