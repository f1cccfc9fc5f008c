# ddrconf/compare/options.py
# CompareOptions -- per-run tunables for the comparison engine.
# Defaults come from ddrconf.utils.constants. Validated fail-fast on
# construction; there is no silent clamping.

from dataclasses import dataclass

from ddrconf.compare.exceptions import CompareConfigError
from ddrconf.utils.constants import (
    DEFAULT_LOOKAHEAD_WINDOW,
    MATCHED_RUN_SUMMARY_MIN,
    MAX_DUPLICATE_GROUPS,
    MAX_DUPLICATE_OCCURRENCES,
)


@dataclass(frozen=True)
class CompareOptions:
    """
    Fields:
      lookahead_window          -- Block Relocator window width (>= 1).
      max_duplicate_occurrences -- occurrences recorded per duplicate group (>= 2).
      max_duplicate_groups      -- duplicate groups recorded per list (>= 1).
      matched_run_summary_min   -- matched runs longer than this are summarized (>= 0).
      list_duplicates           -- reporting hint: full duplicate listing
                                   instead of a one-line summary.
    """
    lookahead_window:          int = DEFAULT_LOOKAHEAD_WINDOW
    max_duplicate_occurrences: int = MAX_DUPLICATE_OCCURRENCES
    max_duplicate_groups:      int = MAX_DUPLICATE_GROUPS
    matched_run_summary_min:   int = MATCHED_RUN_SUMMARY_MIN
    list_duplicates:           bool = False

    def __post_init__(self) -> None:
        _require_int("lookahead_window", self.lookahead_window, 1)
        _require_int("max_duplicate_occurrences", self.max_duplicate_occurrences, 2)
        _require_int("max_duplicate_groups", self.max_duplicate_groups, 1)
        _require_int("matched_run_summary_min", self.matched_run_summary_min, 0)


def _require_int(field_name: str, value: object, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise CompareConfigError(field_name, value, "must be an int")
    if value < minimum:
        raise CompareConfigError(field_name, value, f"must be >= {minimum}")
