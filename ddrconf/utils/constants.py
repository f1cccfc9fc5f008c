# ddrconf/utils/constants.py
# Default tunables for the comparison engine and the reporting layer.
#
# Standard import pattern:
#   from ddrconf.utils.constants import (
#       DEFAULT_LOOKAHEAD_WINDOW,
#       MAX_DUPLICATE_OCCURRENCES,
#       MAX_DUPLICATE_GROUPS,
#       BLOCK_PREVIEW_LIMIT,
#       MATCHED_RUN_SUMMARY_MIN,
#   )
#
# Per-run overrides go through CompareOptions, never by rebinding these names.


# ---------------------------------------------------------------------------
# BLOCK RELOCATOR
# ---------------------------------------------------------------------------

# Elements searched ahead of the opposite cursor before a displaced run is
# considered finished. Fixed, not adaptive to list size.
DEFAULT_LOOKAHEAD_WINDOW: int = 50

# Matched runs strictly longer than this are kept as MatchedRun summaries.
MATCHED_RUN_SUMMARY_MIN:  int = 10


# ---------------------------------------------------------------------------
# DUPLICATE SCANNER
# ---------------------------------------------------------------------------

# Occurrences recorded per duplicated key. Later occurrences are consumed
# (never start a group of their own) but are not recorded.
MAX_DUPLICATE_OCCURRENCES: int = 64

# Duplicate groups recorded per list.
MAX_DUPLICATE_GROUPS:      int = 100


# ---------------------------------------------------------------------------
# REPORTING
# ---------------------------------------------------------------------------

# Rows shown per relocated / unmatched block before "... (N more)".
BLOCK_PREVIEW_LIMIT: int = 10

DDRC_COLUMN_WIDTH: int = 40
PHY_COLUMN_WIDTH:  int = 37
