# ddrconf/compare/block_relocator.py
# Block Relocator -- groups the reordering of two equal-key-set lists into
# contiguous relocated blocks.
#
# Single forward pass, one cursor per list:
#   1. Keys equal at both cursors: advance together (matched run). Runs
#      longer than matched_run_summary_min are kept as MatchedRun.
#   2. Keys differ: extend the left cursor while its key does not occur in
#      the right list within `window` elements from the right cursor, then
#      extend the right cursor the same way against the (updated) left
#      cursor.
#   3. Emit the consumed ranges as a RelocatedBlock. One range may be empty
#      when the matching element lies beyond the window.
#   4. When one list is exhausted the remaining suffixes form a single
#      trailing block.
#
# Stall: if step 2 advances neither cursor (each key occurs ahead in the
# other list, but not at its cursor), one element per side is consumed
# into the current block and step 2 resumes. The block is closed after the
# first extension that advances a cursor, or as soon as the cursors land on
# equal keys. Every iteration therefore consumes at least one element.
#
# This is a bounded heuristic, not a longest-common-subsequence diff. A
# block moved further than the window is reported as several smaller or
# one-sided blocks.

import logging
from dataclasses import dataclass
from typing import List, Tuple

from ddrconf.compare.data_models.comparison_report import IndexedRecord, MatchedRun, RelocatedBlock
from ddrconf.compare.data_models.register import RegisterList
from ddrconf.utils.constants import DEFAULT_LOOKAHEAD_WINDOW, MATCHED_RUN_SUMMARY_MIN

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelocationResult:
    """
    Fields:
      blocks       -- tuple of RelocatedBlock, in scan order. A trailing
                      block, if any, is last.
      matched_runs -- tuple of MatchedRun for matched runs longer than
                      matched_run_summary_min.
    """
    blocks:       tuple
    matched_runs: tuple


def _occurs_within(address: int, records: RegisterList, start: int, window: int) -> bool:
    end = min(start + window, len(records))
    for k in range(start, end):
        if records[k].address == address:
            return True
    return False


def _entries(records: RegisterList, start: int, end: int) -> tuple:
    return tuple(
        IndexedRecord(index=k, address=records[k].address, value=records[k].value)
        for k in range(start, end)
    )


def _make_block(
    left:     RegisterList,
    right:    RegisterList,
    l_start:  int,
    l_end:    int,
    r_start:  int,
    r_end:    int,
    trailing: bool = False,
) -> RelocatedBlock:
    return RelocatedBlock(
        left_start=l_start,
        left_end=l_end,
        right_start=r_start,
        right_end=r_end,
        trailing=trailing,
        left_entries=_entries(left, l_start, l_end),
        right_entries=_entries(right, r_start, r_end),
    )


def _extend(
    left:   RegisterList,
    right:  RegisterList,
    i1:     int,
    i2:     int,
    window: int,
) -> Tuple[int, int, bool]:
    start1, start2 = i1, i2
    while i1 < len(left) and not _occurs_within(left[i1].address, right, i2, window):
        i1 += 1
    while i2 < len(right) and not _occurs_within(right[i2].address, left, i1, window):
        i2 += 1
    return i1, i2, (i1 != start1 or i2 != start2)


def relocate_blocks(
    left:                    RegisterList,
    right:                   RegisterList,
    window:                  int = DEFAULT_LOOKAHEAD_WINDOW,
    matched_run_summary_min: int = MATCHED_RUN_SUMMARY_MIN,
) -> RelocationResult:
    """
    Partition the mismatch regions of two lists into RelocatedBlocks.

    Lists of any lengths are accepted; the comparator only calls this for
    equal-length lists with equal key multisets.
    """
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")

    n1, n2 = len(left), len(right)
    i1 = i2 = 0
    blocks: List[RelocatedBlock] = []
    runs: List[MatchedRun] = []

    while i1 < n1 and i2 < n2:
        if left[i1].address == right[i2].address:
            run_start1, run_start2 = i1, i2
            while i1 < n1 and i2 < n2 and left[i1].address == right[i2].address:
                i1 += 1
                i2 += 1
            length = i1 - run_start1
            if length > matched_run_summary_min:
                runs.append(MatchedRun(left_start=run_start1, right_start=run_start2, length=length))
            continue

        block_start1, block_start2 = i1, i2
        while True:
            i1, i2, moved = _extend(left, right, i1, i2, window)
            if moved:
                break
            # stalled
            i1 += 1
            i2 += 1
            if i1 >= n1 or i2 >= n2 or left[i1].address == right[i2].address:
                break

        blocks.append(_make_block(left, right, block_start1, i1, block_start2, i2))

    if i1 < n1 or i2 < n2:
        blocks.append(_make_block(left, right, i1, n1, i2, n2, trailing=True))

    logger.debug(
        "relocation: %d block(s), %d summarized run(s), window=%d",
        len(blocks), len(runs), window,
    )
    return RelocationResult(blocks=tuple(blocks), matched_runs=tuple(runs))
