# ddrconf/compare/comparator.py
# RegisterListComparator -- orchestrates one comparison of two RegisterLists.
#
# State machine:
#   Start -> LengthEqual   -> Order Classifier
#                             IDENTICAL_ORDER     : positional value diffs
#                             REORDERED           : block relocation + keyed value diffs
#                             STRUCTURAL_MISMATCH : same length, different key sets
#   Start -> LengthUnequal -> unique keys, common-subset extraction,
#                             recursive comparison of the common subsets.
#                             The parent outcome is always STRUCTURAL_MISMATCH.
#
# The common-subset sublists are allocated by, and only referenced from,
# the call that compares them.
#
# Errors:
#   InternalConsistencyError -- raised; common counts disagree between sides.
#   ResourceExhaustionError  -- recovered locally; the result carries a
#                               ComparisonFailure and no nested result.

import logging
from typing import Optional

from ddrconf.compare.block_relocator import relocate_blocks
from ddrconf.compare.data_models.comparison_report import (
    ComparisonFailure,
    ComparisonResult,
    OutcomeKind,
)
from ddrconf.compare.data_models.register import RegisterList
from ddrconf.compare.exceptions import InternalConsistencyError, ResourceExhaustionError
from ddrconf.compare.key_set import KeySetDiff, count_common, diff_key_sets, unique_records
from ddrconf.compare.options import CompareOptions
from ddrconf.compare.order_classifier import (
    classify_order,
    keyed_value_diffs,
    positional_value_diffs,
)

logger = logging.getLogger(__name__)


class RegisterListComparator:
    """
    Compares two RegisterLists of any record width.

    Method:
      compare(left, right) -> ComparisonResult

    Inputs are never mutated. Each call is independent; the comparator
    holds no state besides its options.
    """

    def __init__(self, options: Optional[CompareOptions] = None) -> None:
        self._options = options if options is not None else CompareOptions()

    @property
    def options(self) -> CompareOptions:
        return self._options

    def compare(self, left: RegisterList, right: RegisterList) -> ComparisonResult:
        """
        Compare left against right.

        Raises InternalConsistencyError if the common-subset key counts
        disagree at any recursion level.
        """
        left, right = tuple(left), tuple(right)
        if len(left) != len(right):
            return self._compare_unequal(left, right)
        return self._compare_equal(left, right)

    # ------------------------------------------------------------------
    # LengthEqual
    # ------------------------------------------------------------------

    def _compare_equal(self, left: RegisterList, right: RegisterList) -> ComparisonResult:
        outcome = classify_order(left, right)
        logger.debug("equal length %d: %s", len(left), outcome.value)

        if outcome is OutcomeKind.IDENTICAL_ORDER:
            diffs = positional_value_diffs(left, right)
            return ComparisonResult(
                outcome=outcome,
                diff_count=len(diffs),
                left_count=len(left),
                right_count=len(right),
                value_diffs=diffs,
            )

        if outcome is OutcomeKind.STRUCTURAL_MISMATCH:
            left_only, right_only = unique_records(left, right)
            return ComparisonResult(
                outcome=outcome,
                diff_count=0,
                left_count=len(left),
                right_count=len(right),
                left_only=left_only,
                right_only=right_only,
            )

        relocation = relocate_blocks(
            left,
            right,
            window=self._options.lookahead_window,
            matched_run_summary_min=self._options.matched_run_summary_min,
        )
        diffs = keyed_value_diffs(left, right)
        return ComparisonResult(
            outcome=outcome,
            diff_count=len(diffs),
            left_count=len(left),
            right_count=len(right),
            value_diffs=diffs,
            relocated_blocks=relocation.blocks,
            matched_runs=relocation.matched_runs,
        )

    # ------------------------------------------------------------------
    # LengthUnequal
    # ------------------------------------------------------------------

    def _compare_unequal(self, left: RegisterList, right: RegisterList) -> ComparisonResult:
        logger.debug("length mismatch: left=%d right=%d", len(left), len(right))
        left_only, right_only = unique_records(left, right)

        common_left_count, common_right_count = count_common(left, right)
        if common_left_count != common_right_count:
            raise InternalConsistencyError(common_left_count, common_right_count)

        common: Optional[ComparisonResult] = None
        error: Optional[ComparisonFailure] = None

        if common_left_count > 0:
            try:
                subsets = self._extract_common(left, right, common_left_count)
            except ResourceExhaustionError as exc:
                logger.debug("common-subset branch abandoned: %s", exc.message)
                error = ComparisonFailure(kind=exc.kind, detail=exc.message)
            else:
                common = self.compare(subsets.common_left, subsets.common_right)

        return ComparisonResult(
            outcome=OutcomeKind.STRUCTURAL_MISMATCH,
            diff_count=0,
            left_count=len(left),
            right_count=len(right),
            left_only=left_only,
            right_only=right_only,
            common=common,
            error=error,
        )

    def _extract_common(
        self,
        left:     RegisterList,
        right:    RegisterList,
        expected: int,
    ) -> KeySetDiff:
        try:
            subsets = diff_key_sets(left, right)
        except MemoryError as exc:
            raise ResourceExhaustionError(expected) from exc
        if len(subsets.common_left) != len(subsets.common_right):
            raise InternalConsistencyError(len(subsets.common_left), len(subsets.common_right))
        return subsets


def compare_register_lists(
    left:    RegisterList,
    right:   RegisterList,
    options: Optional[CompareOptions] = None,
) -> ComparisonResult:
    """Functional entry point: RegisterListComparator(options).compare(left, right)."""
    return RegisterListComparator(options).compare(left, right)
