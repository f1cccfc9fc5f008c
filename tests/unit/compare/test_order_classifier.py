import pytest

from ddrconf.compare.data_models.comparison_report import OutcomeKind, ValueDiff
from ddrconf.compare.data_models.register import Record
from ddrconf.compare.order_classifier import (
    classify_order,
    keyed_value_diffs,
    positional_value_diffs,
    same_order,
)


def _regs(*pairs):
    return tuple(Record(address=a, value=v) for a, v in pairs)


class TestClassifyOrder:

    def test_identical_order(self):
        left = _regs((1, 0), (2, 0))
        assert classify_order(left, _regs((1, 5), (2, 6))) is OutcomeKind.IDENTICAL_ORDER

    def test_reordered(self):
        assert classify_order(_regs((1, 0), (2, 0)), _regs((2, 0), (1, 0))) is OutcomeKind.REORDERED

    def test_same_length_different_keys_is_structural(self):
        result = classify_order(_regs((1, 0), (2, 0)), _regs((1, 0), (3, 0)))
        assert result is OutcomeKind.STRUCTURAL_MISMATCH

    def test_same_key_set_different_multiplicity_is_structural(self):
        result = classify_order(_regs((1, 0), (1, 0), (2, 0)), _regs((1, 0), (2, 0), (2, 0)))
        assert result is OutcomeKind.STRUCTURAL_MISMATCH

    def test_empty_lists_identical(self):
        assert classify_order((), ()) is OutcomeKind.IDENTICAL_ORDER

    def test_unequal_lengths_raise(self):
        with pytest.raises(ValueError, match="equal lengths"):
            same_order(_regs((1, 0)), ())


class TestPositionalValueDiffs:

    def test_reports_each_differing_index(self):
        diffs = positional_value_diffs(_regs((1, 1), (2, 2), (3, 3)), _regs((1, 1), (2, 7), (3, 8)))
        assert diffs == (
            ValueDiff(index=1, address=2, left_value=2, right_value=7, right_index=1),
            ValueDiff(index=2, address=3, left_value=3, right_value=8, right_index=2),
        )

    def test_no_diffs(self):
        assert positional_value_diffs(_regs((1, 1)), _regs((1, 1))) == ()


class TestKeyedValueDiffs:

    def test_matches_by_key(self, displaced_pair):
        left, right = displaced_pair
        assert keyed_value_diffs(left, right) == (
            ValueDiff(index=0, address=0x10, left_value=1, right_value=9, right_index=1),
        )

    def test_duplicates_matched_first_unconsumed(self):
        left = _regs((5, 1), (6, 0), (5, 2))
        right = _regs((6, 0), (5, 1), (5, 3))
        diffs = keyed_value_diffs(left, right)
        assert len(diffs) == 1
        assert (diffs[0].index, diffs[0].right_index) == (2, 2)

    def test_unmatched_left_keys_skipped(self):
        assert keyed_value_diffs(_regs((1, 1), (2, 2)), _regs((2, 3))) == (
            ValueDiff(index=1, address=2, left_value=2, right_value=3, right_index=0),
        )
