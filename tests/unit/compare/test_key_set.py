import pytest

from ddrconf.compare.data_models.register import Record
from ddrconf.compare.key_set import count_common, diff_key_sets, unique_records


def _regs(*pairs):
    return tuple(Record(address=a, value=v) for a, v in pairs)


_CASES = [
    (_regs((1, 0), (2, 0), (3, 0)), _regs((2, 0), (3, 0))),
    (_regs((1, 0), (1, 0), (2, 0)), _regs((1, 0), (3, 0))),
    (_regs(), _regs((1, 0))),
    (_regs((5, 0), (5, 1), (5, 2)), _regs((5, 9), (5, 9))),
    (_regs((1, 0), (2, 0)), _regs((3, 0), (4, 0))),
]


class TestKeySetPartition:

    @pytest.mark.parametrize("left,right", _CASES)
    def test_counts_add_up(self, left, right):
        diff = diff_key_sets(left, right)
        assert len(diff.left_only) + len(diff.common_left) == len(left)
        assert len(diff.right_only) + len(diff.common_right) == len(right)
        assert len(diff.common_left) == len(diff.common_right)

    @pytest.mark.parametrize("left,right", _CASES)
    def test_count_common_agrees_between_sides(self, left, right):
        l_count, r_count = count_common(left, right)
        assert l_count == r_count

    def test_values_are_ignored(self):
        left_only, right_only = unique_records(_regs((1, 1)), _regs((1, 2)))
        assert left_only == ()
        assert right_only == ()

    def test_unique_records_carry_original_index(self):
        left_only, right_only = unique_records(
            _regs((1, 10), (2, 20), (3, 30)), _regs((3, 0), (4, 40)),
        )
        assert [(r.index, r.address, r.value) for r in left_only] == [(0, 1, 10), (1, 2, 20)]
        assert [(r.index, r.address, r.value) for r in right_only] == [(1, 4, 40)]

    def test_common_sublists_keep_their_own_order(self):
        diff = diff_key_sets(_regs((1, 0), (2, 0), (9, 0)), _regs((2, 5), (1, 6)))
        assert [r.address for r in diff.common_left] == [1, 2]
        assert [r.address for r in diff.common_right] == [2, 1]
        assert [r.value for r in diff.common_right] == [5, 6]

    def test_extra_occurrence_is_unique(self):
        diff = diff_key_sets(_regs((7, 0), (7, 1)), _regs((7, 2)))
        assert [r.index for r in diff.left_only] == [1]
        assert diff.right_only == ()

