# ddrconf/compare/key_set.py
# Key-Set Differencer -- partitions two RegisterLists into left-only,
# right-only and common keys, and extracts the common-key sublists.
#
# Membership is by key only; values are ignored. Keys with multiplicity
# are matched occurrence by occurrence: the k-th occurrence of a key on one
# side is common iff the other side holds at least k occurrences of it.
# Hence |left_only| + |common| == len(left) and
# |right_only| + |common| == len(right), and both common sublists have the
# same length.
#
# Each common sublist keeps the order of the list it was taken from.

from collections import Counter
from dataclasses import dataclass
from typing import List, Tuple

from ddrconf.compare.data_models.comparison_report import IndexedRecord
from ddrconf.compare.data_models.register import Record, RegisterList


@dataclass(frozen=True)
class KeySetDiff:
    """
    Fields:
      left_only    -- tuple of IndexedRecord present only on the left.
      right_only   -- tuple of IndexedRecord present only on the right.
      common_left  -- RegisterList of matched left records, left order.
      common_right -- RegisterList of matched right records, right order.
    """
    left_only:    tuple
    right_only:   tuple
    common_left:  RegisterList
    common_right: RegisterList


def _split(
    records: RegisterList,
    other:   RegisterList,
) -> Tuple[List[IndexedRecord], List[Record]]:
    available = Counter(r.address for r in other)
    only: List[IndexedRecord] = []
    common: List[Record] = []
    for index, rec in enumerate(records):
        if available[rec.address] > 0:
            available[rec.address] -= 1
            common.append(rec)
        else:
            only.append(IndexedRecord(index=index, address=rec.address, value=rec.value))
    return only, common


def count_common(left: RegisterList, right: RegisterList) -> Tuple[int, int]:
    """
    Common-key counts computed independently from each side.
    The two counts must agree; the comparator checks this.
    """
    _, common_left = _split(left, right)
    _, common_right = _split(right, left)
    return len(common_left), len(common_right)


def unique_records(left: RegisterList, right: RegisterList) -> Tuple[tuple, tuple]:
    """Return (left_only, right_only) as tuples of IndexedRecord."""
    left_only, _ = _split(left, right)
    right_only, _ = _split(right, left)
    return tuple(left_only), tuple(right_only)


def diff_key_sets(left: RegisterList, right: RegisterList) -> KeySetDiff:
    """Full partition of two lists. Allocates fresh sublists on every call."""
    left_only, common_left = _split(left, right)
    right_only, common_right = _split(right, left)
    return KeySetDiff(
        left_only=tuple(left_only),
        right_only=tuple(right_only),
        common_left=tuple(common_left),
        common_right=tuple(common_right),
    )
