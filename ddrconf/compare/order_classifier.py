# ddrconf/compare/order_classifier.py
# Order Classifier and Value Comparator for equal-length RegisterLists.
#
# Classification:
#   1. Positional key equality at every index      -> IDENTICAL_ORDER
#   2. Otherwise, key multisets differ              -> STRUCTURAL_MISMATCH
#   3. Otherwise (same keys, different positions)   -> REORDERED
#
# Value comparison:
#   IDENTICAL_ORDER -- values compared index by index.
#   REORDERED       -- each left record is matched to the first not yet
#                      matched right record with the same key; diffs are
#                      keyed by left index.
# A key-presence mismatch is never counted as a value difference.

from collections import defaultdict, deque
from typing import Deque, Dict, List

from ddrconf.compare.data_models.comparison_report import OutcomeKind, ValueDiff
from ddrconf.compare.data_models.register import RegisterList
from ddrconf.compare.key_set import unique_records


def same_order(left: RegisterList, right: RegisterList) -> bool:
    """True iff both lists hold the same key at every index."""
    if len(left) != len(right):
        raise ValueError(
            f"same_order requires equal lengths, got {len(left)} and {len(right)}"
        )
    return all(l.address == r.address for l, r in zip(left, right))


def classify_order(left: RegisterList, right: RegisterList) -> OutcomeKind:
    """Classify two equal-length lists. Raises ValueError on unequal lengths."""
    if same_order(left, right):
        return OutcomeKind.IDENTICAL_ORDER
    left_only, right_only = unique_records(left, right)
    if left_only or right_only:
        return OutcomeKind.STRUCTURAL_MISMATCH
    return OutcomeKind.REORDERED


def positional_value_diffs(left: RegisterList, right: RegisterList) -> tuple:
    """Value differences at matching indices of two same-order lists."""
    return tuple(
        ValueDiff(
            index=i,
            address=l.address,
            left_value=l.value,
            right_value=r.value,
            right_index=i,
        )
        for i, (l, r) in enumerate(zip(left, right))
        if l.value != r.value
    )


def keyed_value_diffs(left: RegisterList, right: RegisterList) -> tuple:
    """
    Value differences between key-matched records of two lists, in left
    order. Left records without an available right match are skipped.
    """
    pending: Dict[int, Deque[int]] = defaultdict(deque)
    for j, rec in enumerate(right):
        pending[rec.address].append(j)

    diffs: List[ValueDiff] = []
    for i, rec in enumerate(left):
        candidates = pending.get(rec.address)
        if not candidates:
            continue
        j = candidates.popleft()
        if rec.value != right[j].value:
            diffs.append(ValueDiff(
                index=i,
                address=rec.address,
                left_value=rec.value,
                right_value=right[j].value,
                right_index=j,
            ))
    return tuple(diffs)
