# ddrconf/compare/interference.py
# Duplicate-Interference Checker -- flags duplicated keys that also carry a
# value difference, where attributing the difference to one occurrence is
# ambiguous.
#
# Scan is positional over the aligned lists: index i is a hit for key K
# when left[i] has key K and left[i].value != right[i].value.
# Left groups are processed before right groups; a key duplicated on both
# sides is reported once, from the first group that hits.

from typing import List, Set

from ddrconf.compare.data_models.comparison_report import (
    ComparisonResult,
    DuplicateGroup,
    InterferenceOccurrence,
    InterferenceReport,
)
from ddrconf.compare.data_models.register import RegisterList


def interference_applies(result: ComparisonResult) -> bool:
    """
    Interference analysis only runs for equal-length lists that were not a
    structural mismatch and that show at least one value difference.
    """
    return (
        not result.is_structural
        and result.left_count == result.right_count
        and result.diff_count > 0
    )


def _has_positional_diff(address: int, left: RegisterList, right: RegisterList) -> bool:
    return any(
        l.address == address and l.value != r.value
        for l, r in zip(left, right)
    )


def check_interference(
    left:        RegisterList,
    right:       RegisterList,
    left_dups:   tuple,
    right_dups:  tuple,
) -> tuple:
    """
    Return a tuple of InterferenceReport, one per reported key.
    Raises ValueError if the lists differ in length.
    """
    if len(left) != len(right):
        raise ValueError(
            f"check_interference requires equal lengths, got {len(left)} and {len(right)}"
        )

    reported: Set[int] = set()
    reports: List[InterferenceReport] = []

    for side, groups in (("left", left_dups), ("right", right_dups)):
        for group in groups:
            if group.address in reported:
                continue
            if not _has_positional_diff(group.address, left, right):
                continue
            reports.append(_build_report(side, group, left, right))
            reported.add(group.address)

    return tuple(reports)


def _build_report(
    side:  str,
    group: DuplicateGroup,
    left:  RegisterList,
    right: RegisterList,
) -> InterferenceReport:
    return InterferenceReport(
        address=group.address,
        side=side,
        occurrences=tuple(
            InterferenceOccurrence(
                index=idx,
                left_value=left[idx].value,
                right_value=right[idx].value,
            )
            for idx in group.indices
        ),
    )
