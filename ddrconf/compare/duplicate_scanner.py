# ddrconf/compare/duplicate_scanner.py
# DuplicateScanner -- finds repeated keys within one RegisterList.
#
# Single left-to-right scan. Each not-yet-consumed index starts a candidate
# group; every later index with the same key is consumed into it. A group
# is kept only when it holds at least two occurrences.
#
# Caps (CompareOptions):
#   max_duplicate_occurrences -- occurrences recorded per group. Occurrences
#       beyond the cap are still consumed, so they never open a second group
#       for the same key, but they are not recorded.
#   max_duplicate_groups -- the scan stops once this many groups are kept.
#
# O(n^2) in the list length. Tables hold hundreds of entries.

import logging
from typing import List

from ddrconf.compare.data_models.comparison_report import DuplicateGroup, DuplicateOccurrence
from ddrconf.compare.data_models.register import RegisterList
from ddrconf.utils.constants import MAX_DUPLICATE_GROUPS, MAX_DUPLICATE_OCCURRENCES

logger = logging.getLogger(__name__)


def find_duplicates(
    records:         RegisterList,
    max_occurrences: int = MAX_DUPLICATE_OCCURRENCES,
    max_groups:      int = MAX_DUPLICATE_GROUPS,
) -> tuple:
    """
    Return a tuple of DuplicateGroup in order of first occurrence of each
    repeated key. Non-repeated keys are omitted.
    """
    consumed = [False] * len(records)
    groups: List[DuplicateGroup] = []

    for i, head in enumerate(records):
        if len(groups) >= max_groups:
            logger.debug("duplicate group cap %d reached at index %d", max_groups, i)
            break
        if consumed[i]:
            continue

        occurrences = [DuplicateOccurrence(index=i, value=head.value)]
        dropped = 0
        for j in range(i + 1, len(records)):
            if records[j].address != head.address:
                continue
            consumed[j] = True
            if len(occurrences) < max_occurrences:
                occurrences.append(DuplicateOccurrence(index=j, value=records[j].value))
            else:
                dropped += 1

        if dropped:
            logger.debug(
                "key 0x%x: %d occurrence(s) beyond cap %d not recorded",
                head.address, dropped, max_occurrences,
            )
        if len(occurrences) > 1:
            groups.append(DuplicateGroup(address=head.address, occurrences=tuple(occurrences)))

    return tuple(groups)
