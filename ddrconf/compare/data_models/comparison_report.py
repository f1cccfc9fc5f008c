# ddrconf/compare/data_models/comparison_report.py
# Structured comparison results. Free of any presentation formatting;
# the console reporter and the JSON report writer render these.

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OutcomeKind(str, Enum):
    """
    Tagged comparison outcome.

      STRUCTURAL_MISMATCH -- lengths or key sets differ.
      IDENTICAL_ORDER     -- same keys at the same positions.
      REORDERED           -- same keys as a multiset, different positions.
    """
    STRUCTURAL_MISMATCH = "structural_mismatch"
    IDENTICAL_ORDER     = "identical_order"
    REORDERED           = "reordered"


@dataclass(frozen=True)
class IndexedRecord:
    """A Record together with its index in the list it was taken from."""
    index:   int
    address: int
    value:   int


@dataclass(frozen=True)
class ValueDiff:
    """
    Value difference on one key.

    Fields:
      index       -- index in the left list.
      address     -- the key.
      left_value  -- value on the left.
      right_value -- value on the right.
      right_index -- index of the matched right record. Equal to index for
                     positional comparison.
    """
    index:       int
    address:     int
    left_value:  int
    right_value: int
    right_index: int


@dataclass(frozen=True)
class RelocatedBlock:
    """
    A pair of half-open index ranges [start, end), one per side, covering a
    contiguous run that sits at different aligned positions on the two sides.

    A range with start == end is empty. A block with one empty range is
    one-sided. trailing is True for the unmatched suffix reported after one
    list was exhausted.

    left_entries / right_entries hold the records covered by each range as
    IndexedRecord, so the block can be rendered without the source lists.
    """
    left_start:    int
    left_end:      int
    right_start:   int
    right_end:     int
    trailing:      bool = False
    left_entries:  tuple = ()    # tuple of IndexedRecord
    right_entries: tuple = ()    # tuple of IndexedRecord

    @property
    def left_count(self) -> int:
        return self.left_end - self.left_start

    @property
    def right_count(self) -> int:
        return self.right_end - self.right_start

    @property
    def is_one_sided(self) -> bool:
        return self.left_count == 0 or self.right_count == 0


@dataclass(frozen=True)
class MatchedRun:
    """Summary of a long run of positionally matching keys."""
    left_start:  int
    right_start: int
    length:      int


@dataclass(frozen=True)
class DuplicateOccurrence:
    index: int
    value: int


@dataclass(frozen=True)
class DuplicateGroup:
    """
    Every recorded occurrence of one repeated key within a single list,
    in original order. Only exists for multiplicity >= 2.
    """
    address:     int
    occurrences: tuple    # tuple of DuplicateOccurrence, immutable

    @property
    def count(self) -> int:
        return len(self.occurrences)

    @property
    def indices(self) -> tuple:
        return tuple(o.index for o in self.occurrences)

    @property
    def has_conflicting_values(self) -> bool:
        return len({o.value for o in self.occurrences}) > 1


@dataclass(frozen=True)
class InterferenceOccurrence:
    index:       int
    left_value:  int
    right_value: int


@dataclass(frozen=True)
class InterferenceReport:
    """
    A duplicated key that also carries a value difference.

    Fields:
      address     -- the duplicated key.
      side        -- "left" or "right": the side whose DuplicateGroup
                     supplied the occurrence indices.
      occurrences -- one InterferenceOccurrence per duplicate occurrence,
                     with the values found at that index on both sides.
    """
    address:     int
    side:        str
    occurrences: tuple    # tuple of InterferenceOccurrence, immutable


@dataclass(frozen=True)
class ComparisonFailure:
    """
    Error attached to a comparison instead of a nested result.

    kind is "internal_consistency" or "resource_exhaustion".
    """
    kind:   str
    detail: str


@dataclass(frozen=True)
class ComparisonResult:
    """
    Result of comparing one pair of RegisterLists.

    Fields:
      outcome          -- OutcomeKind.
      diff_count       -- number of keys whose values differ. Zero for
                          STRUCTURAL_MISMATCH; the nested common-subset
                          result carries its own count.
      left_count       -- length of the left list.
      right_count      -- length of the right list.
      value_diffs      -- tuple of ValueDiff.
      relocated_blocks -- tuple of RelocatedBlock (REORDERED only).
      matched_runs     -- tuple of MatchedRun (REORDERED only).
      left_only        -- tuple of IndexedRecord whose key is absent on the right.
      right_only       -- tuple of IndexedRecord whose key is absent on the left.
      common           -- nested ComparisonResult over the common subset,
                          only on length mismatch.
      error            -- ComparisonFailure when the common-subset branch
                          was abandoned.
    """
    outcome:          OutcomeKind
    diff_count:       int
    left_count:       int
    right_count:      int
    value_diffs:      tuple = ()
    relocated_blocks: tuple = ()
    matched_runs:     tuple = ()
    left_only:        tuple = ()
    right_only:       tuple = ()
    common:           Optional["ComparisonResult"] = None
    error:            Optional[ComparisonFailure] = None

    @property
    def is_structural(self) -> bool:
        return self.outcome is OutcomeKind.STRUCTURAL_MISMATCH

    @property
    def depth(self) -> int:
        """Number of nested common-subset levels below this result."""
        return 0 if self.common is None else 1 + self.common.depth
