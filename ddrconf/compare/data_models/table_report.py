# ddrconf/compare/data_models/table_report.py
# Per-table and whole-configuration comparison reports produced by the
# table checker.

from dataclasses import dataclass
from typing import Optional

from ddrconf.compare.data_models.comparison_report import ComparisonFailure, ComparisonResult
from ddrconf.compare.data_models.register import RegisterWidth


@dataclass(frozen=True)
class TableReport:
    """
    Comparison of one named table pair.

    Fields:
      name              -- table name, e.g. "fsp_msg[0].fsp_phy_cfg".
      width             -- RegisterWidth of both sides.
      left_size         -- packed byte size of the left table.
      right_size        -- packed byte size of the right table.
      left_crc          -- CRC32 of the left table's packed bytes.
      right_crc         -- CRC32 of the right table's packed bytes.
      result            -- ComparisonResult, or None when the comparison
                           itself failed (see error).
      left_duplicates   -- tuple of DuplicateGroup in the left table.
      right_duplicates  -- tuple of DuplicateGroup in the right table.
      interference      -- tuple of InterferenceReport.
      error             -- ComparisonFailure raised while comparing this
                           table. Sibling tables are unaffected.
    """
    name:             str
    width:            RegisterWidth
    left_size:        int
    right_size:       int
    left_crc:         int
    right_crc:        int
    result:           Optional[ComparisonResult]
    left_duplicates:  tuple = ()
    right_duplicates: tuple = ()
    interference:     tuple = ()
    error:            Optional[ComparisonFailure] = None

    @property
    def left_count(self) -> int:
        return self.left_size // self.width.record_size

    @property
    def right_count(self) -> int:
        return self.right_size // self.width.record_size

    @property
    def duplicate_count(self) -> int:
        return len(self.left_duplicates) + len(self.right_duplicates)


@dataclass(frozen=True)
class FieldDiff:
    """Difference in a scalar field such as fsp_cfg[1].bypass or fsp_msg[0].drate."""
    section:     str
    field:       str
    left_value:  int
    right_value: int


@dataclass(frozen=True)
class SectionMismatch:
    """Entry count mismatch for a repeated section (fsp_cfg, fsp_msg)."""
    section:     str
    left_count:  int
    right_count: int


@dataclass(frozen=True)
class ConfigComparisonReport:
    """
    Comparison of two complete timing configurations.

    Fields:
      left_name          -- name of the left configuration.
      right_name         -- name of the right configuration.
      tables             -- tuple of TableReport in canonical table order.
      field_diffs        -- tuple of FieldDiff.
      section_mismatches -- tuple of SectionMismatch. A mismatched section's
                            tables are not compared.
      left_total_size    -- packed byte size of every left table.
      right_total_size   -- packed byte size of every right table.
    """
    left_name:          str
    right_name:         str
    tables:             tuple
    field_diffs:        tuple
    section_mismatches: tuple
    left_total_size:    int
    right_total_size:   int

    @property
    def size_difference(self) -> int:
        return self.right_total_size - self.left_total_size

    def table(self, name: str) -> TableReport:
        for report in self.tables:
            if report.name == name:
                return report
        raise KeyError(name)
