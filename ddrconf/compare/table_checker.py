# ddrconf/compare/table_checker.py
# TableChecker -- compares every table of two TimingConfigs.
#
# Tables are compared independently and sequentially in canonical order:
#   ddrc_cfg, fsp_cfg[i].ddrc_cfg, ddrphy_cfg,
#   fsp_msg[i].{fsp_phy_cfg, fsp_phy_msgh_cfg, fsp_phy_pie_cfg},
#   ddrphy_trained_csr, ddrphy_pie
#
# A CompareError in one table is recorded on that TableReport and the run
# continues. A set-point count mismatch (fsp_cfg or fsp_msg) is recorded as
# a SectionMismatch and that section's tables are skipped.

import logging
from typing import List, Optional

from ddrconf.checksum import register_list_crc
from ddrconf.compare.comparator import RegisterListComparator
from ddrconf.compare.data_models.comparison_report import ComparisonFailure
from ddrconf.compare.data_models.register import RegisterList, RegisterWidth
from ddrconf.compare.data_models.table_report import (
    ConfigComparisonReport,
    FieldDiff,
    SectionMismatch,
    TableReport,
)
from ddrconf.compare.data_models.timing_config import TimingConfig
from ddrconf.compare.duplicate_scanner import find_duplicates
from ddrconf.compare.exceptions import CompareError
from ddrconf.compare.interference import check_interference, interference_applies
from ddrconf.compare.options import CompareOptions

logger = logging.getLogger(__name__)


class TableChecker:
    """
    Methods:
      check_table(name, width, left, right) -> TableReport
      check_config(left, right)             -> ConfigComparisonReport
    """

    def __init__(self, options: Optional[CompareOptions] = None) -> None:
        self._options    = options if options is not None else CompareOptions()
        self._comparator = RegisterListComparator(self._options)

    def check_table(
        self,
        name:  str,
        width: RegisterWidth,
        left:  RegisterList,
        right: RegisterList,
    ) -> TableReport:
        left_dups = find_duplicates(
            left,
            max_occurrences=self._options.max_duplicate_occurrences,
            max_groups=self._options.max_duplicate_groups,
        )
        right_dups = find_duplicates(
            right,
            max_occurrences=self._options.max_duplicate_occurrences,
            max_groups=self._options.max_duplicate_groups,
        )

        result = None
        error = None
        try:
            result = self._comparator.compare(left, right)
        except CompareError as exc:
            logger.debug("table %s: %s", name, exc.message)
            error = ComparisonFailure(kind=exc.kind, detail=exc.message)

        interference = ()
        if result is not None and (left_dups or right_dups) and interference_applies(result):
            interference = check_interference(left, right, left_dups, right_dups)

        return TableReport(
            name=name,
            width=width,
            left_size=len(left) * width.record_size,
            right_size=len(right) * width.record_size,
            left_crc=register_list_crc(left, width),
            right_crc=register_list_crc(right, width),
            result=result,
            left_duplicates=left_dups,
            right_duplicates=right_dups,
            interference=interference,
            error=error,
        )

    def check_config(self, left: TimingConfig, right: TimingConfig) -> ConfigComparisonReport:
        tables: List[TableReport] = []
        field_diffs: List[FieldDiff] = []
        mismatches: List[SectionMismatch] = []

        tables.append(self.check_table("ddrc_cfg", RegisterWidth.DDRC, left.ddrc_cfg, right.ddrc_cfg))

        if len(left.fsp_cfg) != len(right.fsp_cfg):
            mismatches.append(SectionMismatch("fsp_cfg", len(left.fsp_cfg), len(right.fsp_cfg)))
        else:
            for i, (lf, rf) in enumerate(zip(left.fsp_cfg, right.fsp_cfg)):
                tables.append(self.check_table(
                    f"fsp_cfg[{i}].ddrc_cfg", RegisterWidth.DDRC, lf.ddrc_cfg, rf.ddrc_cfg,
                ))
                if lf.bypass != rf.bypass:
                    field_diffs.append(FieldDiff(f"fsp_cfg[{i}]", "bypass", lf.bypass, rf.bypass))

        tables.append(self.check_table("ddrphy_cfg", RegisterWidth.PHY, left.ddrphy_cfg, right.ddrphy_cfg))

        if len(left.fsp_msg) != len(right.fsp_msg):
            mismatches.append(SectionMismatch("fsp_msg", len(left.fsp_msg), len(right.fsp_msg)))
        else:
            for i, (lm, rm) in enumerate(zip(left.fsp_msg, right.fsp_msg)):
                section = f"fsp_msg[{i}]"
                if lm.drate != rm.drate:
                    field_diffs.append(FieldDiff(section, "drate", lm.drate, rm.drate))
                if lm.fw_type != rm.fw_type:
                    field_diffs.append(FieldDiff(section, "fw_type", lm.fw_type, rm.fw_type))
                for attr in ("fsp_phy_cfg", "fsp_phy_msgh_cfg", "fsp_phy_pie_cfg"):
                    tables.append(self.check_table(
                        f"{section}.{attr}", RegisterWidth.PHY,
                        getattr(lm, attr), getattr(rm, attr),
                    ))

        tables.append(self.check_table(
            "ddrphy_trained_csr", RegisterWidth.PHY,
            left.ddrphy_trained_csr, right.ddrphy_trained_csr,
        ))
        tables.append(self.check_table("ddrphy_pie", RegisterWidth.PHY, left.ddrphy_pie, right.ddrphy_pie))

        return ConfigComparisonReport(
            left_name=left.name,
            right_name=right.name,
            tables=tuple(tables),
            field_diffs=tuple(field_diffs),
            section_mismatches=tuple(mismatches),
            left_total_size=left.total_size_bytes(),
            right_total_size=right.total_size_bytes(),
        )
