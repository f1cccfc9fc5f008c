# ddrconf/storage/report_serializer.py
# ReportSerializer -- writes a ConfigComparisonReport as JSON.
# Register addresses and values are written as plain integers; the
# consumer formats them.

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional

from ddrconf.compare.data_models.comparison_report import ComparisonFailure, ComparisonResult
from ddrconf.compare.data_models.table_report import ConfigComparisonReport, TableReport
from ddrconf.version import TOOL_VERSION


def _serialize_failure(failure: Optional[ComparisonFailure]) -> Optional[dict]:
    if failure is None:
        return None
    return {"kind": failure.kind, "detail": failure.detail}


def _serialize_result(result: Optional[ComparisonResult]) -> Optional[dict]:
    if result is None:
        return None
    return {
        "outcome":          result.outcome.value,
        "diff_count":       result.diff_count,
        "left_count":       result.left_count,
        "right_count":      result.right_count,
        "value_diffs":      [asdict(d) for d in result.value_diffs],
        "relocated_blocks": [asdict(b) for b in result.relocated_blocks],
        "matched_runs":     [asdict(r) for r in result.matched_runs],
        "left_only":        [asdict(r) for r in result.left_only],
        "right_only":       [asdict(r) for r in result.right_only],
        "common":           _serialize_result(result.common),
        "error":            _serialize_failure(result.error),
    }


def _serialize_table(report: TableReport) -> dict:
    return {
        "name":             report.name,
        "width":            report.width.value,
        "left_size":        report.left_size,
        "right_size":       report.right_size,
        "left_crc":         report.left_crc,
        "right_crc":        report.right_crc,
        "result":           _serialize_result(report.result),
        "left_duplicates":  [asdict(g) for g in report.left_duplicates],
        "right_duplicates": [asdict(g) for g in report.right_duplicates],
        "interference":     [asdict(r) for r in report.interference],
        "error":            _serialize_failure(report.error),
    }


def report_to_dict(report: ConfigComparisonReport) -> dict:
    return {
        "tool_version":       TOOL_VERSION,
        "left_name":          report.left_name,
        "right_name":         report.right_name,
        "tables":             [_serialize_table(t) for t in report.tables],
        "field_diffs":        [asdict(d) for d in report.field_diffs],
        "section_mismatches": [asdict(m) for m in report.section_mismatches],
        "left_total_size":    report.left_total_size,
        "right_total_size":   report.right_total_size,
    }


class ReportSerializer:
    """Writes a ConfigComparisonReport to a JSON file."""

    def serialize(self, report: ConfigComparisonReport, filepath: Path) -> Path:
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(report_to_dict(report), f, indent=2)
        return filepath
