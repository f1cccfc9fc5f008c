# ddrconf/report/console_reporter.py
# ConsoleReporter -- renders a ConfigComparisonReport for a terminal.
#
# Message prefixes: "E: " errors (red), "W: " warnings (yellow),
# "I: " info (yellow), success lines green. Colors come from colorama and
# are optional. With color on, the stream is wrapped in colorama.AnsiToWin32,
# which strips the escapes when the stream is not a terminal.
# Nested common-subset comparisons are boxed and indented two extra spaces
# per level. Relocated and unmatched blocks show at most preview_limit rows
# per side, then "... (N more)".

import sys
from typing import Iterable, List, Optional, TextIO

from colorama import AnsiToWin32, Fore, Style

from ddrconf.compare.data_models.comparison_report import (
    ComparisonResult,
    IndexedRecord,
    OutcomeKind,
    RelocatedBlock,
)
from ddrconf.compare.data_models.register import RegisterWidth
from ddrconf.compare.data_models.table_report import ConfigComparisonReport, TableReport
from ddrconf.utils.constants import BLOCK_PREVIEW_LIMIT, DDRC_COLUMN_WIDTH, PHY_COLUMN_WIDTH

COLOR_RED    = Style.BRIGHT + Fore.RED
COLOR_GREEN  = Style.BRIGHT + Fore.GREEN
COLOR_YELLOW = Style.BRIGHT + Fore.YELLOW
COLOR_RESET  = Style.RESET_ALL

_BOX_WIDTH = 73
_RULE = "═" * 75


def _kb(size: int) -> str:
    return f"{size / 1024.0:.2f} kB"


class ConsoleReporter:
    """
    Methods:
      render(report) -- write the full report to the stream.
    """

    def __init__(
        self,
        stream:          Optional[TextIO] = None,
        color:           bool = True,
        list_duplicates: bool = False,
        preview_limit:   int = BLOCK_PREVIEW_LIMIT,
    ) -> None:
        stream = stream if stream is not None else sys.stdout
        self._stream          = AnsiToWin32(stream).stream if color else stream
        self._color           = color
        self._list_duplicates = list_duplicates
        self._preview_limit   = preview_limit

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def _line(self, text: str = "") -> None:
        self._stream.write(text + "\n")

    def _tagged(self, indent: str, color: str, tag: str, message: str) -> None:
        if self._color:
            self._line(f"{indent}{color}{tag}{message}{COLOR_RESET}")
        else:
            self._line(f"{indent}{tag}{message}")

    def _error(self, indent: str, message: str) -> None:
        self._tagged(indent, COLOR_RED, "E: ", message)

    def _warning(self, indent: str, message: str) -> None:
        self._tagged(indent, COLOR_YELLOW, "W: ", message)

    def _info(self, indent: str, message: str) -> None:
        self._tagged(indent, COLOR_YELLOW, "I: ", message)

    def _success(self, indent: str, message: str) -> None:
        self._tagged(indent, COLOR_GREEN, "", message)

    def _section(self, title: str) -> None:
        self._line("┌" + "─" * _BOX_WIDTH + "┐")
        self._line("│ " + title.ljust(_BOX_WIDTH - 1) + "│")
        self._line("└" + "─" * _BOX_WIDTH + "┘")

    def _side_by_side(self, indent: str, left: str, right: str, column_width: int) -> None:
        self._line(f"{indent}  {left:<{column_width}}  {right}".rstrip())

    def _columns_header(self, indent: str, column_width: int) -> None:
        self._side_by_side(indent, "LEFT", "RIGHT", column_width)
        self._line(f"{indent}  " + "─" * column_width + "  " + "─" * column_width)

    @staticmethod
    def _entry(width: RegisterWidth, rec: IndexedRecord, pad: int = 3) -> str:
        return (
            f"[{rec.index:{pad}d}] Reg {width.format_address(rec.address)} = "
            f"{width.format_value(rec.value)}"
        )

    @staticmethod
    def _column_width(width: RegisterWidth) -> int:
        return DDRC_COLUMN_WIDTH if width is RegisterWidth.DDRC else PHY_COLUMN_WIDTH

    # ------------------------------------------------------------------
    # Report
    # ------------------------------------------------------------------

    def render(self, report: ConfigComparisonReport) -> None:
        self._line()
        self._line(_RULE)
        self._line("                    DDR Configuration Comparison Tool                      ")
        self._line(_RULE)
        self._line(f"  Left:  {report.left_name}")
        self._line(f"  Right: {report.right_name}")
        self._line()

        for table in report.tables:
            self._table(table)

        if report.section_mismatches or report.field_diffs:
            self._section("Checking set-point fields")
            for mismatch in report.section_mismatches:
                self._error(
                    "  ",
                    f"Number of {mismatch.section} entries do not match! "
                    f"(Left={mismatch.left_count}, Right={mismatch.right_count})",
                )
            for diff in report.field_diffs:
                self._line(f"  {diff.section}.{diff.field}: {diff.left_value} → {diff.right_value}")
            self._line()

        self._section("Total Configuration Sizes")
        self._line(f"  Left:  {report.left_total_size} bytes ({_kb(report.left_total_size)})")
        self._line(f"  Right: {report.right_total_size} bytes ({_kb(report.right_total_size)})")
        if report.size_difference:
            diff = report.size_difference
            self._line(f"  Difference: {diff:+d} bytes ({diff / 1024.0:+.2f} kB)")
        self._line()
        self._line(_RULE)
        self._info("                      ", "COMPARISON COMPLETE")
        self._line(_RULE)
        self._line()

    def _table(self, table: TableReport) -> None:
        indent = "  "
        self._section(f"Checking {table.name}")
        self._line(f"{indent}Entries: Left={table.left_count}, Right={table.right_count}")
        self._line(
            f"{indent}Size:    Left={table.left_size} bytes ({_kb(table.left_size)}), "
            f"Right={table.right_size} bytes ({_kb(table.right_size)})"
        )
        self._line(f"{indent}CRC:     Left=0x{table.left_crc:08x}, Right=0x{table.right_crc:08x}")

        if table.error is not None:
            self._error(indent, table.error.detail)
        elif table.result is not None:
            self._result(table.result, table.width, indent)
            self._summary(table.result, indent)

        if table.interference:
            self._interference(table, indent)
        if table.left_duplicates or table.right_duplicates:
            if self._list_duplicates:
                self._duplicates(table, indent)
            else:
                self._info(
                    indent,
                    f"Duplicate registers found: {table.duplicate_count} "
                    f"(use --list-duplicates for details)",
                )
        self._line()

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def _summary(self, result: ComparisonResult, indent: str) -> None:
        if result.outcome is OutcomeKind.IDENTICAL_ORDER and result.diff_count == 0:
            self._success(indent, "Registers and values match")

    def _result(self, result: ComparisonResult, width: RegisterWidth, indent: str) -> None:
        if result.outcome is OutcomeKind.IDENTICAL_ORDER:
            if result.diff_count:
                self._info(indent, f"Registers match, {result.diff_count} value differences")
                self._value_diffs(result, width, indent, pad=3)
            return

        if result.outcome is OutcomeKind.REORDERED:
            self._reordered(result, width, indent)
            return

        if result.left_count == result.right_count:
            self._error(indent, "Arrays have same length but different register sets!")
            if result.left_only:
                self._info(indent, "Registers in LEFT but not in RIGHT:")
                for rec in result.left_only:
                    self._line(f"{indent}    {self._entry(width, rec)}")
            if result.right_only:
                self._info(indent, "Registers in RIGHT but not in LEFT:")
                for rec in result.right_only:
                    self._line(f"{indent}    {self._entry(width, rec)}")
            return

        self._warning(indent, "Structural differences found")
        self._unique(result, width, indent)
        self._line()
        self._line(f"{indent}┌─ Comparing common registers " + "─" * 30 + "┐")
        nested = indent + "  "
        if result.error is not None:
            self._error(indent, result.error.detail)
        elif result.common is None:
            self._info(indent, "No common registers found")
        else:
            common = result.common
            self._line(f"{nested}Entries: Left={common.left_count}, Right={common.right_count}")
            self._result(common, width, nested)
            self._summary(common, nested)
        self._line(f"{indent}└" + "─" * 58 + "┘")

    def _value_diffs(self, result: ComparisonResult, width: RegisterWidth, indent: str, pad: int) -> None:
        self._info(indent, "Register value differences:")
        for d in result.value_diffs:
            self._line(
                f"{indent}    [{d.index:{pad}d}] Reg {width.format_address(d.address)}: "
                f"{width.format_value(d.left_value)} → {width.format_value(d.right_value)}"
            )

    def _unique(self, result: ComparisonResult, width: RegisterWidth, indent: str) -> None:
        if not result.left_only and not result.right_only:
            return
        column_width = self._column_width(width)
        self._info(indent, "Unique registers:")
        self._columns_header(indent, column_width)
        for k in range(max(len(result.left_only), len(result.right_only))):
            left = self._entry(width, result.left_only[k]) if k < len(result.left_only) else ""
            right = self._entry(width, result.right_only[k]) if k < len(result.right_only) else ""
            self._side_by_side(indent, left, right, column_width)

    def _reordered(self, result: ComparisonResult, width: RegisterWidth, indent: str) -> None:
        column_width = self._column_width(width)
        self._warning(indent, "Registers match, different order")
        self._info(indent, "Reordered registers:")
        self._columns_header(indent, column_width)

        events: List[tuple] = [(b.left_start, 1, b) for b in result.relocated_blocks]
        events += [(r.left_start, 0, r) for r in result.matched_runs]
        for _, is_block, item in sorted(events, key=lambda e: (e[0], e[1])):
            if is_block:
                self._block(item, width, indent, column_width)
            else:
                last_left = item.left_start + item.length - 1
                last_right = item.right_start + item.length - 1
                self._side_by_side(
                    indent,
                    f"[{item.left_start:4d}-{last_left:4d}] ({item.length} registers)",
                    f"[{item.right_start:4d}-{last_right:4d}] ({item.length} registers)",
                    column_width,
                )

        if result.diff_count:
            self._info(indent, f"Value differences: {result.diff_count}")
            self._value_diffs(result, width, indent, pad=4)

    def _preview(self, width: RegisterWidth, entries: Iterable[IndexedRecord]) -> List[str]:
        entries = list(entries)
        rows = [self._entry(width, rec, pad=4) for rec in entries[:self._preview_limit]]
        if len(entries) > self._preview_limit:
            rows.append(f"... ({len(entries) - self._preview_limit} more)")
        return rows

    def _block(self, block: RelocatedBlock, width: RegisterWidth, indent: str, column_width: int) -> None:
        left_rows = self._preview(width, block.left_entries)
        right_rows = self._preview(width, block.right_entries)
        for k in range(max(len(left_rows), len(right_rows))):
            self._side_by_side(
                indent,
                left_rows[k] if k < len(left_rows) else "",
                right_rows[k] if k < len(right_rows) else "",
                column_width,
            )

    # ------------------------------------------------------------------
    # Duplicates
    # ------------------------------------------------------------------

    def _interference(self, table: TableReport, indent: str) -> None:
        width = table.width
        self._warning(indent, "Duplicate registers involved in value differences:")
        for report in table.interference:
            indices = " ".join(f"[{o.index}]" for o in report.occurrences)
            self._line(
                f"{indent}    Reg {width.format_address(report.address)}: duplicated "
                f"{len(report.occurrences)} times at indices: {indices}"
            )
            for o in report.occurrences:
                self._line(
                    f"{indent}        [{o.index}] Left={width.format_value(o.left_value)}, "
                    f"Right={width.format_value(o.right_value)}"
                )

    def _duplicates(self, table: TableReport, indent: str) -> None:
        width = table.width
        self._info(indent, "Duplicate registers:")
        self._columns_header(indent, PHY_COLUMN_WIDTH)
        left, right = table.left_duplicates, table.right_duplicates
        for k in range(max(len(left), len(right))):
            left_text = (
                f"{width.format_address(left[k].address)} ({left[k].count} times)"
                if k < len(left) else ""
            )
            right_text = (
                f"{width.format_address(right[k].address)} ({right[k].count} times)"
                if k < len(right) else ""
            )
            self._side_by_side(indent, left_text, right_text, PHY_COLUMN_WIDTH)
