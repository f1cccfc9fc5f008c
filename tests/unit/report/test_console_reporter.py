import io

from ddrconf.compare.data_models.register import Record
from ddrconf.compare.data_models.timing_config import FspConfig, FspMessage, TimingConfig
from ddrconf.compare.options import CompareOptions
from ddrconf.compare.table_checker import TableChecker
from ddrconf.report.console_reporter import COLOR_RED, COLOR_RESET, ConsoleReporter


def _regs(*pairs):
    return tuple(Record(address=a, value=v) for a, v in pairs)


def _config(name, ddrc=None, pie=None, bypass=0, msgs=1):
    return TimingConfig(
        name=name,
        ddrc_cfg=ddrc if ddrc is not None else _regs((0x3d400000, 1), (0x3d400004, 2)),
        fsp_cfg=(FspConfig(ddrc_cfg=_regs((0x3d400100, 1)), bypass=bypass),),
        fsp_msg=tuple(FspMessage(drate=6400, fw_type=0) for _ in range(msgs)),
        ddrphy_pie=pie if pie is not None else _regs((0x90000, 0x10)),
    )


class _Terminal(io.StringIO):
    def isatty(self):
        return True


def _render(left, right, color=False, list_duplicates=False, options=None, tty=False):
    report = TableChecker(options).check_config(left, right)
    out = _Terminal() if tty else io.StringIO()
    ConsoleReporter(stream=out, color=color, list_duplicates=list_duplicates).render(report)
    return out.getvalue()


class TestConsoleReporter:

    def test_identical_configs(self):
        text = _render(_config("a"), _config("b"))
        assert "Checking ddrc_cfg" in text
        assert "Registers and values match" in text
        assert "Left:  a" in text and "Right: b" in text
        assert "Difference:" not in text
        assert "COMPARISON COMPLETE" in text

    def test_value_diffs(self):
        right = _config("b", ddrc=_regs((0x3d400000, 1), (0x3d400004, 9)))
        text = _render(_config("a"), right)
        assert "I: Registers match, 1 value differences" in text
        assert "[  1] Reg 0x3d400004: 0x00000002 → 0x00000009" in text

    def test_reordered_shows_blocks(self):
        right = _config("b", ddrc=_regs((0x3d400004, 2), (0x3d400000, 1)))
        text = _render(_config("a"), right)
        assert "W: Registers match, different order" in text
        assert "LEFT" in text and "RIGHT" in text
        assert "[   0] Reg 0x3d400000 = 0x00000001" in text

    def test_structural_mismatch_nested(self):
        right = _config("b", ddrc=_regs((0x3d400000, 1), (0x3d400004, 2), (0x3d400008, 3)))
        text = _render(_config("a"), right)
        assert "W: Structural differences found" in text
        assert "Comparing common registers" in text
        assert "[  2] Reg 0x3d400008 = 0x00000003" in text
        assert "    Entries: Left=2, Right=2" in text
        assert "Difference: +8 bytes" in text

    def test_same_length_different_keys(self):
        right = _config("b", ddrc=_regs((0x3d400000, 1), (0x3d400008, 2)))
        text = _render(_config("a"), right)
        assert "E: Arrays have same length but different register sets!" in text
        assert "Registers in LEFT but not in RIGHT:" in text

    def test_duplicate_summary_and_listing(self):
        pie = _regs((0x90000, 1), (0x90000, 2))
        summary = _render(_config("a", pie=pie), _config("b", pie=pie))
        assert "Duplicate registers found: 2 (use --list-duplicates for details)" in summary
        listing = _render(_config("a", pie=pie), _config("b", pie=pie), list_duplicates=True)
        assert "0x90000 (2 times)" in listing

    def test_interference_warning(self):
        left = _config("a", pie=_regs((0x90000, 1), (0x90000, 2)))
        right = _config("b", pie=_regs((0x90000, 1), (0x90000, 9)))
        text = _render(left, right)
        assert "W: Duplicate registers involved in value differences:" in text
        assert "Reg 0x90000: duplicated 2 times at indices: [0] [1]" in text
        assert "[1] Left=0x0002, Right=0x0009" in text

    def test_block_preview_truncates(self):
        keys = list(range(0x100, 0x100 + 30))
        left = _config("a", pie=_regs(*[(k, 0) for k in keys]))
        right = _config("b", pie=_regs(*[(k, 0) for k in reversed(keys)]))
        text = _render(left, right)
        assert "more)" in text

    def test_field_diffs_and_section_mismatch(self):
        text = _render(_config("a"), _config("b", bypass=1, msgs=2))
        assert "fsp_cfg[0].bypass: 0 → 1" in text
        assert "E: Number of fsp_msg entries do not match! (Left=1, Right=2)" in text

    def test_color_on_terminal(self):
        right = _config("b", ddrc=_regs((0x3d400000, 1), (0x3d400008, 2)))
        text = _render(_config("a"), right, color=True, tty=True)
        assert COLOR_RED + "E: Arrays have same length" in text
        assert COLOR_RESET in text

    def test_no_color_flag_on_terminal(self):
        right = _config("b", ddrc=_regs((0x3d400000, 1), (0x3d400008, 2)))
        assert "\033[" not in _render(_config("a"), right, color=False, tty=True)

    def test_redirected_output_has_no_escapes(self):
        right = _config("b", ddrc=_regs((0x3d400000, 1), (0x3d400004, 2), (0x3d400008, 3)))
        text = _render(_config("a"), right, color=True, tty=False)
        assert "W: Structural differences found" in text
        assert "\033[" not in text
