import json

from ddrconf.checksum import register_list_crc
from ddrconf.compare.data_models.register import Record, RegisterWidth
from ddrconf.compare.data_models.timing_config import FspConfig, FspMessage, TimingConfig
from ddrconf.compare.table_checker import TableChecker
from ddrconf.storage.config_dumper import ConfigDumper
from ddrconf.storage.report_serializer import ReportSerializer, report_to_dict
from ddrconf.version import TOOL_VERSION


_DDRC = (Record(0x3d400000, 0x1), Record(0x3d400004, 0x2))
_PHY = (Record(0x20017, 0x2a),)


def _config(name="a", pie=_PHY) -> TimingConfig:
    return TimingConfig(
        name=name,
        ddrc_cfg=_DDRC,
        fsp_cfg=(FspConfig(ddrc_cfg=_DDRC, bypass=1),),
        fsp_msg=(FspMessage(drate=6400, fw_type=0, fsp_phy_cfg=_PHY),),
        ddrphy_pie=pie,
    )


class TestConfigDumper:

    def test_table_block_layout(self):
        lines = ConfigDumper().render(_config()).splitlines()
        start = lines.index("ddrc_cfg")
        assert lines[start - 1] == ""
        assert lines[start + 1] == "entries=2, size=16 bytes"
        assert lines[start + 2] == f"crc32=0x{register_list_crc(_DDRC, RegisterWidth.DDRC):08x}"
        assert lines[start + 3] == "[   0]={0x3d400000, 0x00000001}"
        assert lines[start + 4] == "[   1]={0x3d400004, 0x00000002}"

    def test_phy_digits(self):
        text = ConfigDumper().render(_config())
        assert "[   0]={0x20017, 0x002a}" in text

    def test_scalar_fields(self):
        text = ConfigDumper().render(_config())
        assert "fsp_cfg[0].bypass=1" in text
        assert "fsp_msg[0].drate=6400" in text
        assert "fsp_msg[0].fw_type=0" in text

    def test_empty_tables_omitted(self):
        lines = ConfigDumper().render(_config()).splitlines()
        assert "ddrphy_cfg" not in lines
        assert "fsp_msg[0].fsp_phy_msgh_cfg" not in lines

    def test_write(self, tmp_path):
        path = ConfigDumper().write(_config(), tmp_path / "dump" / "a.txt")
        assert path.read_text(encoding="utf-8") == ConfigDumper().render(_config())


class TestReportSerializer:

    def test_dict_shape(self):
        report = TableChecker().check_config(_config("a"), _config("b", pie=_PHY + _PHY))
        payload = report_to_dict(report)
        assert payload["tool_version"] == TOOL_VERSION
        pie = [t for t in payload["tables"] if t["name"] == "ddrphy_pie"][0]
        assert pie["width"] == "phy"
        assert pie["result"]["outcome"] == "structural_mismatch"
        assert pie["result"]["common"]["outcome"] == "identical_order"
        assert pie["right_duplicates"][0]["address"] == 0x20017

    def test_written_file_is_json(self, tmp_path):
        report = TableChecker().check_config(_config("a"), _config("b"))
        path = ReportSerializer().serialize(report, tmp_path / "report.json")
        loaded = json.loads(path.read_text(encoding="utf-8"))
        assert loaded["left_name"] == "a"
        assert loaded["right_total_size"] == report.right_total_size
