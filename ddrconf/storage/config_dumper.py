# ddrconf/storage/config_dumper.py
# ConfigDumper -- checksummed text dump of a TimingConfig, used as an
# archival / comparison baseline.
#
# Per non-empty table:
#   <blank line>
#   <table name>
#   entries=<count>, size=<bytes> bytes
#   crc32=0x<checksum>
#   [   i]={0x<address>, 0x<value>}
# DDRC tables print 8/8 hex digits, PHY tables 5/4.
# Empty tables are omitted; scalar set-point fields are always printed.

from pathlib import Path
from typing import List

from ddrconf.checksum import register_list_crc
from ddrconf.compare.data_models.register import RegisterList, RegisterWidth
from ddrconf.compare.data_models.timing_config import TimingConfig

_RULE = "═" * 75


def _dump_table(lines: List[str], name: str, records: RegisterList, width: RegisterWidth) -> None:
    if not records:
        return
    lines.append("")
    lines.append(name)
    lines.append(f"entries={len(records)}, size={len(records) * width.record_size} bytes")
    lines.append(f"crc32=0x{register_list_crc(records, width):08x}")
    for i, r in enumerate(records):
        lines.append(
            f"[{i:4d}]={{{width.format_address(r.address)}, {width.format_value(r.value)}}}"
        )


class ConfigDumper:
    """
    Methods:
      render(config)        -> str
      write(config, path)   -> Path
    """

    def render(self, config: TimingConfig) -> str:
        lines: List[str] = [
            _RULE,
            "                     DDR Configuration Dump Tool                           ",
            _RULE,
        ]

        _dump_table(lines, "ddrc_cfg", config.ddrc_cfg, RegisterWidth.DDRC)

        for i, fsp in enumerate(config.fsp_cfg):
            _dump_table(lines, f"fsp_cfg[{i}].ddrc_cfg", fsp.ddrc_cfg, RegisterWidth.DDRC)
            lines.append("")
            lines.append(f"fsp_cfg[{i}].bypass={fsp.bypass}")

        _dump_table(lines, "ddrphy_cfg", config.ddrphy_cfg, RegisterWidth.PHY)

        for i, msg in enumerate(config.fsp_msg):
            lines.append("")
            lines.append(f"fsp_msg[{i}].drate={msg.drate}")
            lines.append(f"fsp_msg[{i}].fw_type={msg.fw_type}")
            _dump_table(lines, f"fsp_msg[{i}].fsp_phy_cfg", msg.fsp_phy_cfg, RegisterWidth.PHY)
            _dump_table(lines, f"fsp_msg[{i}].fsp_phy_msgh_cfg", msg.fsp_phy_msgh_cfg, RegisterWidth.PHY)
            _dump_table(lines, f"fsp_msg[{i}].fsp_phy_pie_cfg", msg.fsp_phy_pie_cfg, RegisterWidth.PHY)

        _dump_table(lines, "ddrphy_trained_csr", config.ddrphy_trained_csr, RegisterWidth.PHY)
        _dump_table(lines, "ddrphy_pie", config.ddrphy_pie, RegisterWidth.PHY)

        lines.extend([
            "",
            _RULE,
            "                              DUMP COMPLETE                                ",
            _RULE,
            "",
        ])
        return "\n".join(lines)

    def write(self, config: TimingConfig, filepath: Path) -> Path:
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.render(config))
        return filepath
