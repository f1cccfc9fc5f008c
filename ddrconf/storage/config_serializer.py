# ddrconf/storage/config_serializer.py
# ConfigSerializer -- writes a TimingConfig in the JSON layout read by
# ConfigLoader. Addresses and values are written as zero-padded hex strings
# of the table width.

import json
from pathlib import Path

from ddrconf.compare.data_models.register import RegisterList, RegisterWidth
from ddrconf.compare.data_models.timing_config import TimingConfig
from ddrconf.version import CONFIG_FORMAT_VERSION


def _serialize_table(records: RegisterList, width: RegisterWidth) -> list:
    return [
        [width.format_address(r.address), width.format_value(r.value)]
        for r in records
    ]


def config_to_dict(config: TimingConfig) -> dict:
    return {
        "format_version": CONFIG_FORMAT_VERSION,
        "name":           config.name,
        "ddrc_cfg":       _serialize_table(config.ddrc_cfg, RegisterWidth.DDRC),
        "fsp_cfg": [
            {
                "ddrc_cfg": _serialize_table(f.ddrc_cfg, RegisterWidth.DDRC),
                "bypass":   f.bypass,
            }
            for f in config.fsp_cfg
        ],
        "ddrphy_cfg": _serialize_table(config.ddrphy_cfg, RegisterWidth.PHY),
        "fsp_msg": [
            {
                "drate":            m.drate,
                "fw_type":          m.fw_type,
                "fsp_phy_cfg":      _serialize_table(m.fsp_phy_cfg, RegisterWidth.PHY),
                "fsp_phy_msgh_cfg": _serialize_table(m.fsp_phy_msgh_cfg, RegisterWidth.PHY),
                "fsp_phy_pie_cfg":  _serialize_table(m.fsp_phy_pie_cfg, RegisterWidth.PHY),
            }
            for m in config.fsp_msg
        ],
        "ddrphy_trained_csr": _serialize_table(config.ddrphy_trained_csr, RegisterWidth.PHY),
        "ddrphy_pie":         _serialize_table(config.ddrphy_pie, RegisterWidth.PHY),
    }


class ConfigSerializer:
    """Serializes a TimingConfig to a JSON file. Parent directories are created."""

    def serialize(self, config: TimingConfig, filepath: Path) -> Path:
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(config_to_dict(config), f, indent=2)
        return filepath
