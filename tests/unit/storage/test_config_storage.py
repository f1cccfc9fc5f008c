import json

import pytest

from ddrconf.compare.data_models.register import Record
from ddrconf.compare.data_models.timing_config import FspConfig, FspMessage, TimingConfig
from ddrconf.storage.config_loader import ConfigLoader, config_from_dict
from ddrconf.storage.config_serializer import ConfigSerializer, config_to_dict
from ddrconf.version import CONFIG_FORMAT_VERSION


def _payload(**overrides):
    payload = {
        "format_version": CONFIG_FORMAT_VERSION,
        "name": "lpddr5_6400",
        "ddrc_cfg": [["0x3d400000", "0x00000001"], [1024, 7]],
        "fsp_cfg": [{"ddrc_cfg": [["0x3d400100", 5]], "bypass": 1}],
        "ddrphy_cfg": [["0x100a0", "0x0"]],
        "fsp_msg": [{"drate": 6400, "fw_type": 0, "fsp_phy_cfg": [["0x20017", "0x2a"]]}],
        "ddrphy_pie": [["0x90000", "0x10"]],
    }
    payload.update(overrides)
    return payload


class TestConfigFromDict:

    def test_parses_hex_and_int(self):
        config = config_from_dict(_payload())
        assert config.name == "lpddr5_6400"
        assert config.ddrc_cfg == (Record(0x3d400000, 1), Record(1024, 7))
        assert config.fsp_cfg[0].bypass == 1
        assert config.fsp_msg[0].drate == 6400
        assert config.fsp_msg[0].fsp_phy_cfg == (Record(0x20017, 0x2a),)

    def test_missing_tables_load_empty(self):
        config = config_from_dict({"format_version": CONFIG_FORMAT_VERSION}, name="bare")
        assert config.name == "bare"
        assert config.ddrc_cfg == ()
        assert config.fsp_msg == ()
        assert config.total_size_bytes() == 0

    def test_wrong_version(self):
        with pytest.raises(RuntimeError, match="^UNSUPPORTED_FORMAT:"):
            config_from_dict(_payload(format_version="0.9"))

    def test_phy_value_too_wide(self):
        with pytest.raises(RuntimeError, match="^DATA_CORRUPTION: ddrphy_cfg"):
            config_from_dict(_payload(ddrphy_cfg=[["0x100a0", "0x10000"]]))

    def test_bad_pair(self):
        with pytest.raises(RuntimeError, match="^DATA_CORRUPTION: ddrc_cfg\\[0\\]"):
            config_from_dict(_payload(ddrc_cfg=[[1]]))

    @pytest.mark.parametrize("raw", [True, "zz", None, 1.5])
    def test_bad_integer(self, raw):
        with pytest.raises(RuntimeError, match="^DATA_CORRUPTION:"):
            config_from_dict(_payload(ddrc_cfg=[[raw, 0]]))

    def test_sections_must_be_objects(self):
        with pytest.raises(RuntimeError, match="^DATA_CORRUPTION: fsp_cfg"):
            config_from_dict(_payload(fsp_cfg=[1, 2]))

    def test_top_level_must_be_object(self):
        with pytest.raises(RuntimeError, match="^DATA_CORRUPTION:"):
            config_from_dict([])  # type: ignore[arg-type]


class TestConfigLoader:

    def test_missing_file(self, tmp_path):
        with pytest.raises(RuntimeError, match="^INPUT_NOT_FOUND:"):
            ConfigLoader().load(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(RuntimeError, match="^DATA_CORRUPTION:"):
            ConfigLoader().load(path)

    def test_name_falls_back_to_file_stem(self, tmp_path):
        path = tmp_path / "board_a.json"
        path.write_text(json.dumps({"format_version": CONFIG_FORMAT_VERSION}), encoding="utf-8")
        assert ConfigLoader().load(path).name == "board_a"


class TestConfigSerializer:

    def _config(self) -> TimingConfig:
        return TimingConfig(
            name="round",
            ddrc_cfg=(Record(0x3d400000, 0xdeadbeef),),
            fsp_cfg=(FspConfig(ddrc_cfg=(Record(4, 5),), bypass=1),),
            ddrphy_cfg=(Record(0x100a0, 0x2),),
            fsp_msg=(FspMessage(drate=3200, fw_type=1, fsp_phy_msgh_cfg=(Record(0x58000, 0x1),)),),
            ddrphy_trained_csr=(Record(0x200b2, 0x3ff),),
            ddrphy_pie=(Record(0x90000, 0x10),),
        )

    def test_hex_strings_by_width(self):
        payload = config_to_dict(self._config())
        assert payload["ddrc_cfg"] == [["0x3d400000", "0xdeadbeef"]]
        assert payload["ddrphy_cfg"] == [["0x100a0", "0x0002"]]

    def test_file_loads_back_equal(self, tmp_path):
        config = self._config()
        path = ConfigSerializer().serialize(config, tmp_path / "out" / "round.json")
        assert ConfigLoader().load(path) == config
