# ddrconf/storage/config_loader.py
# ConfigLoader -- loads and validates a JSON timing configuration.
#
# Payload layout (CONFIG_FORMAT_VERSION 1.0.0):
#   {
#     "format_version":     "1.0.0",
#     "name":               "<label>",
#     "ddrc_cfg":           [[addr, val], ...],
#     "fsp_cfg":            [{"ddrc_cfg": [...], "bypass": 0}, ...],
#     "ddrphy_cfg":         [[addr, val], ...],
#     "fsp_msg":            [{"drate": 6400, "fw_type": 0,
#                             "fsp_phy_cfg": [...], "fsp_phy_msgh_cfg": [...],
#                             "fsp_phy_pie_cfg": [...]}, ...],
#     "ddrphy_trained_csr": [[addr, val], ...],
#     "ddrphy_pie":         [[addr, val], ...]
#   }
# Addresses and values are JSON integers or "0x" hex strings. Any table may
# be omitted and loads as empty.
#
# Failures raise RuntimeError with a failure-type prefix:
#   INPUT_NOT_FOUND, DATA_CORRUPTION, UNSUPPORTED_FORMAT

import json
from pathlib import Path
from typing import Any, Optional

from ddrconf.compare.data_models.register import RegisterList, RegisterWidth, make_register_list
from ddrconf.compare.data_models.timing_config import FspConfig, FspMessage, TimingConfig
from ddrconf.version import CONFIG_FORMAT_VERSION


def _parse_int(raw: Any, where: str) -> int:
    if isinstance(raw, bool):
        raise RuntimeError(f"DATA_CORRUPTION: {where}: expected integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw, 0)
        except ValueError:
            pass
    raise RuntimeError(f"DATA_CORRUPTION: {where}: expected integer, got {raw!r}")


def _load_table(raw: Any, width: RegisterWidth, where: str) -> RegisterList:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise RuntimeError(f"DATA_CORRUPTION: {where}: table must be a list")
    pairs = []
    for i, item in enumerate(raw):
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise RuntimeError(
                f"DATA_CORRUPTION: {where}[{i}]: expected [address, value] pair, got {item!r}"
            )
        pairs.append((
            _parse_int(item[0], f"{where}[{i}].address"),
            _parse_int(item[1], f"{where}[{i}].value"),
        ))
    try:
        return make_register_list(pairs, width)
    except ValueError as exc:
        raise RuntimeError(f"DATA_CORRUPTION: {where}: {exc}") from exc


def _load_sections(payload: dict, key: str) -> list:
    raw = payload.get(key, [])
    if not isinstance(raw, list) or not all(isinstance(s, dict) for s in raw):
        raise RuntimeError(f"DATA_CORRUPTION: {key}: must be a list of objects")
    return raw


def config_from_dict(payload: dict, name: Optional[str] = None) -> TimingConfig:
    """Build a TimingConfig from an already parsed payload."""
    if not isinstance(payload, dict):
        raise RuntimeError("DATA_CORRUPTION: top level must be a JSON object")

    version = payload.get("format_version")
    if version != CONFIG_FORMAT_VERSION:
        raise RuntimeError(
            f"UNSUPPORTED_FORMAT: format_version mismatch. "
            f"File: {version}, Expected: {CONFIG_FORMAT_VERSION}."
        )

    fsp_cfg = tuple(
        FspConfig(
            ddrc_cfg=_load_table(s.get("ddrc_cfg"), RegisterWidth.DDRC, f"fsp_cfg[{i}].ddrc_cfg"),
            bypass=_parse_int(s.get("bypass", 0), f"fsp_cfg[{i}].bypass"),
        )
        for i, s in enumerate(_load_sections(payload, "fsp_cfg"))
    )

    fsp_msg = []
    for i, s in enumerate(_load_sections(payload, "fsp_msg")):
        where = f"fsp_msg[{i}]"
        fsp_msg.append(FspMessage(
            drate=_parse_int(s.get("drate", 0), f"{where}.drate"),
            fw_type=_parse_int(s.get("fw_type", 0), f"{where}.fw_type"),
            fsp_phy_cfg=_load_table(s.get("fsp_phy_cfg"), RegisterWidth.PHY, f"{where}.fsp_phy_cfg"),
            fsp_phy_msgh_cfg=_load_table(
                s.get("fsp_phy_msgh_cfg"), RegisterWidth.PHY, f"{where}.fsp_phy_msgh_cfg"
            ),
            fsp_phy_pie_cfg=_load_table(
                s.get("fsp_phy_pie_cfg"), RegisterWidth.PHY, f"{where}.fsp_phy_pie_cfg"
            ),
        ))

    return TimingConfig(
        name=str(payload.get("name") or name or "unnamed"),
        ddrc_cfg=_load_table(payload.get("ddrc_cfg"), RegisterWidth.DDRC, "ddrc_cfg"),
        fsp_cfg=fsp_cfg,
        ddrphy_cfg=_load_table(payload.get("ddrphy_cfg"), RegisterWidth.PHY, "ddrphy_cfg"),
        fsp_msg=tuple(fsp_msg),
        ddrphy_trained_csr=_load_table(
            payload.get("ddrphy_trained_csr"), RegisterWidth.PHY, "ddrphy_trained_csr"
        ),
        ddrphy_pie=_load_table(payload.get("ddrphy_pie"), RegisterWidth.PHY, "ddrphy_pie"),
    )


class ConfigLoader:
    """
    Loads a TimingConfig from a JSON file.
    The file stem names the config when the payload carries no name.
    """

    def load(self, filepath: Path) -> TimingConfig:
        filepath = Path(filepath)
        if not filepath.exists():
            raise RuntimeError(f"INPUT_NOT_FOUND: Configuration file not found: {filepath}")

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, ValueError) as exc:
            raise RuntimeError(
                f"DATA_CORRUPTION: Failed to load configuration file {filepath}: {exc}"
            ) from exc

        return config_from_dict(payload, name=filepath.stem)
