# ddrconf/compare/data_models/timing_config.py
# TimingConfig -- one complete DRAM timing configuration, the dataset
# that ConfigLoader reads and the table checker compares.

from dataclasses import dataclass
from typing import Iterator, Tuple

from ddrconf.compare.data_models.register import RegisterList, RegisterWidth


@dataclass(frozen=True)
class FspConfig:
    """Controller configuration for one frequency set-point."""
    ddrc_cfg: RegisterList
    bypass:   int = 0


@dataclass(frozen=True)
class FspMessage:
    """
    PHY training input for one frequency set-point.

    Fields:
      drate            -- data rate in MT/s.
      fw_type          -- firmware image type (0 = 1D, 1 = 2D).
      fsp_phy_cfg      -- set-point PHY configuration.
      fsp_phy_msgh_cfg -- set-point message block header.
      fsp_phy_pie_cfg  -- set-point PIE configuration.
    """
    drate:            int
    fw_type:          int
    fsp_phy_cfg:      RegisterList = ()
    fsp_phy_msgh_cfg: RegisterList = ()
    fsp_phy_pie_cfg:  RegisterList = ()


@dataclass(frozen=True)
class TimingConfig:
    """
    Complete timing configuration. All register tables are immutable
    RegisterLists; fsp_cfg and fsp_msg are tuples.
    """
    name:               str
    ddrc_cfg:           RegisterList = ()
    fsp_cfg:            tuple = ()    # tuple of FspConfig
    ddrphy_cfg:         RegisterList = ()
    fsp_msg:            tuple = ()    # tuple of FspMessage
    ddrphy_trained_csr: RegisterList = ()
    ddrphy_pie:         RegisterList = ()

    def iter_tables(self) -> Iterator[Tuple[str, RegisterWidth, RegisterList]]:
        """Yield (table_name, width, records) in canonical order."""
        yield "ddrc_cfg", RegisterWidth.DDRC, self.ddrc_cfg
        for i, fsp in enumerate(self.fsp_cfg):
            yield f"fsp_cfg[{i}].ddrc_cfg", RegisterWidth.DDRC, fsp.ddrc_cfg
        yield "ddrphy_cfg", RegisterWidth.PHY, self.ddrphy_cfg
        for i, msg in enumerate(self.fsp_msg):
            yield f"fsp_msg[{i}].fsp_phy_cfg", RegisterWidth.PHY, msg.fsp_phy_cfg
            yield f"fsp_msg[{i}].fsp_phy_msgh_cfg", RegisterWidth.PHY, msg.fsp_phy_msgh_cfg
            yield f"fsp_msg[{i}].fsp_phy_pie_cfg", RegisterWidth.PHY, msg.fsp_phy_pie_cfg
        yield "ddrphy_trained_csr", RegisterWidth.PHY, self.ddrphy_trained_csr
        yield "ddrphy_pie", RegisterWidth.PHY, self.ddrphy_pie

    def total_size_bytes(self) -> int:
        return sum(len(records) * width.record_size for _, width, records in self.iter_tables())
