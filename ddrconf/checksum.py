# ddrconf/checksum.py
# Byte-exact RegisterList serialization and the CRC32 printed in DDR
# configuration dumps.
#
# Packing: little-endian, no padding.
#   DDRC record: u32 address, u32 value  (8 bytes)
#   PHY  record: u32 address, u16 value  (6 bytes, packed)
#
# CRC: 4-bit table-driven CRC-32, two table lookups per byte, low nibble
# first. The table folds the usual initial value and final XOR into its
# entries, so the result equals zlib.crc32(data).
#
# The checksum is for display only. No comparison decision depends on it.

import numpy as np

from ddrconf.compare.data_models.register import RegisterList, RegisterWidth

_CRC_TABLE = (
    0x4DBDF21C, 0x500AE278, 0x76D3D2D4, 0x6B64C2B0,
    0x3B61B38C, 0x26D6A3E8, 0x000F9344, 0x1DB88320,
    0xA005713C, 0xBDB26158, 0x9B6B51F4, 0x86DC4190,
    0xD6D930AC, 0xCB6E20C8, 0xEDB71064, 0xF0000000,
)

_DTYPES = {
    RegisterWidth.DDRC: np.dtype([("address", "<u4"), ("value", "<u4")]),
    RegisterWidth.PHY:  np.dtype([("address", "<u4"), ("value", "<u2")]),
}


def record_dtype(width: RegisterWidth) -> np.dtype:
    """Packed numpy structured dtype for one record of the given width."""
    return _DTYPES[width]


def serialize_records(records: RegisterList, width: RegisterWidth) -> bytes:
    """Pack records into their on-target byte layout."""
    arr = np.zeros(len(records), dtype=record_dtype(width))
    if len(records):
        arr["address"] = [r.address for r in records]
        arr["value"]   = [r.value for r in records]
    return arr.tobytes()


def crc32(data: bytes) -> int:
    """Nibble-table CRC32 over data. Returns 0 for empty input."""
    crc = 0
    for byte in data:
        crc = (crc >> 4) ^ _CRC_TABLE[(crc ^ byte) & 0x0F]
        crc = (crc >> 4) ^ _CRC_TABLE[(crc ^ (byte >> 4)) & 0x0F]
    return crc


def register_list_crc(records: RegisterList, width: RegisterWidth) -> int:
    return crc32(serialize_records(records, width))
