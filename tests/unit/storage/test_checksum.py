import zlib

import pytest

from ddrconf.checksum import crc32, record_dtype, register_list_crc, serialize_records
from ddrconf.compare.data_models.register import Record, RegisterWidth


class TestSerializeRecords:

    def test_packed_record_sizes(self):
        assert record_dtype(RegisterWidth.DDRC).itemsize == 8
        assert record_dtype(RegisterWidth.PHY).itemsize == 6

    def test_ddrc_little_endian_layout(self):
        data = serialize_records((Record(0x3d400000, 0x00000001),), RegisterWidth.DDRC)
        assert data == bytes([0x00, 0x00, 0x40, 0x3d, 0x01, 0x00, 0x00, 0x00])

    def test_phy_layout_has_no_padding(self):
        data = serialize_records((Record(0x20017, 0x2a), Record(1, 2)), RegisterWidth.PHY)
        assert len(data) == 12
        assert data[:6] == bytes([0x17, 0x00, 0x02, 0x00, 0x2a, 0x00])

    def test_empty(self):
        assert serialize_records((), RegisterWidth.PHY) == b""


class TestCrc32:

    def test_empty_input_is_zero(self):
        assert crc32(b"") == 0

    def test_single_zero_byte(self):
        assert crc32(b"\x00") == 0xD202EF8D

    @pytest.mark.parametrize("data", [b"\x00\x00", b"123456789", bytes(range(256))])
    def test_matches_standard_crc32(self, data):
        assert crc32(data) == zlib.crc32(data)

    def test_deterministic_and_order_sensitive(self):
        a = (Record(1, 1), Record(2, 2))
        b = (Record(2, 2), Record(1, 1))
        assert register_list_crc(a, RegisterWidth.DDRC) == register_list_crc(a, RegisterWidth.DDRC)
        assert register_list_crc(a, RegisterWidth.DDRC) != register_list_crc(b, RegisterWidth.DDRC)

    @pytest.mark.parametrize("width", list(RegisterWidth))
    def test_fits_32_bits(self, width):
        value = register_list_crc((Record(0xFFFF, 0xFFFF),), width)
        assert 0 <= value <= 0xFFFFFFFF
