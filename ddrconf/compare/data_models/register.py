# ddrconf/compare/data_models/register.py
# Record, RegisterList and RegisterWidth.
#
# A RegisterList is an immutable tuple of Records. Order is the hardware
# programming order and is preserved by every derived sublist.
# Width is a property of the table, not of the comparison: the engine
# compares Records of any width; width only drives packing, size
# accounting and hex formatting.

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, Tuple


class RegisterWidth(Enum):
    """
    Record layout of one table.

      DDRC -- controller registers: 32-bit address, 32-bit value, 8 bytes packed.
      PHY  -- PHY registers: 20-bit address (stored in 32 bits),
              16-bit value, 6 bytes packed.
    """
    DDRC = "ddrc"
    PHY  = "phy"

    @property
    def address_bits(self) -> int:
        return 32 if self is RegisterWidth.DDRC else 20

    @property
    def value_bits(self) -> int:
        return 32 if self is RegisterWidth.DDRC else 16

    @property
    def record_size(self) -> int:
        return 8 if self is RegisterWidth.DDRC else 6

    @property
    def address_digits(self) -> int:
        return 8 if self is RegisterWidth.DDRC else 5

    @property
    def value_digits(self) -> int:
        return 8 if self is RegisterWidth.DDRC else 4

    def format_address(self, address: int) -> str:
        return f"0x{address:0{self.address_digits}x}"

    def format_value(self, value: int) -> str:
        return f"0x{value:0{self.value_digits}x}"


@dataclass(frozen=True)
class Record:
    """
    One (address, value) pair. The address is the comparison key and is
    not guaranteed unique within a list.
    """
    address: int
    value:   int


# Ordered, immutable sequence of Records.
RegisterList = Tuple[Record, ...]


def make_register_list(
    pairs: Iterable[Sequence[int]],
    width: RegisterWidth,
) -> RegisterList:
    """
    Build a RegisterList from (address, value) pairs, validating every
    pair against the table width.

    Raises ValueError on a negative or out-of-range address or value.
    """
    addr_limit  = 1 << width.address_bits
    value_limit = 1 << width.value_bits
    records = []
    for index, pair in enumerate(pairs):
        if len(pair) != 2:
            raise ValueError(
                f"Record [{index}] must be an (address, value) pair, got {pair!r}"
            )
        address, value = int(pair[0]), int(pair[1])
        if not 0 <= address < addr_limit:
            raise ValueError(
                f"Record [{index}] address 0x{address:x} does not fit in "
                f"{width.address_bits} bits"
            )
        if not 0 <= value < value_limit:
            raise ValueError(
                f"Record [{index}] value 0x{value:x} does not fit in "
                f"{width.value_bits} bits"
            )
        records.append(Record(address=address, value=value))
    return tuple(records)


def keys_of(records: RegisterList) -> Tuple[int, ...]:
    """Addresses of a RegisterList, in order."""
    return tuple(r.address for r in records)
