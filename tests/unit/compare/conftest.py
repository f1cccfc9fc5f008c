import pytest

from ddrconf.compare.data_models.register import Record
from ddrconf.compare.options import CompareOptions


def _regs(*pairs):
    return tuple(Record(address=a, value=v) for a, v in pairs)


@pytest.fixture
def default_options() -> CompareOptions:
    return CompareOptions()


@pytest.fixture
def displaced_pair():
    """Key 0x10 moved one slot to the right and its value changed."""
    left = _regs((0x10, 1), (0x20, 2), (0x30, 3))
    right = _regs((0x20, 2), (0x10, 9), (0x30, 3))
    return left, right
