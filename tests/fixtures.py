# type: ignore
import pytest

from dvdvm.disasm.faults import CollectingSink
from dvdvm.disasm.settings import DisasmSettings


@pytest.fixture
def sink():
    yield CollectingSink()


@pytest.fixture
def abbreviated():
    yield DisasmSettings().update(abbreviate_registers=True)
