import pytest

from hexgrid.core.addressing import AddressingModel
from hexgrid.core.editor import EditEngine
from hexgrid.core.layout import GridLayout
from hexgrid.core.renderer import GridRenderer

HELLO_WORLD = bytes([0x48, 0x65, 0x6C, 0x6C, 0x6F, 0x20, 0x57, 0x6F, 0x72, 0x6C, 0x64, 0x21])


@pytest.fixture
def layout():
    return GridLayout()


@pytest.fixture
def addressing(layout):
    return AddressingModel(layout)


@pytest.fixture
def renderer(layout):
    return GridRenderer(layout)


@pytest.fixture
def engine(renderer):
    return EditEngine(renderer)


@pytest.fixture
def hello():
    return bytearray(HELLO_WORLD)


@pytest.fixture
def multiline():
    # two full lines and a short third one
    return bytearray((i * 7 + 3) & 0xFF for i in range(37))
