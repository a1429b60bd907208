import pytest

from hexgrid.core.addressing import GridPosition, Nibble
from hexgrid.core.editor import EditEngine
from hexgrid.core.renderer import Pane
from hexgrid.errors import InvalidDigit, OutOfRange


@pytest.mark.parametrize(
    "nibble,digit,expected",
    [
        (Nibble.HIGH, "F", 0xF2),
        (Nibble.HIGH, "0", 0x02),
        (Nibble.LOW, "a", 0x1A),
        (Nibble.LOW, "2", 0x12),
    ],
)
def test_apply_nibble_keeps_other_nibble(engine, nibble, digit, expected):
    buffer = bytearray([0x12])
    engine.apply_nibble(buffer, GridPosition(0, nibble), digit)
    assert buffer[0] == expected


def test_apply_nibble_returns_changed_cells(engine):
    buffer = bytearray(b"\x00" * 20)
    hex_span, ascii_span = engine.apply_nibble(buffer, GridPosition(17, Nibble.HIGH), "4")

    assert buffer[17] == 0x40
    assert (hex_span.pane, hex_span.start, hex_span.length, hex_span.text) == (Pane.HEX, 53, 2, "40")
    assert (ascii_span.pane, ascii_span.start, ascii_span.length, ascii_span.text) == (Pane.ASCII, 18, 1, "@")


def test_apply_nibble_is_idempotent(engine, multiline):
    once = bytearray(multiline)
    twice = bytearray(multiline)
    position = GridPosition(9, Nibble.LOW)

    engine.apply_nibble(once, position, "c")
    engine.apply_nibble(twice, position, "c")
    engine.apply_nibble(twice, position, "c")
    assert once == twice


@pytest.mark.parametrize("digit", ["g", "Z", " ", "", "12"])
def test_apply_nibble_rejects_bad_digit(digit):
    calls = []
    engine = EditEngine(on_modified=lambda: calls.append(1))
    buffer = bytearray([0x12])

    with pytest.raises(InvalidDigit):
        engine.apply_nibble(buffer, GridPosition(0, Nibble.HIGH), digit)
    assert buffer == bytearray([0x12])
    assert calls == []


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_apply_nibble_out_of_range(index):
    calls = []
    engine = EditEngine(on_modified=lambda: calls.append(1))
    buffer = bytearray([0x12])

    with pytest.raises(OutOfRange):
        engine.apply_nibble(buffer, GridPosition(index, Nibble.HIGH), "F")
    assert buffer == bytearray([0x12])
    assert calls == []


def test_on_modified_signal():
    calls = []
    engine = EditEngine(on_modified=lambda: calls.append(1))
    engine.apply_nibble(bytearray(2), GridPosition(1, Nibble.LOW), "7")
    assert calls == [1]


def test_set_byte(engine):
    buffer = bytearray(b"abc")
    hex_span, ascii_span = engine.set_byte(buffer, 1, 0x5A)
    assert buffer == bytearray(b"aZc")
    assert hex_span.text == "5A"
    assert ascii_span.text == "Z"

    with pytest.raises(ValueError):
        engine.set_byte(buffer, 0, 256)
    with pytest.raises(OutOfRange):
        engine.set_byte(buffer, 3, 0)
