import pytest

from hexgrid.core.layout import GridLayout, LayoutConstants
from hexgrid.core.renderer import GridRenderer


@pytest.mark.parametrize(
    "byte_in_line,column",
    [(0, 0), (1, 3), (7, 21), (8, 25), (9, 28), (15, 46)],
)
def test_column_of(layout, byte_in_line, column):
    assert layout.column_of(byte_in_line) == column


def test_line_lengths(layout):
    assert layout.hex_line_length == 50
    assert layout.ascii_line_length == 17
    assert layout.offset_line_length == 9


def test_line_and_byte_in_line(layout):
    assert (layout.line_of(0), layout.byte_in_line(0)) == (0, 0)
    assert (layout.line_of(15), layout.byte_in_line(15)) == (0, 15)
    assert (layout.line_of(16), layout.byte_in_line(16)) == (1, 0)
    assert (layout.line_of(41), layout.byte_in_line(41)) == (2, 9)


@pytest.mark.parametrize("length,lines", [(0, 0), (1, 1), (16, 1), (17, 2), (32, 2), (37, 3)])
def test_line_count(layout, length, lines):
    assert layout.line_count(length) == lines


def test_pane_offsets(layout):
    assert layout.hex_offset(0) == 0
    assert layout.hex_offset(8) == 25
    assert layout.hex_offset(17) == 50 + 3
    assert layout.ascii_offset(17) == 17 + 1


def test_custom_constants_stay_consistent():
    layout = GridLayout(LayoutConstants(bytes_per_line=8, mid_line_gap_after=4))
    assert layout.hex_line_length == 8 * 3 + 2
    assert layout.ascii_line_length == 9
    assert layout.column_of(3) == 9
    assert layout.column_of(4) == 13
    # last cell ends before the trailing separator and newline
    assert layout.column_of(7) + 2 == layout.hex_line_length - 2


@pytest.mark.parametrize(
    "kwargs",
    [
        {"mid_line_gap_after": 0},
        {"mid_line_gap_after": 17},
        {"bytes_per_line": 0},
        {"bytes_per_line": -4},
        {"offset_width": 0},
    ],
)
def test_layout_constants_rejects_bad_shapes(kwargs):
    with pytest.raises(ValueError):
        LayoutConstants(**kwargs)


def test_gap_after_last_cell_keeps_panes_in_step():
    layout = GridLayout(LayoutConstants(bytes_per_line=4, mid_line_gap_after=4))
    _, hex_row, _ = GridRenderer(layout).render_line(bytes(4), 0)

    assert hex_row == "00 00 00 00  \n"
    assert len(hex_row) == layout.hex_line_length
    assert layout.column_of(3) == 9
