import pytest

from wireframe.fdfmap import (
    FdfMap,
    ViewState,
    load_map,
    parse_line,
    read_height,
    read_width,
)


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "sample.fdf"
    path.write_text("0 0 0\n0 10,0xFF0000 0\n0 0 0\n")
    return path


def test_read_height_and_width(map_file):
    assert read_height(map_file) == 3
    assert read_width(map_file) == 3


def test_read_height_counts_last_line_without_newline(tmp_path):
    path = tmp_path / "m.fdf"
    path.write_text("1 2\n3 4")
    assert read_height(path) == 2


def test_parse_line_plain_and_coloured():
    heights, colors = parse_line("3 7,0xFF0000 -2\n")
    assert heights == [3, 7, -2]
    assert colors == [0, 0xFF0000, 0]


def test_parse_line_ignores_trailing_space_and_newline():
    heights, colors = parse_line("1 2 \n")
    assert heights == [1, 2]
    assert colors == [0, 0]


def test_parse_line_missing_colour_raises():
    with pytest.raises(ValueError):
        parse_line("5,")


def test_load_map(map_file):
    fdf = load_map(map_file)
    assert (fdf.width, fdf.height) == (3, 3)
    assert fdf.grid[1] == [0, 10, 0]
    assert fdf.color_grid[1][1] == 0xFF0000
    assert all(len(row) == fdf.width for row in fdf.grid + fdf.color_grid)


def test_load_map_pads_short_rows(tmp_path):
    path = tmp_path / "m.fdf"
    path.write_text("1\n2 3\n")
    fdf = load_map(path)
    assert fdf.grid == [[1, 0], [2, 3]]


def test_load_map_rejects_long_rows(tmp_path):
    path = tmp_path / "m.fdf"
    path.write_text("1 2 3\n4\n")
    with pytest.raises(ValueError):
        load_map(path)


def test_load_empty_map(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    assert load_map(path) == FdfMap(width=0, height=0)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_map(tmp_path / "absent.fdf")


def test_view_state_defaults():
    state = ViewState()
    assert state.window_zoom == 100
    assert (state.zoom, state.shift_x, state.shift_y, state.xs) == (0, 0, 0, 0.0)