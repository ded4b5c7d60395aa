import pytest

from wireview.mapfile import (
    HeightMap,
    MapError,
    is_valid_token,
    load_map,
    most_frequent_height,
    parse_token,
    parse_value,
    zoom_for,
)


def write(tmp_path, content, name="map.fdf"):
    path = tmp_path / name
    path.write_text(content)
    return path


def test_parse_value_positive_and_negative():
    assert parse_value("42") == 42
    assert parse_value("-7") == -7


def test_parse_value_stops_at_newline():
    assert parse_value("12\n") == 12


@pytest.mark.parametrize("token", ["10", "-3", "0", "5,0xFF", "5,0xff00aa", "-2,0x0"])
def test_valid_tokens(token):
    assert is_valid_token(token) is True


@pytest.mark.parametrize("token", ["abc", "-", "5,FF", "5,0xZZ", "1.5", "3a", "5,0"])
def test_invalid_tokens(token):
    assert is_valid_token(token) is False


def test_parse_token_plain_height_gets_default_colour():
    assert parse_token("3") == (3, 0xFFFFFF)


def test_parse_token_with_colour():
    assert parse_token("5,0xFF") == (5, 0xFF)
    assert parse_token("-4,0xAbCdEf") == (-4, 0xABCDEF)


def test_parse_token_rejects_garbage():
    with pytest.raises(MapError):
        parse_token("x")


def test_load_map_reads_grid(tmp_path):
    path = write(tmp_path, "0 0 0\n0 10 0\n0 0 0\n")
    hm = load_map(path)
    assert isinstance(hm, HeightMap)
    assert (hm.rows, hm.cols) == (3, 3)
    assert hm.heights[1][1] == 10
    assert (hm.colors == 0xFFFFFF).all()
    assert hm.name == str(path)


def test_load_map_without_trailing_newline(tmp_path):
    hm = load_map(write(tmp_path, "1 2\n3 4,0xff"))
    assert hm.heights.tolist() == [[1, 2], [3, 4]]
    assert hm.colors[1][1] == 0xFF


def test_load_map_rejects_wrong_extension(tmp_path):
    path = write(tmp_path, "0 0\n", name="map.txt")
    with pytest.raises(MapError):
        load_map(path)


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        load_map(tmp_path / "absent.fdf")


def test_load_map_empty_file(tmp_path):
    with pytest.raises(MapError):
        load_map(write(tmp_path, ""))


def test_load_map_blank_first_line(tmp_path):
    with pytest.raises(MapError):
        load_map(write(tmp_path, " \n1 2\n"))


def test_load_map_ragged_rows(tmp_path):
    with pytest.raises(MapError):
        load_map(write(tmp_path, "1 2 3\n1 2\n"))


def test_load_map_invalid_token(tmp_path):
    with pytest.raises(MapError):
        load_map(write(tmp_path, "1 2\n1 q\n"))


def test_most_frequent_height_majority():
    assert most_frequent_height([[0, 0], [0, 5]]) == 0


def test_most_frequent_height_first_cell_wins_tie():
    assert most_frequent_height([[5, 1], [1, 5]]) == 5


def test_most_frequent_height_lowest_wins_other_ties():
    assert most_frequent_height([[9, 4], [4, 7], [7, 1]]) == 4


@pytest.mark.parametrize(
    "rows, cols, zoom",
    [(10, 10, 35), (30, 30, 35), (50, 10, 15), (100, 100, 10), (150, 1, 5), (500, 500, 2), (501, 1, 1)],
)
def test_zoom_for(rows, cols, zoom):
    assert zoom_for(rows, cols) == zoom
    assert zoom_for(cols, rows) == zoom