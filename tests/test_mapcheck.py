import pytest

from cubcaster.errors import CubError, ErrorKind
from cubcaster.mapcheck import MapInfo, is_row_closed, is_wall_row, validate_map

VALID = ["1111", "1N01", "1111"]


def test_valid_map_returns_rows_and_player():
    info = validate_map(VALID)
    assert info == MapInfo(rows=tuple(VALID), player="N")
    assert info.height == len(VALID)
    assert info.width == len(VALID[0])


def test_map_block_stops_at_first_non_map_line():
    info = validate_map(VALID + ["", "1111"])
    assert info.rows == tuple(VALID)


def test_map_with_spaces_around():
    rows = [" 11111 ", " 1E001 ", " 10001 ", " 11111 "]
    info = validate_map(rows)
    assert info.player == "E"
    assert info.rows == tuple(rows)


def test_open_map_is_rejected():
    with pytest.raises(CubError) as info:
        validate_map(["1111", "1N0 ", "1111"])
    assert info.value.kind is ErrorKind.INVALID_MAP


def test_two_players_rejected():
    with pytest.raises(CubError) as info:
        validate_map(["11111", "1NS01", "11111"])
    assert info.value.kind is ErrorKind.INVALID_MAP


def test_players_on_different_rows_rejected():
    with pytest.raises(CubError):
        validate_map(["1111", "1N01", "1W01", "1111"])


def test_missing_player_rejected():
    with pytest.raises(CubError) as info:
        validate_map(["1111", "1001", "1111"])
    assert info.value.kind is ErrorKind.INVALID_MAP


@pytest.mark.parametrize("rows", [[], ["111"], ["111", "111"]])
def test_too_few_rows_rejected(rows):
    with pytest.raises(CubError):
        validate_map(rows)


def test_first_row_must_be_walls():
    with pytest.raises(CubError):
        validate_map(["1101", "1N01", "1111"])


def test_leading_non_map_line_gives_error():
    with pytest.raises(CubError):
        validate_map(["R 640 480"] + VALID)


@pytest.mark.parametrize(
    "row, expected",
    [("1111", True), ("  11  1", True), ("", True), ("1101", False), ("1N11", False)],
)
def test_is_wall_row(row, expected):
    assert is_wall_row(row) is expected


def test_row_closed_when_surrounded():
    assert is_row_closed("111", "101", "111") is True


def test_row_open_at_left_edge():
    assert is_row_closed("111", "011", "111") is False


def test_row_open_when_row_below_is_short():
    assert is_row_closed("1111", "1001", "11") is False


def test_row_open_next_to_space_above():
    assert is_row_closed("1 11", "1001", "1111") is False


def test_row_of_walls_is_closed_regardless_of_neighbours():
    assert is_row_closed("", "1111", "") is True