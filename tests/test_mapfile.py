import io

import pytest

from so_long.mapfile import MapFileError, check_map, iter_lines, read_map, try_open

MAP_TEXT = "11111\n1PCE1\n11111\n"


@pytest.fixture
def maps_dir(tmp_path):
    directory = tmp_path / "maps"
    directory.mkdir()
    return directory


@pytest.mark.parametrize(
    "text",
    ["", "\n", "abc", "111\n1P1\n111", MAP_TEXT, "a\n\nb\n", "x" * 2500 + "\n" + "y" * 1500],
)
def test_iter_lines_matches_splitlines(text):
    assert list(iter_lines(io.StringIO(text))) == text.splitlines(keepends=True)


def test_iter_lines_joins_back():
    text = ("1" * 999 + "\n") * 3 + "end"
    assert "".join(iter_lines(io.StringIO(text))) == text


def test_check_map_missing_name():
    with pytest.raises(MapFileError, match="Error: Name Map"):
        check_map(None)


def test_check_map_short_name():
    with pytest.raises(MapFileError, match="Error: Invalid Name Map"):
        check_map(".ber")


def test_check_map_bad_extension():
    with pytest.raises(MapFileError, match="Error: Invalid Extension"):
        check_map("map.txt")


def test_check_map_missing_file(maps_dir):
    with pytest.raises(MapFileError):
        check_map("absent.ber", maps_dir)


def test_check_map_reads_rows(maps_dir):
    (maps_dir / "ok.ber").write_text(MAP_TEXT)
    assert check_map("ok.ber", maps_dir) == MAP_TEXT.splitlines()


def test_try_open_returns_path(maps_dir):
    (maps_dir / "ok.ber").write_text(MAP_TEXT)
    assert try_open("ok.ber", maps_dir) == maps_dir / "ok.ber"


def test_try_open_missing(maps_dir):
    with pytest.raises(MapFileError):
        try_open("nope.ber", maps_dir)


def test_read_map_without_trailing_newline(tmp_path):
    path = tmp_path / "m.ber"
    path.write_text("111\n1P1\n111")
    assert read_map(path) == ["111", "1P1", "111"]


def test_read_map_keeps_blank_rows(tmp_path):
    path = tmp_path / "m.ber"
    path.write_text("11\n\n11\n")
    rows = read_map(path)
    assert rows == ["11", "", "11"]
    assert all("\n" not in row for row in rows)


def test_read_map_empty_file(tmp_path):
    path = tmp_path / "m.ber"
    path.write_text("")
    assert read_map(path) == []


def test_read_map_missing(tmp_path):
    with pytest.raises(MapFileError):
        read_map(tmp_path / "missing.ber")