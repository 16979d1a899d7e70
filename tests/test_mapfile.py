import pytest

from solong.mapfile import MapError, check_extension, read_map


def _write(tmp_path, content, name="map.ber"):
    path = tmp_path / name
    path.write_bytes(content.encode("latin-1"))
    return path


def test_read_map_strips_newlines(tmp_path):
    content = "11111\n1PCE1\n11111\n"
    assert read_map(_write(tmp_path, content)) == content.splitlines()


def test_read_map_without_final_newline(tmp_path):
    content = "111\n1P1\n111"
    assert read_map(_write(tmp_path, content)) == content.split("\n")


def test_read_map_accepts_str_path(tmp_path):
    content = "1111\n1111\n"
    assert read_map(str(_write(tmp_path, content))) == content.splitlines()


def test_blank_line_becomes_empty_row(tmp_path):
    grid = read_map(_write(tmp_path, "11\n\n11\n"))
    assert grid[1] == ""
    assert len(grid) == 3


def test_carriage_return_kept(tmp_path):
    grid = read_map(_write(tmp_path, "11\r\n11\r\n"))
    assert all(row.endswith("\r") for row in grid)


def test_missing_file_raises(tmp_path):
    with pytest.raises(MapError, match="Fichier non conforme"):
        read_map(tmp_path / "absent.ber")


def test_empty_file_raises(tmp_path):
    with pytest.raises(MapError):
        read_map(_write(tmp_path, ""))


@pytest.mark.parametrize(
    "name, expected",
    [
        ("map.ber", True),
        ("maps/level.ber", True),
        (".ber", True),
        ("a.b.ber", True),
        ("map.berx", False),
        ("map.be", False),
        ("map.ber.txt", False),
        ("map", False),
        ("map.BER", False),
    ],
)
def test_check_extension(name, expected):
    assert check_extension(name) is expected