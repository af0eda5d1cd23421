import numpy as np
import pytest

from voltools import Volume
from voltools.io import (
    parse_values,
    read_values_from_file,
    load_volume,
    format_shape,
    format_volume,
    print_volume,
    print_shape
)


@pytest.mark.parametrize("text, expected", [
    ("1, 2, 3\n4,5", [1, 2, 3, 4, 5]),
    ("0.1\n0.2\n0.3\n", [0.1, 0.2, 0.3]),
    ("  -1.5e2 +.5 3.", [-150.0, 0.5, 3.0]),
    ("1,2,x,3", [1, 2]),
    ("1 ,2", [1]),
    ("", []),
])
def test_parse_values(text, expected):
    values = parse_values(text)
    assert values.dtype == np.float32
    assert np.allclose(values, np.asarray(expected, dtype=np.float32))
    assert values.size == len(expected)


def test_read_values_from_file(tmp_path):
    path = tmp_path / "values.txt"
    path.write_text("1.0,2.0,3.0,\n4.0,5.0,6.0,\n")
    values = read_values_from_file(str(path))
    assert np.array_equal(values, [1, 2, 3, 4, 5, 6])


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_values_from_file(str(tmp_path / "missing.txt"))


def test_load_volume(tmp_path):
    path = tmp_path / "values.txt"
    path.write_text(", ".join(str(v) for v in range(12)))
    vol = load_volume(str(path), 1, 3, 4)
    assert vol.shape == (1, 3, 4)
    assert vol.get(0, 2, 3) == 11.0
    with pytest.raises(ValueError):
        load_volume(str(path), 2, 3, 4)


def test_format_volume():
    vol = Volume.from_values([1, 2, 3, 4, 5, 6, 7, 8], 2, 2, 2)
    text = format_volume(vol)
    assert text == ("Channel 0:\n1.000000 2.000000\n3.000000 4.000000\n\n"
                    "Channel 1:\n5.000000 6.000000\n7.000000 8.000000\n\n")
    assert format_volume(vol, decimals=2).splitlines()[1] == "1.00 2.00"
    assert format_volume(Volume.invalid()) == ""


def test_format_shape():
    assert format_shape(Volume.zeros(3, 15, 15)) == "(3, 15, 15)"
    assert format_shape(Volume.invalid()) == "(0, 0, 0)"


def test_print_helpers(capsys):
    vol = Volume.from_values([0.5], 1, 1, 1)
    print_shape(vol)
    print_volume(vol, decimals=1)
    assert capsys.readouterr().out == "(1, 1, 1)\nChannel 0:\n0.5\n\n"
