import numpy as np
import pytest

from voltools import (
    Volume,
    VolumeResult,
    VolumeEngine,
    make,
    ShapeMismatch,
    AllocationFailure
)
from voltools.funcs.volume import flat_index_nb_core, flat_index_np_core


def test_row_major_layout():
    depth, rows, cols = 2, 3, 4
    vol = Volume.from_values(np.arange(depth * rows * cols), depth, rows, cols)
    for i in range(depth):
        for j in range(rows):
            for k in range(cols):
                expected = i * rows * cols + j * cols + k
                assert vol.get(i, j, k) == expected
                assert vol.at(i, j, k) == expected
                assert flat_index_np_core(i, j, k, rows, cols) == expected
                assert flat_index_nb_core(i, j, k, rows, cols) == expected
    assert np.array_equal(vol.as_array(), np.arange(24).reshape(2, 3, 4))


@pytest.mark.parametrize("coords", [(2, 0, 0), (0, 3, 0), (0, 0, 4), (-1, 0, 0), (0, -1, 2)])
def test_get_rejects_out_of_range(coords):
    vol = Volume.zeros(2, 3, 4)
    with pytest.raises(IndexError):
        vol.get(*coords)


def test_invalid_sentinel():
    sentinel = Volume.invalid()
    assert sentinel.shape == (0, 0, 0)
    assert sentinel.size == 0
    assert not sentinel.is_valid
    assert repr(sentinel) == "Volume(invalid)"

    zeros = make(1, 1, 1)
    assert zeros.is_valid
    assert zeros.shape == (1, 1, 1)
    assert zeros.get(0, 0, 0) == 0.0


def test_make_zero_filled():
    vol = make(2, 3, 4)
    assert vol.dtype == np.float32
    assert vol.data.flags['C_CONTIGUOUS']
    assert np.all(vol.data == 0.0)
    assert make(1, 2, 2, dtype=np.float64).dtype == np.float64


@pytest.mark.parametrize("extents", [(0, 1, 1), (1, -2, 1), (1, 1, 0)])
def test_rejects_non_positive_extents(extents):
    with pytest.raises(ValueError):
        make(*extents)
    with pytest.raises(ValueError):
        Volume(np.zeros(1), *extents)


def test_rejects_wrong_buffer_length():
    with pytest.raises(ValueError):
        Volume.from_values([1.0, 2.0, 3.0], 2, 1, 2)
    with pytest.raises(ValueError):
        Volume.from_array(np.zeros((2, 2)))


def test_buffer_is_copied():
    values = np.arange(8, dtype=np.float32)
    vol = Volume.from_values(values, 2, 2, 2)
    values[0] = 100.0
    assert vol.get(0, 0, 0) == 0.0
    assert not np.shares_memory(vol.data, values)

    clone = vol.copy()
    assert not np.shares_memory(clone.data, vol.data)
    assert np.array_equal(clone.data, vol.data)


def test_integer_input_becomes_float32():
    vol = Volume.from_array(np.arange(6).reshape(1, 2, 3))
    assert vol.dtype == np.float32
    assert vol.get(0, 1, 2) == 5.0


def test_as_array_is_read_only():
    vol = Volume.zeros(1, 2, 2)
    view = vol.as_array()
    assert view.shape == (1, 2, 2)
    with pytest.raises(ValueError):
        view[0, 0, 0] = 1.0


def test_volume_result_unwrap():
    vol = Volume.zeros(1, 1, 1)
    ok = VolumeResult.success(vol)
    assert ok.ok and bool(ok)
    assert ok.unwrap() is vol

    failed = VolumeResult.failure(ShapeMismatch("bad"))
    assert not failed.ok and not bool(failed)
    assert not failed.volume.is_valid
    with pytest.raises(ShapeMismatch):
        failed.unwrap()


def test_make_raises_allocation_failure(monkeypatch):
    def out_of_memory(*args, **kwargs):
        raise MemoryError("no memory")

    monkeypatch.setattr(np, "zeros", out_of_memory)
    monkeypatch.setattr(np, "empty", out_of_memory)

    with pytest.raises(AllocationFailure) as excinfo:
        make(4, 4, 4)
    assert isinstance(excinfo.value, MemoryError)


OPERATIONS = {
    "add": lambda eng, a, b: eng.add(a, b),
    "negate": lambda eng, a, b: eng.negate(a),
    "scale": lambda eng, a, b: eng.scale(a, 2.0),
    "multiply": lambda eng, a, b: eng.multiply(a, b),
    "convolve": lambda eng, a, b: eng.convolve(a, b, 1, 0),
}


@pytest.mark.parametrize("use_numba", [True, False], ids=["numba", "numpy"])
@pytest.mark.parametrize("op", list(OPERATIONS))
def test_operations_raise_allocation_failure(monkeypatch, op, use_numba):
    def out_of_memory(*args, **kwargs):
        raise MemoryError("no memory")

    a = Volume.zeros(2, 2, 2)
    b = Volume.zeros(2, 2, 2)
    engine = VolumeEngine(use_numba=use_numba)
    monkeypatch.setattr(np, "zeros", out_of_memory)
    monkeypatch.setattr(np, "empty", out_of_memory)

    # raised, not returned in the result
    with pytest.raises(AllocationFailure):
        OPERATIONS[op](engine, a, b)


def test_make_too_large_for_address_space():
    huge = 2 * 10**6 + 1
    with pytest.raises(AllocationFailure):
        make(huge, huge, huge)


@pytest.mark.parametrize("use_numba", [True, False], ids=["numba", "numpy"])
def test_convolve_too_large_output_raises_allocation_failure(use_numba):
    engine = VolumeEngine(use_numba=use_numba)
    x = Volume.zeros(1, 1, 1)
    w = Volume.zeros(1, 1, 1)
    # (1 - 1 + 2*10**6) // 1 + 1 per axis
    with pytest.raises(AllocationFailure):
        engine.convolve(x, w, 1, 10**6)
