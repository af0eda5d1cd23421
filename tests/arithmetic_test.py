import numpy as np
import pytest

import voltools
from voltools import (
    Volume,
    VolumeEngine,
    ArithmeticOperations,
    ShapeMismatch,
    InvalidOperand
)

rng = np.random.default_rng(1234)


def random_volume(depth, rows, cols):
    return Volume.from_array(rng.standard_normal((depth, rows, cols)).astype(np.float32))


@pytest.fixture(params=[True, False], ids=["numba", "numpy"])
def ops(request):
    return ArithmeticOperations(use_numba=request.param)


def test_add_elementwise(ops):
    a = random_volume(2, 3, 4)
    b = random_volume(2, 3, 4)
    result = ops.add(a, b)
    assert result.ok
    assert result.volume.shape == (2, 3, 4)
    assert np.array_equal(result.volume.as_array(), a.as_array() + b.as_array())


def test_add_commutative_and_associative(ops):
    a, b, c = (random_volume(3, 4, 5) for _ in range(3))
    ab = ops.add(a, b).unwrap()
    ba = ops.add(b, a).unwrap()
    assert np.array_equal(ab.data, ba.data)

    left = ops.add(ab, c).unwrap()
    right = ops.add(a, ops.add(b, c).unwrap()).unwrap()
    assert np.allclose(left.data, right.data, rtol=1e-6, atol=1e-6)


def test_add_negation_is_zero(ops):
    a = random_volume(2, 5, 3)
    zero = ops.add(a, ops.negate(a).unwrap()).unwrap()
    assert zero.shape == a.shape
    assert np.all(zero.data == 0.0)


def test_add_shape_mismatch_returns_sentinel(ops):
    result = ops.add(Volume.zeros(2, 2, 2), Volume.zeros(2, 2, 3))
    assert not result.ok
    assert isinstance(result.error, ShapeMismatch)
    assert result.volume.shape == (0, 0, 0)
    assert not result.volume.is_valid


def test_add_shape_mismatch_debug_message(capsys):
    ops = ArithmeticOperations(debug=True)
    ops.add(Volume.zeros(2, 2, 2), Volume.zeros(2, 2, 3))
    assert "ShapeMismatch" in capsys.readouterr().out


def test_invalid_operand(ops):
    a = Volume.zeros(1, 2, 2)
    for result in (ops.add(a, Volume.invalid()),
                   ops.negate(Volume.invalid()),
                   ops.scale(Volume.invalid(), 2.0),
                   ops.multiply(Volume.invalid(), a)):
        assert not result.ok
        assert isinstance(result.error, InvalidOperand)
        assert not result.volume.is_valid


def test_negate_twice_is_bit_exact(ops):
    a = random_volume(3, 3, 3)
    twice = ops.negate(ops.negate(a).unwrap()).unwrap()
    assert np.array_equal(twice.data.view(np.uint32), a.data.view(np.uint32))


def test_scale_composition(ops):
    a = random_volume(2, 4, 4)
    s, t = 1.5, -0.25
    lhs = ops.scale(ops.scale(a, s).unwrap(), t).unwrap()
    rhs = ops.scale(a, s * t).unwrap()
    assert np.allclose(lhs.data, rhs.data, rtol=1e-6, atol=1e-7)


def test_scale_identity_and_zero(ops):
    a = random_volume(2, 3, 3)
    assert np.array_equal(ops.scale(a, 1).unwrap().data, a.data)
    assert np.all(ops.scale(a, 0).unwrap().data == 0.0)


def test_scale_propagates_nan_and_inf(ops):
    a = Volume.from_values([1.0, 2.0, 3.0, 4.0], 1, 2, 2)
    assert np.all(np.isnan(ops.scale(a, float("nan")).unwrap().data))
    assert np.all(np.isposinf(ops.scale(a, float("inf")).unwrap().data))


def test_multiply_is_per_channel_matmul(ops):
    a = random_volume(3, 2, 4)
    b = random_volume(3, 4, 5)
    result = ops.multiply(a, b)
    assert result.ok
    assert result.volume.shape == (3, 2, 5)
    expected = np.matmul(a.as_array().astype(np.float64), b.as_array().astype(np.float64))
    assert np.allclose(result.volume.as_array(), expected, rtol=1e-5, atol=1e-5)


def test_multiply_small_exact(ops):
    a = Volume.from_values([1, 2, 3, 4], 1, 2, 2)
    b = Volume.from_values([5, 6, 7, 8], 1, 2, 2)
    product = ops.multiply(a, b).unwrap()
    assert np.array_equal(product.as_array()[0], [[19, 22], [43, 50]])


@pytest.mark.parametrize("shape_a, shape_b", [
    ((2, 3, 4), (3, 4, 2)),  # channel counts differ
    ((2, 3, 4), (2, 3, 2)),  # inner extents differ
])
def test_multiply_rejects_incompatible_shapes(ops, shape_a, shape_b):
    result = ops.multiply(Volume.zeros(*shape_a), Volume.zeros(*shape_b))
    assert not result.ok
    assert isinstance(result.error, ShapeMismatch)
    assert not result.volume.is_valid


def test_outputs_never_alias_inputs(ops):
    a = random_volume(2, 2, 2)
    b = random_volume(2, 2, 2)
    before = a.data.copy()
    for result in (ops.add(a, b), ops.negate(a), ops.scale(a, 2.0), ops.multiply(a, b)):
        out = result.unwrap()
        assert not np.shares_memory(out.data, a.data)
        assert not np.shares_memory(out.data, b.data)
    assert np.array_equal(a.data, before)


def test_numba_and_numpy_agree():
    a = random_volume(4, 3, 6)
    b = random_volume(4, 6, 2)
    nb = ArithmeticOperations(use_numba=True)
    npc = ArithmeticOperations(use_numba=False)
    assert np.array_equal(nb.add(a, a).unwrap().data, npc.add(a, a).unwrap().data)
    assert np.array_equal(nb.scale(a, 3.0).unwrap().data, npc.scale(a, 3.0).unwrap().data)
    assert np.allclose(nb.multiply(a, b).unwrap().data, npc.multiply(a, b).unwrap().data,
                       rtol=1e-5, atol=1e-5)


def test_float64_precision_converts_operands():
    engine = VolumeEngine(precision='float64')
    a = Volume.from_values([1.0, 2.0], 1, 1, 2)
    out = engine.add(a, a).unwrap()
    assert out.dtype == np.float64
    assert np.array_equal(out.data, [2.0, 4.0])


def test_rejects_unknown_precision():
    with pytest.raises(ValueError):
        ArithmeticOperations(precision='float16')


def test_module_level_functions():
    a = Volume.from_values([1.0, -2.0], 1, 1, 2)
    assert np.array_equal(voltools.add(a, a).unwrap().data, [2.0, -4.0])
    assert np.array_equal(voltools.negate(a).unwrap().data, [-1.0, 2.0])
    assert np.array_equal(voltools.scale(a, 0.5).unwrap().data, [0.5, -1.0])
    b = Volume.from_values([3.0, 4.0], 1, 2, 1)
    assert np.array_equal(voltools.multiply(a, b).unwrap().data, [-5.0])
