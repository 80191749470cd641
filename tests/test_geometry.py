import numpy as np
import pytest

from geometry import angle_between, cross, normalize, rotate


@pytest.mark.parametrize("v", [(3.0, 4.0), (-2.0, 0.5), (1e-6, 0.0), (1e6, -1e6)])
def test_normalize_unit_length(v):
    assert np.linalg.norm(normalize(v)) == pytest.approx(1.0)


def test_normalize_degenerate_returns_zero():
    assert np.array_equal(normalize((1e-10, -1e-10)), np.zeros(2))
    assert np.array_equal(normalize((0.0, 0.0)), np.zeros(2))


def test_angle_between_basic():
    assert angle_between((1, 0), (0, 1)) == pytest.approx(90.0)
    assert angle_between((1, 0), (-1, 0)) == pytest.approx(180.0)
    assert angle_between((2, 0), (5, 0)) == pytest.approx(0.0)


def test_angle_between_symmetric():
    v1, v2 = (2.0, 1.5), (-0.3, 4.0)
    assert angle_between(v1, v2) == angle_between(v2, v1)


def test_angle_between_zero_vector_is_zero():
    assert angle_between((0, 0), (1, 1)) == 0.0
    assert angle_between((1, 1), (0, 0)) == 0.0


def test_angle_between_nearly_parallel_does_not_nan():
    angle = angle_between((0.1, 0.3), (0.1 * 3, 0.3 * 3))
    assert not np.isnan(angle)
    assert angle == pytest.approx(0.0, abs=1e-6)


def test_rotate_counter_clockwise():
    out = rotate((1.0, 0.0), 90)
    assert out.tolist() == pytest.approx([0.0, 1.0], abs=1e-12)
    out = rotate((1.0, 0.0), -90)
    assert out.tolist() == pytest.approx([0.0, -1.0], abs=1e-12)


def test_rotate_preserves_length_and_zero_is_identity():
    v = np.array([2.0, -0.7])
    assert np.linalg.norm(rotate(v, 37.0)) == pytest.approx(np.linalg.norm(v))
    assert np.array_equal(rotate(v, 0.0), v)


def test_cross_sign():
    assert cross((1, 0), (0, 1)) > 0
    assert cross((0, 1), (1, 0)) < 0
    assert cross((2, 0), (4, 0)) == 0
