import logging
import math

import numpy as np
import pytest
from vecmath import Mat2, Mat3, Mat4, Vec2, Vec3, Vec4, LinearTransformation, det, configure


def test_det2():
    assert Mat2(1.0, 2.0, 3.0, 4.0).det() == -2.0

def test_det3():
    m = Mat3(2.0, 0.0, 1.0,
             1.0, 3.0, 2.0,
             1.0, 1.0, 1.0)
    assert m.det() == 0.0
    assert Mat3(6.0, 1.0, 1.0, 4.0, -2.0, 5.0, 2.0, 8.0, 7.0).det() == -306.0

def test_det4():
    m4 = Mat4(16.0, 12.0, 5.0, 2.0,
              5.0, 26.0, 7.0, 8.0,
              9.0, 114.0, 11.0, 12.0,
              13.0, 14.0, 15.0, 16.0)
    assert det(m4) == 3760.0

def test_det_matches_numpy():
    rng = np.random.default_rng(7)
    for cls in (Mat2, Mat3, Mat4):
        values = rng.uniform(-5.0, 5.0, cls.SIZE * cls.SIZE)
        m = cls(*values.tolist())
        expected = np.linalg.det(values.reshape(cls.SIZE, cls.SIZE))
        assert m.det() == pytest.approx(expected, rel=1e-9, abs=1e-9)

def test_det_of_identity():
    for cls in (Mat2, Mat3, Mat4):
        assert det(cls.identity()) == 1.0
        assert isinstance(cls.identity(), LinearTransformation)

def test_det_rejects_non_matrix():
    with pytest.raises(TypeError):
        det(Vec2(1.0, 2.0))

def test_transpose():
    assert Mat2(1.0, 2.0, 3.0, 4.0).transpose() == Mat2(1.0, 3.0, 2.0, 4.0)
    m = Mat3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0)
    assert m.transpose() == Mat3(1.0, 4.0, 7.0, 2.0, 5.0, 8.0, 3.0, 6.0, 9.0)
    m4 = Mat4(*range(16))
    assert m4.transpose().transpose() == m4
    assert m4.transpose()[0, 1] == 4

def test_swap_rows():
    m = Mat2(1.0, 2.0, 3.0, 4.0)
    assert m.swap_rows(0, 1) is None
    assert m == Mat2(3.0, 4.0, 1.0, 2.0)

def test_swap_rows_mat4():
    m = Mat4(*range(16))
    m.swap_rows(1, 3)
    assert m.get_row(1) == Vec4(12, 13, 14, 15)
    assert m.get_row(3) == Vec4(4, 5, 6, 7)

def test_swap_rows_invalid_raises():
    m = Mat2(1.0, 2.0, 3.0, 4.0)
    with pytest.raises(IndexError):
        m.swap_rows(0, 2)
    with pytest.raises(IndexError):
        m.swap_rows(-1, 0)
    assert m == Mat2(1.0, 2.0, 3.0, 4.0)

def test_get_set():
    m = Mat3.zero()
    m.set(1, 2, 5.0)
    assert m.get(1, 2) == 5.0
    assert m[1, 2] == 5.0
    assert m.get(2, 1) == 0.0

def test_get_out_of_range(caplog):
    m = Mat2.identity()
    with caplog.at_level(logging.WARNING, logger="vecmath.matrix"):
        assert m.get(2, 0) is None
        assert m.get_row(5) is None
    assert "out of range" in caplog.text

def test_set_out_of_range_is_noop(caplog):
    m = Mat2(1.0, 2.0, 3.0, 4.0)
    with caplog.at_level(logging.WARNING, logger="vecmath.matrix"):
        m.set(0, 2, 9.0)
        m.set_row(2, Vec2(9.0, 9.0))
    assert m == Mat2(1.0, 2.0, 3.0, 4.0)
    assert len(caplog.records) == 2

def test_strict_bounds():
    configure(strict_bounds=True)
    m = Mat2.identity()
    with pytest.raises(IndexError):
        m.get(0, 2)
    with pytest.raises(IndexError):
        m.set(3, 0, 1.0)
    with pytest.raises(IndexError):
        m.get_row(2)

def test_rows():
    m = Mat3.identity()
    m.set_row(0, Vec3(1.0, 2.0, 3.0))
    assert m.get_row(0) == Vec3(1.0, 2.0, 3.0)
    assert m.get_row(1) == Vec3(0.0, 1.0, 0.0)
    assert list(m.rows())[2] == Vec3(0.0, 0.0, 1.0)

def test_set_row_wrong_dimension():
    with pytest.raises(TypeError):
        Mat3.identity().set_row(0, Vec2(1.0, 2.0))

def test_from_rows():
    m = Mat2.from_rows(Vec2(1.0, 2.0), Vec2(3.0, 4.0))
    assert m == Mat2(1.0, 2.0, 3.0, 4.0)
    with pytest.raises(ValueError):
        Mat2.from_rows(Vec2(1.0, 2.0))

def test_constructor_size_check():
    with pytest.raises(ValueError):
        Mat2(1.0, 2.0, 3.0)

def test_identity():
    assert Mat2.identity() == Mat2(1.0, 0.0, 0.0, 1.0)
    assert Mat2() == Mat2.identity()
    assert Mat4.identity().to_tuple() == tuple(np.eye(4).ravel())

def test_arithmetic():
    a = Mat2(1.0, 2.0, 3.0, 4.0)
    b = Mat2(4.0, 3.0, 2.0, 1.0)
    assert a + b == Mat2(5.0, 5.0, 5.0, 5.0)
    assert a - b == Mat2(-3.0, -1.0, 1.0, 3.0)
    assert a * 2.0 == Mat2(2.0, 4.0, 6.0, 8.0)
    assert 2.0 * a == Mat2(2.0, 4.0, 6.0, 8.0)
    assert a / 2.0 == Mat2(0.5, 1.0, 1.5, 2.0)
    assert a == Mat2(1.0, 2.0, 3.0, 4.0)

def test_arithmetic_all_sizes():
    for cls in (Mat3, Mat4):
        i = cls.identity()
        assert (i * 4.0) / 2.0 == i + i
        assert i - i == cls.zero()

def test_divide_by_zero_propagates():
    m = Mat2(1.0, 0.0, -1.0, 0.0) / 0.0
    assert m.get(0, 0) == math.inf
    assert math.isnan(m.get(0, 1))
    assert m.get(1, 0) == -math.inf

def test_mixed_sizes_fail():
    with pytest.raises(TypeError):
        Mat2.identity() + Mat3.identity()
    assert Mat2.identity() != Mat3.identity()

def test_matrices_are_unhashable():
    with pytest.raises(TypeError):
        hash(Mat2.identity())

def test_repr():
    assert repr(Mat2(1.0, 2.0, 3.0, 4.0)) == "Mat2(1.0, 2.0, 3.0, 4.0)"
