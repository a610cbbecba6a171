"""Tests for 2D affine matrix algebra."""

import numpy as np
import pytest

from framer import Affine2D, Point2D, Rotation, TransformError, rotation, rotation_about
from framer.core.errors import GeometryError

# Named tolerances for tests (PLR2004)
ABS_TOL = 1e-12
ROUND_TRIP_TOL = 1e-9


def test_identity_leaves_points():
    p = Point2D(3.5, -2.0)
    assert Affine2D.identity().apply(p) == p


def test_translate_and_scale():
    assert Affine2D.translate(2.0, 3.0).apply((1.0, 1.0)) == Point2D(3.0, 4.0)
    assert Affine2D.scale(2.0, 0.5).apply((4.0, 4.0)) == Point2D(8.0, 2.0)


def test_composition_applies_left_operand_first():
    """Translate then scale differs from scale then translate."""
    t = Affine2D.translate(1.0, 0.0)
    s = Affine2D.scale(2.0, 2.0)

    assert (t @ s).apply((0.0, 0.0)) == Point2D(2.0, 0.0)
    assert (s @ t).apply((0.0, 0.0)) == Point2D(1.0, 0.0)
    assert t.concat(s) == t @ s


def test_composition_matches_sequential_application():
    m1 = Affine2D(0.3, -1.2, 0.7, 2.0, 5.0, -4.0)
    m2 = Affine2D(1.5, 0.2, -0.4, 0.9, -1.0, 3.0)
    p = Point2D(2.0, 7.0)

    direct = (m1 @ m2).apply(p)
    stepwise = m2.apply(m1.apply(p))

    assert direct.x == pytest.approx(stepwise.x, abs=ABS_TOL)
    assert direct.y == pytest.approx(stepwise.y, abs=ABS_TOL)


def test_to_numpy_matches_row_vector_product():
    m = Affine2D(0.3, -1.2, 0.7, 2.0, 5.0, -4.0)
    p = np.array([2.0, 7.0, 1.0])

    expected = p @ m.to_numpy()
    got = m.apply((2.0, 7.0))

    np.testing.assert_allclose([got.x, got.y, 1.0], expected, atol=ABS_TOL)


def test_quarter_turn_entries_are_exact():
    assert rotation(Rotation.NONE) == Affine2D.identity()
    assert rotation(Rotation.CW_90) == Affine2D(0.0, 1.0, -1.0, 0.0, 0.0, 0.0)
    assert rotation(Rotation.CW_180) == Affine2D(-1.0, 0.0, 0.0, -1.0, 0.0, 0.0)
    assert rotation(Rotation.CW_270) == Affine2D(0.0, -1.0, 1.0, 0.0, 0.0, 0.0)
    assert rotation("cw_90") == rotation(Rotation.CW_90)


def test_cw_90_then_cw_270_is_full_turn():
    points = np.random.randn(50, 2) * 100

    once = rotation(Rotation.CW_90).apply_array(points)
    back = rotation(Rotation.CW_270).apply_array(once)

    np.testing.assert_allclose(back, points, atol=ROUND_TRIP_TOL)
    assert rotation(Rotation.CW_90) @ rotation(Rotation.CW_270) == Affine2D.identity()


def test_four_quarter_turns_are_identity():
    r = rotation(Rotation.CW_90)
    assert r @ r @ r @ r == Affine2D.identity()
    assert r @ r == rotation(Rotation.CW_180)


def test_rotation_about_keeps_center_fixed():
    m = rotation_about(Rotation.CW_90, 0.5, 0.5)

    assert m.apply((0.5, 0.5)) == Point2D(0.5, 0.5)
    assert m.apply((1.0, 0.5)) == Point2D(0.5, 1.0)


def test_inverse_round_trip():
    m = Affine2D(0.3, -1.2, 0.7, 2.0, 5.0, -4.0)
    points = np.random.randn(20, 2) * 50

    back = m.inverse().apply_array(m.apply_array(points))

    np.testing.assert_allclose(back, points, atol=ROUND_TRIP_TOL)
    assert (m @ m.inverse()).is_close(Affine2D.identity())


def test_inverse_of_singular_matrix_raises():
    with pytest.raises(TransformError, match="singular"):
        Affine2D.scale(0.0, 1.0).inverse()


def test_apply_inplace_writes_into_buffer():
    points = np.array([[1.0, 2.0], [3.0, 4.0]])

    out = Affine2D.translate(1.0, -1.0).apply_inplace(points)

    assert out is points
    np.testing.assert_array_equal(points, [[2.0, 1.0], [4.0, 3.0]])


def test_apply_array_rejects_bad_shape():
    with pytest.raises(GeometryError):
        Affine2D.identity().apply_array(np.zeros((3, 3)))


def test_translation_and_determinant():
    m = Affine2D.scale(2.0, 3.0) @ Affine2D.translate(4.0, 5.0)

    assert m.translation == (4.0, 5.0)
    assert m.determinant == pytest.approx(6.0)


def test_apply_inplace_rejects_read_only_buffer():
    points = np.array([[1.0, 2.0]])
    points.flags.writeable = False

    with pytest.raises(GeometryError, match="read-only"):
        Affine2D.identity().apply_inplace(points)
