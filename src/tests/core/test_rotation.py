"""
Rotation, Projection and Scale Tests
====================================

Tests the operator layer:
- Plane enumeration (count, order, bounds)
- Planar rotation formula and composition order
- Projection onto the first two axes
- Scale from the unrotated vertex set

Run: python -m pytest tests/core/test_rotation.py -v
"""

import numpy as np
import pytest
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from polytope_math.builders import generate
from polytope_math.operators import (
    rotation_planes,
    normalize_plane_angles,
    rotate,
    project,
    rotation_matrix,
    compute_scale,
)
from polytope_math.spec import (
    DEFAULT_SCALE,
    TARGET_RADIUS,
    VIEWPORT_SIZE,
    EPS_ROTATION,
)


# =============================================================================
# TEST A: Plane enumeration
# =============================================================================

@pytest.mark.parametrize("n", [2, 3, 4, 7, 17])
def test_plane_count(n):
    """planes(n) has n(n-1)/2 members."""
    assert len(rotation_planes(n)) == n * (n - 1) // 2


@pytest.mark.parametrize("n", [-2, 0, 1])
def test_no_planes_below_2d(n):
    """planes(n) is empty for n < 2."""
    assert rotation_planes(n) == []


def test_plane_order_and_bounds():
    """Ascending i then j, 0 <= i < j < n, no duplicates."""
    planes = rotation_planes(4)

    assert planes == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
    assert all(0 <= i < j < 4 for i, j in planes)
    assert len(set(planes)) == len(planes)


def test_planes_nested_across_dimensions():
    """planes(3) is a subset of planes(5): (i, j) identities survive."""
    assert set(rotation_planes(3)) <= set(rotation_planes(5))


# =============================================================================
# TEST B: Projection
# =============================================================================

def test_identity_projection():
    """No rotation: first two coordinates times scale."""
    out = project([[1, 2, 3]], [], 10)

    assert out.shape == (1, 2)
    assert np.allclose(out, [[10, 20]])


def test_zero_angles_are_identity():
    """All angles 0 behaves like no planes at all."""
    points = np.array([[1.0, -2.0, 0.5, 3.0], [0.0, 1.0, 2.0, -1.0]])
    planes = [(i, j, 0.0) for i, j in rotation_planes(4)]

    assert np.allclose(project(points, planes, 2.0), 2.0 * points[:, :2])


def test_quarter_turn_xy():
    """Plane (0,1) at π/2 maps (1,0,0) → (0,1,0)."""
    rotated = rotate([[1, 0, 0]], [(0, 1, np.pi / 2)])

    assert np.allclose(rotated, [[0, 1, 0]], atol=EPS_ROTATION)


def test_rotation_formula():
    """x_i' = c·x_i - s·x_j, x_j' = s·x_i + c·x_j on plane (1, 2)."""
    theta = 0.3
    c, s = np.cos(theta), np.sin(theta)
    rotated = rotate([[5.0, 2.0, 3.0]], [(1, 2, theta)])

    assert np.allclose(rotated, [[5.0, c * 2 - s * 3, s * 2 + c * 3]])


def test_projection_ignores_hidden_axes_without_rotation():
    """A point along axis 2 projects to the origin until a plane mixes it in."""
    assert np.allclose(project([[0, 0, 1]], [], 50), [[0, 0]])
    assert np.allclose(project([[0, 0, 1]], [(0, 2, np.pi / 2)], 50), [[-50, 0]])


def test_composition_order_is_enumerator_order():
    """Planes are applied in (i, j) order, whatever order they are given in."""
    point = [[1.0, 0.0, 0.0]]
    forward = [(0, 1, 0.7), (1, 2, 1.1)]
    shuffled = [(1, 2, 1.1), (0, 1, 0.7)]

    assert np.allclose(rotate(point, forward), rotate(point, shuffled))

    # Applying (1,2) first really is different: rotations do not commute
    manual = rotate(rotate(point, [(1, 2, 1.1)]), [(0, 1, 0.7)])
    assert not np.allclose(rotate(point, forward), manual)


def test_missing_axis_is_skipped():
    """A plane naming an axis the points lack is skipped, not an error."""
    points = [[1.0, 2.0]]
    planes = [(0, 4, 1.0), (2, 3, 0.5)]

    assert np.allclose(rotate(points, planes), points)


def test_mixed_length_points_skip_per_point():
    """Rows of different lengths: a plane is skipped only where an axis is missing."""
    points = [[1.0, 0.0, 0.0], [1.0, 0.0]]
    projected = project(points, [(0, 2, np.pi / 2)], 10)

    assert projected.shape == (2, 2)
    assert np.allclose(projected, [[0.0, 0.0], [10.0, 0.0]], atol=EPS_ROTATION)


def test_mixed_length_points_keep_row_order():
    points = [[0.5], [0.0, 2.0], [3.0]]

    assert np.allclose(project(points, [], 1.0), [[0.5, 0.0], [0.0, 2.0], [3.0, 0.0]])


def test_one_dimensional_points():
    """n = 1: y reads as 0."""
    assert np.allclose(project([[-0.5], [0.5]], [], 100), [[-50, 0], [50, 0]])


def test_empty_points():
    """Empty input gives an empty (0, 2) projection."""
    assert project([], [(0, 1, 0.5)], 10).shape == (0, 2)
    assert project(np.zeros((0, 4)), [], 10).shape == (0, 2)


def test_input_not_mutated():
    """Generator output is never modified by rotation."""
    geometry = generate("cube", 4)
    before = geometry['V'].copy()
    project(geometry['V'], [(0, 1, 0.4), (2, 3, 1.3)], 100)

    assert np.array_equal(geometry['V'], before)


def test_plane_angle_formats():
    """Triples, mappings and attribute objects are interchangeable."""
    class Plane:
        def __init__(self, i, j, angle):
            self.i, self.j, self.angle = i, j, angle

    as_triples = normalize_plane_angles([(0, 1, 0.5)])
    as_dicts = normalize_plane_angles([{'i': 0, 'j': 1, 'angle': 0.5}])
    as_objects = normalize_plane_angles([Plane(0, 1, 0.5)])

    assert as_triples == as_dicts == as_objects == [(0, 1, 0.5)]


def test_non_finite_scale_raises():
    """Scale must be finite."""
    with pytest.raises(ValueError):
        project([[1, 0]], [], float('inf'))


# =============================================================================
# TEST C: Rotation matrix
# =============================================================================

def test_rotation_matrix_matches_rotate():
    """rotate(points, planes) == points @ Rᵀ"""
    rng = np.random.default_rng(42)
    points = rng.normal(size=(10, 5))
    planes = [(i, j, rng.uniform(0, 2 * np.pi)) for i, j in rotation_planes(5)]

    R = rotation_matrix(5, planes)

    assert np.allclose(rotate(points, planes), points @ R.T)


def test_rotation_matrix_orthogonal():
    """R Rᵀ = I and det R = +1."""
    planes = [(i, j, 0.1 * (k + 1)) for k, (i, j) in enumerate(rotation_planes(6))]
    R = rotation_matrix(6, planes)

    assert np.allclose(R @ R.T, np.eye(6))
    assert abs(np.linalg.det(R) - 1.0) < EPS_ROTATION


def test_rotation_preserves_norms(geometry):
    """Rotated vertices keep their norms (orthogonal transform)."""
    n = geometry['dimension']
    planes = [(i, j, 0.37 * (k + 1)) for k, (i, j) in enumerate(rotation_planes(n))]
    rotated = rotate(geometry['V'], planes)

    assert np.allclose(np.linalg.norm(rotated, axis=1), np.linalg.norm(geometry['V'], axis=1))


# =============================================================================
# TEST D: Scale
# =============================================================================

def test_scale_empty_default():
    """scale([]) = DEFAULT_SCALE = 150"""
    assert compute_scale([]) == DEFAULT_SCALE == 150


def test_scale_from_max_norm():
    """scale([[2,0],[0,2]]) = 140/2 = 70"""
    assert compute_scale([[2, 0], [0, 2]]) == pytest.approx(70.0)


def test_scale_all_zero_default():
    """Degenerate all-zero vertex set falls back to the default."""
    assert compute_scale([[0, 0, 0]]) == DEFAULT_SCALE


def test_scale_mixed_length_points():
    """scale([[3,4],[1,0,0]]) = 140/5 = 28"""
    assert compute_scale([[3, 4], [1, 0, 0]]) == pytest.approx(28.0)


def test_projection_fits_viewport(geometry):
    """Projected vertices stay within TARGET_RADIUS at any rotation."""
    n = geometry['dimension']
    scale = compute_scale(geometry['V'])
    planes = [(i, j, 1.3 * (k + 1)) for k, (i, j) in enumerate(rotation_planes(n))]
    projected = project(geometry['V'], planes, scale)

    radius = np.linalg.norm(projected, axis=1).max()
    assert radius <= TARGET_RADIUS + 1e-9
    assert radius < VIEWPORT_SIZE / 2
