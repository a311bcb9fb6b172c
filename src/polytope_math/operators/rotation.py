"""
N-D Rotation, Projection and Scale
==================================

Pure numerics - NO state, NO animation.

DEFINITIONS:
    Rotation plane (i, j), 0 <= i < j < n, angle θ:
        x_i' = cos θ · x_i - sin θ · x_j
        x_j' = sin θ · x_i + cos θ · x_j
        all other coordinates untouched.

    Composite rotation: planes applied one after another in the
    enumerator order (ascending i, then ascending j):
        R = G_K ··· G_2 · G_1

    Projection: orthographic onto the first two coordinates,
        (x, y) = scale · (x_0', x_1')
    A missing coordinate (n < 2) reads as 0.

NUMBER OF PLANES:
    n(n-1)/2 (one per unordered axis pair). n < 2 → no planes.

SCALE:
    scale = TARGET_RADIUS / max_v |v|, computed on the UNROTATED vertices.
    Rotations are orthogonal, so |v| is invariant and the picture keeps
    a constant size while it spins.
"""

import numpy as np
from typing import List, Tuple, Sequence, Any

from ..spec.constants import DEFAULT_SCALE, TARGET_RADIUS


def rotation_planes(n: int) -> List[Tuple[int, int]]:
    """
    Enumerate all coordinate rotation planes for dimension n.

    ORDER (part of the contract):
        ascending i, then ascending j.
        Callers match planes by (i, j) identity across dimension changes,
        never by position.

    Returns:
        list of n(n-1)/2 tuples (i, j) with i < j; [] for n < 2
    """
    if n < 2:
        return []
    return [(i, j) for i in range(n) for j in range(i+1, n)]


def _plane_triple(plane: Any) -> Tuple[int, int, float]:
    """Read (i, j, angle) from a triple, a mapping or an object with i/j/angle."""
    if isinstance(plane, dict):
        return int(plane['i']), int(plane['j']), float(plane['angle'])
    if hasattr(plane, 'angle'):
        return int(plane.i), int(plane.j), float(plane.angle)
    i, j, angle = plane
    return int(i), int(j), float(angle)


def normalize_plane_angles(plane_angles: Sequence[Any]) -> List[Tuple[int, int, float]]:
    """
    Convert plane/angle input to (i, j, angle) triples in enumerator order.

    Sorting is stable, so repeated planes keep their relative order.
    """
    triples = [_plane_triple(p) for p in plane_angles]
    return sorted(triples, key=lambda t: (t[0], t[1]))


def _as_points(points) -> np.ndarray:
    """Fresh float copy of the points, always 2D (V×n)."""
    arr = np.array(points, dtype=float, copy=True)
    if arr.ndim == 1:
        arr = arr.reshape(0, 0) if arr.size == 0 else arr.reshape(1, -1)
    if arr.ndim != 2:
        raise ValueError(f"Points must be a (V, n) array, got shape {arr.shape}")
    return arr


def _is_ragged(points) -> bool:
    """True for a plain sequence whose rows differ in length."""
    if isinstance(points, np.ndarray):
        return False
    try:
        lengths = {len(p) for p in points}
    except TypeError:
        return False
    return len(lengths) > 1


def rotate(points, plane_angles: Sequence[Any]) -> np.ndarray:
    """
    Apply the composed planar rotation to every point.

    The input is never modified: a working copy is rotated.

    Args:
        points: (V, n) array-like, every row of the same length
        plane_angles: sequence of (i, j, angle) triples, {i, j, angle}
            mappings, or objects with i/j/angle attributes

    Returns:
        (V, n) array of rotated points

    GUARD:
        A plane naming an axis the points do not have (possible while the
        dimension is changing) is skipped, not an error.
    """
    p = _as_points(points)
    n = p.shape[1]

    for i, j, angle in normalize_plane_angles(plane_angles):
        if i < 0 or j < 0 or i >= n or j >= n:
            continue
        c = np.cos(angle)
        s = np.sin(angle)
        x_i = p[:, i].copy()
        x_j = p[:, j].copy()
        p[:, i] = c * x_i - s * x_j
        p[:, j] = s * x_i + c * x_j

    return p


def project(points, plane_angles: Sequence[Any], scale: float) -> np.ndarray:
    """
    Rotate, then project onto the first two coordinates and scale.

    Args:
        points: (V, n) array-like, or a list of rows of differing
            lengths (each length is rotated on its own)
        plane_angles: see rotate()
        scale: uniform scale factor (see compute_scale)

    Returns:
        (V, 2) array of 2D points

    Example:
        project([[1, 2, 3]], [], 10) → [[10, 20]]
    """
    if not np.isfinite(scale):
        raise ValueError(f"Scale must be finite, got {scale}")

    if _is_ragged(points):
        # Rotate each row length separately so a plane is skipped only
        # for the points that lack one of its axes
        rows = list(points)
        projected = np.zeros((len(rows), 2))
        for length in {len(r) for r in rows}:
            idx = [k for k, r in enumerate(rows) if len(r) == length]
            projected[idx] = project([rows[k] for k in idx], plane_angles, scale)
        return projected

    rotated = rotate(points, plane_angles)
    n_V, n = rotated.shape

    projected = np.zeros((n_V, 2))
    projected[:, :min(n, 2)] = rotated[:, :2]

    return projected * scale


def rotation_matrix(n: int, plane_angles: Sequence[Any]) -> np.ndarray:
    """
    Build the composed n×n rotation matrix R = G_K ··· G_1.

    rotate(points, planes) == points @ R.T

    PROPERTY:
        R is orthogonal: R Rᵀ = I, det R = +1.
    """
    R = np.eye(n)
    for i, j, angle in normalize_plane_angles(plane_angles):
        if i < 0 or j < 0 or i >= n or j >= n:
            continue
        c = np.cos(angle)
        s = np.sin(angle)
        G = np.eye(n)
        G[i, i] = c
        G[i, j] = -s
        G[j, i] = s
        G[j, j] = c
        R = G @ R
    return R


def compute_scale(vertices) -> float:
    """
    Uniform scale so the furthest vertex lands at TARGET_RADIUS.

    Squared norms are accumulated first, one sqrt at the end.

    Returns:
        DEFAULT_SCALE for an empty (or all-zero) vertex set,
        TARGET_RADIUS / max|v| otherwise.
    """
    if _is_ragged(vertices):
        max_dist_sq = max(float(np.dot(v, v)) for v in map(np.asarray, vertices))
    else:
        V = _as_points(vertices)
        if len(V) == 0:
            return float(DEFAULT_SCALE)
        max_dist_sq = float(np.max(np.sum(V**2, axis=1)))
    max_dist = np.sqrt(max_dist_sq)

    return float(TARGET_RADIUS / max_dist) if max_dist > 0 else float(DEFAULT_SCALE)
