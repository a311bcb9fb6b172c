"""
Regular Polytope Construction
=============================

Build the 1-skeleton (vertices + edges) of the three regular polytope
families that exist in every dimension n.

POLYTOPES INCLUDED:
    - n-Simplex   (V = n+1,  E = (n+1)·n/2)
    - n-Cube      (V = 2^n,  E = n·2^(n-1))
    - n-Orthoplex (V = 2n,   E = 2n(2n-1)/2 - n)

All vertices are n-dimensional rows, whatever the family, so one
rotation/projection pipeline handles all three.

BASE CASE:
    n < 1 gives EMPTY geometry (no vertices, no edges) for every family.
    This is a defined result, not an error.

CUBE CAP:
    Above CUBE_DIM_CAP the cube is built on the first CUBE_DIM_CAP axes only
    (remaining axes at 0). The geometry dict reports capped=True and the
    description carries the annotation so the viewer can disclose it.
"""

import numpy as np
from typing import Tuple, List, Dict

from ..spec.constants import (
    CUBE_DIM_CAP,
    CUBE_HALF_EDGE,
    ORTHOPLEX_RADIUS,
    FAMILY_SIMPLEX,
    FAMILY_CUBE,
    FAMILY_ORTHOPLEX,
    FAMILIES,
)
from ..spec.structures import create_geometry


# Display metadata, in display order
POLYTOPE_FAMILIES: Dict[str, Dict[str, str]] = {
    FAMILY_SIMPLEX: {
        'name': 'n-Simplex',
        'description': 'The tetrahedron analogue in dimension n',
    },
    FAMILY_CUBE: {
        'name': 'n-Cube',
        'description': 'The cube analogue in dimension n',
    },
    FAMILY_ORTHOPLEX: {
        'name': 'n-Orthoplex',
        'description': 'The octahedron analogue in dimension n',
    },
}


def _check_dimension(n) -> int:
    """Reject non-integer dimensions (bool included)."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"Dimension must be an integer, got {type(n).__name__}")
    return int(n)


def _empty(n: int) -> Tuple[np.ndarray, List[Tuple[int, int]]]:
    return np.zeros((0, max(n, 0))), []


def build_simplex(n: int) -> Tuple[np.ndarray, List[Tuple[int, int]]]:
    """
    Build an n-simplex centered at origin.

    CONSTRUCTION:
        Origin + the n standard basis points e_1..e_n, then subtract the
        centroid so the shape rotates about its own center.
        (Not the regular simplex: edges from the origin have length 1,
        the others √2. Same 1-skeleton.)

    TOPOLOGY:
        V = n + 1
        E = (n+1)·n/2 (complete graph K_{n+1})

    Returns:
        vertices: (n+1, n) array
        edges: list of edge tuples
    """
    n = _check_dimension(n)
    if n < 1:
        return _empty(n)

    raw = np.vstack([np.zeros((1, n)), np.eye(n)])

    # Per-coordinate mean of all n+1 raw vertices
    centroid = raw.mean(axis=0)
    vertices = raw - centroid

    # All pairs are edges (complete graph)
    n_V = n + 1
    edges = [(i, j) for i in range(n_V) for j in range(i+1, n_V)]

    return vertices, edges


def build_cube(n: int) -> Tuple[np.ndarray, List[Tuple[int, int]]]:
    """
    Build an n-cube (hypercube) with vertices at (±0.5, ..., ±0.5).

    CONSTRUCTION:
        effN = min(n, CUBE_DIM_CAP)
        Vertex i: coordinate j = +0.5 if bit j of i is set, else -0.5 (j < effN).
        Coordinates j >= effN are 0, so every row still has length n.

    EDGES:
        i ~ i XOR (1 << j) for j < effN, kept only when i < neighbor.
        O(effN · 2^effN), no pairwise distance test.

    TOPOLOGY:
        V = 2^effN
        E = effN · 2^(effN-1)

    Returns:
        vertices: (2^effN, n) array
        edges: list of edge tuples
    """
    n = _check_dimension(n)
    if n < 1:
        return _empty(n)

    eff_n = min(n, CUBE_DIM_CAP)
    n_V = 1 << eff_n

    idx = np.arange(n_V)
    bits = (idx[:, None] >> np.arange(eff_n)) & 1

    vertices = np.zeros((n_V, n))
    vertices[:, :eff_n] = np.where(bits == 1, CUBE_HALF_EDGE, -CUBE_HALF_EDGE)

    edges = []
    for i in range(n_V):
        for j in range(eff_n):
            neighbor = i ^ (1 << j)
            if i < neighbor:
                edges.append((i, neighbor))

    return vertices, edges


def build_orthoplex(n: int) -> Tuple[np.ndarray, List[Tuple[int, int]]]:
    """
    Build an n-orthoplex (cross-polytope) centered at origin.

    CONSTRUCTION:
        For each axis k: +e_k then -e_k (vertex 2k and 2k+1).

    EDGES:
        Every pair EXCEPT exact opposites (v_i == -v_j coordinate-wise).

    TOPOLOGY:
        V = 2n
        E = 2n(2n-1)/2 - n

    Returns:
        vertices: (2n, n) array
        edges: list of edge tuples
    """
    n = _check_dimension(n)
    if n < 1:
        return _empty(n)

    vertices = np.zeros((2 * n, n))
    for k in range(n):
        vertices[2 * k, k] = ORTHOPLEX_RADIUS
        vertices[2 * k + 1, k] = -ORTHOPLEX_RADIUS

    edges = []
    n_V = len(vertices)
    for i in range(n_V):
        for j in range(i+1, n_V):
            is_opposite = np.array_equal(vertices[i], -vertices[j])
            if not is_opposite:
                edges.append((i, j))

    return vertices, edges


_BUILDERS = {
    FAMILY_SIMPLEX: build_simplex,
    FAMILY_CUBE: build_cube,
    FAMILY_ORTHOPLEX: build_orthoplex,
}


def effective_dimension(family: str, n: int) -> int:
    """Axes actually populated by the builder (differs from n only for a capped cube)."""
    if family not in _BUILDERS:
        raise ValueError(f"Unknown polytope family: {family!r} (expected one of {FAMILIES})")
    n = max(_check_dimension(n), 0)
    if family == FAMILY_CUBE:
        return min(n, CUBE_DIM_CAP)
    return n


def describe(family: str, n: int) -> str:
    """Display description, annotated when the cube cap kicks in."""
    if family not in POLYTOPE_FAMILIES:
        raise ValueError(f"Unknown polytope family: {family!r} (expected one of {FAMILIES})")
    description = POLYTOPE_FAMILIES[family]['description']
    if effective_dimension(family, n) < n:
        description = f"{description} (capped at {CUBE_DIM_CAP}D for performance)."
    return description


def expected_counts(family: str, n: int) -> Tuple[int, int]:
    """
    Closed-form (V, E) for a family at dimension n.

    Uses the effective dimension, so a capped cube reports the counts
    of the cube that is actually built.
    """
    d = effective_dimension(family, n)
    if d < 1:
        return 0, 0
    if family == FAMILY_SIMPLEX:
        return d + 1, (d + 1) * d // 2
    if family == FAMILY_CUBE:
        return 1 << d, d * (1 << (d - 1))
    return 2 * d, 2 * d * (2 * d - 1) // 2 - d


def generate(family: str, n: int) -> dict:
    """
    Build the geometry dict for one family at dimension n.

    Pure and deterministic: a fresh dict (and vertex array) on every call.

    Args:
        family: "simplex", "cube" or "orthoplex"
        n: dimension (n < 1 → empty geometry)

    Returns:
        Contract-compliant geometry dict (see spec.structures)

    Raises:
        ValueError: unknown family
        TypeError: non-integer dimension
    """
    if family not in _BUILDERS:
        raise ValueError(f"Unknown polytope family: {family!r} (expected one of {FAMILIES})")
    n = _check_dimension(n)

    vertices, edges = _BUILDERS[family](n)

    return create_geometry(
        vertices, edges,
        family=family,
        dimension=n,
        name=POLYTOPE_FAMILIES[family]['name'],
        description=describe(family, n),
        effective_dimension=effective_dimension(family, n),
    )


def generate_all(n: int) -> List[dict]:
    """Geometry dicts for every family, in display order."""
    return [generate(family, n) for family in FAMILIES]


# Self-test
if __name__ == "__main__":
    print("=" * 60)
    print("REGULAR POLYTOPE CONSTRUCTION")
    print("=" * 60)

    for n in [1, 2, 3, 4, 12]:
        print(f"\n--- n = {n} ---")
        for geometry in generate_all(n):
            V_exp, E_exp = expected_counts(geometry['family'], n)
            print(f"  {geometry['name']:<12} V={geometry['n_V']:<5} E={geometry['n_E']:<6} "
                  f"(expected {V_exp}, {E_exp})  capped={geometry['capped']}")
