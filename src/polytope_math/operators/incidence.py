"""
Incidence Matrix and Graph Invariants of the 1-Skeleton
=======================================================

Pure combinatorics - NO coordinates needed beyond the vertex count.

DEFINITIONS:
    d₀: E × V  oriented edge-vertex incidence (sparse)
    L₀ = d₀ᵀd₀ (graph Laplacian on vertices)

IDENTITIES:
    1. Each row of d₀ has one -1 and one +1 (row sum 0)
    2. deg(v) = Σ_e |d₀[e, v]|, so Tr(L₀) = Σ deg(v) = 2E
    3. Off-diagonal nonzeros of L₀ are exactly the edges, so the
       components of L₀'s sparsity graph are the skeleton components

REGULARITY (vertex degree):
    Simplex:   n          (K_{n+1})
    Cube:      effN       (one neighbor per populated axis)
    Orthoplex: 2n - 2     (all but itself and its opposite)

The capped 11-cube has 2048 vertices and 11264 edges, so d₀ is kept
sparse (CSR).
"""

import numpy as np
from scipy.sparse import coo_matrix, csr_matrix
from scipy.sparse.csgraph import connected_components
from typing import List, Tuple


def build_d0(n_V: int, edges: List[Tuple[int, int]]) -> csr_matrix:
    """
    Oriented incidence d₀: C⁰ → C¹ for edges (i, j), i < j.

        d₀[e, i] = -1   (source)
        d₀[e, j] = +1   (target)

    Args:
        n_V: number of vertices
        edges: list of E tuples (i, j)

    Returns:
        (E, V) CSR matrix
    """
    E = len(edges)
    if E == 0:
        return csr_matrix((0, n_V))

    e = np.asarray(edges, dtype=int)
    rows = np.repeat(np.arange(E), 2)
    cols = e.ravel()
    data = np.tile([-1.0, 1.0], E)
    return coo_matrix((data, (rows, cols)), shape=(E, n_V)).tocsr()


def vertex_degrees(d0: csr_matrix) -> np.ndarray:
    """Degree of every vertex: column sums of |d₀|. Returns (V,) int array."""
    return np.asarray(abs(d0).sum(axis=0)).ravel().astype(int)


def laplacian(d0: csr_matrix) -> csr_matrix:
    """L₀ = d₀ᵀd₀ (V × V)."""
    return (d0.T @ d0).tocsr()


def count_components(d0: csr_matrix) -> int:
    """Number of connected components of the skeleton graph."""
    n_V = d0.shape[1]
    if n_V == 0:
        return 0
    n_components, _ = connected_components(laplacian(d0), directed=False)
    return int(n_components)
