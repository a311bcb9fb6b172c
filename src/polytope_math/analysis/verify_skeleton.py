"""
Skeleton Verification Functions
===============================

Verify structural properties of a generated geometry dict against the
closed-form counts and the regular-graph structure of each family.

These functions are in analysis/ layer because they depend on operators.
"""

import numpy as np
from typing import Dict

from ..builders.polytopes import expected_counts
from ..operators.incidence import build_d0, vertex_degrees, laplacian, count_components
from ..spec.constants import EPS_CLOSE, FAMILY_CUBE, FAMILY_ORTHOPLEX
from ..spec.structures import validate_geometry


def edge_lengths(geometry: dict) -> np.ndarray:
    """Euclidean length of every edge, in edge order."""
    V = np.asarray(geometry['V'], dtype=float)
    if not geometry['E']:
        return np.zeros(0)
    e = np.asarray(geometry['E'], dtype=int)
    return np.linalg.norm(V[e[:, 0]] - V[e[:, 1]], axis=1)


def verify_skeleton(geometry: dict) -> Dict:
    """
    Verify a polytope 1-skeleton.

    Checks:
        - contract (indices in range, i < j, no duplicates)
        - V, E match the closed form for the family
        - graph is regular and connected (degrees and components from d₀)
        - Tr(L₀) = 2E
        - vertex centroid at origin
        - cube: each edge flips exactly one populated axis
        - orthoplex: no edge joins a vertex to its negation

    Args:
        geometry: dict from builders.generate

    Returns:
        dict with verification results ('all_checks_pass' summarizes)
    """
    is_valid, errors = validate_geometry(geometry, strict=False)

    family = geometry['family']
    n = geometry['dimension']
    V = np.asarray(geometry['V'], dtype=float)
    E = geometry['E']
    n_V = len(V)

    V_exp, E_exp = expected_counts(family, n)
    counts_match = (n_V == V_exp) and (len(E) == E_exp)

    d0 = build_d0(n_V, E)
    degrees = vertex_degrees(d0)
    laplacian_trace = float(laplacian(d0).diagonal().sum())
    min_degree = int(degrees.min()) if n_V else 0
    max_degree = int(degrees.max()) if n_V else 0

    n_components = count_components(d0)
    is_connected = n_components <= 1
    # The 1D orthoplex is two opposite points with no edge between them
    expected_components = 2 if (family == FAMILY_ORTHOPLEX and n == 1) else min(n_V, 1)

    lengths = edge_lengths(geometry)
    centroid_norm = float(np.linalg.norm(V.mean(axis=0))) if n_V else 0.0

    result = {
        'family': family,
        'dimension': n,
        'contract_valid': is_valid,
        'contract_errors': errors,
        'V': n_V,
        'E': len(E),
        'expected_V': V_exp,
        'expected_E': E_exp,
        'counts_match': counts_match,
        'min_degree': min_degree,
        'max_degree': max_degree,
        'is_regular_graph': min_degree == max_degree,
        'laplacian_trace': laplacian_trace,
        'trace_is_2E': abs(laplacian_trace - 2 * len(E)) < EPS_CLOSE,
        'n_components': n_components,
        'is_connected': is_connected,
        'expected_components': expected_components,
        'min_edge_length': float(lengths.min()) if len(lengths) else 0.0,
        'max_edge_length': float(lengths.max()) if len(lengths) else 0.0,
        'centroid_norm': centroid_norm,
        'is_centred': centroid_norm < EPS_CLOSE,
    }

    family_ok = True
    if family == FAMILY_CUBE and E:
        eff_n = geometry['effective_dimension']
        e = np.asarray(E, dtype=int)
        diff = np.abs(V[e[:, 0], :eff_n] - V[e[:, 1], :eff_n])
        flips = np.sum(diff > EPS_CLOSE, axis=1)
        result['edges_flip_one_axis'] = bool(np.all(flips == 1))
        family_ok = result['edges_flip_one_axis']
    elif family == FAMILY_ORTHOPLEX and E:
        e = np.asarray(E, dtype=int)
        sums = np.abs(V[e[:, 0]] + V[e[:, 1]]).max(axis=1)
        result['no_opposite_edges'] = bool(np.all(sums > EPS_CLOSE))
        family_ok = result['no_opposite_edges']

    result['all_checks_pass'] = bool(
        is_valid and counts_match and result['is_regular_graph'] and result['trace_is_2E']
        and n_components == expected_components and result['is_centred'] and family_ok
    )

    return result
