"""Operators - planar rotation, projection, scale, skeleton incidence."""

from .rotation import (
    rotation_planes,
    normalize_plane_angles,
    rotate,
    project,
    rotation_matrix,
    compute_scale,
)

from .incidence import (
    build_d0,
    vertex_degrees,
    laplacian,
    count_components,
)
