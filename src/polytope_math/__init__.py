"""
POLYTOPE_MATH - Pure n-dimensional polytope geometry
====================================================

NO animation state. NO plotting.

Structure:
    builders/   - Vertex + edge generation (simplex, cube, orthoplex)
    operators/  - Rotation planes, rotation, projection, scale, incidence
    analysis/   - Skeleton verification
    spec/       - Constants and geometry contract

All builders return a GEOMETRY DICT with:
    - V, E (vertices and 1-skeleton edges)
    - family, dimension
    - metadata (name, description, effective_dimension, capped)
"""

from . import spec
from . import builders
from . import operators
from . import analysis
