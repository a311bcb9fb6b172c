"""
Geometry builders - pure geometry construction, no operators dependency.

EXPORTS:
- Contract wrappers: generate, generate_all (return geometry dicts)
- Raw geometry: build_simplex, build_cube, build_orthoplex (return V, E tuples)
- Catalog: POLYTOPE_FAMILIES, describe, expected_counts, effective_dimension
"""

# === Contract wrappers (return geometry dicts) ===
from .polytopes import generate, generate_all

# === Raw geometry (return V, E tuples) ===
from .polytopes import build_simplex, build_cube, build_orthoplex

# === Catalog ===
from .polytopes import POLYTOPE_FAMILIES, describe, expected_counts, effective_dimension
