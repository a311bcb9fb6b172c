"""
Analysis functions - depend on builders and operators layers.

Separated from builders to maintain clean layering:
    builders → spec
    operators → spec
    analysis → builders, operators → spec

Includes:
- verify_skeleton: counts, regularity, connectivity, centring per family
"""

from .verify_skeleton import verify_skeleton, edge_lengths
