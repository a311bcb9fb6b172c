"""
Animation Layer
===============

Built on top of polytope_math (pure geometry).

Modules:
    constants  - Step sizes, timing, display style
    state      - Rotation planes with angle carry-over across dimensions
    loop       - Debouncer and cancelable animation loop
    visualizer - Orchestration: generate → scale → rotate/project
    plotting   - matplotlib rendering (imported lazily)

Classes:
    PolytopeVisualizer - Main entry point
    RotationState      - Per-plane angles
"""

from .constants import (
    ANGLE_STEP,
    ANGLE_STEP_SPREAD,
    DEBOUNCE_SECONDS,
    FRAME_INTERVAL,
    DEFAULT_DIMENSION,
)

from .state import RotationPlane, RotationState, plane_label
from .loop import Debouncer, AnimationLoop
from .visualizer import PolytopeVisualizer, ProjectedPolytope, clamp_dimension
