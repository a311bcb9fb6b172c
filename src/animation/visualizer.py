"""
Polytope Visualizer
===================

Orchestration on top of polytope_math: holds the dimension, the three
generated geometries, the rotation state, and the latest 2D projection.

PIPELINE (per frame):
    geometry (n-D, regenerated only on dimension change)
        → scale = compute_scale(V)          (unrotated, once per geometry)
        → project(V, rotation triples, scale)
        → ProjectedPolytope (2D vertices + unchanged edges)

DIMENSION CHANGES:
    set_dimension() is debounced (DEBOUNCE_SECONDS). apply_dimension()
    regenerates every family and carries plane angles over by (i, j).
    If a generator raises, the previous geometry is kept and a
    UserWarning is emitted - the viewer degrades, it does not crash.
"""

import threading
import warnings
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import numpy as np

from polytope_math.builders import generate
from polytope_math.operators import compute_scale, project
from polytope_math.spec.constants import FAMILIES, MIN_DIMENSION, MAX_DIMENSION

from .constants import DEFAULT_DIMENSION, DEBOUNCE_SECONDS, FRAME_INTERVAL
from .loop import AnimationLoop, Debouncer
from .state import RotationState


@dataclass
class ProjectedPolytope:
    """One renderable card: 2D vertices and the edges of the same geometry."""
    key: str
    name: str
    description: str
    vertices: np.ndarray          # (V, 2)
    edges: List[Tuple[int, int]]


def clamp_dimension(n: int) -> int:
    """Clamp to [MIN_DIMENSION, MAX_DIMENSION]."""
    return int(min(max(int(n), MIN_DIMENSION), MAX_DIMENSION))


class PolytopeVisualizer:
    """
    Drives generation, rotation and projection for all polytope families.

    Usage:
        with PolytopeVisualizer(dimension=4) as viz:
            viz.play()
            ...
            frame = viz.projected
    """

    def __init__(self,
                 dimension: int = DEFAULT_DIMENSION,
                 debounce: float = DEBOUNCE_SECONDS,
                 interval: float = FRAME_INTERVAL,
                 on_frame: Optional[Callable[[List[ProjectedPolytope]], None]] = None,
                 autoplay: bool = False):
        """
        Args:
            dimension: initial dimension (clamped)
            debounce: delay before a dimension change is applied
            interval: animation frame interval in seconds
            on_frame: called with the new projection after every update
            autoplay: start the animation loop immediately
        """
        self._lock = threading.RLock()
        self.on_frame = on_frame

        self.dimension = clamp_dimension(dimension)
        self.active_dimension = self.dimension
        self.rotations = RotationState(self.dimension)
        self.is_generating = True

        # (geometry dict, scale) per family, display order
        self._geometries: List[Tuple[dict, float]] = []
        self.projected: List[ProjectedPolytope] = []

        self._debouncer = Debouncer(self.apply_dimension, delay=debounce)
        self._loop = AnimationLoop(self.tick, interval=interval)

        self.apply_dimension(self.dimension)

        if autoplay:
            self.play()

    # -----------------------------------------------------------------
    # Dimension
    # -----------------------------------------------------------------

    def set_dimension(self, n: int) -> None:
        """Request a dimension change (debounced)."""
        with self._lock:
            self.dimension = clamp_dimension(n)
            self.is_generating = True
        self._debouncer.submit(self.dimension)

    def flush(self) -> None:
        """Apply a pending dimension change now."""
        self._debouncer.flush()

    def apply_dimension(self, n: int) -> None:
        """Regenerate all families for dimension n and reproject."""
        n = clamp_dimension(n)
        with self._lock:
            try:
                geometries = []
                for family in FAMILIES:
                    geometry = generate(family, n)
                    geometries.append((geometry, compute_scale(geometry['V'])))
            except Exception as exc:
                warnings.warn(
                    f"Error generating polytopes for n={n}: {exc!r}. "
                    f"Keeping n={self.active_dimension}.",
                    UserWarning
                )
            else:
                self._geometries = geometries
                self.active_dimension = n
                self.rotations.set_dimension(n)
            finally:
                self.is_generating = False

            self._reproject()

    @property
    def geometries(self) -> List[dict]:
        with self._lock:
            return [g for g, _ in self._geometries]

    # -----------------------------------------------------------------
    # Projection
    # -----------------------------------------------------------------

    def project_all(self) -> List[ProjectedPolytope]:
        """Project every geometry with the current rotation angles."""
        with self._lock:
            triples = self.rotations.as_triples()
            return [
                ProjectedPolytope(
                    key=f"{geometry['name']}-{self.active_dimension}",
                    name=geometry['name'],
                    description=geometry['description'],
                    vertices=project(geometry['V'], triples, scale),
                    edges=geometry['E'],
                )
                for geometry, scale in self._geometries
            ]

    def _reproject(self) -> None:
        self.projected = self.project_all()
        if self.on_frame is not None:
            self.on_frame(self.projected)

    # -----------------------------------------------------------------
    # Rotation
    # -----------------------------------------------------------------

    def tick(self, steps: int = 1) -> List[ProjectedPolytope]:
        """Advance all planes by one animation step and reproject."""
        with self._lock:
            self.rotations.advance(steps)
            self._reproject()
            return self.projected

    def set_angle(self, i: int, j: int, angle: float) -> None:
        """Manual edit of one plane. Pauses a running animation first."""
        if self.is_playing:
            self.pause()
        with self._lock:
            self.rotations.set_angle(i, j, angle)
            self._reproject()

    def reset_rotations(self) -> None:
        with self._lock:
            self.rotations.reset()
            self._reproject()

    # -----------------------------------------------------------------
    # Playback
    # -----------------------------------------------------------------

    @property
    def is_playing(self) -> bool:
        return self._loop.is_running

    def play(self) -> None:
        self._loop.start()

    def pause(self) -> None:
        self._loop.stop()

    def toggle_play(self) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def close(self) -> None:
        """Stop the loop and drop any pending dimension change."""
        self.pause()
        self._debouncer.cancel()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
