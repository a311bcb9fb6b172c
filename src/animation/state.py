"""
Rotation State
==============

Per-plane angle state for the current dimension.

ANGLE CARRY-OVER:
    When the dimension changes, the plane set is regenerated from
    rotation_planes(n). A plane whose (i, j) pair still exists keeps its
    angle; new planes start at 0. Matching is by (i, j) identity, never by
    list position, so 3 → 5 → 3 leaves plane (0, 1) where it was.
"""

from dataclasses import dataclass
from typing import List, Tuple

from polytope_math.operators import rotation_planes

from .constants import (
    ANGLE_STEP,
    ANGLE_STEP_SPREAD,
    FULL_TURN,
    MANUAL_ANGLE_MIN,
    MANUAL_ANGLE_MAX,
    AXIS_NAMES,
)


@dataclass
class RotationPlane:
    """One rotation plane (i < j) and its current angle in radians."""
    i: int
    j: int
    angle: float = 0.0

    @property
    def key(self) -> Tuple[int, int]:
        return (self.i, self.j)


def plane_label(i: int, j: int) -> str:
    """'Plane x-y', 'Plane z-w', 'Plane x-7', ..."""
    def axis(k):
        return AXIS_NAMES[k] if k < len(AXIS_NAMES) else str(k + 1)
    return f"Plane {axis(i)}-{axis(j)}"


class RotationState:
    """
    Ordered rotation planes with angles, for one dimension at a time.

    Usage:
        state = RotationState(3)
        state.set_angle(0, 1, 0.5)
        state.set_dimension(5)       # (0, 1) keeps 0.5, 7 new planes at 0
        triples = state.as_triples() # feed to operators.project
    """

    def __init__(self, dimension: int):
        self.dimension = dimension
        self.planes: List[RotationPlane] = [
            RotationPlane(i, j) for i, j in rotation_planes(dimension)
        ]

    def __len__(self):
        return len(self.planes)

    def __iter__(self):
        return iter(self.planes)

    def set_dimension(self, dimension: int) -> None:
        """Regenerate planes for a new dimension, preserving angles by (i, j)."""
        previous = {p.key: p.angle for p in self.planes}
        self.dimension = dimension
        self.planes = [
            RotationPlane(i, j, previous.get((i, j), 0.0))
            for i, j in rotation_planes(dimension)
        ]

    def get_angle(self, i: int, j: int) -> float:
        for p in self.planes:
            if p.key == (i, j):
                return p.angle
        raise KeyError(f"No rotation plane ({i}, {j}) in dimension {self.dimension}")

    def set_angle(self, i: int, j: int, angle: float) -> None:
        """
        Set one plane's angle (manual edit). Unknown planes raise KeyError.

        The value is clamped to the slider range [MANUAL_ANGLE_MIN, MANUAL_ANGLE_MAX].
        """
        angle = min(max(float(angle), MANUAL_ANGLE_MIN), MANUAL_ANGLE_MAX)
        for p in self.planes:
            if p.key == (i, j):
                p.angle = angle
                return
        raise KeyError(f"No rotation plane ({i}, {j}) in dimension {self.dimension}")

    def advance(self, steps: int = 1) -> None:
        """
        Advance every plane by its per-frame increment, modulo 2π.

            Δθ_k = ANGLE_STEP · (k · ANGLE_STEP_SPREAD + 1)
        """
        for k, p in enumerate(self.planes):
            delta = ANGLE_STEP * (k * ANGLE_STEP_SPREAD + 1)
            p.angle = (p.angle + steps * delta) % FULL_TURN

    def reset(self) -> None:
        for p in self.planes:
            p.angle = 0.0

    def as_triples(self) -> List[Tuple[int, int, float]]:
        return [(p.i, p.j, p.angle) for p in self.planes]

    def labels(self) -> List[str]:
        return [plane_label(p.i, p.j) for p in self.planes]
