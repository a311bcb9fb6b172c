"""Constants and geometry contract."""

from .constants import (
    EPS_CLOSE,
    EPS_ROTATION,
    MIN_DIMENSION,
    MAX_DIMENSION,
    CUBE_DIM_CAP,
    VIEWPORT_SIZE,
    TARGET_RADIUS,
    DEFAULT_SCALE,
    FAMILY_SIMPLEX,
    FAMILY_CUBE,
    FAMILY_ORTHOPLEX,
    FAMILIES,
)

from .structures import (
    GeometryContract,
    validate_geometry,
    create_geometry,
)
