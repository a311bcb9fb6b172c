"""
Animation Layer Constants
=========================

Timing and step sizes for the rotation driver.
Centralizing these prevents magic number proliferation.
"""

import math

# ---------------------------------------------------------------------
# ROTATION STEP
# ---------------------------------------------------------------------

# Per-frame angle increment for plane k (k = position in enumerator order):
#   Δθ_k = ANGLE_STEP · (k · ANGLE_STEP_SPREAD + 1)
# Later planes spin slightly faster, so the motion never looks periodic
# on a short time scale.
ANGLE_STEP = 0.002
ANGLE_STEP_SPREAD = 0.2

# Angles are kept in [0, 2π) by the animation step
FULL_TURN = 2 * math.pi

# Manual angle edits (slider range)
MANUAL_ANGLE_MIN = -math.pi
MANUAL_ANGLE_MAX = math.pi

# ---------------------------------------------------------------------
# TIMING
# ---------------------------------------------------------------------

# Coalesce rapid dimension changes before regenerating geometry
DEBOUNCE_SECONDS = 0.3

# Animation frame interval (~60 fps)
FRAME_INTERVAL = 1.0 / 60.0

# Timeout when joining the animation thread on stop()
STOP_TIMEOUT = 1.0

# ---------------------------------------------------------------------
# DISPLAY
# ---------------------------------------------------------------------

DEFAULT_DIMENSION = 3

# Axis names for plane labels; higher axes are numbered (1-based)
AXIS_NAMES = ('x', 'y', 'z', 'w', 'v', 'u')

# Render style
EDGE_COLOR = '#4a5568'
EDGE_WIDTH = 1.5
VERTEX_COLOR = '#4fd1c5'
VERTEX_RADIUS = 5
BACKGROUND_COLOR = '#1f2937'
