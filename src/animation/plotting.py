"""
Static rendering of projected polytopes with matplotlib.

Mirrors the browser cards: one square 350×350 panel per family, centred on
the origin, edges drawn under vertices.
"""

import numpy as np
from typing import List

from polytope_math.spec.constants import VIEWPORT_SIZE

from .constants import (
    EDGE_COLOR,
    EDGE_WIDTH,
    VERTEX_COLOR,
    VERTEX_RADIUS,
    BACKGROUND_COLOR,
)


def edge_segments(vertices: np.ndarray, edges) -> np.ndarray:
    """(E, 2, 2) array of segment endpoints for a LineCollection."""
    vertices = np.asarray(vertices, dtype=float)
    if len(edges) == 0:
        return np.zeros((0, 2, 2))
    e = np.asarray(edges, dtype=int)
    return np.stack([vertices[e[:, 0]], vertices[e[:, 1]]], axis=1)


def plot_projection(projected: List, save_path: str = None, dimension: int = None):
    """
    Plot a list of ProjectedPolytope side by side.

    Args:
        projected: output of PolytopeVisualizer.project_all()
        save_path: write PNG here if given
        dimension: shown in the figure title if given

    Returns:
        matplotlib Figure
    """
    # matplotlib imported only here to keep the core usable headless
    import matplotlib.pyplot as plt
    from matplotlib.collections import LineCollection

    n_panels = max(len(projected), 1)
    fig, axes = plt.subplots(1, n_panels, figsize=(4.5 * n_panels, 5), squeeze=False)
    half = VIEWPORT_SIZE / 2

    for ax, polytope in zip(axes[0], projected):
        ax.set_facecolor(BACKGROUND_COLOR)
        # SVG y grows downward; flip so the picture matches the browser
        points = np.asarray(polytope.vertices, dtype=float).reshape(-1, 2) * [1.0, -1.0]
        segments = edge_segments(points, polytope.edges)
        ax.add_collection(LineCollection(segments, colors=EDGE_COLOR, linewidths=EDGE_WIDTH))
        if len(points):
            ax.scatter(points[:, 0], points[:, 1],
                       s=(2 * VERTEX_RADIUS) ** 2, c=VERTEX_COLOR, zorder=3)
        ax.set_xlim(-half, half)
        ax.set_ylim(-half, half)
        ax.set_aspect('equal')
        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_title(f"{polytope.name}\n{polytope.description}", fontsize=9)

    if dimension is not None:
        fig.suptitle(f"Dimension n = {dimension}", fontsize=14)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Plot saved to: {save_path}")

    return fig
