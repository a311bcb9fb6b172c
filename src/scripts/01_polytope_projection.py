"""
Polytope Projection Table and Snapshot
======================================

QUESTION: What do the three regular polytope families look like, and how
large are their skeletons, as the dimension grows?

INPUTS
------

  - Dimension range (--min-dim, --max-dim) for the count table
  - Dimension n (--dim) and number of animation steps (--steps) for
    the projection / snapshot

OUTPUTS
-------

  - Table of V, E per family and dimension, with the verification status
  - Projected 2D coordinates (--coords)
  - PNG with the three projections (--plot PATH)

EXPECTED OUTPUT (counts):
      n |  Simplex V/E |      Cube V/E | Orthoplex V/E
      3 |      4 /   6 |     8 /    12 |     6 /    12
      4 |      5 /  10 |    16 /    32 |     8 /    24
     12 |     13 /  78 |  2048 / 11264 |    24 /   264   (cube capped at 11D)

Usage:
    python3 scripts/01_polytope_projection.py --min-dim 1 --max-dim 12
    python3 scripts/01_polytope_projection.py --dim 4 --steps 300 --coords
    python3 scripts/01_polytope_projection.py --dim 5 --steps 500 --plot polytopes_5d.png
"""

import sys
from pathlib import Path

# Find src directory robustly (works from any location)
def _find_src():
    """Find src/ by looking for polytope_math/ subdirectory."""
    current = Path(__file__).resolve().parent
    for _ in range(10):  # max 10 levels up
        if (current / 'polytope_math').is_dir():
            return current
        candidate = current / 'src'
        if (candidate / 'polytope_math').is_dir():
            return candidate
        current = current.parent
    raise RuntimeError("Cannot find src/polytope_math directory")

sys.path.insert(0, str(_find_src()))

import numpy as np
from polytope_math.builders import generate_all
from polytope_math.analysis import verify_skeleton
from polytope_math.spec.constants import MIN_DIMENSION, MAX_DIMENSION, CUBE_DIM_CAP
from animation import PolytopeVisualizer


def run_count_table(min_dim: int, max_dim: int):
    """
    Print V/E per family for each dimension and verify every skeleton.

    Returns number of dimensions where all checks pass.
    """
    print("=" * 72)
    print("POLYTOPE SKELETON COUNTS")
    print("=" * 72)
    print(f"{'n':>4} | {'Simplex V/E':>14} | {'Cube V/E':>15} | {'Orthoplex V/E':>14} | Checks")
    print("-" * 72)

    n_pass = 0
    for n in range(min_dim, max_dim + 1):
        geometries = generate_all(n)
        results = [verify_skeleton(g) for g in geometries]
        cells = [f"{g['n_V']:>5} / {g['n_E']:>5}" for g in geometries]
        ok = all(r['all_checks_pass'] for r in results)
        n_pass += ok
        note = f"  (cube capped at {CUBE_DIM_CAP}D)" if geometries[1]['capped'] else ""
        print(f"{n:>4} | {cells[0]:>14} | {cells[1]:>15} | {cells[2]:>14} | "
              f"{'✓' if ok else '✗'}{note}")

    print()
    print(f"SUMMARY: {n_pass}/{max_dim - min_dim + 1} dimensions pass all checks")
    return n_pass


def run_projection(dim: int, steps: int, show_coords: bool, plot_path: str = None):
    """Advance the rotation `steps` frames and print / plot the projection."""
    viz = PolytopeVisualizer(dimension=dim)
    try:
        projected = viz.tick(steps) if steps > 0 else viz.projected

        print()
        print("=" * 72)
        print(f"PROJECTION n={viz.active_dimension} after {steps} steps "
              f"({len(viz.rotations)} rotation planes)")
        print("=" * 72)
        for polytope in projected:
            radius = np.linalg.norm(polytope.vertices, axis=1).max() if len(polytope.vertices) else 0.0
            print(f"  {polytope.name:<12} V={len(polytope.vertices):<5} E={len(polytope.edges):<6} "
                  f"max radius={radius:7.2f}  {polytope.description}")
            if show_coords:
                for k, (x, y) in enumerate(polytope.vertices):
                    print(f"      v{k:<4} ({x:9.3f}, {y:9.3f})")

        if plot_path:
            from animation.plotting import plot_projection
            plot_projection(projected, plot_path, dimension=viz.active_dimension)
    finally:
        viz.close()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="n-D polytope skeleton counts and 2D projections")
    parser.add_argument("--min-dim", type=int, default=MIN_DIMENSION, help="First dimension in the count table")
    parser.add_argument("--max-dim", type=int, default=MAX_DIMENSION, help="Last dimension in the count table")
    parser.add_argument("--dim", type=int, default=None, help="Project this dimension")
    parser.add_argument("--steps", type=int, default=0, help="Animation steps before projecting")
    parser.add_argument("--coords", action="store_true", help="Print projected vertex coordinates")
    parser.add_argument("--plot", type=str, default=None, help="Save the projection to this PNG")
    args = parser.parse_args()

    if args.dim is None:
        run_count_table(args.min_dim, args.max_dim)
    else:
        run_projection(args.dim, args.steps, args.coords, args.plot)
