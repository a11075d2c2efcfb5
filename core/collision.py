"""core/collision.py — Low-level AABB and radius primitives.

These live in ``core/`` (not ``logic/``) because both the interaction
resolver and the renderer's debug overlay need them.  Maze wall tests
are in ``logic/maze.py``; this module knows nothing about grids.
"""

from __future__ import annotations
import math


def aabb_overlap(ax: float, ay: float, aw: float, ah: float,
                 bx: float, by: float, bw: float, bh: float) -> bool:
    """Return True if box A and box B share interior area.

    Boxes are ``(x, y)`` top-left plus width / height.  Touching edges
    do not count as overlap.
    """
    return (ax < bx + bw and bx < ax + aw
            and ay < by + bh and by < ay + ah)


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(ax - bx, ay - by)


def within(ax: float, ay: float, bx: float, by: float, radius: float) -> bool:
    """True if the points are strictly closer than *radius*."""
    return distance(ax, ay, bx, by) < radius


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))
