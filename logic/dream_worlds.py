"""logic/dream_worlds.py — The catalog of dream themes.

A theme is chosen uniformly at random each time the player commits to
sleep and is forgotten again on waking.  It only changes the backdrop
colour and the caption; the maze is generated separately.
"""

from __future__ import annotations
from dataclasses import dataclass

from core.rng import RandomSource


@dataclass(frozen=True)
class DreamWorld:
    name: str
    background: tuple[int, int, int]


CATALOG: tuple[DreamWorld, ...] = (
    DreamWorld("Purple Forest",  (100, 50, 150)),
    DreamWorld("Orange Desert",  (200, 100, 50)),
    DreamWorld("Blue Ocean",     (50, 150, 200)),
    DreamWorld("Pink Mountains", (150, 50, 100)),
    DreamWorld("Green Fields",   (100, 200, 50)),
    DreamWorld("Golden Plains",  (200, 150, 100)),
)


def pick_world(rng: RandomSource) -> DreamWorld:
    return CATALOG[rng.randrange(len(CATALOG))]
