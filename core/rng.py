"""core/rng.py — The random-source handle threaded through the simulation.

``Session`` owns one ``random.Random(seed)`` and hands it to maze
generation, dream-theme choice and dust particles, so a seed replays a
whole session.  Anything with these two methods will do (tests pass
scripted stand-ins).
"""

from __future__ import annotations
from typing import Protocol


class RandomSource(Protocol):
    def randrange(self, n: int) -> int: ...

    def uniform(self, a: float, b: float) -> float: ...
