"""logic/transition.py — Timed fade between two phases.

A ``Transition`` is created when a fade starts and thrown away when it
finishes; there is no "idle" transition object.  ``alpha`` is derived
from ``elapsed`` rather than stored, so it can't drift out of
``[0, 1]`` or run backwards.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum

from core.constants import TIME_EPSILON
from core.tuning import get as _tun


class TransitionKind(Enum):
    NONE = "none"
    TO_AWAKE = "to_awake"
    TO_DREAM = "to_dream"


@dataclass
class Transition:
    kind: TransitionKind
    duration: float = 1.0
    elapsed: float = 0.0

    @classmethod
    def start(cls, kind: TransitionKind) -> "Transition":
        return cls(kind=kind,
                   duration=float(_tun("transition", "duration", 1.0)))

    @property
    def alpha(self) -> float:
        if self.done:
            return 1.0
        return max(0.0, min(self.elapsed / self.duration, 1.0))

    @property
    def done(self) -> bool:
        return self.elapsed >= self.duration - TIME_EPSILON

    def advance(self, dt: float) -> bool:
        """Add *dt* seconds.  Returns True once the fade has completed."""
        if dt > 0 and math.isfinite(dt):
            self.elapsed += dt
        return self.done
