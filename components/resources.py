"""components.resources — Session-level singletons (not per-entity)."""

from __future__ import annotations
from dataclasses import dataclass

from core.constants import TIME_EPSILON
from core.tuning import get as _tun


@dataclass
class HoldProgress:
    """Seconds the interact key has been held while dreaming.

    ``tick`` returns True exactly once per completed hold: on the frame
    the accumulated time first reaches ``threshold``.  Firing and
    releasing both reset the accumulator to zero.
    """
    elapsed: float = 0.0
    threshold: float = 2.0

    @classmethod
    def from_tuning(cls) -> "HoldProgress":
        return cls(threshold=float(_tun("interaction", "wake_hold_time", 2.0)))

    def tick(self, held: bool, dt: float) -> bool:
        if not held:
            self.elapsed = 0.0
            return False
        self.elapsed += dt
        if self.elapsed >= self.threshold - TIME_EPSILON:
            self.elapsed = 0.0
            return True
        return False

    def reset(self) -> None:
        self.elapsed = 0.0

    @property
    def fraction(self) -> float:
        """0..1 fill of the wake bar."""
        if self.threshold <= 0:
            return 0.0
        return min(self.elapsed / self.threshold, 1.0)


@dataclass
class GameClock:
    """Monotonic session time — accumulated ``dt`` since start.

    Only used to timestamp dev-log entries.
    """
    time: float = 0.0
