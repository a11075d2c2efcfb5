"""logic/particles.py — Dust trail behind the bicycle.

Usage:
    particles = ParticleManager(rng)
    particles.emit_dust(x, y)        # once per frame while boosted
    particles.update(dt)             # ages and culls

Particles have no identity; the renderer just reads ``particles``.
"""

from __future__ import annotations

from core.rng import RandomSource
from core.tuning import get as _tun


class Particle:
    __slots__ = ("x", "y", "vx", "vy", "life", "max_life")

    def __init__(self, x: float, y: float, vx: float, vy: float, life: float):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.life = life
        self.max_life = life

    @property
    def fade(self) -> float:
        """Remaining life as 0..1, used for the alpha channel."""
        if self.max_life <= 0:
            return 0.0
        return max(0.0, min(self.life / self.max_life, 1.0))


class ParticleManager:
    """All live particles for the session."""

    def __init__(self, rng: RandomSource, max_particles: int | None = None):
        if max_particles is None:
            max_particles = int(_tun("particles", "max_particles", 512))
        self._rng = rng
        self._particles: list[Particle] = []
        self._max = max_particles

    @property
    def count(self) -> int:
        return len(self._particles)

    @property
    def particles(self) -> list[Particle]:
        return self._particles

    def emit(self, p: Particle):
        if len(self._particles) < self._max:
            self._particles.append(p)

    def emit_dust(self, x: float, y: float):
        """One dust mote drifting in a random direction."""
        speed = float(_tun("particles", "dust_speed", 50.0))
        life = float(_tun("particles", "dust_life", 1.0))
        self.emit(Particle(
            x=x, y=y,
            vx=self._rng.uniform(-speed, speed),
            vy=self._rng.uniform(-speed, speed),
            life=life,
        ))

    def update(self, dt: float):
        alive: list[Particle] = []
        for p in self._particles:
            p.x += p.vx * dt
            p.y += p.vy * dt
            p.life -= dt
            if p.life > 0:
                alive.append(p)
        self._particles = alive

    def clear(self):
        self._particles.clear()
