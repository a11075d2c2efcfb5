"""components.spatial — Player, items, NPCs, and the bed.

All coordinates and dimensions are in world units.  Every ``x, y`` is a
top-left corner; the boxes used for pickup are ``(x, y, w, h)``.
"""

from __future__ import annotations
from dataclasses import dataclass

from core.tuning import get as _tun


@dataclass
class Player:
    x: float = 0.0
    y: float = 0.0
    size: float = 80.0          # u, square body

    @classmethod
    def at_spawn(cls) -> "Player":
        """Fresh player centred in the room, as on first wake."""
        size = float(_tun("player", "size", 80.0))
        w = float(_tun("display", "width", 800))
        h = float(_tun("display", "height", 600))
        return cls(x=w / 2.0 - size / 2.0, y=h / 2.0 - size / 2.0, size=size)

    def box(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.size, self.size)


@dataclass
class Item:
    """A pickup lying in the dream world.

    ``collected`` only ever goes False → True.
    """
    name: str
    x: float
    y: float
    w: float
    h: float
    collected: bool = False
    grants_boost: bool = False

    def box(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.w, self.h)


@dataclass(frozen=True)
class Npc:
    name: str
    x: float
    y: float


@dataclass(frozen=True)
class Bed:
    x: float
    y: float


# ── Factories (read the shipped layout from tuning) ─────────────────

_ITEM_KEYS = ("bicycle", "knife")


def default_items() -> list[Item]:
    items: list[Item] = []
    defaults = {
        "bicycle": ("Bicycle", 100.0, 100.0, 30.0, 20.0, True),
        "knife":   ("Knife",   200.0, 200.0, 20.0, 20.0, False),
    }
    for key in _ITEM_KEYS:
        name, x, y, w, h, boost = defaults[key]
        sec = f"items.{key}"
        items.append(Item(
            name=str(_tun(sec, "name", name)),
            x=float(_tun(sec, "x", x)),
            y=float(_tun(sec, "y", y)),
            w=float(_tun(sec, "w", w)),
            h=float(_tun(sec, "h", h)),
            grants_boost=bool(_tun(sec, "grants_boost", boost)),
        ))
    return items


def default_npcs() -> list[Npc]:
    names = _tun("npcs", "names", ["Mysterious Figure", "Dream Guardian"])
    xs = _tun("npcs", "xs", [400.0, 600.0])
    ys = _tun("npcs", "ys", [300.0, 150.0])
    return [Npc(name=str(n), x=float(x), y=float(y))
            for n, x, y in zip(names, xs, ys)]


def default_bed() -> Bed:
    return Bed(x=float(_tun("interaction", "bed_x", 370.0)),
               y=float(_tun("interaction", "bed_y", 280.0)))
