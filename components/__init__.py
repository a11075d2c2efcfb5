"""components — Plain dataclasses for session state, organised by domain.

Submodules
----------
spatial        Player, Item, Npc, Bed (+ default layout factories)
rpg            Inventory
resources      HoldProgress, GameClock
dev_log        DevLog

All public names are re-exported here so code can do
``from components import Player``.
"""

# ── Spatial ──────────────────────────────────────────────────────────
from components.spatial import (
    Player, Item, Npc, Bed, default_items, default_npcs, default_bed,
)

# ── RPG ──────────────────────────────────────────────────────────────
from components.rpg import Inventory

# ── Session resources / singletons ───────────────────────────────────
from components.resources import HoldProgress, GameClock

# ── Diagnostics ──────────────────────────────────────────────────────
from components.dev_log import DevLog

__all__ = [
    # spatial
    "Player", "Item", "Npc", "Bed",
    "default_items", "default_npcs", "default_bed",
    # rpg
    "Inventory",
    # resources
    "HoldProgress", "GameClock",
    # diagnostics
    "DevLog",
]
