"""simulation/session.py — The one owned aggregate of session state.

Everything the simulation mutates lives on a ``Session``; there is no
module-level game state.  The mode controller holds the only reference
that writes to it, and the renderer only ever sees a ``Snapshot``.
"""

from __future__ import annotations
import random
from dataclasses import dataclass, field
from enum import Enum

from components import (
    Player, Item, Npc, Bed, Inventory, HoldProgress, GameClock,
    default_items, default_npcs, default_bed,
)
from logic.dialogue import Dialogue, DialogueEngine
from logic.dream_worlds import DreamWorld
from logic.maze import Cell, MazeGrid
from logic.menu import StartMenu
from logic.particles import ParticleManager
from logic.transition import Transition, TransitionKind


class Phase(Enum):
    START_MENU = "start_menu"
    SETTINGS_MENU = "settings_menu"
    CREDITS = "credits"
    AWAKE = "awake"
    ASLEEP = "asleep"
    DREAMING = "dreaming"


class InvariantError(RuntimeError):
    """Session state that the controller should have made impossible."""


@dataclass
class Session:
    rng: random.Random
    phase: Phase = Phase.START_MENU
    player: Player = field(default_factory=Player.at_spawn)
    bed: Bed = field(default_factory=default_bed)
    items: list[Item] = field(default_factory=default_items)
    npcs: list[Npc] = field(default_factory=default_npcs)
    inventory: Inventory = field(default_factory=Inventory)
    dialogue: DialogueEngine = field(default_factory=DialogueEngine)
    hold: HoldProgress = field(default_factory=HoldProgress.from_tuning)
    menu: StartMenu = field(default_factory=StartMenu)
    clock: GameClock = field(default_factory=GameClock)
    transition: Transition | None = None
    maze: MazeGrid | None = None
    world: DreamWorld | None = None
    speed_boost: bool = False
    particles: ParticleManager | None = None

    def __post_init__(self):
        if self.particles is None:
            self.particles = ParticleManager(self.rng)

    @classmethod
    def new(cls, seed: int | None = None) -> "Session":
        return cls(rng=random.Random(seed))

    @property
    def transition_kind(self) -> TransitionKind:
        return self.transition.kind if self.transition else TransitionKind.NONE

    @property
    def alpha(self) -> float:
        return self.transition.alpha if self.transition else 0.0

    def snapshot(self) -> "Snapshot":
        d = self.dialogue.current
        return Snapshot(
            phase=self.phase,
            transition=self.transition_kind,
            alpha=self.alpha,
            maze=None if self.maze is None else MazeView.of(self.maze),
            world=self.world,
            player=(self.player.x, self.player.y, self.player.size),
            bed=(self.bed.x, self.bed.y),
            items=tuple((i.name, i.x, i.y, i.w, i.h, i.collected)
                        for i in self.items),
            npcs=tuple((n.name, n.x, n.y) for n in self.npcs),
            dialogue=None if d is None else DialogueView.of(d),
            inventory=tuple(self.inventory.items),
            inventory_open=self.inventory.is_open,
            wake_fraction=self.hold.fraction,
            menu_index=self.menu.index,
            particles=tuple((p.x, p.y, p.fade)
                            for p in self.particles.particles),
        )


# ── Read-only views for the renderer ────────────────────────────────

@dataclass(frozen=True)
class MazeView:
    width: int
    height: int
    cell_size: float
    cells: tuple[tuple[Cell, ...], ...]

    @classmethod
    def of(cls, grid: MazeGrid) -> "MazeView":
        return cls(grid.width, grid.height, grid.cell_size,
                   tuple(tuple(row) for row in grid.cells))


@dataclass(frozen=True)
class DialogueView:
    text: str
    speaker: str
    labels: tuple[str, ...]
    selected_index: int

    @classmethod
    def of(cls, d: Dialogue) -> "DialogueView":
        return cls(d.text, d.speaker, tuple(c.label for c in d.choices),
                   d.selected_index)


@dataclass(frozen=True)
class Snapshot:
    phase: Phase
    transition: TransitionKind
    alpha: float
    maze: MazeView | None
    world: DreamWorld | None
    player: tuple[float, float, float]
    bed: tuple[float, float]
    items: tuple
    npcs: tuple
    dialogue: DialogueView | None
    inventory: tuple[str, ...]
    inventory_open: bool
    wake_fraction: float
    menu_index: int
    particles: tuple
