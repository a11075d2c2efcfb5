"""logic/interaction.py — Turns geometry and key presses into intents.

Nothing in here mutates session state except ``HoldProgress``, which
belongs to the dreaming interaction itself.  Each resolver returns a
list of small intent objects; the mode controller applies them in
order, so ownership of the player, inventory, dialogue and transition
stays in one place.

Intent objects
--------------
``MovePlayer``          commit a new player position
``CollectItem``         mark ``items[index]`` collected and add its name
``OpenDialogue``        show a conversation (last one in a frame wins)
``ToggleInventory``     flip the inventory panel
``RequestTransition``   ask the controller to start a fade
``EmitDust``            spawn one dust mote
"""

from __future__ import annotations
from dataclasses import dataclass, field

from core.collision import aabb_overlap, within, clamp
from core.constants import ACTION_INTERACT, ACTION_INVENTORY
from core.tuning import get as _tun
from components import Player, Item, Npc, Bed, HoldProgress
from logic.dialogue import Choice, bed_dialogue, npc_dialogue
from logic.input_manager import InputFrame
from logic.maze import MazeGrid, is_wall
from logic.transition import TransitionKind


# ── Intent objects (resolvers return these; the controller applies) ──

@dataclass(frozen=True)
class MovePlayer:
    x: float
    y: float


@dataclass(frozen=True)
class CollectItem:
    index: int
    name: str
    grants_boost: bool = False


@dataclass(frozen=True)
class OpenDialogue:
    text: str
    speaker: str
    choices: list[Choice] = field(default_factory=list)


@dataclass(frozen=True)
class ToggleInventory:
    pass


@dataclass(frozen=True)
class RequestTransition:
    kind: TransitionKind


@dataclass(frozen=True)
class EmitDust:
    x: float
    y: float


# ── Movement ────────────────────────────────────────────────────────

def player_speed(boost: bool = False) -> float:
    speed = float(_tun("player", "speed", 150.0))
    if boost:
        speed *= float(_tun("player", "boost_mult", 1.5))
    return speed


def wall_test_point(player: Player, x: float | None = None,
                y: float | None = None) -> tuple[float, float]:
    """The point inside the body that is tested against maze walls."""
    px = player.x if x is None else x
    py = player.y if y is None else y
    return (px + float(_tun("player", "wall_test_x", 40.0)),
            py + float(_tun("player", "wall_test_y", 40.0)))


def propose_move(player: Player, direction: tuple[float, float], dt: float,
                 grid: MazeGrid | None = None,
                 boost: bool = False) -> tuple[float, float]:
    """Return where the player ends up this frame.

    The step is integrated, clamped to the room, then validated: with a
    maze, a destination whose wall-test point is a wall rolls back to the
    old position.  No sliding along walls.
    """
    dx, dy = direction
    speed = player_speed(boost)
    room_w = float(_tun("display", "width", 800))
    room_h = float(_tun("display", "height", 600))
    nx = clamp(player.x + dx * speed * dt, 0.0, room_w - player.size)
    ny = clamp(player.y + dy * speed * dt, 0.0, room_h - player.size)
    if grid is not None and is_wall(grid, *wall_test_point(player, nx, ny)):
        return player.x, player.y
    return nx, ny


# ── Pickup / proximity ─────────────────────────────────────────────

def overlapping_items(x: float, y: float, size: float,
                      items: list[Item]) -> list[int]:
    """Indices of uncollected items whose box overlaps the body box."""
    hits = []
    for i, item in enumerate(items):
        if item.collected:
            continue
        if aabb_overlap(x, y, size, size, *item.box()):
            hits.append(i)
    return hits


def near_bed(x: float, y: float, bed: Bed) -> bool:
    return within(x, y, bed.x, bed.y,
                  float(_tun("interaction", "bed_radius", 50.0)))


def nearby_npcs(x: float, y: float, npcs: list[Npc]) -> list[Npc]:
    radius = float(_tun("interaction", "npc_radius", 100.0))
    return [n for n in npcs if within(x, y, n.x, n.y, radius)]


# ── Per-phase resolvers ─────────────────────────────────────────────

def resolve_awake(player: Player, bed: Bed, inputs: InputFrame,
                  dt: float) -> list:
    """The waking room: walk around, talk to the bed, open the bag."""
    intents: list = []
    nx, ny = propose_move(player, inputs.direction(), dt)
    if (nx, ny) != (player.x, player.y):
        intents.append(MovePlayer(nx, ny))

    if inputs.just(ACTION_INTERACT) and near_bed(nx, ny, bed):
        intents.append(OpenDialogue(*bed_dialogue()))

    if inputs.just(ACTION_INVENTORY):
        intents.append(ToggleInventory())
    return intents


def resolve_dreaming(player: Player, grid: MazeGrid, items: list[Item],
                     npcs: list[Npc], hold: HoldProgress,
                     inputs: InputFrame, dt: float,
                     boost: bool = False) -> list:
    """The maze: gated movement, pickups, NPC chat, hold-to-wake."""
    intents: list = []

    nx, ny = propose_move(player, inputs.direction(), dt, grid, boost)
    if (nx, ny) != (player.x, player.y):
        intents.append(MovePlayer(nx, ny))

    boosted = boost
    for i in overlapping_items(nx, ny, player.size, items):
        item = items[i]
        intents.append(CollectItem(i, item.name, item.grants_boost))
        boosted = boosted or item.grants_boost

    if boosted:
        intents.append(EmitDust(nx + player.size / 2.0, ny + player.size / 2.0))

    if inputs.just(ACTION_INTERACT):
        talking = nearby_npcs(nx, ny, npcs)
        if talking:
            intents.append(OpenDialogue(*npc_dialogue(talking[-1])))

    if hold.tick(inputs.held(ACTION_INTERACT), dt):
        intents.append(RequestTransition(TransitionKind.TO_AWAKE))

    if inputs.just(ACTION_INVENTORY):
        intents.append(ToggleInventory())
    return intents
