"""test_interaction.py — Resolver checks on hand-built rooms and mazes.

Tests:
1. Movement: speed, boost, room clamp, wall rollback
2. Item pickup: overlap, idempotence, boost dust
3. Proximity: bed and NPC dialogue
4. Hold-to-wake through the dreaming resolver
5. Collision primitives

Run: python test_interaction.py
"""
from __future__ import annotations
import sys, traceback

from core.tuning import load as _load_tuning
_load_tuning()

from core.collision import aabb_overlap, within, clamp
from components import Player, Item, Npc, Bed, HoldProgress, default_bed
from logic.dialogue import DialogueAction
from logic.input_manager import InputFrame, EMPTY
from logic.interaction import (
    MovePlayer, CollectItem, OpenDialogue, ToggleInventory,
    RequestTransition, EmitDust, propose_move, player_speed, wall_test_point,
    overlapping_items, resolve_awake, resolve_dreaming,
)
from logic.maze import Cell, MazeGrid
from logic.transition import TransitionKind


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    print(f"  [FAIL] {label}")
    if detail:
        for line in detail.strip().splitlines():
            print(f"         {line}")


# ── Helpers ──────────────────────────────────────────────────────────

def _corridor() -> MazeGrid:
    """5x5 walls with an east-west corridor at row 1, columns 1..3."""
    grid = MazeGrid(width=5, height=5, cell_size=40.0)
    for cx in (1, 2, 3):
        grid.cells[1][cx] = Cell.PATH
    return grid


def _held(*actions: str) -> InputFrame:
    return InputFrame.of(held=actions)


def _press(*actions: str) -> InputFrame:
    return InputFrame.of(pressed=actions)


def _kinds(intents: list) -> list[type]:
    return [type(i) for i in intents]


# ════════════════════════════════════════════════════════════════════════
#  TEST 1 — Movement
# ════════════════════════════════════════════════════════════════════════

def test_movement():
    print("\n=== Test 1: movement ===")
    assert player_speed() == 150.0
    assert player_speed(boost=True) == 225.0
    ok("base speed 150, boosted 225")

    grid = _corridor()
    p = Player(x=20.0, y=20.0)
    assert wall_test_point(p) == (60.0, 60.0)
    ok("wall-test point sits 40 u inside the body")

    assert propose_move(p, (1.0, 0.0), 0.1, grid) == (35.0, 20.0)
    assert propose_move(p, (1.0, 0.0), 0.5, grid) == (95.0, 20.0)
    ok("moves freely along the corridor")

    assert propose_move(p, (0.0, 1.0), 0.2, grid) == (20.0, 20.0)
    assert propose_move(p, (1.0, 0.0), 1.0, grid) == (20.0, 20.0)
    ok("wall or off-grid destination rolls back the whole step")

    assert propose_move(p, (1.0, 0.0), 0.1, grid, boost=True) == (42.5, 20.0)
    ok("boost multiplies the step")

    # Diagonal input isn't normalised; the wall test uses the final point.
    assert propose_move(p, (1.0, 1.0), 0.1, grid) == (35.0, 35.0)
    ok("diagonal step stays in the corridor row")

    corner = Player(x=0.0, y=0.0)
    assert propose_move(corner, (-1.0, -1.0), 1.0) == (0.0, 0.0)
    far = Player(x=700.0, y=500.0)
    assert propose_move(far, (1.0, 1.0), 1.0) == (720.0, 520.0)
    ok("room clamp keeps the body inside 800x600")

    intents = resolve_awake(corner, default_bed(), _held("left", "up"), 1.0)
    assert intents == []
    ok("clamped-in-place movement produces no MovePlayer")


# ════════════════════════════════════════════════════════════════════════
#  TEST 2 — Pickup
# ════════════════════════════════════════════════════════════════════════

def test_pickup():
    print("\n=== Test 2: item pickup ===")
    grid = _corridor()
    hold = HoldProgress()
    p = Player(x=20.0, y=20.0)
    knife = Item("Knife", 90.0, 20.0, 20.0, 20.0)
    bike = Item("Bicycle", 300.0, 300.0, 30.0, 20.0, grants_boost=True)
    items = [knife, bike]

    intents = resolve_dreaming(p, grid, items, [], hold, EMPTY, 1 / 60)
    assert intents == [CollectItem(0, "Knife", False)]
    ok("overlapping item yields CollectItem with its index")

    knife.collected = True
    assert resolve_dreaming(p, grid, items, [], hold, EMPTY, 1 / 60) == []
    ok("collected items are never offered again")

    touching = [Item("Lamp", 100.0, 20.0, 10.0, 10.0)]
    assert overlapping_items(p.x, p.y, p.size, touching) == []
    ok("edge contact is not a pickup")

    # Walking onto the item: the pickup is tested at the new position.
    lamp = [Item("Lamp", 110.0, 20.0, 10.0, 10.0)]
    intents = resolve_dreaming(p, grid, lamp, [], hold,
                               _held("right"), 0.1)
    assert _kinds(intents) == [MovePlayer, CollectItem]
    ok("pickup uses this frame's destination")

    bike_here = [Item("Bicycle", 30.0, 30.0, 30.0, 20.0, grants_boost=True)]
    intents = resolve_dreaming(p, grid, bike_here, [], hold, EMPTY, 1 / 60)
    assert intents == [CollectItem(0, "Bicycle", True), EmitDust(60.0, 60.0)]
    ok("boost item starts the dust trail on the same frame")

    intents = resolve_dreaming(p, grid, [], [], hold, EMPTY, 1 / 60,
                               boost=True)
    assert intents == [EmitDust(60.0, 60.0)]
    ok("boosted player trails dust every frame")


# ════════════════════════════════════════════════════════════════════════
#  TEST 3 — Proximity
# ════════════════════════════════════════════════════════════════════════

def test_proximity():
    print("\n=== Test 3: bed and NPC proximity ===")
    bed = default_bed()
    spawn = Player.at_spawn()
    assert (spawn.x, spawn.y) == (360.0, 260.0)

    intents = resolve_awake(spawn, bed, _press("interact"), 1 / 60)
    assert len(intents) == 1 and isinstance(intents[0], OpenDialogue)
    d = intents[0]
    assert d.speaker == "Bed"
    assert [c.action for c in d.choices] == [DialogueAction.COMMIT_SLEEP,
                                              DialogueAction.CANCEL]
    ok("interact near the bed opens the bed dialogue")

    assert resolve_awake(spawn, bed, _held("interact"), 1 / 60) == []
    ok("holding interact does not re-open it")

    away = Player(x=0.0, y=0.0)
    assert resolve_awake(away, bed, _press("interact"), 1 / 60) == []
    ok("far from the bed nothing opens")

    edge = Player(x=370.0, y=230.0)               # exactly 50 u away
    assert resolve_awake(edge, Bed(370.0, 280.0), _press("interact"),
                         1 / 60) == []
    ok("radius check is strict")

    assert resolve_awake(away, bed, _press("inventory"), 1 / 60) == \
        [ToggleInventory()]
    ok("inventory toggles on the key edge")

    grid = _corridor()
    p = Player(x=20.0, y=20.0)
    npcs = [Npc("Mysterious Figure", 60.0, 20.0),
            Npc("Dream Guardian", 20.0, 60.0),
            Npc("Far Away", 600.0, 500.0)]
    intents = resolve_dreaming(p, grid, [], npcs, HoldProgress(),
                               _press("interact"), 1 / 60)
    talk = [i for i in intents if isinstance(i, OpenDialogue)]
    assert len(talk) == 1
    assert talk[0].speaker == "Dream Guardian"
    assert talk[0].text == "Hello, I am Dream Guardian"
    assert talk[0].choices == []
    ok("last nearby NPC wins; greeting has no choices")

    intents = resolve_dreaming(p, grid, [], npcs[2:], HoldProgress(),
                               _press("interact"), 1 / 60)
    assert not any(isinstance(i, OpenDialogue) for i in intents)
    ok("no NPC in range, no dialogue")


# ════════════════════════════════════════════════════════════════════════
#  TEST 4 — Hold to wake
# ════════════════════════════════════════════════════════════════════════

def test_hold_to_wake():
    print("\n=== Test 4: hold-to-wake ===")
    grid = _corridor()
    p = Player(x=20.0, y=20.0)
    hold = HoldProgress()
    results = [resolve_dreaming(p, grid, [], [], hold,
                                _held("interact"), 0.5) for _ in range(4)]
    assert results[:3] == [[], [], []]
    assert results[3] == [RequestTransition(TransitionKind.TO_AWAKE)]
    ok("fourth 0.5 s frame asks for the wake fade")

    hold = HoldProgress()
    for dt in (0.5, 0.5, 0.5, 0.4):
        resolve_dreaming(p, grid, [], [], hold, _held("interact"), dt)
    resolve_dreaming(p, grid, [], [], hold, EMPTY, 1 / 60)
    assert hold.elapsed == 0.0
    out = resolve_dreaming(p, grid, [], [], hold, _held("interact"), 0.5)
    assert out == []
    ok("releasing before 2 s starts over")


# ════════════════════════════════════════════════════════════════════════
#  TEST 5 — Collision primitives
# ════════════════════════════════════════════════════════════════════════

def test_collision():
    print("\n=== Test 5: collision primitives ===")
    assert aabb_overlap(0, 0, 10, 10, 5, 5, 10, 10)
    assert not aabb_overlap(0, 0, 10, 10, 10, 0, 10, 10)
    assert not aabb_overlap(0, 0, 10, 10, 0, 20, 10, 10)
    ok("AABB overlap excludes touching edges")

    assert within(0, 0, 3, 4, 5.01)
    assert not within(0, 0, 3, 4, 5.0)
    ok("within is a strict radius test")

    assert clamp(-1.0, 0.0, 1.0) == 0.0
    assert clamp(2.0, 0.0, 1.0) == 1.0
    assert clamp(0.5, 0.0, 1.0) == 0.5
    ok("clamp")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Movement", test_movement),
        ("Pickup", test_pickup),
        ("Proximity", test_proximity),
        ("Hold to Wake", test_hold_to_wake),
        ("Collision", test_collision),
    ]
    for name, fn in sections:
        try:
            fn()
        except Exception:
            fail(name, traceback.format_exc())

    print(f"\n{'=' * 60}")
    print(f"  Interaction Tests: {_passed} passed, {_failed} failed")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
