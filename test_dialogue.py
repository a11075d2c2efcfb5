"""test_dialogue.py — Unit checks for the small stateful pieces.

Tests:
1. Dialogue engine — open / navigate / confirm / replace
2. Inventory store
3. Hold-to-wake accumulator
4. Transition timer
5. Start menu, dream themes, dust particles

Run: python test_dialogue.py
"""
from __future__ import annotations
import sys, random, traceback

from core.tuning import load as _load_tuning
_load_tuning()

from components import Inventory, HoldProgress, Npc
from logic.dialogue import (
    DialogueEngine, DialogueAction, Choice, bed_dialogue, npc_dialogue,
)
from logic.dream_worlds import CATALOG, pick_world
from logic.menu import StartMenu, MenuOption
from logic.particles import ParticleManager
from logic.transition import Transition, TransitionKind


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


# ════════════════════════════════════════════════════════════════════════
#  TEST 1 — Dialogue engine
# ════════════════════════════════════════════════════════════════════════

def test_dialogue_engine():
    print("\n=== Test 1: dialogue engine ===")
    eng = DialogueEngine()
    assert not eng.active
    assert eng.confirm() is None
    assert eng.navigate(+1) is None
    ok("confirm/navigate with nothing open are no-ops")

    eng.open(*bed_dialogue())
    assert eng.active and eng.current.speaker == "Bed"
    assert [c.label for c in eng.current.choices] == ["Lay down", "Cancel"]
    assert eng.current.selected_index == 0
    ok("bed dialogue opens on 'Lay down'")

    assert eng.navigate(-1) == 0
    assert eng.navigate(+1) == 1
    assert eng.navigate(+1) == 1
    assert eng.navigate(+1) == 1
    ok("cursor clamps at both ends")

    assert eng.confirm() is DialogueAction.CANCEL
    assert not eng.active and eng.current is None
    ok("confirm on 'Cancel' returns CANCEL and closes")

    eng.open(*bed_dialogue())
    assert eng.confirm() is DialogueAction.COMMIT_SLEEP
    ok("confirm on 'Lay down' returns COMMIT_SLEEP")

    eng.open(*npc_dialogue(Npc("Dream Guardian", 600.0, 150.0)))
    assert eng.current.text == "Hello, I am Dream Guardian"
    assert eng.current.choices == []
    assert eng.navigate(+1) == 0
    assert eng.confirm() is DialogueAction.DISMISS
    assert eng.current is None
    ok("choiceless dialogue: index stays 0, confirm dismisses")

    eng.open("first", "A", [Choice("x", DialogueAction.CANCEL),
                            Choice("y", DialogueAction.CANCEL)])
    eng.navigate(+1)
    eng.open("second", "B", [Choice("only", DialogueAction.DISMISS)])
    assert eng.current.speaker == "B" and eng.current.selected_index == 0
    ok("opening replaces the current dialogue and resets the cursor")

    eng.close()
    assert not eng.active
    ok("close() drops the dialogue without an action")


# ════════════════════════════════════════════════════════════════════════
#  TEST 2 — Inventory
# ════════════════════════════════════════════════════════════════════════

def test_inventory():
    print("\n=== Test 2: inventory ===")
    inv = Inventory()
    assert len(inv) == 0 and not inv.is_open
    inv.add("Knife")
    inv.add("Bicycle")
    assert inv.items == ["Knife", "Bicycle"]
    ok("add keeps collection order")

    assert inv.toggle_open() is True
    assert inv.toggle_open() is False
    assert len(inv) == 2
    ok("toggle flips visibility only")


# ════════════════════════════════════════════════════════════════════════
#  TEST 3 — Hold progress
# ════════════════════════════════════════════════════════════════════════

def test_hold_progress():
    print("\n=== Test 3: hold-to-wake ===")
    hold = HoldProgress.from_tuning()
    assert hold.threshold == 2.0
    fired = [hold.tick(True, 0.5) for _ in range(4)]
    assert fired == [False, False, False, True]
    assert hold.elapsed == 0.0
    ok("fires on the frame elapsed reaches 2.0, then resets")

    hold = HoldProgress()
    for dt in (0.5, 0.5, 0.5, 0.4):
        assert not hold.tick(True, dt)
    assert abs(hold.fraction - 0.95) < 1e-9
    assert not hold.tick(False, 0.1)
    assert hold.elapsed == 0.0 and hold.fraction == 0.0
    ok("release at 1.9 s clears progress")

    fired = [hold.tick(True, 0.5) for _ in range(4)]
    assert fired == [False, False, False, True]
    ok("a fresh full hold is needed after release")

    assert HoldProgress(threshold=0.0).fraction == 0.0
    ok("zero threshold reports an empty bar")

    for fps in (30, 60, 144):
        hold = HoldProgress()
        fired = [hold.tick(True, 1 / fps) for _ in range(2 * fps)]
        assert fired.index(True) == 2 * fps - 1, f"{fps} fps"
        assert fired.count(True) == 1
    ok("2 s hold fires on frame 2N at N fps")


# ════════════════════════════════════════════════════════════════════════
#  TEST 4 — Transition timer
# ════════════════════════════════════════════════════════════════════════

def test_transition_timer():
    print("\n=== Test 4: transition timer ===")
    t = Transition.start(TransitionKind.TO_DREAM)
    assert t.duration == 1.0 and t.alpha == 0.0
    alphas = []
    done = []
    for _ in range(6):
        done.append(t.advance(0.25))
        alphas.append(t.alpha)
    assert alphas == sorted(alphas)
    assert all(0.0 <= a <= 1.0 for a in alphas)
    assert alphas[:4] == [0.25, 0.5, 0.75, 1.0]
    assert done == [False, False, False, True, True, True]
    ok("alpha rises monotonically and saturates at 1")

    t = Transition(TransitionKind.TO_AWAKE, duration=1.0)
    t.advance(0.3)
    for bad in (-1.0, float("nan"), float("inf"), float("-inf")):
        t.advance(bad)
    assert t.elapsed == 0.3
    ok("negative and non-finite dt are ignored")

    t = Transition(TransitionKind.TO_AWAKE, duration=0.0)
    assert t.done and t.alpha == 1.0
    ok("zero-length fade is immediately done")

    for fps in (10, 30, 60, 144):
        t = Transition(TransitionKind.TO_DREAM, duration=1.0)
        frames = 1
        while not t.advance(1 / fps):
            frames += 1
        assert frames == fps, f"{fps} fps took {frames} frames"
        assert t.alpha == 1.0
    ok("1 s fade ends on frame N at N fps")


# ════════════════════════════════════════════════════════════════════════
#  TEST 5 — Menu, themes, particles
# ════════════════════════════════════════════════════════════════════════

def test_menu_and_themes():
    print("\n=== Test 5: menu, dream themes, particles ===")
    menu = StartMenu()
    assert menu.selected is MenuOption.START
    assert menu.move(-1) is MenuOption.CREDITS
    assert menu.move(+1) is MenuOption.START
    assert menu.move(+1) is MenuOption.SETTINGS
    ok("menu wraps in both directions")

    assert len(CATALOG) == 6
    rng = random.Random(11)
    picks = {pick_world(rng).name for _ in range(200)}
    assert picks == {w.name for w in CATALOG}
    ok("pick_world covers the whole catalog")

    a = [pick_world(random.Random(3)).name for _ in range(3)]
    assert len(set(a)) == 1
    ok("theme choice is seeded")

    pm = ParticleManager(random.Random(0), max_particles=3)
    for _ in range(5):
        pm.emit_dust(100.0, 100.0)
    assert pm.count == 3
    pm.update(0.5)
    assert pm.count == 3
    assert all(0.0 < p.fade < 1.0 for p in pm.particles)
    pm.update(0.6)
    assert pm.count == 0
    ok("dust is capped, fades, and expires after its lifetime")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Dialogue Engine", test_dialogue_engine),
        ("Inventory", test_inventory),
        ("Hold Progress", test_hold_progress),
        ("Transition Timer", test_transition_timer),
        ("Menu and Themes", test_menu_and_themes),
    ]
    for name, fn in sections:
        try:
            fn()
        except Exception:
            fail(name, traceback.format_exc())

    print(f"\n{'=' * 60}")
    print(f"  Dialogue Tests: {_passed} passed, {_failed} failed")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
