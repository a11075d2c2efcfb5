"""logic/input_manager.py — Action-based input layer.

Sits between raw pygame events and the simulation.  The scene feeds in
raw events; the manager maps them to *actions* using the ``[keybinds]``
table, and hands the simulation an immutable ``InputFrame`` per frame.

The simulation never touches keycodes — it only sees action names from
``core.constants.ACTIONS``.

Usage (in the game scene):

    self.input = InputManager()
    for event in events:
        self.input.feed(event)
    frame = self.input.end_frame()     # snapshot, then clears edges

    if frame.just("interact"):         # rising edge this frame
        ...
    if frame.held("interact"):         # key is down right now
        ...
"""

from __future__ import annotations
from dataclasses import dataclass, field

import pygame

from core import tuning
from core.constants import (
    ACTIONS, ACTION_UP, ACTION_DOWN, ACTION_LEFT, ACTION_RIGHT,
)


# ── Default key bindings (pygame K_* suffixes) ──────────────────────

_DEFAULT_BINDS: dict[str, list[str]] = {
    "up":        ["w"],
    "down":      ["s"],
    "left":      ["a"],
    "right":     ["d"],
    "interact":  ["z"],
    "inventory": ["i"],
    "confirm":   ["RETURN", "SPACE"],
    "menu_up":   ["UP"],
    "menu_down": ["DOWN"],
    "cancel":    ["ESCAPE"],
}


# ── Frame snapshot ──────────────────────────────────────────────────

@dataclass(frozen=True)
class InputFrame:
    """What the player is doing this frame, in action names."""
    held_actions: frozenset[str] = field(default_factory=frozenset)
    pressed_actions: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, held=(), pressed=()) -> "InputFrame":
        """Build a frame by hand (tests, replays).

        A pressed action is also held: a key can't go down without
        being down.
        """
        pressed = frozenset(pressed)
        return cls(held_actions=frozenset(held) | pressed,
                   pressed_actions=pressed)

    def just(self, action: str) -> bool:
        """True on the frame the action's key went down."""
        return action in self.pressed_actions

    def held(self, action: str) -> bool:
        return action in self.held_actions

    def direction(self) -> tuple[float, float]:
        """Raw (dx, dy) from held movement actions, each axis in -1..1."""
        dx = 0.0
        dy = 0.0
        if self.held(ACTION_UP):
            dy -= 1.0
        if self.held(ACTION_DOWN):
            dy += 1.0
        if self.held(ACTION_LEFT):
            dx -= 1.0
        if self.held(ACTION_RIGHT):
            dx += 1.0
        return dx, dy


EMPTY = InputFrame()


# ── Binding table ───────────────────────────────────────────────────

def resolve_bindings(table: dict | None = None) -> dict[int, list[str]]:
    """Return ``{pygame key: [action, ...]}`` for the given binding table.

    Unknown key names are reported and skipped; actions outside the
    fixed action set are ignored.
    """
    if table is None:
        table = tuning.section("keybinds") or _DEFAULT_BINDS
    by_key: dict[int, list[str]] = {}
    for action, names in table.items():
        if action not in ACTIONS:
            print(f"[INPUT] ignoring binding for unknown action {action!r}")
            continue
        if isinstance(names, str):
            names = [names]
        for name in names:
            key = getattr(pygame, f"K_{name}", None)
            if key is None:
                print(f"[INPUT] unknown key name {name!r} for {action}")
                continue
            by_key.setdefault(key, []).append(action)
    return by_key


# ── InputManager ────────────────────────────────────────────────────

class InputManager:
    """Turns KEYDOWN / KEYUP events into per-frame ``InputFrame``s.

    Held state is tracked from the events themselves, so no display or
    key-state polling is needed.
    """

    def __init__(self, bindings: dict | None = None):
        self._by_key = resolve_bindings(bindings)
        self._down_keys: set[int] = set()
        self._pressed: set[str] = set()

    def rebind(self, bindings: dict | None = None):
        """Reload bindings (after a tuning reload) and forget held keys."""
        self._by_key = resolve_bindings(bindings)
        self._down_keys.clear()
        self._pressed.clear()

    def feed(self, event: pygame.event.Event):
        if event.type == pygame.KEYDOWN:
            actions = self._by_key.get(event.key)
            if actions is None:
                return
            if event.key not in self._down_keys:
                self._down_keys.add(event.key)
                self._pressed.update(actions)
        elif event.type == pygame.KEYUP:
            self._down_keys.discard(event.key)

    def end_frame(self) -> InputFrame:
        """Snapshot this frame's input and clear the edge set."""
        held: set[str] = set()
        for key in self._down_keys:
            held.update(self._by_key.get(key, ()))
        frame = InputFrame(held_actions=frozenset(held),
                           pressed_actions=frozenset(self._pressed))
        self._pressed.clear()
        return frame

    def release_all(self):
        """Forget every held key (window lost focus)."""
        self._down_keys.clear()
