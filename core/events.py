"""core/events.py — Lightweight event bus.

Decouples the mode controller, which *decides* what happened this
frame, from anything that wants to *react* (the scene's sound cues,
the dev log, tests).  The controller owns one bus::

    bus.emit(ItemCollected(name="Knife"))

Consumers subscribe with a callable::

    bus.subscribe("ItemCollected", my_handler)

And the controller drains once per ``advance``::

    effects = bus.drain()        # handlers run, drained events returned

Design rules:
  - Events are plain dataclasses — no behaviour.
  - ``emit()`` is O(1) (just appends).
  - ``drain()`` processes queued events in FIFO order.
  - Handlers may emit new events; those are processed in the same drain.
"""

from __future__ import annotations
import traceback
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable


# ═══════════════════════════════════════════════════════════════════
#  Event definitions
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class PhaseChanged:
    old: str
    new: str


@dataclass(frozen=True)
class TransitionStarted:
    kind: str


@dataclass(frozen=True)
class TransitionFinished:
    kind: str


@dataclass(frozen=True)
class MazeGenerated:
    width: int
    height: int
    path_cells: int
    world: str = ""


@dataclass(frozen=True)
class ItemCollected:
    name: str


@dataclass(frozen=True)
class DialogueOpened:
    speaker: str
    choices: int = 0


@dataclass(frozen=True)
class DialogueClosed:
    speaker: str
    action: str


# ═══════════════════════════════════════════════════════════════════
#  Event Bus
# ═══════════════════════════════════════════════════════════════════

class EventBus:
    """Fire-and-forget event queue owned by the mode controller."""

    def __init__(self):
        self._queue: list[Any] = []
        self._subs: dict[str, list[Callable]] = defaultdict(list)
        self._stats: dict[str, int] = defaultdict(int)

    def emit(self, event) -> None:
        """Queue an event for the next ``drain()``."""
        self._queue.append(event)

    def subscribe(self, event_type: str, handler: Callable) -> None:
        """Register *handler* for events whose class name is *event_type*."""
        self._subs[event_type].append(handler)

    def drain(self) -> list:
        """Run handlers for every queued event and return them in order."""
        drained: list = []
        safety = 100
        while self._queue and safety > 0:
            batch = self._queue[:]
            self._queue.clear()
            for event in batch:
                name = type(event).__name__
                self._stats[name] += 1
                for handler in self._subs.get(name, []):
                    try:
                        handler(event)
                    except Exception as exc:
                        print(f"[EVENT] handler error for {name}: {exc}")
                        traceback.print_exc()
            drained.extend(batch)
            safety -= 1
        return drained

    def stats(self) -> dict[str, int]:
        """Cumulative event counts by type."""
        return dict(self._stats)

    def pending_count(self) -> int:
        return len(self._queue)

    def __repr__(self) -> str:
        return f"EventBus(pending={len(self._queue)}, subs={len(self._subs)})"
