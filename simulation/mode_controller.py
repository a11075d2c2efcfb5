"""simulation/mode_controller.py — Top-level scene state machine.

One call to ``advance(dt, inputs)`` simulates one frame, always in this
order:

    1. transition timer   (may finalize a fade and change phase)
    2. phase update       (only when no fade is in flight)
    3. dialogue input     (whatever the phase)
    4. dust particles

Later stages see what earlier ones just finalized: a fade that ends
this frame has already reset the player before movement runs.

Phase graph::

    START_MENU ─confirm─▶ AWAKE | SETTINGS_MENU | CREDITS
    SETTINGS_MENU, CREDITS ─cancel─▶ START_MENU
    AWAKE ─"Lay down"─▶ ASLEEP          (maze + theme built here)
    ASLEEP ─confirm─▶ [TO_DREAM fade] ─▶ DREAMING
    DREAMING ─hold interact 2 s─▶ [TO_AWAKE fade] ─▶ AWAKE

A fade can only start from its source phase and never while another is
running, so "fading while already dreaming" can't be expressed.
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from core.constants import (
    ACTION_CANCEL, ACTION_CONFIRM, ACTION_MENU_DOWN, ACTION_MENU_UP,
)
from core.events import (
    EventBus, PhaseChanged, TransitionStarted, TransitionFinished,
    MazeGenerated, ItemCollected, DialogueOpened, DialogueClosed,
)
from components import DevLog, Player
from logic.dialogue import DialogueAction
from logic.dream_worlds import pick_world
from logic.input_manager import InputFrame, EMPTY
from logic.interaction import (
    MovePlayer, CollectItem, OpenDialogue, ToggleInventory,
    RequestTransition, EmitDust, resolve_awake, resolve_dreaming,
    wall_test_point,
)
from logic.maze import START, generate_default, path_cells
from logic.menu import MenuOption
from logic.transition import Transition, TransitionKind
from simulation.session import Session, Phase, InvariantError, Snapshot


_SOURCE_PHASE = {
    TransitionKind.TO_DREAM: Phase.ASLEEP,
    TransitionKind.TO_AWAKE: Phase.DREAMING,
}

_MENU_TARGET = {
    MenuOption.START: Phase.AWAKE,
    MenuOption.SETTINGS: Phase.SETTINGS_MENU,
    MenuOption.CREDITS: Phase.CREDITS,
}


@dataclass(frozen=True)
class FrameResult:
    phase: Phase
    effects: list


class ModeController:
    """Owns a ``Session`` and drives it one frame at a time."""

    def __init__(self, session: Session | None = None, *,
                 seed: int | None = None, verbose: bool = True):
        self.session = session if session is not None else Session.new(seed)
        self.bus = EventBus()
        self.log = DevLog()
        self.verbose = verbose
        self._wire_log()

    # ── public API ───────────────────────────────────────────────────

    @property
    def phase(self) -> Phase:
        return self.session.phase

    def advance(self, dt: float, inputs: InputFrame = EMPTY) -> FrameResult:
        s = self.session
        if not (dt >= 0 and math.isfinite(dt)):
            dt = 0.0
        s.clock.time += dt

        self._update_transition(dt)
        if s.transition is None:
            self._update_phase(dt, inputs)
        self._update_dialogue(inputs)
        s.particles.update(dt)

        return FrameResult(phase=s.phase, effects=self.bus.drain())

    def begin_transition(self, kind: TransitionKind) -> bool:
        """Start a fade.  No-op (False) if one is running or illegal here."""
        s = self.session
        if kind is TransitionKind.NONE or s.transition is not None:
            return False
        if s.phase is not _SOURCE_PHASE[kind]:
            return False
        if kind is TransitionKind.TO_DREAM and s.maze is None:
            raise InvariantError("dream fade requested without a maze")
        s.transition = Transition.start(kind)
        self.bus.emit(TransitionStarted(kind.value))
        return True

    def go_to_sleep(self) -> bool:
        """Commit to sleep: build the maze and theme, then lie down."""
        s = self.session
        if s.phase is not Phase.AWAKE or s.transition is not None:
            return False
        s.maze = generate_default(s.rng)
        s.world = pick_world(s.rng)
        cx, cy = s.maze.cell_centre(*START)
        ox, oy = wall_test_point(Player(x=0.0, y=0.0, size=s.player.size))
        s.player.x, s.player.y = cx - ox, cy - oy
        s.hold.reset()
        self.bus.emit(MazeGenerated(
            s.maze.width, s.maze.height,
            sum(1 for _ in path_cells(s.maze)), s.world.name,
        ))
        self._set_phase(Phase.ASLEEP)
        return True

    def snapshot(self) -> Snapshot:
        return self.session.snapshot()

    # ── frame stages ─────────────────────────────────────────────────

    def _update_transition(self, dt: float):
        s = self.session
        t = s.transition
        if t is None or not t.advance(dt):
            return
        s.transition = None
        if t.kind is TransitionKind.TO_AWAKE:
            s.player = Player.at_spawn()
            s.maze = None
            s.world = None
            s.hold.reset()
            s.particles.clear()
            self._set_phase(Phase.AWAKE)
        else:
            self._set_phase(Phase.DREAMING)
        self.bus.emit(TransitionFinished(t.kind.value))

    def _update_phase(self, dt: float, inputs: InputFrame):
        s = self.session
        phase = s.phase
        if phase is Phase.START_MENU:
            if inputs.just(ACTION_MENU_UP):
                s.menu.move(-1)
            if inputs.just(ACTION_MENU_DOWN):
                s.menu.move(+1)
            if inputs.just(ACTION_CONFIRM):
                self._set_phase(_MENU_TARGET[s.menu.selected])
        elif phase in (Phase.SETTINGS_MENU, Phase.CREDITS):
            if inputs.just(ACTION_CANCEL):
                self._set_phase(Phase.START_MENU)
        elif phase is Phase.AWAKE:
            self._apply(resolve_awake(s.player, s.bed, inputs, dt))
        elif phase is Phase.ASLEEP:
            if inputs.just(ACTION_CONFIRM):
                self.begin_transition(TransitionKind.TO_DREAM)
        elif phase is Phase.DREAMING:
            if s.maze is None:
                raise InvariantError("dreaming without a maze")
            self._apply(resolve_dreaming(
                s.player, s.maze, s.items, s.npcs, s.hold, inputs, dt,
                boost=s.speed_boost,
            ))

    def _update_dialogue(self, inputs: InputFrame):
        s = self.session
        engine = s.dialogue
        if not engine.active:
            return
        if inputs.just(ACTION_MENU_UP):
            engine.navigate(-1)
        if inputs.just(ACTION_MENU_DOWN):
            engine.navigate(+1)
        if not inputs.just(ACTION_CONFIRM):
            return
        speaker = engine.current.speaker
        action = engine.confirm()
        self.bus.emit(DialogueClosed(speaker, action.value))
        # CANCEL and DISMISS only close the dialogue.
        if action is DialogueAction.COMMIT_SLEEP:
            self.go_to_sleep()

    # ── intent application ───────────────────────────────────────────

    def _apply(self, intents: list):
        s = self.session
        for intent in intents:
            if isinstance(intent, MovePlayer):
                s.player.x, s.player.y = intent.x, intent.y
            elif isinstance(intent, CollectItem):
                item = s.items[intent.index]
                if item.collected:
                    continue
                item.collected = True
                s.inventory.add(item.name)
                if item.grants_boost:
                    s.speed_boost = True
                self.bus.emit(ItemCollected(item.name))
            elif isinstance(intent, EmitDust):
                s.particles.emit_dust(intent.x, intent.y)
            elif isinstance(intent, OpenDialogue):
                s.dialogue.open(intent.text, intent.speaker, intent.choices)
                self.bus.emit(DialogueOpened(intent.speaker,
                                             len(intent.choices)))
            elif isinstance(intent, ToggleInventory):
                s.inventory.toggle_open()
            elif isinstance(intent, RequestTransition):
                self.begin_transition(intent.kind)
            else:
                raise InvariantError(f"unknown intent {intent!r}")

    def _set_phase(self, new: Phase):
        old = self.session.phase
        if old is new:
            return
        self.session.phase = new
        self.bus.emit(PhaseChanged(old.value, new.value))

    # ── logging ──────────────────────────────────────────────────────

    def _wire_log(self):
        def rec(cat: str, fmt):
            def handler(ev):
                msg = fmt(ev)
                self.log.record(cat, msg, t=self.session.clock.time,
                                details=vars(ev))
                if self.verbose and cat in ("mode", "maze"):
                    print(f"[{cat.upper()}] {msg}")
            return handler

        self.bus.subscribe("PhaseChanged", rec(
            "mode", lambda e: f"{e.old} -> {e.new}"))
        self.bus.subscribe("TransitionStarted", rec(
            "transition", lambda e: f"start {e.kind}"))
        self.bus.subscribe("TransitionFinished", rec(
            "transition", lambda e: f"finish {e.kind}"))
        self.bus.subscribe("MazeGenerated", rec(
            "maze", lambda e: f"{e.width}x{e.height}, {e.path_cells} path "
                              f"cells, dreaming of {e.world}"))
        self.bus.subscribe("ItemCollected", rec(
            "pickup", lambda e: e.name))
        self.bus.subscribe("DialogueOpened", rec(
            "dialogue", lambda e: f"open {e.speaker}"))
        self.bus.subscribe("DialogueClosed", rec(
            "dialogue", lambda e: f"close {e.speaker} ({e.action})"))
