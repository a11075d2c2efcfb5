"""scenes/game_scene.py — The only gameplay scene.

Feeds pygame events through the ``InputManager``, steps the
``ModeController`` once per frame, and draws the resulting snapshot.
The scene never writes to the session; it only reads ``snapshot()``.

Dev keys (not rebindable):
    F3   toggle the dev-log overlay
    F5   hot-reload data/tuning.toml and key bindings
"""

from __future__ import annotations
import pygame

from core import tuning
from core.app import App
from core.scene import Scene
from logic.input_manager import InputManager
from simulation.mode_controller import ModeController
from scenes import game_draw


class GameScene(Scene):
    def __init__(self, seed: int | None = None):
        self.controller = ModeController(seed=seed)
        self.input = InputManager()
        self.show_log = False

    def on_exit(self, app: App):
        self.input.release_all()

    def handle_event(self, event: pygame.event.Event, app: App):
        if event.type == pygame.KEYDOWN and event.key == pygame.K_F3:
            self.show_log = not self.show_log
            return
        if event.type == pygame.KEYDOWN and event.key == pygame.K_F5:
            tuning.reload()
            self.input.rebind()
            return
        if event.type == pygame.WINDOWFOCUSLOST:
            self.input.release_all()
            return
        self.input.feed(event)

    def update(self, dt: float, app: App):
        frame = self.input.end_frame()
        self.controller.advance(dt, frame)

    def draw(self, surface: pygame.Surface, app: App):
        snap = self.controller.snapshot()
        game_draw.draw_frame(surface, app, snap)
        if self.show_log:
            game_draw.draw_dev_log(surface, app, self.controller.log.recent(10))
