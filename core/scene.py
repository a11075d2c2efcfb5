"""
core/scene.py — Scene interface

Every screen hosted by the app is a Scene.  The app holds a stack of
them; only the top scene gets event/update/draw calls.

The game itself has a single scene (``scenes.game_scene.GameScene``)
because menus, the waking room and the dream are phases of the
simulation, not separate screens.  The stack stays for overlays:

    class MyOverlay(Scene):
        def handle_event(self, event, app):
            if event.type == pygame.KEYDOWN:
                app.pop_scene()

        def draw(self, surface, app):
            ...
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        """Called when this scene becomes active (pushed or revealed)."""
        pass

    def on_exit(self, app: App):
        """Called when this scene is removed or covered."""
        pass

    def handle_event(self, event: pygame.event.Event, app: App):
        """Process a single pygame event."""
        pass

    def update(self, dt: float, app: App):
        """Advance one frame. dt is seconds."""
        pass

    def draw(self, surface: pygame.Surface, app: App):
        """Draw to the screen surface."""
        pass
