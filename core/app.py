"""
core/app.py — Pygame application shell

Handles the window, the frame clock, and the scene stack.
Game logic never lives here; scenes own it.

    app = App(title="witherdream", width=800, height=600)
    app.push_scene(GameScene())
    app.run()
"""

from __future__ import annotations
import pygame
from core.scene import Scene


class App:
    def __init__(self, title: str = "witherdream", width: int = 800,
                 height: int = 600, fps: int = 60):
        pygame.init()
        # Fixed virtual resolution; SCALED lets SDL letterbox on resize.
        self.screen = pygame.display.set_mode((width, height),
                                              pygame.SCALED | pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = fps
        self.dt = 0.0

        # Scene stack — only the top scene is active
        self._scenes: list[Scene] = []

        self.font = pygame.font.SysFont("monospace", 16)
        self.font_sm = pygame.font.SysFont("monospace", 12)
        self.font_lg = pygame.font.SysFont("monospace", 24)

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        scene.on_enter(self)

    def pop_scene(self):
        if self._scenes:
            self._scenes[-1].on_exit(self)
            self._scenes.pop()
        if self._scenes:
            self._scenes[-1].on_enter(self)
        else:
            self.running = False

    # -- Main loop --

    def run(self):
        while self.running:
            self.dt = self.clock.tick(self.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    pygame.display.toggle_fullscreen()
                elif self.scene:
                    self.scene.handle_event(event, self)

            if self.scene:
                self.scene.update(self.dt, self)

            if self.scene:
                self.scene.draw(self.screen, self)

            pygame.display.flip()

        pygame.quit()

    # -- Convenience --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None):
        """Quick text draw. Returns the rect for layout chaining."""
        f = font or self.font
        img = f.render(text, True, color)
        return surface.blit(img, (x, y))

    def draw_text_bg(self, surface: pygame.Surface, text: str, x: int, y: int,
                     color=(255, 255, 255), bg=(0, 0, 0, 160), font=None,
                     pad: int = 2):
        """Draw text with a semi-transparent background box."""
        f = font or self.font
        img = f.render(text, True, color)
        w, h = img.get_size()
        bg_surf = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
        bg_surf.fill(bg)
        surface.blit(bg_surf, (x - pad, y - pad))
        return surface.blit(img, (x, y))
