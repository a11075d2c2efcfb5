"""scenes/game_draw.py — Rendering helpers for the game scene.

All pure-draw functions live here so that GameScene.draw() stays thin.
Every function receives a read-only ``Snapshot`` (or a slice of it) —
nothing here can reach back into the simulation.
"""

from __future__ import annotations
import pygame

from core.app import App
from core.constants import (
    COLOR_MENU_BG, COLOR_AWAKE_BG, COLOR_ASLEEP_BG, COLOR_WALL, COLOR_BED,
    COLOR_BICYCLE, COLOR_KNIFE, COLOR_NPC, COLOR_PLAYER, COLOR_DUST,
    COLOR_HIGHLIGHT, COLOR_TEXT, COLOR_FADE,
)
from logic.maze import Cell
from logic.menu import OPTIONS
from simulation.session import Phase, Snapshot, DialogueView, MazeView


_ITEM_COLORS = {"Bicycle": COLOR_BICYCLE, "Knife": COLOR_KNIFE}


def draw_frame(surface: pygame.Surface, app: App, snap: Snapshot):
    surface.fill(_background(snap))

    if snap.phase is Phase.START_MENU:
        draw_start_menu(surface, app, snap.menu_index)
    elif snap.phase is Phase.SETTINGS_MENU:
        draw_panel(surface, app, (200, 150, 400, 300),
                   ["Settings: keybinds live in data/tuning.toml",
                    "", "Esc to go back"])
    elif snap.phase is Phase.CREDITS:
        app.draw_text(surface, "Credits: Made with pygame", 260, 300)
    elif snap.phase is Phase.AWAKE:
        draw_awake(surface, app, snap)
    elif snap.phase is Phase.ASLEEP:
        sw, sh = surface.get_size()
        app.draw_text(surface, "Sleeping... Press SPACE to dream",
                      sw // 2 - 150, sh // 2)
    elif snap.phase is Phase.DREAMING:
        draw_dream(surface, app, snap)

    if snap.dialogue is not None:
        draw_dialogue(surface, app, snap.dialogue)
    if snap.inventory_open:
        draw_inventory(surface, app, snap.inventory)
    if snap.alpha > 0:
        draw_fade(surface, snap.alpha)


def _background(snap: Snapshot) -> tuple[int, int, int]:
    if snap.phase is Phase.AWAKE:
        return COLOR_AWAKE_BG
    if snap.phase is Phase.ASLEEP:
        return COLOR_ASLEEP_BG
    if snap.phase is Phase.DREAMING and snap.world is not None:
        return snap.world.background
    return COLOR_MENU_BG


# ── Phases ──────────────────────────────────────────────────────────

def draw_start_menu(surface: pygame.Surface, app: App, index: int):
    sw, _ = surface.get_size()
    app.draw_text(surface, "witherdream", sw // 2 - 75, 200,
                  COLOR_TEXT, app.font_lg)
    for i, opt in enumerate(OPTIONS):
        color = COLOR_HIGHLIGHT if i == index else COLOR_TEXT
        app.draw_text(surface, opt.value, sw // 2 - 35, 300 + i * 50, color)


def draw_awake(surface: pygame.Surface, app: App, snap: Snapshot):
    bx, by = snap.bed
    pygame.draw.rect(surface, COLOR_BED, (bx, by, 120, 80))
    draw_player(surface, snap.player)
    app.draw_text(surface, "Press Z near bed to sleep", 10, 10, (0, 0, 0))


def draw_dream(surface: pygame.Surface, app: App, snap: Snapshot):
    if snap.maze is not None:
        draw_maze(surface, snap.maze)
    draw_player(surface, snap.player)

    for name, x, y, w, h, collected in snap.items:
        if not collected:
            pygame.draw.rect(surface, _ITEM_COLORS.get(name, COLOR_TEXT),
                             (x, y, w * 2, h * 2))
    for _name, x, y in snap.npcs:
        pygame.draw.rect(surface, COLOR_NPC, (x, y, 100, 100))

    dust = pygame.Surface((5, 5), pygame.SRCALPHA)
    for x, y, fade in snap.particles:
        dust.fill((*COLOR_DUST, int(fade * 255)))
        surface.blit(dust, (x, y))

    if snap.world is not None:
        app.draw_text(surface, f"Dreaming in: {snap.world.name}", 10, 10)
    app.draw_text(surface, "Hold Z to wake up", 10, 30)
    draw_wake_bar(surface, snap.wake_fraction)


def draw_maze(surface: pygame.Surface, maze: MazeView):
    s = maze.cell_size
    for cy, row in enumerate(maze.cells):
        for cx, cell in enumerate(row):
            if cell is Cell.WALL:
                pygame.draw.rect(surface, COLOR_WALL, (cx * s, cy * s, s, s))


def draw_player(surface: pygame.Surface, player: tuple[float, float, float]):
    x, y, size = player
    pygame.draw.rect(surface, COLOR_PLAYER, (x, y, size, size))


def draw_wake_bar(surface: pygame.Surface, fraction: float,
                  x: int = 10, y: int = 50, w: int = 200, h: int = 20):
    pygame.draw.rect(surface, (0, 0, 0), (x, y, w, h))
    pygame.draw.rect(surface, (0, 255, 0), (x, y, int(w * fraction), h))


# ── Overlays ────────────────────────────────────────────────────────

def draw_panel(surface: pygame.Surface, app: App,
               rect: tuple[int, int, int, int], lines: list[str]):
    x, y, w, h = rect
    panel = pygame.Surface((w, h), pygame.SRCALPHA)
    panel.fill((0, 0, 0, 200))
    surface.blit(panel, (x, y))
    for i, line in enumerate(lines):
        app.draw_text(surface, line, x + 20, y + 20 + i * 22)


def draw_dialogue(surface: pygame.Surface, app: App, d: DialogueView):
    draw_panel(surface, app, (50, 400, 700, 150), [])
    app.draw_text(surface, f"{d.speaker}:", 60, 410)
    app.draw_text(surface, d.text, 60, 440)
    for i, label in enumerate(d.labels):
        selected = i == d.selected_index
        color = COLOR_HIGHLIGHT if selected else COLOR_TEXT
        marker = ">" if selected else " "
        app.draw_text(surface, f"{marker} {label}", 80, 475 + i * 24, color)


def draw_inventory(surface: pygame.Surface, app: App, items: tuple[str, ...]):
    draw_panel(surface, app, (100, 100, 600, 400), [])
    app.draw_text(surface, "INVENTORY", 320, 120, COLOR_TEXT, app.font_lg)
    for i, name in enumerate(items):
        app.draw_text(surface, name, 120, 160 + i * 30)


def draw_fade(surface: pygame.Surface, alpha: float):
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((*COLOR_FADE, int(alpha * 255)))
    surface.blit(overlay, (0, 0))


def draw_dev_log(surface: pygame.Surface, app: App, entries: list[dict]):
    y = surface.get_height() - 16 * (len(entries) + 1)
    for e in entries:
        app.draw_text_bg(surface, f"{e['t']:7.2f} [{e['cat']}] {e['msg']}",
                         8, y, (180, 255, 200), font=app.font_sm)
        y += 16
