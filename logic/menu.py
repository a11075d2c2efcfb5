"""logic/menu.py — Start-menu cursor.

Three entries, wrapping in both directions (up from Start lands on
Credits).  Confirming is handled by the mode controller, which maps the
selected option to a phase.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class MenuOption(Enum):
    START = "Start"
    SETTINGS = "Settings"
    CREDITS = "Credits"


OPTIONS: tuple[MenuOption, ...] = (
    MenuOption.START, MenuOption.SETTINGS, MenuOption.CREDITS,
)


@dataclass
class StartMenu:
    index: int = 0

    @property
    def selected(self) -> MenuOption:
        return OPTIONS[self.index]

    def move(self, delta: int) -> MenuOption:
        self.index = (self.index + delta) % len(OPTIONS)
        return self.selected
