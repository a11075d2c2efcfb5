"""components.rpg — The player's inventory."""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class Inventory:
    """Ordered list of collected item names plus an open/closed flag.

    Collection order is display order.  There is no removal, capacity
    or de-duplication: callers guard against double pickup with
    ``Item.collected``.
    """
    items: list[str] = field(default_factory=list)
    is_open: bool = False

    def add(self, name: str) -> None:
        self.items.append(name)

    def toggle_open(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open

    def __len__(self) -> int:
        return len(self.items)
