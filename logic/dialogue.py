"""logic/dialogue.py — The single active conversation.

At most one dialogue is open at a time.  A dialogue is a line of text,
a speaker, and an optional list of choices; each choice carries a
``DialogueAction`` that the mode controller matches on when the player
confirms.  A dialogue with no choices is informational: confirming it
simply dismisses it.

    engine = DialogueEngine()
    engine.open(*bed_dialogue())
    engine.navigate(+1)
    action = engine.confirm()      # DialogueAction.CANCEL, engine closed

Opening while another dialogue is showing replaces it without warning.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from components.spatial import Npc


class DialogueAction(Enum):
    DISMISS = "dismiss"
    COMMIT_SLEEP = "commit_sleep"
    CANCEL = "cancel"


@dataclass(frozen=True)
class Choice:
    label: str
    action: DialogueAction


@dataclass
class Dialogue:
    text: str
    speaker: str
    choices: list[Choice] = field(default_factory=list)
    selected_index: int = 0
    active: bool = True

    @property
    def selected(self) -> Choice | None:
        if not self.choices:
            return None
        return self.choices[self.selected_index]


class DialogueEngine:
    """Owns the optional current ``Dialogue``."""

    def __init__(self):
        self.current: Dialogue | None = None

    @property
    def active(self) -> bool:
        return self.current is not None and self.current.active

    def open(self, text: str, speaker: str,
             choices: list[Choice] | None = None) -> Dialogue:
        self.current = Dialogue(text=text, speaker=speaker,
                                choices=list(choices or []))
        return self.current

    def navigate(self, direction: int) -> int | None:
        """Move the cursor by ``direction`` (±1), clamped to the choices."""
        d = self.current
        if d is None:
            return None
        if d.choices:
            last = len(d.choices) - 1
            d.selected_index = max(0, min(d.selected_index + direction, last))
        return d.selected_index

    def confirm(self) -> DialogueAction | None:
        """Close the dialogue and return what the player picked.

        ``DISMISS`` when there were no choices; ``None`` if nothing was
        open.
        """
        d = self.current
        if d is None:
            return None
        choice = d.selected
        d.active = False
        self.current = None
        return choice.action if choice is not None else DialogueAction.DISMISS

    def close(self) -> None:
        self.current = None


# ── Built-in conversations ──────────────────────────────────────────

def bed_dialogue() -> tuple[str, str, list[Choice]]:
    return (
        "The bed is so comfortable, I want to sleep here forever...",
        "Bed",
        [Choice("Lay down", DialogueAction.COMMIT_SLEEP),
         Choice("Cancel", DialogueAction.CANCEL)],
    )


def npc_dialogue(npc: Npc) -> tuple[str, str, list[Choice]]:
    return (f"Hello, I am {npc.name}", npc.name, [])
