"""components.dev_log — Structured session event log.

A ring buffer that records timestamped phase changes, transitions,
pickups and dialogue outcomes.  The debug overlay shows the tail of it
and tests query it to check that something happened exactly once.

Usage:
    log = controller.log
    log.record("mode", "AWAKE → ASLEEP", t=session.clock)

Each entry is a dict:
    {"t": float, "cat": str, "msg": str, "details": dict | None}
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class DevLog:
    """Ring buffer of session events."""

    entries: list[dict] = field(default_factory=list)
    max_entries: int = 200

    def record(self, cat: str, msg: str, *, t: float = 0.0,
               details: dict | None = None) -> None:
        self.entries.append({
            "t": t,
            "cat": cat,
            "msg": msg,
            "details": details,
        })
        if len(self.entries) > self.max_entries:
            self.entries = self.entries[-self.max_entries:]

    def recent(self, n: int = 8) -> list[dict]:
        """Return the *n* most recent entries (newest last)."""
        return self.entries[-n:]

    def for_cat(self, cat: str, n: int = 50) -> list[dict]:
        """Return the last *n* entries in a category."""
        return [e for e in self.entries if e["cat"] == cat][-n:]
