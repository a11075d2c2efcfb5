"""core package initialization.

Engine-level pieces with no game rules in them: the pygame shell,
the scene interface, tuning, events, geometry helpers, constants and
the random-source protocol.
"""

__all__ = ["app", "scene", "tuning", "events", "collision", "constants", "rng"]
