"""logic — Game rules, free of pygame except for input mapping.

Top-level modules
-----------------
maze            — perfect-maze generation + wall queries
transition      — timed fade between phases
dialogue        — the single active conversation + built-in lines
interaction     — per-frame intents from geometry and key presses
menu            — start-menu cursor
dream_worlds    — dream theme catalog
particles       — dust trail
input_manager   — pygame key events → action names
"""
