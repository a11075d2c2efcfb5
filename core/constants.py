"""core/constants.py — Shared constants used across the codebase.

Centralises the fixed action vocabulary and the palette so there's
exactly one place to change them.

Unit System
-----------
All gameplay distances are **world units**.  The waking room and the
dream maze share one coordinate space, 800×600 units, drawn 1:1 as
pixels.  Positions are top-left corners unless a name says otherwise.

    Distance / position     u       (world units)
    Speed                   u/s
    Time                    s       (real seconds, from the frame clock)

Tunable numbers (speeds, radii, maze size, timings) are NOT here; they
live in ``data/tuning.toml`` and are read through ``core.tuning``.
"""

# ── Input actions ───────────────────────────────────────────────────
# The simulation only ever sees these names; physical keys are bound
# in the [keybinds] table.
ACTION_UP        = "up"
ACTION_DOWN      = "down"
ACTION_LEFT      = "left"
ACTION_RIGHT     = "right"
ACTION_INTERACT  = "interact"
ACTION_INVENTORY = "inventory"
ACTION_CONFIRM   = "confirm"
ACTION_MENU_UP   = "menu_up"
ACTION_MENU_DOWN = "menu_down"
ACTION_CANCEL    = "cancel"

ACTIONS = (
    ACTION_UP, ACTION_DOWN, ACTION_LEFT, ACTION_RIGHT,
    ACTION_INTERACT, ACTION_INVENTORY, ACTION_CONFIRM,
    ACTION_MENU_UP, ACTION_MENU_DOWN, ACTION_CANCEL,
)

# ── Timing ──────────────────────────────────────────────────────────
# Slack when comparing accumulated float dt against a duration.
TIME_EPSILON = 1e-9


# ── Render palette ──────────────────────────────────────────────────
COLOR_MENU_BG   = (0, 0, 0)
COLOR_AWAKE_BG  = (200, 200, 255)
COLOR_ASLEEP_BG = (0, 0, 0)
COLOR_WALL      = (0, 0, 0)
COLOR_BED       = (139, 69, 19)
COLOR_BICYCLE   = (255, 0, 0)
COLOR_KNIFE     = (128, 128, 128)
COLOR_NPC       = (0, 255, 0)
COLOR_PLAYER    = (255, 255, 255)
COLOR_DUST      = (139, 69, 19)
COLOR_HIGHLIGHT = (255, 255, 0)
COLOR_TEXT      = (255, 255, 255)
COLOR_FADE      = (255, 255, 255)
