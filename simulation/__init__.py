"""simulation — The session aggregate and the mode controller.

Submodules
----------
session         Phase, Session, Snapshot — all mutable state in one place
mode_controller ModeController — ``advance(dt, inputs)`` once per frame
"""
