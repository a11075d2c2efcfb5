"""core/tuning.py — Data-driven tuning constants.

Every gameplay number lives in ``data/tuning.toml`` and is loaded once
at startup.  Any module reads a value with::

    from core.tuning import get
    cell = get("maze", "cell_size", 40.0)

The default passed at each call site must match the shipped file so the
simulation behaves identically with or without it (tests rely on this).

Hot-reload: call ``reload()`` to re-read the file.  In-game, press F5.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib                # pip install tomli


_data: dict = {}
_path: Path | None = None


def default_path() -> Path:
    """``data/tuning.toml`` relative to the project root."""
    return Path(__file__).resolve().parent.parent / "data" / "tuning.toml"


def load(path: str | Path | None = None) -> None:
    """Load (or reload) tuning values from *path* (default file if None)."""
    global _data, _path

    path = default_path() if path is None else Path(path)
    _path = path

    if not path.exists():
        print(f"[TUNING] {path} not found, using built-in defaults")
        _data = {}
        return

    with open(path, "rb") as f:
        _data = tomllib.load(f)

    print(f"[TUNING] Loaded {_count_leaves(_data)} values from {path}")


def reload() -> None:
    """Re-read the tuning file from disk."""
    load(_path)


def override(values: dict) -> None:
    """Replace the loaded table wholesale until the next ``load()``."""
    global _data
    _data = values


def get(section: str, key: str, default=None):
    """Read one value.

    *section* uses dot-notation for nested tables, so
    ``get("items.knife", "w", 20.0)`` reads ``[items.knife] w``.
    """
    node = _walk(section)
    if isinstance(node, dict):
        return node.get(key, default)
    return default


def section(section_path: str) -> dict:
    """Return an entire table (shallow copy), or an empty dict."""
    node = _walk(section_path)
    if isinstance(node, dict):
        return dict(node)
    return {}


def _walk(section_path: str):
    node = _data
    for part in section_path.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
        if node is None:
            return None
    return node


def _count_leaves(d: dict, _n: int = 0) -> int:
    for v in d.values():
        if isinstance(v, dict):
            _n = _count_leaves(v, _n)
        else:
            _n += 1
    return _n
