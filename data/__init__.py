"""data — Shipped configuration (``tuning.toml``), read by ``core.tuning``."""
