"""scenes — pygame scenes hosted by ``core.app.App``."""
