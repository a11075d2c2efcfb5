"""
main.py — Bootstrap

1. Load tuning (data/tuning.toml)
2. Create the app window
3. Push the game scene
4. Run

    python main.py [seed]
"""

import sys

from core import tuning
from core.app import App
from scenes.game_scene import GameScene


def main(argv: list[str] | None = None):
    argv = sys.argv[1:] if argv is None else argv
    seed = int(argv[0]) if argv else None

    tuning.load()
    app = App(
        title=str(tuning.get("display", "title", "witherdream")),
        width=int(tuning.get("display", "width", 800)),
        height=int(tuning.get("display", "height", 600)),
        fps=int(tuning.get("display", "fps", 60)),
    )
    app.push_scene(GameScene(seed=seed))
    app.run()


if __name__ == "__main__":
    main()
