"""Entry point kept minimal by delegating to Engine.

    python src/main.py [settings.json]

An optional JSON file overrides any subset of the game tunables.
"""

import sys

from config import LOG_LEVEL
from core.logging_config import setup_logging
from core.settings import GameSettings
from core.engine import Engine


def main(argv=None):  # small wrapper for clarity / debuggers
    args = sys.argv[1:] if argv is None else argv
    setup_logging(LOG_LEVEL)
    settings = GameSettings.from_json(args[0]) if args else GameSettings()
    Engine(settings).run()


if __name__ == "__main__":
    main()
