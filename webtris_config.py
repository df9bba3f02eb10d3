
from pathlib import Path

CONFIG = {
    "CELL_SIZE": 20,
    "FPS": 60,
    "DROP_INTERVAL_MS": 1000,
    "SEED": None,
    "HIGH_SCORE_PATH": Path.home() / ".webtris" / "highscore.json",
    "LOG_LEVEL": "INFO",
}
