"""High score persistence"""
import json
import logging
from pathlib import Path
from typing import Union

log = logging.getLogger(__name__)


class HighScoreStore:
    """Keeps a single high score in a small JSON file.

    Storage problems never reach the game: an unreadable file reads as 0 and
    a failed write is logged and dropped.
    """

    KEY = "high_score"

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> int:
        try:
            if not self.path.exists():
                return 0
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log.warning("could not read high score from %s: %s", self.path, exc)
            return 0
        value = data.get(self.KEY) if isinstance(data, dict) else None
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            log.warning("ignoring invalid high score in %s: %r", self.path, value)
            return 0
        return value

    def save(self, value: int) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({self.KEY: int(value)}), encoding="utf-8")
        except OSError as exc:
            log.warning("could not save high score to %s: %s", self.path, exc)
            return False
        return True
