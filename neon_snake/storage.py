import json
import logging
import os

from .config import HIGH_SCORE_FILE, HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Keeps the best score in a small JSON file."""

    def __init__(self, path=HIGH_SCORE_FILE, key=HIGH_SCORE_KEY):
        self.path = path
        self.key = key

    def load(self):
        """Return the stored high score, or 0 if there is none or it is unreadable."""
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return max(0, int(data.get(self.key, 0)))
        except (OSError, ValueError, TypeError, AttributeError, OverflowError) as e:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, e)
            return 0

    def save(self, score):
        """Write score as the new high score; failures are logged, not raised."""
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({self.key: int(score)}, f)
        except OSError as e:
            logger.warning("Could not save high score to %s: %s", self.path, e)
