import math
import threading
from typing import Iterable, List, Tuple

from dodgecars.models import ScoreEntry

INVALID_SCORE_MESSAGE = 'Invalid high score data. Name must be string, score must be non-negative number.'


class ScoreRejected(ValueError):
    """Raised when a submission does not have a textual name and a non-negative score."""

    def __init__(self, message: str = INVALID_SCORE_MESSAGE):
        super().__init__(message)
        self.message = message


def _is_valid_score(score) -> bool:
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return False
    if isinstance(score, float) and not math.isfinite(score):
        return False
    return score >= 0


class LeaderboardStore:
    """Bounded top-N table kept sorted by score, highest first.

    Sorting is stable, so between equal scores the earlier submission
    keeps the higher rank.
    """

    def __init__(self, limit: int = 10, seed: Iterable = ()):
        if limit < 1:
            raise ValueError('limit must be at least 1')
        self.limit = limit
        self._entries: List[ScoreEntry] = []
        self._lock = threading.Lock()
        for item in seed:
            if isinstance(item, ScoreEntry):
                self.submit(item.name, item.score)
            else:
                self.submit(item['name'], item['score'])

    def __len__(self):
        with self._lock:
            return len(self._entries)

    def list(self) -> List[ScoreEntry]:
        with self._lock:
            return list(self._entries)

    def submit(self, name, score) -> ScoreEntry:
        """Append a score, re-sort and truncate to the top `limit` entries.

        Returns the new entry even when it ranked too low to be kept.
        """
        entry, _ = self.submit_with_table(name, score)
        return entry

    def submit_with_table(self, name, score) -> Tuple[ScoreEntry, List[ScoreEntry]]:
        """Like `submit`, also returning the table exactly as this submission left it."""
        if not isinstance(name, str) or not _is_valid_score(score):
            raise ScoreRejected()
        entry = ScoreEntry(name=name, score=score)
        with self._lock:
            entries = self._entries + [entry]
            entries.sort(key=lambda e: e.score, reverse=True)
            self._entries = entries[:self.limit]
            table = list(self._entries)
        return entry, table
