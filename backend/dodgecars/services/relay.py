import logging
from collections.abc import Mapping
from typing import Any, Optional

from dodgecars.models import Player, ScoreEntry
from .leaderboard import LeaderboardStore
from .registry import ConnectionRegistry

# Outbound event names
CURRENT_PLAYERS = 'currentPlayers'
NEW_PLAYER = 'newPlayer'
PLAYER_MOVED = 'playerMoved'
CAR_SPAWNED = 'carSpawned'
GAME_UPDATE = 'gameUpdate'
PLAYER_DISCONNECTED = 'playerDisconnected'
HIGH_SCORES_UPDATED = 'highScoresUpdated'


class EventRelay:
    """Decides who receives what for every inbound event.

    `transport` only needs a `send(event, payload, to)` method. Recipients
    are read from the registry and sends happen after its lock is
    released; one failing recipient never stops delivery to the rest.
    """

    def __init__(self, registry: ConnectionRegistry, leaderboard: LeaderboardStore, transport, logger=None):
        self.registry = registry
        self.leaderboard = leaderboard
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)

    # ---- connection lifecycle ----

    def connect(self, sid: str) -> Player:
        player = self.registry.connect(sid)
        snapshot = {pid: p.to_dict() for pid, p in self.registry.snapshot().items()}
        self._send(CURRENT_PLAYERS, snapshot, sid)
        self._fanout(NEW_PLAYER, player.to_dict(), exclude=sid)
        self.logger.info(f"[connect] sid={sid} players={len(snapshot)}")
        return player

    def disconnect(self, sid: str) -> Optional[Player]:
        player = self.registry.disconnect(sid)
        if player is None:
            self.logger.debug(f"[disconnect-skip] sid={sid} not registered")
            return None
        self._fanout(PLAYER_DISCONNECTED, sid)
        self.logger.info(f"[disconnect] sid={sid}")
        return player

    # ---- gameplay messages ----

    def player_moved(self, sid: str, data) -> Optional[Player]:
        if not isinstance(data, Mapping):
            self.logger.warning(f"[move-ignored] sid={sid} payload is not an object")
            return None
        player = self.registry.move(sid, data.get('x'), data.get('y'))
        if player is None:
            self.logger.debug(f"[move-skip] sid={sid} not registered")
            return None
        self._fanout(PLAYER_MOVED, player.to_dict(), exclude=sid)
        return player

    def car_spawned(self, sid: str, data: Any) -> None:
        self._fanout(CAR_SPAWNED, data, exclude=sid)

    def game_update(self, sid: str, data: Any) -> None:
        self._fanout(GAME_UPDATE, data)

    # ---- leaderboard ----

    def high_scores(self):
        return [e.to_dict() for e in self.leaderboard.list()]

    def submit_score(self, name, score) -> ScoreEntry:
        """Store a score and push the new table to every connection.

        Raises ScoreRejected without broadcasting when the data is invalid.
        """
        entry, table = self.leaderboard.submit_with_table(name, score)
        self._fanout(HIGH_SCORES_UPDATED, [e.to_dict() for e in table])
        self.logger.info(f"[highscore] name={entry.name!r} score={entry.score}")
        return entry

    # ---- delivery ----

    def _fanout(self, event: str, payload: Any, exclude: Optional[str] = None) -> int:
        """Send to every registered connection but `exclude`; returns how many sends succeeded."""
        recipients = [sid for sid in self.registry.ids() if sid != exclude]
        delivered = 0
        for sid in recipients:
            if self._send(event, payload, sid):
                delivered += 1
        return delivered

    def _send(self, event: str, payload: Any, sid: str) -> bool:
        try:
            self.transport.send(event, payload, to=sid)
        except Exception as exc:
            self.logger.warning(f"[fanout-fail] event={event} to={sid}: {exc}")
            return False
        return True
