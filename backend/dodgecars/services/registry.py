import threading
from typing import Dict, List, Optional

from dodgecars.models import Player


class ConnectionRegistry:
    """Maps connection ids to the Player state of open connections.

    Every method takes the lock for its whole read-modify-write, so a
    connection is either fully registered or not visible at all.
    """

    def __init__(self):
        self._players: Dict[str, Player] = {}
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._players)

    def __contains__(self, sid):
        with self._lock:
            return sid in self._players

    def connect(self, sid: str) -> Player:
        with self._lock:
            if sid in self._players:
                raise ValueError(f'connection {sid} is already registered')
            player = Player(id=sid)
            self._players[sid] = player
            return player.copy()

    def move(self, sid: str, x, y) -> Optional[Player]:
        with self._lock:
            player = self._players.get(sid)
            if player is None:
                return None
            player.x = x
            player.y = y
            return player.copy()

    def disconnect(self, sid: str) -> Optional[Player]:
        with self._lock:
            return self._players.pop(sid, None)

    def snapshot(self) -> Dict[str, Player]:
        with self._lock:
            return {sid: p.copy() for sid, p in self._players.items()}

    def ids(self) -> List[str]:
        with self._lock:
            return list(self._players)
