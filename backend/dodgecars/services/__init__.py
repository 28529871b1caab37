"""Relay domain services: connection registry, leaderboard and fan-out.

This package holds the in-memory state and distribution rules. HTTP
routes and socket handlers call into it, keeping transport concerns
separated from what each client gets to see.
"""

from .leaderboard import LeaderboardStore, ScoreRejected
from .registry import ConnectionRegistry
from .relay import EventRelay

__all__ = ['ConnectionRegistry', 'EventRelay', 'LeaderboardStore', 'ScoreRejected']
