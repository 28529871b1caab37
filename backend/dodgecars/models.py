from dataclasses import dataclass, replace

DEFAULT_X = 250
DEFAULT_Y = 550


@dataclass
class Player:
    """Live state for one open connection. `id` is the connection's sid."""
    id: str
    x: float = DEFAULT_X
    y: float = DEFAULT_Y
    score: float = 0

    def copy(self):
        return replace(self)

    def to_dict(self):
        return {
            'id': self.id,
            'x': self.x,
            'y': self.y,
            'score': self.score,
        }


@dataclass(frozen=True)
class ScoreEntry:
    name: str
    score: float

    def to_dict(self):
        return {
            'name': self.name,
            'score': self.score,
        }
