"""Data models for debates and their arguments."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .types import Side, Winner


@dataclass(frozen=True)
class Argument:
    """A single argument submitted to a debate."""

    side: Side
    text: str
    author_name: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class DebateStats:
    """Participation and scoring summary, recomputed on every read."""

    for_count: int = 0
    against_count: int = 0
    for_points: int = 0
    against_points: int = 0
    participant_count: int = 0
    winner: Winner = Winner.DRAW

    def to_dict(self) -> dict[str, int | str]:
        """Convert to a JSON-ready dictionary."""
        return {
            "for_count": self.for_count,
            "against_count": self.against_count,
            "for_points": self.for_points,
            "against_points": self.against_points,
            "participant_count": self.participant_count,
            "winner": self.winner.value,
        }


@dataclass(frozen=True)
class Debate:
    """A debate topic."""

    id: int
    title: str
    description: str
    created_by: int | None
    created_at: datetime
