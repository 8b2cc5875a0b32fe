"""Imported match history models."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from matchup_notes.models.matchup import parse_timestamp, utc_now


class MatchResult(str, Enum):
    """Outcome of a game from the player's side."""

    WIN = "win"
    LOSS = "loss"


@dataclass
class MatchRecord:
    """One completed game. Notes and link are editable, nothing is versioned."""

    id: str
    my_champion: str
    enemy_champion: str
    role: str
    result: MatchResult
    game_id: Optional[str] = None  # Dedup key for imports
    date: datetime = field(default_factory=utc_now)
    notes: str = ""
    linked_matchup: Optional[str] = None

    @classmethod
    def new(
        cls,
        my_champion: str,
        enemy_champion: str,
        role: str,
        result: MatchResult,
        game_id: Optional[str] = None,
        date: Optional[datetime] = None,
    ) -> "MatchRecord":
        return cls(
            id=str(uuid.uuid4()),
            my_champion=my_champion,
            enemy_champion=enemy_champion,
            role=role,
            result=result,
            game_id=game_id,
            date=date or utc_now(),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "game_id": self.game_id,
            "date": self.date.isoformat(),
            "my_champion": self.my_champion,
            "enemy_champion": self.enemy_champion,
            "role": self.role,
            "result": self.result.value,
            "notes": self.notes,
            "linked_matchup": self.linked_matchup,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MatchRecord":
        return cls(
            id=data["id"],
            game_id=data.get("game_id"),
            date=parse_timestamp(data["date"]),
            my_champion=data["my_champion"],
            enemy_champion=data["enemy_champion"],
            role=data["role"],
            result=MatchResult(data["result"]),
            notes=data.get("notes", ""),
            linked_matchup=data.get("linked_matchup"),
        )


@dataclass
class MatchUpdate:
    """Partial update for a match. None means leave unchanged."""

    notes: Optional[str] = None
    linked_matchup: Optional[str] = None  # "" clears the link
