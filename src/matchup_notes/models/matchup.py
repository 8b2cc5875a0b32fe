"""Versioned matchup notes models."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, treating naive values as UTC."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class MatchupVersion:
    """One immutable snapshot of a matchup's notes and build."""

    version: int  # 1-based, no gaps
    date: datetime
    notes: str = ""
    tags: tuple[str, ...] = ()
    runes: tuple[str, ...] = ()
    summoner_spells: tuple[str, ...] = ()
    items: tuple[str, ...] = ()

    def has_tag(self, tag: str) -> bool:
        """Case-insensitive tag membership."""
        wanted = tag.lower()
        return any(t.lower() == wanted for t in self.tags)

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "date": self.date.isoformat(),
            "notes": self.notes,
            "tags": list(self.tags),
            "runes": list(self.runes),
            "summoner_spells": list(self.summoner_spells),
            "items": list(self.items),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MatchupVersion":
        return cls(
            version=int(data["version"]),
            date=parse_timestamp(data["date"]),
            notes=data.get("notes", ""),
            tags=tuple(data.get("tags", [])),
            runes=tuple(data.get("runes", [])),
            summoner_spells=tuple(data.get("summoner_spells", [])),
            items=tuple(data.get("items", [])),
        )


@dataclass
class MatchupUpdate:
    """Content for a new matchup version."""

    notes: str
    tags: list[str] = field(default_factory=list)
    runes: list[str] = field(default_factory=list)
    summoner_spells: list[str] = field(default_factory=list)
    items: list[str] = field(default_factory=list)


@dataclass
class MatchupFilter:
    """Filter options for querying matchups. All present clauses must hold."""

    my_champion: Optional[str] = None
    enemy_champion: Optional[str] = None
    role: Optional[str] = None
    tags: Optional[list[str]] = None
    search: Optional[str] = None


@dataclass
class Matchup:
    """A tracked champion-vs-champion pairing with its notes history."""

    id: str
    my_champion: str
    enemy_champion: str
    role: str
    versions: list[MatchupVersion] = field(default_factory=list)
    current_version: int = 0

    @classmethod
    def new(cls, my_champion: str, enemy_champion: str, role: str) -> "Matchup":
        """Create a matchup seeded with an empty version 1."""
        return cls(
            id=str(uuid.uuid4()),
            my_champion=my_champion,
            enemy_champion=enemy_champion,
            role=role,
            versions=[MatchupVersion(version=1, date=utc_now())],
            current_version=1,
        )

    def add_version(self, update: MatchupUpdate) -> MatchupVersion:
        """Append a new version. Past versions are never modified."""
        version = MatchupVersion(
            version=len(self.versions) + 1,
            date=utc_now(),
            notes=update.notes,
            tags=tuple(update.tags),
            runes=tuple(update.runes),
            summoner_spells=tuple(update.summoner_spells),
            items=tuple(update.items),
        )
        self.versions.append(version)
        self.current_version = version.version
        return version

    def current(self) -> Optional[MatchupVersion]:
        """The current version, or None if the history is empty."""
        if self.current_version < 1 or self.current_version > len(self.versions):
            return None
        return self.versions[self.current_version - 1]

    def get_version(self, number: int) -> Optional[MatchupVersion]:
        if number < 1 or number > len(self.versions):
            return None
        return self.versions[number - 1]

    def matches_filter(self, matchup_filter: MatchupFilter) -> bool:
        """Check if this matchup satisfies every clause of the filter."""
        if matchup_filter.my_champion is not None:
            if self.my_champion.lower() != matchup_filter.my_champion.lower():
                return False

        if matchup_filter.enemy_champion is not None:
            if self.enemy_champion.lower() != matchup_filter.enemy_champion.lower():
                return False

        if matchup_filter.role is not None:
            if self.role.lower() != matchup_filter.role.lower():
                return False

        # Tags are checked against the current version only
        if matchup_filter.tags is not None:
            current = self.current()
            if current is None:
                return False
            if not all(current.has_tag(tag) for tag in matchup_filter.tags):
                return False

        if matchup_filter.search is not None:
            needle = matchup_filter.search.lower()
            current = self.current()
            notes_match = current is not None and needle in current.notes.lower()
            if (
                needle not in self.my_champion.lower()
                and needle not in self.enemy_champion.lower()
                and not notes_match
            ):
                return False

        return True

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "my_champion": self.my_champion,
            "enemy_champion": self.enemy_champion,
            "role": self.role,
            "versions": [v.to_dict() for v in self.versions],
            "current_version": self.current_version,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Matchup":
        return cls(
            id=data["id"],
            my_champion=data["my_champion"],
            enemy_champion=data["enemy_champion"],
            role=data["role"],
            versions=[MatchupVersion.from_dict(v) for v in data.get("versions", [])],
            current_version=int(data.get("current_version", 0)),
        )
