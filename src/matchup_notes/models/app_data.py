"""Root document persisted by the blob store."""

from dataclasses import dataclass, field

from matchup_notes.models.match import MatchRecord
from matchup_notes.models.matchup import Matchup, utc_now

SCHEMA_VERSION = "1.0"


@dataclass
class Metadata:
    last_updated: str = field(default_factory=lambda: utc_now().isoformat())
    version: str = SCHEMA_VERSION


@dataclass
class AppData:
    """All matchups and matches, keyed by id."""

    matchups: dict[str, Matchup] = field(default_factory=dict)
    matches: dict[str, MatchRecord] = field(default_factory=dict)
    metadata: Metadata = field(default_factory=Metadata)

    def to_dict(self) -> dict:
        return {
            "matchups": {key: m.to_dict() for key, m in self.matchups.items()},
            "matches": {key: m.to_dict() for key, m in self.matches.items()},
            "metadata": {
                "last_updated": self.metadata.last_updated,
                "version": self.metadata.version,
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppData":
        meta = data.get("metadata") or {}
        return cls(
            matchups={
                key: Matchup.from_dict(value)
                for key, value in (data.get("matchups") or {}).items()
            },
            matches={
                key: MatchRecord.from_dict(value)
                for key, value in (data.get("matches") or {}).items()
            },
            metadata=Metadata(
                last_updated=meta.get("last_updated", utc_now().isoformat()),
                version=meta.get("version", SCHEMA_VERSION),
            ),
        )
