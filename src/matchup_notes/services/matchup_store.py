"""Matchup and match operations over the persisted document."""

import logging
import threading
from typing import Iterable, Optional

from matchup_notes.errors import NotFoundError
from matchup_notes.models.match import MatchRecord, MatchResult, MatchUpdate
from matchup_notes.models.matchup import (
    Matchup,
    MatchupFilter,
    MatchupUpdate,
    MatchupVersion,
)
from matchup_notes.models.client import ParsedMatch
from matchup_notes.repositories.blob_store import JsonBlobStore

logger = logging.getLogger(__name__)

UNKNOWN_ENEMY = "Unknown"


class MatchupStore:
    """Domain operations on matchups and matches.

    Every operation loads the whole document, changes it and saves it back.
    A single lock serializes operations so concurrent commands cannot
    overwrite each other's changes.
    """

    def __init__(self, blob_store: JsonBlobStore):
        self.blob_store = blob_store
        self._lock = threading.Lock()

    # ==================== Matchups ====================

    def create(self, my_champion: str, enemy_champion: str, role: str) -> Matchup:
        """Create a matchup seeded with an empty first version."""
        with self._lock:
            data = self.blob_store.load()
            matchup = Matchup.new(my_champion, enemy_champion, role)
            data.matchups[matchup.id] = matchup
            self.blob_store.save(data)

        logger.info(f"Created matchup {my_champion} vs {enemy_champion} ({role}): {matchup.id}")
        return matchup

    def get(self, matchup_id: str) -> Matchup:
        with self._lock:
            data = self.blob_store.load()
        matchup = data.matchups.get(matchup_id)
        if matchup is None:
            raise NotFoundError("Matchup", matchup_id)
        return matchup

    def get_version(self, matchup_id: str, number: int) -> MatchupVersion:
        """A specific historical version of a matchup."""
        version = self.get(matchup_id).get_version(number)
        if version is None:
            raise NotFoundError("Matchup version", f"{matchup_id}/{number}")
        return version

    def add_version(self, matchup_id: str, update: MatchupUpdate) -> Matchup:
        """Append a new version; the only way matchup content changes."""
        with self._lock:
            data = self.blob_store.load()
            matchup = data.matchups.get(matchup_id)
            if matchup is None:
                raise NotFoundError("Matchup", matchup_id)
            matchup.add_version(update)
            self.blob_store.save(data)

        logger.info(f"Matchup {matchup_id} now at version {matchup.current_version}")
        return matchup

    def delete(self, matchup_id: str) -> None:
        with self._lock:
            data = self.blob_store.load()
            if data.matchups.pop(matchup_id, None) is None:
                raise NotFoundError("Matchup", matchup_id)
            self.blob_store.save(data)

        logger.info(f"Deleted matchup {matchup_id}")

    def list_matchups(self, matchup_filter: Optional[MatchupFilter] = None) -> list[Matchup]:
        """All matchups satisfying the filter, by my champion then enemy."""
        with self._lock:
            data = self.blob_store.load()

        matchups: Iterable[Matchup] = data.matchups.values()
        if matchup_filter is not None:
            matchups = (m for m in matchups if m.matches_filter(matchup_filter))

        return sorted(
            matchups,
            key=lambda m: (m.my_champion.lower(), m.enemy_champion.lower()),
        )

    def search(self, query: str) -> list[Matchup]:
        """Matchups whose champions or current notes contain the query."""
        return self.list_matchups(MatchupFilter(search=query))

    # ==================== Matches ====================

    def list_matches(self) -> list[MatchRecord]:
        """All matches, newest first."""
        with self._lock:
            data = self.blob_store.load()
        return sorted(data.matches.values(), key=lambda m: m.date, reverse=True)

    def import_matches(self, parsed: Iterable[ParsedMatch]) -> list[MatchRecord]:
        """Store parsed games not already present (dedup by game id).

        Returns:
            Only the newly stored matches
        """
        with self._lock:
            data = self.blob_store.load()
            known_game_ids = {m.game_id for m in data.matches.values() if m.game_id is not None}

            imported: list[MatchRecord] = []
            for game in parsed:
                game_id = str(game.game_id)
                if game_id in known_game_ids:
                    continue

                record = MatchRecord.new(
                    my_champion=game.my_champion_name,
                    enemy_champion=game.enemy_champion_name or UNKNOWN_ENEMY,
                    role=game.role,
                    result=MatchResult.WIN if game.win else MatchResult.LOSS,
                    game_id=game_id,
                    date=game.played_at,
                )
                data.matches[record.id] = record
                known_game_ids.add(game_id)
                imported.append(record)

            self.blob_store.save(data)

        logger.info(f"Imported {len(imported)} new matches")
        return imported

    def update_match(self, match_id: str, update: MatchUpdate) -> MatchRecord:
        """Apply a partial update; an empty linked_matchup clears the link."""
        with self._lock:
            data = self.blob_store.load()
            record = data.matches.get(match_id)
            if record is None:
                raise NotFoundError("Match", match_id)

            if update.notes is not None:
                record.notes = update.notes
            if update.linked_matchup is not None:
                record.linked_matchup = update.linked_matchup or None

            self.blob_store.save(data)

        return record
