"""Data models for Matchup Notes."""

from matchup_notes.models.app_data import AppData, Metadata
from matchup_notes.models.client import (
    ClientCredentials,
    Connected,
    ConnectionState,
    ConnectionStatus,
    Disconnected,
    GameParseError,
    GameResult,
    ParsedMatch,
)
from matchup_notes.models.match import MatchRecord, MatchResult, MatchUpdate
from matchup_notes.models.matchup import (
    Matchup,
    MatchupFilter,
    MatchupUpdate,
    MatchupVersion,
)

__all__ = [
    "AppData",
    "Metadata",
    "ClientCredentials",
    "Connected",
    "ConnectionState",
    "ConnectionStatus",
    "Disconnected",
    "GameParseError",
    "GameResult",
    "ParsedMatch",
    "MatchRecord",
    "MatchResult",
    "MatchUpdate",
    "Matchup",
    "MatchupFilter",
    "MatchupUpdate",
    "MatchupVersion",
]
