"""Business logic services."""

from matchup_notes.services.client_connector import ClientApiConnector
from matchup_notes.services.credential_source import (
    CredentialSource,
    LockfileSource,
    ProcessCommandLineSource,
    get_credential_source,
)
from matchup_notes.services.match_history_parser import (
    InvalidGameError,
    iter_game_results,
    parse_match_history,
)
from matchup_notes.services.matchup_store import MatchupStore

__all__ = [
    "ClientApiConnector",
    "CredentialSource",
    "LockfileSource",
    "ProcessCommandLineSource",
    "get_credential_source",
    "InvalidGameError",
    "iter_game_results",
    "parse_match_history",
    "MatchupStore",
]
