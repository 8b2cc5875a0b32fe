"""Parse the local client's match history response.

The history endpoint returns a loosely typed, nested document::

    {"games": {"games": [
        {"gameId": ..., "gameCreation": ..., "queueId": ...,
         "participantIdentities": [{"participantId": 1, "player": {"puuid": ...}}],
         "participants": [{"participantId": 1, "championId": ..., "teamId": 100,
                           "stats": {"win": true},
                           "timeline": {"role": "SOLO", "lane": "TOP"}}]}
    ]}}

Each game is parsed on its own. A malformed game is dropped without
failing the rest of the batch.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Iterator, Optional

from matchup_notes.errors import ParseError
from matchup_notes.models.client import GameParseError, GameResult, ParsedMatch
from matchup_notes.utils.champion_catalog import champion_name
from matchup_notes.utils.role_normalizer import normalize_role

logger = logging.getLogger(__name__)

UNKNOWN_POSITION = "NONE"
GAMES_PATH = ("games", "games")


class InvalidGameError(Exception):
    """A single game in the history cannot be used and is dropped."""


def _get_int(obj: Any, key: str) -> int:
    value = obj.get(key) if isinstance(obj, dict) else None
    # bool is an int subclass but never a valid id
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidGameError(f"missing or non-integer '{key}'")
    return value


def _get_list(obj: Any, key: str) -> list:
    value = obj.get(key) if isinstance(obj, dict) else None
    if not isinstance(value, list):
        raise InvalidGameError(f"missing or non-list '{key}'")
    return value


def _optional_int(obj: Any, key: str) -> Optional[int]:
    value = obj.get(key) if isinstance(obj, dict) else None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _timeline_field(participant: dict, key: str) -> Optional[str]:
    timeline = participant.get("timeline")
    if not isinstance(timeline, dict):
        return None
    value = timeline.get(key)
    return value if isinstance(value, str) else None


def _creation_time(game_creation: int) -> datetime:
    """Convert the ms epoch ``gameCreation`` to a UTC datetime."""
    try:
        return datetime.fromtimestamp(game_creation / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidGameError(f"'gameCreation' out of range: {game_creation}") from e


def locate_games(document: Any) -> list:
    """Descend ``games.games`` to the list of games."""
    node = document
    for key in GAMES_PATH:
        node = node.get(key) if isinstance(node, dict) else None
    if not isinstance(node, list):
        keys = sorted(document.keys()) if isinstance(document, dict) else []
        raise ParseError(f"Unexpected response structure. Keys: {keys}")
    return node


def find_participant_id(identities: list, puuid: str) -> int:
    """Participant number of the player with this puuid."""
    for identity in identities:
        if not isinstance(identity, dict):
            continue
        player = identity.get("player")
        if not isinstance(player, dict):
            raise InvalidGameError("participant identity without player")
        if player.get("puuid") == puuid:
            return _get_int(identity, "participantId")
    raise InvalidGameError("caller not among participants")


def find_enemy_champion(participants: list, my_team_id: int, my_lane: str) -> Optional[int]:
    """Champion id of the opposing laner.

    First participant on another team whose lane equals ``my_lane``. When the
    caller's lane is unknown, the first participant on another team. First
    match wins, so the result depends on participant order.
    """
    for participant in participants:
        if not isinstance(participant, dict):
            continue
        if _optional_int(participant, "teamId") == my_team_id:
            continue
        enemy_lane = _timeline_field(participant, "lane")
        if enemy_lane == my_lane or my_lane == UNKNOWN_POSITION:
            return _optional_int(participant, "championId")
    return None


def parse_game(game: Any, puuid: str) -> ParsedMatch:
    """Parse one game for the caller identified by ``puuid``.

    Raises:
        InvalidGameError: If a required field is absent, has the wrong type
            or holds an unusable value
    """
    game_id = _get_int(game, "gameId")
    game_creation = _get_int(game, "gameCreation")
    played_at = _creation_time(game_creation)
    queue_id = _get_int(game, "queueId")

    participants = _get_list(game, "participants")
    identities = _get_list(game, "participantIdentities")

    my_participant_id = find_participant_id(identities, puuid)
    me = next(
        (
            p
            for p in participants
            if isinstance(p, dict) and _optional_int(p, "participantId") == my_participant_id
        ),
        None,
    )
    if me is None:
        raise InvalidGameError(f"no participant record for participantId {my_participant_id}")

    my_champion_id = _get_int(me, "championId")
    my_team_id = _get_int(me, "teamId")
    stats = me.get("stats")
    win = stats.get("win") if isinstance(stats, dict) else None
    if not isinstance(win, bool):
        raise InvalidGameError("missing or non-boolean 'stats.win'")

    # Only an absent or non-string field is unknown; "" is a real lane value
    role = _timeline_field(me, "role")
    if role is None:
        role = UNKNOWN_POSITION
    lane = _timeline_field(me, "lane")
    if lane is None:
        lane = UNKNOWN_POSITION

    enemy_champion_id = find_enemy_champion(participants, my_team_id, lane)

    return ParsedMatch(
        game_id=game_id,
        game_creation=game_creation,
        played_at=played_at,
        queue_id=queue_id,
        my_champion_id=my_champion_id,
        my_champion_name=champion_name(my_champion_id),
        enemy_champion_id=enemy_champion_id,
        enemy_champion_name=(
            champion_name(enemy_champion_id) if enemy_champion_id is not None else None
        ),
        role=normalize_role(role, lane),
        lane=lane,
        win=win,
    )


def iter_game_results(games: Iterable[Any], puuid: str) -> Iterator[GameResult]:
    """Lazily parse games, yielding a ParsedMatch or a GameParseError per game."""
    for index, game in enumerate(games):
        try:
            yield parse_game(game, puuid)
        except InvalidGameError as e:
            yield GameParseError(index=index, reason=str(e))


def parse_match_history(raw: str, puuid: str) -> list[ParsedMatch]:
    """Parse a raw match history response into the caller's matches.

    Args:
        raw: Response body of the match history endpoint
        puuid: The caller's account id from the identity query

    Returns:
        Successfully parsed games, in response order

    Raises:
        ParseError: If the body is not JSON or has no games list
    """
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParseError(f"JSON parse error: {e}") from e

    games = locate_games(document)

    matches: list[ParsedMatch] = []
    for result in iter_game_results(games, puuid):
        if isinstance(result, GameParseError):
            logger.debug(f"Skipping game #{result.index}: {result.reason}")
            continue
        matches.append(result)

    logger.info(f"Parsed {len(matches)} of {len(games)} games from match history")
    return matches
