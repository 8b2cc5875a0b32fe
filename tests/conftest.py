"""Shared fixtures."""
import json

import pytest

from matchup_notes.repositories.blob_store import JsonBlobStore
from matchup_notes.services.matchup_store import MatchupStore


@pytest.fixture
def blob_store(tmp_path):
    return JsonBlobStore(tmp_path / "data")


@pytest.fixture
def store(blob_store):
    return MatchupStore(blob_store)


def make_game(
    game_id=1001,
    my_champion_id=122,
    my_lane="TOP",
    my_role="SOLO",
    win=True,
    puuid="me-puuid",
    others=None,
):
    """Build a match history game as the local client returns it.

    ``others`` is a list of (championId, teamId, lane) for the remaining
    participants, in order.
    """
    others = others if others is not None else [(86, 200, "TOP"), (103, 200, "MIDDLE")]
    participants = [
        {
            "participantId": 1,
            "championId": my_champion_id,
            "teamId": 100,
            "stats": {"win": win},
            "timeline": {"role": my_role, "lane": my_lane},
        }
    ]
    identities = [{"participantId": 1, "player": {"puuid": puuid, "gameName": "Me"}}]
    for offset, (champion, team, lane) in enumerate(others, start=2):
        participant = {
            "participantId": offset,
            "championId": champion,
            "teamId": team,
            "stats": {"win": not win},
        }
        if lane is not None:
            participant["timeline"] = {"role": "SOLO", "lane": lane}
        participants.append(participant)
        identities.append({"participantId": offset, "player": {"puuid": f"other-{offset}"}})

    return {
        "gameId": game_id,
        "gameCreation": 1_700_000_000_000 + game_id,
        "queueId": 420,
        "participants": participants,
        "participantIdentities": identities,
    }


def history_body(games):
    return json.dumps({"accountId": 1, "games": {"gameCount": len(games), "games": games}})
