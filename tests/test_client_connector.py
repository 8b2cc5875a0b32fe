"""Tests for the local client API connector."""
import base64
import json
from unittest.mock import MagicMock

import httpx
import pytest

from conftest import history_body, make_game
from matchup_notes.errors import ApiError, ClientNotRunningError, ParseError, RequestError
from matchup_notes.models.client import ClientCredentials, Connected, Disconnected
from matchup_notes.services.client_connector import ClientApiConnector

SUMMONER = {"displayName": "Faker", "puuid": "me-puuid", "summonerId": 1}


def make_source(port=54321, token="s3cr3t"):
    source = MagicMock()
    source.discover.return_value = ClientCredentials(port=port, token=token)
    return source


def make_connector(handler, source=None):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return ClientApiConnector(source or make_source(), http_client=client)


def client_api(routes, seen=None):
    """Mock transport handler serving fixed bodies per path."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        status, body = routes.get(request.url.path, (404, '{"message": "not found"}'))
        return httpx.Response(status, text=body)

    return handler


def test_connect_success():
    seen = []
    connector = make_connector(
        client_api({"/lol-summoner/v1/current-summoner": (200, json.dumps(SUMMONER))}, seen)
    )

    status = connector.connect()

    assert status.connected is True
    assert status.summoner_name == "Faker"
    assert connector.is_connected()
    assert isinstance(connector.state, Connected)
    assert connector.state.puuid == "me-puuid"

    request = seen[0]
    assert str(request.url) == "https://127.0.0.1:54321/lol-summoner/v1/current-summoner"
    expected = base64.b64encode(b"riot:s3cr3t").decode()
    assert request.headers["Authorization"] == f"Basic {expected}"


def test_connect_client_not_running():
    source = MagicMock()
    source.discover.side_effect = ClientNotRunningError()
    connector = make_connector(client_api({}), source=source)

    with pytest.raises(ClientNotRunningError):
        connector.connect()
    assert connector.is_connected() is False
    assert isinstance(connector.state, Disconnected)


def test_connect_api_error_discards_credentials():
    connector = make_connector(
        client_api({"/lol-summoner/v1/current-summoner": (500, "x" * 500)})
    )

    with pytest.raises(ApiError) as exc_info:
        connector.connect()

    assert exc_info.value.status_code == 500
    assert len(exc_info.value.body_excerpt) == 200
    assert connector.is_connected() is False
    with pytest.raises(ClientNotRunningError):
        connector.request("/anything")


def test_failed_reconnect_drops_previous_connection():
    routes = {"/lol-summoner/v1/current-summoner": (200, json.dumps(SUMMONER))}
    connector = make_connector(client_api(routes))
    connector.connect()

    routes["/lol-summoner/v1/current-summoner"] = (401, "unauthorized")
    with pytest.raises(ApiError):
        connector.connect()
    assert connector.is_connected() is False


def test_connect_malformed_summoner():
    connector = make_connector(
        client_api({"/lol-summoner/v1/current-summoner": (200, '{"summonerId": 1}')})
    )
    with pytest.raises(ParseError, match="Response"):
        connector.connect()
    assert connector.is_connected() is False


def test_connect_uses_riot_id_when_display_name_empty():
    summoner = {"displayName": "", "gameName": "Hide on bush", "tagLine": "KR1", "puuid": "p"}
    connector = make_connector(
        client_api({"/lol-summoner/v1/current-summoner": (200, json.dumps(summoner))})
    )
    assert connector.connect().summoner_name == "Hide on bush#KR1"


def test_network_failure_is_request_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    connector = make_connector(handler)
    with pytest.raises(RequestError):
        connector.connect()
    assert connector.is_connected() is False


def test_request_requires_connection():
    connector = make_connector(client_api({}))
    with pytest.raises(ClientNotRunningError):
        connector.request("/lol-summoner/v1/current-summoner")


def test_fetch_match_history():
    seen = []
    games = [make_game(game_id=1), make_game(game_id=2, puuid="someone-else")]
    connector = make_connector(
        client_api(
            {
                "/lol-summoner/v1/current-summoner": (200, json.dumps(SUMMONER)),
                "/lol-match-history/v1/products/lol/current-summoner/matches": (
                    200,
                    history_body(games),
                ),
            },
            seen,
        )
    )
    connector.connect()

    matches = connector.fetch_match_history(5)

    assert [m.game_id for m in matches] == [1]
    params = seen[-1].url.params
    assert params["begIndex"] == "0"
    assert params["endIndex"] == "5"


def test_fetch_match_history_requires_connection():
    connector = make_connector(client_api({}))
    with pytest.raises(ClientNotRunningError):
        connector.fetch_match_history(20)


def test_debug_endpoint_returns_raw_body():
    connector = make_connector(
        client_api(
            {
                "/lol-summoner/v1/current-summoner": (200, json.dumps(SUMMONER)),
                "/lol-gameflow/v1/gameflow-phase": (200, '"None"'),
            }
        )
    )
    connector.connect()
    assert connector.debug_endpoint("/lol-gameflow/v1/gameflow-phase") == '"None"'
