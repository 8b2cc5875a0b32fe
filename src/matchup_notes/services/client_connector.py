"""Connector for the local game client's loopback HTTPS API."""

import json
import logging
import threading
from typing import Optional

import httpx

from matchup_notes.errors import ApiError, ClientNotRunningError, ParseError, RequestError
from matchup_notes.models.client import (
    Connected,
    ConnectionState,
    ConnectionStatus,
    Disconnected,
    ParsedMatch,
)
from matchup_notes.services.credential_source import CredentialSource
from matchup_notes.services.match_history_parser import parse_match_history

logger = logging.getLogger(__name__)

CURRENT_SUMMONER_ENDPOINT = "/lol-summoner/v1/current-summoner"
MATCH_HISTORY_ENDPOINT = "/lol-match-history/v1/products/lol/current-summoner/matches"
RESPONSE_EXCERPT_LIMIT = 200


class ClientApiConnector:
    """Authenticated access to the local client API.

    State is either ``Disconnected`` or ``Connected``. ``connect()`` only
    moves to ``Connected`` after a successful identity query; any failure
    leaves the connector ``Disconnected``.
    """

    def __init__(
        self,
        credential_source: CredentialSource,
        username: str = "riot",
        timeout: float = 10.0,
        http_client: Optional[httpx.Client] = None,
    ):
        """Initialize the connector.

        Args:
            credential_source: Platform-specific credential discovery
            username: Fixed Basic auth username of the client API
            timeout: Per-request timeout in seconds
            http_client: Optional pre-built client (tests). By default the
                         client trusts the local API's self-signed certificate.
        """
        self.credential_source = credential_source
        self.username = username
        # The client serves an ephemeral self-signed certificate on 127.0.0.1
        self._http = http_client or httpx.Client(verify=False, timeout=timeout)
        self._state: ConnectionState = Disconnected()
        self._lock = threading.Lock()

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def lock(self) -> threading.Lock:
        """Serializes commands that use this connector."""
        return self._lock

    def is_connected(self) -> bool:
        return isinstance(self._state, Connected)

    def connect(self) -> ConnectionStatus:
        """Discover credentials and verify them with an identity query.

        Raises:
            ClientNotRunningError: If the client is not running
            ParseError: If credentials or the identity response are malformed
            RequestError: If the client cannot be reached
            ApiError: If the identity query returns a non-success status
        """
        self._state = Disconnected()
        credentials = self.credential_source.discover()

        try:
            body = self._get(credentials.port, credentials.token, CURRENT_SUMMONER_ENDPOINT)
            puuid, summoner_name = self._parse_summoner(body)
        except Exception as e:
            logger.warning(f"Client connection failed on port {credentials.port}: {e}")
            raise

        self._state = Connected(
            credentials=credentials,
            puuid=puuid,
            summoner_name=summoner_name,
        )
        logger.info(f"Connected to local client as {summoner_name}")
        return ConnectionStatus(connected=True, summoner_name=summoner_name)

    def request(self, endpoint: str) -> str:
        """GET an endpoint of the client API and return the raw body.

        Raises:
            ClientNotRunningError: If not connected
            RequestError: If the request fails at the network level
            ApiError: If the response status is not 2xx
        """
        state = self._state
        if not isinstance(state, Connected):
            raise ClientNotRunningError()
        return self._get(state.credentials.port, state.credentials.token, endpoint)

    def fetch_match_history(self, count: int) -> list[ParsedMatch]:
        """Fetch and parse the caller's most recent ``count`` games."""
        state = self._state
        if not isinstance(state, Connected):
            raise ClientNotRunningError()
        raw = self.request(f"{MATCH_HISTORY_ENDPOINT}?begIndex=0&endIndex={count}")
        return parse_match_history(raw, state.puuid)

    def debug_endpoint(self, endpoint: str) -> str:
        """Raw response of any endpoint, for diagnosing response shapes."""
        return self.request(endpoint)

    def close(self) -> None:
        """Close the HTTP client."""
        self._http.close()

    def _get(self, port: int, token: str, endpoint: str) -> str:
        url = f"https://127.0.0.1:{port}{endpoint}"
        try:
            response = self._http.get(url, auth=(self.username, token))
        except httpx.HTTPError as e:
            raise RequestError(str(e)) from e

        if not response.is_success:
            raise ApiError(response.status_code, response.text)
        return response.text

    @staticmethod
    def _parse_summoner(body: str) -> tuple[str, str]:
        """Extract (puuid, display name) from the identity response."""
        excerpt = body[:RESPONSE_EXCERPT_LIMIT]
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise ParseError(f"Failed to parse summoner: {e} - Response: {excerpt}") from e

        if not isinstance(data, dict):
            raise ParseError(f"Failed to parse summoner: not an object - Response: {excerpt}")

        puuid = data.get("puuid")
        display_name = data.get("displayName")
        if not isinstance(puuid, str) or not isinstance(display_name, str):
            raise ParseError(
                f"Failed to parse summoner: missing displayName or puuid - Response: {excerpt}"
            )

        # Newer clients leave displayName empty in favor of Riot IDs
        if not display_name and data.get("gameName"):
            display_name = f"{data['gameName']}#{data.get('tagLine', '')}".rstrip("#")

        return puuid, display_name
