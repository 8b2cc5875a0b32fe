"""Local game client connection and match history models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union


@dataclass(frozen=True)
class ClientCredentials:
    """Port and auth token for the client's loopback API. Never persisted."""

    port: int
    token: str

    def __repr__(self) -> str:
        return f"ClientCredentials(port={self.port}, token='***')"


@dataclass(frozen=True)
class Disconnected:
    """No validated credentials."""


@dataclass(frozen=True)
class Connected:
    """Credentials verified by a successful identity query."""

    credentials: ClientCredentials
    puuid: str  # Stable per-account id used to find the caller in games
    summoner_name: str


ConnectionState = Union[Disconnected, Connected]


@dataclass
class ConnectionStatus:
    """Result of a connection attempt."""

    connected: bool
    summoner_name: Optional[str] = None


@dataclass
class ParsedMatch:
    """One game from the client's match history, normalized for the caller."""

    game_id: int
    game_creation: int  # ms since epoch
    played_at: datetime  # game_creation as a UTC datetime
    queue_id: int
    my_champion_id: int
    my_champion_name: str
    role: str  # Canonical: top/jungle/mid/adc/support or lowercased lane
    lane: str  # Raw lane as reported by the client
    win: bool
    enemy_champion_id: Optional[int] = None
    enemy_champion_name: Optional[str] = None


@dataclass
class GameParseError:
    """Why a single game in a history batch was dropped."""

    index: int
    reason: str


GameResult = Union[ParsedMatch, GameParseError]
